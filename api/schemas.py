"""API Schemas - Request and Response DTOs"""
from pydantic import BaseModel, Field
from typing import List

from domain.enums import ReservationErrorKind


# ============================================================================
# RESERVATION SCHEMAS
# ============================================================================

class ClientRequest(BaseModel):
    """Client request DTO"""
    name: str
    age: int
    height: int


class CreateReservationRequest(BaseModel):
    """Create reservation request DTO"""
    clients: List[ClientRequest] = []
    duration: int = Field(description="Number of nights")
    breakfast_option: bool = False


class QuoteRequest(BaseModel):
    """Price quote request DTO"""
    clients: List[ClientRequest] = []
    duration: int
    breakfast_option: bool = False


class ClientResponse(BaseModel):
    """Client response DTO"""
    name: str
    age: int
    height: int


class ReservationResponse(BaseModel):
    """Reservation response DTO"""
    unique_id: int
    hotel_name: str
    clients: List[ClientResponse]
    duration: int
    breakfast_option: bool
    price: float


class PriceResponse(BaseModel):
    """Price response DTO"""
    price: float


# ============================================================================
# ERROR SCHEMAS
# ============================================================================

class ErrorResponse(BaseModel):
    """Rejected operation response DTO"""
    kind: ReservationErrorKind
    message: str


class ErrorEnvelope(BaseModel):
    """Body of a rejected request, as raised through HTTPException"""
    detail: ErrorResponse
