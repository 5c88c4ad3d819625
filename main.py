import logging
import os

from fastapi import FastAPI, HTTPException, Depends
from typing import List, Optional

from api.schemas import (
    # Reservation
    CreateReservationRequest, QuoteRequest, ReservationResponse, ClientResponse, PriceResponse,
    # Errors
    ErrorEnvelope
)
from api.dependencies import HOTEL_NAME, get_reservation_service
from application.services import ReservationService
from domain.entities import Reservation
from domain.enums import ReservationErrorKind
from domain.exceptions import ReservationError, ReservationNotFoundError


def configure_logging(level: Optional[str] = None) -> str:
    """Configure root logging from LOG_LEVEL, accepting any case"""
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(level=level, format='%(asctime)s - %(levelname)s - %(message)s')
    return level

app = FastAPI(
    title="Hotel Reservation Ledger API",
    description=f"In-memory reservation ledger for hotel {HOTEL_NAME}",
    version="1.0.0"
)

# ============================================================================
# HEALTH & ENUM REFERENCE ENDPOINTS
# ============================================================================

@app.get("/api/health", tags=["Health"])
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "message": "API is running", "hotel_name": HOTEL_NAME}

@app.get("/api/enums/reservation-error-kind", tags=["Enum Reference"])
async def get_reservation_error_kinds():
    """Get all ReservationErrorKind enum values"""
    return {
        "values": [f"{item.name}" for item in ReservationErrorKind],
        "description": "Rejected operation kinds: DUPLICATE_ID, DUPLICATE_CLIENT, RESERVATION_NOT_FOUND"
    }

# ============================================================================
# RESERVATION ENDPOINTS
# ============================================================================

@app.post(
    "/api/reservations",
    response_model=ReservationResponse,
    status_code=201,
    responses={409: {"model": ErrorEnvelope}},
    tags=["Reservations"]
)
async def create_reservation(
    request: CreateReservationRequest,
    service: ReservationService = Depends(get_reservation_service)
):
    """Create new reservation"""
    try:
        reservation = service.create_reservation(
            clients=[client.model_dump() for client in request.clients],
            duration=request.duration,
            breakfast_option=request.breakfast_option
        )
        return _reservation_to_response(reservation, service)
    except ReservationError as e:
        raise HTTPException(status_code=409, detail=_error_detail(e))

@app.get("/api/reservations", response_model=List[ReservationResponse], tags=["Reservations"])
async def get_all_reservations(
    client: Optional[str] = None,
    service: ReservationService = Depends(get_reservation_service)
):
    """Get all reservations in booking order, or the one a client is booked on"""
    if client is not None:
        reservation = service.find_reservation_by_client(client)
        reservations = [reservation] if reservation else []
    else:
        reservations = service.get_all_reservations()
    return [_reservation_to_response(r, service) for r in reservations]

@app.post("/api/reservations/quote", response_model=PriceResponse, tags=["Reservations"])
async def quote_reservation_price(
    request: QuoteRequest,
    service: ReservationService = Depends(get_reservation_service)
):
    """Price a stay without booking it"""
    price = service.quote_price(
        clients=[client.model_dump() for client in request.clients],
        duration=request.duration,
        breakfast_option=request.breakfast_option
    )
    return {"price": price}

@app.get(
    "/api/reservations/{reservation_id}",
    response_model=ReservationResponse,
    responses={404: {"model": ErrorEnvelope}},
    tags=["Reservations"]
)
async def get_reservation(
    reservation_id: int,
    service: ReservationService = Depends(get_reservation_service)
):
    """Get reservation by ID"""
    reservation = service.get_reservation(reservation_id)
    if not reservation:
        raise HTTPException(status_code=404, detail=_error_detail(ReservationNotFoundError(reservation_id)))
    return _reservation_to_response(reservation, service)

@app.get(
    "/api/reservations/{reservation_id}/price",
    response_model=PriceResponse,
    responses={404: {"model": ErrorEnvelope}},
    tags=["Reservations"]
)
async def get_reservation_price(
    reservation_id: int,
    service: ReservationService = Depends(get_reservation_service)
):
    """Get price of an active reservation"""
    price = service.get_reservation_price(reservation_id)
    if price is None:
        raise HTTPException(status_code=404, detail=_error_detail(ReservationNotFoundError(reservation_id)))
    return {"price": price}

@app.delete(
    "/api/reservations/{reservation_id}",
    status_code=204,
    responses={404: {"model": ErrorEnvelope}},
    tags=["Reservations"]
)
async def cancel_reservation(
    reservation_id: int,
    service: ReservationService = Depends(get_reservation_service)
):
    """Cancel reservation"""
    try:
        service.cancel_reservation(reservation_id)
    except ReservationNotFoundError as e:
        raise HTTPException(status_code=404, detail=_error_detail(e))

# ============================================================================
# HELPERS
# ============================================================================

def _error_detail(error: ReservationError) -> dict:
    """Convert ReservationError to error body"""
    return {"kind": error.kind.value, "message": error.message}

def _reservation_to_response(reservation: Reservation, service: ReservationService) -> ReservationResponse:
    """Convert Reservation entity to ReservationResponse"""
    return ReservationResponse(
        unique_id=reservation.unique_id,
        hotel_name=reservation.hotel_name,
        clients=[
            ClientResponse(name=c.name, age=c.age, height=c.height)
            for c in reservation.clients
        ],
        duration=reservation.duration,
        breakfast_option=reservation.breakfast_option,
        price=service.manager.calculate_reservation_price(reservation)
    )


if __name__ == "__main__":
    import uvicorn
    log_level = configure_logging()
    uvicorn.run(app, host="0.0.0.0", port=8000, log_level=log_level.lower())
