"""Domain Enums"""
from enum import Enum


class ReservationErrorKind(str, Enum):
    DUPLICATE_ID = "DUPLICATE_ID"
    DUPLICATE_CLIENT = "DUPLICATE_CLIENT"
    RESERVATION_NOT_FOUND = "RESERVATION_NOT_FOUND"
