"""API Dependencies - ledger wiring"""
import os

from application.services import ReservationService
from domain.entities import DEFAULT_HOTEL_NAME, HotelReservationManager

# Configuration (one ledger per process, lost on restart)
HOTEL_NAME = os.getenv("HOTEL_NAME", DEFAULT_HOTEL_NAME)

_manager = HotelReservationManager(hotel_name=HOTEL_NAME)


def get_reservation_service() -> ReservationService:
    return ReservationService(_manager)
