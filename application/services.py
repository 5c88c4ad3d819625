"""Application Services - Business use cases"""
import logging
from typing import List, Optional

from domain.entities import HotelReservationManager, Reservation
from domain.value_objects import Client

logger = logging.getLogger(__name__)


class ReservationService:
    """Service for Reservation business use cases"""

    def __init__(self, manager: HotelReservationManager):
        self.manager = manager

    @staticmethod
    def _build_clients(clients: List[dict]) -> List[Client]:
        """Create Client value objects from plain dicts"""
        return [Client(**client) for client in clients]

    def create_reservation(
        self,
        clients: List[dict],
        duration: int,
        breakfast_option: bool = False
    ) -> Reservation:
        """Book the given clients into a new reservation"""
        return self.manager.add_reservation(
            clients=self._build_clients(clients),
            duration=duration,
            breakfast_option=breakfast_option
        )

    def cancel_reservation(self, reservation_id: int) -> None:
        """Cancel reservation, raising ReservationNotFoundError when absent"""
        self.manager.cancel_reservation(reservation_id)

    def get_reservation(self, reservation_id: int) -> Optional[Reservation]:
        """Get reservation by ID"""
        for reservation in self.manager.all_reservations:
            if reservation.unique_id == reservation_id:
                return reservation
        return None

    def get_all_reservations(self) -> List[Reservation]:
        """Get all reservations"""
        return self.manager.all_reservations

    def find_reservation_by_client(self, name: str) -> Optional[Reservation]:
        """Find the reservation a client is booked on"""
        for reservation in self.manager.all_reservations:
            if reservation.has_client(name):
                return reservation
        return None

    def get_reservation_price(self, reservation_id: int) -> Optional[float]:
        """Get price of an active reservation"""
        reservation = self.get_reservation(reservation_id)
        if not reservation:
            return None
        return self.manager.calculate_reservation_price(reservation)

    def quote_price(
        self,
        clients: List[dict],
        duration: int,
        breakfast_option: bool = False
    ) -> float:
        """Price a stay without booking it"""
        quote = Reservation(
            unique_id=0,
            hotel_name=self.manager.hotel_name,
            clients=tuple(self._build_clients(clients)),
            duration=duration,
            breakfast_option=breakfast_option
        )
        price = self.manager.calculate_reservation_price(quote)
        logger.info("Quoted %s for %d client(s), %d night(s)", price, len(quote.clients), duration)
        return price
