"""Domain Entities - Aggregates"""
import logging
from typing import List, Sequence, Tuple

from pydantic import BaseModel

from domain.exceptions import DuplicateClientError, DuplicateIDError, ReservationNotFoundError
from domain.value_objects import Client

logger = logging.getLogger(__name__)

DEFAULT_HOTEL_NAME = "RocíoBall"
BASE_PRICE_PER_CLIENT_NIGHT = 20.0
BREAKFAST_FACTOR = 1.25


class Reservation(BaseModel):
    """Reservation Entity, stamped and owned by HotelReservationManager"""

    # Identity
    unique_id: int
    hotel_name: str

    # Guests, in booking order
    clients: Tuple[Client, ...] = ()

    # Stay
    duration: int
    breakfast_option: bool = False

    class Config:
        frozen = True

    def client_names(self) -> List[str]:
        """Names of the booked clients in booking order"""
        return [client.name for client in self.clients]

    def has_client(self, name: str) -> bool:
        """Check if a client with this exact name is booked here"""
        return any(client.name == name for client in self.clients)


class HotelReservationManager:
    """Reservation ledger Aggregate Root for a single hotel.

    Owns the reservation list and the ID counter. Every mutation either fully
    succeeds or leaves both untouched. Not safe for concurrent callers: access
    to one instance must be serialized by whoever embeds it.
    """

    def __init__(self, hotel_name: str = DEFAULT_HOTEL_NAME):
        self._hotel_name = hotel_name
        self._reservations: List[Reservation] = []
        self._unique_id_counter = 1

    # ==================== PROPERTIES ====================
    @property
    def hotel_name(self) -> str:
        return self._hotel_name

    @property
    def unique_id_counter(self) -> int:
        """ID the next successful add will receive"""
        return self._unique_id_counter

    @property
    def all_reservations(self) -> List[Reservation]:
        """Copy of the current reservations in insertion order"""
        return list(self._reservations)

    # ==================== KEY METHODS ====================
    def add_reservation(
        self,
        clients: Sequence[Client],
        duration: int,
        breakfast_option: bool
    ) -> Reservation:
        """Add a new reservation with the next unique ID"""
        new_reservation = Reservation(
            unique_id=self._unique_id_counter,
            hotel_name=self._hotel_name,
            clients=tuple(clients),
            duration=duration,
            breakfast_option=breakfast_option
        )

        # Nothing is touched until the candidate passes both checks
        self._validate_reservation_uniqueness(new_reservation)

        self._reservations.append(new_reservation)
        self._unique_id_counter += 1

        logger.info(
            "Added reservation %s for %d client(s) at %s",
            new_reservation.unique_id, len(new_reservation.clients), self._hotel_name
        )
        return new_reservation

    def cancel_reservation(self, reservation_id: int) -> None:
        """Cancel an existing reservation by its ID"""
        for index, reservation in enumerate(self._reservations):
            if reservation.unique_id == reservation_id:
                del self._reservations[index]
                logger.info("Cancelled reservation %s", reservation_id)
                return

        logger.warning("Cannot cancel reservation %s: not found", reservation_id)
        raise ReservationNotFoundError(reservation_id)

    def calculate_reservation_price(self, reservation: Reservation) -> float:
        """Calculate price: clients x base price x nights x breakfast factor"""
        breakfast_factor = BREAKFAST_FACTOR if reservation.breakfast_option else 1.0
        price = len(reservation.clients) * BASE_PRICE_PER_CLIENT_NIGHT * reservation.duration * breakfast_factor
        logger.debug("Price for reservation %s: %s", reservation.unique_id, price)
        return price

    # ==================== PRIVATE VALIDATION METHODS ====================
    def _validate_reservation_uniqueness(self, new_reservation: Reservation) -> None:
        """Validate the candidate is unique by ID, then by client name"""
        if any(r.unique_id == new_reservation.unique_id for r in self._reservations):
            logger.warning("Rejected reservation: ID %s already in use", new_reservation.unique_id)
            raise DuplicateIDError(new_reservation.unique_id)

        for client in new_reservation.clients:
            if any(r.has_client(client.name) for r in self._reservations):
                logger.warning("Rejected reservation: client '%s' already booked", client.name)
                raise DuplicateClientError(client.name)
