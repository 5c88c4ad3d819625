"""Domain Exceptions - rejected ledger mutations"""
from domain.enums import ReservationErrorKind


class ReservationError(Exception):
    """Base exception for rejected reservation operations"""

    kind: ReservationErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DuplicateIDError(ReservationError):
    """Candidate reservation ID collides with an existing reservation"""

    kind = ReservationErrorKind.DUPLICATE_ID

    def __init__(self, reservation_id: int):
        super().__init__(f"Reservation ID {reservation_id} is already in use")
        self.reservation_id = reservation_id


class DuplicateClientError(ReservationError):
    """Candidate reservation names a client already booked elsewhere"""

    kind = ReservationErrorKind.DUPLICATE_CLIENT

    def __init__(self, client_name: str):
        super().__init__(f"Client '{client_name}' already has a reservation")
        self.client_name = client_name


class ReservationNotFoundError(ReservationError):
    """No reservation with the given ID"""

    kind = ReservationErrorKind.RESERVATION_NOT_FOUND

    def __init__(self, reservation_id: int):
        super().__init__(f"Reservation {reservation_id} not found")
        self.reservation_id = reservation_id
