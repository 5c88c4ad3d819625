"""Domain Value Objects"""
from pydantic import BaseModel


class Client(BaseModel):
    """Value Object for a guest named on a reservation.

    The name is the identity key: two clients sharing a name are treated as the
    same person by the uniqueness check, whatever their age or height.
    """
    name: str
    age: int
    height: int

    class Config:
        frozen = True
