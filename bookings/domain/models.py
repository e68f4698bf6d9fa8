"""Domain models representing persisted state.

These are pure domain objects with no persistence rules.
Django ORM models are in bookings/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from bookings.domain.value_objects import Capacity, Money


class TicketStatus(Enum):
    """Payment state of a ticket."""

    RESERVED = "RESERVED"
    PAID = "PAID"


@dataclass(frozen=True)
class Address:
    """Domain representation of an enrollment Address."""

    id: int
    enrollment_id: int
    street: str
    number: str
    neighborhood: str
    city: str
    state: str
    postal_code: str
    detail: str | None = None


@dataclass(frozen=True)
class Enrollment:
    """Domain representation of a user's Enrollment."""

    id: int
    user_id: int
    name: str
    addresses: tuple[Address, ...] = ()


@dataclass(frozen=True)
class TicketType:
    """Domain representation of a TicketType."""

    id: int
    name: str
    price: Money
    is_remote: bool
    includes_hotel: bool


@dataclass(frozen=True)
class Ticket:
    """Domain representation of a Ticket."""

    id: int
    enrollment_id: int
    status: TicketStatus
    ticket_type: TicketType

    @property
    def is_hotel_eligible(self) -> bool:
        """A paid, in-person ticket that includes hotel."""
        return (
            self.status is not TicketStatus.RESERVED
            and not self.ticket_type.is_remote
            and self.ticket_type.includes_hotel
        )


@dataclass(frozen=True)
class Room:
    """Domain representation of a Room."""

    id: int
    name: str
    capacity: Capacity


@dataclass(frozen=True)
class Booking:
    """Domain representation of a Booking."""

    id: int
    user_id: int
    room_id: int
    created_at: datetime
    updated_at: datetime
    room: Room | None = None
