from bookings.domain.models import (
    Address,
    Booking,
    Enrollment,
    Room,
    Ticket,
    TicketStatus,
    TicketType,
)
from bookings.domain.value_objects import Capacity, Money

__all__ = [
    "Address",
    "Booking",
    "Enrollment",
    "Room",
    "Ticket",
    "TicketStatus",
    "TicketType",
    "Money",
    "Capacity",
]
