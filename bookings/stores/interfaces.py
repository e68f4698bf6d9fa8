"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
A lookup that finds nothing returns None; callers handle both branches.
"""

from abc import ABC, abstractmethod

from bookings.domain import Booking, Enrollment, Room, Ticket


class EnrollmentStore(ABC):
    """Interface for enrollment lookups."""

    @abstractmethod
    async def find_with_address_by_user_id(self, user_id: int) -> Enrollment | None:
        """Return the user's enrollment with its addresses, or None."""
        ...


class TicketStore(ABC):
    """Interface for ticket lookups."""

    @abstractmethod
    async def find_ticket_by_enrollment_id(self, enrollment_id: int) -> Ticket | None:
        """Return the ticket (with its ticket type) of an enrollment, or None."""
        ...


class RoomStore(ABC):
    """Interface for room lookups."""

    @abstractmethod
    async def find_by_id(self, room_id: int) -> Room | None:
        """Return a room by ID, or None if not found."""
        ...


class BookingStore(ABC):
    """Interface for booking persistence operations."""

    @abstractmethod
    async def find_by_room_id(self, room_id: int) -> list[Booking]:
        """Return every booking that references the room."""
        ...

    @abstractmethod
    async def find_by_user_id(self, user_id: int) -> Booking | None:
        """Return the user's booking with its room, or None."""
        ...

    @abstractmethod
    async def create(self, room_id: int, user_id: int) -> Booking:
        """Persist a new booking."""
        ...

    @abstractmethod
    async def upsert_booking(self, booking_id: int, room_id: int, user_id: int) -> Booking:
        """Update the booking in place, creating it if the ID is unknown."""
        ...
