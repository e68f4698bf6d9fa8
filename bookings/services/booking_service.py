"""Booking service - all booking eligibility rules live here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

Every operation is a sequence of awaited store lookups followed by checks.
Nothing locks the room between the capacity check and the write, so two
concurrent bookings for the last free place can both succeed.
"""

import logging

from bookings.domain.errors import BadRequestError, CannotBookError, NotFoundError
from bookings.domain.models import Booking
from bookings.stores.interfaces import BookingStore, EnrollmentStore, RoomStore, TicketStore

logger = logging.getLogger(__name__)


class BookingService:
    """Service for hotel room booking operations."""

    def __init__(
        self,
        enrollments: EnrollmentStore,
        tickets: TicketStore,
        rooms: RoomStore,
        bookings: BookingStore,
    ) -> None:
        self._enrollments = enrollments
        self._tickets = tickets
        self._rooms = rooms
        self._bookings = bookings

    async def check_enrollment_ticket(self, user_id: int) -> None:
        """Ensure the user holds a paid, in-person ticket that includes hotel.

        Raises:
            CannotBookError: If the user has no enrollment, no ticket, or the
                ticket is reserved, remote or without hotel.
        """
        enrollment = await self._enrollments.find_with_address_by_user_id(user_id)
        if enrollment is None:
            logger.info("User %s cannot book: no enrollment", user_id)
            raise CannotBookError()

        ticket = await self._tickets.find_ticket_by_enrollment_id(enrollment.id)
        if ticket is None or not ticket.is_hotel_eligible:
            logger.info("User %s cannot book: ticket does not allow hotel", user_id)
            raise CannotBookError()

    async def check_valid_booking(self, room_id: int) -> None:
        """Ensure the room exists and still has a free place.

        Raises:
            NotFoundError: If the room does not exist.
            CannotBookError: If the room is at or over capacity.
        """
        room = await self._rooms.find_by_id(room_id)
        bookings = await self._bookings.find_by_room_id(room_id)

        if room is None:
            raise NotFoundError()
        if room.capacity.is_full(len(bookings)):
            logger.info(
                "Room %s is full (%d/%d)", room_id, len(bookings), room.capacity.value
            )
            raise CannotBookError()

    async def get_booking(self, user_id: int) -> Booking:
        """Return the user's booking together with its room.

        Raises:
            NotFoundError: If the user has no booking.
        """
        booking = await self._bookings.find_by_user_id(user_id)
        if booking is None:
            raise NotFoundError()

        return booking

    async def book_room(self, user_id: int, room_id: int) -> Booking:
        """Book a room for the user.

        Ticket eligibility is checked before room capacity.

        Raises:
            BadRequestError: If room_id is missing or zero.
            CannotBookError: If the ticket is not eligible or the room is full.
            NotFoundError: If the room does not exist.
        """
        if not room_id:
            raise BadRequestError()

        await self.check_enrollment_ticket(user_id)
        await self.check_valid_booking(room_id)

        booking = await self._bookings.create(room_id=room_id, user_id=user_id)
        logger.info("Booking %s created for user %s in room %s", booking.id, user_id, room_id)
        return booking

    async def change_booking_room(self, user_id: int, room_id: int) -> Booking:
        """Move the user's existing booking to another room.

        The occupancy of the target room includes the user's current booking
        when it is the same room.

        Raises:
            BadRequestError: If room_id is missing or zero.
            NotFoundError: If the target room does not exist.
            CannotBookError: If the target room is full or the user has no booking.
        """
        if not room_id:
            raise BadRequestError()

        await self.check_valid_booking(room_id)
        booking = await self._bookings.find_by_user_id(user_id)

        if booking is None or booking.user_id != user_id:
            logger.info("User %s cannot change booking: no booking found", user_id)
            raise CannotBookError()

        updated = await self._bookings.upsert_booking(
            booking_id=booking.id,
            room_id=room_id,
            user_id=user_id,
        )
        logger.info(
            "Booking %s moved from room %s to room %s", booking.id, booking.room_id, room_id
        )
        return updated
