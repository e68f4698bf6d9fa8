from bookings.services.booking_service import BookingService
from bookings.stores.django_store import (
    DjangoBookingStore,
    DjangoEnrollmentStore,
    DjangoRoomStore,
    DjangoTicketStore,
)


def build_booking_service() -> BookingService:
    """Return a BookingService wired to the Django ORM stores."""
    return BookingService(
        enrollments=DjangoEnrollmentStore(),
        tickets=DjangoTicketStore(),
        rooms=DjangoRoomStore(),
        bookings=DjangoBookingStore(),
    )


__all__ = ["BookingService", "build_booking_service"]
