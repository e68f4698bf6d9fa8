from bookings.stores.interfaces import BookingStore, EnrollmentStore, RoomStore, TicketStore

__all__ = [
    "BookingStore",
    "EnrollmentStore",
    "RoomStore",
    "TicketStore",
]
