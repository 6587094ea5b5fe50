"""Booking DTOs - Application Layer"""

from src.service.booking.app.dto.booking_result import CreateBookingResult, RemoveSeatResult
from src.service.booking.app.dto.date_overview import (
    BookedSeatDetail,
    CalendarDayStatus,
    DateOverview,
)

__all__ = [
    'BookedSeatDetail',
    'CalendarDayStatus',
    'CreateBookingResult',
    'DateOverview',
    'RemoveSeatResult',
]
