"""
Seat Assignment Domain

Pure seat availability and assignment rules. Every function takes the bookings
it reasons about as an argument (normally ``StoreSnapshot.bookings``) and never
touches the store.
"""

from datetime import date
import math
from typing import Any, Iterable, List, Optional, Set, Tuple

import attrs

from src.platform.exception.exceptions import (
    InsufficientCapacityError,
    InvalidQuantityError,
    MissingNameError,
    SeatConflictError,
)
from src.platform.logging.loguru_io import Logger
from src.service.shared_kernel.domain.entity.booking_entity import Booking
from src.service.shared_kernel.domain.enum.selection_mode import SeatSelectionMode
from src.service.shared_kernel.domain.value_object.calendar_day import to_day


def booked_seats(day: date, bookings: Iterable[Booking]) -> Set[int]:
    """Union of seat numbers across all bookings on ``day``, compared at day granularity"""
    target = to_day(day)
    seats: Set[int] = set()
    for booking in bookings:
        if to_day(booking.date) == target:
            seats.update(booking.seats)
    return seats


def available_seats(day: date, bookings: Iterable[Booking], total_seats: int) -> List[int]:
    """Seats in ``[1, total_seats]`` not booked on ``day``, ascending"""
    taken = booked_seats(day, bookings)
    return [seat for seat in range(1, total_seats + 1) if seat not in taken]


def require_booking_name(user_name: Optional[str]) -> str:
    name = user_name.strip() if isinstance(user_name, str) else ''
    if not name:
        raise MissingNameError()
    return name


def parse_quantity(value: Any) -> int:
    """
    Positive whole number, given as an int, an integral float or a numeric string.

    Raises:
        InvalidQuantityError: For zero, negatives, fractions, booleans and non-numeric input
    """
    if isinstance(value, bool) or value is None:
        raise InvalidQuantityError()
    if isinstance(value, str):
        text = value.strip()
        try:
            value = int(text)
        except ValueError:
            try:
                value = float(text)
            except ValueError as e:
                raise InvalidQuantityError() from e
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            raise InvalidQuantityError()
        value = int(value)
    if not isinstance(value, int) or value <= 0:
        raise InvalidQuantityError()
    return value


@attrs.define(frozen=True)
class SeatRequest:
    """
    One booking request.

    With ``seat_numbers`` it is a manual selection, otherwise ``quantity`` seats
    are auto-assigned. A manual request may carry a quantity too; it must then
    match the number of distinct seats named.
    """

    user_name: Optional[str]
    seat_numbers: Tuple[int, ...] = ()
    quantity: Any = None

    @property
    def mode(self) -> SeatSelectionMode:
        return SeatSelectionMode.MANUAL if self.seat_numbers else SeatSelectionMode.AUTO_ASSIGN

    @classmethod
    def manual(
        cls, *, user_name: Optional[str], seat_numbers: Iterable[int], quantity: Any = None
    ) -> 'SeatRequest':
        return cls(user_name=user_name, seat_numbers=tuple(seat_numbers), quantity=quantity)

    @classmethod
    def auto_assign(cls, *, user_name: Optional[str], quantity: Any) -> 'SeatRequest':
        return cls(user_name=user_name, quantity=quantity)


def _assign_manual(request: SeatRequest, free: List[int]) -> List[int]:
    wanted = sorted(set(request.seat_numbers))
    if request.quantity is not None and parse_quantity(request.quantity) != len(wanted):
        raise InvalidQuantityError(
            f'Quantity {request.quantity} does not match the {len(wanted)} selected seat(s)'
        )

    free_set = set(free)
    unavailable = [seat for seat in wanted if seat not in free_set]
    if unavailable:
        raise SeatConflictError(
            available_seats=[seat for seat in wanted if seat in free_set],
            unavailable_seats=unavailable,
        )
    return wanted


def _assign_auto(request: SeatRequest, free: List[int]) -> List[int]:
    quantity = parse_quantity(request.quantity)
    if quantity > len(free):
        raise InsufficientCapacityError(requested=quantity, available=len(free))
    return free[:quantity]


@Logger.io
def assign_seats(
    *,
    day: date,
    bookings: Iterable[Booking],
    request: SeatRequest,
    total_seats: int,
) -> List[int]:
    """
    Choose the seats for ``request`` against the current bookings of ``day``.

    The name is checked before any seat is considered. Manual selections are
    accepted whole or rejected with the still-available subset; nothing is
    substituted silently.

    Raises:
        MissingNameError: Blank or missing booking name
        InvalidQuantityError: Quantity not a positive whole number, or not matching
            the manual selection
        SeatConflictError: A manually selected seat is booked or out of range
        InsufficientCapacityError: Auto-assign quantity exceeds the free seats
    """
    require_booking_name(request.user_name)
    free = available_seats(day, bookings, total_seats)
    if request.mode is SeatSelectionMode.MANUAL:
        return _assign_manual(request, free)
    return _assign_auto(request, free)
