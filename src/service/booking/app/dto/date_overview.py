from datetime import date
from typing import List

import attrs


@attrs.define(frozen=True)
class BookedSeatDetail:
    seat_number: int
    booking_id: str
    user_name: str
    price: float


@attrs.define(frozen=True)
class DateOverview:
    """Everything the booking view shows for one selected date"""

    date: date
    price: float
    default_price: float
    has_price_override: bool
    total_seats: int
    available_seats: List[int]
    booked_seats: List[BookedSeatDetail]
    estimated_profit: float

    @property
    def available_count(self) -> int:
        return len(self.available_seats)

    @property
    def booked_count(self) -> int:
        return len(self.booked_seats)


@attrs.define(frozen=True)
class CalendarDayStatus:
    date: date
    booked_count: int
    available_count: int

    @property
    def fully_booked(self) -> bool:
        return self.available_count <= 0

    @property
    def partially_booked(self) -> bool:
        return self.booked_count > 0 and not self.fully_booked
