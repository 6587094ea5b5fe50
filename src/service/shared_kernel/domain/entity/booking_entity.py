from datetime import date
from typing import Dict, List, Optional

import attrs

from src.platform.exception.exceptions import MissingNameError, NotFoundError
from src.platform.logging.loguru_io import Logger


@attrs.define
class Booking:
    """
    One customer's seats on one calendar day.

    ``seat_prices`` is the price stamped on each seat when it was booked. Records
    written before price stamping existed have ``seat_prices=None``; their value is
    derived from the day's price instead (see ``has_stamped_prices``).
    """

    id: str
    date: date
    seats: List[int]
    user_name: str
    seat_prices: Optional[Dict[int, float]] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        id: str,
        day: date,
        seats: List[int],
        user_name: str,
        seat_price: float,
    ) -> 'Booking':
        name = user_name.strip() if user_name else ''
        if not name:
            raise MissingNameError()
        return cls(
            id=id,
            date=day,
            seats=list(seats),
            user_name=name,
            seat_prices={seat: seat_price for seat in seats},
        )

    @property
    def has_stamped_prices(self) -> bool:
        return self.seat_prices is not None

    @property
    def seat_count(self) -> int:
        return len(self.seats)

    def stamped_total(self) -> float:
        return sum((self.seat_prices or {}).values())

    def price_of(self, seat_number: int, *, fallback_price: float) -> float:
        if self.seat_prices is not None and seat_number in self.seat_prices:
            return self.seat_prices[seat_number]
        return fallback_price

    def _require_seat(self, seat_number: int) -> None:
        if seat_number not in self.seats:
            raise NotFoundError(f'Seat {seat_number} is not part of booking {self.id}')

    @Logger.io
    def without_seat(self, seat_number: int) -> 'Booking':
        self._require_seat(seat_number)
        seat_prices = None
        if self.seat_prices is not None:
            seat_prices = {s: p for s, p in self.seat_prices.items() if s != seat_number}
        return attrs.evolve(
            self,
            seats=[s for s in self.seats if s != seat_number],
            seat_prices=seat_prices,
        )

    @Logger.io
    def with_seat_price(
        self, seat_number: int, new_price: float, *, fallback_price: float
    ) -> 'Booking':
        """
        Overwrite one seat's stamped price.

        A booking without stamped prices gets a full price map first, every other
        seat stamped at ``fallback_price``, so only the edited seat changes value.
        """
        self._require_seat(seat_number)
        seat_prices = (
            dict(self.seat_prices)
            if self.seat_prices is not None
            else {seat: fallback_price for seat in self.seats}
        )
        seat_prices[seat_number] = new_price
        return attrs.evolve(self, seat_prices=seat_prices)
