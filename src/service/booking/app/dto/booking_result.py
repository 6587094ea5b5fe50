from typing import Optional

import attrs

from src.service.shared_kernel.domain.entity.booking_entity import Booking
from src.service.shared_kernel.domain.enum.selection_mode import SeatSelectionMode


@attrs.define(frozen=True)
class CreateBookingResult:
    booking: Booking
    mode: SeatSelectionMode
    total_cost: float


@attrs.define(frozen=True)
class RemoveSeatResult:
    booking_id: str
    seat_number: int
    booking: Optional[Booking]  # None once the last seat is gone

    @property
    def booking_deleted(self) -> bool:
        return self.booking is None
