from datetime import date, datetime, timezone
from typing import Dict, List, Optional

import attrs

from src.service.shared_kernel.domain.entity.booking_entity import Booking
from src.service.shared_kernel.domain.entity.commission_agent_entity import CommissionAgent
from src.service.shared_kernel.domain.entity.daily_price_entity import DailyPrice
from src.service.shared_kernel.domain.value_object.calendar_day import to_day


@attrs.define(frozen=True)
class StoreSnapshot:
    """
    Read-only copy of everything in the external store at one point in time.

    Engine and aggregator functions take a snapshot as an argument and never
    mutate it; a newer snapshot replaces it as a whole.
    """

    bookings: List[Booking] = attrs.field(factory=list)
    daily_prices: List[DailyPrice] = attrs.field(factory=list)
    commission_agents: List[CommissionAgent] = attrs.field(factory=list)
    loaded_at: datetime = attrs.field(factory=lambda: datetime.now(timezone.utc))

    @property
    def price_table(self) -> Dict[date, float]:
        return {entry.date: entry.price for entry in self.daily_prices}

    def bookings_on(self, day: date) -> List[Booking]:
        target = to_day(day)
        return [booking for booking in self.bookings if booking.date == target]

    def find_booking(self, booking_id: str) -> Optional[Booking]:
        return next((b for b in self.bookings if b.id == booking_id), None)

    def find_agent(self, agent_id: str) -> Optional[CommissionAgent]:
        return next((a for a in self.commission_agents if a.id == agent_id), None)
