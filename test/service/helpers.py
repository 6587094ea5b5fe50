"""Entity builders for tests"""

from datetime import date

from src.service.shared_kernel.domain.entity.booking_entity import Booking
from src.service.shared_kernel.domain.entity.commission_agent_entity import CommissionAgent


TEST_DAY = date(2025, 6, 1)
OTHER_DAY = date(2025, 6, 2)


def make_booking(
    *,
    id: str = 'booking-1',
    day: date = TEST_DAY,
    seats: list[int] | None = None,
    user_name: str = 'Alice',
    price: float | None = 25.0,
) -> Booking:
    """Stamped booking; ``price=None`` builds a legacy record without seat prices."""
    seats = seats if seats is not None else [1]
    return Booking(
        id=id,
        date=day,
        seats=seats,
        user_name=user_name,
        seat_prices=None if price is None else {seat: price for seat in seats},
    )


def make_agent(
    *,
    id: str = 'agent-1',
    name: str = 'John Doe',
    percentage: float = 5.0,
    applicable_date: date | None = None,
) -> CommissionAgent:
    return CommissionAgent(
        id=id, name=name, percentage=percentage, applicable_date=applicable_date
    )
