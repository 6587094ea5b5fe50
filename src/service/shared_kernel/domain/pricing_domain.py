"""Per-day seat price resolution."""

from datetime import date
import math
from typing import Any, Mapping

from src.platform.exception.exceptions import InvalidPriceError
from src.service.shared_kernel.domain.entity.booking_entity import Booking
from src.service.shared_kernel.domain.value_object.calendar_day import to_day


def price_for_date(
    day: date, daily_prices: Mapping[date, float], default_price: float
) -> float:
    """Exact calendar-day lookup; ``default_price`` when the day has no override."""
    return daily_prices.get(to_day(day), default_price)


def validate_price(value: Any) -> float:
    """Accepts finite numbers >= 0, including numeric strings typed by an operator."""
    if isinstance(value, bool) or value is None:
        raise InvalidPriceError()
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError as e:
            raise InvalidPriceError() from e
    if not isinstance(value, int | float):
        raise InvalidPriceError()
    price = float(value)
    if not math.isfinite(price) or price < 0:
        raise InvalidPriceError()
    return price


def booking_value(booking: Booking, *, day_price: float) -> float:
    """
    Gross value of one booking.

    Stamped bookings sum their per-seat prices; legacy records without a price map
    fall back to seat count times the day's resolved price.
    """
    if booking.has_stamped_prices:
        return booking.stamped_total()
    return legacy_booking_value(booking, day_price=day_price)


def legacy_booking_value(booking: Booking, *, day_price: float) -> float:
    return booking.seat_count * day_price
