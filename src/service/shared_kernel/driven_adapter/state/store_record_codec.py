"""
Store Record Codec

Converts entities to and from the persisted record shapes:

- ``bookings/{id}``: ``{id, date, seats, userName, seatPrices?}``; seatPrices keys
  are stringified seat numbers in storage and ints in memory
- ``dailyPrices/{YYYY-MM-DD}``: a bare number
- ``commissionAgents/{id}``: ``{id, name, percentage, applicableDate?}``
"""

from typing import Any

import orjson

from src.service.shared_kernel.domain.entity.booking_entity import Booking
from src.service.shared_kernel.domain.entity.commission_agent_entity import CommissionAgent
from src.service.shared_kernel.domain.entity.daily_price_entity import DailyPrice
from src.service.shared_kernel.domain.value_object.calendar_day import day_key, to_day


def encode_booking(booking: Booking) -> dict[str, Any]:
    record: dict[str, Any] = {
        'id': booking.id,
        'date': day_key(booking.date),
        'seats': sorted(booking.seats),
        'userName': booking.user_name,
    }
    if booking.seat_prices is not None:
        record['seatPrices'] = {str(seat): price for seat, price in booking.seat_prices.items()}
    return record


def decode_booking(record: dict[str, Any]) -> Booking:
    raw_prices = record.get('seatPrices')
    seat_prices = (
        {int(seat): float(price) for seat, price in raw_prices.items()}
        if raw_prices is not None
        else None
    )
    return Booking(
        id=str(record['id']),
        date=to_day(record['date']),
        seats=[int(seat) for seat in record.get('seats') or []],
        user_name=str(record.get('userName', '')),
        seat_prices=seat_prices,
    )


def encode_daily_price(daily_price: DailyPrice) -> tuple[str, float]:
    return day_key(daily_price.date), daily_price.price


def decode_daily_price(key: str, value: Any) -> DailyPrice:
    return DailyPrice(date=to_day(key), price=float(value))


def encode_commission_agent(agent: CommissionAgent) -> dict[str, Any]:
    record: dict[str, Any] = {
        'id': agent.id,
        'name': agent.name,
        'percentage': agent.percentage,
    }
    if agent.applicable_date is not None:
        record['applicableDate'] = day_key(agent.applicable_date)
    return record


def decode_commission_agent(record: dict[str, Any]) -> CommissionAgent:
    applicable_date = record.get('applicableDate')
    return CommissionAgent(
        id=str(record['id']),
        name=str(record['name']),
        percentage=float(record['percentage']),
        applicable_date=to_day(applicable_date) if applicable_date else None,
    )


def dumps(record: Any) -> str:
    return orjson.dumps(record).decode()


def loads(raw: str | bytes) -> Any:
    return orjson.loads(raw)
