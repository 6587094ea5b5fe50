from datetime import date

import pytest

from src.service.shared_kernel.domain.entity.daily_price_entity import DailyPrice
from src.service.shared_kernel.driven_adapter.state.store_record_codec import (
    decode_booking,
    decode_commission_agent,
    decode_daily_price,
    encode_booking,
    encode_commission_agent,
    encode_daily_price,
)
from test.service.helpers import make_agent, make_booking


@pytest.mark.unit
class TestBookingRecord:
    def test_seat_price_keys_are_stringified(self) -> None:
        record = encode_booking(make_booking(id='b1', seats=[3, 1], price=25.0))

        assert record == {
            'id': 'b1',
            'date': '2025-06-01',
            'seats': [1, 3],
            'userName': 'Alice',
            'seatPrices': {'1': 25.0, '3': 25.0},
        }

    def test_legacy_record_has_no_seat_prices(self) -> None:
        record = encode_booking(make_booking(price=None))

        assert 'seatPrices' not in record
        assert decode_booking(record).seat_prices is None

    def test_decode_accepts_iso_datetime_and_string_keys(self) -> None:
        booking = decode_booking(
            {
                'id': 'b1',
                'date': '2025-06-01T00:00:00.000Z',
                'seats': [5, 6],
                'userName': 'Bob',
                'seatPrices': {'5': 30, '6': 32.5},
            }
        )

        assert booking.date == date(2025, 6, 1)
        assert booking.seat_prices == {5: 30.0, 6: 32.5}


@pytest.mark.unit
class TestDailyPriceRecord:
    def test_key_is_calendar_day_and_value_bare_number(self) -> None:
        key, value = encode_daily_price(DailyPrice(date=date(2025, 6, 1), price=30.0))

        assert (key, value) == ('2025-06-01', 30.0)
        assert decode_daily_price('2025-06-01', '30') == DailyPrice(date(2025, 6, 1), 30.0)


@pytest.mark.unit
class TestCommissionAgentRecord:
    def test_global_agent_omits_applicable_date(self) -> None:
        record = encode_commission_agent(make_agent(id='a1', percentage=3.5))

        assert record == {'id': 'a1', 'name': 'John Doe', 'percentage': 3.5}
        assert decode_commission_agent(record).is_global

    def test_dated_agent(self) -> None:
        agent = decode_commission_agent(
            {'id': 'a2', 'name': 'Mike Ross', 'percentage': 10, 'applicableDate': '2025-06-01'}
        )

        assert agent.applicable_date == date(2025, 6, 1)
        assert agent.percentage == 10.0
