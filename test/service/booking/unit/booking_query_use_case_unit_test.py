from datetime import date

import pytest

from src.platform.exception.exceptions import NotFoundError
from src.service.booking.app.query.apply_selection_action_use_case import (
    ApplySelectionActionUseCase,
    SelectionAction,
)
from src.service.booking.app.query.get_booking_use_case import GetBookingUseCase
from src.service.booking.app.query.get_calendar_month_use_case import GetCalendarMonthUseCase
from src.service.booking.app.query.get_date_overview_use_case import GetDateOverviewUseCase
from src.service.booking.domain.seat_selection_state import SelectionState
from src.service.shared_kernel.domain.entity.daily_price_entity import DailyPrice
from src.service.shared_kernel.driven_adapter.memory.in_memory_store import (
    InMemoryBookingRepo,
    InMemoryDailyPriceRepo,
)
from src.service.shared_kernel.driven_adapter.state.store_snapshot_query_handler_impl import (
    StoreSnapshotQueryHandlerImpl,
)
from test.service.helpers import OTHER_DAY, TEST_DAY, make_booking


TOTAL_SEATS = 35


@pytest.mark.unit
class TestGetDateOverview:
    @pytest.mark.asyncio
    async def test_overview_with_override_and_legacy_booking(
        self,
        snapshot_handler: StoreSnapshotQueryHandlerImpl,
        booking_repo: InMemoryBookingRepo,
        daily_price_repo: InMemoryDailyPriceRepo,
    ) -> None:
        await daily_price_repo.upsert(daily_price=DailyPrice(date=TEST_DAY, price=30.0))
        await booking_repo.save(booking=make_booking(id='b1', seats=[2, 1], user_name='Alice'))
        await booking_repo.save(booking=make_booking(id='b2', seats=[5], price=None))
        await booking_repo.save(booking=make_booking(id='b3', day=OTHER_DAY, seats=[3]))
        use_case = GetDateOverviewUseCase(
            snapshot_handler=snapshot_handler, total_seats=TOTAL_SEATS, default_seat_price=25.0
        )

        overview = await use_case.get_overview(day=TEST_DAY)

        assert overview.price == 30.0
        assert overview.has_price_override
        assert overview.booked_count == 3
        assert overview.available_count == 32
        assert [d.seat_number for d in overview.booked_seats] == [1, 2, 5]
        assert overview.booked_seats[0].booking_id == 'b1'
        assert overview.booked_seats[0].price == 25.0
        assert overview.booked_seats[2].price == 30.0
        # stamped 2 x 25 plus legacy 1 x 30
        assert overview.estimated_profit == pytest.approx(80.0)

    @pytest.mark.asyncio
    async def test_empty_day_uses_default_price(
        self, snapshot_handler: StoreSnapshotQueryHandlerImpl
    ) -> None:
        use_case = GetDateOverviewUseCase(
            snapshot_handler=snapshot_handler, total_seats=TOTAL_SEATS, default_seat_price=25.0
        )

        overview = await use_case.get_overview(day=TEST_DAY)

        assert overview.price == 25.0
        assert not overview.has_price_override
        assert overview.available_seats == list(range(1, TOTAL_SEATS + 1))
        assert overview.estimated_profit == 0


@pytest.mark.unit
class TestGetCalendarMonth:
    @pytest.mark.asyncio
    async def test_partial_and_full_days(
        self,
        snapshot_handler: StoreSnapshotQueryHandlerImpl,
        booking_repo: InMemoryBookingRepo,
    ) -> None:
        await booking_repo.save(booking=make_booking(id='b1', seats=list(range(1, 36))))
        await booking_repo.save(booking=make_booking(id='b2', day=OTHER_DAY, seats=[1, 2]))
        await booking_repo.save(booking=make_booking(id='b3', day=date(2025, 7, 1), seats=[1]))
        use_case = GetCalendarMonthUseCase(
            snapshot_handler=snapshot_handler, total_seats=TOTAL_SEATS
        )

        days = await use_case.get_month(year=2025, month=6)

        assert [d.date for d in days] == [TEST_DAY, OTHER_DAY]
        assert days[0].fully_booked and not days[0].partially_booked
        assert days[1].partially_booked and days[1].available_count == 33


@pytest.mark.unit
class TestGetBooking:
    @pytest.mark.asyncio
    async def test_found_and_missing(
        self,
        snapshot_handler: StoreSnapshotQueryHandlerImpl,
        booking_repo: InMemoryBookingRepo,
    ) -> None:
        await booking_repo.save(booking=make_booking(id='b1'))
        use_case = GetBookingUseCase(snapshot_handler=snapshot_handler)

        assert (await use_case.get_booking(booking_id='b1')).user_name == 'Alice'
        with pytest.raises(NotFoundError):
            await use_case.get_booking(booking_id='b2')


@pytest.mark.unit
class TestApplySelectionAction:
    @pytest.mark.asyncio
    async def test_actions_use_current_availability(
        self,
        snapshot_handler: StoreSnapshotQueryHandlerImpl,
        booking_repo: InMemoryBookingRepo,
    ) -> None:
        await booking_repo.save(booking=make_booking(seats=list(range(1, 34))))
        use_case = ApplySelectionActionUseCase(
            snapshot_handler=snapshot_handler, total_seats=TOTAL_SEATS
        )

        toggled = await use_case.apply(
            day=TEST_DAY, state=SelectionState(), action=SelectionAction.TOGGLE_SEAT, seat_number=1
        )
        clamped = await use_case.apply(
            day=TEST_DAY,
            state=SelectionState(),
            action=SelectionAction.CHANGE_QUANTITY,
            quantity_input='9',
        )
        reset = await use_case.apply(
            day=TEST_DAY, state=clamped, action=SelectionAction.RESET
        )

        assert toggled.selected_seats == ()
        assert clamped.quantity_input == '2'
        assert reset == SelectionState()

    @pytest.mark.asyncio
    async def test_toggle_requires_seat_number(
        self, snapshot_handler: StoreSnapshotQueryHandlerImpl
    ) -> None:
        use_case = ApplySelectionActionUseCase(
            snapshot_handler=snapshot_handler, total_seats=TOTAL_SEATS
        )

        with pytest.raises(ValueError):
            await use_case.apply(
                day=TEST_DAY, state=SelectionState(), action=SelectionAction.TOGGLE_SEAT
            )
