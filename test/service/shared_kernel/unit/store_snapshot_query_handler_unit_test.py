from unittest.mock import AsyncMock

import pytest

from src.platform.exception.exceptions import StoreUnavailableError
from src.service.shared_kernel.driven_adapter.memory.in_memory_store import (
    InMemoryBookingRepo,
    InMemoryStoreChangePublisher,
)
from src.service.shared_kernel.driven_adapter.state.store_snapshot_query_handler_impl import (
    StoreSnapshotQueryHandlerImpl,
)
from test.service.helpers import make_booking


@pytest.mark.unit
class TestStoreSnapshotQueryHandler:
    @pytest.mark.asyncio
    async def test_first_read_loads_snapshot(
        self, snapshot_handler: StoreSnapshotQueryHandlerImpl, booking_repo: InMemoryBookingRepo
    ) -> None:
        await booking_repo.save(booking=make_booking(id='b1'))

        snapshot = await snapshot_handler.get_snapshot()

        assert [b.id for b in snapshot.bookings] == ['b1']
        assert snapshot_handler.is_loaded

    @pytest.mark.asyncio
    async def test_writes_not_visible_until_refresh(
        self, snapshot_handler: StoreSnapshotQueryHandlerImpl, booking_repo: InMemoryBookingRepo
    ) -> None:
        before = await snapshot_handler.get_snapshot()
        await booking_repo.save(booking=make_booking(id='b1'))

        assert (await snapshot_handler.get_snapshot()) is before

        after = await snapshot_handler.refresh()

        assert after is not before
        assert before.bookings == []
        assert [b.id for b in after.bookings] == ['b1']

    @pytest.mark.asyncio
    async def test_publisher_refreshes_mirror(
        self,
        snapshot_handler: StoreSnapshotQueryHandlerImpl,
        booking_repo: InMemoryBookingRepo,
        change_publisher: InMemoryStoreChangePublisher,
    ) -> None:
        await snapshot_handler.get_snapshot()
        await booking_repo.save(booking=make_booking(id='b1'))

        await change_publisher.publish_change(path='bookings/b1')

        assert change_publisher.published_paths == ['bookings/b1']
        assert (await snapshot_handler.get_snapshot()).find_booking('b1') is not None

    @pytest.mark.asyncio
    async def test_initial_load_failure_requires_reload(self) -> None:
        failing_repo = AsyncMock()
        failing_repo.get_all = AsyncMock(side_effect=StoreUnavailableError('down'))
        handler = StoreSnapshotQueryHandlerImpl(
            booking_repo=failing_repo,
            daily_price_repo=AsyncMock(),
            commission_agent_repo=AsyncMock(),
        )

        with pytest.raises(StoreUnavailableError) as exc_info:
            await handler.get_snapshot()

        assert exc_info.value.reload_required is True
        assert exc_info.value.status_code == 503
        assert exc_info.value.details == {'reload_required': True}

    @pytest.mark.asyncio
    async def test_failed_refresh_keeps_previous_snapshot(
        self, snapshot_handler: StoreSnapshotQueryHandlerImpl, booking_repo: InMemoryBookingRepo
    ) -> None:
        await booking_repo.save(booking=make_booking(id='b1'))
        loaded = await snapshot_handler.get_snapshot()
        booking_repo.get_all = AsyncMock(side_effect=StoreUnavailableError('down'))  # type: ignore[method-assign]

        with pytest.raises(StoreUnavailableError):
            await snapshot_handler.refresh()

        assert (await snapshot_handler.get_snapshot()) is loaded
