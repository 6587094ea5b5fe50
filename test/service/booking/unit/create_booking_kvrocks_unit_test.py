"""
Back-to-back bookings on the Kvrocks backend from one process.

The redis client is a dict-backed mock, so the pub/sub notification never comes
back; the second request must still see the first one's seats.
"""

from collections import defaultdict
from typing import Any, Dict
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.platform.config.core_setting import settings
from src.platform.state.kvrocks_client import kvrocks_client
from src.service.booking.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.shared_kernel.driven_adapter.state.booking_repo_kvrocks_impl import (
    BookingRepoKvrocksImpl,
)
from src.service.shared_kernel.driven_adapter.state.commission_agent_repo_kvrocks_impl import (
    CommissionAgentRepoKvrocksImpl,
)
from src.service.shared_kernel.driven_adapter.state.daily_price_repo_kvrocks_impl import (
    DailyPriceRepoKvrocksImpl,
)
from src.service.shared_kernel.driven_adapter.state.store_change_publisher_impl import (
    StoreChangePublisherImpl,
)
from src.service.shared_kernel.driven_adapter.state.store_snapshot_query_handler_impl import (
    StoreSnapshotQueryHandlerImpl,
)
from test.service.helpers import TEST_DAY


@pytest.fixture
def hashes(monkeypatch: pytest.MonkeyPatch) -> Dict[str, Dict[str, Any]]:
    store: Dict[str, Dict[str, Any]] = defaultdict(dict)

    async def hset(key: str, field: str, value: Any) -> int:
        store[key][field] = value
        return 1

    async def hgetall(key: str) -> Dict[str, Any]:
        return dict(store[key])

    async def hdel(key: str, field: str) -> int:
        return 1 if store[key].pop(field, None) is not None else 0

    client = MagicMock()
    client.hset = AsyncMock(side_effect=hset)
    client.hgetall = AsyncMock(side_effect=hgetall)
    client.hdel = AsyncMock(side_effect=hdel)
    client.publish = AsyncMock(return_value=0)
    monkeypatch.setattr(kvrocks_client, 'get_client', lambda: client)
    return store


@pytest.fixture
def snapshot_handler(hashes: Dict[str, Dict[str, Any]]) -> StoreSnapshotQueryHandlerImpl:
    return StoreSnapshotQueryHandlerImpl(
        booking_repo=BookingRepoKvrocksImpl(),
        daily_price_repo=DailyPriceRepoKvrocksImpl(),
        commission_agent_repo=CommissionAgentRepoKvrocksImpl(),
    )


@pytest.fixture
def create_use_case(snapshot_handler: StoreSnapshotQueryHandlerImpl) -> CreateBookingUseCase:
    return CreateBookingUseCase(
        snapshot_handler=snapshot_handler,
        booking_repo=BookingRepoKvrocksImpl(),
        change_publisher=StoreChangePublisherImpl(snapshot_handler=snapshot_handler),
        total_seats=35,
        default_seat_price=25.0,
    )


@pytest.mark.unit
class TestCreateBookingOnKvrocks:
    @pytest.mark.asyncio
    async def test_consecutive_auto_assign_gets_disjoint_seats(
        self,
        create_use_case: CreateBookingUseCase,
        snapshot_handler: StoreSnapshotQueryHandlerImpl,
    ) -> None:
        await snapshot_handler.refresh()

        first = await create_use_case.create_booking(day=TEST_DAY, user_name='Alice', quantity=2)
        second = await create_use_case.create_booking(day=TEST_DAY, user_name='Bob', quantity=2)

        assert first.booking.seats == [1, 2]
        assert second.booking.seats == [3, 4]

    @pytest.mark.asyncio
    async def test_writer_mirror_holds_booking_before_notification(
        self,
        create_use_case: CreateBookingUseCase,
        snapshot_handler: StoreSnapshotQueryHandlerImpl,
        hashes: Dict[str, Dict[str, Any]],
    ) -> None:
        await snapshot_handler.refresh()

        result = await create_use_case.create_booking(
            day=TEST_DAY, user_name='Alice', seat_numbers=[7]
        )

        assert result.booking.id in hashes[f'{settings.KVROCKS_KEY_PREFIX}bookings']
        snapshot = await snapshot_handler.get_snapshot()
        assert [b.id for b in snapshot.bookings] == [result.booking.id]
