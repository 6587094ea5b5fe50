"""Kvrocks adapters against a mocked redis client"""

from datetime import date
from unittest.mock import AsyncMock, MagicMock

import orjson
import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import StoreUnavailableError
from src.platform.state.kvrocks_client import kvrocks_client
from src.service.shared_kernel.domain.entity.daily_price_entity import DailyPrice
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
from test.service.helpers import make_agent, make_booking


@pytest.fixture
def redis_client(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    client = MagicMock()
    client.hgetall = AsyncMock(return_value={})
    client.hset = AsyncMock(return_value=1)
    client.hdel = AsyncMock(return_value=1)
    client.publish = AsyncMock(return_value=1)
    monkeypatch.setattr(kvrocks_client, 'get_client', lambda: client)
    return client


@pytest.mark.unit
class TestBookingRepoKvrocks:
    @pytest.mark.asyncio
    async def test_save_writes_json_record_under_prefixed_hash(
        self, redis_client: MagicMock
    ) -> None:
        await BookingRepoKvrocksImpl().save(booking=make_booking(id='b1', seats=[2]))

        key, field, raw = redis_client.hset.await_args.args
        assert key == f'{settings.KVROCKS_KEY_PREFIX}bookings'
        assert field == 'b1'
        assert orjson.loads(raw)['seatPrices'] == {'2': 25.0}

    @pytest.mark.asyncio
    async def test_get_all_decodes_records(self, redis_client: MagicMock) -> None:
        redis_client.hgetall.return_value = {
            'b1': orjson.dumps(
                {'id': 'b1', 'date': '2025-06-01', 'seats': [1], 'userName': 'Alice'}
            ).decode()
        }

        bookings = await BookingRepoKvrocksImpl().get_all()

        assert len(bookings) == 1
        assert bookings[0].date == date(2025, 6, 1)
        assert bookings[0].seat_prices is None

    @pytest.mark.asyncio
    async def test_delete(self, redis_client: MagicMock) -> None:
        await BookingRepoKvrocksImpl().delete(booking_id='b1')

        redis_client.hdel.assert_awaited_once_with(
            f'{settings.KVROCKS_KEY_PREFIX}bookings', 'b1'
        )

    @pytest.mark.asyncio
    async def test_connection_error_becomes_store_unavailable(
        self, redis_client: MagicMock
    ) -> None:
        redis_client.hgetall.side_effect = RedisConnectionError('refused')

        with pytest.raises(StoreUnavailableError):
            await BookingRepoKvrocksImpl().get_all()


@pytest.mark.unit
class TestDailyPriceRepoKvrocks:
    @pytest.mark.asyncio
    async def test_upsert_stores_bare_number_by_day(self, redis_client: MagicMock) -> None:
        await DailyPriceRepoKvrocksImpl().upsert(
            daily_price=DailyPrice(date=date(2025, 6, 1), price=30.0)
        )

        redis_client.hset.assert_awaited_once_with(
            f'{settings.KVROCKS_KEY_PREFIX}dailyPrices', '2025-06-01', '30.0'
        )

    @pytest.mark.asyncio
    async def test_get_all(self, redis_client: MagicMock) -> None:
        redis_client.hgetall.return_value = {'2025-06-01': '30'}

        prices = await DailyPriceRepoKvrocksImpl().get_all()

        assert prices == [DailyPrice(date=date(2025, 6, 1), price=30.0)]


@pytest.mark.unit
class TestCommissionAgentRepoKvrocks:
    @pytest.mark.asyncio
    async def test_save_and_get_all(self, redis_client: MagicMock) -> None:
        repo = CommissionAgentRepoKvrocksImpl()
        await repo.save(agent=make_agent(id='a1', percentage=3.5))
        _, _, raw = redis_client.hset.await_args.args
        redis_client.hgetall.return_value = {'a1': raw}

        [agent] = await repo.get_all()

        assert agent.percentage == 3.5
        assert agent.is_global


@pytest.mark.unit
class TestStoreChangePublisher:
    @pytest.mark.asyncio
    async def test_publishes_path_then_refreshes_own_mirror(self, redis_client: MagicMock) -> None:
        snapshot_handler = AsyncMock()

        await StoreChangePublisherImpl(snapshot_handler=snapshot_handler).publish_change(
            path='bookings/b1'
        )

        channel, payload = redis_client.publish.await_args.args
        assert channel == f'{settings.KVROCKS_KEY_PREFIX}store_updates'
        assert orjson.loads(payload) == {'path': 'bookings/b1'}
        snapshot_handler.refresh.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_failed_publish_skips_refresh(self, redis_client: MagicMock) -> None:
        redis_client.publish.side_effect = RedisConnectionError('refused')
        snapshot_handler = AsyncMock()

        with pytest.raises(StoreUnavailableError):
            await StoreChangePublisherImpl(snapshot_handler=snapshot_handler).publish_change(
                path='bookings/b1'
            )

        snapshot_handler.refresh.assert_not_awaited()


@pytest.mark.unit
class TestUninitializedClient:
    @pytest.mark.asyncio
    async def test_missing_client_becomes_store_unavailable(self) -> None:
        with pytest.raises(StoreUnavailableError):
            await BookingRepoKvrocksImpl().get_all()
