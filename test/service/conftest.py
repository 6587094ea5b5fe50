"""In-memory store stack shared by use case tests"""

import pytest

from src.service.shared_kernel.driven_adapter.memory.in_memory_store import (
    InMemoryBookingRepo,
    InMemoryCommissionAgentRepo,
    InMemoryDailyPriceRepo,
    InMemoryStoreChangePublisher,
)
from src.service.shared_kernel.driven_adapter.state.store_snapshot_query_handler_impl import (
    StoreSnapshotQueryHandlerImpl,
)


@pytest.fixture
def booking_repo() -> InMemoryBookingRepo:
    return InMemoryBookingRepo()


@pytest.fixture
def daily_price_repo() -> InMemoryDailyPriceRepo:
    return InMemoryDailyPriceRepo()


@pytest.fixture
def commission_agent_repo() -> InMemoryCommissionAgentRepo:
    return InMemoryCommissionAgentRepo()


@pytest.fixture
def snapshot_handler(
    booking_repo: InMemoryBookingRepo,
    daily_price_repo: InMemoryDailyPriceRepo,
    commission_agent_repo: InMemoryCommissionAgentRepo,
) -> StoreSnapshotQueryHandlerImpl:
    return StoreSnapshotQueryHandlerImpl(
        booking_repo=booking_repo,
        daily_price_repo=daily_price_repo,
        commission_agent_repo=commission_agent_repo,
    )


@pytest.fixture
def change_publisher(
    snapshot_handler: StoreSnapshotQueryHandlerImpl,
) -> InMemoryStoreChangePublisher:
    return InMemoryStoreChangePublisher(snapshot_handler=snapshot_handler)
