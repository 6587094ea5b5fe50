"""Kvrocks-backed publisher for scripts, independent of STORE_BACKEND"""

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


def build_change_publisher() -> StoreChangePublisherImpl:
    snapshot_handler = StoreSnapshotQueryHandlerImpl(
        booking_repo=BookingRepoKvrocksImpl(),
        daily_price_repo=DailyPriceRepoKvrocksImpl(),
        commission_agent_repo=CommissionAgentRepoKvrocksImpl(),
    )
    return StoreChangePublisherImpl(snapshot_handler=snapshot_handler)
