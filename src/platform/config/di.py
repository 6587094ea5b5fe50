"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import settings
from src.service.shared_kernel.driven_adapter.memory.in_memory_store import (
    InMemoryBookingRepo,
    InMemoryCommissionAgentRepo,
    InMemoryDailyPriceRepo,
    InMemoryStoreChangePublisher,
)
from src.service.shared_kernel.driven_adapter.state.booking_repo_kvrocks_impl import (
    BookingRepoKvrocksImpl,
)
from src.service.shared_kernel.driven_adapter.state.commission_agent_repo_kvrocks_impl import (
    CommissionAgentRepoKvrocksImpl,
)
from src.service.shared_kernel.driven_adapter.state.daily_price_repo_kvrocks_impl import (
    DailyPriceRepoKvrocksImpl,
)
from src.service.shared_kernel.driven_adapter.state.real_time_store_subscriber import (
    RealTimeStoreSubscriber,
)
from src.service.shared_kernel.driven_adapter.state.store_change_publisher_impl import (
    StoreChangePublisherImpl,
)
from src.service.shared_kernel.driven_adapter.state.store_snapshot_query_handler_impl import (
    StoreSnapshotQueryHandlerImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Object(settings)

    # 'kvrocks' or 'memory' (override in tests to switch backends)
    store_backend = providers.Object(settings.STORE_BACKEND)

    # Repositories (stateless for Kvrocks - client resolved per call)
    booking_repo = providers.Selector(
        store_backend,
        kvrocks=providers.Singleton(BookingRepoKvrocksImpl),
        memory=providers.Singleton(InMemoryBookingRepo),
    )
    daily_price_repo = providers.Selector(
        store_backend,
        kvrocks=providers.Singleton(DailyPriceRepoKvrocksImpl),
        memory=providers.Singleton(InMemoryDailyPriceRepo),
    )
    commission_agent_repo = providers.Selector(
        store_backend,
        kvrocks=providers.Singleton(CommissionAgentRepoKvrocksImpl),
        memory=providers.Singleton(InMemoryCommissionAgentRepo),
    )

    # Mirror of the store (Singleton: holds the current snapshot)
    store_snapshot_query_handler = providers.Singleton(
        StoreSnapshotQueryHandlerImpl,
        booking_repo=booking_repo,
        daily_price_repo=daily_price_repo,
        commission_agent_repo=commission_agent_repo,
    )

    # Change notifications after each write
    store_change_publisher = providers.Selector(
        store_backend,
        kvrocks=providers.Singleton(
            StoreChangePublisherImpl,
            snapshot_handler=store_snapshot_query_handler,
        ),
        memory=providers.Singleton(
            InMemoryStoreChangePublisher,
            snapshot_handler=store_snapshot_query_handler,
        ),
    )

    # Push subscriber feeding the mirror (Kvrocks backend only, started by main.py lifespan)
    real_time_store_subscriber = providers.Singleton(
        RealTimeStoreSubscriber,
        snapshot_handler=store_snapshot_query_handler,
        reconnect_delay=config_service.provided.STORE_SUBSCRIBER_RECONNECT_DELAY,
    )


container = Container()


def cleanup() -> None:
    container.reset_singletons()
