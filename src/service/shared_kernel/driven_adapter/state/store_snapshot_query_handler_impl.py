"""Store Snapshot Query Handler - in-memory mirror refreshed by store push notifications"""

from typing import Optional

import anyio
from opentelemetry import trace

from src.platform.exception.exceptions import StoreUnavailableError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.shared_kernel.app.interface.i_booking_repo import IBookingRepo
from src.service.shared_kernel.app.interface.i_commission_agent_repo import (
    ICommissionAgentRepo,
)
from src.service.shared_kernel.app.interface.i_daily_price_repo import IDailyPriceRepo
from src.service.shared_kernel.app.interface.i_store_snapshot_query_handler import (
    IStoreSnapshotQueryHandler,
)
from src.service.shared_kernel.domain.value_object.store_snapshot import StoreSnapshot


class StoreSnapshotQueryHandlerImpl(IStoreSnapshotQueryHandler):
    """
    Holds the latest complete StoreSnapshot.

    Architecture:
    - RealTimeStoreSubscriber calls refresh() on every store push notification
    - Readers call get_snapshot(); the first call loads when nothing is mirrored yet
    - A failed refresh keeps the previous snapshot in place
    """

    def __init__(
        self,
        *,
        booking_repo: IBookingRepo,
        daily_price_repo: IDailyPriceRepo,
        commission_agent_repo: ICommissionAgentRepo,
    ) -> None:
        self.tracer = trace.get_tracer(__name__)
        self.booking_repo = booking_repo
        self.daily_price_repo = daily_price_repo
        self.commission_agent_repo = commission_agent_repo
        self._snapshot: Optional[StoreSnapshot] = None
        self._lock = anyio.Lock()

    @property
    def is_loaded(self) -> bool:
        return self._snapshot is not None

    async def get_snapshot(self) -> StoreSnapshot:
        if self._snapshot is not None:
            return self._snapshot
        try:
            return await self.refresh()
        except StoreUnavailableError as e:
            raise StoreUnavailableError(
                'Store data could not be loaded, reload and try again',
                reload_required=True,
            ) from e

    async def refresh(self) -> StoreSnapshot:
        with self.tracer.start_as_current_span('store.mirror.refresh') as span:
            async with self._lock:
                try:
                    bookings = await self.booking_repo.get_all()
                    daily_prices = await self.daily_price_repo.get_all()
                    agents = await self.commission_agent_repo.get_all()
                except StoreUnavailableError:
                    metrics.mirror_refreshes.labels(result='error').inc()
                    span.set_attribute('refreshed', False)
                    raise

                snapshot = StoreSnapshot(
                    bookings=bookings,
                    daily_prices=daily_prices,
                    commission_agents=agents,
                )
                self._snapshot = snapshot

            metrics.mirror_refreshes.labels(result='success').inc()
            span.set_attribute('refreshed', True)
            span.set_attribute('bookings', len(bookings))
            Logger.base.info(
                f'🪞 [MIRROR] Refreshed: {len(bookings)} bookings, '
                f'{len(daily_prices)} daily prices, {len(agents)} agents'
            )
            return snapshot
