"""Shared Kernel Interfaces"""

from src.service.shared_kernel.app.interface.i_booking_repo import IBookingRepo
from src.service.shared_kernel.app.interface.i_commission_agent_repo import (
    ICommissionAgentRepo,
)
from src.service.shared_kernel.app.interface.i_daily_price_repo import IDailyPriceRepo
from src.service.shared_kernel.app.interface.i_store_change_publisher import (
    IStoreChangePublisher,
)
from src.service.shared_kernel.app.interface.i_store_snapshot_query_handler import (
    IStoreSnapshotQueryHandler,
)

__all__ = [
    'IBookingRepo',
    'ICommissionAgentRepo',
    'IDailyPriceRepo',
    'IStoreChangePublisher',
    'IStoreSnapshotQueryHandler',
]
