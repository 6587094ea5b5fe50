"""
In-memory store backend

Same ports as the Kvrocks adapters, backed by dicts holding the encoded records
so reads always hand out fresh entities. Used with ``STORE_BACKEND=memory`` for
local runs and tests.
"""

from typing import Any, Dict, List

from src.platform.logging.loguru_io import Logger
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
from src.service.shared_kernel.domain.entity.booking_entity import Booking
from src.service.shared_kernel.domain.entity.commission_agent_entity import CommissionAgent
from src.service.shared_kernel.domain.entity.daily_price_entity import DailyPrice
from src.service.shared_kernel.driven_adapter.state.store_record_codec import (
    decode_booking,
    decode_commission_agent,
    decode_daily_price,
    encode_booking,
    encode_commission_agent,
    encode_daily_price,
)


class InMemoryBookingRepo(IBookingRepo):
    def __init__(self) -> None:
        self.records: Dict[str, Dict[str, Any]] = {}

    async def get_all(self) -> List[Booking]:
        return [decode_booking(record) for record in self.records.values()]

    async def save(self, *, booking: Booking) -> Booking:
        self.records[booking.id] = encode_booking(booking)
        return booking

    async def delete(self, *, booking_id: str) -> None:
        self.records.pop(booking_id, None)


class InMemoryDailyPriceRepo(IDailyPriceRepo):
    def __init__(self) -> None:
        self.records: Dict[str, float] = {}

    async def get_all(self) -> List[DailyPrice]:
        return [decode_daily_price(key, value) for key, value in self.records.items()]

    async def upsert(self, *, daily_price: DailyPrice) -> DailyPrice:
        key, value = encode_daily_price(daily_price)
        self.records[key] = value
        return daily_price


class InMemoryCommissionAgentRepo(ICommissionAgentRepo):
    def __init__(self) -> None:
        self.records: Dict[str, Dict[str, Any]] = {}

    async def get_all(self) -> List[CommissionAgent]:
        return [decode_commission_agent(record) for record in self.records.values()]

    async def save(self, *, agent: CommissionAgent) -> CommissionAgent:
        self.records[agent.id] = encode_commission_agent(agent)
        return agent

    async def delete(self, *, agent_id: str) -> None:
        self.records.pop(agent_id, None)


class InMemoryStoreChangePublisher(IStoreChangePublisher):
    """Delivers the push notification in-process by refreshing the mirror right away"""

    def __init__(self, *, snapshot_handler: IStoreSnapshotQueryHandler) -> None:
        self.snapshot_handler = snapshot_handler
        self.published_paths: List[str] = []

    @Logger.io
    async def publish_change(self, *, path: str) -> None:
        self.published_paths.append(path)
        await self.snapshot_handler.refresh()
