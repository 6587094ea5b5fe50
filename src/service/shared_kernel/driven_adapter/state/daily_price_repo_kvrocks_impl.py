from typing import List

from src.platform.logging.loguru_io import Logger
from src.platform.state.kvrocks_client import kvrocks_client
from src.service.shared_kernel.app.interface.i_daily_price_repo import IDailyPriceRepo
from src.service.shared_kernel.domain.entity.daily_price_entity import DailyPrice
from src.service.shared_kernel.domain.value_object.store_path import DAILY_PRICES
from src.service.shared_kernel.driven_adapter.state.key_str_generator import make_collection_key
from src.service.shared_kernel.driven_adapter.state.store_operation import store_operation
from src.service.shared_kernel.driven_adapter.state.store_record_codec import (
    decode_daily_price,
    encode_daily_price,
)


class DailyPriceRepoKvrocksImpl(IDailyPriceRepo):
    """Daily prices in the ``dailyPrices`` hash: field ``YYYY-MM-DD``, value a bare number."""

    def __init__(self) -> None:
        self._key = make_collection_key(collection=DAILY_PRICES)

    @Logger.io
    async def get_all(self) -> List[DailyPrice]:
        with store_operation('daily_prices.get_all'):
            records = await kvrocks_client.get_client().hgetall(self._key)  # type: ignore[misc]
        return [decode_daily_price(key, value) for key, value in records.items()]

    @Logger.io
    async def upsert(self, *, daily_price: DailyPrice) -> DailyPrice:
        field, value = encode_daily_price(daily_price)
        with store_operation('daily_prices.upsert'):
            await kvrocks_client.get_client().hset(self._key, field, str(value))  # type: ignore[misc]
        return daily_price
