from datetime import date
from typing import Any, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.shared_kernel.app.interface.i_daily_price_repo import IDailyPriceRepo
from src.service.shared_kernel.app.interface.i_store_change_publisher import (
    IStoreChangePublisher,
)
from src.service.shared_kernel.domain.entity.daily_price_entity import DailyPrice
from src.service.shared_kernel.domain.pricing_domain import validate_price
from src.service.shared_kernel.domain.value_object.calendar_day import day_key, to_day
from src.service.shared_kernel.domain.value_object.store_path import (
    DAILY_PRICES,
    make_store_path,
)


class SetDailyPriceUseCase:
    """
    Upsert the per-seat price of one calendar day.

    Seats already booked keep the price stamped on them; only later bookings
    on the day pick up the new price.
    """

    def __init__(
        self,
        *,
        daily_price_repo: IDailyPriceRepo,
        change_publisher: IStoreChangePublisher,
    ) -> None:
        self.daily_price_repo = daily_price_repo
        self.change_publisher = change_publisher
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        daily_price_repo: IDailyPriceRepo = Depends(Provide[Container.daily_price_repo]),
        change_publisher: IStoreChangePublisher = Depends(
            Provide[Container.store_change_publisher]
        ),
    ) -> Self:
        return cls(daily_price_repo=daily_price_repo, change_publisher=change_publisher)

    @Logger.io
    async def set_price(self, *, day: date, price: Any) -> DailyPrice:
        daily_price = DailyPrice(date=to_day(day), price=validate_price(price))
        key = day_key(daily_price.date)

        with self.tracer.start_as_current_span(
            'use_case.set_daily_price', attributes={'price.date': key}
        ):
            await self.daily_price_repo.upsert(daily_price=daily_price)
            await self.change_publisher.publish_change(
                path=make_store_path(collection=DAILY_PRICES, record_key=key)
            )

        Logger.base.info(f'💲 [DAILY-PRICE] {key} set to {daily_price.price}')
        return daily_price
