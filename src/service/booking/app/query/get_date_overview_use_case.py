from datetime import date
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.dto.date_overview import BookedSeatDetail, DateOverview
from src.service.booking.domain.seat_assignment_domain import available_seats
from src.service.shared_kernel.app.interface.i_store_snapshot_query_handler import (
    IStoreSnapshotQueryHandler,
)
from src.service.shared_kernel.domain.pricing_domain import booking_value, price_for_date
from src.service.shared_kernel.domain.value_object.calendar_day import day_key, to_day


class GetDateOverviewUseCase:
    def __init__(
        self,
        *,
        snapshot_handler: IStoreSnapshotQueryHandler,
        total_seats: int,
        default_seat_price: float,
    ) -> None:
        self.snapshot_handler = snapshot_handler
        self.total_seats = total_seats
        self.default_seat_price = default_seat_price
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        snapshot_handler: IStoreSnapshotQueryHandler = Depends(
            Provide[Container.store_snapshot_query_handler]
        ),
        config: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(
            snapshot_handler=snapshot_handler,
            total_seats=config.TOTAL_SEATS,
            default_seat_price=config.DEFAULT_SEAT_PRICE,
        )

    @Logger.io
    async def get_overview(self, *, day: date) -> DateOverview:
        day = to_day(day)
        with self.tracer.start_as_current_span(
            'use_case.get_date_overview', attributes={'booking.date': day_key(day)}
        ):
            snapshot = await self.snapshot_handler.get_snapshot()
            price_table = snapshot.price_table
            price = price_for_date(day, price_table, self.default_seat_price)
            bookings = snapshot.bookings_on(day)

            details = sorted(
                (
                    BookedSeatDetail(
                        seat_number=seat,
                        booking_id=booking.id,
                        user_name=booking.user_name,
                        price=booking.price_of(seat, fallback_price=price),
                    )
                    for booking in bookings
                    for seat in booking.seats
                ),
                key=lambda detail: detail.seat_number,
            )

            return DateOverview(
                date=day,
                price=price,
                default_price=self.default_seat_price,
                has_price_override=day in price_table,
                total_seats=self.total_seats,
                available_seats=available_seats(day, bookings, self.total_seats),
                booked_seats=details,
                estimated_profit=sum(booking_value(b, day_price=price) for b in bookings),
            )
