from typing import Any, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.shared_kernel.app.interface.i_booking_repo import IBookingRepo
from src.service.shared_kernel.app.interface.i_store_change_publisher import (
    IStoreChangePublisher,
)
from src.service.shared_kernel.app.interface.i_store_snapshot_query_handler import (
    IStoreSnapshotQueryHandler,
)
from src.service.shared_kernel.domain.entity.booking_entity import Booking
from src.service.shared_kernel.domain.pricing_domain import price_for_date, validate_price
from src.service.shared_kernel.domain.value_object.store_path import BOOKINGS, make_store_path


class EditSeatPriceUseCase:
    def __init__(
        self,
        *,
        snapshot_handler: IStoreSnapshotQueryHandler,
        booking_repo: IBookingRepo,
        change_publisher: IStoreChangePublisher,
        default_seat_price: float,
    ) -> None:
        self.snapshot_handler = snapshot_handler
        self.booking_repo = booking_repo
        self.change_publisher = change_publisher
        self.default_seat_price = default_seat_price
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        snapshot_handler: IStoreSnapshotQueryHandler = Depends(
            Provide[Container.store_snapshot_query_handler]
        ),
        booking_repo: IBookingRepo = Depends(Provide[Container.booking_repo]),
        change_publisher: IStoreChangePublisher = Depends(
            Provide[Container.store_change_publisher]
        ),
        config: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(
            snapshot_handler=snapshot_handler,
            booking_repo=booking_repo,
            change_publisher=change_publisher,
            default_seat_price=config.DEFAULT_SEAT_PRICE,
        )

    @Logger.io
    async def edit_seat_price(
        self, *, booking_id: str, seat_number: int, new_price: Any
    ) -> Booking:
        """
        Overwrite one seat's stamped price; other seats keep theirs.

        Raises:
            InvalidPriceError: new_price is not a finite number >= 0
            NotFoundError: Unknown booking, or the seat is not part of it
        """
        price = validate_price(new_price)

        with self.tracer.start_as_current_span(
            'use_case.edit_seat_price',
            attributes={'booking.id': booking_id, 'booking.seat': seat_number},
        ):
            snapshot = await self.snapshot_handler.get_snapshot()
            booking = snapshot.find_booking(booking_id)
            if booking is None:
                raise NotFoundError('Booking not found')

            day_price = price_for_date(booking.date, snapshot.price_table, self.default_seat_price)
            updated = booking.with_seat_price(seat_number, price, fallback_price=day_price)

            await self.booking_repo.save(booking=updated)
            await self.change_publisher.publish_change(
                path=make_store_path(collection=BOOKINGS, record_key=booking_id)
            )

            Logger.base.info(
                f'💲 [EDIT-SEAT-PRICE] Seat {seat_number} of {booking_id} now {price}'
            )
            return updated
