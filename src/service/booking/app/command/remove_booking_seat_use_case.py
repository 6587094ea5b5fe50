from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.booking.app.dto.booking_result import RemoveSeatResult
from src.service.shared_kernel.app.interface.i_booking_repo import IBookingRepo
from src.service.shared_kernel.app.interface.i_store_change_publisher import (
    IStoreChangePublisher,
)
from src.service.shared_kernel.app.interface.i_store_snapshot_query_handler import (
    IStoreSnapshotQueryHandler,
)
from src.service.shared_kernel.domain.value_object.store_path import BOOKINGS, make_store_path


class RemoveBookingSeatUseCase:
    """Remove one seat from a booking; the booking record goes away with its last seat"""

    def __init__(
        self,
        *,
        snapshot_handler: IStoreSnapshotQueryHandler,
        booking_repo: IBookingRepo,
        change_publisher: IStoreChangePublisher,
    ) -> None:
        self.snapshot_handler = snapshot_handler
        self.booking_repo = booking_repo
        self.change_publisher = change_publisher
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
    ) -> Self:
        return cls(
            snapshot_handler=snapshot_handler,
            booking_repo=booking_repo,
            change_publisher=change_publisher,
        )

    @Logger.io
    async def remove_seat(self, *, booking_id: str, seat_number: int) -> RemoveSeatResult:
        with self.tracer.start_as_current_span(
            'use_case.remove_booking_seat',
            attributes={'booking.id': booking_id, 'booking.seat': seat_number},
        ) as span:
            snapshot = await self.snapshot_handler.get_snapshot()
            booking = snapshot.find_booking(booking_id)
            if booking is None:
                raise NotFoundError('Booking not found')

            updated = booking.without_seat(seat_number)
            if updated.seats:
                await self.booking_repo.save(booking=updated)
            else:
                await self.booking_repo.delete(booking_id=booking_id)
            await self.change_publisher.publish_change(
                path=make_store_path(collection=BOOKINGS, record_key=booking_id)
            )

            metrics.seats_removed.inc()
            span.set_attribute('booking.deleted', not updated.seats)
            Logger.base.info(
                f'🗑️ [REMOVE-SEAT] Seat {seat_number} removed from {booking_id}'
                + ('' if updated.seats else ' (booking deleted)')
            )
            return RemoveSeatResult(
                booking_id=booking_id,
                seat_number=seat_number,
                booking=updated if updated.seats else None,
            )
