from datetime import date
from typing import Any, Iterable, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace
import uuid_utils

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import CustomBaseError, StoreUnavailableError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.booking.app.dto.booking_result import CreateBookingResult
from src.service.booking.domain.seat_assignment_domain import SeatRequest, assign_seats
from src.service.shared_kernel.app.interface.i_booking_repo import IBookingRepo
from src.service.shared_kernel.app.interface.i_store_change_publisher import (
    IStoreChangePublisher,
)
from src.service.shared_kernel.app.interface.i_store_snapshot_query_handler import (
    IStoreSnapshotQueryHandler,
)
from src.service.shared_kernel.domain.entity.booking_entity import Booking
from src.service.shared_kernel.domain.pricing_domain import price_for_date
from src.service.shared_kernel.domain.value_object.calendar_day import day_key, to_day
from src.service.shared_kernel.domain.value_object.store_path import BOOKINGS, make_store_path


class CreateBookingUseCase:
    """
    Create booking use case

    Flow:
    1. Read the current snapshot from the mirror
    2. Assign seats (manual selection or lowest free seat numbers)
    3. Stamp every seat with the date's resolved price
    4. Write bookings/{id} and publish the change

    The availability check runs against the last mirrored state; two operators
    booking the same seat at once can both pass it.
    """

    def __init__(
        self,
        *,
        snapshot_handler: IStoreSnapshotQueryHandler,
        booking_repo: IBookingRepo,
        change_publisher: IStoreChangePublisher,
        total_seats: int,
        default_seat_price: float,
    ) -> None:
        self.snapshot_handler = snapshot_handler
        self.booking_repo = booking_repo
        self.change_publisher = change_publisher
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
            total_seats=config.TOTAL_SEATS,
            default_seat_price=config.DEFAULT_SEAT_PRICE,
        )

    @Logger.io
    async def create_booking(
        self,
        *,
        day: date,
        user_name: Optional[str],
        seat_numbers: Optional[Iterable[int]] = None,
        quantity: Any = None,
    ) -> CreateBookingResult:
        """
        Raises:
            MissingNameError: Blank booking name (checked first)
            InvalidQuantityError: Quantity not a positive whole number
            SeatConflictError: A selected seat is no longer available
            InsufficientCapacityError: Fewer free seats than requested
            StoreUnavailableError: The store could not be read or written
        """
        day = to_day(day)
        request = SeatRequest(
            user_name=user_name, seat_numbers=tuple(seat_numbers or ()), quantity=quantity
        )
        booking_id = str(uuid_utils.uuid7())

        with self.tracer.start_as_current_span(
            'use_case.create_booking',
            attributes={
                'booking.id': booking_id,
                'booking.date': day_key(day),
                'booking.mode': str(request.mode),
            },
        ):
            try:
                snapshot = await self.snapshot_handler.get_snapshot()
                seats = assign_seats(
                    day=day,
                    bookings=snapshot.bookings,
                    request=request,
                    total_seats=self.total_seats,
                )
                seat_price = price_for_date(day, snapshot.price_table, self.default_seat_price)
                booking = Booking.create(
                    id=booking_id,
                    day=day,
                    seats=seats,
                    user_name=request.user_name or '',
                    seat_price=seat_price,
                )

                await self.booking_repo.save(booking=booking)
                await self.change_publisher.publish_change(
                    path=make_store_path(collection=BOOKINGS, record_key=booking.id)
                )
            except StoreUnavailableError:
                metrics.record_booking(mode=request.mode, result='error')
                raise
            except CustomBaseError:
                metrics.record_booking(mode=request.mode, result='rejected')
                raise

            metrics.record_booking(mode=request.mode, result='success', seat_count=len(seats))
            Logger.base.info(
                f'📝 [CREATE-BOOKING] {booking.id} for {booking.user_name!r} on {day_key(day)}: '
                f'seats {booking.seats} at {seat_price}'
            )
            return CreateBookingResult(
                booking=booking, mode=request.mode, total_cost=booking.stamped_total()
            )
