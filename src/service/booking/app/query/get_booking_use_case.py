from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.shared_kernel.app.interface.i_store_snapshot_query_handler import (
    IStoreSnapshotQueryHandler,
)
from src.service.shared_kernel.domain.entity.booking_entity import Booking


class GetBookingUseCase:
    def __init__(self, *, snapshot_handler: IStoreSnapshotQueryHandler) -> None:
        self.snapshot_handler = snapshot_handler

    @classmethod
    @inject
    def depends(
        cls,
        snapshot_handler: IStoreSnapshotQueryHandler = Depends(
            Provide[Container.store_snapshot_query_handler]
        ),
    ) -> Self:
        return cls(snapshot_handler=snapshot_handler)

    @Logger.io
    async def get_booking(self, *, booking_id: str) -> Booking:
        snapshot = await self.snapshot_handler.get_snapshot()
        booking = snapshot.find_booking(booking_id)

        if not booking:
            raise NotFoundError('Booking not found')

        return booking
