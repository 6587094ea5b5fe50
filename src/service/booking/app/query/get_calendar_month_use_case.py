from collections import defaultdict
from datetime import date
from typing import Dict, List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.dto.date_overview import CalendarDayStatus
from src.service.shared_kernel.app.interface.i_store_snapshot_query_handler import (
    IStoreSnapshotQueryHandler,
)
from src.service.shared_kernel.domain.value_object.calendar_day import to_day


class GetCalendarMonthUseCase:
    """Booked/available counts per day of one month, for the calendar badges"""

    def __init__(
        self, *, snapshot_handler: IStoreSnapshotQueryHandler, total_seats: int
    ) -> None:
        self.snapshot_handler = snapshot_handler
        self.total_seats = total_seats

    @classmethod
    @inject
    def depends(
        cls,
        snapshot_handler: IStoreSnapshotQueryHandler = Depends(
            Provide[Container.store_snapshot_query_handler]
        ),
        config: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(snapshot_handler=snapshot_handler, total_seats=config.TOTAL_SEATS)

    @Logger.io
    async def get_month(self, *, year: int, month: int) -> List[CalendarDayStatus]:
        """Only days with at least one booked seat are listed, ascending"""
        snapshot = await self.snapshot_handler.get_snapshot()

        seats_by_day: Dict[date, set[int]] = defaultdict(set)
        for booking in snapshot.bookings:
            day = to_day(booking.date)
            if day.year == year and day.month == month:
                seats_by_day[day].update(booking.seats)

        return [
            CalendarDayStatus(
                date=day,
                booked_count=len(seats),
                available_count=max(self.total_seats - len(seats), 0),
            )
            for day, seats in sorted(seats_by_day.items())
            if seats
        ]
