from datetime import date
from enum import StrEnum
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.booking.domain.seat_assignment_domain import available_seats
from src.service.booking.domain.seat_selection_state import (
    SelectionState,
    change_quantity,
    decrement_quantity,
    increment_quantity,
    reset_selection,
    toggle_seat,
)
from src.service.shared_kernel.app.interface.i_store_snapshot_query_handler import (
    IStoreSnapshotQueryHandler,
)


class SelectionAction(StrEnum):
    TOGGLE_SEAT = 'toggle_seat'
    CHANGE_QUANTITY = 'change_quantity'
    INCREMENT = 'increment'
    DECREMENT = 'decrement'
    RESET = 'reset'


class ApplySelectionActionUseCase:
    """Apply one stepper or seat-map action to the operator's selection on a date"""

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
    async def apply(
        self,
        *,
        day: date,
        state: SelectionState,
        action: SelectionAction,
        seat_number: Optional[int] = None,
        quantity_input: Optional[str] = None,
    ) -> SelectionState:
        if action is SelectionAction.RESET:
            return reset_selection()

        snapshot = await self.snapshot_handler.get_snapshot()
        free = available_seats(day, snapshot.bookings, self.total_seats)

        match action:
            case SelectionAction.TOGGLE_SEAT:
                if seat_number is None:
                    raise ValueError('seat_number is required for toggle_seat')
                return toggle_seat(state, seat_number, free)
            case SelectionAction.CHANGE_QUANTITY:
                return change_quantity(state, quantity_input or '', len(free))
            case SelectionAction.INCREMENT:
                return increment_quantity(state, len(free))
            case SelectionAction.DECREMENT:
                return decrement_quantity(state)
        return state
