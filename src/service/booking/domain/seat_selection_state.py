"""
Seat Selection State

Operator-side selection on the booking view as explicit state transitions: each
function takes the current state and returns a new one.
"""

from typing import Collection, Tuple

import attrs


DEFAULT_QUANTITY_INPUT = '1'


@attrs.define(frozen=True)
class SelectionState:
    selected_seats: Tuple[int, ...] = ()
    quantity_input: str = DEFAULT_QUANTITY_INPUT  # raw stepper text, may be ''

    @property
    def quantity(self) -> int:
        return _as_int(self.quantity_input)


def _as_int(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        return 0


def toggle_seat(
    state: SelectionState, seat_number: int, available: Collection[int]
) -> SelectionState:
    """Deselect a selected seat, select a free one; booked seats are ignored"""
    if seat_number in state.selected_seats:
        remaining = tuple(s for s in state.selected_seats if s != seat_number)
        return attrs.evolve(state, selected_seats=remaining)
    if seat_number not in available:
        return state
    return attrs.evolve(state, selected_seats=tuple(sorted((*state.selected_seats, seat_number))))


def change_quantity(state: SelectionState, raw: str, available_count: int) -> SelectionState:
    """
    Typed stepper input.

    Empty text is kept, values above ``available_count`` clamp to it, zero or
    negatives reset to "1" and non-numeric text leaves the state unchanged.
    """
    if raw == '':
        return attrs.evolve(state, quantity_input='')
    try:
        value = int(raw.strip())
    except ValueError:
        return state
    if value > available_count:
        return attrs.evolve(state, quantity_input=str(available_count))
    if value <= 0:
        return attrs.evolve(state, quantity_input=DEFAULT_QUANTITY_INPUT)
    return attrs.evolve(state, quantity_input=str(value))


def increment_quantity(state: SelectionState, available_count: int) -> SelectionState:
    current = state.quantity
    if current < available_count:
        return attrs.evolve(state, quantity_input=str(current + 1))
    return state


def decrement_quantity(state: SelectionState) -> SelectionState:
    current = state.quantity
    if current > 1:
        return attrs.evolve(state, quantity_input=str(current - 1))
    return state


def reset_selection() -> SelectionState:
    """Fresh state for a newly picked date"""
    return SelectionState()
