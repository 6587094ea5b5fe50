import pytest

from src.service.booking.domain.seat_selection_state import (
    SelectionState,
    change_quantity,
    decrement_quantity,
    increment_quantity,
    reset_selection,
    toggle_seat,
)


@pytest.mark.unit
class TestToggleSeat:
    def test_select_then_deselect(self) -> None:
        selected = toggle_seat(SelectionState(), 4, available=[1, 4, 5])
        selected = toggle_seat(selected, 1, available=[1, 4, 5])

        assert selected.selected_seats == (1, 4)
        assert toggle_seat(selected, 4, available=[1, 4, 5]).selected_seats == (1,)

    def test_booked_seat_cannot_be_selected(self) -> None:
        state = SelectionState()

        assert toggle_seat(state, 2, available=[1, 3]) is state


@pytest.mark.unit
class TestQuantityStepper:
    @pytest.mark.parametrize(
        'raw,expected',
        [
            ('', ''),
            ('3', '3'),
            ('50', '10'),  # clamps to available
            ('0', '1'),
            ('-4', '1'),
        ],
    )
    def test_change_quantity(self, raw: str, expected: str) -> None:
        assert change_quantity(SelectionState(), raw, available_count=10).quantity_input == expected

    def test_non_numeric_input_ignored(self) -> None:
        state = SelectionState(quantity_input='2')

        assert change_quantity(state, 'abc', available_count=10) is state

    def test_increment_bounded_by_available(self) -> None:
        state = increment_quantity(SelectionState(quantity_input='2'), available_count=3)
        assert state.quantity_input == '3'

        assert increment_quantity(state, available_count=3) is state

    def test_increment_from_empty_input(self) -> None:
        assert increment_quantity(SelectionState(quantity_input=''), 5).quantity_input == '1'

    def test_decrement_bounded_below_by_one(self) -> None:
        state = decrement_quantity(SelectionState(quantity_input='2'))
        assert state.quantity_input == '1'

        assert decrement_quantity(state) is state

    def test_reset(self) -> None:
        assert reset_selection() == SelectionState(selected_seats=(), quantity_input='1')
