import pytest

from src.platform.exception.exceptions import (
    InsufficientCapacityError,
    InvalidQuantityError,
    MissingNameError,
    SeatConflictError,
)
from src.service.booking.domain.seat_assignment_domain import (
    SeatRequest,
    assign_seats,
    available_seats,
    booked_seats,
    parse_quantity,
)
from src.service.shared_kernel.domain.enum.selection_mode import SeatSelectionMode
from test.service.helpers import OTHER_DAY, TEST_DAY, make_booking


TOTAL_SEATS = 35


@pytest.mark.unit
class TestAvailability:
    def test_available_and_booked_partition_inventory(self) -> None:
        bookings = [
            make_booking(id='b1', seats=[1, 2]),
            make_booking(id='b2', seats=[10]),
            make_booking(id='b3', day=OTHER_DAY, seats=[3]),
        ]

        free = available_seats(TEST_DAY, bookings, TOTAL_SEATS)
        taken = booked_seats(TEST_DAY, bookings)

        assert taken == {1, 2, 10}
        assert set(free) | taken == set(range(1, TOTAL_SEATS + 1))
        assert set(free).isdisjoint(taken)
        assert free == sorted(free)

    def test_other_days_do_not_block_seats(self) -> None:
        bookings = [make_booking(day=OTHER_DAY, seats=[1])]

        assert 1 in available_seats(TEST_DAY, bookings, TOTAL_SEATS)


@pytest.mark.unit
class TestParseQuantity:
    @pytest.mark.parametrize('value,expected', [(3, 3), ('5', 5), (' 7 ', 7), (2.0, 2), ('4.0', 4)])
    def test_valid(self, value: object, expected: int) -> None:
        assert parse_quantity(value) == expected

    @pytest.mark.parametrize('value', [0, -1, '0', '-2', 1.5, 'abc', '', None, True, float('nan')])
    def test_invalid(self, value: object) -> None:
        with pytest.raises(InvalidQuantityError):
            parse_quantity(value)


@pytest.mark.unit
class TestAutoAssign:
    def test_empty_day_takes_lowest_seats(self) -> None:
        seats = assign_seats(
            day=TEST_DAY,
            bookings=[],
            request=SeatRequest.auto_assign(user_name='Alice', quantity=5),
            total_seats=TOTAL_SEATS,
        )

        assert seats == [1, 2, 3, 4, 5]

    def test_skips_booked_seats(self) -> None:
        seats = assign_seats(
            day=TEST_DAY,
            bookings=[make_booking(seats=[1, 3])],
            request=SeatRequest.auto_assign(user_name='Alice', quantity=3),
            total_seats=TOTAL_SEATS,
        )

        assert seats == [2, 4, 5]

    def test_insufficient_capacity_reports_available_count(self) -> None:
        bookings = [make_booking(seats=list(range(1, 34)), price=30.0)]

        with pytest.raises(InsufficientCapacityError) as exc_info:
            assign_seats(
                day=TEST_DAY,
                bookings=bookings,
                request=SeatRequest.auto_assign(user_name='Alice', quantity=3),
                total_seats=TOTAL_SEATS,
            )

        assert exc_info.value.available == 2
        assert exc_info.value.requested == 3
        assert exc_info.value.status_code == 409

    @pytest.mark.parametrize('quantity', [0, -3, 'two', None])
    def test_invalid_quantity(self, quantity: object) -> None:
        with pytest.raises(InvalidQuantityError):
            assign_seats(
                day=TEST_DAY,
                bookings=[],
                request=SeatRequest.auto_assign(user_name='Alice', quantity=quantity),
                total_seats=TOTAL_SEATS,
            )


@pytest.mark.unit
class TestManualAssign:
    def test_accepts_free_seats_sorted_and_deduplicated(self) -> None:
        request = SeatRequest.manual(user_name='Bob', seat_numbers=[7, 5, 7])

        seats = assign_seats(
            day=TEST_DAY, bookings=[], request=request, total_seats=TOTAL_SEATS
        )

        assert request.mode is SeatSelectionMode.MANUAL
        assert seats == [5, 7]

    def test_conflict_carries_still_available_subset(self) -> None:
        bookings = [make_booking(seats=[6])]

        with pytest.raises(SeatConflictError) as exc_info:
            assign_seats(
                day=TEST_DAY,
                bookings=bookings,
                request=SeatRequest.manual(user_name='Bob', seat_numbers=[5, 6, 7]),
                total_seats=TOTAL_SEATS,
            )

        assert exc_info.value.available_seats == [5, 7]
        assert exc_info.value.unavailable_seats == [6]
        assert exc_info.value.details == {'available_seats': [5, 7], 'unavailable_seats': [6]}

    def test_out_of_range_seat_is_unavailable(self) -> None:
        with pytest.raises(SeatConflictError) as exc_info:
            assign_seats(
                day=TEST_DAY,
                bookings=[],
                request=SeatRequest.manual(user_name='Bob', seat_numbers=[35, 36]),
                total_seats=TOTAL_SEATS,
            )

        assert exc_info.value.unavailable_seats == [36]

    def test_quantity_must_match_selection(self) -> None:
        with pytest.raises(InvalidQuantityError):
            assign_seats(
                day=TEST_DAY,
                bookings=[],
                request=SeatRequest.manual(user_name='Bob', seat_numbers=[1, 2], quantity=3),
                total_seats=TOTAL_SEATS,
            )

    def test_matching_quantity_accepted(self) -> None:
        seats = assign_seats(
            day=TEST_DAY,
            bookings=[],
            request=SeatRequest.manual(user_name='Bob', seat_numbers=[1, 2], quantity='2'),
            total_seats=TOTAL_SEATS,
        )

        assert seats == [1, 2]


@pytest.mark.unit
class TestBookingName:
    @pytest.mark.parametrize('user_name', ['', '   ', None])
    def test_missing_name_fails_before_seat_checks(self, user_name: str | None) -> None:
        full_day = [make_booking(seats=list(range(1, TOTAL_SEATS + 1)))]

        with pytest.raises(MissingNameError):
            assign_seats(
                day=TEST_DAY,
                bookings=full_day,
                request=SeatRequest.auto_assign(user_name=user_name, quantity=0),
                total_seats=TOTAL_SEATS,
            )
