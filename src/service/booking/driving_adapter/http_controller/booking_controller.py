from datetime import date
from typing import List

from fastapi import APIRouter, Depends, Path, status
from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.service.booking.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.booking.app.command.edit_seat_price_use_case import EditSeatPriceUseCase
from src.service.booking.app.command.remove_booking_seat_use_case import (
    RemoveBookingSeatUseCase,
)
from src.service.booking.app.command.set_daily_price_use_case import SetDailyPriceUseCase
from src.service.booking.app.query.apply_selection_action_use_case import (
    ApplySelectionActionUseCase,
    SelectionAction,
)
from src.service.booking.app.query.get_booking_use_case import GetBookingUseCase
from src.service.booking.app.query.get_calendar_month_use_case import GetCalendarMonthUseCase
from src.service.booking.app.query.get_date_overview_use_case import GetDateOverviewUseCase
from src.service.booking.domain.seat_selection_state import SelectionState
from src.service.booking.driving_adapter.http_controller.schema.booking_schema import (
    BookingCreateRequest,
    BookingResponse,
    CreateBookingResponse,
    DailyPriceRequest,
    DailyPriceResponse,
    EditSeatPriceRequest,
    RemoveSeatResponse,
)
from src.service.booking.driving_adapter.http_controller.schema.date_overview_schema import (
    BookedSeatResponse,
    CalendarDayResponse,
    DateOverviewResponse,
    SelectionActionRequest,
    SelectionStateSchema,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


@router.get('/date/{day}')
@Logger.io
async def get_date_overview(
    day: date,
    use_case: GetDateOverviewUseCase = Depends(GetDateOverviewUseCase.depends),
) -> DateOverviewResponse:
    overview = await use_case.get_overview(day=day)
    return DateOverviewResponse(
        date=overview.date,
        price=overview.price,
        default_price=overview.default_price,
        has_price_override=overview.has_price_override,
        total_seats=overview.total_seats,
        available_count=overview.available_count,
        booked_count=overview.booked_count,
        available_seats=overview.available_seats,
        booked_seats=[
            BookedSeatResponse(
                seat_number=detail.seat_number,
                booking_id=detail.booking_id,
                user_name=detail.user_name,
                price=detail.price,
            )
            for detail in overview.booked_seats
        ],
        estimated_profit=overview.estimated_profit,
    )


@router.get('/calendar/{year}/{month}')
@Logger.io
async def get_calendar_month(
    year: int = Path(ge=1, le=9999),
    month: int = Path(ge=1, le=12),
    use_case: GetCalendarMonthUseCase = Depends(GetCalendarMonthUseCase.depends),
) -> List[CalendarDayResponse]:
    days = await use_case.get_month(year=year, month=month)
    return [
        CalendarDayResponse(
            date=day.date,
            booked_count=day.booked_count,
            available_count=day.available_count,
            fully_booked=day.fully_booked,
            partially_booked=day.partially_booked,
        )
        for day in days
    ]


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_booking(
    request: BookingCreateRequest,
    use_case: CreateBookingUseCase = Depends(CreateBookingUseCase.depends),
) -> CreateBookingResponse:
    with tracer.start_as_current_span('controller.create_booking') as span:
        span.set_attribute('booking.date', request.date.isoformat())
        span.set_attribute('booking.requested_seats', len(request.seat_numbers))

        result = await use_case.create_booking(
            day=request.date,
            user_name=request.user_name,
            seat_numbers=request.seat_numbers,
            quantity=request.quantity,
        )

        span.set_attribute('booking.id', result.booking.id)

        return CreateBookingResponse(
            booking=BookingResponse.from_entity(result.booking),
            mode=result.mode.value,
            total_cost=result.total_cost,
        )


@router.post('/selection')
@Logger.io
async def apply_selection_action(
    request: SelectionActionRequest,
    use_case: ApplySelectionActionUseCase = Depends(ApplySelectionActionUseCase.depends),
) -> SelectionStateSchema:
    state = await use_case.apply(
        day=request.date,
        state=SelectionState(
            selected_seats=tuple(request.state.selected_seats),
            quantity_input=request.state.quantity_input,
        ),
        action=SelectionAction(request.action),
        seat_number=request.seat_number,
        quantity_input=request.quantity_input,
    )
    return SelectionStateSchema(
        selected_seats=list(state.selected_seats), quantity_input=state.quantity_input
    )


@router.put('/price/{day}')
@Logger.io
async def set_daily_price(
    day: date,
    request: DailyPriceRequest,
    use_case: SetDailyPriceUseCase = Depends(SetDailyPriceUseCase.depends),
) -> DailyPriceResponse:
    daily_price = await use_case.set_price(day=day, price=request.price)
    return DailyPriceResponse(date=daily_price.date, price=daily_price.price)


@router.get('/{booking_id}')
@Logger.io
async def get_booking(
    booking_id: str,
    use_case: GetBookingUseCase = Depends(GetBookingUseCase.depends),
) -> BookingResponse:
    booking = await use_case.get_booking(booking_id=booking_id)
    return BookingResponse.from_entity(booking)


@router.delete('/{booking_id}/seat/{seat_number}')
@Logger.io
async def remove_booking_seat(
    booking_id: str,
    seat_number: int,
    use_case: RemoveBookingSeatUseCase = Depends(RemoveBookingSeatUseCase.depends),
) -> RemoveSeatResponse:
    result = await use_case.remove_seat(booking_id=booking_id, seat_number=seat_number)
    return RemoveSeatResponse(
        booking_id=result.booking_id,
        seat_number=result.seat_number,
        booking_deleted=result.booking_deleted,
        booking=BookingResponse.from_entity(result.booking) if result.booking else None,
    )


@router.patch('/{booking_id}/seat/{seat_number}')
@Logger.io
async def edit_seat_price(
    booking_id: str,
    seat_number: int,
    request: EditSeatPriceRequest,
    use_case: EditSeatPriceUseCase = Depends(EditSeatPriceUseCase.depends),
) -> BookingResponse:
    booking = await use_case.edit_seat_price(
        booking_id=booking_id, seat_number=seat_number, new_price=request.price
    )
    return BookingResponse.from_entity(booking)
