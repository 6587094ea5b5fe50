from datetime import date
from typing import List, Literal, Optional

from pydantic import BaseModel


class BookedSeatResponse(BaseModel):
    seat_number: int
    booking_id: str
    user_name: str
    price: float


class DateOverviewResponse(BaseModel):
    date: date
    price: float
    default_price: float
    has_price_override: bool
    total_seats: int
    available_count: int
    booked_count: int
    available_seats: List[int]
    booked_seats: List[BookedSeatResponse]
    estimated_profit: float


class CalendarDayResponse(BaseModel):
    date: date
    booked_count: int
    available_count: int
    fully_booked: bool
    partially_booked: bool


class SelectionStateSchema(BaseModel):
    selected_seats: List[int] = []
    quantity_input: str = '1'


class SelectionActionRequest(BaseModel):
    date: date
    state: SelectionStateSchema = SelectionStateSchema()
    action: Literal['toggle_seat', 'change_quantity', 'increment', 'decrement', 'reset']
    seat_number: Optional[int] = None
    quantity_input: Optional[str] = None

    model_config = {
        'json_schema_extra': {
            'example': {
                'date': '2025-06-01',
                'state': {'selected_seats': [3], 'quantity_input': '1'},
                'action': 'toggle_seat',
                'seat_number': 4,
            }
        }
    }
