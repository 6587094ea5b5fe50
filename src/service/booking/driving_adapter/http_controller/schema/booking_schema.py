from datetime import date
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, StrictFloat, StrictInt, StrictStr

from src.service.shared_kernel.domain.entity.booking_entity import Booking


# Quantities and prices arrive from a free-text input, so numeric strings are accepted too
NumberInput = StrictInt | StrictFloat | StrictStr


class BookingCreateRequest(BaseModel):
    date: date
    user_name: str = ''
    seat_numbers: List[int] = []  # For manual: [3, 4], For auto_assign: []
    quantity: Optional[NumberInput] = None  # For auto_assign; optional check for manual

    model_config = {
        'json_schema_extra': {
            'examples': [
                {'date': '2025-06-01', 'user_name': 'Alice', 'quantity': 5},
                {'date': '2025-06-01', 'user_name': 'Bob', 'seat_numbers': [10, 11]},
            ]
        }
    }


class BookingResponse(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'id': '01936d8f-5e73-7c4e-a9c5-123456789abc',  # UUID7
                'date': '2025-06-01',
                'seats': [1, 2, 3],
                'user_name': 'Alice',
                'seat_prices': {'1': 25.0, '2': 25.0, '3': 25.0},
            }
        },
    }

    id: str
    date: date
    seats: List[int]
    user_name: str
    seat_prices: Optional[Dict[int, float]] = None

    @classmethod
    def from_entity(cls, booking: Booking) -> 'BookingResponse':
        return cls(
            id=booking.id,
            date=booking.date,
            seats=sorted(booking.seats),
            user_name=booking.user_name,
            seat_prices=booking.seat_prices,
        )


class CreateBookingResponse(BaseModel):
    booking: BookingResponse
    mode: Literal['manual', 'auto_assign']
    total_cost: float


class RemoveSeatResponse(BaseModel):
    booking_id: str
    seat_number: int
    booking_deleted: bool
    booking: Optional[BookingResponse] = None


class EditSeatPriceRequest(BaseModel):
    price: NumberInput

    model_config = {'json_schema_extra': {'example': {'price': 30}}}


class DailyPriceRequest(BaseModel):
    price: NumberInput

    model_config = {'json_schema_extra': {'example': {'price': 30}}}


class DailyPriceResponse(BaseModel):
    date: date
    price: float
