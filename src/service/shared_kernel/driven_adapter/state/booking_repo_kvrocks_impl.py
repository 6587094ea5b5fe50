from typing import List

from src.platform.logging.loguru_io import Logger
from src.platform.state.kvrocks_client import kvrocks_client
from src.service.shared_kernel.app.interface.i_booking_repo import IBookingRepo
from src.service.shared_kernel.domain.entity.booking_entity import Booking
from src.service.shared_kernel.domain.value_object.store_path import BOOKINGS
from src.service.shared_kernel.driven_adapter.state.key_str_generator import make_collection_key
from src.service.shared_kernel.driven_adapter.state.store_operation import store_operation
from src.service.shared_kernel.driven_adapter.state.store_record_codec import (
    decode_booking,
    dumps,
    encode_booking,
    loads,
)


class BookingRepoKvrocksImpl(IBookingRepo):
    """Bookings as JSON records in the ``bookings`` hash, one field per booking id."""

    def __init__(self) -> None:
        self._key = make_collection_key(collection=BOOKINGS)

    @Logger.io
    async def get_all(self) -> List[Booking]:
        with store_operation('bookings.get_all'):
            records = await kvrocks_client.get_client().hgetall(self._key)  # type: ignore[misc]
        return [decode_booking(loads(raw)) for raw in records.values()]

    @Logger.io
    async def save(self, *, booking: Booking) -> Booking:
        with store_operation('bookings.save'):
            await kvrocks_client.get_client().hset(  # type: ignore[misc]
                self._key, booking.id, dumps(encode_booking(booking))
            )
        return booking

    @Logger.io
    async def delete(self, *, booking_id: str) -> None:
        with store_operation('bookings.delete'):
            await kvrocks_client.get_client().hdel(self._key, booking_id)  # type: ignore[misc]
