"""
Booking Repository Interface

Persists booking records under ``bookings/{id}`` in the external store.
"""

from abc import ABC, abstractmethod
from typing import List

from src.service.shared_kernel.domain.entity.booking_entity import Booking


class IBookingRepo(ABC):
    @abstractmethod
    async def get_all(self) -> List[Booking]:
        pass

    @abstractmethod
    async def save(self, *, booking: Booking) -> Booking:
        """Create or fully replace the record stored under the booking's id."""
        pass

    @abstractmethod
    async def delete(self, *, booking_id: str) -> None:
        pass
