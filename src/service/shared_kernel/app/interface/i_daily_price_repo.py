"""
Daily Price Repository Interface

Persists per-day price overrides under ``dailyPrices/{YYYY-MM-DD}``.
"""

from abc import ABC, abstractmethod
from typing import List

from src.service.shared_kernel.domain.entity.daily_price_entity import DailyPrice


class IDailyPriceRepo(ABC):
    @abstractmethod
    async def get_all(self) -> List[DailyPrice]:
        pass

    @abstractmethod
    async def upsert(self, *, daily_price: DailyPrice) -> DailyPrice:
        """At most one entry per calendar day: an existing entry is overwritten."""
        pass
