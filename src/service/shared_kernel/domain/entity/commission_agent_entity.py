from datetime import date
import math
from typing import Optional

import attrs

from src.platform.exception.exceptions import InvalidPercentageError, MissingNameError
from src.platform.logging.loguru_io import Logger


@attrs.define
class CommissionAgent:
    """
    An agent paid a percentage of gross profit.

    Without ``applicable_date`` the agent is global and earns on every day; with
    it, only on that one day.
    """

    id: str
    name: str
    percentage: float
    applicable_date: Optional[date] = None

    @property
    def is_global(self) -> bool:
        return self.applicable_date is None

    def applies_to(self, day: date) -> bool:
        return self.applicable_date is None or self.applicable_date == day

    @staticmethod
    def validate_name(name: str) -> str:
        cleaned = name.strip() if name else ''
        if not cleaned:
            raise MissingNameError('Commission agent name is required')
        return cleaned

    @staticmethod
    def validate_percentage(percentage: float) -> float:
        if isinstance(percentage, bool) or not isinstance(percentage, int | float):
            raise InvalidPercentageError()
        if not math.isfinite(percentage) or percentage < 0 or percentage > 100:
            raise InvalidPercentageError()
        return float(percentage)

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        id: str,
        name: str,
        percentage: float,
        applicable_date: Optional[date] = None,
    ) -> 'CommissionAgent':
        return cls(
            id=id,
            name=cls.validate_name(name),
            percentage=cls.validate_percentage(percentage),
            applicable_date=applicable_date,
        )

    @Logger.io
    def update(
        self,
        *,
        name: str,
        percentage: float,
        applicable_date: Optional[date] = None,
    ) -> 'CommissionAgent':
        return attrs.evolve(
            self,
            name=self.validate_name(name),
            percentage=self.validate_percentage(percentage),
            applicable_date=applicable_date,
        )
