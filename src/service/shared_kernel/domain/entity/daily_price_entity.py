from datetime import date

import attrs


@attrs.define(frozen=True)
class DailyPrice:
    """Per-seat price override for one calendar day."""

    date: date
    price: float
