"""Selection Mode Enum"""

from enum import StrEnum


class SeatSelectionMode(StrEnum):
    """How seats are chosen for a new booking"""

    MANUAL = 'manual'  # operator picked explicit seat numbers
    AUTO_ASSIGN = 'auto_assign'  # lowest N free seat numbers
