"""Shared Kernel Enums"""

from src.service.shared_kernel.domain.enum.selection_mode import SeatSelectionMode

__all__ = ['SeatSelectionMode']
