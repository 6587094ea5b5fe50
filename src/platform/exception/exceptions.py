from typing import Any


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(
        self, message: str, status_code: int, details: dict[str, Any] | None = None
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.details: dict[str, Any] = details or {}
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(
        self, message: str, status_code: int = 400, details: dict[str, Any] | None = None
    ) -> None:
        super().__init__(message, status_code, details)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, 409, details)


# ============================ Booking / Pricing ============================


class MissingNameError(DomainError):
    def __init__(self, message: str = 'A booking name is required') -> None:
        super().__init__(message)


class InvalidQuantityError(DomainError):
    def __init__(self, message: str = 'Quantity must be a positive whole number') -> None:
        super().__init__(message)


class InvalidPriceError(DomainError):
    def __init__(self, message: str = 'Price must be a finite number greater than or equal to 0') -> None:
        super().__init__(message)


class InvalidPercentageError(DomainError):
    def __init__(self, message: str = 'Commission percentage must be between 0 and 100') -> None:
        super().__init__(message)


class InsufficientCapacityError(ConflictError):
    def __init__(self, *, requested: int, available: int) -> None:
        self.requested = requested
        self.available = available
        super().__init__(
            f'Only {available} seat(s) available, but {requested} were requested',
            details={'requested': requested, 'available': available},
        )


class SeatConflictError(ConflictError):
    """Some manually selected seats were booked since the selection was made."""

    def __init__(self, *, available_seats: list[int], unavailable_seats: list[int]) -> None:
        self.available_seats = available_seats
        self.unavailable_seats = unavailable_seats
        super().__init__(
            f'Seat(s) {", ".join(str(s) for s in unavailable_seats)} are no longer available; '
            'confirm again with the remaining seats',
            details={
                'available_seats': available_seats,
                'unavailable_seats': unavailable_seats,
            },
        )


# ============================ Store ============================


class StoreUnavailableError(CustomBaseError):
    def __init__(self, message: str, *, reload_required: bool = False) -> None:
        self.reload_required = reload_required
        details = {'reload_required': True} if reload_required else None
        super().__init__(message, 503, details)
