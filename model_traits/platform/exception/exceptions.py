from typing import Any


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int = 500) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class HashStrategyError(CustomBaseError):
    """The hash primitive refused or failed to hash a value; aborts the save"""

    def __init__(self, message: str) -> None:
        super().__init__(message, 500)


class ModelValidationError(CustomBaseError):
    """Model attributes broke their declared rules; aborts the save"""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        self.errors = errors or []
        super().__init__(message, 422)
