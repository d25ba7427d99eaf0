"""
Contains the exception raised for validation failures
"""
from typing import Iterable, Optional


class ValidationError(Exception):
    """
    Raised by `exception_reporting` and by `ValidationChain.throw_on_error`. `message` is the failure which
    triggered the raise, `errors` holds every message known at that point.
    """

    def __init__(self, message: str, errors: Optional[Iterable[str]] = None):
        super().__init__(message)
        self.message = message
        self.errors: tuple[str, ...] = tuple(errors) if errors is not None else (message,)

    def __str__(self):
        return self.message
