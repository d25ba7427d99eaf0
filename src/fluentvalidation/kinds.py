"""
Contains the closed set of subject kinds. A subject is classified once when its chain is created and the type
predicates dispatch on that kind.
"""
import datetime
import inspect
import numbers
from concurrent.futures import Future
from enum import Enum
from typing import Any

from .types import UNDEFINED


class SubjectKind(str, Enum):
    """
    The kind of a subject value
    """

    UNDEFINED = "undefined"
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    TEXT = "text"
    SEQUENCE = "sequence"
    DATE = "date"
    FAULT = "fault"
    AWAITABLE = "awaitable"
    CALLABLE = "callable"
    OTHER = "other"


PRIMITIVE_KINDS = frozenset({SubjectKind.BOOLEAN, SubjectKind.NUMBER, SubjectKind.TEXT})


# pylint: disable=too-many-return-statements
def classify(value: Any) -> SubjectKind:
    """
    Returns the kind of `value`. The checks are ordered: `bool` is checked before numbers because it subclasses
    `int`.
    """
    if value is UNDEFINED:
        return SubjectKind.UNDEFINED
    if value is None:
        return SubjectKind.NULL
    if isinstance(value, bool):
        return SubjectKind.BOOLEAN
    if isinstance(value, numbers.Number):
        return SubjectKind.NUMBER
    if isinstance(value, str):
        return SubjectKind.TEXT
    if isinstance(value, (list, tuple)):
        return SubjectKind.SEQUENCE
    if isinstance(value, datetime.date):
        return SubjectKind.DATE
    if isinstance(value, BaseException):
        return SubjectKind.FAULT
    if inspect.isawaitable(value) or isinstance(value, Future):
        return SubjectKind.AWAITABLE
    if callable(value):
        return SubjectKind.CALLABLE
    return SubjectKind.OTHER
