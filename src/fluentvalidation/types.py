"""
Contains the types used in the fluent validation package
"""
from typing import Any, Callable, Final, TypeAlias


class _Undefined:
    """
    Marks the absence of a subject. Python has no `undefined`, so `validate()` called without a value wraps this
    sentinel instead.
    """

    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED: Final = _Undefined()
ReportFunction: TypeAlias = Callable[[str], None]
PredicateFunction: TypeAlias = Callable[[Any], Any]
