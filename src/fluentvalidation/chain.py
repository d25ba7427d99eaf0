"""
Contains the ValidationChain which wraps a single value and offers chainable predicates on it.
"""
import json
import logging
import math
import re
from collections.abc import Collection, Sized
from re import Pattern
from typing import Any, Optional

from .errors import ValidationError
from .kinds import PRIMITIVE_KINDS, SubjectKind, classify
from .reporting import DEFAULT_REPORTING
from .types import UNDEFINED, PredicateFunction, ReportFunction
from .utils.arguments import loosely_equal, satisfies_type, target_values, to_number

logger = logging.getLogger(__name__)

_OBJECTS_DO_NOT_MATCH = "Validation failed: objects do not match"
_NOT_A_NUMBER = "Validation failed: object is not a number"


def _remainder(number: float) -> float:
    """Remainder of a division by two; NaN for NaN and infinite values"""
    if not math.isfinite(number):
        return math.nan
    return number % 2


# pylint: disable=too-many-public-methods
class ValidationChain:
    """
    Wraps a subject value. Every predicate evaluates a condition against the subject, records a message if the
    condition fails and returns the chain itself, so checks can be chained:
    ```
    errors = validate(4).is_number().is_even().is_positive().get_errors()
    ```
    Failures are recorded in `errors` and passed to the reporting function of the chain. `not_()` inverts the
    polarity of all following predicates until it is called again.
    """

    def __init__(self, subject: Any = UNDEFINED, report: Optional[ReportFunction] = None):
        self._subject = subject
        self._kind = classify(subject)
        self._negated = False
        self._errors: list[str] = []
        self.report: ReportFunction = DEFAULT_REPORTING
        self.reporting(report)

    def __repr__(self):
        return f"ValidationChain({self._subject!r}, negated={self._negated}, errors={len(self._errors)})"

    @property
    def subject(self) -> Any:
        """The validated value"""
        return self._subject

    @property
    def kind(self) -> SubjectKind:
        """The kind the subject got classified as"""
        return self._kind

    @property
    def negated(self) -> bool:
        """True if the predicates are currently inverted"""
        return self._negated

    @property
    def errors(self) -> tuple[str, ...]:
        """The accumulated failure messages (equivalent to `get_errors()`)"""
        return tuple(self._errors)

    def _assert(self, failed: bool, message: str) -> None:
        """
        The single point where negation, accumulation and reporting come together. `failed` is the outcome of a
        predicate under normal (non-negated) semantics.
        """
        if failed != self._negated:
            self._errors.append(message)
            logger.debug("Validation of %r failed: %s", self._subject, message)
            self.report(message)

    def reporting(self, report: Any) -> "ValidationChain":
        """
        Replaces the reporting function. Anything that is not callable resets it to the default (logging).
        """
        self.report = report if callable(report) else DEFAULT_REPORTING
        return self

    def not_(self) -> "ValidationChain":
        """Toggles the negation of all following predicates"""
        self._negated = not self._negated
        return self

    def get_errors(self) -> tuple[str, ...]:
        """Returns the accumulated failure messages"""
        return tuple(self._errors)

    def has_errors(self) -> bool:
        """True if at least one predicate failed"""
        return len(self._errors) != 0

    def check(self) -> bool:
        """True if no predicate failed"""
        return len(self._errors) == 0

    def clear(self) -> "ValidationChain":
        """
        Removes the accumulated messages. Negation and reporting function stay as they are.
        """
        self._errors = []
        return self

    def throw_on_error(self) -> "ValidationChain":
        """
        Raises a ValidationError with the first accumulated message if there is any.
        """
        if len(self._errors) != 0:
            raise ValidationError(self._errors[0], self._errors)
        return self

    # custom

    def is_valid(self, predicate: PredicateFunction, message: Optional[str] = None) -> "ValidationChain":
        """
        Fails unless `predicate(subject)` returns exactly True. Exceptions raised by `predicate` are not caught.
        """
        self._assert(predicate(self._subject) is not True, message or "Validation failed: custom validation function")
        return self

    # membership

    def is_one_of(self, *values: Any, message: Optional[str] = None) -> "ValidationChain":
        """
        Fails if the subject loosely equals none of `values`. Accepts `is_one_of(1, 2)` as well as
        `is_one_of([1, 2])`. Without any values the check passes.
        """
        targets = target_values(values)
        failed = len(values) > 0 and not any(loosely_equal(self._subject, target) for target in targets)
        self._assert(failed, message or _OBJECTS_DO_NOT_MATCH)
        return self

    def is_none_of(self, *values: Any, message: Optional[str] = None) -> "ValidationChain":
        """
        Fails if the subject loosely equals at least one of `values`.
        """
        failed = any(loosely_equal(self._subject, target) for target in target_values(values))
        self._assert(failed, message or _OBJECTS_DO_NOT_MATCH)
        return self

    def contains(self, value: Any, message: Optional[str] = None) -> "ValidationChain":
        """
        Fails unless the subject holds an item loosely equal to `value`. Strings are searched for `str(value)` as a
        substring. Empty collections and subjects which are no collection at all fail.
        """
        if self._kind is SubjectKind.TEXT:
            failed = str(value) not in self._subject
        elif self._kind is SubjectKind.SEQUENCE or isinstance(self._subject, Collection):
            failed = not any(loosely_equal(item, value) for item in self._subject)
        else:
            failed = True
        self._assert(failed, message or "Validation failed: object does not contain target")
        return self

    # equality

    def is_equal_to(
        self, value: Any, case_insensitive: bool = False, message: Optional[str] = None
    ) -> "ValidationChain":
        """
        Compares the string forms of subject and `value`, optionally ignoring the case. Raises TypeError if
        `case_insensitive` is not a bool, e.g. when a message is passed in its place.
        """
        if not isinstance(case_insensitive, bool):
            raise TypeError(f"case_insensitive must be a bool, got {case_insensitive!r}")
        left = str(self._subject)
        right = str(value)
        if case_insensitive:
            left = left.casefold()
            right = right.casefold()
        self._assert(left != right, message or _OBJECTS_DO_NOT_MATCH)
        return self

    # types

    def _is_kind(self, kind: SubjectKind, message: str) -> "ValidationChain":
        self._assert(self._kind is not kind, message)
        return self

    def is_string(self, message: Optional[str] = None) -> "ValidationChain":
        """Fails unless the subject is a `str`"""
        return self._is_kind(SubjectKind.TEXT, message or "Validation failed: object is not a string")

    def is_number(self, message: Optional[str] = None) -> "ValidationChain":
        """Fails unless the subject is a number. Booleans are not numbers."""
        return self._is_kind(SubjectKind.NUMBER, message or _NOT_A_NUMBER)

    def is_boolean(self, message: Optional[str] = None) -> "ValidationChain":
        """Fails unless the subject is a `bool`"""
        return self._is_kind(SubjectKind.BOOLEAN, message or "Validation failed: object is not a boolean")

    def is_function(self, message: Optional[str] = None) -> "ValidationChain":
        """Fails unless the subject is callable"""
        return self._is_kind(SubjectKind.CALLABLE, message or "Validation failed: object is not a function")

    def is_array(self, message: Optional[str] = None) -> "ValidationChain":
        """Fails unless the subject is a `list` or a `tuple`"""
        return self._is_kind(SubjectKind.SEQUENCE, message or "Validation failed: object is not an array")

    def is_date(self, message: Optional[str] = None) -> "ValidationChain":
        """Fails unless the subject is a `datetime.date` or `datetime.datetime`"""
        return self._is_kind(SubjectKind.DATE, message or "Validation failed: object is not a date")

    def is_error(self, message: Optional[str] = None) -> "ValidationChain":
        """Fails unless the subject is an exception instance"""
        return self._is_kind(SubjectKind.FAULT, message or "Validation failed: object is not an error")

    def is_promise(self, message: Optional[str] = None) -> "ValidationChain":
        """Fails unless the subject is awaitable or a `concurrent.futures.Future`"""
        return self._is_kind(SubjectKind.AWAITABLE, message or "Validation failed: object is not a promise")

    def is_primitive(self, message: Optional[str] = None) -> "ValidationChain":
        """Fails unless the subject is a number, a string or a boolean"""
        self._assert(
            self._kind not in PRIMITIVE_KINDS, message or "Validation failed: object is not of a primitive type"
        )
        return self

    def is_instance_of(self, expected_type: Any, message: Optional[str] = None) -> "ValidationChain":
        """
        Fails if the subject does not match `expected_type`. Besides plain classes this accepts generics like
        `list[int]` or `dict[str, float]`; every item of a collection gets checked.
        """
        self._assert(
            not satisfies_type(self._subject, expected_type),
            message or "Validation failed: object is not an instance of the given class",
        )
        return self

    # numbers

    def is_positive(self, message: Optional[str] = None) -> "ValidationChain":
        """Fails if the subject, coerced into a number, is zero or less. NaN passes since it compares false."""
        number = to_number(self._subject)
        self._assert(number <= 0, message or _NOT_A_NUMBER)
        return self

    def is_negative(self, message: Optional[str] = None) -> "ValidationChain":
        """Fails if the subject, coerced into a number, is zero or more. NaN passes since it compares false."""
        number = to_number(self._subject)
        self._assert(number >= 0, message or _NOT_A_NUMBER)
        return self

    def is_odd(self, message: Optional[str] = None) -> "ValidationChain":
        """Fails if the subject, coerced into a number, is divisible by two"""
        number = to_number(self._subject)
        self._assert(_remainder(number) == 0, message or "Validation failed: object is not odd")
        return self

    def is_even(self, message: Optional[str] = None) -> "ValidationChain":
        """Fails if the subject, coerced into a number, leaves a remainder when divided by two"""
        number = to_number(self._subject)
        self._assert(_remainder(number) != 0, message or "Validation failed: object is not even")
        return self

    def is_finite(self, message: Optional[str] = None) -> "ValidationChain":
        """Fails if the subject, coerced into a number, is NaN or infinite"""
        self._assert(not math.isfinite(to_number(self._subject)), message or "Validation failed: object is infinite")
        return self

    # nullness

    def is_defined(self, message: Optional[str] = None) -> "ValidationChain":
        """Fails if the chain was created without a subject"""
        self._assert(self._subject is UNDEFINED, message or "Validation failed: object is undefined")
        return self

    def is_defined_and_non_null(self, message: Optional[str] = None) -> "ValidationChain":
        """Fails if the chain has no subject or the subject is None"""
        self._assert(
            self._subject is UNDEFINED or self._subject is None,
            message or "Validation failed: object is undefined or null",
        )
        return self

    def is_null(self, message: Optional[str] = None) -> "ValidationChain":
        """Fails unless the subject is None"""
        self._assert(self._subject is not None, message or "Validation failed: object is not null")
        return self

    # string shaped

    def is_not_null_or_whitespace(self, message: Optional[str] = None) -> "ValidationChain":
        """Fails if the subject is missing, None or blank once stripped"""
        failed = self._kind in (SubjectKind.UNDEFINED, SubjectKind.NULL) or not str(self._subject).strip()
        self._assert(failed, message or "Validation failed: object is null or whitespace")
        return self

    def is_match(self, pattern: "str | Pattern[str]", message: Optional[str] = None) -> "ValidationChain":
        """
        Fails unless `pattern` is found somewhere in `str(subject)`. An invalid pattern counts as a failure.
        """
        try:
            failed = re.search(pattern, str(self._subject)) is None
        except (re.error, TypeError, OverflowError) as error:
            logger.debug("Could not evaluate pattern %r: %s", pattern, error)
            failed = True
        self._assert(failed, message or "Validation failed: object does not match regular expression")
        return self

    def is_json(self, message: Optional[str] = None) -> "ValidationChain":
        """
        Fails unless the subject is a JSON document whose top level is an object, an array or null.
        """
        try:
            failed = not isinstance(json.loads(self._subject), (dict, list, type(None)))
        except (ValueError, TypeError, RecursionError) as error:
            logger.debug("Could not parse %r as JSON: %s", self._subject, error)
            failed = True
        self._assert(failed, message or "Validation failed: object is not valid JSON")
        return self

    def has_length(self, max_length: int, min_length: int = 0, message: Optional[str] = None) -> "ValidationChain":
        """
        Fails if the length of the subject is not within `[min_length, max_length]`. Sized subjects use `len()`,
        everything else the length of its string form. A missing subject (None or UNDEFINED) has no length and fails.
        """
        if self._kind in (SubjectKind.UNDEFINED, SubjectKind.NULL):
            failed = True
        else:
            length = len(self._subject) if isinstance(self._subject, Sized) else len(str(self._subject))
            failed = length > max_length or length < min_length
        self._assert(failed, message or "Validation failed: length does not fall between the given values")
        return self


def validate(subject: Any = UNDEFINED, report: Optional[ReportFunction] = None) -> ValidationChain:
    """
    Creates a new ValidationChain for `subject`. `report` is called for every failed check; it defaults to
    `log_reporting`.
    """
    return ValidationChain(subject, report)
