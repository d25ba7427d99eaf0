"""
Contains helper functions used by the predicates to normalise their arguments and to compare subjects.
"""
import math
import numbers
from typing import Any, Sequence

from typeguard import CollectionCheckStrategy, TypeCheckError, check_type

from ..types import UNDEFINED


def target_values(values: Sequence[Any]) -> tuple[Any, ...]:
    """
    Normalises the positional arguments of a membership predicate. `is_one_of([1, 2])` and `is_one_of(1, 2)` both
    end up as `(1, 2)`: a single list, tuple or set argument is unpacked, otherwise all arguments are the targets.
    """
    if len(values) == 1 and isinstance(values[0], (list, tuple, set, frozenset)):
        return tuple(values[0])
    return tuple(values)


def to_number(value: Any) -> float:
    """
    Coerces `value` into a number. Booleans become 0/1, `None` and blank strings become 0, numeric strings are parsed
    and everything else (including complex numbers) is NaN. Numbers too large for a float become an infinity of the
    same sign.
    """
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, numbers.Number):
        try:
            return float(value)  # type: ignore[arg-type]
        except OverflowError:
            return math.inf if value > 0 else -math.inf  # type: ignore[operator]
        except (TypeError, ValueError):
            return math.nan
    if isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            return 0.0
        try:
            return float(stripped)
        except ValueError:
            return math.nan
    return math.nan


def loosely_equal(left: Any, right: Any) -> bool:
    """
    Compares two values with `==`. If one of them is a string and the other a number (or bool) the string is coerced
    into a number first, so `"2"` loosely equals `2`. `None` and `UNDEFINED` loosely equal each other.
    """
    if left == right:
        return True
    if (left is None or left is UNDEFINED) and (right is None or right is UNDEFINED):
        return True
    for text, other in ((left, right), (right, left)):
        if isinstance(text, str) and isinstance(other, numbers.Number):
            number = to_number(text)
            return not math.isnan(number) and number == to_number(other)
    return False


def satisfies_type(value: Any, expected_type: Any) -> bool:
    """
    Returns True if `value` matches `expected_type`. Plain classes as well as parametrised generics like `list[int]`
    are supported; collections are checked item by item.
    """
    try:
        check_type(value, expected_type, collection_check_strategy=CollectionCheckStrategy.ALL_ITEMS)
    except TypeCheckError:
        return False
    return True
