"""
Numeric generators and argument validation shared by stream operations.
"""

import numbers
from typing import Any, Iterator, Optional, Union

from lazystream.errors import InvalidArgument

Number = Union[int, float]


def is_integer(value: Any) -> bool:
    """Check for an integral number; ``bool`` does not count."""
    if isinstance(value, bool):
        return False
    if isinstance(value, numbers.Integral):
        return True
    return isinstance(value, float) and value.is_integer()


def require_count(value: Any, name: str = "count") -> int:
    """Validate a non-negative integer count."""
    if not is_integer(value) or value < 0:
        raise InvalidArgument(f"{name} must be a non-negative integer, got {value!r}")
    return int(value)


def require_step(value: Any, name: str = "step") -> int:
    """Validate a non-zero integer step."""
    if not is_integer(value) or value == 0:
        raise InvalidArgument(f"{name} must be a non-zero integer, got {value!r}")
    return int(value)


def require_index(value: Any, name: str = "index") -> int:
    if not is_integer(value):
        raise InvalidArgument(f"{name} must be an integer, got {value!r}")
    return int(value)


def numeric_range(start: Number, end: Optional[Number] = None,
                  step: Optional[Number] = None) -> Iterator[Number]:
    """
    Generate a numeric range.
    
    With one argument the range is ``0..start``. When ``end < start`` and no
    step is given the range runs backwards. A positive step walks up from the
    lower bound, excluding the upper one; a negative step walks down from the
    upper bound, excluding the lower one. Fractional bounds and steps are
    accumulated by addition without rounding.
    
    Raises:
        InvalidArgument: ``step`` is zero (raised on call, not on first pull)
    """
    if end is None:
        start, end = 0, start
    if step is None:
        step = 1 if end >= start else -1
    elif step == 0:
        raise InvalidArgument("range step must be non-zero")
    
    low, high = min(start, end), max(start, end)
    return _walk(low, high, step)


def _walk(low: Number, high: Number, step: Number) -> Iterator[Number]:
    if step > 0:
        value = low
        while value < high:
            yield value
            value += step
    else:
        value = high
        while value > low:
            yield value
            value += step
