"""
Filters for dropping missing values from iterables.
"""

from typing import Any, Iterable, List, Optional, TypeVar

T = TypeVar('T')


def filter_nullish(iterable: Iterable[Optional[T]]) -> List[T]:
    """Drop None values."""
    return [value for value in iterable if value is not None]


def filter_falsey(iterable: Iterable[Any], remove_zero_and_empty_string: bool = False) -> List[Any]:
    """
    Drop None and False values.
    
    Args:
        iterable: Values to filter
        remove_zero_and_empty_string: Drop every falsy value, including 0 and ""
    """
    if remove_zero_and_empty_string:
        return [value for value in iterable if value]
    return [value for value in iterable if value is not None and value is not False]
