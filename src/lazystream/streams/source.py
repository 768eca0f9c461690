"""
Source adapters: turn supported inputs into iterators.
"""

import dataclasses
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Dict

TEXT_TYPES = (str, bytes, bytearray)


def adapt(source: Any) -> Iterator:
    """
    Normalize a source into an iterator.
    
    Iterators (including streams) are used as-is, so they continue from their
    current position. Mappings produce their ``(key, value)`` items; any other
    iterable produces its elements in order.
    """
    if isinstance(source, Iterator):
        return source
    if isinstance(source, Mapping):
        return iter(source.items())
    if isinstance(source, Iterable):
        return iter(source)
    raise TypeError(f"Cannot stream object of type {type(source).__name__}")


def is_record(source: Any) -> bool:
    """Check if ``source`` is a keyed record (dataclass instance or plain object)."""
    if isinstance(source, (Iterable, type)):
        return False
    return dataclasses.is_dataclass(source) or hasattr(source, '__dict__')


def record_fields(record: Any) -> Dict[str, Any]:
    """Field names and values of a record in declaration order."""
    if dataclasses.is_dataclass(record):
        return {f.name: getattr(record, f.name) for f in dataclasses.fields(record)}
    return dict(vars(record))


def iter_values(source: Any) -> Iterator:
    if isinstance(source, Mapping):
        return iter(source.values())
    if is_record(source):
        return iter(record_fields(source).values())
    return adapt(source)


def iter_keys(source: Any) -> Iterator:
    if isinstance(source, Mapping):
        return iter(source.keys())
    if is_record(source):
        return iter(record_fields(source).keys())
    return (index for index, _ in enumerate(adapt(source)))


def iter_items(source: Any) -> Iterator:
    if isinstance(source, Mapping):
        return iter(source.items())
    if is_record(source):
        return iter(record_fields(source).items())
    return enumerate(adapt(source))


def flatten_member(value: Any) -> Iterator:
    """
    Expand one ``flat_map`` result.
    
    Non-text iterables yield their members; everything else (including
    strings) is yielded whole.
    """
    if isinstance(value, TEXT_TYPES) or not isinstance(value, (Iterable, Iterator)):
        return iter((value,))
    return adapt(value)
