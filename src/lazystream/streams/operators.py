"""
Stream operators for transformation.

Each operator's ``apply`` returns a generator over the parent iterator, so a
derived stream pulls from its parent only when it is itself pulled. Argument
validation happens in ``__init__`` so bad arguments fail before any pull.
"""

import logging
from abc import ABC, abstractmethod
from functools import cmp_to_key
from itertools import chain
from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple, TypeVar

from lazystream.config import config
from lazystream.errors import InvalidArgument
from lazystream.memory import monitor, MemoryPressureLevel
from lazystream.streams.generators import require_count, require_step
from lazystream.streams.source import adapt, flatten_member

T = TypeVar('T')
U = TypeVar('U')

logger = logging.getLogger(__name__)

MISSING = object()


def materialize(iterator: Iterator[T], operation: str) -> List[T]:
    """
    Drain the rest of ``iterator`` into a list for an eager operation.
    
    Large materializations consult the memory monitor and warn under
    high pressure.
    """
    items = list(iterator)
    logger.debug(f"{operation}: materialized {len(items)} items")
    
    if len(items) >= config.eager_check_threshold:
        level = monitor.check_memory_pressure()
        if level >= MemoryPressureLevel.HIGH:
            logger.warning(
                f"{operation}: holding {len(items)} items in memory "
                f"under {level.name} memory pressure"
            )
    return items


class StreamOperator(ABC):
    """Base class for stream operators."""
    
    @abstractmethod
    def apply(self, iterator: Iterator[T]) -> Iterator[Any]:
        """Apply operator to iterator."""
        pass


class MapOperator(StreamOperator):
    """Map each element to a new value."""
    
    def __init__(self, func: Callable[[T], U]):
        self.func = func
    
    def apply(self, iterator: Iterator[T]) -> Iterator[U]:
        for item in iterator:
            yield self.func(item)


class FilterOperator(StreamOperator):
    """Filter elements by predicate."""
    
    def __init__(self, predicate: Callable[[T], Any]):
        self.predicate = predicate
    
    def apply(self, iterator: Iterator[T]) -> Iterator[T]:
        for item in iterator:
            if self.predicate(item):
                yield item


class FlatMapOperator(StreamOperator):
    """Map each element to zero or more elements.
    
    Text is never split into characters unless the mapping function does so.
    """
    
    def __init__(self, func: Optional[Callable[[T], Any]] = None):
        self.func = func
    
    def apply(self, iterator: Iterator[T]) -> Iterator[Any]:
        for item in iterator:
            result = self.func(item) if self.func is not None else item
            yield from flatten_member(result)


class TakeOperator(StreamOperator):
    """Take first n elements."""
    
    def __init__(self, n: int):
        self.n = require_count(n)
    
    def apply(self, iterator: Iterator[T]) -> Iterator[T]:
        # Count before pulling so element n+1 stays in the parent
        for _ in range(self.n):
            item = next(iterator, MISSING)
            if item is MISSING:
                return
            yield item


class DropOperator(StreamOperator):
    """Skip first n elements."""
    
    def __init__(self, n: int):
        self.n = require_count(n)
    
    def apply(self, iterator: Iterator[T]) -> Iterator[T]:
        for _ in range(self.n):
            if next(iterator, MISSING) is MISSING:
                return
        yield from iterator


class TakeWhileOperator(StreamOperator):
    """Take elements while predicate is true.
    
    The first failing element is consumed from the parent and discarded.
    """
    
    def __init__(self, predicate: Callable[[T], Any]):
        self.predicate = predicate
    
    def apply(self, iterator: Iterator[T]) -> Iterator[T]:
        for item in iterator:
            if self.predicate(item):
                yield item
            else:
                break


class DropWhileOperator(StreamOperator):
    """Drop elements while predicate is true."""
    
    def __init__(self, predicate: Callable[[T], Any]):
        self.predicate = predicate
        self.dropping = True
    
    def apply(self, iterator: Iterator[T]) -> Iterator[T]:
        for item in iterator:
            if self.dropping and self.predicate(item):
                continue
            else:
                self.dropping = False
                yield item


class StepOperator(StreamOperator):
    """Yield every n-th element.
    
    A positive step skips ``n - 1`` elements before each yield. A negative
    step materializes the rest of the stream and walks it backwards.
    """
    
    def __init__(self, n: int):
        self.n = require_step(n)
    
    def apply(self, iterator: Iterator[T]) -> Iterator[T]:
        if self.n < 0:
            items = materialize(iterator, "step")
            yield from items[::-1][-self.n - 1::-self.n]
            return
        
        while True:
            for _ in range(self.n - 1):
                if next(iterator, MISSING) is MISSING:
                    return
            item = next(iterator, MISSING)
            if item is MISSING:
                return
            yield item


class SortOperator(StreamOperator):
    """Sort the remaining elements (eager)."""
    
    def __init__(self,
                 comparator: Optional[Callable[[T, T], int]] = None,
                 key: Optional[Callable[[T], Any]] = None,
                 reverse: bool = False):
        if comparator is not None and key is not None:
            raise InvalidArgument("sorted accepts a comparator or a key, not both")
        self.key = cmp_to_key(comparator) if comparator is not None else key
        self.reverse = reverse
    
    def apply(self, iterator: Iterator[T]) -> Iterator[T]:
        items = materialize(iterator, "sorted")
        items.sort(key=self.key, reverse=self.reverse)
        yield from items


class ReverseOperator(StreamOperator):
    """Reverse the remaining elements (eager)."""
    
    def apply(self, iterator: Iterator[T]) -> Iterator[T]:
        items = materialize(iterator, "reverse")
        yield from reversed(items)


class ShuffleOperator(StreamOperator):
    """Randomly permute the remaining elements (eager)."""
    
    def apply(self, iterator: Iterator[T]) -> Iterator[T]:
        items = materialize(iterator, "shuffle")
        config.get_random().shuffle(items)
        yield from items


class DistinctOperator(StreamOperator):
    """Remove duplicate elements, keeping first occurrences (eager)."""
    
    def apply(self, iterator: Iterator[T]) -> Iterator[T]:
        items = materialize(iterator, "distinct")
        seen = set()
        seen_unhashable = []
        
        for item in items:
            try:
                if item in seen:
                    continue
                seen.add(item)
            except TypeError:
                if item in seen_unhashable:
                    continue
                seen_unhashable.append(item)
            yield item


class InsertAtOperator(StreamOperator):
    """Splice items in after ``index`` elements, or at the end if shorter."""
    
    def __init__(self, index: int, items: Tuple[Any, ...]):
        self.index = require_count(index, "index")
        self.items = items
    
    def apply(self, iterator: Iterator[T]) -> Iterator[Any]:
        for _ in range(self.index):
            item = next(iterator, MISSING)
            if item is MISSING:
                break
            yield item
        yield from self.items
        yield from iterator


class MergeOperator(StreamOperator):
    """Concatenate iterables after the remaining elements."""
    
    def __init__(self, iterables: Iterable[Any]):
        self.iterables = iterables
    
    def apply(self, iterator: Iterator[T]) -> Iterator[Any]:
        # Each source is adapted only when it is reached
        yield from chain(iterator, chain.from_iterable(map(adapt, self.iterables)))
