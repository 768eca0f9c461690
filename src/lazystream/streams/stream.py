"""
Lazy, single-pass streams.
"""

from collections import deque
from typing import (
    Any, Callable, Iterable, Iterator, List, Optional,
    TypeVar, Tuple, TYPE_CHECKING
)

from lazystream.streams.generators import numeric_range, require_index
from lazystream.streams.operators import (
    StreamOperator, MapOperator, FilterOperator, FlatMapOperator,
    TakeOperator, DropOperator, TakeWhileOperator, DropWhileOperator,
    StepOperator, SortOperator, ReverseOperator, ShuffleOperator,
    DistinctOperator, InsertAtOperator, MergeOperator, MISSING, materialize
)
from lazystream.streams.source import adapt, iter_items, iter_keys, iter_values

if TYPE_CHECKING:
    from lazystream.streams.partition import PartitionStream

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')


class Stream(Iterator[T]):
    """
    A lazy, pull-based cursor over a sequence.

    A stream is its own iterator: ``next(stream)`` pulls one element and
    ``for``/``list`` drain what remains. Every transformation returns a new
    stream that pulls from this one only when it is itself pulled, so a
    partially consumed child leaves the rest of the parent in place.

    ``sorted``, ``reverse``, ``distinct``, ``shuffle`` and a negative
    ``step`` are eager: they materialize the remaining elements on their
    first pull. ``collect_stream`` materializes immediately.
    """

    def __init__(self, source: Any = ()):
        """
        Initialize stream.

        Args:
            source: Iterable, iterator, mapping (streams its items) or stream
        """
        self._iterator = adapt(source)

    def __iter__(self) -> 'Stream[T]':
        return self

    def __next__(self) -> T:
        return next(self._iterator)

    def _derive(self, operator: StreamOperator) -> 'Stream[Any]':
        return Stream(operator.apply(self))

    # Transformation operators

    def filter(self, predicate: Callable[[T], Any]) -> 'Stream[T]':
        """Keep only elements matching predicate."""
        return self._derive(FilterOperator(predicate))

    def map(self, func: Callable[[T], U]) -> 'Stream[U]':
        """Apply function to each element."""
        return self._derive(MapOperator(func))

    def flat_map(self, func: Optional[Callable[[T], Any]] = None) -> 'Stream[Any]':
        """
        Stream the members of each element (or of ``func(element)``).

        Non-iterable results and text are yielded as single items.
        """
        return self._derive(FlatMapOperator(func))

    def take(self, n: int) -> 'Stream[T]':
        """Take at most n elements."""
        return self._derive(TakeOperator(n))

    def take_while(self, predicate: Callable[[T], Any]) -> 'Stream[T]':
        """
        Take elements while predicate holds.

        The first element failing the predicate is pulled from this stream
        and discarded.
        """
        return self._derive(TakeWhileOperator(predicate))

    def take_until(self, predicate: Callable[[T], Any]) -> 'Stream[T]':
        """Take elements until predicate holds, discarding the matching element."""
        return self._derive(TakeWhileOperator(lambda item: not predicate(item)))

    def drop(self, n: int) -> 'Stream[T]':
        """Skip n elements."""
        return self._derive(DropOperator(n))

    def drop_while(self, predicate: Callable[[T], Any]) -> 'Stream[T]':
        """Skip elements while predicate holds."""
        return self._derive(DropWhileOperator(predicate))

    def drop_until(self, predicate: Callable[[T], Any]) -> 'Stream[T]':
        """Skip elements until predicate holds."""
        return self._derive(DropWhileOperator(lambda item: not predicate(item)))

    def step(self, n: int) -> 'Stream[T]':
        """
        Yield every n-th element.

        ``step(2)`` over 0..4 yields 1, 3. A negative step walks the
        (materialized) remainder backwards: ``step(-2)`` over 0..4 yields 3, 1.
        """
        return self._derive(StepOperator(n))

    def sorted(self,
               comparator: Optional[Callable[[T, T], int]] = None,
               *,
               key: Optional[Callable[[T], Any]] = None,
               reverse: bool = False) -> 'Stream[T]':
        """Sort elements (eager). Natural order unless a comparator or key is given."""
        return self._derive(SortOperator(comparator, key=key, reverse=reverse))

    def reverse(self) -> 'Stream[T]':
        """Reverse elements (eager)."""
        return self._derive(ReverseOperator())

    def distinct(self) -> 'Stream[T]':
        """Remove duplicate elements, keeping first occurrences (eager)."""
        return self._derive(DistinctOperator())

    def shuffle(self) -> 'Stream[T]':
        """Randomly permute elements (eager)."""
        return self._derive(ShuffleOperator())

    def add(self, *items: Any) -> 'Stream[Any]':
        """Append items to the end."""
        return self._derive(MergeOperator((items,)))

    def insert(self, *items: Any) -> 'Stream[Any]':
        """Prepend items to the start."""
        return self._derive(InsertAtOperator(0, items))

    def insert_at(self, index: int, *items: Any) -> 'Stream[Any]':
        """Insert items after ``index`` elements, or at the end if the stream is shorter."""
        return self._derive(InsertAtOperator(index, items))

    def merge(self, *iterables: Iterable[Any]) -> 'Stream[Any]':
        """Append the elements of each iterable, in order."""
        return self._derive(MergeOperator(iterables))

    def collect_stream(self) -> 'Stream[T]':
        """Drain into a snapshot now and return a new stream over it."""
        return Stream(materialize(self, "collect_stream"))

    def entries(self) -> 'Stream[Tuple[int, T]]':
        """Pair each element with its index in consumption order."""
        return Stream(enumerate(self))

    def partition(self, key_func: Callable[[T], K]) -> 'PartitionStream[K, T]':
        """Group elements by key into independently consumable streams."""
        from lazystream.streams.partition import PartitionStream
        return PartitionStream(self, key_func)

    def unzip(self) -> 'PartitionStream[str, Any]':
        """
        Split a stream of pairs into ``"key"`` and ``"value"`` streams.
        """
        from lazystream.streams.partition import PartitionStream
        tagged = self.flat_map(lambda pair: (("key", pair[0]), ("value", pair[1])))
        return PartitionStream(
            tagged,
            key_func=lambda tagged_item: tagged_item[0],
            value_func=lambda tagged_item: tagged_item[1],
            keys=("key", "value"),
        )

    # Terminal operators

    def any(self, predicate: Callable[[T], Any]) -> bool:
        """Check if any element matches predicate."""
        for item in self:
            if predicate(item):
                return True
        return False

    some = any

    def every(self, predicate: Callable[[T], Any]) -> bool:
        """Check if all elements match predicate."""
        for item in self:
            if not predicate(item):
                return False
        return True

    all = every

    def none(self, predicate: Callable[[T], Any]) -> bool:
        """Check if no element matches predicate."""
        return not self.any(predicate)

    def includes(self, *values: Any) -> bool:
        """Check if the stream contains any of the values (True if none given)."""
        if not values:
            return True
        for item in self:
            if item in values:
                return True
        return False

    contains = includes
    has = includes

    def includes_all(self, *values: Any) -> bool:
        """Check if the stream contains all of the values."""
        remaining = list(values)
        if not remaining:
            return True
        for item in self:
            remaining = [value for value in remaining if value != item]
            if not remaining:
                return True
        return False

    contains_all = includes_all
    has_all = includes_all

    def intersects(self, *iterables: Iterable[Any]) -> bool:
        """Check if any element appears in any of the iterables (True if none given)."""
        if not iterables:
            return True
        others = [value for iterable in iterables for value in adapt(iterable)]
        return self.includes(*others) if others else False

    def count(self, predicate: Optional[Callable[[T], Any]] = None) -> int:
        """Count elements, or only those matching predicate."""
        if predicate is None:
            return sum(1 for _ in self)
        return sum(1 for item in self if predicate(item))

    def length(self) -> int:
        """Count elements."""
        return self.count()

    size = length

    def at(self, index: int, fallback: Optional[Callable[[], Any]] = None) -> Any:
        """
        Get the element at ``index``.

        Negative indices count from the end. Out-of-range indices return
        ``fallback()`` when given, otherwise None. An in-range None element
        is returned as is.

        Raises:
            InvalidArgument: index is not an integer
        """
        index = require_index(index)

        if index >= 0:
            item = next(DropOperator(index).apply(self), MISSING)
        else:
            # Only the trailing -index elements need to be kept
            window = deque(self, maxlen=-index)
            item = window[0] if len(window) == -index else MISSING

        if item is MISSING:
            return fallback() if fallback is not None else None
        return item

    def collect(self) -> List[T]:
        """Collect all elements into a list."""
        return list(self)

    def first(self, default: Optional[T] = None) -> Optional[T]:
        """Get first element."""
        return next(self, default)

    def reduce(self, func: Callable[[U, T], U], initial: U) -> U:
        """Reduce stream to single value."""
        result = initial
        for item in self:
            result = func(result, item)
        return result

    def foreach(self, func: Callable[[T], None]) -> None:
        """Apply function to each element."""
        for item in self:
            func(item)

    # Factory methods

    @classmethod
    def empty(cls) -> 'Stream[Any]':
        """Create an empty stream."""
        return cls(())

    @classmethod
    def of(cls, *items: T) -> 'Stream[T]':
        """Create stream of the given items."""
        return cls(items)

    @classmethod
    def from_iterable(cls, source: Any) -> 'Stream[Any]':
        """
        Create stream from a source.

        Sequences stream their elements, mappings their ``(key, value)``
        items, and streams or iterators their remaining elements.
        """
        return cls(source)

    @classmethod
    def values(cls, source: Any, step: Optional[int] = None) -> 'Stream[Any]':
        """Stream the values of a sequence, mapping or record."""
        return cls._keyed_view(iter_values(source), step)

    @classmethod
    def keys(cls, source: Any, step: Optional[int] = None) -> 'Stream[Any]':
        """Stream the indices of a sequence, or the keys of a mapping or record."""
        return cls._keyed_view(iter_keys(source), step)

    @classmethod
    def items(cls, source: Any, step: Optional[int] = None) -> 'Stream[Tuple[Any, Any]]':
        """Stream ``(index, value)`` or ``(key, value)`` pairs of a source."""
        return cls._keyed_view(iter_items(source), step)

    @classmethod
    def _keyed_view(cls, iterator: Iterator[Any], step: Optional[int]) -> 'Stream[Any]':
        if step is None:
            return cls(iterator)
        return cls(iterator).step(step)

    @classmethod
    def range(cls, start: float, end: Optional[float] = None,
              step: Optional[float] = None) -> 'Stream[float]':
        """
        Create stream of numbers.

        ``range(3)`` yields 0, 1, 2; ``range(3, 1)`` yields 3, 2;
        ``range(0, 6, -2)`` yields 6, 4, 2. Fractional bounds and steps are
        supported.
        """
        return cls(numeric_range(start, end, step))

    @classmethod
    def zip(cls, first: Any, second: Any) -> 'Stream[Tuple[Any, Any]]':
        """
        Pair up elements of two sources, stopping at the shorter one.

        Sources are pulled in argument order: when ``first`` is the longer
        one, the element pulled from it as ``second`` runs out is discarded.
        """
        return cls(zip(adapt(first), adapt(second)))
