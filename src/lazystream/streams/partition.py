"""
Demand-driven partitioning of a stream into per-key streams.
"""

import logging
from collections import deque
from typing import Any, Callable, Deque, Dict, Generic, Iterable, Iterator, List, Optional, Set, Tuple, TypeVar

from lazystream.config import config
from lazystream.streams.stream import Stream

T = TypeVar('T')
K = TypeVar('K')

logger = logging.getLogger(__name__)


class PartitionStream(Generic[K, T]):
    """
    Elements of a parent stream grouped by key.

    The parent is pulled only when a key stream runs out of buffered
    elements. Each pulled element is buffered under its own key, so several
    key streams can be consumed in any interleaving while the parent is
    pulled exactly once per element.
    """

    def __init__(self,
                 parent: Stream[Any],
                 key_func: Callable[[Any], K],
                 value_func: Optional[Callable[[Any], T]] = None,
                 keys: Iterable[K] = ()):
        """
        Initialize partitions.

        Args:
            parent: Stream to partition
            key_func: Function deciding each element's key
            value_func: Function applied to elements before buffering
            keys: Keys to register up front, even if no element has them
        """
        self._parent = parent
        self._key_func = key_func
        self._value_func = value_func
        self._buffers: Dict[K, Deque[T]] = {}
        self._keys: List[K] = []
        self._exhausted = False
        self._warned: Set[K] = set()

        for key in keys:
            self._register(key)

    def _register(self, key: K) -> Deque[T]:
        buffer = deque()
        self._buffers[key] = buffer
        self._keys.append(key)
        logger.debug(f"partition: new key {key!r}")
        return buffer

    def _pull(self) -> bool:
        """Pull one parent element into its key's buffer; False once the parent is exhausted."""
        if self._exhausted:
            return False

        try:
            item = next(self._parent)
        except StopIteration:
            self._exhausted = True
            return False

        key = self._key_func(item)
        buffer = self._buffers.get(key)
        if buffer is None:
            buffer = self._register(key)

        buffer.append(item if self._value_func is None else self._value_func(item))

        if len(buffer) >= config.partition_buffer_warning and key not in self._warned:
            self._warned.add(key)
            logger.warning(
                f"partition: {len(buffer)} unconsumed elements buffered for key {key!r}"
            )
        return True

    def _drain(self, key: K) -> Iterator[T]:
        while True:
            buffer = self._buffers.get(key)
            if buffer:
                yield buffer.popleft()
            elif not self._pull():
                return

    def _enumerate(self) -> Iterator[Tuple[K, Stream[T]]]:
        index = 0
        while True:
            if index < len(self._keys):
                key = self._keys[index]
                index += 1
                yield key, self.get(key)
            elif not self._pull():
                return

    def get(self, key: K) -> Stream[T]:
        """
        Get the stream of elements with ``key``.

        Buffered elements come first; then the parent is pulled until an
        element with this key turns up or the parent is exhausted.
        """
        return Stream(self._drain(key))

    def partitions(self) -> Stream[Tuple[K, Stream[T]]]:
        """
        Stream ``(key, stream)`` pairs in the order keys were first seen.

        Draining this stream drains the parent, so every key is reported.
        """
        return Stream(self._enumerate())
