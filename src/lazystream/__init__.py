"""
lazystream: lazy, chainable, single-pass streams.

Streams wrap any iterable, mapping, record or iterator and derive new streams
that pull from their parent only on demand. A stream can be partitioned by
key into sub-streams that share one upstream and can be consumed in any order.
"""

from lazystream.config import StreamConfig, config
from lazystream.errors import InvalidArgument
from lazystream.streams import Stream, PartitionStream
from lazystream.memory import MemoryMonitor, MemoryPressureLevel
from lazystream.predicates import filter_nullish, filter_falsey

__version__ = "0.1.0"
__license__ = "Apache-2.0"

__all__ = [
    "StreamConfig",
    "config",
    "InvalidArgument",
    "Stream",
    "PartitionStream",
    "MemoryMonitor",
    "MemoryPressureLevel",
    "filter_nullish",
    "filter_falsey",
]
