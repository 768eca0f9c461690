"""Lazy streams and partitioning."""

from lazystream.streams.stream import Stream
from lazystream.streams.partition import PartitionStream
from lazystream.streams.operators import (
    StreamOperator,
    MapOperator,
    FilterOperator,
    FlatMapOperator,
    TakeOperator,
    DropOperator,
    TakeWhileOperator,
    DropWhileOperator,
    StepOperator,
    SortOperator,
    ReverseOperator,
    ShuffleOperator,
    DistinctOperator,
    InsertAtOperator,
    MergeOperator,
)

__all__ = [
    "Stream",
    "PartitionStream",
    "StreamOperator",
    "MapOperator",
    "FilterOperator",
    "FlatMapOperator",
    "TakeOperator",
    "DropOperator",
    "TakeWhileOperator",
    "DropWhileOperator",
    "StepOperator",
    "SortOperator",
    "ReverseOperator",
    "ShuffleOperator",
    "DistinctOperator",
    "InsertAtOperator",
    "MergeOperator",
]
