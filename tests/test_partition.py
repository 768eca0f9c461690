#!/usr/bin/env python3
"""
Tests for partitioning streams by key.
"""

import unittest

from lazystream import Stream, StreamConfig


def expand(partitions):
    """Drain a partition enumeration into (key, list) pairs."""
    return [(key, list(values)) for key, values in partitions.partitions()]


class CountingSource:
    """Iterator that records how many elements were pulled."""

    def __init__(self, items):
        self._iterator = iter(items)
        self.pulled = 0

    def __iter__(self):
        return self

    def __next__(self):
        item = next(self._iterator)
        self.pulled += 1
        return item


class TestPartition(unittest.TestCase):
    """Test PartitionStream behaviour."""

    def test_partitions_by_key(self):
        partitions = Stream.range(10).partition(lambda n: n % 2)
        self.assertEqual(expand(partitions), [(0, [0, 2, 4, 6, 8]), (1, [1, 3, 5, 7, 9])])

    def test_get_before_partitions(self):
        partitions = Stream.range(10).partition(lambda n: n % 3)
        self.assertEqual(list(partitions.get(0)), [0, 3, 6, 9])
        # key 0 still appears, but has already been streamed to completion
        self.assertEqual(expand(partitions), [(0, []), (1, [1, 4, 7]), (2, [2, 5, 8])])

    def test_partially_consumed_key(self):
        partitions = Stream.range(10).partition(lambda n: n % 3)
        self.assertEqual(list(partitions.get(0).take(2)), [0, 3])
        self.assertEqual(expand(partitions), [(0, [6, 9]), (1, [1, 4, 7]), (2, [2, 5, 8])])

    def test_get_after_partitions(self):
        partitions = Stream.range(10).partition(lambda n: n % 3)
        list(partitions.partitions())
        self.assertEqual(list(partitions.get(0)), [0, 3, 6, 9])

    def test_get_pulls_only_until_match(self):
        source = CountingSource(range(10))
        partitions = Stream.from_iterable(source).partition(lambda n: n % 3)

        self.assertEqual(next(partitions.get(2)), 2)
        self.assertEqual(source.pulled, 3)

        # 0 and 1 were buffered by the previous pull
        self.assertEqual(next(partitions.get(0)), 0)
        self.assertEqual(next(partitions.get(1)), 1)
        self.assertEqual(source.pulled, 3)

    def test_interleaved_consumption(self):
        source = CountingSource(range(12))
        partitions = Stream.from_iterable(source).partition(lambda n: "even" if n % 2 == 0 else "odd")
        evens = partitions.get("even")
        odds = partitions.get("odd")

        result = []
        for _ in range(6):
            result.append(next(odds))
            result.append(next(evens))

        self.assertEqual(result, [1, 0, 3, 2, 5, 4, 7, 6, 9, 8, 11, 10])
        self.assertEqual(source.pulled, 12)
        self.assertEqual(list(evens), [])
        self.assertEqual(list(odds), [])

    def test_conservation(self):
        data = [5, 3, 8, 1, 9, 2, 7, 7, 4]
        partitions = Stream.from_iterable(data).partition(lambda n: n % 4)
        first = list(partitions.get(3).take(2))
        rest = expand(partitions)

        delivered = first + [value for _, values in rest for value in values]
        self.assertEqual(sorted(delivered), sorted(data))

    def test_unknown_key_drains_parent(self):
        partitions = Stream.range(4).partition(lambda n: n % 2)
        self.assertEqual(list(partitions.get("missing")), [])
        self.assertEqual(expand(partitions), [(0, [0, 2]), (1, [1, 3])])

    def test_keys_found_late_are_listed(self):
        partitions = Stream.of("a", "b", "a", "c").partition(lambda s: s)
        pairs = partitions.partitions()
        key, values = next(pairs)
        self.assertEqual(key, "a")
        self.assertEqual(list(values), ["a", "a"])
        self.assertEqual([key for key, _ in pairs], ["b", "c"])

    def test_empty_parent(self):
        partitions = Stream.empty().partition(lambda n: n)
        self.assertEqual(expand(partitions), [])

    def test_buffer_warning(self):
        threshold = StreamConfig.get_instance().partition_buffer_warning
        StreamConfig.set_defaults(partition_buffer_warning=3)
        try:
            partitions = Stream.range(10).partition(lambda n: n % 2)
            with self.assertLogs("lazystream.streams.partition", level="WARNING") as logs:
                list(partitions.get(0))
        finally:
            StreamConfig.set_defaults(partition_buffer_warning=threshold)

        self.assertEqual(len(logs.records), 1)
        self.assertIn("key 1", logs.output[0])

    def test_buffer_warning_once_per_key(self):
        threshold = StreamConfig.get_instance().partition_buffer_warning
        StreamConfig.set_defaults(partition_buffer_warning=2)
        try:
            partitions = Stream.of(0, 0, 1, 0, 0, 1).partition(lambda n: n)
            with self.assertLogs("lazystream.streams.partition", level="WARNING") as logs:
                ones = partitions.get(1)
                self.assertEqual(next(ones), 1)
                self.assertEqual(list(partitions.get(0).take(2)), [0, 0])
                # refills the key 0 buffer past the threshold
                self.assertEqual(next(ones), 1)
        finally:
            StreamConfig.set_defaults(partition_buffer_warning=threshold)

        self.assertEqual(len(logs.records), 1)
        self.assertIn("key 0", logs.output[0])


class TestUnzip(unittest.TestCase):
    """Test unzip."""

    def test_separates_keys_and_values(self):
        unzipped = Stream.of((0, 1), (2, 3), (4, 5)).unzip()
        self.assertEqual([key for key, _ in unzipped.partitions()], ["key", "value"])
        self.assertEqual(list(unzipped.get("key")), [0, 2, 4])
        self.assertEqual(list(unzipped.get("value")), [1, 3, 5])

    def test_empty_input(self):
        unzipped = Stream.empty().unzip()
        self.assertEqual([key for key, _ in unzipped.partitions()], ["key", "value"])

    def test_zip_round_trip(self):
        unzipped = Stream.zip("abc", [1, 2, 3]).unzip()
        self.assertEqual(list(unzipped.get("value")), [1, 2, 3])
        self.assertEqual(list(unzipped.get("key")), ["a", "b", "c"])


if __name__ == "__main__":
    unittest.main()
