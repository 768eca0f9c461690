#!/usr/bin/env python3
"""
Basic usage examples for lazystream.
"""

import logging
from lazystream import Stream, StreamConfig, InvalidArgument


def example_chaining():
    """Example: Lazy transformations that pull only what they need."""
    print("\n=== Chaining Example ===")
    
    stream = Stream.range(10)
    evens = stream.filter(lambda n: n % 2 == 0).map(lambda n: n * n)
    
    print(f"First two squares of evens: {next(evens)}, {next(evens)}")
    print(f"Left in the source: {stream.collect()}")


def example_generators():
    """Example: Building streams from ranges, mappings and pairs."""
    print("\n=== Generators Example ===")
    
    print(f"range(0, 6, -2): {Stream.range(0, 6, -2).collect()}")
    print(f"range(0, 1, 0.25): {Stream.range(0, 1, 0.25).collect()}")
    print(f"values with step -2: {Stream.values([1, 2, 3, 4], -2).collect()}")
    print(f"items of a dict: {Stream.items({'a': 1, 'b': 2}).collect()}")
    print(f"zip: {Stream.zip('abc', Stream.range(10)).collect()}")


def example_partition():
    """Example: Consuming groups out of order from one source."""
    print("\n=== Partition Example ===")
    
    words = Stream.of("apple", "bob", "avocado", "bean", "cherry", "banana")
    by_letter = words.partition(lambda word: word[0])
    
    # Buffers "apple" under 'a' on the way
    print(f"First 'b' word: {next(by_letter.get('b'))}")
    
    for letter, group in by_letter.partitions():
        print(f"  {letter}: {group.collect()}")


def example_errors():
    """Example: Invalid arguments fail before anything is pulled."""
    print("\n=== Errors Example ===")
    
    stream = Stream.range(3)
    try:
        stream.take(-1)
    except InvalidArgument as e:
        print(f"take(-1) rejected: {e}")
    print(f"Stream untouched: {stream.collect()}")


def main():
    """Run all examples."""
    logging.basicConfig(level=logging.DEBUG)
    StreamConfig.set_defaults(random_seed=1)
    
    example_chaining()
    example_generators()
    example_partition()
    example_errors()
    
    print(f"\nShuffled: {Stream.range(10).shuffle().collect()}")


if __name__ == "__main__":
    main()
