"""Memory pressure checks for eager stream operations."""

from lazystream.memory.monitor import (
    MemoryMonitor,
    MemoryPressureLevel,
    MemoryInfo,
    MemoryPressureHandler,
)
from lazystream.memory.handlers import LoggingHandler

# Global monitor instance
monitor = MemoryMonitor()
monitor.add_handler(LoggingHandler())

__all__ = [
    "MemoryMonitor",
    "MemoryPressureLevel",
    "MemoryInfo",
    "MemoryPressureHandler",
    "LoggingHandler",
    "monitor",
]
