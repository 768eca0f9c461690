"""
Configuration management for stream operations.
"""

import random
from typing import Optional
from dataclasses import dataclass, field
import psutil


@dataclass
class StreamConfig:
    """Global configuration for stream operations."""
    
    # Memory limits
    memory_limit: int = field(default_factory=lambda: int(psutil.virtual_memory().total * 0.8))
    
    # Eager materializations at least this large consult the memory monitor
    eager_check_threshold: int = 10_000
    
    # Per-key partition buffer size that triggers a warning
    partition_buffer_warning: int = 100_000
    
    # Seed for shuffle (None for OS entropy)
    random_seed: Optional[int] = None
    
    _instance: Optional['StreamConfig'] = None
    
    @classmethod
    def get_instance(cls) -> 'StreamConfig':
        """Get singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance
    
    @classmethod
    def set_defaults(cls, **kwargs) -> None:
        """Set default configuration values."""
        instance = cls.get_instance()
        for key, value in kwargs.items():
            if hasattr(instance, key):
                setattr(instance, key, value)
    
    def get_random(self) -> random.Random:
        """Get a random source seeded from ``random_seed``."""
        return random.Random(self.random_seed)
    
    def format_bytes(self, bytes: int) -> str:
        """Format bytes as human-readable string."""
        for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
            if bytes < 1024.0:
                return f"{bytes:.2f} {unit}"
            bytes /= 1024.0
        return f"{bytes:.2f} PB"


# Global configuration instance
config = StreamConfig.get_instance()
