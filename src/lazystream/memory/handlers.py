"""Memory pressure handlers."""

import time
import logging
from typing import Dict, Optional

from lazystream.memory.monitor import (
    MemoryPressureHandler, 
    MemoryPressureLevel, 
    MemoryInfo
)


class LoggingHandler(MemoryPressureHandler):
    """Log memory pressure events."""
    
    def __init__(self, 
                 logger: Optional[logging.Logger] = None,
                 min_level: MemoryPressureLevel = MemoryPressureLevel.MEDIUM,
                 interval: float = 60.0):
        self.logger = logger or logging.getLogger(__name__)
        self.min_level = min_level
        self.interval = interval
        self._last_log: Dict[MemoryPressureLevel, float] = {}
    
    def can_handle(self, level: MemoryPressureLevel, info: MemoryInfo) -> bool:
        return level >= self.min_level
    
    def handle(self, level: MemoryPressureLevel, info: MemoryInfo) -> None:
        # Only log if level changed or the interval passed
        last_time = self._last_log.get(level)
        if last_time is not None and time.time() - last_time < self.interval:
            return
        
        self._last_log[level] = time.time()
        
        if level == MemoryPressureLevel.CRITICAL:
            self.logger.critical(f"CRITICAL memory pressure: {info}")
        elif level == MemoryPressureLevel.HIGH:
            self.logger.error(f"HIGH memory pressure: {info}")
        elif level == MemoryPressureLevel.MEDIUM:
            self.logger.warning(f"MEDIUM memory pressure: {info}")
        else:
            self.logger.info(f"Memory pressure: {info}")
