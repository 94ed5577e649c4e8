"""
Контекст‑менеджер профайлинга – измеряет время загрузки файла.
"""

import logging
import time
from objmodel.utils.logger import logger

class Profiler:
    """Замер блока кода; результат – в `elapsed_ms` и в логе."""
    def __init__(self, name: str, level: int = logging.DEBUG):
        self.name = name
        self.level = level
        self.elapsed_ms = 0.0
        self._start = 0.0

    def __enter__(self):
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.elapsed_ms = (time.perf_counter() - self._start) * 1000.0
        status = "failed after" if exc_type is not None else "took"
        logger.log(self.level, f"[Profiler] {self.name} {status} {self.elapsed_ms:.2f} ms")
