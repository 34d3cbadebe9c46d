import logging
import time
from contextlib import contextmanager

logger = logging.getLogger("boggle")


class StageTimer:
    """Per-round timings (load, generate, solve) and result counters."""

    def __init__(self):
        self.timings: dict[str, float] = {}
        self.counts: dict[str, int] = {}
        self._start = time.perf_counter()

    @contextmanager
    def stage(self, name: str):
        t0 = time.perf_counter()
        try:
            yield
        finally:
            ms = round((time.perf_counter() - t0) * 1000, 1)
            self.timings[name] = ms
            logger.info("stage=%s elapsed=%.1fms", name, ms)

    def record(self, name: str, value: int):
        self.counts[name] = value
        logger.debug("count %s=%d", name, value)

    @property
    def total_ms(self) -> float:
        return round((time.perf_counter() - self._start) * 1000, 1)

    def summary(self) -> dict:
        return {**self.timings, **self.counts, "total": self.total_ms}
