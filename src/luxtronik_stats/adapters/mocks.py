import logging
import random
from collections import deque

from luxtronik_stats.domain.metrics import MetricPoint

logger = logging.getLogger(__name__)


class MockLuxtronikAdapter:
    def __init__(self, count: int = 260):
        self.count = count

    async def get_calculations(self) -> list[int]:
        logger.debug("Mock: Fetching calculations")

        # Temperatures are reported in tenths of a degree
        return [random.randint(-150, 650) for _ in range(self.count)]


class MockInfluxDBAdapter:
    def __init__(self, keep_last: int = 1000):
        # Only the most recent points are kept
        self.written: deque[MetricPoint] = deque(maxlen=keep_last)

    async def write_points(self, points: list[MetricPoint]) -> bool:
        for p in points:
            logger.debug(f"Mock: Saving point {p.name}{p.tags}={p.value}")
        self.written.extend(points)
        return True

    async def close(self):
        pass
