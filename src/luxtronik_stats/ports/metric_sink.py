from typing import Protocol
from luxtronik_stats.domain.metrics import MetricPoint


class MetricSinkPort(Protocol):
    async def write_points(self, points: list[MetricPoint]) -> bool:
        """
        Write a batch of points to the time-series database.
        Returns False if the batch was not accepted.
        """
        ...
