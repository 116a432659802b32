from datetime import datetime
from typing import Mapping, Optional, Sequence

from luxtronik_stats.domain.exceptions import OffsetOutOfRange
from luxtronik_stats.domain.metrics import MetricPoint


def map_points(
    calculations: Sequence[int],
    point_map: Mapping[str, int],
    tag_map: Mapping[str, str],
    timestamp: Optional[datetime] = None,
) -> list[MetricPoint]:
    """
    Build one point per configured name from the calculation at its offset.

    Raises OffsetOutOfRange for the first offset the controller did not deliver,
    so a cycle never produces a partial batch.
    Without a timestamp the points carry none, so equal inputs give equal points.
    """
    count = len(calculations)

    points = []
    for name, offset in point_map.items():
        if not 0 <= offset < count:
            raise OffsetOutOfRange(name, offset, count)
        points.append(
            MetricPoint(
                name=name,
                tags=dict(tag_map),
                value=float(calculations[offset]),
                timestamp=timestamp,
            )
        )
    return points
