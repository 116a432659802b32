import logging
from datetime import datetime, timezone
from typing import Mapping

from luxtronik_stats.domain.exceptions import SinkWriteFailed
from luxtronik_stats.domain.metrics import CycleOutcome, MetricPoint
from luxtronik_stats.ports.controller import ControllerPort
from luxtronik_stats.ports.metric_sink import MetricSinkPort
from luxtronik_stats.services.mapper import map_points

logger = logging.getLogger(__name__)


class CollectorService:
    def __init__(
        self,
        controller: ControllerPort,
        sink: MetricSinkPort,
        point_map: Mapping[str, int],
        tag_map: Mapping[str, str],
    ):
        self.controller = controller
        self.sink = sink
        self.point_map = point_map
        self.tag_map = tag_map

    async def collect(self) -> list[MetricPoint]:
        """
        Query the controller, map the configured points and write them.
        Errors propagate to the caller.
        """
        calculations = await self.controller.get_calculations()
        logger.debug(f"Received {len(calculations)} calculations")

        points = map_points(calculations, self.point_map, self.tag_map, timestamp=datetime.now(timezone.utc))

        if not await self.sink.write_points(points):
            raise SinkWriteFailed(f"Metric sink rejected a batch of {len(points)} points")

        return points

    async def run_cycle(self) -> CycleOutcome:
        """
        Run one collection cycle. Failures are logged and reported in the
        outcome, never raised.
        """
        started_at = datetime.now(timezone.utc)
        logger.info("Starting collection cycle...")

        try:
            points = await self.collect()
        except Exception as e:
            cause = f" (caused by {e.__cause__!r})" if e.__cause__ else ""
            logger.error(f"Collection cycle failed: {type(e).__name__}: {e}{cause}")
            return CycleOutcome(success=False, error=f"{type(e).__name__}: {e}", started_at=started_at)

        logger.info(f"Collection cycle finished, {len(points)} points written.")
        return CycleOutcome(success=True, points_written=len(points), started_at=started_at)
