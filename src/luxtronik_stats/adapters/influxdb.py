import logging
from influxdb_client.client.influxdb_client_async import InfluxDBClientAsync
from influxdb_client.client.write.point import Point

from luxtronik_stats.domain.metrics import MetricPoint

logger = logging.getLogger(__name__)


class InfluxDBAdapter:
    def __init__(self, url: str, token: str, org: str, bucket: str):
        self.url = url
        self.token = token
        self.org = org
        self.bucket = bucket
        self._client = None

    @property
    def client(self):
        if self._client is None:
            self._client = InfluxDBClientAsync(url=self.url, token=self.token, org=self.org)
        return self._client

    async def close(self):
        if self._client:
            await self._client.close()

    @staticmethod
    def to_point(metric: MetricPoint) -> Point:
        p = Point(metric.name).field("value", metric.value)
        if metric.timestamp is not None:
            p.time(metric.timestamp)
        for key, value in metric.tags.items():
            p.tag(key, value)
        return p

    async def write_points(self, points: list[MetricPoint]) -> bool:
        if not points:
            return True

        try:
            write_api = self.client.write_api()
            await write_api.write(bucket=self.bucket, record=[self.to_point(p) for p in points])
        except Exception as e:
            logger.error(f"Failed to write to InfluxDB: {e}")
            return False

        logger.debug(f"Wrote {len(points)} points to bucket {self.bucket}")
        return True
