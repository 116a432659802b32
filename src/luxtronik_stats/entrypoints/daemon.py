import asyncio
import logging
import signal
import sys
from typing import Optional

from luxtronik_stats.config import settings
from luxtronik_stats.domain.configuration import bootstrap_collector_config, load_collector_config
from luxtronik_stats.domain.exceptions import ConfigurationError
from luxtronik_stats.domain.metrics import CycleOutcome
from luxtronik_stats.services.collector import CollectorService
from luxtronik_stats.adapters.luxtronik import LuxtronikAdapter
from luxtronik_stats.adapters.influxdb import InfluxDBAdapter

# Setup logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


class PollLoop:
    """
    Runs one collection cycle per interval until stopped.
    A stop request ends the wait immediately but never interrupts a running cycle.
    """

    def __init__(self, service: CollectorService, interval_minutes: int):
        if interval_minutes < 1:
            raise ValueError(f"Poll interval must be at least 1 minute, got {interval_minutes}")
        self.service = service
        self.interval_seconds: float = interval_minutes * 60
        self.last_outcome: Optional[CycleOutcome] = None
        self.cycles = 0
        self._stop_event = asyncio.Event()

    @property
    def stopped(self) -> bool:
        return self._stop_event.is_set()

    def stop(self) -> None:
        self._stop_event.set()

    async def run(self) -> None:
        logger.info(f"Starting collection loop (Interval: {self.interval_seconds}s)")
        while not self.stopped:
            try:
                self.last_outcome = await self.service.run_cycle()
            except Exception as e:
                logger.error(f"Error in collection loop: {e}")
            self.cycles += 1

            try:
                await asyncio.wait_for(self._stop_event.wait(), self.interval_seconds)
            except asyncio.TimeoutError:
                pass
        logger.info("Collection loop stopped.")


def _install_signal_handlers(poll_loop: PollLoop) -> None:
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, poll_loop.stop)
        except (NotImplementedError, RuntimeError):
            # Not available on this platform, KeyboardInterrupt still applies
            logger.debug(f"Cannot install handler for {sig.name}")


async def main() -> None:
    logger.info(f"Starting Luxtronik Stats Daemon (Mode: {settings.COLLECTOR_MODE})")

    # 1. Load tag and point maps
    if bootstrap_collector_config(settings.POINTS_CONFIG_FILE):
        logger.warning("Edit the sample configuration and restart. Exiting.")
        sys.exit(0)

    try:
        config = load_collector_config(settings.POINTS_CONFIG_FILE)
    except ConfigurationError as e:
        logger.error(f"Failed to load configuration: {e}")
        sys.exit(1)

    # 2. Instantiate Adapters
    mode = settings.COLLECTOR_MODE.lower()

    if mode == "production":
        controller = LuxtronikAdapter(
            host=settings.LUXTRONIK_HOST,
            port=settings.LUXTRONIK_PORT,
            local_ip=settings.LUXTRONIK_LOCAL_IP,
            timeout=settings.LUXTRONIK_TIMEOUT,
        )
        sink = InfluxDBAdapter(
            url=settings.INFLUXDB_URL,
            token=settings.influxdb_token(),
            org=settings.INFLUXDB_ORG,
            bucket=settings.influxdb_bucket(),
        )

    elif mode == "simulation":
        logger.info("Running in SIMULATION mode. Using mock controller but REAL database.")
        from luxtronik_stats.adapters.mocks import MockLuxtronikAdapter

        controller = MockLuxtronikAdapter()
        sink = InfluxDBAdapter(
            url=settings.INFLUXDB_URL,
            token=settings.influxdb_token(),
            org=settings.INFLUXDB_ORG,
            bucket=settings.influxdb_bucket(),
        )

    else:
        logger.info("Running in MOCK mode. Using mock adapters.")
        from luxtronik_stats.adapters.mocks import MockLuxtronikAdapter, MockInfluxDBAdapter

        controller = MockLuxtronikAdapter()
        sink = MockInfluxDBAdapter()

    # 3. Instantiate Service
    service = CollectorService(
        controller=controller,
        sink=sink,
        point_map=config.point_map,
        tag_map=config.tag_map,
    )

    # 4. Run Loop
    poll_loop = PollLoop(service, settings.POLL_INTERVAL_MINUTES)
    _install_signal_handlers(poll_loop)
    try:
        await poll_loop.run()
    except asyncio.CancelledError:
        logger.info("Daemon stopping...")
    finally:
        await sink.close()


def run() -> None:
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    run()
