import asyncio
import ipaddress
import logging
from typing import Optional

from luxtronik_stats.adapters.frame import (
    FIELD_SIZE,
    HEADER_SIZE,
    FrameReader,
    decode_header,
    encode_read_calculations_command,
)
from luxtronik_stats.adapters.network import HostAddressResolver
from luxtronik_stats.domain.exceptions import MalformedField, ProtocolExchangeFailed, ProtocolReadError
from luxtronik_stats.ports.network import AddressResolverPort

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8888
DEFAULT_TIMEOUT = 10.0


class LuxtronikAdapter:
    """
    Reads the calculation values of an Alpha-Innotec / Luxtronik controller.
    Every query opens its own connection and closes it again.
    """

    def __init__(
        self,
        host: str,
        port: int = DEFAULT_PORT,
        local_ip: str = "",
        timeout: float = DEFAULT_TIMEOUT,
        resolver: Optional[AddressResolverPort] = None,
    ):
        self.host = host
        self.port = port
        self.local_ip = local_ip
        self.timeout = timeout
        self.resolver = resolver or HostAddressResolver()

    async def get_calculations(self) -> list[int]:
        return await self.query_calculations()

    def _local_address(self) -> str:
        if self.local_ip:
            return self.local_ip
        return self.resolver.first_ipv4()

    async def query_calculations(self) -> list[int]:
        local_ip = self._local_address()

        try:
            remote = str(ipaddress.IPv4Address(self.host))
            local = str(ipaddress.IPv4Address(local_ip))
        except ValueError as e:
            raise ProtocolExchangeFailed(f"Invalid IPv4 endpoint: {e}") from e

        try:
            reader, writer = await asyncio.wait_for(
                asyncio.open_connection(remote, self.port, local_addr=(local, 0)),
                self.timeout,
            )
        except (OSError, asyncio.TimeoutError) as e:
            raise ProtocolExchangeFailed(f"Could not connect to {remote}:{self.port}: {e!r}") from e

        logger.info(f"Connected to endpoint {remote}:{self.port} from {local}")
        try:
            return await self._exchange(reader, writer)
        except ProtocolExchangeFailed:
            raise
        except (OSError, asyncio.TimeoutError, MalformedField) as e:
            raise ProtocolExchangeFailed(f"Exchange with {remote}:{self.port} failed: {e!r}") from e
        finally:
            await self._close(writer)

    async def _exchange(self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> list[int]:
        frame = encode_read_calculations_command()
        writer.write(frame)
        await asyncio.wait_for(writer.drain(), self.timeout)
        logger.debug(f"Sent {len(frame)} bytes of data")

        header = await self._read_exactly(reader, HEADER_SIZE)
        count = decode_header(header)
        logger.debug(f"Controller announced {count} calculations")

        payload = await self._read_exactly(reader, count * FIELD_SIZE)
        return FrameReader(payload).read_ints(count)

    async def _read_exactly(self, reader: asyncio.StreamReader, size: int) -> bytes:
        try:
            return await asyncio.wait_for(reader.readexactly(size), self.timeout)
        except asyncio.IncompleteReadError as e:
            raise ProtocolReadError(f"Connection closed after {len(e.partial)} of {e.expected} bytes") from e
        except (OSError, asyncio.TimeoutError) as e:
            raise ProtocolReadError(f"Reading {size} bytes failed: {e!r}") from e

    async def _close(self, writer: asyncio.StreamWriter) -> None:
        try:
            if writer.can_write_eof():
                writer.write_eof()
            writer.close()
            await asyncio.wait_for(writer.wait_closed(), self.timeout)
        except (OSError, asyncio.TimeoutError) as e:
            logger.debug(f"Error while closing connection: {e!r}")
