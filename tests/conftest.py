import asyncio
import struct
from contextlib import asynccontextmanager

import pytest


def _pack(*fields: int) -> bytes:
    return b"".join(struct.pack(">i", f) for f in fields)


@pytest.fixture
def fake_controller():
    """
    Factory for a local TCP server that answers every connection with a fixed response.
    Yields (host, port, requests) where requests collects the bytes each client sent.
    """

    @asynccontextmanager
    async def serve(response: bytes, request_size: int = 8):
        requests = []

        async def handle(reader: asyncio.StreamReader, writer: asyncio.StreamWriter):
            try:
                requests.append(await reader.readexactly(request_size))
                writer.write(response)
                await writer.drain()
            finally:
                writer.close()

        server = await asyncio.start_server(handle, "127.0.0.1", 0)
        port = server.sockets[0].getsockname()[1]
        try:
            yield "127.0.0.1", port, requests
        finally:
            server.close()
            await server.wait_closed()

    return serve


@pytest.fixture
def build_response():
    """Pack big-endian 32-bit fields the way the controller sends them."""
    return _pack
