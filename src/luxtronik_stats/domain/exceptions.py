class CollectorError(Exception):
    """Base exception for the collector."""


class ConfigurationError(CollectorError):
    """The points configuration could not be loaded."""


class NoIPv4Adapter(CollectorError):
    """The host has no network adapter with an IPv4 address."""


class ProtocolExchangeFailed(CollectorError):
    """The request/response exchange with the controller failed."""


class ProtocolReadError(ProtocolExchangeFailed):
    """A read from the controller returned fewer bytes than required."""


class MalformedField(CollectorError):
    """A 4-byte field could not be decoded."""


class OffsetOutOfRange(CollectorError):
    """A configured offset lies outside the received calculations."""

    def __init__(self, name: str, offset: int, count: int):
        super().__init__(f"Offset {offset} for '{name}' is out of range ({count} calculations received)")
        self.name = name
        self.offset = offset
        self.count = count


class SinkWriteFailed(CollectorError):
    """The metric sink rejected the batch."""
