import ipaddress
import logging
import socket

from luxtronik_stats.domain.exceptions import NoIPv4Adapter

logger = logging.getLogger(__name__)


class HostAddressResolver:
    """Looks up the IPv4 addresses registered for this host's name."""

    def __init__(self, hostname: str = ""):
        self.hostname = hostname

    def first_ipv4(self) -> str:
        """Return the first non-loopback IPv4 address, usable for outbound connections."""
        hostname = self.hostname or socket.gethostname()
        try:
            infos = socket.getaddrinfo(hostname, None, socket.AF_INET, socket.SOCK_STREAM)
        except socket.gaierror as e:
            raise NoIPv4Adapter(f"Could not resolve addresses for {hostname}: {e}") from e

        for _family, _type, _proto, _canonname, sockaddr in infos:
            address = sockaddr[0]
            if ipaddress.IPv4Address(address).is_loopback:
                logger.debug(f"Skipping loopback address {address}")
                continue
            logger.debug(f"Using local address {address}")
            return address

        raise NoIPv4Adapter("No network adapters with an IPv4 address in the system!")
