from typing import Protocol


class AddressResolverPort(Protocol):
    def first_ipv4(self) -> str:
        """
        Return the first IPv4 address of the host.
        """
        ...
