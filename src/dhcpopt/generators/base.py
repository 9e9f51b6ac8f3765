"""Generator protocols and shared sample-network helpers.

Vendor generators turn an already-encoded option into a config snippet
for one DHCP server dialect. They contain zero encoding logic: every
byte they print comes from the builder.
"""

from __future__ import annotations

import ipaddress
from typing import Protocol

from dhcpopt.models.prefix_delegation import PrefixDelegationConfig, PrefixResult
from dhcpopt.models.tlv import TLVOption

DEFAULT_SUBNET4 = "192.168.1.0/24"
DEFAULT_SUBNET6 = "2001:db8::/32"

SITE_SPECIFIC_CODES = range(224, 255)


class TLVGenerator(Protocol):
    """Protocol for freeform DHCPv4 option snippet generators."""

    def __call__(self, option: TLVOption, data: bytes, subnet: str = DEFAULT_SUBNET4) -> str:
        ...


class PrefixDelegationGenerator(Protocol):
    """Protocol for DHCPv6 prefix delegation snippet generators."""

    def __call__(
        self,
        config: PrefixDelegationConfig,
        prefixes: tuple[PrefixResult, ...],
        subnet: str = DEFAULT_SUBNET6,
    ) -> str:
        ...


def is_site_specific(code: int) -> bool:
    """True for DHCPv4 codes servers leave free for local definitions (224-254)."""
    return code in SITE_SPECIFIC_CODES


def check_subnet(subnet: object, version: int) -> str:
    """Normalize an example subnet, raising ValueError if it is not one.

    Host bits are cleared so the snippets always name the network.

    >>> check_subnet("192.168.1.5/24", 4)
    '192.168.1.0/24'
    >>> check_subnet("2001:db8::/32", 6)
    '2001:db8::/32'
    """
    network_type = ipaddress.IPv4Network if version == 4 else ipaddress.IPv6Network
    if not isinstance(subnet, str):
        raise ValueError(f"IPv{version} subnet must be text, got {subnet!r}")
    try:
        return str(network_type(subnet.strip(), strict=False))
    except ValueError:
        raise ValueError(f"Invalid IPv{version} subnet: {subnet!r}") from None


def sample_pool(subnet: str) -> tuple[str, str]:
    """Pick a dynamic range inside an example IPv4 subnet.

    >>> sample_pool("192.168.1.0/24")
    ('192.168.1.100', '192.168.1.200')
    >>> sample_pool("10.0.0.0/28")
    ('10.0.0.1', '10.0.0.14')
    """
    network = ipaddress.IPv4Network(subnet, strict=False)
    if network.num_addresses >= 256:
        return str(network.network_address + 100), str(network.network_address + 200)
    if network.num_addresses >= 4:
        return str(network.network_address + 1), str(network.broadcast_address - 1)
    return str(network.network_address), str(network.broadcast_address)
