"""Dnsmasq configuration generator for freeform DHCPv4 options.

dnsmasq treats a colon-separated hex value as raw option bytes, so the
encoded payload is passed through unchanged.
"""

from __future__ import annotations

from dhcpopt.codec.wire import colon_hex
from dhcpopt.generators.base import DEFAULT_SUBNET4, sample_pool
from dhcpopt.models.tlv import TLVOption


def generate_dnsmasq(option: TLVOption, data: bytes, subnet: str = DEFAULT_SUBNET4) -> str:
    """Generate dhcp-range and dhcp-option lines for a freeform option."""
    pool_start, pool_end = sample_pool(subnet)
    output: list[str] = []
    output.append(f"# {option.name.strip()} (option {option.code})")
    output.append(f"dhcp-range={pool_start},{pool_end},12h")
    output.append(f"dhcp-option={option.code},{colon_hex(data)}")
    return "\n".join(output)
