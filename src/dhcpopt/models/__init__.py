"""Data models for DHCP option composition."""

from dhcpopt.models.prefix_delegation import (
    PrefixConfig,
    PrefixDelegationConfig,
    PrefixDelegationResult,
    PrefixResult,
)
from dhcpopt.models.tlv import (
    BreakdownRow,
    DataType,
    TLVItem,
    TLVOption,
    TLVResult,
)

__all__ = [
    "BreakdownRow",
    "DataType",
    "PrefixConfig",
    "PrefixDelegationConfig",
    "PrefixDelegationResult",
    "PrefixResult",
    "TLVItem",
    "TLVOption",
    "TLVResult",
]
