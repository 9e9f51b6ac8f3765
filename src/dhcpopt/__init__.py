"""dhcpopt: DHCP option TLV encoding.

Builds freeform DHCPv4 options from typed items (RFC 2132 framing) and
DHCPv6 IA_PD options with their IA Prefix sub-options (RFC 8415), and
renders them as hex, wire format, per-item breakdowns and DHCP server
config snippets.

Quick start:
    from dhcpopt import (
        DataType, TLVItem, TLVOption, build_tlv_option, validate_tlv_option,
    )

    option = TLVOption(224, "Server", (TLVItem(DataType.IPV4, "192.168.1.1"),))
    if not validate_tlv_option(option):
        print(build_tlv_option(option).hex_encoded)   # c0a80101
"""

__version__ = "0.1.0"

from dhcpopt.builders.prefix_delegation import build_prefix_delegation
from dhcpopt.builders.tlv import build_tlv_option
from dhcpopt.codec.items import encode_item
from dhcpopt.codec.parsers import decode_item, parse_ia_pd
from dhcpopt.codec.wire import format_time
from dhcpopt.constraints.errors import EncodingError
from dhcpopt.constraints.validators import (
    validate_prefix_delegation_config,
    validate_tlv_option,
)
from dhcpopt.examples import PREFIX_DELEGATION_EXAMPLES, TLV_EXAMPLES
from dhcpopt.models import (
    BreakdownRow,
    DataType,
    PrefixConfig,
    PrefixDelegationConfig,
    PrefixDelegationResult,
    PrefixResult,
    TLVItem,
    TLVOption,
    TLVResult,
)

__all__ = [
    "BreakdownRow",
    "DataType",
    "EncodingError",
    "PREFIX_DELEGATION_EXAMPLES",
    "PrefixConfig",
    "PrefixDelegationConfig",
    "PrefixDelegationResult",
    "PrefixResult",
    "TLV_EXAMPLES",
    "TLVItem",
    "TLVOption",
    "TLVResult",
    "build_prefix_delegation",
    "build_tlv_option",
    "decode_item",
    "encode_item",
    "format_time",
    "parse_ia_pd",
    "validate_prefix_delegation_config",
    "validate_tlv_option",
]
