"""Built-in example options for quick starts and demonstrations."""

from __future__ import annotations

from dataclasses import dataclass

from dhcpopt.models.prefix_delegation import PrefixConfig, PrefixDelegationConfig
from dhcpopt.models.tlv import DataType, TLVItem, TLVOption


@dataclass(frozen=True)
class PrefixDelegationExample:
    """A labelled prefix delegation scenario."""

    label: str
    description: str
    config: PrefixDelegationConfig


TLV_EXAMPLES: tuple[TLVOption, ...] = (
    TLVOption(
        code=224,
        name="Custom Server List",
        items=(
            TLVItem(DataType.IPV4, "192.168.1.10"),
            TLVItem(DataType.IPV4, "192.168.1.11"),
        ),
    ),
    TLVOption(
        code=225,
        name="Custom Config Server",
        items=(TLVItem(DataType.FQDN, "config.example.com"),),
    ),
    TLVOption(
        code=226,
        name="Custom Flags",
        items=(
            TLVItem(DataType.BOOLEAN, "true"),
            TLVItem(DataType.UINT8, "5"),
            TLVItem(DataType.UINT16, "8080"),
        ),
    ),
    TLVOption(
        code=227,
        name="Custom Hex Data",
        items=(TLVItem(DataType.HEX, "deadbeef"),),
    ),
    TLVOption(
        code=228,
        name="VoIP Configuration",
        items=(
            TLVItem(DataType.IPV4, "10.0.0.50"),
            TLVItem(DataType.UINT16, "5060"),
            TLVItem(DataType.FQDN, "sip.voip.local"),
            TLVItem(DataType.STRING, "domain=internal"),
        ),
    ),
    TLVOption(
        code=229,
        name="IoT Device Profile",
        items=(
            TLVItem(DataType.UINT32, "3600"),
            TLVItem(DataType.IPV6, "2001:db8::1"),
            TLVItem(DataType.UINT8, "10"),
            TLVItem(DataType.BOOLEAN, "false"),
        ),
    ),
)


PREFIX_DELEGATION_EXAMPLES: tuple[PrefixDelegationExample, ...] = (
    PrefixDelegationExample(
        label="Home Router /56",
        description="Typical home router prefix delegation",
        config=PrefixDelegationConfig(
            iaid=1,
            t1=302400,    # 3.5 days
            t2=483840,    # 5.6 days
            prefixes=(PrefixConfig("2001:db8:1000::/56", 604800, 2592000),),
        ),
    ),
    PrefixDelegationExample(
        label="Small Business /48",
        description="Small business with larger prefix",
        config=PrefixDelegationConfig(
            iaid=100,
            t1=1209600,   # 14 days
            t2=1814400,   # 21 days
            prefixes=(PrefixConfig("2001:db8::/48", 2592000, 7776000),),
        ),
    ),
    PrefixDelegationExample(
        label="ISP Customer /60",
        description="ISP delegating /60 to customer",
        config=PrefixDelegationConfig(
            iaid=42,
            t1=86400,
            t2=138240,
            prefixes=(PrefixConfig("2001:db8:abcd::/60", 172800, 604800),),
        ),
    ),
    PrefixDelegationExample(
        label="Multiple Prefixes",
        description="Router with multiple delegated prefixes",
        config=PrefixDelegationConfig(
            iaid=1,
            prefixes=(
                PrefixConfig("2001:db8:1::/56", 604800, 2592000),
                PrefixConfig("2001:db8:2::/56", 604800, 2592000),
            ),
        ),
    ),
)


def default_tlv_option() -> TLVOption:
    """Starting point for a new option: first site-specific code, no items."""
    return TLVOption(code=224, name="Custom Option")


def default_prefix_delegation_config() -> PrefixDelegationConfig:
    return PrefixDelegationConfig(
        iaid=1,
        t1=302400,
        t2=483840,
        prefixes=(PrefixConfig("2001:db8::/56", 604800, 2592000),),
    )
