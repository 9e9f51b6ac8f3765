"""ISC dhcpd configuration generator.

Produces dhcpd.conf fragments for a freeform DHCPv4 option (given as
colon-separated hex) and for DHCPv6 prefix delegation (dhcpd -6
'prefix6' ranges).

Only site-specific codes (224-254) get a 'string' option declaration.
Other codes already have a name in dhcpd, so the value is set through
the 'unknown-N' form, which dhcpd maps to the bare option code.
"""

from __future__ import annotations

import ipaddress

import jinja2

from dhcpopt.codec.wire import colon_hex
from dhcpopt.generators.base import (
    DEFAULT_SUBNET4,
    DEFAULT_SUBNET6,
    is_site_specific,
    sample_pool,
)
from dhcpopt.models.prefix_delegation import PrefixDelegationConfig, PrefixResult
from dhcpopt.models.tlv import TLVOption

_OPTION_TEMPLATE = jinja2.Template("""\
# {{ name }} (option {{ code }})
{% if define %}
option {{ ref }} code {{ code }} = string;

{% endif %}
subnet {{ network }} netmask {{ netmask }} {
  range {{ pool_start }} {{ pool_end }};
  option {{ ref }} {{ data }};
}""", trim_blocks=True, lstrip_blocks=True)

_PD_TEMPLATE = jinja2.Template("""\
# IA_PD for IAID {{ iaid }}
subnet6 {{ subnet }} {
{% for p in prefixes %}
  prefix6 {{ p.network }} {{ p.network }} /{{ p.prefix_length }};
{% endfor %}
  preferred-lifetime {{ preferred }};
  default-lease-time {{ valid }};
{% if t1 is not none %}
  option dhcp-renewal-time {{ t1 }};
{% endif %}
{% if t2 is not none %}
  option dhcp-rebinding-time {{ t2 }};
{% endif %}
}""", trim_blocks=True, lstrip_blocks=True)


def generate_isc_dhcpd(option: TLVOption, data: bytes, subnet: str = DEFAULT_SUBNET4) -> str:
    """Generate a dhcpd.conf option definition and subnet using it."""
    network = ipaddress.IPv4Network(subnet, strict=False)
    pool_start, pool_end = sample_pool(subnet)
    define = is_site_specific(option.code)
    return _OPTION_TEMPLATE.render(
        name=option.name.strip(),
        code=option.code,
        define=define,
        ref=option.slug if define else f"unknown-{option.code}",
        network=network.network_address,
        netmask=network.netmask,
        pool_start=pool_start,
        pool_end=pool_end,
        data=colon_hex(data),
    )


def generate_isc_dhcpd6(
    config: PrefixDelegationConfig,
    prefixes: tuple[PrefixResult, ...],
    subnet: str = DEFAULT_SUBNET6,
) -> str:
    """Generate a dhcpd -6 subnet6 block delegating each prefix.

    dhcpd sets lifetimes per scope, so the first prefix's lifetimes
    apply to the whole subnet.
    """
    return _PD_TEMPLATE.render(
        iaid=config.iaid,
        subnet=subnet,
        prefixes=prefixes,
        preferred=prefixes[0].preferred_lifetime,
        valid=prefixes[0].valid_lifetime,
        t1=config.t1,
        t2=config.t2,
    )
