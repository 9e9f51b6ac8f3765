"""Kea DHCP configuration generators.

Produces Dhcp4 'option-data' for a freeform option and Dhcp6
'pd-pools' for prefix delegation. Output is JSON text with string values
escaped by the tojson filter.

Kea rejects definitions that shadow standard options, so an option-def
is only emitted for site-specific codes (224-254). Other codes are sent
by code alone with csv-format disabled.
"""

from __future__ import annotations

import jinja2

from dhcpopt.generators.base import (
    DEFAULT_SUBNET4,
    DEFAULT_SUBNET6,
    is_site_specific,
    sample_pool,
)
from dhcpopt.models.prefix_delegation import PrefixDelegationConfig, PrefixResult
from dhcpopt.models.tlv import TLVOption

_DHCP4_TEMPLATE = jinja2.Template("""\
{
  "Dhcp4": {
{% if define %}
    "option-def": [
      {
        "name": {{ slug|tojson }},
        "code": {{ code }},
        "type": "binary"
      }
    ],
{% endif %}
    "subnet4": [
      {
        "subnet": {{ subnet|tojson }},
        "pools": [
          {
            "pool": "{{ pool_start }} - {{ pool_end }}"
          }
        ],
        "option-data": [
          {
{% if define %}
            "name": {{ slug|tojson }},
{% endif %}
            "code": {{ code }},
            "data": "{{ data }}",
            "csv-format": false
          }
        ]
      }
    ]
  }
}""", trim_blocks=True, lstrip_blocks=True)

_DHCP6_TEMPLATE = jinja2.Template("""\
{
  "Dhcp6": {
    "subnet6": [
      {
        "subnet": {{ subnet|tojson }},
        "pd-pools": [
{% for p in prefixes %}
          {
            "prefix": "{{ p.network }}",
            "prefix-len": {{ p.prefix_length }},
            "delegated-len": {{ p.prefix_length }}
          }{{ "," if not loop.last }}
{% endfor %}
        ],
{% if t1 is not none %}
        "renew-timer": {{ t1 }},
{% endif %}
{% if t2 is not none %}
        "rebind-timer": {{ t2 }},
{% endif %}
        "preferred-lifetime": {{ preferred }},
        "valid-lifetime": {{ valid }}
      }
    ]
  }
}""", trim_blocks=True, lstrip_blocks=True)


def generate_kea_dhcp4(option: TLVOption, data: bytes, subnet: str = DEFAULT_SUBNET4) -> str:
    """Generate a Kea Dhcp4 subnet carrying the option as raw hex."""
    pool_start, pool_end = sample_pool(subnet)
    return _DHCP4_TEMPLATE.render(
        define=is_site_specific(option.code),
        slug=option.slug,
        code=option.code,
        subnet=subnet,
        pool_start=pool_start,
        pool_end=pool_end,
        data=data.hex(),
    )


def generate_kea_dhcp6(
    config: PrefixDelegationConfig,
    prefixes: tuple[PrefixResult, ...],
    subnet: str = DEFAULT_SUBNET6,
) -> str:
    """Generate a Kea Dhcp6 subnet with one pd-pool per delegated prefix.

    Kea sets lifetimes per subnet, so the first prefix's lifetimes
    apply to every pool.
    """
    return _DHCP6_TEMPLATE.render(
        subnet=subnet,
        prefixes=prefixes,
        t1=config.t1,
        t2=config.t2,
        preferred=prefixes[0].preferred_lifetime,
        valid=prefixes[0].valid_lifetime,
    )
