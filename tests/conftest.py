"""Shared test fixtures for dhcpopt."""

import textwrap

import pytest

from dhcpopt.models.prefix_delegation import PrefixConfig, PrefixDelegationConfig
from dhcpopt.models.tlv import DataType, TLVItem, TLVOption


@pytest.fixture
def server_option():
    """Site-specific option carrying a single IPv4 address."""
    return TLVOption(
        code=224,
        name="Custom Server",
        items=(TLVItem(DataType.IPV4, "192.168.1.1"),),
    )


@pytest.fixture
def home_router_pd():
    """The /56 home router delegation used throughout the IA_PD tests."""
    return PrefixDelegationConfig(
        iaid=1,
        t1=302400,
        t2=483840,
        prefixes=(PrefixConfig("2001:db8::/56", 604800, 2592000),),
    )


@pytest.fixture
def options_toml(tmp_path):
    """Write a small option file and return its path."""
    path = tmp_path / "dhcpopt.toml"
    path.write_text(textwrap.dedent("""\
        [defaults]
        subnet4 = "10.0.0.0/24"

        [[tlv]]
        code = 224
        name = "Custom Server List"
        items = [
          { type = "ipv4", value = "192.168.1.10" },
          { type = "uint16", value = 8080 },
          { type = "boolean", value = true },
        ]

        [[prefix_delegation]]
        name = "home-router"
        iaid = 1
        t1 = 302400
        t2 = 483840
        prefixes = [
          { prefix = "2001:db8:1000::/56", preferred_lifetime = 604800, valid_lifetime = 2592000 },
        ]
    """))
    return path
