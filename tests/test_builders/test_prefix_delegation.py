"""Tests for IA_PD option building."""

import pytest

from dhcpopt.builders.prefix_delegation import PD_DIALECTS, build_prefix_delegation
from dhcpopt.codec.parsers import parse_ia_pd
from dhcpopt.constraints.errors import EncodingError
from dhcpopt.models.prefix_delegation import PrefixConfig, PrefixDelegationConfig

HOME_ROUTER_HEX = (
    "00000001" "00049d40" "00076200"
    "00093a80" "00278d00" "38" "20010db8000000000000000000000000"
)


class TestContainer:
    def test_home_router_hex(self, home_router_pd):
        result = build_prefix_delegation(home_router_pd)
        assert result.full_hex == HOME_ROUTER_HEX
        assert result.total_length == 37

    def test_header_fields(self, home_router_pd):
        result = build_prefix_delegation(home_router_pd)
        assert result.iaid_hex == "00000001"
        assert result.t1_hex == "00049d40"
        assert result.t2_hex == "00076200"
        assert result.t1_formatted == "3d 12h"
        assert result.t2_formatted == "5d 14h 24m"
        assert result.t1_specified and result.t2_specified

    def test_prefix_record(self, home_router_pd):
        (prefix,) = build_prefix_delegation(home_router_pd).prefixes
        assert prefix.prefix == "2001:db8::/56"
        assert prefix.address == "2001:db8::"
        assert prefix.prefix_length == 56
        assert prefix.prefix_hex == "20010db8000000000000000000000000"
        assert prefix.preferred_lifetime_formatted == "7d"
        assert prefix.valid_lifetime_formatted == "30d"
        assert prefix.length == 25

    def test_wire_format_spacing(self, home_router_pd):
        result = build_prefix_delegation(home_router_pd)
        assert result.full_wire_format.startswith("00 00 00 01 00 04 9d 40")


class TestFraming:
    def test_option_envelopes(self, home_router_pd):
        result = build_prefix_delegation(home_router_pd)
        assert result.option_hex == (
            "0019" "0029"
            "00000001" "00049d40" "00076200"
            "001a" "0019"
            "00093a80" "00278d00" "38" "20010db8000000000000000000000000"
        )
        assert result.option_length == 4 + 12 + 4 + 25


class TestDefaults:
    def test_unset_timers_encode_zero(self):
        result = build_prefix_delegation(PrefixDelegationConfig(
            iaid=7,
            prefixes=(PrefixConfig("2001:db8::/56"),),
        ))
        assert result.full_hex.startswith("00000007" "00000000" "00000000")
        assert result.t1_formatted == "Not specified"
        assert not result.t2_specified

    def test_explicit_zero_is_specified(self):
        result = build_prefix_delegation(PrefixDelegationConfig(
            iaid=7, t1=0, t2=0,
            prefixes=(PrefixConfig("2001:db8::/56"),),
        ))
        assert result.t1_specified
        assert result.t1_formatted == "0 seconds"

    def test_default_lifetimes(self):
        result = build_prefix_delegation(PrefixDelegationConfig(
            iaid=1,
            prefixes=(PrefixConfig("2001:db8::/56"),),
        ))
        assert result.prefixes[0].preferred_lifetime == 604800
        assert result.prefixes[0].valid_lifetime == 2592000

    def test_infinite_lifetime(self):
        result = build_prefix_delegation(PrefixDelegationConfig(
            iaid=1,
            prefixes=(PrefixConfig("2001:db8::/56", 0xFFFFFFFF, 0xFFFFFFFF),),
        ))
        assert result.prefixes[0].valid_lifetime_formatted == "Infinite"
        assert result.prefixes[0].valid_lifetime_hex == "ffffffff"


class TestMultiplePrefixes:
    def test_records_in_order(self):
        result = build_prefix_delegation(PrefixDelegationConfig(
            iaid=1,
            prefixes=(
                PrefixConfig("2001:db8:1::/56"),
                PrefixConfig("2001:db8:2::/48"),
            ),
        ))
        assert result.total_length == 12 + 2 * 25
        assert [p.prefix for p in result.prefixes] == [
            "2001:db8:1::/56",
            "2001:db8:2::/48",
        ]
        assert result.option_length == 4 + 12 + 2 * 29

    def test_parses_back(self):
        config = PrefixDelegationConfig(
            iaid=42, t1=86400, t2=138240,
            prefixes=(
                PrefixConfig("2001:db8:abcd::/60", 172800, 604800),
                PrefixConfig("2001:db8:beef::/64", 3600, 7200),
            ),
        )
        assert parse_ia_pd(build_prefix_delegation(config).data) == config


class TestRejection:
    def test_preferred_after_valid(self):
        config = PrefixDelegationConfig(
            iaid=1,
            prefixes=(PrefixConfig("2001:db8::/56", 700000, 600000),),
        )
        with pytest.raises(EncodingError, match="Preferred lifetime must be <= valid lifetime"):
            build_prefix_delegation(config)

    def test_no_prefixes(self):
        with pytest.raises(EncodingError, match="At least one prefix"):
            build_prefix_delegation(PrefixDelegationConfig(iaid=1))


class TestExamples:
    def test_every_dialect_rendered(self, home_router_pd):
        result = build_prefix_delegation(home_router_pd)
        assert set(result.examples) == set(PD_DIALECTS)

    def test_to_dict(self, home_router_pd):
        summary = build_prefix_delegation(home_router_pd).to_dict()
        assert summary["total_length"] == 37
        assert summary["full_hex"] == HOME_ROUTER_HEX
        assert summary["prefixes"][0]["prefix_length"] == 56


class TestSubnet:
    def test_invalid_subnet_raises(self, home_router_pd):
        with pytest.raises(EncodingError, match="Invalid IPv6 subnet"):
            build_prefix_delegation(home_router_pd, subnet="10.0.0.0/8")


class TestHostBits:
    def test_wire_keeps_address_snippets_use_network(self):
        config = PrefixDelegationConfig(
            iaid=1,
            prefixes=(PrefixConfig("2001:db8::1/56"),),
        )
        result = build_prefix_delegation(config)
        (prefix,) = result.prefixes
        assert prefix.prefix_hex == "20010db8000000000000000000000001"
        assert prefix.network == "2001:db8::"
        assert "prefix6 2001:db8:: 2001:db8:: /56;" in result.examples["isc_dhcpd6"]
        assert '"prefix": "2001:db8::"' in result.examples["kea_dhcp6"]
