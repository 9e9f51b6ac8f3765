"""Tests for option and prefix delegation validators."""

import pytest

from dhcpopt.constraints.errors import Severity
from dhcpopt.constraints.validators import (
    check_prefix_delegation_config,
    check_tlv_option,
    validate_prefix_delegation_config,
    validate_tlv_option,
)
from dhcpopt.models.prefix_delegation import PrefixConfig, PrefixDelegationConfig
from dhcpopt.models.tlv import DataType, TLVItem, TLVOption


def _option(*items, code=224, name="Custom"):
    return TLVOption(code=code, name=name, items=tuple(items))


def _pd(*prefixes, iaid=1, t1=None, t2=None):
    return PrefixDelegationConfig(iaid=iaid, t1=t1, t2=t2, prefixes=tuple(prefixes))


class TestValidateTLVOption:
    def test_valid_option(self, server_option):
        assert validate_tlv_option(server_option) == []

    @pytest.mark.parametrize("code", [-1, 256])
    def test_code_out_of_range(self, code):
        errors = validate_tlv_option(_option(TLVItem(DataType.UINT8, "1"), code=code))
        assert errors == ["Option code must be between 0 and 255"]

    def test_code_must_be_integer(self):
        errors = validate_tlv_option(_option(TLVItem(DataType.UINT8, "1"), code="224"))
        assert "Option code must be between 0 and 255" in errors

    def test_bool_code_rejected(self):
        errors = validate_tlv_option(_option(TLVItem(DataType.UINT8, "1"), code=True))
        assert "Option code must be between 0 and 255" in errors

    def test_blank_name(self):
        errors = validate_tlv_option(_option(TLVItem(DataType.UINT8, "1"), name="   "))
        assert errors == ["Option name is required"]

    def test_no_items(self):
        assert validate_tlv_option(_option()) == ["At least one data item is required"]

    def test_item_errors_are_numbered(self):
        errors = validate_tlv_option(_option(
            TLVItem(DataType.IPV4, "10.0.0.1"),
            TLVItem(DataType.IPV4, "256.1.1.1"),
            TLVItem(DataType.BOOLEAN, "yes"),
        ))
        assert errors == [
            "Item 2: IPv4: Invalid address format",
            "Item 3: Boolean: Must be 0, 1, true, or false",
        ]

    def test_collects_all_errors(self):
        errors = validate_tlv_option(TLVOption(
            code=300,
            name="",
            items=(TLVItem(DataType.UINT8, "256"),),
        ))
        assert len(errors) == 3
        assert errors[0].startswith("Option code")
        assert errors[1] == "Option name is required"
        assert errors[2].startswith("Item 1: UInt8")

    def test_empty_value(self):
        errors = validate_tlv_option(_option(TLVItem(DataType.STRING, "")))
        assert errors == ["Item 1: String: Value is required"]

    def test_non_text_value(self):
        errors = validate_tlv_option(_option(TLVItem(DataType.UINT8, 5)))
        assert errors == ["Item 1: Value must be text, got int"]

    def test_payload_at_limit(self):
        option = _option(TLVItem(DataType.HEX, "00" * 255))
        assert validate_tlv_option(option) == []

    def test_payload_over_limit(self):
        option = _option(
            TLVItem(DataType.HEX, "00" * 200),
            TLVItem(DataType.STRING, "x" * 56),
        )
        assert validate_tlv_option(option) == [
            "Option data is 256 bytes; maximum is 255",
        ]

    def test_does_not_mutate(self, server_option):
        before = server_option
        validate_tlv_option(server_option)
        assert server_option == before


class TestTLVWarnings:
    def test_site_specific_code_no_warning(self, server_option):
        assert check_tlv_option(server_option).warnings == []

    def test_standard_code_warns(self):
        result = check_tlv_option(_option(TLVItem(DataType.IPV4, "10.0.0.1"), code=6))
        assert result.is_valid
        assert [w.code for w in result.warnings] == ["option_code_not_site_specific"]

    def test_pad_code_warns(self):
        result = check_tlv_option(_option(TLVItem(DataType.UINT8, "1"), code=0))
        assert result.is_valid
        assert result.warnings[0].code == "option_code_reserved"
        assert "Pad" in result.warnings[0].message

    def test_end_code_warns(self):
        result = check_tlv_option(_option(TLVItem(DataType.UINT8, "1"), code=255))
        assert "End" in result.warnings[0].message

    def test_item_violation_context(self):
        result = check_tlv_option(_option(TLVItem(DataType.HEX, "abc")))
        (violation,) = result.errors
        assert violation.severity == Severity.ERROR
        assert violation.record_id == "Item 1"
        assert violation.field == "value"


class TestValidatePrefixDelegation:
    def test_valid_config(self, home_router_pd):
        assert validate_prefix_delegation_config(home_router_pd) == []

    def test_defaults_apply_when_lifetimes_omitted(self):
        assert validate_prefix_delegation_config(_pd(PrefixConfig("2001:db8::/56"))) == []

    @pytest.mark.parametrize("iaid", [-1, 2**32])
    def test_iaid_range(self, iaid):
        errors = validate_prefix_delegation_config(
            _pd(PrefixConfig("2001:db8::/56"), iaid=iaid)
        )
        assert errors == ["IAID must be between 0 and 4294967295"]

    def test_t1_after_t2(self):
        errors = validate_prefix_delegation_config(
            _pd(PrefixConfig("2001:db8::/56"), t1=500, t2=400)
        )
        assert errors == ["T1 must be less than or equal to T2"]

    def test_zero_timer_leaves_choice_to_client(self):
        errors = validate_prefix_delegation_config(
            _pd(PrefixConfig("2001:db8::/56"), t1=500, t2=0)
        )
        assert errors == []

    def test_only_t1_given(self):
        assert validate_prefix_delegation_config(
            _pd(PrefixConfig("2001:db8::/56"), t1=500)
        ) == []

    def test_timer_range(self):
        errors = validate_prefix_delegation_config(
            _pd(PrefixConfig("2001:db8::/56"), t1=-5, t2=2**32)
        )
        assert errors == [
            "T1 must be between 0 and 4294967295",
            "T2 must be between 0 and 4294967295",
        ]

    def test_no_prefixes(self):
        assert validate_prefix_delegation_config(_pd()) == [
            "At least one prefix must be configured",
        ]

    @pytest.mark.parametrize("text", [
        "2001:db8::",
        "2001:db8::/129",
        "2001:db8::/-1",
        "2001:db8::/x",
        "192.168.0.0/16",
        "2001:db8::/56/1",
        "fe80::%eth0/64",
    ])
    def test_invalid_prefix(self, text):
        errors = validate_prefix_delegation_config(_pd(PrefixConfig(text)))
        assert errors == [f"Prefix 1: Invalid IPv6 prefix format: {text!r}"]

    def test_zero_length_prefix_allowed(self):
        assert validate_prefix_delegation_config(_pd(PrefixConfig("::/0"))) == []

    def test_preferred_exceeds_valid(self):
        errors = validate_prefix_delegation_config(
            _pd(PrefixConfig("2001:db8::/56", 700000, 600000))
        )
        assert errors == ["Prefix 1: Preferred lifetime must be <= valid lifetime"]

    def test_preferred_equal_valid(self):
        assert validate_prefix_delegation_config(
            _pd(PrefixConfig("2001:db8::/56", 600000, 600000))
        ) == []

    def test_infinite_preferred_with_finite_valid(self):
        errors = validate_prefix_delegation_config(
            _pd(PrefixConfig("2001:db8::/56", 0xFFFFFFFF, 600000))
        )
        assert errors == ["Prefix 1: Preferred lifetime must be <= valid lifetime"]

    def test_lifetime_range(self):
        errors = validate_prefix_delegation_config(
            _pd(PrefixConfig("2001:db8::/56", -1, 2**32))
        )
        assert errors == [
            "Prefix 1: Preferred lifetime must be between 0 and 4294967295",
            "Prefix 1: Valid lifetime must be between 0 and 4294967295",
        ]

    def test_errors_numbered_per_prefix(self):
        errors = validate_prefix_delegation_config(_pd(
            PrefixConfig("2001:db8:1::/56"),
            PrefixConfig("bogus/56"),
        ))
        assert errors == ["Prefix 2: Invalid IPv6 prefix format: 'bogus/56'"]


class TestPrefixWarnings:
    def test_host_bits_warn(self):
        result = check_prefix_delegation_config(_pd(PrefixConfig("2001:db8::1/56")))
        assert result.is_valid
        (warning,) = result.warnings
        assert warning.code == "prefix_host_bits"
        assert warning.record_id == "Prefix 1"

    def test_aligned_prefix_no_warning(self, home_router_pd):
        assert check_prefix_delegation_config(home_router_pd).warnings == []


class TestOversizedLiterals:
    def test_long_zero_padded_integer_is_valid(self):
        option = _option(TLVItem(DataType.UINT32, "0" * 4400 + "1"))
        assert validate_tlv_option(option) == []

    def test_long_integer_reported_not_raised(self):
        option = _option(TLVItem(DataType.UINT32, "9" * 5000))
        assert validate_tlv_option(option) == [
            "Item 1: UInt32: Must be a whole number between 0 and 4294967295",
        ]

    def test_long_prefix_length_reported_not_raised(self):
        text = "2001:db8::/" + "1" * 5000
        errors = validate_prefix_delegation_config(_pd(PrefixConfig(text)))
        assert errors == [f"Prefix 1: Invalid IPv6 prefix format: {text!r}"]
