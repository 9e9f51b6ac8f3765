"""Tests for the built-in example options."""

import pytest

from dhcpopt.builders.prefix_delegation import build_prefix_delegation
from dhcpopt.builders.tlv import build_tlv_option
from dhcpopt.constraints.validators import (
    check_prefix_delegation_config,
    check_tlv_option,
)
from dhcpopt.examples import (
    PREFIX_DELEGATION_EXAMPLES,
    TLV_EXAMPLES,
    default_prefix_delegation_config,
    default_tlv_option,
)


@pytest.mark.parametrize("option", TLV_EXAMPLES, ids=lambda o: o.slug)
def test_tlv_example_builds_cleanly(option):
    result = check_tlv_option(option)
    assert result.violations == []
    assert build_tlv_option(option).data_length > 0


@pytest.mark.parametrize(
    "example", PREFIX_DELEGATION_EXAMPLES, ids=lambda e: e.label,
)
def test_pd_example_builds_cleanly(example):
    assert check_prefix_delegation_config(example.config).violations == []
    result = build_prefix_delegation(example.config)
    assert result.total_length == 12 + 25 * len(example.config.prefixes)


def test_example_codes_are_site_specific():
    assert [o.code for o in TLV_EXAMPLES] == list(range(224, 230))


def test_voip_example_payload():
    voip = next(o for o in TLV_EXAMPLES if o.code == 228)
    assert build_tlv_option(voip).hex_encoded == (
        "0a000032" "13c4"
        "03736970" "04766f6970" "056c6f63616c" "00"
        "646f6d61696e3d696e7465726e616c"
    )


def test_default_tlv_option_needs_items():
    assert check_tlv_option(default_tlv_option()).messages() == [
        "At least one data item is required",
    ]


def test_default_prefix_delegation_builds():
    result = build_prefix_delegation(default_prefix_delegation_config())
    assert result.total_length == 37
