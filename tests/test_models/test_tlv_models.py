"""Tests for freeform option models."""

import dataclasses

import pytest

from dhcpopt.models.tlv import DataType, TLVItem, TLVOption


class TestDataType:
    def test_values(self):
        assert [t.value for t in DataType] == [
            "ipv4", "ipv6", "fqdn", "string", "hex",
            "uint8", "uint16", "uint32", "boolean",
        ]

    def test_fixed_widths(self):
        assert DataType.IPV4.width == 4
        assert DataType.IPV6.width == 16
        assert DataType.UINT32.width == 4
        assert DataType.BOOLEAN.width == 1

    @pytest.mark.parametrize("data_type", [DataType.FQDN, DataType.STRING, DataType.HEX])
    def test_variable_width(self, data_type):
        assert data_type.width is None

    def test_str(self):
        assert str(DataType.UINT16) == "uint16"


class TestTLVOption:
    def test_items_become_tuple(self):
        option = TLVOption(code=224, name="x", items=[TLVItem(DataType.UINT8, "1")])
        assert isinstance(option.items, tuple)

    def test_frozen(self, server_option):
        with pytest.raises(dataclasses.FrozenInstanceError):
            server_option.code = 225

    def test_slug_falls_back_to_code(self):
        assert TLVOption(code=230, name="!!!").slug == "option-230"

    def test_equality(self):
        a = TLVOption(code=224, name="x", items=(TLVItem(DataType.UINT8, "1"),))
        b = TLVOption(code=224, name="x", items=[TLVItem(DataType.UINT8, "1")])
        assert a == b
