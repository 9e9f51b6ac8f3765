"""Freeform DHCPv4 option models: typed items, options, and build results."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class DataType(enum.Enum):
    """Semantic type of a single TLV item value.

    Each type has a fixed text grammar (what the user may enter) and a
    fixed wire encoding (what bytes it becomes).
    """

    IPV4 = "ipv4"
    IPV6 = "ipv6"
    FQDN = "fqdn"
    STRING = "string"
    HEX = "hex"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    BOOLEAN = "boolean"

    @property
    def label(self) -> str:
        """Short display name used in validation messages."""
        return _LABELS[self]

    @property
    def width(self) -> int | None:
        """Encoded size in bytes for fixed-width types, None otherwise."""
        return _WIDTHS.get(self)

    def __str__(self) -> str:
        return self.value


_LABELS = {
    DataType.IPV4: "IPv4",
    DataType.IPV6: "IPv6",
    DataType.FQDN: "FQDN",
    DataType.STRING: "String",
    DataType.HEX: "Hex",
    DataType.UINT8: "UInt8",
    DataType.UINT16: "UInt16",
    DataType.UINT32: "UInt32",
    DataType.BOOLEAN: "Boolean",
}

_WIDTHS = {
    DataType.IPV4: 4,
    DataType.IPV6: 16,
    DataType.UINT8: 1,
    DataType.UINT16: 2,
    DataType.UINT32: 4,
    DataType.BOOLEAN: 1,
}


@dataclass(frozen=True)
class TLVItem:
    """One data element of an option payload.

    Attributes:
        data_type: How the value is interpreted and encoded.
        value: Raw text as entered (e.g. '192.168.1.1', '8080', 'true').
    """

    data_type: DataType
    value: str


@dataclass(frozen=True)
class TLVOption:
    """A DHCPv4 option made of an ordered list of typed items.

    Item order is significant: items are concatenated in list order.

    Attributes:
        code: DHCP option code (0-255). Site-specific options use 224-254.
        name: Display label, used in generated config but never encoded.
        items: Payload items in encoding order.
    """

    code: int
    name: str
    items: tuple[TLVItem, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))

    @property
    def slug(self) -> str:
        """Config-safe identifier derived from the option name.

        >>> TLVOption(code=224, name="VoIP Configuration").slug
        'voip-configuration'
        >>> TLVOption(code=225, name="  Custom  Flags! ").slug
        'custom-flags'
        """
        out: list[str] = []
        for word in self.name.lower().split():
            cleaned = "".join(c for c in word if c.isascii() and (c.isalnum() or c in "-_"))
            if cleaned:
                out.append(cleaned)
        return "-".join(out) or f"option-{self.code}"


@dataclass(frozen=True)
class BreakdownRow:
    """How one item contributed to the option payload.

    Attributes:
        label: Row label, e.g. 'Item 1 (ipv4)'.
        hex: The item's own bytes as contiguous lowercase hex.
        wire: The same bytes, space-separated.
        description: Data type and decoded value,
            e.g. 'IPv4 Address: 192.168.1.1'.
        offset: Byte offset of the item within the payload.
        length: Number of bytes the item encodes to.
    """

    label: str
    hex: str
    wire: str
    description: str
    offset: int
    length: int


@dataclass(frozen=True)
class TLVResult:
    """Immutable snapshot of a built option.

    The payload excludes the code and length octets. The framed option
    (code + length + payload) is available as option_hex.
    """

    option: TLVOption
    data: bytes
    hex_encoded: str
    wire_format: str
    breakdown: tuple[BreakdownRow, ...]
    option_hex: str
    option_wire_format: str
    examples: dict[str, str] = field(default_factory=dict)

    @property
    def data_length(self) -> int:
        return len(self.data)

    @property
    def total_length(self) -> int:
        """Length of the framed option, code and length octets included."""
        return len(self.data) + 2

    def to_dict(self) -> dict:
        return {
            "option": {
                "code": self.option.code,
                "name": self.option.name,
                "items": [
                    {"type": item.data_type.value, "value": item.value}
                    for item in self.option.items
                ],
            },
            "data_length": self.data_length,
            "total_length": self.total_length,
            "hex_encoded": self.hex_encoded,
            "wire_format": self.wire_format,
            "option_hex": self.option_hex,
            "breakdown": [
                {
                    "label": row.label,
                    "hex": row.hex,
                    "description": row.description,
                    "offset": row.offset,
                    "length": row.length,
                }
                for row in self.breakdown
            ],
            "examples": dict(self.examples),
        }
