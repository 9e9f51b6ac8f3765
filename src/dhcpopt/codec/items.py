"""Typed-item encoding.

Turns one TLVItem (a data type plus the text the user entered) into the
bytes it contributes to an option payload. All multi-byte integers and
addresses are big-endian (network byte order). Nothing is padded and
no length prefix is added: the enclosing option carries the length.

The encoder re-checks every value against its type's grammar and raises
EncodingError rather than emit partial output.
"""

from __future__ import annotations

import ipaddress
import re
from collections.abc import Callable

from dhcpopt.constraints.errors import EncodingError
from dhcpopt.models.tlv import DataType, TLVItem
from dhcpopt.utils.dns import split_labels

_INT_RE = re.compile(r"^[+-]?[0-9]+$")
_HEX_SEPARATORS_RE = re.compile(r"[\s:]")
_HEX_RE = re.compile(r"^[0-9a-fA-F]*$")

_TRUE_LITERALS = frozenset({"1", "true"})
_FALSE_LITERALS = frozenset({"0", "false"})


def _fail(data_type: DataType, message: str) -> EncodingError:
    return EncodingError(f"{data_type.label}: {message}")


def encode_ipv4(text: str) -> bytes:
    """Encode a dotted-quad IPv4 address as 4 bytes.

    >>> encode_ipv4("192.168.1.1").hex()
    'c0a80101'
    """
    try:
        return ipaddress.IPv4Address(text).packed
    except ValueError:
        raise _fail(DataType.IPV4, "Invalid address format") from None


def encode_ipv6(text: str) -> bytes:
    """Encode an IPv6 address as 16 bytes.

    '::' expands to zero groups and a trailing dotted quad fills the
    low 32 bits.

    >>> encode_ipv6("2001:db8::1").hex()
    '20010db8000000000000000000000001'
    >>> encode_ipv6("::ffff:192.0.2.1").hex()
    '00000000000000000000ffffc0000201'
    """
    # Scoped addresses have no meaning inside an option value
    if "%" in text:
        raise _fail(DataType.IPV6, "Zone identifiers are not allowed")
    try:
        return ipaddress.IPv6Address(text).packed
    except ValueError:
        raise _fail(DataType.IPV6, "Invalid address format") from None


def encode_fqdn(text: str) -> bytes:
    """Encode a domain name in uncompressed DNS wire format.

    >>> encode_fqdn("example.com").hex()
    '076578616d706c6503636f6d00'
    """
    try:
        labels = split_labels(text)
    except ValueError as e:
        raise _fail(DataType.FQDN, str(e)) from None
    out = bytearray()
    for label in labels:
        raw = label.encode("ascii")
        out.append(len(raw))
        out += raw
    out.append(0)
    return bytes(out)


def encode_string(text: str) -> bytes:
    """Encode text as raw UTF-8, without prefix or terminator."""
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError:
        raise _fail(DataType.STRING, "Text cannot be encoded as UTF-8") from None


def encode_hex(text: str) -> bytes:
    """Decode hex digits to bytes, ignoring whitespace and colons.

    >>> encode_hex("de ad:be EF")
    b'\\xde\\xad\\xbe\\xef'
    """
    cleaned = _HEX_SEPARATORS_RE.sub("", text)
    if not _HEX_RE.match(cleaned):
        raise _fail(DataType.HEX, "Only hexadecimal characters allowed")
    if not cleaned:
        raise _fail(DataType.HEX, "No hex digits given")
    if len(cleaned) % 2:
        raise _fail(DataType.HEX, "Must have an even number of hex digits")
    return bytes.fromhex(cleaned)


def encode_uint(text: str, data_type: DataType) -> bytes:
    """Encode a decimal integer as a fixed-width big-endian unsigned value.

    >>> encode_uint("8080", DataType.UINT16).hex()
    '1f90'
    """
    width = data_type.width
    maximum = (1 << (8 * width)) - 1
    error = _fail(data_type, f"Must be a whole number between 0 and {maximum}")
    if not _INT_RE.match(text):
        raise error
    # Bound the digit count before int() so huge literals never reach it
    digits = text.lstrip("+-").lstrip("0") or "0"
    if len(digits) > len(str(maximum)):
        raise error
    value = int(digits)
    if text.startswith("-") and value:
        raise error
    if value > maximum:
        raise error
    return value.to_bytes(width, "big")


def encode_boolean(text: str) -> bytes:
    """Encode a boolean literal as a single 0x00/0x01 byte.

    >>> encode_boolean("TRUE")
    b'\\x01'
    >>> encode_boolean("0")
    b'\\x00'
    """
    literal = text.lower()
    if literal in _TRUE_LITERALS:
        return b"\x01"
    if literal in _FALSE_LITERALS:
        return b"\x00"
    raise _fail(DataType.BOOLEAN, "Must be 0, 1, true, or false")


_ENCODERS: dict[DataType, Callable[[str], bytes]] = {
    DataType.IPV4: encode_ipv4,
    DataType.IPV6: encode_ipv6,
    DataType.FQDN: encode_fqdn,
    DataType.STRING: encode_string,
    DataType.HEX: encode_hex,
    DataType.UINT8: lambda text: encode_uint(text, DataType.UINT8),
    DataType.UINT16: lambda text: encode_uint(text, DataType.UINT16),
    DataType.UINT32: lambda text: encode_uint(text, DataType.UINT32),
    DataType.BOOLEAN: encode_boolean,
}


def encode_item(item: TLVItem) -> bytes:
    """Encode one item to the bytes it contributes to the payload.

    String values are encoded exactly as given. Every other type has
    surrounding whitespace stripped first.

    Raises:
        EncodingError: If the value is empty or does not match the
            grammar of its data type.
    """
    if not isinstance(item.data_type, DataType):
        raise EncodingError(f"Unknown data type: {item.data_type!r}")
    if not item.value.strip():
        raise _fail(item.data_type, "Value is required")

    if item.data_type is DataType.STRING:
        return encode_string(item.value)
    return _ENCODERS[item.data_type](item.value.strip())
