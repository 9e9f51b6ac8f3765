"""Option value parsers: the inverse of the typed-item encoder.

Each function parses the raw bytes of one item back to its canonical
text form. Raises ValueError for malformed or truncated data; nothing is
silently skipped.

parse_ia_pd() decodes IA_PD option data (IAID, T1, T2 and the IA Prefix
sub-records) back into a PrefixDelegationConfig.
"""

from __future__ import annotations

import ipaddress
import struct

from dhcpopt.models.prefix_delegation import PrefixConfig, PrefixDelegationConfig
from dhcpopt.models.tlv import DataType

IA_PD_HEADER = struct.Struct(">III")
IA_PREFIX_RECORD = struct.Struct(">IIB16s")


def parse_ipv4(data: bytes) -> str:
    """Parse a 4-byte IPv4 address into dotted-quad notation.

    >>> parse_ipv4(bytes([192, 168, 1, 1]))
    '192.168.1.1'

    Raises ValueError if data is not exactly 4 bytes.
    """
    if len(data) != 4:
        raise ValueError(f"IPv4 address must be 4 bytes, got {len(data)}: {data!r}")
    return str(ipaddress.IPv4Address(data))


def parse_ipv6(data: bytes) -> str:
    """Parse a 16-byte IPv6 address into its compressed text form.

    Raises ValueError if data is not exactly 16 bytes.
    """
    if len(data) != 16:
        raise ValueError(f"IPv6 address must be 16 bytes, got {len(data)}: {data!r}")
    return str(ipaddress.IPv6Address(data))


def parse_fqdn(data: bytes) -> str:
    """Parse an uncompressed DNS wire-format name.

    >>> parse_fqdn(b"\\x07example\\x03com\\x00")
    'example.com'

    Raises ValueError on compression pointers, a missing terminator or
    trailing bytes after the terminator.
    """
    labels: list[str] = []
    offset = 0
    while True:
        if offset >= len(data):
            raise ValueError(f"Domain name is missing its terminating zero byte: {data!r}")
        length = data[offset]
        offset += 1
        if length == 0:
            break
        if length > 63:
            raise ValueError(f"Label length {length} at offset {offset - 1} is not a plain label")
        if offset + length > len(data):
            raise ValueError(
                f"Label declares {length} bytes but only {len(data) - offset} available"
            )
        labels.append(data[offset:offset + length].decode("ascii"))
        offset += length
    if offset != len(data):
        raise ValueError(f"{len(data) - offset} trailing byte(s) after domain name")
    return ".".join(labels)


def parse_string(data: bytes) -> str:
    """Parse raw UTF-8 text. Raises ValueError (UnicodeDecodeError) if invalid."""
    return data.decode("utf-8")


def parse_hex(data: bytes) -> str:
    return data.hex()


def parse_uint(data: bytes, width: int) -> int:
    """Parse a big-endian unsigned integer of exactly width bytes.

    >>> parse_uint(b"\\x1f\\x90", 2)
    8080
    """
    if len(data) != width:
        raise ValueError(f"Integer must be {width} byte(s), got {len(data)}: {data!r}")
    return int.from_bytes(data, "big")


def parse_boolean(data: bytes) -> bool:
    """Parse a single 0x00/0x01 byte.

    Raises ValueError for any other length or value.
    """
    if len(data) != 1 or data[0] not in (0, 1):
        raise ValueError(f"Boolean must be a single 0x00 or 0x01 byte, got {data!r}")
    return data[0] == 1


def decode_item(data_type: DataType, data: bytes) -> str:
    """Parse an item's bytes back to canonical text for its data type.

    >>> decode_item(DataType.IPV6, bytes.fromhex("20010db8000000000000000000000001"))
    '2001:db8::1'
    >>> decode_item(DataType.BOOLEAN, b"\\x00")
    'false'
    """
    if data_type is DataType.IPV4:
        return parse_ipv4(data)
    if data_type is DataType.IPV6:
        return parse_ipv6(data)
    if data_type is DataType.FQDN:
        return parse_fqdn(data)
    if data_type is DataType.STRING:
        return parse_string(data)
    if data_type is DataType.HEX:
        return parse_hex(data)
    if data_type is DataType.BOOLEAN:
        return "true" if parse_boolean(data) else "false"
    if data_type.width is not None:
        return str(parse_uint(data, data_type.width))
    raise ValueError(f"Unknown data type: {data_type!r}")


def describe_item(data_type: DataType, data: bytes) -> str:
    """One-line human description of an encoded item.

    >>> describe_item(DataType.IPV4, bytes([192, 168, 1, 1]))
    'IPv4 Address: 192.168.1.1'
    >>> describe_item(DataType.HEX, b"\\xde\\xad\\xbe\\xef")
    'Hex Data: deadbeef (4 bytes)'
    """
    text = decode_item(data_type, data)
    if data_type is DataType.IPV4:
        return f"IPv4 Address: {text}"
    if data_type is DataType.IPV6:
        return f"IPv6 Address: {text}"
    if data_type is DataType.FQDN:
        return f"Domain Name: {text} ({len(data)} bytes)"
    if data_type is DataType.STRING:
        return f"String: {text!r} ({len(data)} bytes)"
    if data_type is DataType.HEX:
        return f"Hex Data: {text} ({len(data)} bytes)"
    return f"{data_type.label}: {text}"


def parse_ia_prefix(data: bytes) -> PrefixConfig:
    """Parse one 25-byte IA Prefix record (option 26 data).

    Layout: preferred-lifetime(4) valid-lifetime(4) prefix-length(1)
    prefix(16).

    Raises ValueError if data is not exactly 25 bytes or the prefix
    length exceeds 128.
    """
    if len(data) != IA_PREFIX_RECORD.size:
        raise ValueError(
            f"IA Prefix record must be {IA_PREFIX_RECORD.size} bytes, got {len(data)}"
        )
    preferred, valid, prefix_len, address = IA_PREFIX_RECORD.unpack(data)
    if prefix_len > 128:
        raise ValueError(f"IA Prefix length {prefix_len} exceeds 128")
    return PrefixConfig(
        prefix=f"{ipaddress.IPv6Address(address)}/{prefix_len}",
        preferred_lifetime=preferred,
        valid_lifetime=valid,
    )


def parse_ia_pd(data: bytes) -> PrefixDelegationConfig:
    """Parse IA_PD option data (without the option 25 code/length header).

    The IA Prefix records are expected unframed, as produced by the
    prefix delegation builder's data output.

    Raises ValueError if data is truncated or has a partial record.
    """
    if len(data) < IA_PD_HEADER.size:
        raise ValueError(
            f"IA_PD data too short: {len(data)} bytes (need at least {IA_PD_HEADER.size})"
        )
    iaid, t1, t2 = IA_PD_HEADER.unpack_from(data, 0)
    body = data[IA_PD_HEADER.size:]
    if len(body) % IA_PREFIX_RECORD.size:
        raise ValueError(
            f"IA_PD body of {len(body)} bytes is not a whole number of "
            f"{IA_PREFIX_RECORD.size}-byte prefix records"
        )
    prefixes = tuple(
        parse_ia_prefix(body[offset:offset + IA_PREFIX_RECORD.size])
        for offset in range(0, len(body), IA_PREFIX_RECORD.size)
    )
    return PrefixDelegationConfig(iaid=iaid, t1=t1, t2=t2, prefixes=prefixes)
