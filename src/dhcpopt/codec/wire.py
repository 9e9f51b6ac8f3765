"""Text renderings of encoded option bytes."""

from __future__ import annotations

INFINITE_LIFETIME = 0xFFFFFFFF


def to_hex(data: bytes) -> str:
    """Render bytes as contiguous lowercase hex.

    >>> to_hex(bytes([192, 168, 1, 1]))
    'c0a80101'
    >>> to_hex(b"")
    ''
    """
    return data.hex()


def wire_format(data: bytes) -> str:
    """Render bytes as space-separated hex pairs.

    >>> wire_format(bytes([192, 168, 1, 1]))
    'c0 a8 01 01'
    """
    return " ".join(f"{b:02x}" for b in data)


def colon_hex(data: bytes) -> str:
    """Render bytes as colon-separated hex pairs (ISC dhcpd / dnsmasq syntax).

    >>> colon_hex(b"\\xde\\xad\\xbe\\xef")
    'de:ad:be:ef'
    """
    return ":".join(f"{b:02x}" for b in data)


def uint32_hex(value: int) -> str:
    """Render a uint32 as 8 hex digits.

    >>> uint32_hex(302400)
    '00049d40'
    """
    return f"{value:08x}"


def format_time(seconds: int) -> str:
    """Format a lifetime or timer value for display.

    0xFFFFFFFF is the protocol's infinity value.

    >>> format_time(0xFFFFFFFF)
    'Infinite'
    >>> format_time(0)
    '0 seconds'
    >>> format_time(302400)
    '3d 12h'
    >>> format_time(90061)
    '1d 1h 1m 1s'
    >>> format_time(45)
    '45s'
    """
    if seconds == INFINITE_LIFETIME:
        return "Infinite"
    if seconds == 0:
        return "0 seconds"

    days, rem = divmod(seconds, 86400)
    hours, rem = divmod(rem, 3600)
    mins, secs = divmod(rem, 60)

    parts = []
    if days:
        parts.append(f"{days}d")
    if hours:
        parts.append(f"{hours}h")
    if mins:
        parts.append(f"{mins}m")
    if secs:
        parts.append(f"{secs}s")
    return " ".join(parts)
