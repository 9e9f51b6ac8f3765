"""DHCPv6 prefix delegation models (RFC 8415 IA_PD and IA Prefix options)."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass, field

# Conventional lifetimes applied when a prefix does not state its own.
DEFAULT_PREFERRED_LIFETIME = 604800   # 7 days
DEFAULT_VALID_LIFETIME = 2592000      # 30 days

INFINITY = 0xFFFFFFFF


@dataclass(frozen=True)
class PrefixConfig:
    """One delegated prefix.

    Attributes:
        prefix: CIDR text, e.g. '2001:db8:1000::/56'.
        preferred_lifetime: Seconds (uint32), None for the default.
        valid_lifetime: Seconds (uint32), None for the default.
    """

    prefix: str
    preferred_lifetime: int | None = None
    valid_lifetime: int | None = None

    @property
    def effective_preferred_lifetime(self) -> int:
        if self.preferred_lifetime is None:
            return DEFAULT_PREFERRED_LIFETIME
        return self.preferred_lifetime

    @property
    def effective_valid_lifetime(self) -> int:
        if self.valid_lifetime is None:
            return DEFAULT_VALID_LIFETIME
        return self.valid_lifetime


@dataclass(frozen=True)
class PrefixDelegationConfig:
    """An IA_PD container and the prefixes it delegates.

    Attributes:
        iaid: Identity Association identifier (uint32).
        t1: Renewal timer in seconds, None when not specified.
        t2: Rebinding timer in seconds, None when not specified.
        prefixes: Delegated prefixes in encoding order.
    """

    iaid: int
    t1: int | None = None
    t2: int | None = None
    prefixes: tuple[PrefixConfig, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "prefixes", tuple(self.prefixes))


@dataclass(frozen=True)
class PrefixResult:
    """Encoded IA Prefix sub-record (25 bytes, option 26 data)."""

    prefix: str
    prefix_length: int
    preferred_lifetime: int
    preferred_lifetime_hex: str
    preferred_lifetime_formatted: str
    valid_lifetime: int
    valid_lifetime_hex: str
    valid_lifetime_formatted: str
    prefix_hex: str
    hex: str
    wire_format: str

    @property
    def address(self) -> str:
        return self.prefix.split("/", 1)[0]

    @property
    def network(self) -> str:
        """Network address of the prefix, host bits cleared.

        The wire record keeps the address as written. Server configs
        need the network address.
        """
        return str(ipaddress.IPv6Network(self.prefix, strict=False).network_address)

    @property
    def length(self) -> int:
        return len(self.hex) // 2


@dataclass(frozen=True)
class PrefixDelegationResult:
    """Immutable snapshot of a built IA_PD option.

    data/full_hex hold the option data only (IAID, T1, T2 and the
    prefix sub-records). option_hex is the same content framed as
    option 25 with each prefix framed as option 26.
    """

    iaid: int
    iaid_hex: str
    t1: int
    t1_hex: str
    t1_formatted: str
    t1_specified: bool
    t2: int
    t2_hex: str
    t2_formatted: str
    t2_specified: bool
    prefixes: tuple[PrefixResult, ...]
    data: bytes
    full_hex: str
    full_wire_format: str
    option_hex: str
    option_wire_format: str
    examples: dict[str, str] = field(default_factory=dict)

    @property
    def total_length(self) -> int:
        return len(self.data)

    @property
    def option_length(self) -> int:
        return len(self.option_hex) // 2

    def to_dict(self) -> dict:
        return {
            "iaid": self.iaid,
            "iaid_hex": self.iaid_hex,
            "t1": self.t1,
            "t1_hex": self.t1_hex,
            "t1_formatted": self.t1_formatted,
            "t1_specified": self.t1_specified,
            "t2": self.t2,
            "t2_hex": self.t2_hex,
            "t2_formatted": self.t2_formatted,
            "t2_specified": self.t2_specified,
            "prefixes": [
                {
                    "prefix": p.prefix,
                    "prefix_length": p.prefix_length,
                    "preferred_lifetime": p.preferred_lifetime,
                    "preferred_lifetime_formatted": p.preferred_lifetime_formatted,
                    "valid_lifetime": p.valid_lifetime,
                    "valid_lifetime_formatted": p.valid_lifetime_formatted,
                    "prefix_hex": p.prefix_hex,
                    "hex": p.hex,
                    "length": p.length,
                }
                for p in self.prefixes
            ],
            "total_length": self.total_length,
            "full_hex": self.full_hex,
            "full_wire_format": self.full_wire_format,
            "option_length": self.option_length,
            "option_hex": self.option_hex,
            "examples": dict(self.examples),
        }
