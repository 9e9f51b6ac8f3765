"""DHCPv6 IA_PD option building (RFC 8415 sections 21.21 and 21.22).

The IA_PD option data is a fixed two-level structure:

  IAID(4) T1(4) T2(4)                                  12-byte header
  preferred(4) valid(4) prefix-len(1) prefix(16)       25 bytes per prefix

All integers are big-endian. The data form excludes the option-code and
option-length envelopes. The framed form wraps each prefix as option 26
(IAPREFIX) and the whole as option 25 (IA_PD), each with a 2-byte code
and a 2-byte length.
"""

from __future__ import annotations

import struct

from dhcpopt.codec.parsers import IA_PD_HEADER, IA_PREFIX_RECORD
from dhcpopt.codec.wire import format_time, to_hex, uint32_hex, wire_format
from dhcpopt.constraints.errors import EncodingError
from dhcpopt.constraints.validators import parse_prefix, validate_prefix_delegation_config
from dhcpopt.generators.base import DEFAULT_SUBNET6, PrefixDelegationGenerator, check_subnet
from dhcpopt.generators.isc_dhcpd import generate_isc_dhcpd6
from dhcpopt.generators.kea import generate_kea_dhcp6
from dhcpopt.models.prefix_delegation import (
    PrefixConfig,
    PrefixDelegationConfig,
    PrefixDelegationResult,
    PrefixResult,
)

OPTION_IA_PD = 25
OPTION_IAPREFIX = 26

_OPTION_HEADER = struct.Struct(">HH")

PD_DIALECTS: dict[str, PrefixDelegationGenerator] = {
    "kea_dhcp6": generate_kea_dhcp6,
    "isc_dhcpd6": generate_isc_dhcpd6,
}


def _frame(code: int, data: bytes) -> bytes:
    return _OPTION_HEADER.pack(code, len(data)) + data


def _encode_prefix(prefix: PrefixConfig) -> tuple[bytes, PrefixResult]:
    """Encode one IA Prefix record and describe it."""
    parsed = parse_prefix(prefix.prefix)
    if parsed is None:
        raise EncodingError(f"Invalid IPv6 prefix format: {prefix.prefix!r}")
    address, prefix_length = parsed
    preferred = prefix.effective_preferred_lifetime
    valid = prefix.effective_valid_lifetime

    record = IA_PREFIX_RECORD.pack(preferred, valid, prefix_length, address.packed)
    return record, PrefixResult(
        prefix=f"{address}/{prefix_length}",
        prefix_length=prefix_length,
        preferred_lifetime=preferred,
        preferred_lifetime_hex=uint32_hex(preferred),
        preferred_lifetime_formatted=format_time(preferred),
        valid_lifetime=valid,
        valid_lifetime_hex=uint32_hex(valid),
        valid_lifetime_formatted=format_time(valid),
        prefix_hex=to_hex(address.packed),
        hex=to_hex(record),
        wire_format=wire_format(record),
    )


def build_prefix_delegation(
    config: PrefixDelegationConfig,
    subnet: str = DEFAULT_SUBNET6,
) -> PrefixDelegationResult:
    """Build IA_PD option data for a prefix delegation config.

    Unset T1/T2 are encoded as 0 and reported as not specified.

    Args:
        config: IAID, timers and the prefixes to delegate.
        subnet: Example IPv6 subnet used in the vendor config snippets.

    Raises:
        EncodingError: If the config does not pass validation. The
            message joins every validation error with '; '. Also raised
            when subnet is not a valid IPv6 network.
    """
    errors = validate_prefix_delegation_config(config)
    if errors:
        raise EncodingError("; ".join(errors))
    try:
        subnet = check_subnet(subnet, 6)
    except ValueError as e:
        raise EncodingError(str(e)) from None

    t1 = config.t1 if config.t1 is not None else 0
    t2 = config.t2 if config.t2 is not None else 0

    records: list[bytes] = []
    prefixes: list[PrefixResult] = []
    for prefix in config.prefixes:
        record, prefix_result = _encode_prefix(prefix)
        records.append(record)
        prefixes.append(prefix_result)

    header = IA_PD_HEADER.pack(config.iaid, t1, t2)
    data = header + b"".join(records)
    framed = _frame(
        OPTION_IA_PD,
        header + b"".join(_frame(OPTION_IAPREFIX, r) for r in records),
    )

    prefix_results = tuple(prefixes)
    return PrefixDelegationResult(
        iaid=config.iaid,
        iaid_hex=uint32_hex(config.iaid),
        t1=t1,
        t1_hex=uint32_hex(t1),
        t1_formatted=format_time(t1) if config.t1 is not None else "Not specified",
        t1_specified=config.t1 is not None,
        t2=t2,
        t2_hex=uint32_hex(t2),
        t2_formatted=format_time(t2) if config.t2 is not None else "Not specified",
        t2_specified=config.t2 is not None,
        prefixes=prefix_results,
        data=data,
        full_hex=to_hex(data),
        full_wire_format=wire_format(data),
        option_hex=to_hex(framed),
        option_wire_format=wire_format(framed),
        examples={
            name: generate(config, prefix_results, subnet=subnet)
            for name, generate in PD_DIALECTS.items()
        },
    )
