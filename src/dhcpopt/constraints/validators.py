"""Pre-flight checks for option builders.

Option Constraints: run on a TLVOption before the TLV assembler.
Prefix Delegation Constraints: run on a PrefixDelegationConfig before
the IA_PD builder.

The check_* functions return a structured ValidationResult (errors and
warnings). The validate_* functions return just the error messages, in
order of discovery. Neither ever raises on bad input.
"""

from __future__ import annotations

import ipaddress

from dhcpopt.codec.items import encode_item
from dhcpopt.constraints.errors import EncodingError, ValidationResult
from dhcpopt.models.prefix_delegation import PrefixDelegationConfig
from dhcpopt.models.tlv import TLVOption

UINT32_MAX = 0xFFFFFFFF
MAX_OPTION_DATA = 255
SITE_SPECIFIC_FIRST = 224


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _in_uint32(value: object) -> bool:
    return _is_int(value) and 0 <= value <= UINT32_MAX


# ---------------------------------------------------------------------------
# Option Constraints (freeform DHCPv4 TLV)
# ---------------------------------------------------------------------------

def check_tlv_option(option: TLVOption) -> ValidationResult:
    """Validate a freeform option.

    Checks:
    - Option code is an integer between 0 and 255
    - Option name is present
    - At least one data item
    - Every item value is present and matches its data type
    - Total payload fits the single-octet DHCPv4 length field
    Warns about Pad/End codes and codes outside the site-specific range.
    """
    result = ValidationResult()

    if not _is_int(option.code) or not 0 <= option.code <= 255:
        result.error(
            "option_code_range",
            "Option code must be between 0 and 255",
            field="code",
        )
    elif option.code in (0, 255):
        result.warning(
            "option_code_reserved",
            f"Option code {option.code} is reserved for "
            f"{'Pad' if option.code == 0 else 'End'} and cannot carry data",
            field="code",
        )
    elif option.code < SITE_SPECIFIC_FIRST:
        result.warning(
            "option_code_not_site_specific",
            f"Option code {option.code} is outside the site-specific range "
            f"({SITE_SPECIFIC_FIRST}-254)",
            field="code",
        )

    if not isinstance(option.name, str) or not option.name.strip():
        result.error("missing_name", "Option name is required", field="name")

    if not option.items:
        result.error("no_items", "At least one data item is required", field="items")

    total = 0
    items_ok = True
    for index, item in enumerate(option.items, start=1):
        try:
            total += len(encode_item(item))
        except EncodingError as e:
            items_ok = False
            result.error("invalid_value", str(e), record_id=f"Item {index}", field="value")
        except (AttributeError, TypeError):
            items_ok = False
            result.error(
                "invalid_value",
                f"Value must be text, got {type(item.value).__name__}",
                record_id=f"Item {index}",
                field="value",
            )

    if items_ok and total > MAX_OPTION_DATA:
        result.error(
            "option_too_long",
            f"Option data is {total} bytes; maximum is {MAX_OPTION_DATA}",
            field="items",
        )

    return result


def validate_tlv_option(option: TLVOption) -> list[str]:
    """Validate a freeform option, returning error messages (empty if valid)."""
    return check_tlv_option(option).messages()


# ---------------------------------------------------------------------------
# Prefix Delegation Constraints (DHCPv6 IA_PD)
# ---------------------------------------------------------------------------

def parse_prefix(text: object) -> tuple[ipaddress.IPv6Address, int] | None:
    """Parse 'address/length' text, or return None if it is not an IPv6 prefix.

    >>> parse_prefix("2001:db8::/56")
    (IPv6Address('2001:db8::'), 56)
    >>> parse_prefix("2001:db8::/129") is None
    True
    """
    if not isinstance(text, str) or text.count("/") != 1 or "%" in text:
        return None
    address, length = text.strip().split("/")
    if not (length.isascii() and length.isdigit() and len(length) <= 3) or int(length) > 128:
        return None
    try:
        return ipaddress.IPv6Address(address), int(length)
    except ValueError:
        return None


def check_prefix_delegation_config(config: PrefixDelegationConfig) -> ValidationResult:
    """Validate an IA_PD configuration.

    Checks:
    - IAID, T1 and T2 are within the uint32 range
    - T1 <= T2 when both are given and non-zero (zero leaves the timer
      to the client, RFC 8415 section 21.21)
    - At least one prefix
    - Each prefix is a valid IPv6 prefix with length 0-128
    - Each lifetime is within the uint32 range
    - Preferred lifetime <= valid lifetime
    Warns when a prefix address has bits set beyond its length.
    """
    result = ValidationResult()

    if not _in_uint32(config.iaid):
        result.error("iaid_range", f"IAID must be between 0 and {UINT32_MAX}", field="iaid")

    t1_ok = config.t1 is None or _in_uint32(config.t1)
    t2_ok = config.t2 is None or _in_uint32(config.t2)
    if not t1_ok:
        result.error("t1_range", f"T1 must be between 0 and {UINT32_MAX}", field="t1")
    if not t2_ok:
        result.error("t2_range", f"T2 must be between 0 and {UINT32_MAX}", field="t2")
    if (
        t1_ok and t2_ok
        and config.t1 and config.t2
        and config.t1 > config.t2
    ):
        result.error("t1_after_t2", "T1 must be less than or equal to T2", field="t1")

    if not config.prefixes:
        result.error("no_prefixes", "At least one prefix must be configured", field="prefixes")

    for index, prefix in enumerate(config.prefixes, start=1):
        record_id = f"Prefix {index}"

        parsed = parse_prefix(prefix.prefix)
        if parsed is None:
            result.error(
                "invalid_prefix",
                f"Invalid IPv6 prefix format: {prefix.prefix!r}",
                record_id=record_id,
                field="prefix",
            )
        else:
            address, length = parsed
            network = ipaddress.IPv6Network(f"{address}/{length}", strict=False)
            if address != network.network_address:
                result.warning(
                    "prefix_host_bits",
                    f"{prefix.prefix} has bits set beyond /{length}; "
                    f"the address is encoded as written",
                    record_id=record_id,
                    field="prefix",
                )

        lifetimes_ok = True
        if prefix.preferred_lifetime is not None and not _in_uint32(prefix.preferred_lifetime):
            lifetimes_ok = False
            result.error(
                "preferred_lifetime_range",
                f"Preferred lifetime must be between 0 and {UINT32_MAX}",
                record_id=record_id,
                field="preferred_lifetime",
            )
        if prefix.valid_lifetime is not None and not _in_uint32(prefix.valid_lifetime):
            lifetimes_ok = False
            result.error(
                "valid_lifetime_range",
                f"Valid lifetime must be between 0 and {UINT32_MAX}",
                record_id=record_id,
                field="valid_lifetime",
            )
        if (
            lifetimes_ok
            and prefix.effective_preferred_lifetime > prefix.effective_valid_lifetime
        ):
            result.error(
                "preferred_after_valid",
                "Preferred lifetime must be <= valid lifetime",
                record_id=record_id,
                field="preferred_lifetime",
            )

    return result


def validate_prefix_delegation_config(config: PrefixDelegationConfig) -> list[str]:
    """Validate an IA_PD configuration, returning error messages (empty if valid)."""
    return check_prefix_delegation_config(config).messages()
