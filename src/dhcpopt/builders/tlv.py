"""Freeform DHCPv4 option assembly.

Encodes each item of a TLVOption in list order, concatenates the bytes
into the option payload and renders it: contiguous hex, spaced wire
format, a per-item breakdown with byte offsets, the framed option
(code + length + payload, RFC 2132 section 2) and vendor config
snippets.
"""

from __future__ import annotations

from dhcpopt.codec.items import encode_item
from dhcpopt.codec.parsers import describe_item
from dhcpopt.codec.wire import to_hex, wire_format
from dhcpopt.constraints.errors import EncodingError
from dhcpopt.constraints.validators import validate_tlv_option
from dhcpopt.generators.base import DEFAULT_SUBNET4, TLVGenerator, check_subnet
from dhcpopt.generators.dnsmasq import generate_dnsmasq
from dhcpopt.generators.isc_dhcpd import generate_isc_dhcpd
from dhcpopt.generators.kea import generate_kea_dhcp4
from dhcpopt.models.tlv import BreakdownRow, TLVOption, TLVResult

TLV_DIALECTS: dict[str, TLVGenerator] = {
    "isc_dhcpd": generate_isc_dhcpd,
    "kea_dhcp4": generate_kea_dhcp4,
    "dnsmasq": generate_dnsmasq,
}


def build_tlv_option(option: TLVOption, subnet: str = DEFAULT_SUBNET4) -> TLVResult:
    """Build a freeform option from its typed items.

    The option is validated first. Building never produces partial
    output: any validation error aborts the build.

    Args:
        option: The option to encode.
        subnet: Example IPv4 subnet used in the vendor config snippets.

    Raises:
        EncodingError: If the option does not pass validation. The
            message joins every validation error with '; '. Also raised
            when subnet is not a valid IPv4 network.
    """
    errors = validate_tlv_option(option)
    if errors:
        raise EncodingError("; ".join(errors))
    try:
        subnet = check_subnet(subnet, 4)
    except ValueError as e:
        raise EncodingError(str(e)) from None

    payload = bytearray()
    breakdown: list[BreakdownRow] = []
    for index, item in enumerate(option.items, start=1):
        encoded = encode_item(item)
        breakdown.append(BreakdownRow(
            label=f"Item {index} ({item.data_type.value})",
            hex=to_hex(encoded),
            wire=wire_format(encoded),
            description=describe_item(item.data_type, encoded),
            offset=len(payload),
            length=len(encoded),
        ))
        payload += encoded

    data = bytes(payload)
    framed = bytes([option.code, len(data)]) + data

    return TLVResult(
        option=option,
        data=data,
        hex_encoded=to_hex(data),
        wire_format=wire_format(data),
        breakdown=tuple(breakdown),
        option_hex=to_hex(framed),
        option_wire_format=wire_format(framed),
        examples={
            name: generate(option, data, subnet=subnet)
            for name, generate in TLV_DIALECTS.items()
        },
    )
