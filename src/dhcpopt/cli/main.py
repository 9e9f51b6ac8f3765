"""CLI entry point for dhcpopt.

Subcommands:
    tlv          Build a freeform DHCPv4 option from typed items.
    pd           Build a DHCPv6 IA_PD option.
    build        Validate and build every option in the config file.
    examples     Build and show the built-in example options.
    format-time  Show a lifetime in days/hours/minutes/seconds.
"""

from __future__ import annotations

import argparse
import json
import sys


def _load_config(args: argparse.Namespace):
    """Load the option file, handling errors."""
    import tomllib

    from dhcpopt.config import ConfigError, load_config

    config_path = getattr(args, "config", None)
    try:
        return load_config(config_path)
    except FileNotFoundError:
        path = config_path or "dhcpopt.toml"
        print(f"Error: config file not found: {path}", file=sys.stderr)
        sys.exit(1)
    except (ConfigError, tomllib.TOMLDecodeError) as e:
        print(f"Error: invalid config file: {e}", file=sys.stderr)
        sys.exit(1)


def _report_validation(result, title: str) -> bool:
    """Print violations to stderr. Returns True if the build may proceed."""
    if result.has_errors:
        print(f"{title}: validation failed", file=sys.stderr)
        print(result.report(), file=sys.stderr)
        return False
    for warning in result.warnings:
        print(f"{title}: {warning}", file=sys.stderr)
    return True


# ---------------------------------------------------------------------------
# Output formatting
# ---------------------------------------------------------------------------

def _format_tlv_result(result, dialect: str | None) -> str:
    option = result.option
    lines = [
        f"Option {option.code} ({option.name.strip()})",
        f"  Data length:  {result.data_length} bytes",
        f"  Hex:          {result.hex_encoded}",
        f"  Wire format:  {result.wire_format}",
        f"  Framed:       {result.option_wire_format}",
        "  Breakdown:",
    ]
    for row in result.breakdown:
        lines.append(f"    [{row.offset:>3d}] {row.label}: {row.wire}")
        lines.append(f"          {row.description}")
    lines.extend(_format_examples(result.examples, dialect))
    return "\n".join(lines)


def _format_pd_result(result, dialect: str | None, title: str = "") -> str:
    lines = [
        f"IA_PD {title}".rstrip(),
        f"  IAID:         {result.iaid} (0x{result.iaid_hex})",
        f"  T1:           {result.t1_formatted} (0x{result.t1_hex})",
        f"  T2:           {result.t2_formatted} (0x{result.t2_hex})",
    ]
    for index, prefix in enumerate(result.prefixes, start=1):
        lines.append(f"  Prefix {index}:     {prefix.prefix}")
        lines.append(
            f"    Preferred:  {prefix.preferred_lifetime_formatted} "
            f"({prefix.preferred_lifetime})"
        )
        lines.append(
            f"    Valid:      {prefix.valid_lifetime_formatted} "
            f"({prefix.valid_lifetime})"
        )
        lines.append(f"    Wire:       {prefix.wire_format}")
    lines.append(f"  Total length: {result.total_length} bytes")
    lines.append(f"  Hex:          {result.full_hex}")
    lines.append(f"  Framed:       {result.option_wire_format}")
    lines.extend(_format_examples(result.examples, dialect))
    return "\n".join(lines)


def _format_examples(examples: dict[str, str], dialect: str | None) -> list[str]:
    lines: list[str] = []
    for name, text in examples.items():
        if dialect and name != dialect:
            continue
        lines.append("")
        lines.append(f"# === {name} ===")
        lines.append(text)
    return lines


def _emit(payload, as_json: bool, text: str) -> None:
    if as_json:
        print(json.dumps(payload, indent=2))
    else:
        print(text)


# ---------------------------------------------------------------------------
# Subcommand: tlv
# ---------------------------------------------------------------------------

def _parse_subnet_arg(raw: str, version: int) -> str:
    from dhcpopt.config import ConfigError
    from dhcpopt.generators.base import check_subnet

    try:
        return check_subnet(raw, version)
    except ValueError as e:
        raise ConfigError(f"--subnet: {e}") from None


def _parse_item_arg(raw: str):
    from dhcpopt.config import ConfigError, parse_data_type
    from dhcpopt.models.tlv import TLVItem

    type_name, sep, value = raw.partition("=")
    if not sep:
        raise ConfigError(f"--item must be TYPE=VALUE, got {raw!r}")
    return TLVItem(data_type=parse_data_type(type_name, "--item"), value=value)


def cmd_tlv(args: argparse.Namespace) -> int:
    """Build a freeform option given on the command line."""
    from dhcpopt.builders.tlv import build_tlv_option
    from dhcpopt.config import ConfigError
    from dhcpopt.constraints.validators import check_tlv_option
    from dhcpopt.models.tlv import TLVOption

    try:
        subnet = _parse_subnet_arg(args.subnet, 4)
        items = tuple(_parse_item_arg(raw) for raw in args.items)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    option = TLVOption(code=args.code, name=args.name, items=items)
    if not _report_validation(check_tlv_option(option), f"Option {args.code}"):
        return 1

    result = build_tlv_option(option, subnet=subnet)
    _emit(result.to_dict(), args.json, _format_tlv_result(result, args.dialect))
    return 0


# ---------------------------------------------------------------------------
# Subcommand: pd
# ---------------------------------------------------------------------------

def _parse_prefix_arg(raw: str):
    """Parse CIDR[,PREFERRED,VALID] into a PrefixConfig."""
    from dhcpopt.config import ConfigError
    from dhcpopt.models.prefix_delegation import PrefixConfig

    parts = [p.strip() for p in raw.split(",")]
    if len(parts) not in (1, 3):
        raise ConfigError(f"--prefix must be CIDR or CIDR,PREFERRED,VALID, got {raw!r}")
    if len(parts) == 1:
        return PrefixConfig(prefix=parts[0])
    try:
        preferred, valid = int(parts[1]), int(parts[2])
    except ValueError:
        raise ConfigError(f"--prefix lifetimes must be integers, got {raw!r}") from None
    return PrefixConfig(prefix=parts[0], preferred_lifetime=preferred, valid_lifetime=valid)


def cmd_pd(args: argparse.Namespace) -> int:
    """Build an IA_PD option given on the command line."""
    from dhcpopt.builders.prefix_delegation import build_prefix_delegation
    from dhcpopt.config import ConfigError
    from dhcpopt.constraints.validators import check_prefix_delegation_config
    from dhcpopt.models.prefix_delegation import PrefixDelegationConfig

    try:
        subnet = _parse_subnet_arg(args.subnet, 6)
        prefixes = tuple(_parse_prefix_arg(raw) for raw in args.prefixes)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    config = PrefixDelegationConfig(iaid=args.iaid, t1=args.t1, t2=args.t2, prefixes=prefixes)
    if not _report_validation(check_prefix_delegation_config(config), f"IA_PD {args.iaid}"):
        return 1

    result = build_prefix_delegation(config, subnet=subnet)
    _emit(result.to_dict(), args.json, _format_pd_result(result, args.dialect))
    return 0


# ---------------------------------------------------------------------------
# Subcommand: build
# ---------------------------------------------------------------------------

def cmd_build(args: argparse.Namespace) -> int:
    """Validate and build every option defined in the config file."""
    from dhcpopt.builders.prefix_delegation import build_prefix_delegation
    from dhcpopt.builders.tlv import build_tlv_option
    from dhcpopt.constraints.validators import (
        check_prefix_delegation_config,
        check_tlv_option,
    )

    config = _load_config(args)
    if not config.tlv_options and not config.prefix_delegations:
        print("Error: no options defined in config file.", file=sys.stderr)
        return 1

    built: list[tuple[dict, str]] = []
    failed = 0

    for option in config.tlv_options:
        if not _report_validation(check_tlv_option(option), f"Option {option.code}"):
            failed += 1
            continue
        result = build_tlv_option(option, subnet=config.defaults.subnet4)
        built.append((result.to_dict(), _format_tlv_result(result, args.dialect)))

    for entry in config.prefix_delegations:
        if not _report_validation(check_prefix_delegation_config(entry.config), entry.name):
            failed += 1
            continue
        result = build_prefix_delegation(entry.config, subnet=config.defaults.subnet6)
        payload = {"name": entry.name, **result.to_dict()}
        built.append((payload, _format_pd_result(result, args.dialect, entry.name)))

    if args.json:
        print(json.dumps([payload for payload, _ in built], indent=2))
    else:
        print("\n\n".join(text for _, text in built))
        print(f"\nBuilt {len(built)} option(s), {failed} failure(s).", file=sys.stderr)

    return 1 if failed else 0


# ---------------------------------------------------------------------------
# Subcommand: examples
# ---------------------------------------------------------------------------

def cmd_examples(args: argparse.Namespace) -> int:
    """Build and show the built-in example options."""
    from dhcpopt.builders.prefix_delegation import build_prefix_delegation
    from dhcpopt.builders.tlv import build_tlv_option
    from dhcpopt.examples import PREFIX_DELEGATION_EXAMPLES, TLV_EXAMPLES

    sections: list[str] = []
    if args.kind in (None, "tlv"):
        for option in TLV_EXAMPLES:
            sections.append(_format_tlv_result(build_tlv_option(option), args.dialect))
    if args.kind in (None, "pd"):
        for example in PREFIX_DELEGATION_EXAMPLES:
            result = build_prefix_delegation(example.config)
            sections.append(_format_pd_result(result, args.dialect, f"({example.label})"))
    print("\n\n".join(sections))
    return 0


# ---------------------------------------------------------------------------
# Subcommand: format-time
# ---------------------------------------------------------------------------

def cmd_format_time(args: argparse.Namespace) -> int:
    """Show a timer or lifetime value in human-readable form."""
    from dhcpopt.codec.wire import format_time

    if not 0 <= args.seconds <= 0xFFFFFFFF:
        print("Error: seconds must be between 0 and 4294967295", file=sys.stderr)
        return 1
    print(format_time(args.seconds))
    return 0


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def _add_output_flags(sub: argparse.ArgumentParser, dialects: list[str]) -> None:
    sub.add_argument(
        "--json", action="store_true",
        help="Print the result as JSON",
    )
    sub.add_argument(
        "--dialect", choices=dialects,
        help="Only show the config snippet for this server",
    )


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    from dhcpopt.builders.prefix_delegation import PD_DIALECTS
    from dhcpopt.builders.tlv import TLV_DIALECTS
    from dhcpopt.generators.base import DEFAULT_SUBNET4, DEFAULT_SUBNET6

    parser = argparse.ArgumentParser(
        prog="dhcpopt",
        description="Encode DHCP options (freeform TLV and DHCPv6 IA_PD) to wire format.",
    )
    parser.add_argument(
        "-c", "--config",
        help="Path to dhcpopt.toml (default: ./dhcpopt.toml)",
    )

    subparsers = parser.add_subparsers(dest="command")

    # tlv
    tlv_parser = subparsers.add_parser("tlv", help="Build a freeform DHCPv4 option")
    tlv_parser.add_argument("--code", type=int, required=True, help="Option code (0-255)")
    tlv_parser.add_argument("--name", default="Custom Option", help="Option name")
    tlv_parser.add_argument(
        "--item", dest="items", action="append", default=[], metavar="TYPE=VALUE",
        help="Data item, repeatable (e.g. ipv4=192.168.1.1, uint16=8080)",
    )
    tlv_parser.add_argument(
        "--subnet", default=DEFAULT_SUBNET4,
        help="Example subnet for config snippets",
    )
    _add_output_flags(tlv_parser, list(TLV_DIALECTS))

    # pd
    pd_parser = subparsers.add_parser("pd", help="Build a DHCPv6 IA_PD option")
    pd_parser.add_argument("--iaid", type=int, required=True, help="IA_PD IAID")
    pd_parser.add_argument("--t1", type=int, help="T1 renewal time in seconds")
    pd_parser.add_argument("--t2", type=int, help="T2 rebinding time in seconds")
    pd_parser.add_argument(
        "--prefix", dest="prefixes", action="append", default=[],
        metavar="CIDR[,PREFERRED,VALID]",
        help="Delegated prefix, repeatable",
    )
    pd_parser.add_argument(
        "--subnet", default=DEFAULT_SUBNET6,
        help="Example subnet for config snippets",
    )
    _add_output_flags(pd_parser, list(PD_DIALECTS))

    # build
    build_parser = subparsers.add_parser("build", help="Build every option in the config file")
    _add_output_flags(build_parser, list(TLV_DIALECTS) + list(PD_DIALECTS))

    # examples
    examples_parser = subparsers.add_parser("examples", help="Show built-in examples")
    examples_parser.add_argument(
        "kind", nargs="?", choices=["tlv", "pd"],
        help="Only show one kind of example",
    )
    examples_parser.add_argument(
        "--dialect", choices=list(TLV_DIALECTS) + list(PD_DIALECTS),
        help="Only show the config snippet for this server",
    )

    # format-time
    time_parser = subparsers.add_parser("format-time", help="Format a lifetime value")
    time_parser.add_argument("seconds", type=int, help="Seconds (0xFFFFFFFF is infinite)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "tlv": cmd_tlv,
        "pd": cmd_pd,
        "build": cmd_build,
        "examples": cmd_examples,
        "format-time": cmd_format_time,
    }

    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
