"""Load option definitions from dhcpopt.toml.

The file holds any number of [[tlv]] and [[prefix_delegation]] tables:

    [defaults]
    subnet4 = "192.168.1.0/24"
    subnet6 = "2001:db8::/32"

    [[tlv]]
    code = 224
    name = "Custom Server List"
    items = [
      { type = "ipv4", value = "192.168.1.10" },
      { type = "uint16", value = 8080 },
    ]

    [[prefix_delegation]]
    name = "home-router"
    iaid = 1
    t1 = 302400
    t2 = 483840
    prefixes = [
      { prefix = "2001:db8:1000::/56", preferred_lifetime = 604800, valid_lifetime = 2592000 },
    ]

Loading only checks the file's shape. Values are passed through as given,
and range and grammar checks are left to the validators.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from dhcpopt.generators.base import DEFAULT_SUBNET4, DEFAULT_SUBNET6, check_subnet
from dhcpopt.models.prefix_delegation import PrefixConfig, PrefixDelegationConfig
from dhcpopt.models.tlv import DataType, TLVItem, TLVOption


class ConfigError(ValueError):
    """The config file is well-formed TOML but not a valid option file."""


@dataclass
class DefaultsConfig:
    """Example subnets used when rendering vendor config snippets."""

    subnet4: str = DEFAULT_SUBNET4
    subnet6: str = DEFAULT_SUBNET6


@dataclass
class NamedPrefixDelegation:
    """A prefix delegation entry with its config-file name."""

    name: str
    config: PrefixDelegationConfig


@dataclass
class OptionsConfig:
    """Full option file: every freeform option and IA_PD entry it defines."""

    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    tlv_options: list[TLVOption] = field(default_factory=list)
    prefix_delegations: list[NamedPrefixDelegation] = field(default_factory=list)


def item_text(value: object) -> str:
    """Convert a TOML scalar to the text form the codec works on.

    >>> item_text(True)
    'true'
    >>> item_text(8080)
    '8080'
    >>> item_text("10.0.0.1")
    '10.0.0.1'
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, str)):
        return str(value)
    raise ConfigError(f"Item value must be a string, integer or boolean, got {value!r}")


def parse_data_type(name: object, where: str) -> DataType:
    try:
        return DataType(str(name).strip().lower())
    except ValueError:
        valid = ", ".join(t.value for t in DataType)
        raise ConfigError(f"{where}: unknown item type {name!r} (expected one of: {valid})") from None


def _build_defaults(data: dict) -> DefaultsConfig:
    section = data.get("defaults", {})
    try:
        return DefaultsConfig(
            subnet4=check_subnet(section.get("subnet4", DEFAULT_SUBNET4), 4),
            subnet6=check_subnet(section.get("subnet6", DEFAULT_SUBNET6), 6),
        )
    except ValueError as e:
        raise ConfigError(f"defaults: {e}") from None


def _build_tlv_options(data: dict) -> list[TLVOption]:
    """Build freeform options from parsed TOML data."""
    options = []
    for index, entry in enumerate(data.get("tlv", []), start=1):
        where = f"tlv #{index}"
        if "code" not in entry:
            raise ConfigError(f"{where}: missing 'code'")
        items = []
        for item_index, item in enumerate(entry.get("items", []), start=1):
            item_where = f"{where} item {item_index}"
            if "type" not in item or "value" not in item:
                raise ConfigError(f"{item_where}: needs both 'type' and 'value'")
            items.append(TLVItem(
                data_type=parse_data_type(item["type"], item_where),
                value=item_text(item["value"]),
            ))
        options.append(TLVOption(
            code=entry["code"],
            name=entry.get("name", ""),
            items=tuple(items),
        ))
    return options


def _build_prefix_delegations(data: dict) -> list[NamedPrefixDelegation]:
    """Build IA_PD configs from parsed TOML data."""
    entries = []
    for index, entry in enumerate(data.get("prefix_delegation", []), start=1):
        where = f"prefix_delegation #{index}"
        if "iaid" not in entry:
            raise ConfigError(f"{where}: missing 'iaid'")
        prefixes = []
        for prefix_index, prefix in enumerate(entry.get("prefixes", []), start=1):
            if "prefix" not in prefix:
                raise ConfigError(f"{where} prefix {prefix_index}: missing 'prefix'")
            prefixes.append(PrefixConfig(
                prefix=prefix["prefix"],
                preferred_lifetime=prefix.get("preferred_lifetime"),
                valid_lifetime=prefix.get("valid_lifetime"),
            ))
        entries.append(NamedPrefixDelegation(
            name=entry.get("name", f"ia_pd-{index}"),
            config=PrefixDelegationConfig(
                iaid=entry["iaid"],
                t1=entry.get("t1"),
                t2=entry.get("t2"),
                prefixes=tuple(prefixes),
            ),
        ))
    return entries


def load_config(config_path: Path | str | None = None) -> OptionsConfig:
    """Load option definitions from a TOML file.

    If config_path is None, looks for dhcpopt.toml in the current
    directory.

    Raises:
        FileNotFoundError: If the file does not exist.
        tomllib.TOMLDecodeError: If the file is not valid TOML.
        ConfigError: If an entry is missing required keys, names an
            unknown item type, or a default subnet is not a network.
    """
    if config_path is None:
        config_path = Path("dhcpopt.toml")
    else:
        config_path = Path(config_path)

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    return OptionsConfig(
        defaults=_build_defaults(data),
        tlv_options=_build_tlv_options(data),
        prefix_delegations=_build_prefix_delegations(data),
    )
