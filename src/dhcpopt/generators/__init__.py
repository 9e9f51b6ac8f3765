"""DHCP server config snippet generators."""
