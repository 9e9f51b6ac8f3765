"""Option builders: freeform TLV and DHCPv6 IA_PD."""
