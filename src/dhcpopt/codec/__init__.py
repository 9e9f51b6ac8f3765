"""Typed-item encoding, decoding and wire rendering."""
