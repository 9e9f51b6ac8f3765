"""Validation constraints and error types."""
