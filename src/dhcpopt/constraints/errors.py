"""Structured validation results and codec error types."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class EncodingError(ValueError):
    """A value could not be encoded as its declared type.

    Raised by the encoder and the builders when they are handed input
    that did not pass validation, or an example subnet that is not a
    network. Callers should treat it like a
    validation failure.
    """


class Severity(enum.Enum):
    """Constraint violation severity."""

    ERROR = "error"      # Blocks the build
    WARNING = "warning"  # Build proceeds, reported alongside


@dataclass(frozen=True)
class ConstraintViolation:
    """One problem found in an option or IA_PD config.

    Attributes:
        severity: ERROR blocks the build, WARNING is reported alongside.
        code: Stable identifier for the check (e.g. 'invalid_value').
        message: Plain-language description, e.g.
            'IPv4: Invalid address format'.
        record_id: The item or prefix at fault ('Item 2', 'Prefix 1').
            Empty when the problem concerns the whole option.
        field: Input field the check looked at ('code', 'value', ...).
    """

    severity: Severity
    code: str
    message: str
    record_id: str = ""
    field: str = ""

    @property
    def text(self) -> str:
        """The message prefixed with its item or prefix, as returned by validate_*."""
        if self.record_id:
            return f"{self.record_id}: {self.message}"
        return self.message

    def __str__(self) -> str:
        return f"{self.severity.value}: {self.text}"


class ValidationResult:
    """Violations collected by one check_* run, in order of discovery."""

    def __init__(self) -> None:
        self.violations: list[ConstraintViolation] = []

    def add(self, violation: ConstraintViolation) -> None:
        self.violations.append(violation)

    def error(self, code: str, message: str, record_id: str = "", field: str = "") -> None:
        self.add(ConstraintViolation(Severity.ERROR, code, message, record_id, field))

    def warning(self, code: str, message: str, record_id: str = "", field: str = "") -> None:
        self.add(ConstraintViolation(Severity.WARNING, code, message, record_id, field))

    @property
    def errors(self) -> list[ConstraintViolation]:
        return [v for v in self.violations if v.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[ConstraintViolation]:
        return [v for v in self.violations if v.severity == Severity.WARNING]

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def is_valid(self) -> bool:
        return not self.has_errors

    def messages(self) -> list[str]:
        """Error texts only, the form validate_* returns."""
        return [v.text for v in self.errors]

    def report(self) -> str:
        """Summary line, then option-level problems, then one block per item or prefix.

        >>> result = ValidationResult()
        >>> result.error("no_items", "At least one data item is required")
        >>> result.error("invalid_value", "UInt8: Must be 0-255", record_id="Item 2")
        >>> result.warning("option_code_not_site_specific", "Code 43 is standard")
        >>> print(result.report())
        2 error(s), 1 warning(s)
          error: At least one data item is required
          warning: Code 43 is standard
          Item 2:
            error: UInt8: Must be 0-255
        """
        if not self.violations:
            return "No problems found."

        lines = [f"{len(self.errors)} error(s), {len(self.warnings)} warning(s)"]
        by_record: dict[str, list[ConstraintViolation]] = {}
        for v in self.violations:
            by_record.setdefault(v.record_id, []).append(v)

        for v in by_record.pop("", []):
            lines.append(f"  {v.severity.value}: {v.message}")
        for record_id, violations in by_record.items():
            lines.append(f"  {record_id}:")
            for v in violations:
                lines.append(f"    {v.severity.value}: {v.message}")
        return "\n".join(lines)
