"""Domain name grammar checks for option values.

Names are checked against the RFC 952/1123 host name rules (letters,
digits and inner hyphens, 1-63 octets per label) and the RFC 1035 limit
of 255 octets for the encoded name. IDN labels are expected in their
ASCII (punycode, 'xn--') form and are treated like any other label.
"""

from __future__ import annotations

import re

_LABEL_RE = re.compile(r"^[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?$")

MAX_LABEL_LENGTH = 63
MAX_NAME_LENGTH = 255


def is_valid_label(label: str) -> bool:
    """Check a single label against the host name grammar.

    >>> is_valid_label("example")
    True
    >>> is_valid_label("xn--bcher-kva")
    True
    >>> is_valid_label("-invalid-")
    False
    >>> is_valid_label("a" * 64)
    False
    >>> is_valid_label("")
    False
    """
    return (
        0 < len(label) <= MAX_LABEL_LENGTH
        and label.isascii()
        and bool(_LABEL_RE.match(label))
    )


def split_labels(name: str) -> list[str]:
    """Split a domain name into validated labels.

    A single trailing dot (absolute name) is accepted and dropped.

    >>> split_labels("example.com")
    ['example', 'com']
    >>> split_labels("sip.voip.local.")
    ['sip', 'voip', 'local']

    Raises ValueError describing the first problem found.
    """
    if name.endswith("."):
        name = name[:-1]
    if not name:
        raise ValueError("Domain name is empty")

    labels = name.split(".")
    for label in labels:
        if not label:
            raise ValueError("Empty label in domain name")
        if len(label) > MAX_LABEL_LENGTH:
            raise ValueError(
                f"Label exceeds {MAX_LABEL_LENGTH} characters: {label[:16]!r}..."
            )
        if not is_valid_label(label):
            raise ValueError(
                f"Invalid label {label!r}: only letters, digits and inner hyphens allowed"
            )

    if wire_length(labels) > MAX_NAME_LENGTH:
        raise ValueError(f"Encoded domain name exceeds {MAX_NAME_LENGTH} bytes")
    return labels


def wire_length(labels: list[str]) -> int:
    """Size of the uncompressed wire form: a length octet per label plus the root.

    >>> wire_length(["example", "com"])
    13
    """
    return sum(len(label) + 1 for label in labels) + 1
