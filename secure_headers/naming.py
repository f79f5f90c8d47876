"""Header name normalization."""

from __future__ import annotations

from enum import Enum

from secure_headers.types import HeaderIdentifier


def _identifier_text(name: HeaderIdentifier) -> str:
    if isinstance(name, Enum):
        return str(name.value)
    return str(name)


def normalize_header_name(name: HeaderIdentifier) -> str:
    """Render a header identifier in canonical HTTP casing.

    Each hyphen-delimited segment is capitalized and the segments are rejoined,
    so ``"x-frame-options"``, ``"X-FRAME-OPTIONS"`` and ``"x-Frame-options"``
    all become ``"X-Frame-Options"``. Empty segments are kept in place. Names
    are expected to be ASCII tokens; other input is not guaranteed to round-trip.
    """
    return "-".join(segment.capitalize() for segment in _identifier_text(name).split("-"))
