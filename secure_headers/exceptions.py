"""Secure headers exception hierarchy."""

from __future__ import annotations


class SecureHeadersError(Exception):
    """Base class for all secure-headers exceptions."""


class UnknownPresetError(SecureHeadersError):
    """Raised when a preset is requested by a name that is not registered."""

    def __init__(self, name: str) -> None:
        """Initialize with the unknown preset name."""
        super().__init__(f"Unknown header preset: {name!r}.")
        self.name = name


class InvalidHeaderValueError(SecureHeadersError):
    """Raised when a configured header cannot be encoded for the wire."""

    def __init__(self, name: str, value: str) -> None:
        """Initialize with the offending header name and value."""
        super().__init__(f"Header {name!r} value {value!r} is not encodable as latin-1.")
        self.name = name
        self.value = value
