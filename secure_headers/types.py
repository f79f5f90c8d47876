"""Header directive and header collection types."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Literal


class Remove(Enum):
    """Directive that strips a header from responses instead of setting it."""

    REMOVE = "remove"

    def __repr__(self) -> str:
        return "REMOVE"


REMOVE = Remove.REMOVE

HeaderIdentifier = str | Enum
HeaderDirective = str | Literal[Remove.REMOVE]
HeaderConfig = Mapping[HeaderIdentifier, HeaderDirective]
RawHeaders = list[tuple[bytes, bytes]]
