"""Header policy partitioning and prebuilt header transformers."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Set
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TypeVar

from secure_headers.exceptions import InvalidHeaderValueError
from secure_headers.naming import normalize_header_name
from secure_headers.types import REMOVE, HeaderConfig, RawHeaders

HeaderTransformer = Callable[[Mapping[str, str]], Mapping[str, str]]
RawHeaderTransformer = Callable[[RawHeaders], RawHeaders]

_Headers = TypeVar("_Headers")


@dataclass(frozen=True)
class HeaderPolicy:
    """Headers to set and headers to strip, keyed by canonical name."""

    add: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    remove: frozenset[str] = frozenset()

    @property
    def is_empty(self) -> bool:
        """Return True when the policy leaves responses untouched."""
        return not self.add and not self.remove


def partition_headers(config: HeaderConfig | None) -> HeaderPolicy:
    """Split a header configuration into add and remove sets.

    Entries whose directive is ``REMOVE`` go to the remove set, everything else
    is added with its value. Names are normalized here, once, so per-request
    work never touches string casing.
    """
    add: dict[str, str] = {}
    remove: set[str] = set()
    for name, directive in (config or {}).items():
        canonical = normalize_header_name(name)
        if directive is REMOVE:
            remove.add(canonical)
        else:
            add[canonical] = str(directive)
    return HeaderPolicy(add=MappingProxyType(add), remove=frozenset(remove))


def _identity(headers: _Headers) -> _Headers:
    return headers


def _encode_value(name: str, value: str) -> bytes:
    try:
        return value.encode("latin-1")
    except UnicodeEncodeError as exc:
        raise InvalidHeaderValueError(name, value) from exc


def build_transformer(
    add_headers: Mapping[str, str], remove_headers: Set[str]
) -> HeaderTransformer:
    """Build a function applying the policy to a canonical header mapping.

    Removal runs before addition, so a name that is both added and removed
    ends up set to the added value.
    """
    if not add_headers and not remove_headers:
        return _identity

    add = dict(add_headers)
    remove = frozenset(remove_headers)

    def transform(headers: Mapping[str, str]) -> Mapping[str, str]:
        result = {name: value for name, value in headers.items() if name not in remove}
        result.update(add)
        return result

    return transform


def build_raw_transformer(
    add_headers: Mapping[str, str], remove_headers: Set[str]
) -> RawHeaderTransformer:
    """Build a function applying the policy to ASGI raw response headers.

    Header names are matched case-insensitively. Unrelated headers keep their
    order and multiplicity, so repeated ``set-cookie`` entries survive. Added
    values must be encodable as latin-1.
    """
    if not add_headers and not remove_headers:
        return _identity

    extra = tuple(
        (name.lower().encode("latin-1"), _encode_value(name, value))
        for name, value in add_headers.items()
    )
    dropped = frozenset(name.lower().encode("latin-1") for name in remove_headers)
    dropped |= {name for name, _ in extra}

    def transform(headers: RawHeaders) -> RawHeaders:
        result = [(name, value) for name, value in headers if name.lower() not in dropped]
        result.extend(extra)
        return result

    return transform
