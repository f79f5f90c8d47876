"""Built-in header presets based on OWASP secure headers recommendations.

Presets are read-only mappings. Compose them with ordinary dict operations::

    custom = {**SECURE_WEB, "x-frame-options": "SAMEORIGIN", "server": REMOVE}
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from secure_headers.exceptions import UnknownPresetError
from secure_headers.types import REMOVE, HeaderConfig

_HSTS = "max-age=63072000; includeSubDomains"

WEB: HeaderConfig = MappingProxyType(
    {
        "x-content-type-options": "nosniff",
        "x-frame-options": "DENY",
        "referrer-policy": "strict-origin-when-cross-origin",
        "content-security-policy": "default-src 'self'",
        "permissions-policy": "geolocation=(), camera=(), microphone=()",
        "cross-origin-opener-policy": "same-origin",
    }
)

SECURE_WEB: HeaderConfig = MappingProxyType({**WEB, "strict-transport-security": _HSTS})

API: HeaderConfig = MappingProxyType(
    {
        "x-content-type-options": "nosniff",
        "referrer-policy": "strict-origin-when-cross-origin",
    }
)

SECURE_API: HeaderConfig = MappingProxyType({**API, "strict-transport-security": _HSTS})

STRICT: HeaderConfig = MappingProxyType(
    {
        "x-content-type-options": "nosniff",
        "x-frame-options": "DENY",
        "referrer-policy": "strict-origin-when-cross-origin",
        "strict-transport-security": f"{_HSTS}; preload",
        "content-security-policy": "default-src 'self'",
        "permissions-policy": "geolocation=(), camera=(), microphone=(), payment=(), usb=()",
        "cross-origin-opener-policy": "same-origin",
        "cross-origin-embedder-policy": "require-corp",
        "cross-origin-resource-policy": "same-origin",
        "x-permitted-cross-domain-policies": "none",
        "server": REMOVE,
        "x-powered-by": REMOVE,
    }
)

PRESETS: Mapping[str, HeaderConfig] = MappingProxyType(
    {
        "web": WEB,
        "secure-web": SECURE_WEB,
        "api": API,
        "secure-api": SECURE_API,
        "strict": STRICT,
    }
)


def get_preset(name: str) -> HeaderConfig:
    """Return a built-in preset by name."""
    try:
        return PRESETS[name]
    except KeyError as exc:
        raise UnknownPresetError(name) from exc
