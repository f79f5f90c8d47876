"""Public secure-headers exports."""

from secure_headers.exceptions import (
    InvalidHeaderValueError,
    SecureHeadersError,
    UnknownPresetError,
)
from secure_headers.middleware import SecureHeadersMiddleware, init
from secure_headers.naming import normalize_header_name
from secure_headers.presets import API, PRESETS, SECURE_API, SECURE_WEB, STRICT, WEB, get_preset
from secure_headers.transform import (
    HeaderPolicy,
    build_raw_transformer,
    build_transformer,
    partition_headers,
)
from secure_headers.types import REMOVE, Remove

__all__ = [
    "API",
    "PRESETS",
    "REMOVE",
    "SECURE_API",
    "SECURE_WEB",
    "STRICT",
    "WEB",
    "HeaderPolicy",
    "InvalidHeaderValueError",
    "Remove",
    "SecureHeadersError",
    "SecureHeadersMiddleware",
    "UnknownPresetError",
    "build_raw_transformer",
    "build_transformer",
    "get_preset",
    "init",
    "normalize_header_name",
    "partition_headers",
]
