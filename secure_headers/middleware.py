"""ASGI middleware applying a header policy to every HTTP response."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

import structlog
from starlette.applications import Starlette
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from secure_headers.presets import WEB
from secure_headers.transform import HeaderPolicy, build_raw_transformer, partition_headers
from secure_headers.types import HeaderConfig

logger = structlog.get_logger(__name__)


class SecureHeadersMiddleware:
    """Add, override or strip response headers from a fixed policy.

    The policy is partitioned and the transformer built once here. Requests
    only pay for one filtering pass over the response headers, or nothing at
    all when the policy is empty.
    """

    def __init__(self, app: ASGIApp, headers: HeaderConfig | None = WEB) -> None:
        """Initialize middleware with a header configuration."""
        self.app = app
        self.policy: HeaderPolicy = partition_headers(headers)
        self._transform = build_raw_transformer(self.policy.add, self.policy.remove)
        logger.info(
            "secure_headers_configured",
            added=sorted(self.policy.add),
            removed=sorted(self.policy.remove),
        )

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """Rewrite headers of the response start message."""
        if scope["type"] != "http" or self.policy.is_empty:
            await self.app(scope, receive, send)
            return

        async def send_wrapper(message: Message) -> None:
            if message["type"] == "http.response.start":
                message["headers"] = self._transform(list(message.get("headers", [])))
            await send(message)

        await self.app(scope, receive, send_wrapper)


def init(options: Mapping[str, Any] | None = None) -> Callable[[Starlette], Starlette]:
    """Build an extension installing secure headers on an application.

    Recognized option: ``headers``, a mapping of header names to values or
    ``REMOVE``. Defaults to the ``WEB`` preset. Other keys are ignored.
    """
    headers = (options or {}).get("headers", WEB)

    def install(app: Starlette) -> Starlette:
        app.add_middleware(SecureHeadersMiddleware, headers=headers)
        return app

    return install
