# ABOUTME: Bridges synchronous Click commands to the async Resolver.
# ABOUTME: Opens one HTTP client per command invocation and closes it when the call finishes.

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

from bookrecon.core.resolver import Resolver
from bookrecon.metadata.http import ReconHttpClient
from bookrecon.metadata.registry import build_registry

T = TypeVar("T")


def run_resolution(
    action: Callable[[Resolver], Awaitable[T]],
    *,
    timeout: float,
    google_api_key: str | None = None,
    max_candidates: int | None = None,
) -> T:
    """Build a Resolver over the built-in providers and run one action on it."""

    async def _run() -> T:
        async with ReconHttpClient(timeout=timeout) as http_client:
            registry = build_registry(http_client, google_api_key=google_api_key)
            resolver = Resolver(registry, max_candidates=max_candidates)
            return await action(resolver)

    return asyncio.run(_run())
