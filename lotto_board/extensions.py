"""Draw cache + origin client wiring.

One cache per application instance, created with the app and dropped with
it. Nothing is persisted across restarts.
"""

from __future__ import annotations

from flask import Flask, current_app

from lotto_board.services.draw_cache import DrawCache
from lotto_board.services.draw_service import CacheDirective, DrawOrigin, DrawService
from lotto_board.services.origin_client import OriginClient


def init_services(app: Flask, *, cache: DrawCache | None = None, origin: DrawOrigin | None = None) -> DrawService:
    """Build the draw service for this app. Tests pass their own cache/origin."""

    if cache is None:
        cache = DrawCache(ttl_seconds=int(app.config["DRAW_CACHE_TTL_SECONDS"]))

    if origin is None:
        origin = OriginClient(
            str(app.config["LOTTO_ORIGIN_URL"]),
            timeout=app.config.get("ORIGIN_TIMEOUT_SECONDS"),
            retries=int(app.config.get("ORIGIN_RETRIES") or 0),
            backoff_factor=app.config.get("ORIGIN_BACKOFF_SECONDS"),
            user_agent=str(app.config.get("ORIGIN_USER_AGENT") or "Mozilla/5.0"),
        )

    service = DrawService(
        cache,
        origin,
        max_span=int(app.config["BULK_MAX_SPAN"]),
        cache_directive=CacheDirective(
            max_age=int(app.config["CACHE_MAX_AGE_SECONDS"]),
            stale_while_revalidate=int(app.config["CACHE_STALE_WHILE_REVALIDATE_SECONDS"]),
        ),
    )

    app.extensions["draw_cache"] = cache
    app.extensions["draw_service"] = service
    return service


def get_draw_service() -> DrawService:
    """Get the current app's draw service."""

    service: DrawService | None = current_app.extensions.get("draw_service")
    if service is None:
        raise RuntimeError("Draw service not initialized")
    return service
