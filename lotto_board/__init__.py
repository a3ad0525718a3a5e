"""Flask application package."""

from __future__ import annotations

from typing import Any

from flask import Flask

try:
    from dotenv import load_dotenv
except Exception:  # pragma: no cover
    load_dotenv = None  # type: ignore[assignment]


def create_app(config: Any | None = None, *, cache: Any | None = None, origin: Any | None = None) -> Flask:
    """Application factory.

    Args:
        config: Config class/object; defaults to the APP_ENV-selected one.
        cache: DrawCache to use instead of a fresh one.
        origin: Object with fetch_draw(round_no) to use instead of the HTTP client.

    Returns:
        Configured Flask application.
    """
    if load_dotenv is not None:
        load_dotenv()

    from lotto_board.config import get_config
    from lotto_board.error_handlers import register_error_handlers
    from lotto_board.extensions import init_services
    from lotto_board.logging_config import configure_logging
    from lotto_board.routes.health import health_bp
    from lotto_board.routes.lotto import lotto_bp

    app = Flask(__name__)
    app.config.from_object(config or get_config())

    configure_logging(app)
    init_services(app, cache=cache, origin=origin)
    register_error_handlers(app)

    app.register_blueprint(health_bp)
    app.register_blueprint(lotto_bp)

    return app
