"""Lotto draw routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, request

from lotto_board.errors import NotReadyError
from lotto_board.extensions import get_draw_service
from lotto_board.schemas.draw import (
    DrawRecordSchema,
    MissingAnalysisResponseSchema,
    MissingQuerySchema,
    RoundQuerySchema,
)
from lotto_board.services.missing_analysis_service import find_consecutive_missing, find_missing
from lotto_board.utils.responses import ok


lotto_bp = Blueprint("lotto", __name__)

_round_schema = RoundQuerySchema()
_missing_schema = MissingQuerySchema()
_draw_schema = DrawRecordSchema()
_draws_schema = DrawRecordSchema(many=True)
_missing_response_schema = MissingAnalysisResponseSchema()


@lotto_bp.get("/lotto")
def get_draw():
    data = _round_schema.load(request.args)

    service = get_draw_service()
    draw = service.get_draw(int(data["round"]))
    if draw is None:
        raise NotReadyError()

    return ok(_draw_schema.dump(draw), cache_control=service.cache_directive.header_value())


@lotto_bp.get("/lotto/bulk")
def get_draws_bulk():
    service = get_draw_service()
    draws = service.resolve_range(request.args.get("from"), request.args.get("to"))

    return ok(_draws_schema.dump(draws), cache_control=service.cache_directive.header_value())


@lotto_bp.get("/lotto/missing")
def get_missing_numbers():
    """Missing-number analysis over a round range.

    Query params:
    - from, to: round range (same limits as /lotto/bulk)
    - weeks: how many of the most recent draws to check (default 10)
    - min_streak: shortest absence streak to report (default 10)
    """

    opts = _missing_schema.load(request.args)
    service = get_draw_service()
    draws = service.resolve_range(request.args.get("from"), request.args.get("to"))

    recent_first = list(reversed(draws))
    weeks = int(opts["weeks"])

    return ok(
        _missing_response_schema.dump(
            {
                "draws_used": len(recent_first),
                "weeks": weeks,
                "missing": find_missing(recent_first, weeks),
                "streaks": find_consecutive_missing(recent_first, int(opts["min_streak"])),
            }
        ),
        cache_control=service.cache_directive.header_value(),
    )
