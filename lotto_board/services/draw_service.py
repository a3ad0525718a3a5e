"""Business logic for resolving draws through the cache and the origin."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Protocol

from lotto_board.errors import InvalidRangeError, RangeTooWideError
from lotto_board.models.draw import DrawRecord
from lotto_board.services.draw_cache import DrawCache

logger = logging.getLogger(__name__)

DEFAULT_MAX_SPAN = 100


class DrawOrigin(Protocol):
    def fetch_draw(self, round_no: int) -> DrawRecord | None: ...


@dataclass(frozen=True)
class CacheDirective:
    """Advisory HTTP caching hint. Not a correctness guarantee."""

    max_age: int = 86_400
    stale_while_revalidate: int = 3_600

    def header_value(self) -> str:
        return f"s-maxage={self.max_age}, stale-while-revalidate={self.stale_while_revalidate}"


def cache_key(round_no: int) -> str:
    return f"draw-{round_no}"


def _parse_bound(value: Any) -> int:
    if isinstance(value, bool) or value is None:
        raise InvalidRangeError()
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as exc:
            raise InvalidRangeError() from exc
    raise InvalidRangeError()


class DrawService:
    """Resolve single rounds and round ranges, cache first.

    Rounds within a range are resolved one at a time in ascending order.
    Fetches for distinct rounds are independent, so they could run in
    parallel as long as the result stays ordered by round.
    """

    def __init__(
        self,
        cache: DrawCache,
        origin: DrawOrigin,
        *,
        max_span: int = DEFAULT_MAX_SPAN,
        cache_directive: CacheDirective | None = None,
    ) -> None:
        self.cache = cache
        self.origin = origin
        self.max_span = max_span
        self.cache_directive = cache_directive or CacheDirective()

    def get_draw(self, round_no: int) -> DrawRecord | None:
        """Cache-then-origin lookup for one round. None means not available."""

        key = cache_key(round_no)
        draw = self.cache.get(key)
        if draw is not None:
            return draw

        draw = self.origin.fetch_draw(round_no)
        if draw is not None:
            self.cache.set(key, draw)
        return draw

    def validate_range(self, from_: Any, to: Any) -> tuple[int, int]:
        start = _parse_bound(from_)
        end = _parse_bound(to)
        if start > end or end - start > self.max_span:
            raise RangeTooWideError(max_span=self.max_span, details={"from": start, "to": end})
        return start, end

    def resolve_range(self, from_: Any, to: Any) -> list[DrawRecord]:
        """Resolve the inclusive range [from_, to] in ascending order.

        Unavailable rounds are left out, so the result can be shorter than
        the range.
        """

        start, end = self.validate_range(from_, to)

        draws: list[DrawRecord] = []
        for round_no in range(start, end + 1):
            draw = self.get_draw(round_no)
            if draw is not None:
                draws.append(draw)

        if len(draws) < end - start + 1:
            logger.info("Resolved %s of %s rounds in %s..%s", len(draws), end - start + 1, start, end)
        return draws

    def find_latest_round(self, start_hint: int = 1150) -> int:
        """Find the latest available round via exponential search + binary search.

        Returns 0 when even round 1 is unavailable.
        """

        if start_hint < 1:
            start_hint = 1

        if self.get_draw(1) is None:
            return 0

        low = 1
        high = start_hint

        if self.get_draw(high) is not None:
            low = high
            while True:
                next_high = high * 2
                # Upstream behavior changes could otherwise loop forever.
                if next_high > 100_000:
                    raise RuntimeError("Failed to find upper bound for latest round (cap exceeded)")
                high = next_high
                if self.get_draw(high) is None:
                    break
                low = high

        # low exists, high does not.
        lo = low
        hi = high
        while lo + 1 < hi:
            mid = (lo + hi) // 2
            if self.get_draw(mid) is not None:
                lo = mid
            else:
                hi = mid

        return lo
