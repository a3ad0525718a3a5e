"""Client for the upstream lottery results service."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from lotto_board.models.draw import DrawRecord

logger = logging.getLogger(__name__)

DEFAULT_ORIGIN_URL = "https://www.dhlottery.co.kr/common.do"


def build_http_session(retries: int, backoff_factor: float | None, user_agent: str) -> requests.Session:
    """Create a requests session. retries=0 means a single attempt per call."""

    max_retries: Retry | int = 0
    if retries > 0:
        max_retries = Retry(
            total=retries,
            connect=retries,
            read=retries,
            status=retries,
            backoff_factor=backoff_factor or 0,
            status_forcelist=(429, 500, 502, 503, 504),
            allowed_methods=("GET",),
            raise_on_status=False,
        )
    adapter = HTTPAdapter(max_retries=max_retries, pool_connections=20, pool_maxsize=20)

    session = requests.Session()
    session.headers.update({"User-Agent": user_agent, "Accept": "application/json"})
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


def _as_number(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"Not a number: {value!r}")
    n = int(value)
    if n < 1 or n > 45:
        raise ValueError(f"Number out of range: {n}")
    return n


def _as_round(value: Any) -> int | None:
    """Integer round from an int or an integer string; None for anything else."""

    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def parse_draw_payload(payload: Any) -> DrawRecord | None:
    """Map an upstream payload to a DrawRecord.

    Returns None when the round is not drawn yet (returnValue != "success").
    Raises ValueError/KeyError/TypeError for malformed payloads.
    """

    if not isinstance(payload, dict):
        raise TypeError(f"Unexpected payload type: {type(payload).__name__}")
    if payload.get("returnValue") != "success":
        return None

    round_no = payload["drwNo"]
    if isinstance(round_no, bool) or int(round_no) < 1:
        raise ValueError(f"Invalid drwNo: {round_no!r}")

    numbers = tuple(_as_number(payload[f"drwtNo{i}"]) for i in range(1, 7))
    if len(set(numbers)) != 6:
        raise ValueError(f"Duplicate main numbers: {numbers}")

    draw_date = date.fromisoformat(str(payload["drwNoDate"]).strip()[:10])

    return DrawRecord(
        round=int(round_no),
        date=draw_date.isoformat(),
        numbers=numbers,  # type: ignore[arg-type]
        bonus=_as_number(payload["bnusNo"]),
    )


class OriginClient:
    """Fetch one round at a time from the origin.

    Never raises: every failure (network, bad body, not drawn yet) is
    reported as None.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_ORIGIN_URL,
        *,
        timeout: float | None = None,
        retries: int = 0,
        backoff_factor: float | None = 0.3,
        user_agent: str = "Mozilla/5.0",
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self._session = session or build_http_session(retries, backoff_factor, user_agent)

    def fetch_draw(self, round_no: int) -> DrawRecord | None:
        n = _as_round(round_no)
        if n is None:
            logger.debug("Rejected round %r: not an integer", round_no)
            return None
        if n < 1:
            logger.debug("Rejected round %s: not positive", n)
            return None

        try:
            resp = self._session.get(
                self.base_url,
                params={"method": "getLottoNumber", "drwNo": n},
                timeout=self.timeout,
            )
            resp.raise_for_status()
            payload = resp.json()
        except (requests.RequestException, ValueError) as exc:
            logger.warning("Origin request for round %s failed: %s", n, exc)
            return None

        try:
            draw = parse_draw_payload(payload)
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning("Malformed origin payload for round %s: %s", n, exc)
            return None

        if draw is None:
            logger.debug("Round %s not ready", n)
        return draw

    def close(self) -> None:
        self._session.close()
