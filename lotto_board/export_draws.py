"""Export lotto draws from the origin to a JSON file.

Usage:
  python scripts/export_draws.py --min 1100 --max 1150 --out draws.json
  lotto-export --min 1100 --weeks 10        (latest round auto-detected)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence

from tqdm import tqdm

try:
    from dotenv import load_dotenv
except Exception:  # pragma: no cover
    load_dotenv = None  # type: ignore[assignment]

from lotto_board.models.draw import DrawRecord
from lotto_board.services.draw_cache import DrawCache
from lotto_board.services.draw_service import DrawOrigin, DrawService
from lotto_board.services.missing_analysis_service import find_missing
from lotto_board.services.origin_client import DEFAULT_ORIGIN_URL, OriginClient


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fetch lotto draws from the origin and write them as JSON")
    parser.add_argument("--min", dest="min_round", type=int, default=1)
    parser.add_argument(
        "--max",
        dest="max_round",
        type=int,
        default=None,
        help="Max round (default: auto-detect latest)",
    )
    parser.add_argument("--timeout", dest="timeout_seconds", type=float, default=10.0)
    parser.add_argument("--retries", dest="retries", type=int, default=0)
    parser.add_argument("--backoff", dest="backoff", type=float, default=0.3)
    parser.add_argument("--origin-url", dest="origin_url", type=str, default=DEFAULT_ORIGIN_URL)
    parser.add_argument("--start-hint", dest="start_hint", type=int, default=1150)
    parser.add_argument("--out", dest="out", type=str, default=None, help="Output file (default: stdout)")
    parser.add_argument(
        "--weeks",
        dest="weeks",
        type=int,
        default=None,
        help="Also log numbers missing from the most recent N draws",
    )
    return parser


def collect_draws(service: DrawService, min_round: int, max_round: int, *, progress: bool = True) -> list[DrawRecord]:
    """Resolve every round in [min_round, max_round]; unavailable rounds are skipped."""

    draws: list[DrawRecord] = []
    rounds = range(min_round, max_round + 1)
    for round_no in tqdm(rounds, desc="Fetching", disable=not progress):
        draw = service.get_draw(round_no)
        if draw is not None:
            draws.append(draw)
    return draws


def main(argv: Sequence[str] | None = None, *, origin: DrawOrigin | None = None) -> int:
    """Export draws as a JSON array ordered by round."""

    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    if load_dotenv is not None:
        load_dotenv()

    if args.min_round < 1:
        raise SystemExit("--min must be >= 1")

    client: OriginClient | None = None
    if origin is None:
        origin = client = OriginClient(
            args.origin_url,
            timeout=float(args.timeout_seconds),
            retries=int(args.retries),
            backoff_factor=float(args.backoff),
        )
    try:
        return _export(args, DrawService(DrawCache(), origin))
    finally:
        if client is not None:
            client.close()


def _export(args: argparse.Namespace, service: DrawService) -> int:
    max_round = int(args.max_round) if args.max_round is not None else service.find_latest_round(
        start_hint=int(args.start_hint)
    )
    if max_round < args.min_round:
        raise SystemExit(f"--max ({max_round}) must be >= --min ({args.min_round})")
    logger.info("Export range: %s..%s", args.min_round, max_round)

    draws = collect_draws(service, int(args.min_round), max_round, progress=args.out is not None)

    skipped = (max_round - args.min_round + 1) - len(draws)
    if skipped:
        logger.info("Skipped %s unavailable rounds", skipped)

    payload = json.dumps([d.to_dict() for d in draws], ensure_ascii=False, indent=2)
    if args.out:
        with open(args.out, "w", encoding="utf-8") as f:
            f.write(payload)
            f.write("\n")
        logger.info("Wrote %s draws to %s", len(draws), args.out)
    else:
        sys.stdout.write(payload + "\n")

    if args.weeks is not None:
        recent_first = list(reversed(draws))
        logger.info("Missing in last %s draws: %s", args.weeks, find_missing(recent_first, int(args.weeks)))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
