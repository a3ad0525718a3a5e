"""Export lotto draws to JSON.

Thin wrapper around `lotto_board.export_draws` for running the tool from a
checkout (after `pip install -e .`) without the console script.

Usage (PowerShell):
  python scripts/export_draws.py --min 1100 --max 1150 --out draws.json
"""

from __future__ import annotations

from lotto_board.export_draws import main


if __name__ == "__main__":
    raise SystemExit(main())
