"""Run `city-pop` from a checkout, without `pip install -e .`.

    python -m main worldcitiespop.csv Paris
    cat worldcitiespop.csv | python -m main --show-unknown Paris

Puts `src/` on `sys.path` first so `cli`, `core` and `adapters` resolve to
the working tree, then hands over to the `city-pop` Typer app.
"""

from __future__ import annotations

import sys
from pathlib import Path


SRC_DIR = Path(__file__).resolve().parent / "src"


def main() -> None:
    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
