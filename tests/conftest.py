from __future__ import annotations

from pathlib import Path

import pytest
from loguru import logger

HEADER = "City,Country,Region,Population\n"

PARIS_ROWS = (
    HEADER
    + "Paris,France,Île-de-France,2140526\n"
    + "Paris,France,Texas,\n"
)


@pytest.fixture(autouse=True)
def _silence_loguru():
    # CLI runs attach a sink to the runner's stderr, which is closed afterwards.
    logger.remove()
    yield
    logger.remove()


@pytest.fixture
def write_csv(tmp_path: Path):
    def _write(text: str, name: str = "cities.csv") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def paris_csv(write_csv) -> Path:
    return write_csv(PARIS_ROWS)
