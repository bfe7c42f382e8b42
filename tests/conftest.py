from __future__ import annotations

from pathlib import Path

import pytest

from zipit.config.settings import Settings

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture()
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture()
def settings() -> Settings:
    """Settings isolated from any ZIPIT_* variables in the caller's shell."""
    return Settings(
        compression="DEFLATE",
        compresslevel=None,
        max_workers=4,
        text_encoding="utf-8",
        log_level="INFO",
    )
