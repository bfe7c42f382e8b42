from __future__ import annotations

import sys
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


REPO_ROOT = Path(__file__).resolve().parents[3]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="ZIPIT_",
        env_file=REPO_ROOT / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    compression: Literal["DEFLATE", "STORE"] = Field(
        default="DEFLATE",
        description="Compression method for file entries.",
    )
    compresslevel: Optional[int] = Field(default=None, ge=0, le=9)

    max_workers: int = Field(
        default=8,
        ge=1,
        description="Upper bound on concurrent filesystem calls.",
    )
    text_encoding: str = Field(
        default="utf-8",
        description="Encoding applied to inline data given as str.",
    )
    platform: str = Field(
        default_factory=lambda: sys.platform,
        description="Host platform recorded in the archive metadata.",
    )

    log_level: str = "INFO"
