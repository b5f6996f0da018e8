"""Settings from the environment (optionally a .env file) and logging setup."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_DEFAULT_REGION = "CONTACT_BOOK_DEFAULT_REGION"
ENV_LOG_LEVEL = "CONTACT_BOOK_LOG_LEVEL"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class Settings:
    """Runtime settings. default_region is used to format phone numbers without a country code."""

    default_region: str | None = None
    log_level: str = "INFO"


def load_settings(env_file: str | Path | None = None) -> Settings:
    """Build Settings from os.environ after loading .env (repo root, then cwd) if present.

    Variables already set in the environment win over the .env file.
    """
    candidates = (
        [Path(env_file)]
        if env_file is not None
        else [Path(__file__).resolve().parents[3] / ".env", Path.cwd() / ".env"]
    )
    for path in candidates:
        if path.exists():
            load_dotenv(path)
            break

    region = os.environ.get(ENV_DEFAULT_REGION, "").strip().upper() or None
    level = os.environ.get(ENV_LOG_LEVEL, "").strip().upper() or "INFO"
    return Settings(default_region=region, log_level=level)


def configure_logging(settings: Settings) -> None:
    level = getattr(logging, settings.log_level, None)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(format=LOG_FORMAT, level=level)
