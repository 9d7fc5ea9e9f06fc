import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

SAMPLE_CATALOG = Path(__file__).resolve().parent.parent / "data" / "jobs.csv"


@dataclass(frozen=True)
class Settings:
    catalog_source: str
    log_level: str = "INFO"


def get_settings() -> Settings:
    """Read settings from the environment (and a .env file, if present)."""
    load_dotenv()
    return Settings(
        catalog_source=os.getenv("JOBS_CATALOG") or str(SAMPLE_CATALOG),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
