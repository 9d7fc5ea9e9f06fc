import logging
from pathlib import Path
from typing import List, Optional

import requests

from matching.models import JobPosting
from parsing.catalog import load
from services.config import SAMPLE_CATALOG, get_settings

logger = logging.getLogger(__name__)


def sample_catalog_path() -> Path:
    return SAMPLE_CATALOG


def read_catalog_text(source: str) -> str:
    """Fetch catalog text from an http(s) URL or read it from a local file."""
    if source.startswith(("http://", "https://")):
        r = requests.get(source, timeout=10)
        r.raise_for_status()
        return r.text
    return Path(source).read_text(encoding="utf-8")


def load_catalog(source: Optional[str] = None) -> List[JobPosting]:
    source = source or get_settings().catalog_source
    jobs = load(read_catalog_text(source))
    logger.info("Loaded %d job postings from %s", len(jobs), source)
    return jobs
