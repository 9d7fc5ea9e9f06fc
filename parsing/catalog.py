import csv
import logging
from typing import List, Tuple

from matching.models import JobPosting

logger = logging.getLogger(__name__)

# Positional column order of the catalog source; the header row is not read
CATALOG_FIELDS = (
    "title",
    "company",
    "location",
    "salary_range",
    "skills",
    "experience_level",
    "description",
)


def parse_skills(field: str) -> Tuple[str, ...]:
    """
    ``"React Node-js"`` -> ``("React", "Node js")``: quotes dropped, split on
    whitespace, hyphens inside a token become spaces.
    """
    tokens = (field or "").replace('"', "").split()
    return tuple(t.replace("-", " ") for t in tokens)


def load(raw_table: str) -> List[JobPosting]:
    """
    Parse catalog text into postings. The first line is a header and is
    skipped. Blank lines are ignored; a line with too few fields is logged
    and skipped without stopping the load, as is a line with broken quoting.
    """
    lines = (raw_table or "").splitlines()
    jobs: List[JobPosting] = []
    # One record per line: a bad line must not run on into the next one
    for lineno, line in enumerate(lines[1:], start=2):
        if not line.strip():
            continue
        try:
            row = next(csv.reader([line], strict=True))
        except csv.Error as e:
            logger.warning("Skipping catalog line %d: %s", lineno, e)
            continue
        if not any(v.strip() for v in row):
            continue
        if len(row) < len(CATALOG_FIELDS):
            logger.warning(
                "Skipping catalog line %d: expected %d fields, got %d",
                lineno, len(CATALOG_FIELDS), len(row),
            )
            continue
        rec = dict(zip(CATALOG_FIELDS, row))
        skills = parse_skills(rec["skills"])
        if not skills:
            logger.warning("Catalog line %d (%s) lists no skills", lineno, rec["title"])
        jobs.append(JobPosting(
            id=str(len(jobs) + 1),
            title=rec["title"],
            company=rec["company"],
            location=rec["location"],
            salary_range=rec["salary_range"],
            required_skills=skills,
            experience_level=rec["experience_level"],
            description=rec["description"],
        ))
    return jobs
