"""
Skill-overlap matching and placement prediction.

Skills are compared with exact string equality; nothing here normalises case
or whitespace. Two ranking modes are provided:

- ``rank_jobs``: strict, threshold-gated ranking used for prediction.
- ``loose_rank``: any-overlap ranking used for discovery on a fresh profile.
"""

import logging
from typing import Iterable, List, Sequence, Tuple, Union

from . import policy
from .models import CandidateProfile, JobPosting, MatchResult, PredictionKind, PredictionSummary

logger = logging.getLogger(__name__)

Skills = Union[CandidateProfile, Iterable[str]]


def candidate_skills(candidate: Skills) -> List[str]:
    if isinstance(candidate, CandidateProfile):
        return list(candidate.skills)
    return list(candidate)


def skill_match_percentage(candidate: Skills, required_skills: Iterable[str]) -> float:
    """
    Percentage (0-100) of ``required_skills`` present in the candidate's skills.

    A posting with no required skills scores 0.0.
    """
    required = set(required_skills)
    if not required:
        return 0.0
    have = set(candidate_skills(candidate))
    return 100.0 * len(required & have) / len(required)


def missing_skills(candidate: Skills, required_skills: Iterable[str]) -> List[str]:
    have = set(candidate_skills(candidate))
    return [s for s in required_skills if s not in have]


def qualifying_threshold(job: Union[JobPosting, int]) -> float:
    count = job if isinstance(job, int) else len(job.skill_set)
    if count <= policy.BROAD_POSTING_SKILL_COUNT:
        return policy.STANDARD_THRESHOLD
    return policy.BROAD_THRESHOLD


def evaluate(candidate: Skills, job: JobPosting) -> MatchResult:
    skills = candidate_skills(candidate)
    pct = skill_match_percentage(skills, job.required_skills)
    have = set(skills)
    return MatchResult(
        job=job,
        match_percentage=pct,
        qualifies=pct >= qualifying_threshold(job),
        missing_skills=tuple(missing_skills(skills, job.required_skills)),
        matched_count=len(job.skill_set & have),
    )


def match_results(candidate: Skills, catalog: Sequence[JobPosting]) -> List[MatchResult]:
    """Strict ranking with full per-posting detail (missing skills etc.)."""
    skills = candidate_skills(candidate)
    results = [r for r in (evaluate(skills, job) for job in catalog) if r.qualifies]
    # sorted() is stable, so ties keep catalog order
    results = sorted(results, key=lambda r: r.match_percentage, reverse=True)
    logger.debug("%d of %d postings qualify", len(results), len(catalog))
    return results


def rank_jobs(candidate: Skills, catalog: Sequence[JobPosting]) -> List[Tuple[JobPosting, float]]:
    return [(r.job, r.match_percentage) for r in match_results(candidate, catalog)]


def loose_rank(candidate: Skills, catalog: Sequence[JobPosting]) -> List[JobPosting]:
    """Postings sharing at least one skill, most shared skills first."""
    have = set(candidate_skills(candidate))
    scored = [(job, len(job.skill_set & have)) for job in catalog]
    scored = [(job, n) for job, n in scored if n > 0]
    scored = sorted(scored, key=lambda x: x[1], reverse=True)
    return [job for job, _ in scored]


def fallback_summary() -> PredictionSummary:
    return PredictionSummary(
        predicted_role=policy.FALLBACK_ROLE,
        predicted_salary_range=policy.FALLBACK_SALARY_RANGE,
        predicted_companies=tuple(policy.FALLBACK_COMPANIES),
        confidence=policy.FALLBACK_CONFIDENCE,
        kind=PredictionKind.FALLBACK,
    )


def predict(candidate: Skills, catalog: Sequence[JobPosting]) -> PredictionSummary:
    ranked = rank_jobs(candidate, catalog)
    if not ranked:
        return fallback_summary()
    best, top_pct = ranked[0]
    companies = tuple(job.company for job, _ in ranked[:policy.MAX_PREDICTED_COMPANIES])
    return PredictionSummary(
        predicted_role=best.title,
        predicted_salary_range=best.salary_range,
        predicted_companies=companies,
        confidence=min(policy.CONFIDENCE_CAP, top_pct / 100 + policy.CONFIDENCE_OFFSET),
        kind=PredictionKind.MATCH,
    )
