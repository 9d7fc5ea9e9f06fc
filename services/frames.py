from typing import Iterable, List, Sequence

import pandas as pd

from matching.matcher import Skills, candidate_skills, missing_skills
from matching.models import JobPosting, MatchResult

JOB_COLUMNS = ["id", "title", "company", "location", "salary_range", "experience_level"]
RESULT_COLUMNS = JOB_COLUMNS + ["match_percentage", "qualifies", "missing_skills"]
LOOSE_COLUMNS = JOB_COLUMNS + ["matched_skills", "missing_skills", "skills"]


def _job_row(job: JobPosting) -> dict:
    d = job.to_dict()
    row = {c: d[c] for c in JOB_COLUMNS}
    row["skills"] = ", ".join(d["required_skills"])
    return row


def jobs_frame(catalog: Iterable[JobPosting]) -> pd.DataFrame:
    return pd.DataFrame([_job_row(j) for j in catalog], columns=JOB_COLUMNS + ["skills"])


def results_frame(results: Sequence[MatchResult]) -> pd.DataFrame:
    rows: List[dict] = []
    for r in results:
        rows.append({
            **_job_row(r.job),
            "match_percentage": round(r.match_percentage, 1),
            "qualifies": r.qualifies,
            "missing_skills": ", ".join(r.missing_skills),
        })
    return pd.DataFrame(rows, columns=RESULT_COLUMNS)


def loose_frame(candidate: Skills, jobs: Iterable[JobPosting]) -> pd.DataFrame:
    skills = candidate_skills(candidate)
    have = set(skills)
    rows = [
        {
            **_job_row(j),
            "matched_skills": len(j.skill_set & have),
            "missing_skills": ", ".join(missing_skills(skills, j.required_skills)),
        }
        for j in jobs
    ]
    return pd.DataFrame(rows, columns=LOOSE_COLUMNS)
