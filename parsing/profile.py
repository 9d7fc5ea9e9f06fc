import re
from typing import List, Optional

from matching.models import CandidateProfile

SKILL_SPLIT_RE = re.compile(r"[,\n]")

# Fixed record returned in place of real resume extraction
PLACEHOLDER_PROFILE = CandidateProfile(
    name="John Doe",
    tenth_marks="95",
    twelfth_marks="92",
    cgpa="8.5",
    branch="CS",
    skills=("JavaScript", "React", "Node.js", "Python"),
    projects=(
        {
            "title": "E-commerce Website",
            "description": "Built a full-stack e-commerce platform using MERN stack",
        },
    ),
    certifications=("AWS Certified Developer",),
    achievements=("First Prize in College Hackathon",),
    internships=(
        {
            "company": "Tech Solutions",
            "role": "Software Developer Intern",
            "duration": "3 months",
            "description": "Developed features for the company's main product",
        },
    ),
)


def extract_profile(data: Optional[bytes] = None) -> CandidateProfile:
    """Stand-in for resume extraction: the uploaded bytes are not read."""
    return PLACEHOLDER_PROFILE


def parse_skill_list(text: str) -> List[str]:
    # Form input only: entries are trimmed, the matcher never normalises
    return [s.strip() for s in SKILL_SPLIT_RE.split(text or "") if s.strip()]
