# matching/policy.py

# Postings listing more skills than this need broader coverage to qualify
BROAD_POSTING_SKILL_COUNT = 10

# Minimum match percentage (0-100) for a posting to qualify
STANDARD_THRESHOLD = 70.0
BROAD_THRESHOLD = 85.0

# Prediction confidence = min(CAP, top_match / 100 + OFFSET)
CONFIDENCE_OFFSET = 0.3
CONFIDENCE_CAP = 0.95
MAX_PREDICTED_COMPANIES = 3

# Returned when nothing qualifies
FALLBACK_ROLE = "Entry Level Position"
FALLBACK_SALARY_RANGE = "₹4,00,000 - ₹6,00,000"
FALLBACK_COMPANIES = ("Consider adding more relevant skills",)
FALLBACK_CONFIDENCE = 0.3
