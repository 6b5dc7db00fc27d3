"""
Priority scoring for new complaints.

The score starts at 50, adds a fixed weight for the category and 10 points
for every distinct urgent keyword found anywhere in the title or description
(case-insensitive substring match), and is clamped to [0, 100]. The priority
tier is derived from the score alone.
"""

# Local application imports
from civicdesk.models.complaints.enums import ComplaintCategory, ComplaintPriority

BASE_SCORE = 50
MIN_SCORE = 0
MAX_SCORE = 100

CATEGORY_WEIGHTS: dict[str, int] = {
    ComplaintCategory.INFRASTRUCTURE.value: 20,
    ComplaintCategory.UTILITIES.value: 18,
    ComplaintCategory.PUBLIC_SAFETY.value: 22,
    ComplaintCategory.TRAFFIC.value: 15,
    ComplaintCategory.HEALTH.value: 20,
    ComplaintCategory.ENVIRONMENT.value: 10,
    ComplaintCategory.SANITATION.value: 12,
    ComplaintCategory.OTHER.value: 8,
}
UNKNOWN_CATEGORY_WEIGHT = 10

URGENT_KEYWORDS: tuple[str, ...] = (
    "emergency",
    "urgent",
    "immediate",
    "danger",
    "accident",
    "fallen",
    "leak",
    "fire",
    "flood",
)
URGENT_KEYWORD_POINTS = 10

# (minimum score, tier), checked from the top
PRIORITY_THRESHOLDS: tuple[tuple[int, ComplaintPriority], ...] = (
    (85, ComplaintPriority.CRITICAL),
    (70, ComplaintPriority.HIGH),
    (40, ComplaintPriority.MEDIUM),
)


def category_weight(category: ComplaintCategory | str) -> int:
    key = category.value if isinstance(category, ComplaintCategory) else category
    return CATEGORY_WEIGHTS.get(key, UNKNOWN_CATEGORY_WEIGHT)


def matched_urgent_keywords(title: str, description: str) -> list[str]:
    text = f"{title or ''} {description or ''}".lower()
    return [keyword for keyword in URGENT_KEYWORDS if keyword in text]


def calculate_priority_score(category: ComplaintCategory | str, title: str, description: str) -> int:
    score = BASE_SCORE + category_weight(category)
    score += len(matched_urgent_keywords(title, description)) * URGENT_KEYWORD_POINTS
    return min(MAX_SCORE, max(MIN_SCORE, score))


def determine_priority(score: int) -> ComplaintPriority:
    for minimum, priority in PRIORITY_THRESHOLDS:
        if score >= minimum:
            return priority
    return ComplaintPriority.LOW


def score_complaint(
    category: ComplaintCategory | str, title: str, description: str
) -> tuple[int, ComplaintPriority]:
    score = calculate_priority_score(category, title, description)
    return score, determine_priority(score)
