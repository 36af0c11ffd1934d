"""Core constants: relevance weights, snippet radius, tag category lists.

Single source of truth for the literal values the query engine relies on.
"""

# Relevance weights per matched field
SCORE_TITLE = 10
SCORE_CONTENT = 5
SCORE_TAG = 2  # per matching tag
SCORE_AUTHOR = 3
# Score given to every item when no text query is supplied
SCORE_NEUTRAL = 1

# Characters kept on each side of the first content match in a highlight
SNIPPET_RADIUS = 50

# Pagination defaults (overridable via settings)
DEFAULT_PAGE = 1

# Tag category lists, matched case-insensitively
POLICY_TAGS = ("policy", "guidelines", "mandatory")
EVENT_TAGS = ("meeting", "event", "training", "celebration")
DEPARTMENT_TAGS = (
    "engineering",
    "hr",
    "marketing",
    "finance",
    "operations",
    "design",
    "legal",
    "sales",
)
