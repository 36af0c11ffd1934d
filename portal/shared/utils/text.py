"""Text matching and ordering helpers.

Every case-insensitive comparison in the query engine goes through
fold() / contains_ci() so predicates and the relevance scorer agree on
what "matches" means.
"""

import unicodedata


def fold(value: str) -> str:
    """Return the lowercased form used for all case-insensitive matching.

    Plain str.lower(), so 'ß' stays 'ß' and never matches 'ss'.
    """
    return value.lower()


def contains_ci(haystack: str | None, needle: str) -> bool:
    """Return True if needle occurs in haystack, ignoring case.

    A None haystack never matches. An empty needle matches any string.
    """
    if haystack is None:
        return False
    return fold(needle) in fold(haystack)


def find_ci(haystack: str, needle: str) -> int:
    """Return the index of the first case-insensitive match of needle, or -1.

    Uses the same fold() as contains_ci(), so a match found there is always
    found here.
    """
    return fold(haystack).find(fold(needle))


def equals_ci(left: str | None, right: str) -> bool:
    """Return True if both strings are equal ignoring case. None never matches."""
    if left is None:
        return False
    return fold(left) == fold(right)


def _strip_accents(value: str) -> str:
    decomposed = unicodedata.normalize("NFD", value)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def collation_key(value: str) -> tuple[str, str, str]:
    """Sort key approximating locale-aware (ICU root) string ordering.

    Primary: letters without accents or case. Secondary: accents.
    Tertiary: lowercase before uppercase.
    """
    return (
        fold(_strip_accents(value)),
        fold(value),
        value.swapcase(),
    )
