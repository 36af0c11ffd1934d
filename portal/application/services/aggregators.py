"""Tag and department aggregates derived from the resident collections.

Aggregates are recomputed on every call; nothing is cached.
"""

from collections.abc import Callable, Sequence

from portal.application.dtos.results import DepartmentInfo, TagInfo
from portal.core.constants import DEPARTMENT_TAGS, EVENT_TAGS, POLICY_TAGS
from portal.domain.entities import ContentItemEntity, UserEntity
from portal.shared.enums import TagCategory
from portal.shared.utils import fold


def _in_list(names: Sequence[str]) -> Callable[[str], bool]:
    folded = frozenset(fold(name) for name in names)
    return lambda tag: fold(tag) in folded


# Evaluated in order; first match wins.
TAG_CATEGORY_RULES: tuple[tuple[Callable[[str], bool], TagCategory], ...] = (
    (_in_list(POLICY_TAGS), TagCategory.POLICY),
    (_in_list(EVENT_TAGS), TagCategory.EVENT),
    (_in_list(DEPARTMENT_TAGS), TagCategory.DEPARTMENT),
)


def categorize_tag(tag: str) -> TagCategory:
    for matches, category in TAG_CATEGORY_RULES:
        if matches(tag):
            return category
    return TagCategory.GENERAL


def summarize_tags(content: Sequence[ContentItemEntity]) -> list[TagInfo]:
    """Count tag occurrences across all content, most used first.

    Tags are grouped by their exact string. Equal counts keep the order in
    which tags were first seen while walking content in store order.
    """
    counts: dict[str, int] = {}
    for item in content:
        for tag in item.tags:
            counts[tag] = counts.get(tag, 0) + 1
    tags = [
        TagInfo(name=name, count=count, category=categorize_tag(name))
        for name, count in counts.items()
    ]
    return sorted(tags, key=lambda t: t.count, reverse=True)


def summarize_departments(
    users: Sequence[UserEntity], content: Sequence[ContentItemEntity]
) -> list[DepartmentInfo]:
    """Member and authored-content counts per department, largest first.

    Departments come from users only, in order of first appearance; users
    without a department are not counted. Department names match exactly.
    """
    names = list(dict.fromkeys(user.department for user in users if user.has_department))
    departments = [
        DepartmentInfo(
            name=name,
            user_count=sum(1 for user in users if user.department == name),
            content_count=sum(1 for item in content if item.author.department == name),
        )
        for name in names
    ]
    return sorted(departments, key=lambda d: d.user_count, reverse=True)
