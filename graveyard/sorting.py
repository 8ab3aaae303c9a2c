"""
Sort engine: orders a collection by amount raised, funding date or backers.

Each SortField maps to one key function.  Python's sort is stable, so records
with equal keys keep their input order when ascending; descending is the
exact reverse of the ascending order.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import date, datetime
from typing import Any

from graveyard.models import ASCENDING, DESCENDING, Project, SortField

# Formats tried after ISO 8601 for the funded_date field.
_DATE_FORMATS = (
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%B %d, %Y",
    "%b %d, %Y",
    "%d %B %Y",
    "%d %b %Y",
    "%B %Y",
    "%b %Y",
    "%Y-%m",
    "%Y",
)


def parse_date(text: str) -> date | None:
    """Parse *text* as a calendar date, or return None when it isn't one."""
    text = (text or "").strip()
    if not text:
        return None
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        pass
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def _amount_key(project: Project) -> Any:
    return project.amount_raised


def _backers_key(project: Project) -> Any:
    return project.backers


def _date_key(project: Project) -> Any:
    # Unparseable dates all share one key, ordered before any real date.
    parsed = parse_date(project.funded_date)
    if parsed is None:
        return (0, date.min)
    return (1, parsed)


SORT_KEYS: dict[SortField, Callable[[Project], Any]] = {
    SortField.AMOUNT: _amount_key,
    SortField.DATE: _date_key,
    SortField.BACKERS: _backers_key,
}


def sort_projects(
    projects: Iterable[Project],
    sort_field: SortField | str = SortField.AMOUNT,
    direction: int = DESCENDING,
) -> list[Project]:
    """Return *projects* ordered by *sort_field*.

    Args:
        projects:   Collection to order; not modified.
        sort_field: One of SortField (or its string value).
        direction:  1 for ascending, -1 for descending.

    Raises:
        ValueError: Unknown sort field or direction.
    """
    if direction not in (ASCENDING, DESCENDING):
        raise ValueError(f"direction must be 1 or -1, got {direction!r}")
    key = SORT_KEYS[SortField(sort_field)]
    ordered = sorted(projects, key=key)
    if direction == DESCENDING:
        ordered.reverse()
    return ordered
