"""
Core data structures for the Kickstarter Graveyard.

Provides:
  - Project: one immutable record from the dataset.
  - SortField: the closed set of sortable fields.
  - FilterState: the search/filter/sort configuration of one page view,
    plus the transitions the UI applies to it.
  - Facets / AggregateStats: derived values computed from a collection.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field, replace
from enum import Enum
from typing import Any
from urllib.parse import urlencode


ASCENDING = 1
DESCENDING = -1


def _as_str(value: Any) -> str:
    return "" if value is None else str(value)


def _as_number(value: Any) -> float | int:
    """Coerce a JSON value to a finite number; anything else becomes 0."""
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, int):
        return value
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    return number if math.isfinite(number) else 0


def _as_str_tuple(value: Any) -> tuple[str, ...]:
    # Only JSON arrays carry tags/sources; any other shape reads as empty.
    if not isinstance(value, (list, tuple)):
        return ()
    return tuple(str(v) for v in value if v is not None)


# ── Project record ────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Project:
    """A failed crowdfunded hardware project."""

    name: str
    kickstarter_url: str = ""
    image_url: str = ""
    amount_raised: float = 0
    backers: int = 0
    goal: float = 0
    funded_date: str = ""
    last_update: str = ""
    category: str = ""
    failure_reason: str = ""
    sources: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Project":
        """Build a Project from one JSON object.

        Missing or null fields fall back to empty values so a sparse record
        still renders; ``tags`` and ``sources`` become empty tuples.
        """
        return cls(
            name=_as_str(data.get("name")),
            kickstarter_url=_as_str(data.get("kickstarter_url")),
            image_url=_as_str(data.get("image_url")),
            amount_raised=_as_number(data.get("amount_raised")),
            backers=int(_as_number(data.get("backers"))),
            goal=_as_number(data.get("goal")),
            funded_date=_as_str(data.get("funded_date")),
            last_update=_as_str(data.get("last_update")),
            category=_as_str(data.get("category")),
            failure_reason=_as_str(data.get("failure_reason")),
            sources=_as_str_tuple(data.get("sources")),
            tags=_as_str_tuple(data.get("tags")),
        )

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        d["sources"] = list(self.sources)
        d["tags"] = list(self.tags)
        return d


# ── Filter state ──────────────────────────────────────────────────────────────


class SortField(str, Enum):
    AMOUNT = "amount"
    DATE = "date"
    BACKERS = "backers"


@dataclass(frozen=True)
class FilterState:
    """Search, filter and sort configuration for one page view.

    Instances are immutable; each UI event returns a new state.
    """

    search_term: str = ""
    category_filter: str = ""
    tag_filter: str = ""
    sort_field: SortField = SortField.AMOUNT
    sort_direction: int = DESCENDING

    def __post_init__(self) -> None:
        if self.sort_direction not in (ASCENDING, DESCENDING):
            raise ValueError(
                f"sort_direction must be 1 or -1, got {self.sort_direction!r}"
            )
        # Accept plain strings ("date") as well as SortField members.
        object.__setattr__(self, "sort_field", SortField(self.sort_field))

    def with_search_term(self, term: str) -> "FilterState":
        return replace(self, search_term=term)

    def with_category(self, category: str) -> "FilterState":
        return replace(self, category_filter=category)

    def with_tag(self, tag: str) -> "FilterState":
        return replace(self, tag_filter=tag)

    def toggle_sort(self, sort_field: SortField | str) -> "FilterState":
        """Clicking the active sort flips direction; another one resets to descending."""
        sort_field = SortField(sort_field)
        if sort_field == self.sort_field:
            return replace(self, sort_direction=self.sort_direction * -1)
        return replace(self, sort_field=sort_field, sort_direction=DESCENDING)

    def to_params(self) -> dict[str, str]:
        """Query-string form of the state; empty filters are omitted."""
        params: dict[str, str] = {}
        if self.search_term:
            params["q"] = self.search_term
        if self.category_filter:
            params["category"] = self.category_filter
        if self.tag_filter:
            params["tag"] = self.tag_filter
        params["sort"] = self.sort_field.value
        params["dir"] = str(self.sort_direction)
        return params

    def to_query(self) -> str:
        return urlencode(self.to_params())


# ── Derived values ────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Facets:
    categories: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()


@dataclass(frozen=True)
class AggregateStats:
    total_projects: int = 0
    total_amount_raised: float = 0
    total_backers: int = 0


@dataclass(frozen=True)
class ProjectView:
    """Read-only view-model handed to the rendering layer each cycle."""

    loading_state: str
    state: FilterState = field(default_factory=FilterState)
    facets: Facets = field(default_factory=Facets)
    projects: tuple[Project, ...] = ()
    stats: AggregateStats = field(default_factory=AggregateStats)
    error: str | None = None
