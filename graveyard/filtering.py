"""
Filter engine: narrows a collection to the records matching a FilterState.

A record matches when all three predicates hold:
    text      — search term is a case-insensitive substring of the name,
                failure reason or category (empty term matches everything)
    category  — no category filter, or an exact match on the full path
    tag       — no tag filter, or the tag is one of the record's tags
"""

from __future__ import annotations

from collections.abc import Iterable

from graveyard.models import FilterState, Project


def matches_search(project: Project, search_term: str) -> bool:
    if not search_term:
        return True
    needle = search_term.lower()
    return (
        needle in project.name.lower()
        or needle in project.failure_reason.lower()
        or needle in project.category.lower()
    )


def matches_category(project: Project, category_filter: str) -> bool:
    # Full hierarchical path, not the leaf shown on the card badge.
    return not category_filter or project.category == category_filter


def matches_tag(project: Project, tag_filter: str) -> bool:
    return not tag_filter or tag_filter in (project.tags or ())


def filter_projects(projects: Iterable[Project], state: FilterState) -> list[Project]:
    """Return the matching records in their original relative order."""
    return [
        p for p in projects
        if matches_search(p, state.search_term)
        and matches_category(p, state.category_filter)
        and matches_tag(p, state.tag_filter)
    ]
