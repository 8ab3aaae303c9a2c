"""Distinct filter options derived from the loaded collection."""

from __future__ import annotations

from collections.abc import Iterable

from graveyard.models import Facets, Project


def extract_facets(projects: Iterable[Project]) -> Facets:
    """Return the sorted distinct categories and tags present in *projects*.

    Both lists are case-sensitive and sorted ascending; an empty collection
    yields empty facets.
    """
    categories: set[str] = set()
    tags: set[str] = set()
    for project in projects:
        categories.add(project.category)
        tags.update(project.tags or ())
    return Facets(categories=tuple(sorted(categories)), tags=tuple(sorted(tags)))
