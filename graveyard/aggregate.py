"""Totals over the whole graveyard (never the filtered view)."""

from __future__ import annotations

from collections.abc import Iterable

from graveyard.models import AggregateStats, Project


def aggregate(projects: Iterable[Project]) -> AggregateStats:
    """Count the projects and sum their raised amounts and backers.

    An empty collection yields all zeros.
    """
    count = 0
    total_raised: float = 0
    total_backers = 0
    for project in projects:
        count += 1
        total_raised += project.amount_raised
        total_backers += project.backers
    return AggregateStats(
        total_projects=count,
        total_amount_raised=total_raised,
        total_backers=total_backers,
    )
