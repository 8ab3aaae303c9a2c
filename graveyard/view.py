"""
View-model builder: loader + filter state → everything one render needs.

    facets     — from the full collection
    projects   — filtered, then sorted
    stats      — from the full collection (not the filtered view)

Results are memoised per (dataset generation, filter state); every stage is a
pure function of those two inputs.
"""

from __future__ import annotations

from graveyard.aggregate import aggregate
from graveyard.facets import extract_facets
from graveyard.filtering import filter_projects
from graveyard.loader import DatasetLoader, LoadState
from graveyard.models import FilterState, ProjectView
from graveyard.sorting import sort_projects
from utils.cache import LRUCache


def compute_view(loader: DatasetLoader, state: FilterState) -> ProjectView:
    """Run the facet/filter/sort/aggregate pipeline without caching."""
    if loader.state != LoadState.READY:
        return ProjectView(
            loading_state=loader.state.value,
            state=state,
            error=loader.error,
        )
    projects = loader.projects
    matched = filter_projects(projects, state)
    ordered = sort_projects(matched, state.sort_field, state.sort_direction)
    return ProjectView(
        loading_state=loader.state.value,
        state=state,
        facets=extract_facets(projects),
        projects=tuple(ordered),
        stats=aggregate(projects),
    )


class ViewBuilder:
    """Memoising front for compute_view()."""

    def __init__(self, loader: DatasetLoader, cache_size: int = 256) -> None:
        self.loader = loader
        self.cache = LRUCache(maxsize=cache_size)

    def build(self, state: FilterState | None = None) -> ProjectView:
        state = state or FilterState()
        if self.loader.state != LoadState.READY:
            return compute_view(self.loader, state)
        key = (id(self.loader), self.loader.generation, state)
        return self.cache.get_or_compute(key, lambda: compute_view(self.loader, state))


def build_view(loader: DatasetLoader, state: FilterState | None = None) -> ProjectView:
    return compute_view(loader, state or FilterState())
