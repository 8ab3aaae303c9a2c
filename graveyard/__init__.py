"""Kickstarter Graveyard core: load, facet, filter, sort and total the dataset.

Every function here is pure over an immutable collection of Project records;
the web layer in ``api`` only parses request state and renders the result.
"""

from graveyard.models import (
    ASCENDING,
    DESCENDING,
    AggregateStats,
    Facets,
    FilterState,
    Project,
    ProjectView,
    SortField,
)
from graveyard.loader import (
    LOAD_ERROR_MESSAGE,
    DatasetLoadError,
    DatasetLoader,
    LoadState,
    parse_records,
)
from graveyard.facets import extract_facets
from graveyard.filtering import filter_projects
from graveyard.sorting import parse_date, sort_projects
from graveyard.aggregate import aggregate
from graveyard.view import ViewBuilder, build_view, compute_view

__all__ = [
    # Models
    "ASCENDING",
    "DESCENDING",
    "AggregateStats",
    "Facets",
    "FilterState",
    "Project",
    "ProjectView",
    "SortField",
    # Loader
    "LOAD_ERROR_MESSAGE",
    "DatasetLoadError",
    "DatasetLoader",
    "LoadState",
    "parse_records",
    # Pipeline
    "extract_facets",
    "filter_projects",
    "parse_date",
    "sort_projects",
    "aggregate",
    # View
    "ViewBuilder",
    "build_view",
    "compute_view",
]
