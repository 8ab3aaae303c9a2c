"""
Project list endpoints.

GET /api/v1/projects          → filtered + sorted projects
GET /api/v1/projects/{name}   → one project by its (unique) name
GET /api/v1/view              → full view-model: facets, projects, stats, state

Filter params (q, category, tag, sort, dir) are documented in api/dataset.py.
"""

from fastapi import APIRouter, Depends, HTTPException

from api.dataset import (
    NOT_FOUND_RESPONSE,
    UNAVAILABLE_RESPONSE,
    get_filter_state,
    get_view_builder,
    require_ready_view,
)
from api.models import ProjectListResponse, ProjectOut, FilterStateOut, ViewOut
from graveyard import FilterState
from graveyard.view import ViewBuilder

router = APIRouter(tags=["projects"])


@router.get(
    "/projects",
    response_model=ProjectListResponse,
    summary="List failed projects",
    responses=UNAVAILABLE_RESPONSE,
)
def list_projects(
    state: FilterState = Depends(get_filter_state),
    builder: ViewBuilder = Depends(get_view_builder),
) -> ProjectListResponse:
    """Return the projects matching the filters, in the requested order."""
    view = require_ready_view(builder, state)
    return ProjectListResponse(
        total=len(view.projects),
        filters=FilterStateOut.from_state(state),
        items=[ProjectOut.from_project(p) for p in view.projects],
    )


@router.get(
    "/projects/{name:path}",
    response_model=ProjectOut,
    summary="Get one project",
    responses={**NOT_FOUND_RESPONSE, **UNAVAILABLE_RESPONSE},
)
def get_project(
    name: str,
    builder: ViewBuilder = Depends(get_view_builder),
) -> ProjectOut:
    """Return the project whose name matches exactly (names may contain "/")."""
    view = require_ready_view(builder, FilterState())
    for project in view.projects:
        if project.name == name:
            return ProjectOut.from_project(project)
    raise HTTPException(status_code=404, detail=f"Project {name!r} not found")


@router.get(
    "/view",
    response_model=ViewOut,
    summary="Full view-model for one render",
)
def get_view(
    state: FilterState = Depends(get_filter_state),
    builder: ViewBuilder = Depends(get_view_builder),
) -> ViewOut:
    """Return facets, filtered projects, stats and the loading state.

    Unlike the other data endpoints this one never answers 503: a view in the
    ``loading`` or ``failed`` state is itself a valid render.
    """
    view = builder.build(state)
    return ViewOut.from_view(view)
