"""
Dataset wiring for the API.

create_app() builds one DatasetLoader and its memoising ViewBuilder and
stores them on ``app.state``; routes reach them through the dependencies
below.  Filter state is parsed from the query string on each request.

Query parameters:
    q         free-text search (name, failure reason, category)
    category  exact category path
    tag       exact failure tag
    sort      amount | date | backers   (default: amount)
    dir       1 | -1                    (default: -1, descending)
"""

from fastapi import HTTPException, Query, Request

from api.models import ErrorResponse
from graveyard import FilterState, LoadState, ProjectView, SortField
from graveyard.view import ViewBuilder

# OpenAPI ``responses=`` entries shared by the JSON data routes.
UNAVAILABLE_RESPONSE = {
    503: {
        "model": ErrorResponse,
        "description": "Dataset still loading or failed to load",
    },
}
NOT_FOUND_RESPONSE = {
    404: {
        "model": ErrorResponse,
        "description": "No project with that name",
    },
}


def get_view_builder(request: Request) -> ViewBuilder:
    builder = getattr(request.app.state, "view_builder", None)
    if builder is None:
        raise RuntimeError("Dataset not initialised — create the app with create_app()")
    return builder


def get_filter_state(
    q: str = Query("", description="Case-insensitive text search", max_length=200),
    category: str = Query("", description="Exact category path"),
    tag: str = Query("", description="Exact failure tag"),
    sort: SortField = Query(SortField.AMOUNT, description="Sort field"),
    dir: int = Query(-1, ge=-1, le=1, description="1 ascending, -1 descending"),
) -> FilterState:
    if dir == 0:
        raise HTTPException(status_code=422, detail="dir must be 1 or -1")
    return FilterState(
        search_term=q,
        category_filter=category,
        tag_filter=tag,
        sort_field=sort,
        sort_direction=dir,
    )


def require_ready_view(builder: ViewBuilder, state: FilterState) -> ProjectView:
    """Build the view, or raise 503 while the dataset is loading or failed."""
    view = builder.build(state)
    if view.loading_state != LoadState.READY.value:
        detail = view.error or "Dataset is still loading"
        raise HTTPException(status_code=503, detail=detail)
    return view
