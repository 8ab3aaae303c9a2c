"""
GET /api/v1/stats endpoint.

Totals over the full graveyard: number of projects, amount raised and
backers.  Filters never apply here; the stats bar always describes the
whole dataset.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.dataset import UNAVAILABLE_RESPONSE, get_view_builder, require_ready_view
from api.models import StatsOut
from graveyard import FilterState
from graveyard.view import ViewBuilder

router = APIRouter(tags=["aggregations"])


@router.get(
    "/stats",
    response_model=StatsOut,
    summary="Aggregate statistics",
    responses=UNAVAILABLE_RESPONSE,
)
def get_stats(builder: ViewBuilder = Depends(get_view_builder)) -> JSONResponse:
    """Return project count, total raised and total backers."""
    view = require_ready_view(builder, FilterState())
    data = StatsOut.from_stats(view.stats).model_dump()
    return JSONResponse(content=data, headers={"Cache-Control": "public, max-age=300"})
