"""
Facet endpoint.

GET /api/v1/facets → distinct categories and tags across the whole dataset,
each sorted ascending.  Used to populate the filter dropdowns.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.dataset import UNAVAILABLE_RESPONSE, get_view_builder, require_ready_view
from api.models import FacetsOut
from graveyard import FilterState
from graveyard.view import ViewBuilder

router = APIRouter(tags=["reference"])

# Facets change only when the dataset does, i.e. on restart.
_CACHE_HEADER = {"Cache-Control": "public, max-age=3600"}


@router.get(
    "/facets",
    response_model=FacetsOut,
    summary="List categories and failure tags",
    responses=UNAVAILABLE_RESPONSE,
)
def list_facets(builder: ViewBuilder = Depends(get_view_builder)) -> JSONResponse:
    """Return every distinct category and tag present in the dataset."""
    view = require_ready_view(builder, FilterState())
    data = FacetsOut.from_facets(view.facets).model_dump()
    return JSONResponse(content=data, headers=_CACHE_HEADER)
