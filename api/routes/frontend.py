"""
Frontend HTML routes.

Serves the Jinja2 templates for the graveyard page and its HTMX partial.

Routes:
    GET /                    → index.html (header, stats, controls, results)
    GET /partials/results    → partials/results.html (HTMX swap target)

The filter form and sort buttons issue HTMX requests to /partials/results
with the same query parameters the JSON API takes, and push the equivalent
/?... URL so a reload restores the view.
"""

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.dataset import get_filter_state, get_view_builder
from graveyard import FilterState, SortField
from graveyard.view import ViewBuilder

router = APIRouter(tags=["frontend"])

# Templates instance is set by create_app() after mounting.
_templates: Jinja2Templates | None = None

SORT_BUTTONS = (
    (SortField.AMOUNT, "Sort by Amount"),
    (SortField.DATE, "Sort by Date"),
    (SortField.BACKERS, "Sort by Backers"),
)

EMPTY_MESSAGE = "No projects found matching your search."
LOADING_MESSAGE = "Loading projects..."


def set_templates(t: Jinja2Templates) -> None:
    global _templates
    _templates = t


def _tmpl() -> Jinja2Templates:
    if _templates is None:
        raise RuntimeError("Templates not initialised — call set_templates() first")
    return _templates


def _context(request: Request, builder: ViewBuilder, state: FilterState) -> dict:
    view = builder.build(state)
    return {
        "request":         request,
        "view":            view,
        "filters":         state,
        "sort_buttons":    SORT_BUTTONS,
        "empty_message":   EMPTY_MESSAGE,
        "loading_message": LOADING_MESSAGE,
    }


# ── Routes ────────────────────────────────────────────────────────────────────

@router.get("/", response_class=HTMLResponse, include_in_schema=False)
def index(
    request: Request,
    state: FilterState = Depends(get_filter_state),
    builder: ViewBuilder = Depends(get_view_builder),
) -> HTMLResponse:
    """Main graveyard page."""
    return _tmpl().TemplateResponse(request, "index.html", _context(request, builder, state))


@router.get("/partials/results", response_class=HTMLResponse, include_in_schema=False)
def results_partial(
    request: Request,
    state: FilterState = Depends(get_filter_state),
    builder: ViewBuilder = Depends(get_view_builder),
) -> HTMLResponse:
    """HTMX partial: sort bar and project cards for the current filters."""
    return _tmpl().TemplateResponse(
        request, "partials/results.html", _context(request, builder, state)
    )


# ── Error pages ───────────────────────────────────────────────────────────────

def register_error_handlers(app: FastAPI) -> None:
    """JSON errors under /api and /health, an HTML page everywhere else."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        path = request.url.path
        if path.startswith("/api") or path.startswith("/health") or _templates is None:
            return JSONResponse(
                status_code=exc.status_code,
                content={"error": str(exc.detail), "status_code": exc.status_code},
                headers=getattr(exc, "headers", None),
            )
        return _tmpl().TemplateResponse(
            request,
            "error.html",
            {"request": request, "status_code": exc.status_code, "detail": exc.detail},
            status_code=exc.status_code,
        )
