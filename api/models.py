"""
Pydantic response models for the API.

Project fields keep the dataset's snake_case names.  Display strings (compact
numbers, source labels, tag styles) are included so any client renders cards
exactly the way the HTML frontend does.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from graveyard import AggregateStats, Facets, FilterState, Project, ProjectView
from utils.formatting import (
    category_leaf,
    format_currency,
    format_number,
    source_name,
    tag_style,
)


# ── Project models ────────────────────────────────────────────────────────────

class SourceOut(BaseModel):
    """A source link with its publication label."""
    url: str = Field(..., examples=["https://www.theverge.com/2019/1/1/story"])
    label: str = Field(..., description="Publication name derived from the host", examples=["The Verge"])


class TagOut(BaseModel):
    """A failure tag with its style classes."""
    tag: str = Field(..., examples=["Never Delivered"])
    style: str = Field(..., description="Style classes for the tag chip")


class ProjectOut(BaseModel):
    """One failed project record plus display strings."""
    name: str = Field(..., examples=["Zano"])
    kickstarter_url: str = Field("", description="Campaign page")
    image_url: str = Field("", description="Campaign image (not rendered)")
    amount_raised: float = Field(0, examples=[3400000])
    backers: int = Field(0, examples=[12075])
    goal: float = Field(0, examples=[180000])
    funded_date: str = Field("", examples=["2015-01-06"])
    last_update: str = Field("", description="Free-form status text", examples=["Company liquidated"])
    category: str = Field("", description="Full category path", examples=["Technology/Drones"])
    failure_reason: str = Field("")
    sources: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    category_label: str = Field("", description="Last segment of the category path", examples=["Drones"])
    amount_raised_display: str = Field("", examples=["$3,400,000"])
    backers_display: str = Field("", examples=["12K"])
    goal_display: str = Field("", examples=["$180,000"])
    source_links: list[SourceOut] = Field(default_factory=list)
    tag_styles: list[TagOut] = Field(default_factory=list)

    @classmethod
    def from_project(cls, project: Project) -> "ProjectOut":
        return cls(
            **project.to_dict(),
            category_label=category_leaf(project.category),
            amount_raised_display=format_currency(project.amount_raised),
            backers_display=format_number(project.backers),
            goal_display=format_currency(project.goal),
            source_links=[SourceOut(url=u, label=source_name(u)) for u in project.sources],
            tag_styles=[TagOut(tag=t, style=tag_style(t)) for t in project.tags],
        )


# ── Derived-value models ──────────────────────────────────────────────────────

class FacetsOut(BaseModel):
    """Distinct filter options across the whole dataset."""
    categories: list[str] = Field(default_factory=list, examples=[["Hardware/Wearables", "Technology/Drones"]])
    tags: list[str] = Field(default_factory=list, examples=[["Fraud/Scam", "Never Delivered"]])

    @classmethod
    def from_facets(cls, facets: Facets) -> "FacetsOut":
        return cls(categories=list(facets.categories), tags=list(facets.tags))


class StatsOut(BaseModel):
    """Totals over the unfiltered dataset."""
    total_projects: int = Field(0, examples=[42])
    total_amount_raised: float = Field(0, examples=[125000000])
    total_backers: int = Field(0, examples=[310000])
    total_amount_raised_display: str = Field("", description="Compact form", examples=["$125.0M"])
    total_backers_display: str = Field("", description="Compact form", examples=["310K"])

    @classmethod
    def from_stats(cls, stats: AggregateStats) -> "StatsOut":
        return cls(
            total_projects=stats.total_projects,
            total_amount_raised=stats.total_amount_raised,
            total_backers=stats.total_backers,
            total_amount_raised_display="$" + format_number(stats.total_amount_raised),
            total_backers_display=format_number(stats.total_backers),
        )


class FilterStateOut(BaseModel):
    """The filter state a response was computed for."""
    search_term: str = ""
    category_filter: str = ""
    tag_filter: str = ""
    sort_field: str = Field("amount", examples=["amount", "date", "backers"])
    sort_direction: int = Field(-1, examples=[-1])

    @classmethod
    def from_state(cls, state: FilterState) -> "FilterStateOut":
        return cls(
            search_term=state.search_term,
            category_filter=state.category_filter,
            tag_filter=state.tag_filter,
            sort_field=state.sort_field.value,
            sort_direction=state.sort_direction,
        )


# ── Response envelopes ────────────────────────────────────────────────────────

class ProjectListResponse(BaseModel):
    """Filtered and sorted projects."""
    total: int = Field(..., description="Number of matching projects")
    filters: FilterStateOut
    items: list[ProjectOut]


class ViewOut(BaseModel):
    """Everything one render cycle needs."""
    loading_state: str = Field(..., examples=["ready"])
    error: str | None = None
    filters: FilterStateOut
    facets: FacetsOut
    stats: StatsOut
    projects: list[ProjectOut]

    @classmethod
    def from_view(cls, view: ProjectView) -> "ViewOut":
        return cls(
            loading_state=view.loading_state,
            error=view.error,
            filters=FilterStateOut.from_state(view.state),
            facets=FacetsOut.from_facets(view.facets),
            stats=StatsOut.from_stats(view.stats),
            projects=[ProjectOut.from_project(p) for p in view.projects],
        )


class ErrorResponse(BaseModel):
    error: str
    detail: str | None = None
    status_code: int
