"""Display formatting utilities for the graveyard cards and stats bar.

Provides reusable functions for:
- Compact number formatting (999, 1K, 2.5M)
- Whole-dollar currency formatting
- Source URL → publication label mapping
- Failure tag → style class mapping
"""

import math
import re
from types import MappingProxyType
from typing import Optional, Union
from urllib.parse import urlsplit

Number = Union[int, float]

# Exact hostname (www. already stripped) → label.
SOURCE_LABELS = MappingProxyType({
    "kickstarter.com": "Kickstarter",
    "indiegogo.com": "Indiegogo",
    "wikipedia.org": "Wikipedia",
    "en.wikipedia.org": "Wikipedia",
    "techcrunch.com": "TechCrunch",
    "theverge.com": "The Verge",
    "engadget.com": "Engadget",
    "gizmodo.com": "Gizmodo",
    "wired.com": "Wired",
    "medium.com": "Medium",
    "reddit.com": "Reddit",
    "youtube.com": "YouTube",
    "twitter.com": "Twitter",
    "failory.com": "Failory",
    "backerkit.com": "BackerKit",
    "kicktraq.com": "Kicktraq",
    "ftc.gov": "FTC",
    "hackaday.com": "Hackaday",
    "thespoon.tech": "The Spoon",
    "crowdfundinsider.com": "Crowdfund Insider",
    "androidpolice.com": "Android Police",
    "slashgear.com": "SlashGear",
    "geekwire.com": "GeekWire",
    "washingtonpost.com": "Washington Post",
    "fortune.com": "Fortune",
    "boardgamewire.com": "Board Game Wire",
    "bbb.org": "BBB",
    "eevblog.com": "EEVBlog",
    "kguttag.com": "KGOnTech",
    "gearjunkie.com": "GearJunkie",
    "stltoday.com": "St. Louis Today",
    "thedanzing.com": "The Danzing",
})

FALLBACK_SOURCE_LABEL = "Source"

# Normalised tag key (lower-case letters only) → style classes.
TAG_STYLES = MappingProxyType({
    "fraudscam": "bg-red-50 text-red-600 border border-red-200",
    "manufacturingissues": "bg-orange-50 text-orange-600 border border-orange-200",
    "technicallyimpossible": "bg-purple-50 text-purple-600 border border-purple-200",
    "ranoutofmoney": "bg-yellow-50 text-yellow-600 border border-yellow-200",
    "companyshutdown": "bg-slate-100 text-slate-500 border border-slate-200",
    "neverdelivered": "bg-red-50 text-red-700 border border-red-200",
    "partialdelivery": "bg-amber-50 text-amber-600 border border-amber-200",
    "shippingproblems": "bg-blue-50 text-blue-600 border border-blue-200",
    "poorquality": "bg-fuchsia-50 text-fuchsia-600 border border-fuchsia-200",
    "overpromised": "bg-cyan-50 text-cyan-600 border border-cyan-200",
    "projectfailed": "bg-slate-100 text-slate-600 border border-slate-300",
})

DEFAULT_TAG_STYLE = "bg-gray-100 text-gray-600 border border-gray-200"

_NON_LETTERS = re.compile(r"[^a-z]")
_HOSTNAME = re.compile(r"[a-z0-9.-]+")


def _with_separators(value: Number) -> str:
    """Thousands separators, keeping up to 3 fractional digits for floats."""
    if isinstance(value, float) and not value.is_integer():
        return f"{value:,.3f}".rstrip("0").rstrip(".")
    return f"{int(value):,d}"


def format_number(value: Optional[Number]) -> str:
    """Format a count or amount compactly.

    Args:
        value: Non-negative number (None is treated as 0)

    Returns:
        "2.5M" at or above one million (one decimal, rounded),
        "1K" at or above one thousand (thousands truncated),
        otherwise the value with thousands separators

    Examples:
        format_number(999) -> "999"
        format_number(1500) -> "1K"
        format_number(2500000) -> "2.5M"
    """
    value = value or 0
    if value >= 1_000_000:
        return f"{value / 1_000_000:.1f}M"
    if value >= 1_000:
        return f"{math.floor(value / 1_000)}K"
    return _with_separators(value)


def format_currency(value: Optional[Number]) -> str:
    """Format a dollar amount as "$1,234,567" (no decimals, no suffix)."""
    return f"${(value or 0):,.0f}"


def source_name(url: str) -> str:
    """Map a source URL to a human-readable publication name.

    Examples:
        source_name("https://www.kickstarter.com/projects/x") -> "Kickstarter"
        source_name("https://blog.example.org/post") -> "Blog"
        source_name("not a url") -> "Source"
    """
    try:
        parts = urlsplit(url)
        hostname = parts.hostname
        parts.port  # raises ValueError when out of range or non-numeric
    except (TypeError, ValueError):
        return FALLBACK_SOURCE_LABEL
    if not parts.scheme or not parts.netloc or not hostname:
        return FALLBACK_SOURCE_LABEL
    if not _HOSTNAME.fullmatch(hostname):
        return FALLBACK_SOURCE_LABEL
    hostname = hostname.removeprefix("www.")
    label = SOURCE_LABELS.get(hostname)
    if label:
        return label
    first = hostname.split(".")[0]
    return first[:1].upper() + first[1:]


def tag_key(tag: str) -> str:
    """Normalise a tag to its lookup key: lower-case letters only."""
    return _NON_LETTERS.sub("", (tag or "").lower())


def tag_style(tag: str) -> str:
    """Return the style classes for a failure tag (default for unknown tags)."""
    return TAG_STYLES.get(tag_key(tag), DEFAULT_TAG_STYLE)


def category_leaf(category: str) -> str:
    """Last segment of a "/"-separated category path, for the card badge."""
    return (category or "").split("/")[-1]
