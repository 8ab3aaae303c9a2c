"""Shared utilities for the Kickstarter Graveyard."""

# Display formatting
from utils.formatting import (
    format_number,
    format_currency,
    source_name,
    tag_key,
    tag_style,
    category_leaf,
    SOURCE_LABELS,
    TAG_STYLES,
    DEFAULT_TAG_STYLE,
)

# Configuration
from utils.config import Config, AppConfig

# Memo cache
from utils.cache import LRUCache

# HTTP
from utils.http import fetch_json, is_url

__all__ = [
    # Formatting
    "format_number",
    "format_currency",
    "source_name",
    "tag_key",
    "tag_style",
    "category_leaf",
    "SOURCE_LABELS",
    "TAG_STYLES",
    "DEFAULT_TAG_STYLE",
    # Config
    "Config",
    "AppConfig",
    # Cache
    "LRUCache",
    # HTTP
    "fetch_json",
    "is_url",
]
