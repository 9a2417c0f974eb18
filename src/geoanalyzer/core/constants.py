"""Constants used throughout GeoAnalyzer URL discovery.

This module contains enums, priority bounds, default values, and static
configurations to ensure consistent URL classification across the application.
"""

from enum import Enum


class UrlCategory(Enum):
    """Semantic page type assigned to a classified URL."""
    CORE = "core"                   # Homepage and core landing pages
    BLOG = "blog"                   # Blog posts and articles
    PRODUCT = "product"             # Product/Service pages
    CERTIFICATION = "certification" # Certification/Training pages
    CATEGORY = "category"           # Category/Index pages
    INFO = "info"                   # FAQ and informational pages
    TRUST = "trust"                 # About/Contact/Testimonial pages
    LEGAL = "legal"                 # Legal/Policy pages
    UTILITY = "utility"             # Low value or utility pages
    VARIANT = "variant"             # Product variants (colors, sizes, etc.)
    OTHER = "other"                 # Unknown/Other


# Priority bounds (lower = crawl sooner)
MIN_PRIORITY = 1
MAX_PRIORITY = 10

# Priority given to in-domain URLs that no rule matched
DEFAULT_PRIORITY = 7

# Priority given to invalid and external URLs
EXCLUDED_PRIORITY = MAX_PRIORITY

# Upper bounds of the high (1-3) and medium (4-6) priority bands
HIGH_PRIORITY_MAX = 3
MEDIUM_PRIORITY_MAX = 6

INVALID_URL_REASON = "Invalid URL"
EXTERNAL_LINK_REASON = "External link"


# Schemes that require a host, mapped to their default port
SPECIAL_SCHEMES = {
    "http": 80,
    "https": 443,
    "ftp": 21,
    "ws": 80,
    "wss": 443,
}


# Regex flags accepted in YAML site configurations
REGEX_FLAGS = {
    "i": "IGNORECASE",
    "m": "MULTILINE",
    "s": "DOTALL",
    "x": "VERBOSE",
}


DEFAULTS = {
    "crawl_limit": 8,
    "output_format": "table",
}
