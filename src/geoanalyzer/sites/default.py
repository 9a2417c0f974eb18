"""Generic site configuration used when no site-specific table exists."""

import re

from geoanalyzer.core.constants import UrlCategory
from geoanalyzer.core.models import SiteConfig, UrlPattern


CORE = UrlCategory.CORE
TRUST = UrlCategory.TRUST
PRODUCT = UrlCategory.PRODUCT
INFO = UrlCategory.INFO
CATEGORY = UrlCategory.CATEGORY
BLOG = UrlCategory.BLOG
LEGAL = UrlCategory.LEGAL


DEFAULT_PATTERNS = (
    # Homepage
    UrlPattern(re.compile(r"^/?$"), 1, CORE),

    # Core entity pages
    UrlPattern("about", 2, TRUST),
    UrlPattern("contact", 2, TRUST),

    # Service/Product pages
    UrlPattern("service", 3, PRODUCT),
    UrlPattern("product", 3, PRODUCT),
    UrlPattern("pricing", 3, PRODUCT),

    # Trust and FAQ
    UrlPattern("faq", 4, INFO),
    UrlPattern("testimonial", 4, TRUST),
    UrlPattern("review", 4, TRUST),

    # Blog ("/blog" also catches posts, so "/blog/" only applies to
    # tables that reorder these two)
    UrlPattern("/blog", 5, CATEGORY),
    UrlPattern("/blog/", 6, BLOG),

    # Skip low-value
    UrlPattern("privacy", 10, LEGAL, include=False, reason="Legal page"),
    UrlPattern("terms", 10, LEGAL, include=False, reason="Legal page"),
    UrlPattern("cookie", 10, LEGAL, include=False, reason="Legal page"),
)


DEFAULT_SITE_CONFIG = SiteConfig(
    domain="example.com",
    base_url="https://example.com",
    patterns=DEFAULT_PATTERNS,
    name="default",
)
