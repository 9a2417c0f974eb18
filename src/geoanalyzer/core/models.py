"""Core data models for GeoAnalyzer URL discovery.

This module defines the data structures shared by the classifier, the
prioritizer and the site configuration registry: URL rules, per-site rule
tables, per-URL classification results and per-site discovery summaries.
"""

import re
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Optional, Union
from urllib.parse import SplitResult

from geoanalyzer.core.constants import (
    UrlCategory,
    MIN_PRIORITY,
    MAX_PRIORITY,
    HIGH_PRIORITY_MAX,
    MEDIUM_PRIORITY_MAX,
)
from geoanalyzer.core.exceptions import InvalidPatternError


# A rule's match is a case-insensitive path substring, a compiled regex
# tested against the pathname, or a predicate over the parsed URL.
PatternMatch = Union[str, re.Pattern, Callable[[SplitResult], bool]]


# ============================================================================
# Priority Helpers
# ============================================================================

def validate_priority(value: Any) -> int:
    """Validate a priority level.

    Args:
        value: Candidate priority

    Returns:
        The priority as an int

    Raises:
        InvalidPatternError: If value is not an integer in [1, 10]
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidPatternError(f"Priority must be an integer, got {value!r}")
    if not MIN_PRIORITY <= value <= MAX_PRIORITY:
        raise InvalidPatternError(
            f"Priority {value} out of range [{MIN_PRIORITY}, {MAX_PRIORITY}]"
        )
    return value


def coerce_category(value: Any) -> UrlCategory:
    """Convert a category value (enum member or its string value) to UrlCategory.

    Raises:
        InvalidPatternError: If value is not a known category
    """
    if isinstance(value, UrlCategory):
        return value
    try:
        return UrlCategory(value)
    except ValueError:
        valid = ", ".join(c.value for c in UrlCategory)
        raise InvalidPatternError(
            f"Unknown category {value!r}. Must be one of: {valid}"
        ) from None


def get_priority_score(priority: int) -> int:
    """Get priority as a number (lower = higher priority)."""
    return priority


def is_high_priority(priority: int) -> bool:
    return priority <= HIGH_PRIORITY_MAX


def is_medium_priority(priority: int) -> bool:
    return HIGH_PRIORITY_MAX < priority <= MEDIUM_PRIORITY_MAX


def is_low_priority(priority: int) -> bool:
    return priority > MEDIUM_PRIORITY_MAX


# ============================================================================
# Rule Models
# ============================================================================

@dataclass(frozen=True)
class UrlPattern:
    """Ordered rule in a site's URL table.

    Rules are evaluated in list order and the first matching rule decides
    priority, category and crawl eligibility.
    """
    match: PatternMatch
    priority: int
    category: UrlCategory
    include: bool = True
    reason: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate priority and coerce category values."""
        validate_priority(self.priority)
        object.__setattr__(self, "category", coerce_category(self.category))


@dataclass(frozen=True)
class SiteConfig:
    """Immutable URL rule table for one customer site."""
    domain: str
    base_url: str
    patterns: tuple[UrlPattern, ...] = ()
    priority_urls: tuple[str, ...] = ()     # Curated URLs for manual verification
    name: str = ""

    def __post_init__(self) -> None:
        """Freeze sequences so the config cannot be mutated after construction."""
        if not self.domain:
            raise InvalidPatternError("Site configuration requires a domain")
        object.__setattr__(self, "patterns", tuple(self.patterns))
        object.__setattr__(self, "priority_urls", tuple(self.priority_urls))
        if not self.name:
            object.__setattr__(self, "name", self.domain)

    def matches_domain(self, hostname: Optional[str]) -> bool:
        """Check whether a hostname belongs to this site.

        Only the bare domain and its ``www.`` variant are in-domain; other
        subdomains are treated as external.
        """
        return hostname == self.domain or hostname == f"www.{self.domain}"

    def for_domain(self, domain: str) -> "SiteConfig":
        """Return a copy of this rule table bound to another domain."""
        return replace(
            self,
            domain=domain,
            base_url=f"https://{domain}",
            priority_urls=(),
            name=domain,
        )


# ============================================================================
# Result Models
# ============================================================================

@dataclass(frozen=True)
class UrlFilterResult:
    """Classification outcome for one URL."""
    url: str
    priority: int
    category: UrlCategory
    should_crawl: bool
    reason: Optional[str] = None

    @property
    def is_high_priority(self) -> bool:
        return is_high_priority(self.priority)

    @property
    def is_medium_priority(self) -> bool:
        return is_medium_priority(self.priority)

    @property
    def is_low_priority(self) -> bool:
        return is_low_priority(self.priority)

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "priority": self.priority,
            "category": self.category.value,
            "should_crawl": self.should_crawl,
            "reason": self.reason,
        }


@dataclass
class SiteDiscoveryResult:
    """Summary of a filtered URL set for one site."""
    total_urls: int
    crawlable_urls: int
    skipped_urls: int
    by_category: dict[UrlCategory, int] = field(default_factory=dict)
    prioritized_urls: list[UrlFilterResult] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "total_urls": self.total_urls,
            "crawlable_urls": self.crawlable_urls,
            "skipped_urls": self.skipped_urls,
            "by_category": {
                category.value: count
                for category, count in self.by_category.items()
            },
            "prioritized_urls": [r.to_dict() for r in self.prioritized_urls],
        }
