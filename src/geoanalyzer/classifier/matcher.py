"""Pattern matching for URL rules.

A rule's ``match`` is one of three shapes:
- str: case-insensitive substring of the pathname (not segment-bounded,
  so ``"product"`` matches ``/products/foo`` and ``/my-product-list``)
- compiled regex: searched against the raw pathname with its own flags
- callable: predicate invoked with the parsed URL

Any other shape never matches.
"""

import re
from typing import Callable
from urllib.parse import SplitResult

from geoanalyzer.core.exceptions import InvalidPatternError
from geoanalyzer.core.models import UrlPattern


def matches_pattern(url: SplitResult, pattern: UrlPattern) -> bool:
    """Check if a parsed URL matches a pattern.

    Args:
        url: Parsed URL whose ``path`` is the resolved pathname
        pattern: Rule to evaluate

    Returns:
        True if the rule matches, False otherwise
    """
    match = pattern.match

    if isinstance(match, str):
        return match.lower() in url.path.lower()
    if isinstance(match, re.Pattern):
        return match.search(url.path) is not None
    if callable(match):
        return bool(match(url))

    return False


# ============================================================================
# Named Predicates
# ============================================================================

def has_duplicate_trailing_slash(url: SplitResult) -> bool:
    """Pathname ends with a slash and is not the root."""
    return url.path.endswith("/") and len(url.path) > 1


def is_homepage(url: SplitResult) -> bool:
    return url.path in ("", "/")


PREDICATES: dict[str, Callable[[SplitResult], bool]] = {
    "trailing_slash": has_duplicate_trailing_slash,
    "homepage": is_homepage,
}


def get_predicate(name: str) -> Callable[[SplitResult], bool]:
    """Look up a named predicate for use in YAML site configurations.

    Raises:
        InvalidPatternError: If no predicate is registered under name
    """
    try:
        return PREDICATES[name]
    except KeyError:
        available = ", ".join(sorted(PREDICATES))
        raise InvalidPatternError(
            f"Unknown predicate '{name}'. Available predicates: {available}"
        ) from None
