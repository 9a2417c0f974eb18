"""URL deduplication by normalized form.

This module removes URLs that differ only by fragment, trailing slash,
scheme/host case or default port. It works on raw URL lists and does not
need a site configuration.
"""

from typing import Iterable, Optional

from geoanalyzer.classifier.normalizer import URLNormalizer


class URLDeduper:
    """Deduplicate URLs based on normalized representation.

    The original URL strings are returned, in first-seen order. Unparseable
    URLs are keyed by their raw text, so repeated garbage collapses too.
    """

    def __init__(self, *, normalizer: Optional[URLNormalizer] = None):
        """Initialize URLDeduper.

        Args:
            normalizer: URLNormalizer instance (creates default if None)
        """
        self.normalizer = normalizer or URLNormalizer()

    def deduplicate(self, urls: Iterable[str]) -> list[str]:
        """Deduplicate a list of URLs.

        Args:
            urls: URLs to deduplicate

        Returns:
            Deduplicated list of URLs (preserves first occurrence order)
        """
        seen_keys = set()
        deduplicated = []

        for url in urls:
            key = self.normalizer.normalize(url)
            if key not in seen_keys:
                seen_keys.add(key)
                deduplicated.append(url)

        return deduplicated

    def get_duplicates(self, urls: Iterable[str]) -> dict[str, list[str]]:
        """Find duplicate URL groups.

        Args:
            urls: URLs to analyze

        Returns:
            Dictionary mapping normalized URLs to the raw URLs sharing them,
            restricted to groups with more than one member
        """
        groups: dict[str, list[str]] = {}

        for url in urls:
            groups.setdefault(self.normalizer.normalize(url), []).append(url)

        return {
            key: members
            for key, members in groups.items()
            if len(members) > 1
        }

    def count_unique(self, urls: Iterable[str]) -> int:
        """Count unique URLs after deduplication."""
        return len(self.deduplicate(urls))


_default_deduper = URLDeduper()


def dedupe_urls(urls: Iterable[str]) -> list[str]:
    """Deduplicate URLs by normalized form, keeping original strings."""
    return _default_deduper.deduplicate(urls)
