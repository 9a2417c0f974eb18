"""URL filtering and prioritization for crawl planning.

This module applies the classifier across a discovered URL list, drops
duplicates by normalized form, orders the survivors by priority and
category, and derives the crawl set under an optional crawl budget.
"""

import logging
from typing import Iterable, Optional, Sequence

from geoanalyzer.core.constants import UrlCategory
from geoanalyzer.core.models import SiteConfig, SiteDiscoveryResult, UrlFilterResult
from geoanalyzer.classifier.classifier import UrlClassifier


logger = logging.getLogger(__name__)


def _sort_key(result: UrlFilterResult) -> tuple[int, str]:
    return (result.priority, result.category.value)


class UrlPrioritizer:
    """Filter, deduplicate and order URLs for one site.

    Both crawlable and excluded results are returned; callers select the
    crawl set with get_crawlable_urls.
    """

    def __init__(self, *, classifier: Optional[UrlClassifier] = None):
        """Initialize UrlPrioritizer.

        Args:
            classifier: UrlClassifier instance (creates default if None)
        """
        self.classifier = classifier or UrlClassifier()

    def filter_urls(
        self,
        urls: Iterable[str],
        config: SiteConfig,
    ) -> list[UrlFilterResult]:
        """Filter and prioritize a list of URLs.

        A URL whose normalized form was already seen is dropped entirely;
        the first occurrence wins. Invalid and external URLs are kept as
        excluded results.

        Args:
            urls: Discovered URLs, in discovery order
            config: Site rule table

        Returns:
            Results sorted by priority ascending, then category value
        """
        normalizer = self.classifier.normalizer
        seen: set[str] = set()
        results: list[UrlFilterResult] = []
        duplicates = 0

        for url in urls:
            normalized = normalizer.normalize(url)
            if normalized in seen:
                duplicates += 1
                continue
            seen.add(normalized)
            results.append(self.classifier.classify(url, config))

        # sorted() is stable, so equal keys keep input order
        ordered = sorted(results, key=_sort_key)

        logger.debug(
            f"Filtered {len(ordered)} URLs for {config.domain} "
            f"({duplicates} duplicates dropped)"
        )
        return ordered

    def get_crawlable_urls(
        self,
        results: Sequence[UrlFilterResult],
        limit: Optional[int] = None,
    ) -> list[str]:
        """Get only crawlable URLs up to a limit.

        Args:
            results: Results already sorted by priority
            limit: Crawl budget; None or 0 means no cap

        Returns:
            URL strings of the first crawlable results

        Raises:
            ValueError: If limit is negative
        """
        if limit is not None and limit < 0:
            raise ValueError(f"Crawl limit must be non-negative, got {limit}")

        crawlable = [r.url for r in results if r.should_crawl]
        if limit:
            crawlable = crawlable[:limit]
        return crawlable

    def summarize(self, results: Sequence[UrlFilterResult]) -> SiteDiscoveryResult:
        """Build discovery statistics for a filtered result list.

        Args:
            results: Output of filter_urls

        Returns:
            SiteDiscoveryResult with per-category counts
        """
        by_category = {category: 0 for category in UrlCategory}
        crawlable = 0

        for result in results:
            by_category[result.category] += 1
            if result.should_crawl:
                crawlable += 1

        return SiteDiscoveryResult(
            total_urls=len(results),
            crawlable_urls=crawlable,
            skipped_urls=len(results) - crawlable,
            by_category=by_category,
            prioritized_urls=list(results),
        )

    def discover(self, urls: Iterable[str], config: SiteConfig) -> SiteDiscoveryResult:
        """Filter URLs for a site and summarize the outcome."""
        summary = self.summarize(self.filter_urls(urls, config))
        logger.info(
            f"Discovery for {config.domain}: {summary.crawlable_urls} crawlable, "
            f"{summary.skipped_urls} skipped"
        )
        return summary


_default_prioritizer = UrlPrioritizer()


def filter_urls(urls: Iterable[str], config: SiteConfig) -> list[UrlFilterResult]:
    """Filter and prioritize a list of URLs."""
    return _default_prioritizer.filter_urls(urls, config)


def get_crawlable_urls(
    results: Sequence[UrlFilterResult],
    limit: Optional[int] = None,
) -> list[str]:
    """Get only crawlable URLs up to a limit."""
    return _default_prioritizer.get_crawlable_urls(results, limit)


def summarize_results(results: Sequence[UrlFilterResult]) -> SiteDiscoveryResult:
    return _default_prioritizer.summarize(results)


def discover_site(urls: Iterable[str], config: SiteConfig) -> SiteDiscoveryResult:
    return _default_prioritizer.discover(urls, config)
