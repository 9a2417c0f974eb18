"""URL classification against a site's rule table.

This module decides, per URL, whether it should be crawled, at what priority
and under which category. Invalid and off-domain URLs are ordinary excluded
results rather than errors, since discovered URL lists routinely contain
both.
"""

from typing import Iterable, Optional

from geoanalyzer.core.constants import (
    UrlCategory,
    DEFAULT_PRIORITY,
    EXCLUDED_PRIORITY,
    INVALID_URL_REASON,
    EXTERNAL_LINK_REASON,
)
from geoanalyzer.core.models import SiteConfig, UrlFilterResult
from geoanalyzer.classifier.matcher import matches_pattern
from geoanalyzer.classifier.normalizer import URLNormalizer


class UrlClassifier:
    """Classify URLs using a site's ordered rule table.

    Classification steps:
    1. Unparseable URLs are excluded as "Invalid URL"
    2. Hosts other than the site domain (or its www. variant) are excluded
       as "External link"
    3. The first matching rule decides priority, category and inclusion
    4. URLs matching no rule are included at priority 7 as "other"

    The classifier holds no site state; the SiteConfig is passed per call.
    """

    def __init__(self, *, normalizer: Optional[URLNormalizer] = None):
        """Initialize UrlClassifier.

        Args:
            normalizer: URLNormalizer instance (creates default if None)
        """
        self.normalizer = normalizer or URLNormalizer()

    def classify(self, raw_url: str, config: SiteConfig) -> UrlFilterResult:
        """Classify a single URL.

        Args:
            raw_url: URL to classify
            config: Site rule table

        Returns:
            UrlFilterResult; url is normalized unless the URL was rejected
        """
        parsed = self.normalizer.parse(raw_url)
        if parsed is None:
            return UrlFilterResult(
                url=raw_url,
                priority=EXCLUDED_PRIORITY,
                category=UrlCategory.OTHER,
                should_crawl=False,
                reason=INVALID_URL_REASON,
            )

        if not config.matches_domain(parsed.hostname):
            return UrlFilterResult(
                url=raw_url,
                priority=EXCLUDED_PRIORITY,
                category=UrlCategory.OTHER,
                should_crawl=False,
                reason=EXTERNAL_LINK_REASON,
            )

        # Rules see the resolved pathname
        target = parsed._replace(path=self.normalizer.pathname(parsed))
        normalized = self.normalizer.normalize(raw_url)

        for pattern in config.patterns:
            if matches_pattern(target, pattern):
                return UrlFilterResult(
                    url=normalized,
                    priority=pattern.priority,
                    category=pattern.category,
                    should_crawl=pattern.include,
                    reason=pattern.reason,
                )

        return UrlFilterResult(
            url=normalized,
            priority=DEFAULT_PRIORITY,
            category=UrlCategory.OTHER,
            should_crawl=True,
        )

    def classify_batch(
        self,
        urls: Iterable[str],
        config: SiteConfig,
    ) -> list[UrlFilterResult]:
        """Classify a batch of URLs without deduplication or sorting.

        Args:
            urls: URLs to classify
            config: Site rule table

        Returns:
            List of UrlFilterResult objects in input order
        """
        return [self.classify(url, config) for url in urls]


_default_classifier = UrlClassifier()


def classify_url(raw_url: str, config: SiteConfig) -> UrlFilterResult:
    """Classify a single URL based on site config."""
    return _default_classifier.classify(raw_url, config)
