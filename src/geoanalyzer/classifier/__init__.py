"""URL normalization, classification, deduplication, and prioritization.

This package decides which discovered URLs of a site get crawled:
- URLNormalizer: Canonical URL form used as a deduplication key
- UrlClassifier: First-match-wins classification against a site's rule table
- UrlPrioritizer: Deduplicate, sort, and cap URLs for a crawl budget
- URLDeduper: Deduplicate raw URL lists without a site configuration
"""

from geoanalyzer.classifier.normalizer import URLNormalizer, normalize_url, extract_pathname
from geoanalyzer.classifier.matcher import matches_pattern, get_predicate
from geoanalyzer.classifier.classifier import UrlClassifier, classify_url
from geoanalyzer.classifier.deduper import URLDeduper, dedupe_urls
from geoanalyzer.classifier.prioritizer import (
    UrlPrioritizer,
    filter_urls,
    get_crawlable_urls,
    summarize_results,
    discover_site,
)

__all__ = [
    "URLNormalizer",
    "UrlClassifier",
    "UrlPrioritizer",
    "URLDeduper",
    "normalize_url",
    "extract_pathname",
    "matches_pattern",
    "get_predicate",
    "classify_url",
    "dedupe_urls",
    "filter_urls",
    "get_crawlable_urls",
    "summarize_results",
    "discover_site",
]
