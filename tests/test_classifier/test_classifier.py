"""Unit tests for URL classifier module.

Tests for UrlClassifier including invalid URL handling, domain gating,
first-match-wins rule evaluation, and the default low-priority inclusion.
"""

import re
import sys
import unittest
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent.parent.parent / "src"
sys.path.insert(0, str(src_path))

from geoanalyzer.classifier.classifier import UrlClassifier, classify_url
from geoanalyzer.classifier.matcher import has_duplicate_trailing_slash
from geoanalyzer.core.constants import UrlCategory
from geoanalyzer.core.models import SiteConfig, UrlFilterResult, UrlPattern


def make_config(*patterns, domain="example.com"):
    return SiteConfig(domain=domain, base_url=f"https://{domain}", patterns=patterns)


class TestUrlClassifier(unittest.TestCase):
    """Test suite for UrlClassifier class."""

    def setUp(self):
        """Set up test fixtures."""
        self.classifier = UrlClassifier()
        self.config = make_config(
            UrlPattern(re.compile(r"^/?$"), 1, UrlCategory.CORE),
            UrlPattern("blog", 5, UrlCategory.BLOG),
            UrlPattern("privacy", 10, UrlCategory.LEGAL, include=False, reason="Legal page"),
        )

    def test_classify_homepage(self):
        """Test that the homepage matches the first rule with a normalized URL."""
        result = self.classifier.classify("https://example.com/", self.config)

        self.assertIsInstance(result, UrlFilterResult)
        self.assertEqual(result, UrlFilterResult(
            url="https://example.com",
            priority=1,
            category=UrlCategory.CORE,
            should_crawl=True,
        ))
        self.assertIsNone(result.reason)

    def test_classify_homepage_without_slash_or_with_fragment(self):
        """Test that bare origins and fragments still match the homepage rule."""
        for raw in ["https://example.com", "https://example.com/#top"]:
            with self.subTest(raw=raw):
                result = self.classifier.classify(raw, self.config)
                self.assertEqual(result.category, UrlCategory.CORE)
                self.assertEqual(result.url, "https://example.com")

    def test_classify_www_variant_is_in_domain(self):
        """Test that the www. variant of the domain is accepted."""
        result = self.classifier.classify("https://www.example.com/blog/post", self.config)

        self.assertTrue(result.should_crawl)
        self.assertEqual(result.category, UrlCategory.BLOG)
        self.assertEqual(result.priority, 5)
        self.assertEqual(result.url, "https://www.example.com/blog/post")

    def test_classify_host_case_is_folded(self):
        """Test that uppercase hosts are compared after parsing lowercases them."""
        result = self.classifier.classify("https://EXAMPLE.com/blog", self.config)
        self.assertEqual(result.category, UrlCategory.BLOG)
        self.assertEqual(result.url, "https://example.com/blog")

    def test_classify_backslash_url_is_in_domain(self):
        """Test that a backslash after the host is read as a path separator."""
        result = self.classifier.classify("https://example.com\\blog\\post", self.config)

        self.assertTrue(result.should_crawl)
        self.assertEqual(result.category, UrlCategory.BLOG)
        self.assertEqual(result.url, "https://example.com/blog/post")

    def test_classify_encoded_url(self):
        """Test that results carry the percent-encoded URL and rules see the encoded path."""
        config = make_config(UrlPattern(re.compile(r"^/caf%C3%A9$"), 2, UrlCategory.INFO))
        result = self.classifier.classify("https://example.com/café", config)

        self.assertEqual(result.priority, 2)
        self.assertEqual(result.url, "https://example.com/caf%C3%A9")

    def test_classify_external_link(self):
        """Test that other hosts are excluded as external links."""
        result = self.classifier.classify("https://evil.com/x", self.config)

        self.assertEqual(result, UrlFilterResult(
            url="https://evil.com/x",
            priority=10,
            category=UrlCategory.OTHER,
            should_crawl=False,
            reason="External link",
        ))

    def test_classify_sibling_subdomain_is_external(self):
        """Test that subdomains other than www. are external."""
        for raw in ["https://shop.example.com/blog", "https://www.www.example.com/", "https://notexample.com/"]:
            with self.subTest(raw=raw):
                result = self.classifier.classify(raw, self.config)
                self.assertFalse(result.should_crawl)
                self.assertEqual(result.reason, "External link")

    def test_external_link_ignores_pattern_table(self):
        """Test that domain gating happens before any rule is consulted."""
        config = make_config(UrlPattern(lambda url: True, 1, UrlCategory.CORE))
        result = self.classifier.classify("https://other.org/", config)

        self.assertFalse(result.should_crawl)
        self.assertEqual(result.category, UrlCategory.OTHER)
        self.assertEqual(result.priority, 10)
        self.assertEqual(result.reason, "External link")

    def test_external_link_keeps_raw_url(self):
        """Test that external results are not normalized."""
        result = self.classifier.classify("https://Evil.com/x/#frag", self.config)
        self.assertEqual(result.url, "https://Evil.com/x/#frag")

    def test_classify_non_http_scheme_is_external(self):
        """Test that host-less schemes fall out at the domain check."""
        result = self.classifier.classify("mailto:team@example.com", self.config)
        self.assertEqual(result.reason, "External link")

    def test_classify_invalid_url(self):
        """Test that unparseable URLs are excluded with the raw string kept."""
        for raw in ["not a url", "", "/relative", "http://[::1"]:
            with self.subTest(raw=raw):
                result = self.classifier.classify(raw, self.config)
                self.assertEqual(result, UrlFilterResult(
                    url=raw,
                    priority=10,
                    category=UrlCategory.OTHER,
                    should_crawl=False,
                    reason="Invalid URL",
                ))

    def test_classify_exclusion_rule(self):
        """Test that include=False rules exclude with their reason."""
        result = self.classifier.classify("https://example.com/privacy-policy/", self.config)

        self.assertFalse(result.should_crawl)
        self.assertEqual(result.category, UrlCategory.LEGAL)
        self.assertEqual(result.priority, 10)
        self.assertEqual(result.reason, "Legal page")
        self.assertEqual(result.url, "https://example.com/privacy-policy")

    def test_classify_fallback_inclusion(self):
        """Test that unmatched in-domain URLs are included at priority 7."""
        result = self.classifier.classify("https://example.com/random-page", self.config)

        self.assertEqual(result, UrlFilterResult(
            url="https://example.com/random-page",
            priority=7,
            category=UrlCategory.OTHER,
            should_crawl=True,
        ))

    def test_empty_pattern_table_falls_through(self):
        """Test that a config with no patterns includes every in-domain URL."""
        config = make_config()
        result = self.classifier.classify("https://example.com/", config)

        self.assertTrue(result.should_crawl)
        self.assertEqual(result.priority, 7)
        self.assertEqual(result.category, UrlCategory.OTHER)

    def test_first_match_wins(self):
        """Test that the earliest matching rule decides the outcome."""
        config = make_config(
            UrlPattern("blog", 5, UrlCategory.BLOG),
            UrlPattern("blog/post", 2, UrlCategory.CORE),
        )
        result = self.classifier.classify("https://example.com/blog/post", config)

        self.assertEqual(result.priority, 5)
        self.assertEqual(result.category, UrlCategory.BLOG)

    def test_later_rules_not_consulted_after_match(self):
        """Test that evaluation short-circuits on the first match."""
        calls = []

        def tracking(url):
            calls.append(url.path)
            return True

        config = make_config(
            UrlPattern("about", 2, UrlCategory.TRUST),
            UrlPattern(tracking, 9, UrlCategory.UTILITY),
        )
        self.classifier.classify("https://example.com/about", config)
        self.assertEqual(calls, [])

        self.classifier.classify("https://example.com/team", config)
        self.assertEqual(calls, ["/team"])

    def test_predicates_see_resolved_pathname(self):
        """Test that dot segments are resolved before predicates run."""
        config = make_config(
            UrlPattern(has_duplicate_trailing_slash, 10, UrlCategory.UTILITY,
                       include=False, reason="Duplicate trailing slash"),
        )
        result = self.classifier.classify("https://example.com/a/./", config)

        self.assertFalse(result.should_crawl)
        self.assertEqual(result.reason, "Duplicate trailing slash")
        self.assertEqual(result.url, "https://example.com/a")

    def test_classify_batch_preserves_order_and_duplicates(self):
        """Test that classify_batch neither deduplicates nor sorts."""
        urls = [
            "https://example.com/random",
            "https://example.com/",
            "https://example.com/",
        ]
        results = self.classifier.classify_batch(urls, self.config)

        self.assertEqual([r.priority for r in results], [7, 1, 1])

    def test_module_function(self):
        """Test that classify_url uses a default classifier."""
        result = classify_url("https://example.com/", self.config)
        self.assertEqual(result.category, UrlCategory.CORE)


if __name__ == "__main__":
    unittest.main()
