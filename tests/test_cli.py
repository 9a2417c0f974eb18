"""Tests for the command line interface."""

import json
import tempfile
import unittest
from pathlib import Path

from typer.testing import CliRunner

from geoanalyzer import __version__
from geoanalyzer.cli import app
from geoanalyzer.core.config import get_sites_dir


URLS = """\
# discovered via sitemap
https://countryfusion.net/
https://countryfusion.net/certification
https://countryfusion.net/certification/

https://countryfusion.net/product/black-tank-top
https://countryfusion.net/some-new-page
https://instagram.com/countryfusion
"""


class TestCLI(unittest.TestCase):
    """Test CLI commands with Typer's CliRunner."""

    def setUp(self):
        """Create a URL list file."""
        self.runner = CliRunner()
        self.temp_dir = tempfile.TemporaryDirectory()
        self.urls_file = Path(self.temp_dir.name) / "urls.txt"
        self.urls_file.write_text(URLS)

    def tearDown(self):
        """Clean up temporary directory."""
        self.temp_dir.cleanup()

    def test_version(self):
        """Test the version command."""
        result = self.runner.invoke(app, ["version"])

        self.assertEqual(result.exit_code, 0)
        self.assertIn(__version__, result.output)

    def test_classify(self):
        """Test classifying a single URL selects the site from its host."""
        result = self.runner.invoke(app, ["classify", "https://countryfusion.net/certification"])

        self.assertEqual(result.exit_code, 0)
        self.assertIn("certification", result.output)
        self.assertIn("Priority: 2", result.output)

    def test_classify_invalid_url_needs_site(self):
        """Test that an unparseable URL without --site is an error."""
        result = self.runner.invoke(app, ["classify", "not a url"])

        self.assertEqual(result.exit_code, 1)
        self.assertIn("Cannot determine site", result.output)

    def test_classify_invalid_url_with_site(self):
        """Test that an unparseable URL is reported as invalid when a site is given."""
        result = self.runner.invoke(app, ["classify", "not a url", "--site", "countryfusion.net"])

        self.assertEqual(result.exit_code, 0)
        self.assertIn("Invalid URL", result.output)

    def test_filter_urls_format(self):
        """Test that the urls format prints the crawl set in priority order."""
        result = self.runner.invoke(
            app, ["filter", str(self.urls_file), "--format", "urls", "--limit", "2"]
        )

        self.assertEqual(result.exit_code, 0)
        self.assertEqual(
            result.output.splitlines(),
            ["https://countryfusion.net", "https://countryfusion.net/certification"],
        )

    def test_filter_json_format(self):
        """Test that the json format prints a parseable document."""
        result = self.runner.invoke(
            app, ["filter", str(self.urls_file), "--format", "json", "--limit", "0"]
        )

        self.assertEqual(result.exit_code, 0)
        data = json.loads(result.output)
        self.assertEqual(data["site"]["domain"], "countryfusion.net")
        self.assertEqual(data["statistics"]["total_urls"], 5)
        self.assertEqual(data["statistics"]["crawlable_urls"], 3)
        self.assertEqual(len(data["crawl_urls"]), 3)

    def test_filter_table_with_output_file(self):
        """Test table output and JSON export together."""
        output = Path(self.temp_dir.name) / "out" / "results.json"
        result = self.runner.invoke(
            app, ["filter", str(self.urls_file), "--all", "--output", str(output)]
        )

        self.assertEqual(result.exit_code, 0)
        self.assertIn("crawlable", result.output)
        self.assertTrue(output.exists())

    def test_filter_with_explicit_site(self):
        """Test that --site selects default rules for an unknown domain."""
        urls_file = Path(self.temp_dir.name) / "other.txt"
        urls_file.write_text("https://acme.test/about\nhttps://acme.test/terms\n")

        result = self.runner.invoke(
            app, ["filter", str(urls_file), "--site", "acme.test", "--format", "urls"]
        )

        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.output.splitlines(), ["https://acme.test/about"])

    def test_filter_without_parseable_urls(self):
        """Test that a file with no parseable URLs and no --site fails."""
        urls_file = Path(self.temp_dir.name) / "junk.txt"
        urls_file.write_text("junk\nmore junk\n")

        result = self.runner.invoke(app, ["filter", str(urls_file)])

        self.assertEqual(result.exit_code, 1)

    def test_filter_invalid_utf8(self):
        """Test that an undecodable URL file is reported without a traceback."""
        urls_file = Path(self.temp_dir.name) / "bad.txt"
        urls_file.write_bytes(b"\xff\xfe https://example.com/\n")

        result = self.runner.invoke(app, ["filter", str(urls_file), "--site", "example.com"])

        self.assertEqual(result.exit_code, 1)
        self.assertIn("Error reading URLs", result.output)
        self.assertNotIsInstance(result.exception, UnicodeDecodeError)

    def test_filter_with_config_dir(self):
        """Test that YAML site configurations are picked up."""
        urls_file = Path(self.temp_dir.name) / "docs.txt"
        urls_file.write_text(
            "https://docs.example.org/guides/intro\nhttps://docs.example.org/privacy\n"
        )

        result = self.runner.invoke(
            app,
            ["filter", str(urls_file), "--config-dir", str(get_sites_dir()), "--format", "urls"],
        )

        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.output.splitlines(), ["https://docs.example.org/guides/intro"])

    def test_sites(self):
        """Test listing site configurations."""
        result = self.runner.invoke(app, ["sites"])

        self.assertEqual(result.exit_code, 0)
        self.assertIn("countryfusion.net", result.output)


if __name__ == "__main__":
    unittest.main()
