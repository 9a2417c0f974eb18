"""JSON exporter for URL discovery results.

This module provides JSON export functionality for filtered URL sets,
with custom encoding for enum types.
"""

import json
import logging
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from geoanalyzer import __version__
from geoanalyzer.core.exceptions import ExportError
from geoanalyzer.core.models import SiteConfig, SiteDiscoveryResult
from geoanalyzer.classifier.prioritizer import get_crawlable_urls


logger = logging.getLogger(__name__)


class ResultJSONEncoder(json.JSONEncoder):
    """Custom JSON encoder for discovery results.

    Handles serialization of datetime, Enum, and Path objects.
    """

    def default(self, o):
        if isinstance(o, datetime):
            return o.isoformat()

        if isinstance(o, Enum):
            return o.value

        if isinstance(o, Path):
            return str(o)

        return super().default(o)


class JSONExporter:
    """Export discovery results to JSON format.

    The document carries the site, the statistics, every prioritized result
    and the crawl set derived under the optional crawl limit.
    """

    def build(
        self,
        discovery: SiteDiscoveryResult,
        config: SiteConfig,
        *,
        limit: Optional[int] = None,
    ) -> dict[str, Any]:
        """Build the JSON document for a discovery result."""
        return {
            "report_metadata": {
                "generated_at": datetime.now(timezone.utc),
                "generator": "GeoAnalyzer",
                "version": __version__,
            },
            "site": {
                "name": config.name,
                "domain": config.domain,
                "base_url": config.base_url,
            },
            "statistics": {
                "total_urls": discovery.total_urls,
                "crawlable_urls": discovery.crawlable_urls,
                "skipped_urls": discovery.skipped_urls,
                # Enum keys are not serializable by json
                "by_category": {
                    category.value: count
                    for category, count in discovery.by_category.items()
                },
            },
            "crawl_limit": limit,
            "crawl_urls": get_crawlable_urls(discovery.prioritized_urls, limit),
            "results": [r.to_dict() for r in discovery.prioritized_urls],
        }

    def dumps(
        self,
        discovery: SiteDiscoveryResult,
        config: SiteConfig,
        *,
        limit: Optional[int] = None,
    ) -> str:
        """Serialize a discovery result to a JSON string."""
        return json.dumps(
            self.build(discovery, config, limit=limit),
            cls=ResultJSONEncoder,
            indent=2,
            ensure_ascii=False,
        )

    def export(
        self,
        discovery: SiteDiscoveryResult,
        config: SiteConfig,
        output_path: Path,
        *,
        limit: Optional[int] = None,
    ) -> None:
        """Export a discovery result to a JSON file.

        Args:
            discovery: Discovery result to export
            config: Site the result was computed for
            output_path: Path where JSON file will be written
            limit: Crawl budget applied to the exported crawl list

        Raises:
            ExportError: If export fails
        """
        try:
            content = self.dumps(discovery, config, limit=limit)

            output_path.parent.mkdir(parents=True, exist_ok=True)

            with output_path.open("w", encoding="utf-8") as f:
                f.write(content)

        except (OSError, TypeError, ValueError) as e:
            raise ExportError(f"Failed to export JSON results: {e}") from e

        logger.info(f"Exported {discovery.total_urls} results to {output_path}")
