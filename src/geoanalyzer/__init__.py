"""GeoAnalyzer URL discovery and crawl prioritization."""

__version__ = "0.1.0"
