"""Configuration loader for GeoAnalyzer site rule tables.

This module provides functions to load and validate YAML site configurations,
so new customer sites can be added without writing Python.
"""

import logging
import re
from pathlib import Path
from typing import Any

import yaml

from geoanalyzer.core.exceptions import ConfigError, InvalidPatternError
from geoanalyzer.core.constants import REGEX_FLAGS
from geoanalyzer.core.models import (
    SiteConfig,
    UrlPattern,
    coerce_category,
    validate_priority,
)
from geoanalyzer.classifier.matcher import get_predicate


logger = logging.getLogger(__name__)

MATCH_KEYS = ("contains", "regex", "predicate")


# ============================================================================
# Configuration Paths
# ============================================================================

def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to configs directory (./configs relative to project root)
    """
    # Get project root (4 levels up: core/ -> geoanalyzer/ -> src/ -> root)
    project_root = Path(__file__).parent.parent.parent.parent
    return project_root / "configs"


def get_sites_dir() -> Path:
    return get_config_dir() / "sites"


# ============================================================================
# Pattern Parsing
# ============================================================================

def _compile_regex(expression: Any, flags: Any, index: int) -> re.Pattern:
    if not isinstance(expression, str):
        raise InvalidPatternError(f"Pattern #{index}: 'regex' must be a string")

    compiled_flags = 0
    for flag in str(flags or ""):
        if flag not in REGEX_FLAGS:
            valid = ", ".join(REGEX_FLAGS)
            raise InvalidPatternError(
                f"Pattern #{index}: unknown regex flag '{flag}'. Valid flags: {valid}"
            )
        compiled_flags |= getattr(re, REGEX_FLAGS[flag])

    try:
        return re.compile(expression, compiled_flags)
    except re.error as e:
        raise InvalidPatternError(f"Pattern #{index}: invalid regex {expression!r}: {e}") from e


def parse_pattern(data: Any, index: int = 0) -> UrlPattern:
    """Build a UrlPattern from its YAML mapping.

    Args:
        data: Mapping with exactly one of 'contains', 'regex' or 'predicate',
            plus 'priority', 'category' and optional 'include' and 'reason'
        index: Position in the pattern list, for error messages

    Returns:
        Validated UrlPattern

    Raises:
        InvalidPatternError: If the mapping is malformed
    """
    if not isinstance(data, dict):
        raise InvalidPatternError(f"Pattern #{index} must be a mapping")

    present = [key for key in MATCH_KEYS if key in data]
    if len(present) != 1:
        raise InvalidPatternError(
            f"Pattern #{index} must define exactly one of: {', '.join(MATCH_KEYS)}"
        )

    for field in ("priority", "category"):
        if field not in data:
            raise InvalidPatternError(f"Pattern #{index}: missing required field '{field}'")

    kind = present[0]
    if kind == "contains":
        if not isinstance(data["contains"], str) or not data["contains"]:
            raise InvalidPatternError(f"Pattern #{index}: 'contains' must be a non-empty string")
        match = data["contains"]
    elif kind == "regex":
        match = _compile_regex(data["regex"], data.get("flags"), index)
    else:
        match = get_predicate(str(data["predicate"]))

    include = data.get("include", True)
    if not isinstance(include, bool):
        raise InvalidPatternError(f"Pattern #{index}: 'include' must be a boolean")

    reason = data.get("reason")

    return UrlPattern(
        match=match,
        priority=validate_priority(data["priority"]),
        category=coerce_category(data["category"]),
        include=include,
        reason=str(reason) if reason is not None else None,
    )


# ============================================================================
# Site Configuration Loader
# ============================================================================

def load_site_config(site_file: Path | str) -> SiteConfig:
    """Load a site configuration from a YAML file.

    Args:
        site_file: Path to site YAML file

    Returns:
        SiteConfig with its ordered rule table

    Raises:
        ConfigError: If file not found or YAML parsing fails
        InvalidPatternError: If the site or a pattern is invalid
    """
    site_path = Path(site_file)

    if not site_path.exists():
        raise ConfigError(f"Site file not found: {site_path}")

    try:
        with site_path.open("r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse site YAML: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read site file: {e}") from e

    if not data:
        raise ConfigError(f"Site configuration is empty: {site_path}")

    if not isinstance(data, dict) or "site" not in data:
        raise InvalidPatternError(f"Missing 'site' section in {site_path}")

    site = data["site"]
    if not isinstance(site, dict) or "domain" not in site:
        raise InvalidPatternError(f"Missing 'domain' in site section of {site_path}")

    domain = str(site["domain"])
    base_url = str(site.get("base_url", f"https://{domain}"))

    patterns_data = data.get("patterns", [])
    if not isinstance(patterns_data, list):
        raise InvalidPatternError("'patterns' must be a list")

    priority_urls = data.get("priority_urls", [])
    if not isinstance(priority_urls, list):
        raise InvalidPatternError("'priority_urls' must be a list")

    patterns = [
        parse_pattern(pattern, index)
        for index, pattern in enumerate(patterns_data, start=1)
    ]

    config = SiteConfig(
        domain=domain,
        base_url=base_url,
        patterns=tuple(patterns),
        priority_urls=tuple(str(url) for url in priority_urls),
        name=str(site.get("name", site_path.stem)),
    )

    logger.info(f"Loaded site config '{config.name}' for {domain} ({len(patterns)} patterns)")
    return config


def load_site_configs(sites_dir: Path | str | None = None) -> list[SiteConfig]:
    """Load every *.yaml / *.yml site configuration in a directory.

    Args:
        sites_dir: Directory to scan. If None, uses configs/sites

    Returns:
        Site configurations sorted by file name

    Raises:
        ConfigError: If the directory does not exist or a file is invalid
    """
    directory = get_sites_dir() if sites_dir is None else Path(sites_dir)

    if not directory.is_dir():
        raise ConfigError(f"Sites directory not found: {directory}")

    files = sorted(
        path for path in directory.iterdir()
        if path.suffix in (".yaml", ".yml") and path.is_file()
    )

    return [load_site_config(path) for path in files]
