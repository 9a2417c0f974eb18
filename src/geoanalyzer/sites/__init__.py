"""Site configuration registry.

Per-site rule tables are static configuration selected by domain. A domain
without its own table gets the generic default rules bound to that domain.
"""

import logging
from pathlib import Path
from typing import Optional

from geoanalyzer.core.config import load_site_configs
from geoanalyzer.core.exceptions import SiteNotFoundError
from geoanalyzer.core.models import SiteConfig
from geoanalyzer.classifier.normalizer import URLNormalizer
from geoanalyzer.sites.default import DEFAULT_SITE_CONFIG
from geoanalyzer.sites.countryfusion import COUNTRYFUSION_CONFIG, COUNTRYFUSION_PRIORITY_URLS


logger = logging.getLogger(__name__)


def _registry_key(domain: str) -> str:
    domain = domain.strip().lower()
    if domain.startswith("www."):
        domain = domain[len("www."):]
    return domain


class SiteRegistry:
    """Registry of site configurations keyed by domain."""

    def __init__(
        self,
        configs: Optional[list[SiteConfig]] = None,
        *,
        default: SiteConfig = DEFAULT_SITE_CONFIG,
    ):
        """Initialize SiteRegistry.

        Args:
            configs: Site configurations to register
            default: Rule table used for domains with no registered config
        """
        self.default = default
        self._configs: dict[str, SiteConfig] = {}
        self._normalizer = URLNormalizer()

        for config in configs or []:
            self.register(config)

    def register(self, config: SiteConfig) -> None:
        """Register a site configuration, replacing any for the same domain."""
        key = _registry_key(config.domain)
        if key in self._configs:
            logger.warning(f"Replacing site config for {key}")
        self._configs[key] = config

    def get(self, domain: str) -> SiteConfig:
        """Get the configuration for a domain.

        Args:
            domain: Domain, with or without a www. prefix

        Returns:
            Registered config, or the default rules bound to domain
        """
        config = self._configs.get(_registry_key(domain))
        if config is not None:
            return config
        logger.debug(f"No site config for {domain}, using default rules")
        return self.default.for_domain(_registry_key(domain))

    def require(self, domain: str) -> SiteConfig:
        """Get the registered configuration for a domain.

        Raises:
            SiteNotFoundError: If no configuration is registered for domain
        """
        try:
            return self._configs[_registry_key(domain)]
        except KeyError:
            available = ", ".join(self.domains()) or "none"
            raise SiteNotFoundError(
                f"No site config for '{domain}'. Registered sites: {available}"
            ) from None

    def for_url(self, url: str) -> Optional[SiteConfig]:
        """Select a configuration from a URL's hostname, or None if invalid."""
        hostname = self._normalizer.get_hostname(url)
        if hostname is None:
            return None
        return self.get(hostname)

    def domains(self) -> list[str]:
        return sorted(self._configs)

    def configs(self) -> list[SiteConfig]:
        return [self._configs[domain] for domain in self.domains()]

    def load_directory(self, sites_dir: Path | str) -> int:
        """Register every YAML site configuration in a directory.

        Returns:
            Number of configurations loaded
        """
        configs = load_site_configs(sites_dir)
        for config in configs:
            self.register(config)
        return len(configs)

    def __contains__(self, domain: str) -> bool:
        return _registry_key(domain) in self._configs

    def __len__(self) -> int:
        return len(self._configs)


BUILTIN_SITES = (COUNTRYFUSION_CONFIG,)


def default_registry() -> SiteRegistry:
    """Create a registry pre-loaded with the built-in site configurations."""
    return SiteRegistry(list(BUILTIN_SITES))


__all__ = [
    "SiteRegistry",
    "default_registry",
    "BUILTIN_SITES",
    "DEFAULT_SITE_CONFIG",
    "COUNTRYFUSION_CONFIG",
    "COUNTRYFUSION_PRIORITY_URLS",
]
