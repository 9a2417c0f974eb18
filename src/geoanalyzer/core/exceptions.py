class GeoAnalyzerError(Exception):
    pass

class ConfigError(GeoAnalyzerError):
    pass

class InvalidPatternError(ConfigError):
    """A URL pattern or site configuration failed validation."""
    pass

class SiteNotFoundError(ConfigError):
    """No site configuration is registered for a domain."""
    pass

class ExportError(GeoAnalyzerError):
    """Failed to write classification results."""
    pass
