"""URL normalization for deduplication and classification.

This module provides the canonical URL form used as a deduplication key and
stored in successful classification results. It handles:
- Scheme and host lowercasing
- Default port removal
- Dot-segment resolution
- Percent-encoding of path and query
- Fragment removal
- Stripping a single trailing slash

Parse failures never raise: an unparseable URL is returned verbatim.
"""

from typing import Optional
from urllib.parse import SplitResult, quote, urlsplit, urlunsplit

from geoanalyzer.core.constants import SPECIAL_SCHEMES


# Characters left as-is when percent-encoding (browser URL parser sets).
# '%' is kept so existing escapes are not encoded twice.
PATH_SAFE_CHARS = "/%!$&'()*+,;=:@[]\\^|"
QUERY_SAFE_CHARS = "/%!$&()*+,;=:@[]\\^|?`{}"


class URLNormalizer:
    """Normalize URLs for consistent representation.

    Normalization steps:
    1. Parse as an absolute URL (scheme required, host required for http(s),
       ftp and ws(s))
    2. Convert scheme and host to lowercase
    3. Remove default ports (80 for HTTP, 443 for HTTPS)
    4. Resolve . and .. path segments, then percent-encode path and query
    5. Remove fragments
    6. Strip exactly one trailing slash from the serialized URL

    Query parameters keep their order and the root path is not preserved,
    so ``https://example.com/`` normalizes to ``https://example.com``.
    """

    def parse(self, url: str) -> Optional[SplitResult]:
        """Parse an absolute URL.

        Args:
            url: URL to parse

        Returns:
            Parsed URL, or None if url is not a valid absolute URL
        """
        if not isinstance(url, str):
            return None

        try:
            parsed = urlsplit(self._fix_backslashes(url.strip()))
            # Accessing port validates it
            parsed.port
        except ValueError:
            return None

        if not parsed.scheme:
            return None

        if parsed.scheme.lower() in SPECIAL_SCHEMES and not parsed.hostname:
            return None

        if any(ch.isspace() for ch in parsed.netloc):
            return None

        return parsed

    def normalize(self, url: str) -> str:
        """Normalize a single URL.

        Args:
            url: URL to normalize

        Returns:
            Normalized URL string, or url unchanged if it cannot be parsed
        """
        parsed = self.parse(url)
        if parsed is None:
            return url

        serialized = self._serialize(parsed)
        if serialized.endswith("/"):
            serialized = serialized[:-1]
        return serialized

    def extract_pathname(self, url: str) -> str:
        """Extract the pathname used for pattern matching.

        Args:
            url: URL to process

        Returns:
            Resolved pathname, or url unchanged if it cannot be parsed
        """
        parsed = self.parse(url)
        if parsed is None:
            return url
        return self.pathname(parsed)

    def get_hostname(self, url: str) -> Optional[str]:
        """Extract the lowercase hostname (no port) or None if invalid."""
        parsed = self.parse(url)
        if parsed is None:
            return None
        return parsed.hostname or None

    def pathname(self, parsed: SplitResult) -> str:
        """Get the resolved pathname of a parsed URL.

        Args:
            parsed: Parsed URL

        Returns:
            Percent-encoded pathname ("/" for hierarchical URLs with an
            empty path)
        """
        scheme = parsed.scheme.lower()
        if scheme not in SPECIAL_SCHEMES and scheme != "file":
            return parsed.path
        path = self._resolve_path_segments(parsed.path or "/")
        return quote(path, safe=PATH_SAFE_CHARS)

    def _serialize(self, parsed: SplitResult) -> str:
        scheme = parsed.scheme.lower()
        netloc = self._normalize_netloc(parsed, scheme)
        path = self.pathname(parsed)
        query = parsed.query
        if scheme in SPECIAL_SCHEMES or scheme == "file":
            query = quote(query, safe=QUERY_SAFE_CHARS)

        return urlunsplit((
            scheme,
            netloc,
            path,
            query,
            '',  # fragment is always dropped
        ))

    def _fix_backslashes(self, url: str) -> str:
        """Treat backslashes as slashes before the query in special-scheme URLs.

        Browsers parse ``https://example.com\\about`` as host ``example.com``
        and path ``/about``.
        """
        scheme, sep, rest = url.partition(':')
        if not sep or scheme.lower() not in SPECIAL_SCHEMES or '\\' not in rest:
            return url

        end = len(rest)
        for marker in ('?', '#'):
            index = rest.find(marker)
            if index != -1:
                end = min(end, index)

        head = rest[:end].replace('\\', '/')
        return f"{scheme}:{head}{rest[end:]}"

    def _normalize_netloc(self, parsed: SplitResult, scheme: str) -> str:
        """Normalize network location (userinfo@host:port).

        Args:
            parsed: Parsed URL
            scheme: Lowercase URL scheme

        Returns:
            Normalized netloc
        """
        host = parsed.hostname or ''
        if not host:
            return parsed.netloc

        # IPv6 literals keep their brackets
        if ':' in host:
            host = f"[{host}]"

        port = parsed.port
        if port is not None and port != SPECIAL_SCHEMES.get(scheme):
            host = f"{host}:{port}"

        if parsed.username:
            userinfo = parsed.username
            if parsed.password:
                userinfo = f"{userinfo}:{parsed.password}"
            host = f"{userinfo}@{host}"

        return host

    def _resolve_path_segments(self, path: str) -> str:
        """Resolve . and .. segments in path, keeping empty segments.

        Args:
            path: URL path

        Returns:
            Resolved path
        """
        if '.' not in path:
            return path

        segments = path[1:].split('/') if path.startswith('/') else path.split('/')
        resolved: list[str] = []

        for segment in segments:
            if segment == '..':
                if resolved:
                    resolved.pop()
            elif segment != '.':
                resolved.append(segment)

        # A trailing dot segment still refers to a directory
        if segments[-1] in ('.', '..'):
            resolved.append('')

        return '/' + '/'.join(resolved)


_default_normalizer = URLNormalizer()


def normalize_url(url: str) -> str:
    """Normalize URL for comparison (removes fragment and trailing slash)."""
    return _default_normalizer.normalize(url)


def extract_pathname(url: str) -> str:
    """Extract pathname from URL, returning url unchanged if invalid."""
    return _default_normalizer.extract_pathname(url)
