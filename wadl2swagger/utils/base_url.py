"""Parsed form of the ``<resources base="...">`` URL."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlsplit


@dataclass(frozen=True)
class BaseUrl:
    """Components of the WADL base URL used across a conversion.

    Attributes:
        href: The URL exactly as declared in the WADL.
        scheme: Scheme without the trailing colon (``https``).
        host: Network location, including any port.
        root: Path component of the URL, as declared (``/v1/``).
    """

    href: str = ""
    scheme: str = ""
    host: str = ""
    root: str = ""

    @classmethod
    def parse(cls, href: str | None) -> BaseUrl:
        """Split a base URL into its components; empty input gives empty parts."""
        if not href:
            return cls()

        parts = urlsplit(href)
        return cls(href=href, scheme=parts.scheme, host=parts.netloc, root=parts.path)

    @property
    def origin(self) -> str:
        """Scheme and host, e.g. ``https://api.example.com``."""
        if not self.host:
            return ""
        if not self.scheme:
            return f"//{self.host}"
        return f"{self.scheme}://{self.host}"

    @property
    def base_path(self) -> str:
        """Root path with trailing slashes removed, as used for Swagger ``basePath``."""
        return self.root.rstrip("/")
