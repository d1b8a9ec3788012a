"""Redirect target validation."""

from abc import ABC, abstractmethod
from urllib.parse import urljoin, urlsplit

ALLOWED_SCHEMES = {"http", "https"}


def origin_of(url: str) -> str | None:
    """Return scheme://host[:port] of an absolute URL, None otherwise."""
    parts = urlsplit(url)
    if parts.scheme.lower() not in ALLOWED_SCHEMES or not parts.netloc:
        return None
    return f"{parts.scheme.lower()}://{parts.netloc.lower()}"


class OriginPolicy(ABC):
    """Decides whether a redirect target may be used."""

    @abstractmethod
    def is_allowed(self, url: str) -> bool:
        """Check a redirect target.

        Args:
            url: Absolute or relative redirect target

        Returns:
            True if redirecting there is safe
        """
        pass


class TrustedOriginPolicy(OriginPolicy):
    """Allows redirects to the API's own origin and an allow-list.

    Relative targets are resolved against the base URL first, so
    scheme-relative tricks like ``//evil.example`` are caught.
    """

    def __init__(self, base_url: str, trusted_origins: list[str]) -> None:
        """Initialize policy.

        Args:
            base_url: API base URL, always trusted
            trusted_origins: Additional trusted origins (e.g. the frontend)
        """
        self.base_url = base_url
        self.trusted = {
            origin
            for origin in (origin_of(u) for u in [base_url, *trusted_origins])
            if origin
        }

    def is_allowed(self, url: str) -> bool:
        """Check that the resolved target's origin is trusted."""
        if not url:
            return False
        resolved = urljoin(self.base_url.rstrip("/") + "/", url.strip())
        origin = origin_of(resolved)
        return origin is not None and origin in self.trusted
