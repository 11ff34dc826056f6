"""Exceptions raised by the site at startup and while freezing pages."""


class SiteError(Exception):
    """Base class for site errors."""


class ConfigurationError(SiteError):
    """Invalid settings, raised when the configuration is built."""


class FreezeError(SiteError):
    """A page could not be exported to static HTML."""

    def __init__(self, path: str, status: int) -> None:
        self.path = path
        self.status = status
        super().__init__(f"Freezing {path} returned HTTP {status}")


class RedirectLoopError(SiteError):
    """Following redirects from a path never reached a page."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Redirect loop while resolving {path}")
