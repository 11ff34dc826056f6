"""Site configuration.

SiteConfig is a frozen dataclass: built once at startup, validated in
``__post_init__``, then read by the app, the templates and the freeze command.
"""

import os
from dataclasses import dataclass, fields
from pathlib import Path

from errors import ConfigurationError

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


@dataclass(frozen=True, slots=True)
class SiteConfig:
    """Site settings. Every field has a default; override what you need::

        config = SiteConfig(debug=True, port=8080)
    """

    site_name: str = "Harmiana"
    contact_email: str = "contact@harmiana.com"

    # Dev server
    host: str = "127.0.0.1"
    port: int = 5000
    debug: bool = False

    # Static export
    build_dir: str | Path = "build"

    # Share of an element that must be visible before it is revealed
    reveal_threshold: float = 0.15

    log_level: str = "info"

    def __post_init__(self) -> None:
        if not 0.0 <= self.reveal_threshold <= 1.0:
            raise ConfigurationError(
                f"reveal_threshold must be between 0 and 1, got {self.reveal_threshold}"
            )
        if self.log_level.lower() not in LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown log level {self.log_level!r}. Expected one of: {', '.join(LOG_LEVELS)}"
            )

    @classmethod
    def from_env(cls, environ=None, prefix: str = "HARMIANA_") -> "SiteConfig":
        """Build a config from ``HARMIANA_*`` environment variables.

        ``HARMIANA_PORT=8080`` sets ``port``, ``HARMIANA_DEBUG=1`` sets
        ``debug`` and so on. Unknown variables are ignored.
        """
        environ = os.environ if environ is None else environ
        values = {}
        for field in fields(cls):
            raw = environ.get(prefix + field.name.upper())
            if raw is None:
                continue
            values[field.name] = _coerce(field.name, field.type, raw)
        return cls(**values)


def _coerce(name: str, annotation, raw: str):
    kind = annotation if isinstance(annotation, str) else getattr(annotation, "__name__", "")
    try:
        if kind == "bool":
            return raw.strip().lower() in ("1", "true", "yes", "on")
        if kind == "int":
            return int(raw)
        if kind == "float":
            return float(raw)
    except ValueError:
        raise ConfigurationError(f"Invalid value for {name}: {raw!r}") from None
    return raw
