"""Locale resolution and locale-prefixed path rewriting.

Every public URL starts with a locale segment (``/en``, ``/fr/about``). The
helpers here turn that segment into a supported locale and build the same
path under another locale for the language switch.
"""

import logging
from typing import Literal

logger = logging.getLogger("harmiana.locales")

Locale = Literal["en", "fr"]

SUPPORTED_LOCALES: tuple[Locale, ...] = ("en", "fr")
DEFAULT_LOCALE: Locale = "en"


def split_path(path: str | None) -> list[str]:
    """Return the non-empty segments of a URL path."""
    if not path:
        return []
    return [segment for segment in path.split("/") if segment]


def resolve_locale(segment: str | None = None) -> Locale:
    """Return ``segment`` if it is a supported locale, else the default."""
    if segment in SUPPORTED_LOCALES:
        return segment
    if segment is not None:
        logger.debug("Unsupported locale %r, using %s", segment, DEFAULT_LOCALE)
    return DEFAULT_LOCALE


def rewrite_path(current_path: str | None, target_locale: str) -> str:
    """Return ``current_path`` with its first segment replaced by ``target_locale``.

    The first segment is overwritten whatever it holds, so ``/xx/about``
    becomes ``/fr/about``. An empty path becomes the locale root.
    """
    segments = split_path(current_path)
    if not segments:
        return f"/{target_locale}"
    segments[0] = target_locale
    return "/" + "/".join(segments)
