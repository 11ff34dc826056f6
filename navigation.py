"""Header and footer navigation entries."""

from dataclasses import dataclass

from locales import SUPPORTED_LOCALES, rewrite_path

PAGE_KEYS = ("home", "privacy", "terms", "about")


@dataclass(frozen=True, slots=True)
class NavEntry:
    key: str
    path: str
    label: str


@dataclass(frozen=True, slots=True)
class LocaleLink:
    locale: str
    path: str
    label: str
    active: bool


def page_path(locale: str, key: str) -> str:
    if key == "home":
        return f"/{locale}"
    return f"/{locale}/{key}"


def build_nav(locale: str, lookup) -> list[NavEntry]:
    """Build the top-level navigation for ``locale``.

    ``lookup`` is the translation callable; labels come from the
    ``nav.<key>`` keys. A lookup that returns ``None`` yields an empty label.
    """
    entries = []
    for key in PAGE_KEYS:
        label = lookup(f"nav.{key}")
        entries.append(NavEntry(key=key, path=page_path(locale, key), label="" if label is None else label))
    return entries


def build_locale_links(current_path: str, active_locale: str) -> list[LocaleLink]:
    """One language-switch link per supported locale, pointing at the current page."""
    return [
        LocaleLink(
            locale=locale,
            path=rewrite_path(current_path, locale),
            label=locale.upper(),
            active=locale == active_locale,
        )
        for locale in SUPPORTED_LOCALES
    ]
