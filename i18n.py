"""Translation lookup.

Each locale has a flat table in ``translations/<locale>.py`` keyed by dotted
names (``nav.home``, ``home.title``). Most values are strings; a few
(``home.values``, ``about.beliefs``) are lists of strings.
"""

import logging

from locales import DEFAULT_LOCALE, resolve_locale
from translations.en import translations as EN
from translations.fr import translations as FR

logger = logging.getLogger("harmiana.i18n")

CATALOG = {
    "en": EN,
    "fr": FR,
}


class Translator:
    """Callable lookup bound to a current language.

    Missing keys fall back to the default locale, then to the key itself.
    """

    def __init__(self, catalog=None, language=DEFAULT_LOCALE):
        self.catalog = CATALOG if catalog is None else catalog
        self.language = resolve_locale(language)

    def change_language(self, language):
        self.language = resolve_locale(language)
        return self.language

    def __call__(self, key, **kwargs):
        value = self.catalog.get(self.language, {}).get(key)
        if value is None and self.language != DEFAULT_LOCALE:
            value = self.catalog.get(DEFAULT_LOCALE, {}).get(key)
        if value is None:
            logger.warning("Missing translation for %r (%s)", key, self.language)
            return key
        if kwargs and isinstance(value, str):
            return value.format(**kwargs)
        return value

    def sequence(self, key):
        """Lookup for list keys. Always returns a list, empty when the key is missing."""
        value = self(key)
        if isinstance(value, (list, tuple)):
            return list(value)
        if value == key or not value:
            return []
        return [value]
