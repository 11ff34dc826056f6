"""The page shell: header, footer and the mobile menu toggle."""

import logging
from datetime import date

from navigation import build_locale_links, build_nav

logger = logging.getLogger("harmiana.layout")


class LayoutShell:
    """Header/footer composition for one matched route.

    The shell owns a single piece of state, ``menu_open``. Once mounted on a
    route signal it closes the menu whenever the route path changes.
    """

    def __init__(self, match, lookup, contact_email=""):
        self.match = match
        self.lookup = lookup
        self.contact_email = contact_email
        self.menu_open = False
        self._signal = None

    @property
    def locale(self):
        return self.match.locale

    def toggle_menu(self):
        self.menu_open = not self.menu_open
        return self.menu_open

    def close_menu(self):
        self.menu_open = False

    def mount(self, signal):
        if self._signal is not None:
            return self
        signal.connect(self._on_route_changed)
        self._signal = signal
        return self

    def unmount(self):
        if self._signal is not None:
            self._signal.disconnect(self._on_route_changed)
            self._signal = None
        self.menu_open = False

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.unmount()

    def _on_route_changed(self, sender, match, **kwargs):
        if match.path != self.match.path:
            if self.menu_open:
                logger.debug("Route changed to %s, closing menu", match.path)
            self.close_menu()
        self.match = match

    def menu_href(self):
        """Link for the no-script menu button: opens when closed, closes when open."""
        if self.menu_open:
            return self.match.path
        return f"{self.match.path}?menu=open"

    def render_context(self):
        locale = self.locale
        nav = build_nav(locale, self.lookup)
        return {
            "lang": locale,
            "brand_href": f"/{locale}",
            "nav": nav,
            "locale_links": build_locale_links(self.match.path, locale),
            "menu_open": self.menu_open,
            "menu_href": self.menu_href(),
            "footer": {
                "nav": nav,
                "tagline": self.lookup("footer.tagline"),
                "copyright": _with_year(self.lookup("footer.copy")),
                "contact_label": self.lookup("footer.contact"),
                "contact_href": f"mailto:{self.contact_email}" if self.contact_email else "",
            },
        }


def _with_year(text):
    if not isinstance(text, str):
        return text
    return text.replace("{year}", str(date.today().year))
