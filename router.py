"""URL matching and navigation history.

``match_route`` maps a path to the screen it shows or to a redirect.
``RouteHistory`` applies those results to an in-memory history and announces
every settled navigation on the ``route_changed`` signal.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from blinker import Namespace

from errors import RedirectLoopError
from locales import DEFAULT_LOCALE, SUPPORTED_LOCALES, resolve_locale, split_path

logger = logging.getLogger("harmiana.router")

signals = Namespace()

#: Sent by :class:`RouteHistory` with ``match=`` after each navigation.
route_changed = signals.signal("route-changed")

DEFAULT_ROOT = f"/{DEFAULT_LOCALE}"

# Longer redirect chains are treated as a loop.
MAX_REDIRECTS = 5


class Screen(Enum):
    HOME = "home"
    PRIVACY = "privacy"
    TERMS = "terms"
    ABOUT = "about"


_PAGE_SCREENS = {
    "privacy": Screen.PRIVACY,
    "terms": Screen.TERMS,
    "about": Screen.ABOUT,
}


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """A path that renders a screen.

    ``segment`` is the raw first path segment; ``locale`` is that segment
    after resolution, so ``/xx`` has ``segment="xx"`` and ``locale="en"``.
    """

    screen: Screen
    locale: str
    segment: str
    path: str


@dataclass(frozen=True, slots=True)
class Redirect:
    location: str
    replace: bool = True


def match_route(path: str) -> RouteMatch | Redirect:
    segments = split_path(path)
    if not segments:
        return Redirect(DEFAULT_ROOT)

    segment = segments[0]
    if len(segments) == 1:
        return RouteMatch(Screen.HOME, resolve_locale(segment), segment, path)

    # Page routes only exist under a supported locale; /xx/about redirects.
    if len(segments) == 2 and segment in SUPPORTED_LOCALES and segments[1] in _PAGE_SCREENS:
        return RouteMatch(_PAGE_SCREENS[segments[1]], segment, segment, path)

    logger.debug("No route for %s, redirecting to %s", path, DEFAULT_ROOT)
    return Redirect(DEFAULT_ROOT)


class RouteHistory:
    """Browser-style history of matched routes.

    Redirects are followed before anything is recorded, so an unmatched path
    never becomes an entry and going back cannot land on it.
    """

    def __init__(self, signal=route_changed) -> None:
        self.signal = signal
        self._entries: list[RouteMatch] = []
        self._index = -1

    @property
    def current(self) -> RouteMatch | None:
        if self._index < 0:
            return None
        return self._entries[self._index]

    @property
    def paths(self) -> list[str]:
        return [entry.path for entry in self._entries]

    def navigate(self, path: str, *, replace: bool = False) -> RouteMatch:
        match = self._settle(path)
        if replace and self._index >= 0:
            self._entries[self._index] = match
        else:
            del self._entries[self._index + 1 :]
            self._entries.append(match)
            self._index += 1
        return self._announce(match)

    def back(self) -> RouteMatch | None:
        if self._index <= 0:
            return self.current
        self._index -= 1
        return self._announce(self._entries[self._index])

    def forward(self) -> RouteMatch | None:
        if self._index >= len(self._entries) - 1:
            return self.current
        self._index += 1
        return self._announce(self._entries[self._index])

    def _settle(self, path: str) -> RouteMatch:
        outcome = match_route(path)
        hops = 0
        while isinstance(outcome, Redirect):
            hops += 1
            if hops > MAX_REDIRECTS:
                raise RedirectLoopError(path)
            outcome = match_route(outcome.location)
        return outcome

    def _announce(self, match: RouteMatch) -> RouteMatch:
        self.signal.send(self, match=match)
        return match
