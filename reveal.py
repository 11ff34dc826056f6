"""Reveal-on-scroll: flag an element visible the first time it scrolls into view.

The viewport is reached through an :class:`IntersectionNotifier`. In the
browser that is ``IntersectionObserver`` (see ``static/js/site.js``), which
picks up the ``data-reveal`` attributes rendered by :func:`reveal_attributes`.
"""

from dataclasses import dataclass
from typing import Any, Callable, Protocol, Sequence

from markupsafe import Markup

DEFAULT_THRESHOLD = 0.15


@dataclass(frozen=True, slots=True)
class IntersectionEvent:
    target: Any
    is_intersecting: bool
    ratio: float = 0.0


class IntersectionNotifier(Protocol):
    def register(
        self,
        element: Any,
        thresholds: Sequence[float],
        callback: Callable[[IntersectionEvent], None],
    ) -> None: ...

    def unregister(self, element: Any) -> None: ...


class RevealOnScroll:
    """One-shot visibility flag for a single element.

    ``visible`` only ever goes from False to True. After the first
    intersecting event the element is unregistered, and ``detach()`` cancels
    the registration if that event never comes.
    """

    def __init__(self, element: Any, notifier: IntersectionNotifier, threshold: float = DEFAULT_THRESHOLD) -> None:
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(f"threshold must be between 0 and 1, got {threshold}")
        self.element = element
        self.notifier = notifier
        self.threshold = threshold
        self.visible = False
        self._observing = False

    @property
    def observing(self) -> bool:
        return self._observing

    def attach(self) -> "RevealOnScroll":
        if self._observing or self.visible:
            return self
        self.notifier.register(self.element, (self.threshold,), self._on_intersection)
        self._observing = True
        return self

    def detach(self) -> None:
        if not self._observing:
            return
        self._observing = False
        self.notifier.unregister(self.element)

    def _on_intersection(self, event: IntersectionEvent) -> None:
        if self.visible or not self._observing:
            return
        if event.is_intersecting:
            self.visible = True
            self.detach()


def reveal_attributes(threshold: float = DEFAULT_THRESHOLD) -> Markup:
    """HTML attributes that hand an element to the browser reveal script."""
    return Markup('data-reveal data-reveal-threshold="{}"').format(threshold)
