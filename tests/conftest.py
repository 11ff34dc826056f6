"""Shared fixtures: Flask test client, route history and a manual viewport."""

import pytest
from blinker import Signal

from app import app as site_app
from router import RouteHistory


class ManualNotifier:
    """Intersection notifier driven by the test instead of a viewport."""

    def __init__(self):
        self.callbacks = {}
        self.thresholds = {}
        self.unregistered = []

    def register(self, element, thresholds, callback):
        self.callbacks[element] = callback
        self.thresholds[element] = tuple(thresholds)

    def unregister(self, element):
        self.callbacks.pop(element, None)
        self.unregistered.append(element)

    def is_watching(self, element):
        return element in self.callbacks

    def fire(self, event):
        callback = self.callbacks.get(event.target)
        if callback is not None:
            callback(event)


@pytest.fixture
def app():
    site_app.config.update(TESTING=True)
    return site_app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def route_signal():
    # A private signal keeps receivers from leaking between tests.
    return Signal()


@pytest.fixture
def history(route_signal):
    return RouteHistory(signal=route_signal)


@pytest.fixture
def notifier():
    return ManualNotifier()
