"""
Gemeinsame Fixtures fuer die Titel-Waechter-Tests.
"""

import os
from itertools import count

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class FakeTitleElement:
    """In-Memory Titel-Element (ITitleElement) ohne Qt."""

    def __init__(self, text: str = ""):
        self._text = text
        self._listeners = []
        self._tokens = count(1)
        self.errors = []

    @property
    def text(self) -> str:
        return self._text

    def set_text(self, text: str) -> None:
        self._text = text

    def enter_text(self, text: str) -> None:
        """Simuliert Benutzereingabe (aendert nur den Text)."""
        self._text = text

    def show_error(self, message: str) -> None:
        self.errors.append(message)

    def add_listener(self, event_name, handler, *, capture=False, passive=False):
        token = next(self._tokens)
        self._listeners.append((token, event_name, handler))
        return token

    def remove_listener(self, token) -> None:
        self._listeners = [entry for entry in self._listeners if entry[0] != token]

    def listener_count(self) -> int:
        return len(self._listeners)

    def dispatch(self, signal):
        for _, event_name, handler in list(self._listeners):
            if event_name != signal.kind:
                continue
            handler(signal)
            if signal.propagation_stopped:
                break
        return signal


@pytest.fixture
def fake_element():
    return FakeTitleElement("Notiz")


@pytest.fixture
def make_element():
    return FakeTitleElement


@pytest.fixture(scope="session")
def qapp():
    QtWidgets = pytest.importorskip("PySide6.QtWidgets")
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


@pytest.fixture
def clean_root_logger():
    """Entfernt die von setup_logging() angehaengten Handler wieder."""
    import logging

    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in before:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
