"""
Presenter fuer den Titel-Waechter.

Vermittelt zwischen dem Titel-Element (View) und den Dateinamen-Regeln.
"""

from .signals import TitleSignal, FOCUS_IN, INPUT, KEY_DOWN, BLUR
from .title_guard import TitleEditGuard, GuardState

__all__ = [
    'TitleSignal', 'FOCUS_IN', 'INPUT', 'KEY_DOWN', 'BLUR',
    'TitleEditGuard', 'GuardState',
]
