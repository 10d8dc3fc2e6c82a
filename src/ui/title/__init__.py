"""
Titel-Waechter UI-Module.

    ui/title/                - Qt-Adapter, Plugin-Schale
    presenters/title/        - Zustandsautomat (kein Qt)
    domain/filenames/        - Dateinamen-Regeln
    infrastructure/events/   - ListenerGroup
"""

from .title_element import QtTitleElement
from .plugin import TitleGuardPlugin, attach_title_guard

__all__ = [
    'QtTitleElement',
    'TitleGuardPlugin',
    'attach_title_guard',
]
