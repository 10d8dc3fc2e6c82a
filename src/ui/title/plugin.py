# -*- coding: utf-8 -*-
"""
Plugin-Schale fuer den Titel-Waechter.

Haengt an jede geoeffnete Dokument-Ansicht genau einen TitleEditGuard an
und entfernt ihn wieder, wenn die Ansicht geschlossen wird. Ohne destroy()
wuerden sich die Event-Listener pro geoeffnetem Dokument endlos ansammeln.

Verwendung:
    plugin = TitleGuardPlugin()
    plugin.on_load()
    plugin.on_view_opened(view)   # view: QWidget mit QLineEdit 'inlineTitle'
    ...
    plugin.on_view_closed(view)
    plugin.on_unload()
"""

import logging
from typing import Optional
from weakref import WeakKeyDictionary

from PySide6.QtWidgets import QLineEdit, QWidget

from config.filename_rules import TITLE_OBJECT_NAME
from domain.filenames.entities import AttachmentError, TitleNotFoundError
from i18n import de as texts
from infrastructure.logging_config import setup_logging
from presenters.title.title_guard import TitleEditGuard

from .title_element import QtTitleElement

logger = logging.getLogger(__name__)


def attach_title_guard(view: QWidget) -> TitleEditGuard:
    """Sucht das Titel-Feld in der Ansicht und haengt einen Waechter an.

    Raises:
        TitleNotFoundError: Kein QLineEdit mit TITLE_OBJECT_NAME gefunden.
            Es wird dann kein Listener registriert.
    """
    title = view.findChild(QWidget, TITLE_OBJECT_NAME)
    if title is None or not isinstance(title, QLineEdit):
        found = type(title).__name__ if title is not None else None
        raise TitleNotFoundError(
            texts.TITLE_GUARD_NOT_FOUND.format(found=found or 'None'),
            found=found,
        )
    return TitleEditGuard(QtTitleElement(title))


class TitleGuardPlugin:
    """Verwaltet die Titel-Waechter aller geoeffneten Dokument-Ansichten.

    Die Ansichten werden schwach referenziert. Loescht der Host eine Ansicht
    ohne on_view_closed(), wird ihr Waechter ueber destroyed entfernt.
    """

    def __init__(self, log_dir: Optional[str] = None):
        self._log_dir = log_dir
        self._guards: 'WeakKeyDictionary[QWidget, TitleEditGuard]' = WeakKeyDictionary()

    def on_load(self) -> None:
        setup_logging(self._log_dir)
        logger.info("TitleGuardPlugin geladen")

    def on_unload(self) -> None:
        guards = list(self._guards.values())
        self._guards.clear()
        for guard in guards:
            try:
                guard.destroy()
            except Exception as e:
                # Restliche Waechter trotzdem entfernen
                logger.error(f"Titel-Waechter konnte nicht entfernt werden: {e}")
        logger.info("TitleGuardPlugin entladen")

    def on_view_opened(self, view: QWidget) -> TitleEditGuard:
        """Haengt einen Waechter an die Ansicht an (einmal pro Ansicht)."""
        guard = self._guards.get(view)
        if guard is not None:
            return guard
        try:
            guard = attach_title_guard(view)
        except AttachmentError as e:
            logger.error(f"Titel-Waechter konnte nicht geladen werden: {e}")
            raise
        self._guards[view] = guard
        # Nur den Waechter binden, nicht die Ansicht (sonst bliebe sie am Leben)
        view.destroyed.connect(lambda *_: self._on_view_destroyed(guard))
        return guard

    def on_view_closed(self, view: QWidget) -> None:
        guard = self._guards.pop(view, None)
        if guard is not None:
            guard.destroy()

    def on_file_renamed(self, name: str) -> None:
        logger.debug(f"Umbenennung durch Host: {name}")

    def guard_for(self, view: QWidget) -> Optional[TitleEditGuard]:
        return self._guards.get(view)

    def open_view_count(self) -> int:
        return len(self._guards)

    def _on_view_destroyed(self, guard: TitleEditGuard) -> None:
        for view, known in list(self._guards.items()):
            if known is guard:
                del self._guards[view]
        guard.destroy()
