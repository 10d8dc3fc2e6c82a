# -*- coding: utf-8 -*-
"""
Qt-Adapter fuer das Titel-Element einer Dokument-Ansicht.

Uebersetzt die Qt-Events des QLineEdit in TitleSignal-Instanzen und
stellt sie den registrierten Listenern in Registrierungsreihenfolge zu.

| Qt                      | Signal  |
| ----------------------- | ------- |
| QEvent.FocusIn          | focusin |
| QEvent.FocusOut         | blur    |
| QEvent.KeyPress         | keydown |
| QLineEdit.textEdited    | input   |

QEvent.InputMethod mit nicht-leerem Preedit-Text markiert eine laufende
IME-Komposition.

Ein Listener, der stop_immediate_propagation() aufruft, beendet den
Dispatch. Ein Signal mit prevent_default() wird vom Event-Filter
verschluckt, das QLineEdit sieht das Event dann nicht. Ausnahme ist
FocusOut: der Text ist dann bereits zurueckgesetzt, nur titleCommitted
entfaellt. Nicht gestoppte Eingaben werden als titleEdited weitergereicht,
nicht verhinderte Bestaetigungen als titleCommitted.

Wird das QLineEdit geloescht, verwirft der Adapter alle Listener.

Hinweis: Qt ruft den zuletzt installierten Event-Filter zuerst auf.
Der Adapter muss daher nach den Filtern des Hosts angehaengt werden.
"""

import logging
from itertools import count
from typing import Callable, Dict, Hashable, List, Optional, Tuple

from PySide6.QtCore import QObject, QEvent, QPoint, Qt, Signal
from PySide6.QtWidgets import QLineEdit, QToolTip
import shiboken6

from config.filename_rules import KEYDOWN_INTERCEPTS, TOOLTIP_CLASSES, TOOLTIP_PLACEMENT
from presenters.title.signals import TitleSignal, FOCUS_IN, INPUT, KEY_DOWN, BLUR

logger = logging.getLogger(__name__)

# Qt-Tastencodes -> Tastennamen wie im Host verwendet
_KEY_NAMES: Dict[int, str] = {
    Qt.Key.Key_Return.value: 'Enter',
    Qt.Key.Key_Enter.value: 'Enter',
    Qt.Key.Key_Tab.value: 'Tab',
    Qt.Key.Key_Down.value: 'ArrowDown',
    Qt.Key.Key_Up.value: 'ArrowUp',
    Qt.Key.Key_Escape.value: 'Escape',
}


class QtTitleElement(QObject):
    """ITitleElement-Implementierung fuer ein QLineEdit."""

    titleEdited = Signal(str)
    titleCommitted = Signal(str)

    def __init__(self, line_edit: QLineEdit, parent: Optional[QObject] = None):
        # Kein Parent auf dem QLineEdit: der Adapter muss dessen destroyed
        # noch empfangen, waehrend die Kinder bereits geloescht sind
        super().__init__(parent)
        self._widget = line_edit
        self._listeners: List[Tuple[int, str, Callable]] = []
        self._tokens = count(1)
        self._composing = False
        self._hooked = False
        self._last_error: Optional[str] = None
        line_edit.destroyed.connect(self._on_widget_destroyed)

    # ITitleElement

    @property
    def widget(self) -> QLineEdit:
        return self._widget

    @property
    def text(self) -> str:
        return self._widget.text()

    def set_text(self, text: str) -> None:
        # setText() loest kein textEdited aus
        self._widget.setText(text)

    @property
    def last_error(self) -> Optional[str]:
        return self._last_error

    def show_error(self, message: str) -> None:
        """Zeigt die Fehlermeldung als Tooltip unter dem Titel an."""
        self._last_error = message
        self._widget.setProperty('tooltipClasses', ' '.join(TOOLTIP_CLASSES))
        anchor = QPoint(0, self._widget.height()) if TOOLTIP_PLACEMENT == 'bottom' else QPoint(0, 0)
        QToolTip.showText(self._widget.mapToGlobal(anchor), message, self._widget)

    # IEventTarget

    def add_listener(self, event_name: str, handler: Callable, *,
                     capture: bool = False, passive: bool = False) -> Hashable:
        # capture/passive haben in Qt keine Entsprechung: der Filter sieht
        # jedes Event vor dem Widget, Verschlucken entscheidet prevent_default()
        token = next(self._tokens)
        self._listeners.append((token, event_name, handler))
        if not self._hooked:
            self._hook()
        return token

    def remove_listener(self, token: Hashable) -> None:
        self._listeners = [entry for entry in self._listeners if entry[0] != token]
        if not self._listeners and self._hooked:
            self._unhook()

    def listener_count(self) -> int:
        return len(self._listeners)

    def _hook(self) -> None:
        self._widget.installEventFilter(self)
        self._widget.textEdited.connect(self._on_text_edited)
        self._hooked = True

    def _unhook(self) -> None:
        self._hooked = False
        if not shiboken6.isValid(self._widget):
            return
        self._widget.removeEventFilter(self)
        self._widget.textEdited.disconnect(self._on_text_edited)

    def _on_widget_destroyed(self, *_args) -> None:
        # Qt hat Filter und Verbindungen mit dem Widget bereits entfernt
        self._listeners = []
        self._hooked = False
        logger.debug("Titel-Widget geloescht, Listener verworfen")

    # Dispatch

    def _dispatch(self, signal: TitleSignal) -> TitleSignal:
        # Snapshot: Listener, die waehrend des Dispatch entfernt werden,
        # sind durch ihre ListenerGroup bereits stillgelegt
        for _, event_name, handler in list(self._listeners):
            if event_name != signal.kind:
                continue
            handler(signal)
            if signal.propagation_stopped:
                break
        return signal

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        etype = event.type()
        at_target = watched is self._widget

        if etype == QEvent.Type.InputMethod:
            self._composing = bool(event.preeditString())
            return False

        if etype == QEvent.Type.FocusIn:
            signal = TitleSignal(FOCUS_IN, at_target=at_target)
        elif etype == QEvent.Type.FocusOut:
            signal = TitleSignal(BLUR, at_target=at_target)
        elif etype == QEvent.Type.KeyPress:
            signal = TitleSignal(
                KEY_DOWN,
                at_target=at_target,
                is_composing=self._composing,
                key=_KEY_NAMES.get(event.key(), event.text()),
                key_code=event.nativeVirtualKey(),
            )
        else:
            return False

        self._dispatch(signal)
        if signal.default_prevented:
            # FocusOut trotzdem durchlassen, sonst bleibt der Cursor im Feld
            return signal.kind != BLUR

        if signal.kind == BLUR or (signal.kind == KEY_DOWN and signal.key in KEYDOWN_INTERCEPTS):
            self.titleCommitted.emit(self.text)
        return False

    def _on_text_edited(self, text: str) -> None:
        signal = self._dispatch(TitleSignal(INPUT, is_composing=self._composing))
        if not signal.propagation_stopped:
            self.titleEdited.emit(text)
