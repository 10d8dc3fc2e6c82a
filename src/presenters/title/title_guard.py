"""
Presenter: Titel-Waechter fuer die Inline-Umbenennung.

Verhindert, dass ein ungueltiger Dateiname als Dokumenttitel bestaetigt
wird. Pro geoeffnetem Dokument existiert genau ein Waechter, der an das
Titel-Element gebunden ist und mit der Ansicht zerstoert wird.

Abgefangene Signale:

| Signal  | Zweck                                                    |
| ------- | -------------------------------------------------------- |
| focusin | Aktuellen Titel als letzten gueltigen Stand merken       |
| input   | Fehlermeldung bei ungueltigem Namen anzeigen             |
| keydown | Bestaetigungstasten: ungueltigen Titel zuruecksetzen     |
| blur    | Fokusverlust: ungueltigen Titel zuruecksetzen            |

Ein leerer Titel waehrend der Eingabe wird toleriert (der Host lehnt ihn
beim Speichern selbst ab), beim Bestaetigen gilt er als ungueltig.
"""

import logging
from enum import Enum

from config.filename_rules import COMPOSITION_KEY_CODE, KEYDOWN_INTERCEPTS
from domain.filenames.entities import InvalidReason
from domain.filenames.interfaces import ITitleElement
from domain.filenames.naming_rules import (
    classify, is_filename_invalid, message_for_reason,
)
from infrastructure.events.listener_group import ListenerGroup

from .signals import TitleSignal, FOCUS_IN, INPUT, KEY_DOWN, BLUR

logger = logging.getLogger(__name__)


class GuardState(Enum):
    IDLE = 'idle'                # Titel nicht fokussiert
    EDITING = 'editing'          # Titel fokussiert, Benutzer tippt
    SUPPRESSING = 'suppressing'  # Ungueltiger Titel wird gerade zurueckgesetzt


class TitleEditGuard:
    """Zustandsautomat, der Edit-Signale eines Titel-Elements abfaengt.

    Verwendung:
        guard = TitleEditGuard(element)  # registriert alle Listener
        ...
        guard.destroy()                  # entfernt alle Listener
    """

    def __init__(self, element: ITitleElement):
        self._element = element
        self._state = GuardState.IDLE
        self._last_good_text = ''
        self._set_last_good_text(element.text)

        self._listeners = ListenerGroup(element)
        self._listeners.listen(BLUR, self._on_blur)
        self._listeners.listen(FOCUS_IN, self._on_focusin)
        self._listeners.listen(INPUT, self._on_input)
        self._listeners.listen(KEY_DOWN, self._on_keydown)
        logger.info(f"Titel-Waechter angehaengt: '{self._last_good_text}'")

    @property
    def last_good_text(self) -> str:
        return self._last_good_text

    @property
    def listeners_active(self) -> bool:
        return self._listeners.active

    @property
    def state(self) -> GuardState:
        return self._state

    def destroy(self) -> None:
        """Entfernt alle Listener. Danach ist der Waechter wirkungslos."""
        if not self._listeners.active:
            return
        self._listeners.release()
        self._state = GuardState.IDLE
        logger.info("Titel-Waechter entfernt")

    def _set_last_good_text(self, text: str) -> None:
        if is_filename_invalid(text):
            # Sollte bei korrektem Host-Verhalten nie passieren
            logger.warning(
                f"Letzter gueltiger Titel wird durch ungueltigen Wert ersetzt: "
                f"'{self._last_good_text}' -> '{text}'"
            )
        self._last_good_text = text or ''

    def _reset_invalid_title(self, signal: TitleSignal) -> bool:
        """Setzt den Titel zurueck, falls er ungueltig ist.

        Bei gueltigem Titel wird er als neuer letzter gueltiger Stand
        uebernommen und das Signal nicht angefasst.

        Returns:
            True wenn der Titel ungueltig war und zurueckgesetzt wurde.
        """
        text = self._element.text
        if not is_filename_invalid(text):
            self._last_good_text = text
            return False

        self._state = GuardState.SUPPRESSING
        signal.stop_immediate_propagation()
        signal.prevent_default()
        self._element.set_text(self._last_good_text)
        logger.debug(f"Ungueltiger Titel '{text}' zurueckgesetzt auf '{self._last_good_text}'")
        return True

    # Signal-Handler

    # Beim Fokussieren den aktuellen Titel merken, damit mehrfaches
    # Bearbeiten korrekt zurueckgesetzt werden kann.
    def _on_focusin(self, signal: TitleSignal) -> None:
        if not signal.at_target:
            return
        logger.debug("TitleEditGuard: focusin")
        self._set_last_good_text(self._element.text)
        self._state = GuardState.EDITING

    # Bei jeder Aenderung pruefen und ggf. Fehlermeldung anzeigen.
    # Der Text bleibt stehen, damit der Benutzer weiter korrigieren kann.
    def _on_input(self, signal: TitleSignal) -> None:
        if not signal.at_target or signal.is_composing:
            return
        self._state = GuardState.EDITING
        reason = classify(self._element.text).reason
        if reason is None or reason is InvalidReason.EMPTY:
            return
        logger.debug(f"TitleEditGuard: input abgelehnt ({reason.name})")
        signal.stop_immediate_propagation()
        self._element.show_error(message_for_reason(reason))

    # Bestaetigungstasten: ungueltigen Titel vor dem Host zuruecksetzen.
    def _on_keydown(self, signal: TitleSignal) -> None:
        if (
            not signal.at_target
            or signal.is_composing
            or signal.key_code == COMPOSITION_KEY_CODE
            or signal.key not in KEYDOWN_INTERCEPTS
        ):
            return
        logger.debug(f"TitleEditGuard: keydown {signal.key}")
        self._reset_invalid_title(signal)
        self._state = GuardState.EDITING

    # Fokusverlust: ungueltigen Titel nicht speichern lassen.
    def _on_blur(self, signal: TitleSignal) -> None:
        if not signal.at_target:
            return
        logger.debug("TitleEditGuard: blur")
        self._reset_invalid_title(signal)
        self._state = GuardState.IDLE
