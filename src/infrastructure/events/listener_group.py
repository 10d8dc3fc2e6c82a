"""
Gebuendelte Listener-Registrierung mit atomarer Freigabe.

Ein ListenerGroup haelt mehrere Listener-Registrierungen auf einem
IEventTarget als eine Einheit. release() entfernt alle Registrierungen
in einem Durchgang und ist mehrfach aufrufbar.

Usage:
    group = ListenerGroup(element)
    group.listen('focusin', self._on_focusin)
    group.listen('blur', self._on_blur)
    ...
    group.release()  # entfernt beide Listener

    # Oder als Context-Manager:
    with ListenerGroup(element) as group:
        group.listen('input', on_input)
"""

import logging
from typing import Callable, Hashable, List

from domain.filenames.interfaces import IEventTarget

logger = logging.getLogger(__name__)


class ListenerGroup:
    """Scoped Listener-Gruppe fuer ein einzelnes Event-Target.

    Nach release() sind alle registrierten Handler wirkungslos, auch wenn
    der Host noch Signale aus dem laufenden Dispatch zustellt.
    """

    def __init__(self, target: IEventTarget):
        self._target = target
        self._tokens: List[Hashable] = []
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def __len__(self) -> int:
        return len(self._tokens)

    def listen(self, event_name: str, handler: Callable, *,
               capture: bool = True, passive: bool = True) -> None:
        """Registriert einen Handler als Teil dieser Gruppe."""
        if not self._active:
            raise RuntimeError(
                f"ListenerGroup bereits freigegeben, '{event_name}' nicht registriert"
            )

        def guarded(*args, **kwargs):
            if not self._active:
                return None
            return handler(*args, **kwargs)

        token = self._target.add_listener(
            event_name, guarded, capture=capture, passive=passive,
        )
        self._tokens.append(token)

    def release(self) -> None:
        """Entfernt alle Listener der Gruppe. Mehrfacher Aufruf ist harmlos."""
        if not self._active:
            return
        # Zuerst deaktivieren, damit laufende Dispatches nichts mehr ausloesen
        self._active = False
        tokens, self._tokens = self._tokens, []
        for token in tokens:
            self._target.remove_listener(token)
        logger.debug(f"ListenerGroup freigegeben ({len(tokens)} Listener)")

    def __enter__(self) -> 'ListenerGroup':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()
