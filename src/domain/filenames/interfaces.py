"""
Interfaces (Protocols) fuer den Titel-Waechter.

Definiert die Vertraege zwischen Presenter und Host-Adapter.
Der Presenter haengt nur von diesen Interfaces ab, nie von Qt.
"""

from typing import Protocol, Callable, Hashable, runtime_checkable


@runtime_checkable
class IEventTarget(Protocol):
    """Registrierung von Event-Listenern (implementiert im UI-Adapter)."""

    def add_listener(
        self, event_name: str, handler: Callable, *,
        capture: bool = False,
        passive: bool = False,
    ) -> Hashable: ...

    def remove_listener(self, token: Hashable) -> None: ...


@runtime_checkable
class ITitleElement(IEventTarget, Protocol):
    """Editierbares Titel-Element einer Dokument-Ansicht."""

    @property
    def text(self) -> str: ...

    def set_text(self, text: str) -> None: ...

    def show_error(self, message: str) -> None: ...
