"""
Abstraktes Edit-Signal fuer den Titel-Waechter.

Der Host-Adapter uebersetzt seine nativen Events (Qt: FocusIn, FocusOut,
KeyPress, textEdited) in TitleSignal-Instanzen und wertet danach
propagation_stopped / default_prevented aus.
"""

from dataclasses import dataclass

FOCUS_IN = 'focusin'
INPUT = 'input'
KEY_DOWN = 'keydown'
BLUR = 'blur'


@dataclass
class TitleSignal:
    """Ein Signal (Fokus, Eingabe, Taste, Fokusverlust) auf dem Titel-Element."""
    kind: str
    at_target: bool = True      # False = per Propagation von einem Kind-Element
    is_composing: bool = False  # IME-Komposition laeuft
    key: str = ''
    key_code: int = 0
    propagation_stopped: bool = False
    default_prevented: bool = False

    def stop_immediate_propagation(self) -> None:
        """Keine weiteren Listener fuer dieses Signal aufrufen."""
        self.propagation_stopped = True

    def prevent_default(self) -> None:
        """Standardverarbeitung des Hosts (Speichern, Fokuswechsel) unterdruecken."""
        self.default_prevented = True
