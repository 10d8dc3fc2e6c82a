"""
Dateibenennungs-Regeln fuer Windows, Linux und macOS.

Reine Business-Logik fuer die Dateinamen-Validierung.
Kein Zugriff auf Dateisystem oder Qt. Alle Funktionen sind frei von
Seiteneffekten und koennen von beliebig vielen Aufrufern parallel
genutzt werden.

Es findet keine Normalisierung statt (kein strip, kein casefold).
Nur der Abgleich reservierter Namen ignoriert Gross-/Kleinschreibung.
Nicht-lateinische Schriften sind immer erlaubt.
"""

from typing import Optional

from config.filename_rules import (
    FORBIDDEN_CHARACTERS,
    INVALID_ENDINGS,
    INVALID_FILENAME_REGEX,
    INVALID_FILENAME_RESERVED_REGEX,
)
from i18n import de as texts

from .entities import FilenameVerdict, InvalidReason


def classify(name: Optional[str]) -> FilenameVerdict:
    """Prueft einen Dateinamen und liefert das Ergebnis mit Ablehnungsgrund.

    Prioritaet: leer > verbotenes Zeichen > ungueltiges Ende > reserviert.

    Args:
        name: Der zu pruefende Dateiname (None wird wie "" behandelt).

    Returns:
        FilenameVerdict, bei ungueltigen Namen mit genau einem InvalidReason.
    """
    if not name:
        return FilenameVerdict.invalid(name, InvalidReason.EMPTY)
    if any(ch in FORBIDDEN_CHARACTERS for ch in name):
        return FilenameVerdict.invalid(name, InvalidReason.FORBIDDEN_CHARACTER)
    if name.endswith(INVALID_ENDINGS):
        return FilenameVerdict.invalid(name, InvalidReason.INVALID_ENDING)
    if INVALID_FILENAME_RESERVED_REGEX.search(name):
        return FilenameVerdict.invalid(name, InvalidReason.RESERVED_NAME)
    return FilenameVerdict.valid(name)


def invalid_reason(name: Optional[str]) -> Optional[InvalidReason]:
    """Gibt den Ablehnungsgrund oder None (gueltig) zurueck."""
    return classify(name).reason


def is_filename_invalid(name: Optional[str]) -> bool:
    """Schnelle Ja/Nein-Pruefung ueber ein einziges Muster.

    Stimmt fuer jede Eingabe mit classify() ueberein.
    """
    return not name or INVALID_FILENAME_REGEX.search(name) is not None


_MESSAGES = {
    InvalidReason.EMPTY: texts.FILENAME_ERROR_DEFAULT,
    InvalidReason.FORBIDDEN_CHARACTER: texts.FILENAME_ERROR_CHARS,
    InvalidReason.INVALID_ENDING: texts.FILENAME_ERROR_ENDING,
    InvalidReason.RESERVED_NAME: texts.FILENAME_ERROR_RESERVED,
}


def message_for_reason(reason: Optional[InvalidReason]) -> str:
    """Liefert die Fehlermeldung fuer einen Ablehnungsgrund."""
    return _MESSAGES.get(reason, texts.FILENAME_ERROR_DEFAULT)
