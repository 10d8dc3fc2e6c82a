"""
Domain-Entitaeten fuer die Dateinamen-Pruefung.

Reine Datenklassen ohne Qt- oder Dateisystem-Zugriff.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class InvalidReason(Enum):
    """Grund, warum ein Dateiname abgelehnt wurde.

    Die Reihenfolge entspricht der Prioritaet: pro Name wird genau
    ein Grund gemeldet, und zwar der erste zutreffende.
    """
    EMPTY = 1                   # Name ist leer
    FORBIDDEN_CHARACTER = 2     # Enthaelt z.B. / \ < > oder Steuerzeichen
    INVALID_ENDING = 3          # Endet auf Punkt oder Leerzeichen
    RESERVED_NAME = 4           # Reservierter Name wie "CON" oder ".."


@dataclass(frozen=True)
class FilenameVerdict:
    """Ergebnis einer Dateinamen-Pruefung."""
    name: Optional[str]
    reason: Optional[InvalidReason] = None

    @property
    def is_valid(self) -> bool:
        return self.reason is None

    @classmethod
    def valid(cls, name: str) -> 'FilenameVerdict':
        return cls(name=name)

    @classmethod
    def invalid(cls, name: Optional[str], reason: InvalidReason) -> 'FilenameVerdict':
        return cls(name=name, reason=reason)


class AttachmentError(Exception):
    """Der Titel-Waechter konnte nicht an eine Ansicht angehaengt werden."""


class TitleNotFoundError(AttachmentError):
    """Das Titel-Element wurde in der Ansicht nicht gefunden."""
    def __init__(self, message: str, found: Optional[str] = None):
        super().__init__(message)
        self.found = found
