# domain/filenames — Reine Business-Logik fuer Dateinamen (kein Qt, kein Dateisystem)

from .entities import (
    InvalidReason, FilenameVerdict,
    AttachmentError, TitleNotFoundError,
)
from .interfaces import IEventTarget, ITitleElement
from . import naming_rules
from .naming_rules import (
    classify, invalid_reason, is_filename_invalid, message_for_reason,
)

__all__ = [
    # Entities
    'InvalidReason', 'FilenameVerdict',
    'AttachmentError', 'TitleNotFoundError',
    # Interfaces
    'IEventTarget', 'ITitleElement',
    # Regeln
    'naming_rules',
    'classify', 'invalid_reason', 'is_filename_invalid', 'message_for_reason',
]
