"""
Konfigurationsmodul fuer den Titel-Waechter.
"""

from .filename_rules import (
    FORBIDDEN_CHARACTERS, RESERVED_DEVICE_STEMS, RESERVED_DOT_NAMES,
    INVALID_ENDINGS, TITLE_OBJECT_NAME, KEYDOWN_INTERCEPTS,
    COMPOSITION_KEY_CODE, TOOLTIP_CLASSES, TOOLTIP_PLACEMENT,
)

__all__ = [
    'FORBIDDEN_CHARACTERS', 'RESERVED_DEVICE_STEMS', 'RESERVED_DOT_NAMES',
    'INVALID_ENDINGS', 'TITLE_OBJECT_NAME', 'KEYDOWN_INTERCEPTS',
    'COMPOSITION_KEY_CODE', 'TOOLTIP_CLASSES', 'TOOLTIP_PLACEMENT',
]
