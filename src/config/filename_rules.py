"""
Dateinamen-Regelwerk fuer Windows, Linux und macOS.

Zentrale Konstanten fuer die Dateinamen-Pruefung und den Titel-Waechter.
Die Tabellen werden zur Laufzeit nie veraendert.

Regeln:
    - Keine verbotenen Zeichen: * " \\ / < > : | ?
    - Keine nicht-druckbaren ASCII-Zeichen (0x00 bis 0x1f)
    - Keine reservierten Namen:
        - Windows: CON PRN AUX NUL COM[0-9] LPT[0-9] mit oder ohne Endung
        - Linux/macOS: . ..
    - Kein Punkt oder Leerzeichen am Ende
"""

import re
from typing import FrozenSet, Tuple


# =============================================================================
# REGELWERK
# =============================================================================

FORBIDDEN_CHARACTERS: FrozenSet[str] = frozenset('*"\\/<>:|?') | frozenset(
    chr(code) for code in range(0x00, 0x20)
)

RESERVED_DEVICE_STEMS: Tuple[str, ...] = (
    'CON', 'PRN', 'AUX', 'NUL',
    *(f'COM{i}' for i in range(10)),
    *(f'LPT{i}' for i in range(10)),
)

RESERVED_DOT_NAMES: FrozenSet[str] = frozenset({'.', '..'})

INVALID_ENDINGS: Tuple[str, ...] = ('.', ' ')


_RESERVED_STEMS_PATTERN = '|'.join(RESERVED_DEVICE_STEMS)

# Ein oder zwei Punkte, oder ein Geraetename gefolgt von Punkt bzw. Ende
INVALID_FILENAME_RESERVED_REGEX = re.compile(
    rf'^\.\.?\Z|^(?:{_RESERVED_STEMS_PATTERN})(?:\.|\Z)',
    re.IGNORECASE,
)

# Alle Regeln in einem Muster (fuer die schnelle Ja/Nein-Pruefung)
INVALID_FILENAME_REGEX = re.compile(
    r'[*"\\/<>:|?\x00-\x1f]'
    r'|^\.\.?\Z'
    rf'|^(?:{_RESERVED_STEMS_PATTERN})(?:\.|\Z)'
    r'|[. ]\Z',
    re.IGNORECASE,
)


# =============================================================================
# TITEL-WAECHTER
# =============================================================================

# objectName des Titel-Feldes innerhalb einer Dokument-Ansicht
TITLE_OBJECT_NAME = 'inlineTitle'

# Tasten, mit denen der Host die Titel-Bearbeitung bestaetigt.
# Escape bricht die Bearbeitung im Host ab und wird daher nicht abgefangen.
KEYDOWN_INTERCEPTS: FrozenSet[str] = frozenset({'Enter', 'Tab', 'ArrowDown'})

# Legacy keyCode waehrend einer IME-Komposition
COMPOSITION_KEY_CODE = 229

TOOLTIP_CLASSES: Tuple[str, ...] = ('mod-error', 'mod-wide')
TOOLTIP_PLACEMENT = 'bottom'
