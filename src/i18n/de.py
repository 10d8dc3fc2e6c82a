# -*- coding: utf-8 -*-
"""
Deutsche UI-Texte.

Verwendung:
    from i18n import de as texts
    texts.FILENAME_ERROR_CHARS
"""

# =============================================================================
# DATEINAMEN-PRUEFUNG
# =============================================================================

FILENAME_ERROR_CHARS = 'Dateiname darf keines dieser Zeichen enthalten: * " \\ / < > : | ?'
FILENAME_ERROR_ENDING = "Dateiname darf nicht mit einem Punkt oder Leerzeichen enden."
FILENAME_ERROR_RESERVED = "Dateiname darf keiner dieser Namen sein: CON PRN AUX NUL COM[0-9] LPT[0-9]"
FILENAME_ERROR_DEFAULT = "Ungueltiger Dateiname."

# =============================================================================
# TITEL-WAECHTER
# =============================================================================

TITLE_GUARD_NOT_FOUND = "Dokumenttitel nicht gefunden, erhalten: {found}"
