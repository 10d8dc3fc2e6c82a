"""
Logging-Konfiguration: Console + rotierende Log-Datei.

Der Log-Ordner kann ueber TITLE_GUARD_LOG_DIR ueberschrieben werden.
"""

import os
import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE_NAME = "title_guard.log"
LOG_DIR_ENV = "TITLE_GUARD_LOG_DIR"

_MAX_BYTES = 1 * 1024 * 1024  # 1 MB
_BACKUP_COUNT = 3

_HANDLER_ATTR = '_title_guard_handler'


def _default_log_dir() -> str:
    return os.environ.get(LOG_DIR_ENV) or os.path.join(
        os.path.dirname(os.path.abspath(__file__)), "..", "..", "logs"
    )


def setup_logging(log_dir: Optional[str] = None, level: int = logging.INFO) -> logging.Logger:
    """Konfiguriert Logging mit Console + File Output.

    Mehrfacher Aufruf fuegt keine weiteren Handler hinzu.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if any(getattr(h, _HANDLER_ATTR, False) for h in root_logger.handlers):
        return root_logger

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    setattr(console_handler, _HANDLER_ATTR, True)
    root_logger.addHandler(console_handler)

    # File Handler mit Rotation (1 MB, 3 Backups)
    log_dir = log_dir or _default_log_dir()
    log_file = os.path.join(log_dir, LOG_FILE_NAME)
    try:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=_MAX_BYTES,
            backupCount=_BACKUP_COUNT,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        setattr(file_handler, _HANDLER_ATTR, True)
        root_logger.addHandler(file_handler)
        root_logger.info(f"File-Logging aktiviert: {log_file}")
    except (OSError, PermissionError) as e:
        root_logger.warning(f"File-Logging nicht moeglich, nur Console: {e}")

    return root_logger
