# src/taskmaster/logging_setup.py

from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path

from .config import DEFAULT_LOG_DIR, Config

LOG_FILE_NAME = "taskmasterpro.log"
LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUPS = 5


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the console readable:
    - allow taskmaster logs at the configured level
    - suppress Python warnings (captured as 'py.warnings') unless ERROR+
    - any other third-party logger only at ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name

        if name == "taskmaster" or name.startswith("taskmaster."):
            return True

        if name == "py.warnings":
            return record.levelno >= logging.ERROR

        return record.levelno >= logging.ERROR


def setup_logging(
    config: Config,
    *,
    log_dir: str | Path = DEFAULT_LOG_DIR,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Configure logging from the loaded config:
    - Console handler at config.log_level, filtered
    - Rotating file handler with everything

    Safe to call again (e.g. once the real config is known): handlers are replaced.
    """
    console_level = config.log_level_value

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    log_dir = Path(log_dir)
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.handlers.RotatingFileHandler(
            str(log_dir / LOG_FILE_NAME),
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUPS,
            encoding="utf-8",
        )
    except OSError:
        # Console-only logging is still usable.
        logging.getLogger(__name__).warning("Cannot open log file in %s", log_dir, exc_info=True)
    else:
        fh.setLevel(file_level)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)
