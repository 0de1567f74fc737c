# storefront/config/logging_config.py

"""Per-run logging for the storefront.

Every launch writes to its own ``logs/run_YYYYMMDD_HHMMSS.log``. The
API client, the session and the views log under ``storefront.*`` and
all of it lands in that file at DEBUG.

The console only shows ``Settings.CONSOLE_LOG_LEVEL`` and above
(``STOREFRONT_LOG_LEVEL``, WARNING by default) so request chatter never
paints over the terminal UI. The first record of each run names the
backend and the state directory, which is usually the first question
when a session fails to resolve.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from storefront.config.settings import Settings

_FILE_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | "
    "%(module)s:%(funcName)s:%(lineno)d | %(message)s"
)
_CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _console_level() -> int:
    return logging.getLevelNamesMapping().get(
        Settings.CONSOLE_LOG_LEVEL, logging.WARNING,
    )


def _handler(
    handler: logging.Handler, level: int, fmt: str,
) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=_DATE_FORMAT))
    return handler


def setup_logging(logs_dir: Path | None = None) -> Path:
    """Attach the run file and console handlers to ``storefront``.

    Args:
        logs_dir: Directory for run files; ``Settings.LOGS_DIR`` if omitted.

    Returns:
        Path of this run's log file. Repeated calls keep the handlers
        installed by the first call.
    """
    logs_dir = logs_dir or Settings.LOGS_DIR
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_file = logs_dir / f"run_{datetime.now():%Y%m%d_%H%M%S}.log"

    app_logger = logging.getLogger("storefront")
    app_logger.setLevel(logging.DEBUG)
    if app_logger.handlers:
        return log_file

    app_logger.addHandler(
        _handler(
            logging.FileHandler(log_file, encoding="utf-8"),
            logging.DEBUG,
            _FILE_FORMAT,
        )
    )
    app_logger.addHandler(
        _handler(
            logging.StreamHandler(sys.stderr), _console_level(), _CONSOLE_FORMAT,
        )
    )

    for name in Settings.QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    app_logger.info(
        "Run log %s | backend %s | state dir %s",
        log_file,
        Settings.API_BASE_URL,
        Settings.STATE_DIR,
    )
    return log_file
