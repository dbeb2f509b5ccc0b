# src/config/logging_config.py

"""Per-run timestamped logging for catalog_cart.

Every launch writes a ``logs/run_<YYYYmmdd_HHMMSS>.log`` file that
receives all ``catalog_cart.*`` records at DEBUG.  The console only shows
records at ``Settings.CONSOLE_LOG_LEVEL`` and above (WARNING unless
``CATALOG_CART_LOG_LEVEL`` says otherwise), on stderr so JSON output on
stdout stays parseable.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from src.config.settings import Settings

_DETAILED_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | %(module)s:%(funcName)s:%(lineno)d | "
    "%(message)s"
)

_CONSOLE_FORMAT = "%(levelname)-8s | %(name)s | %(message)s"

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _console_level() -> int:
    """Resolve the configured console level, falling back to WARNING."""
    level = logging.getLevelName(Settings.CONSOLE_LOG_LEVEL)
    return level if isinstance(level, int) else logging.WARNING


def setup_logging(logs_dir: Path | None = None) -> Path:
    """Attach file and console handlers to the ``catalog_cart`` logger.

    Args:
        logs_dir: Directory for the run log; defaults to
            ``Settings.LOGS_DIR``.

    Returns:
        Path of the log file for this run.  Calling again after handlers
        are attached returns a fresh path without adding handlers.
    """
    directory = logs_dir or Settings.LOGS_DIR
    directory.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = directory / f"run_{timestamp}.log"

    project_logger = logging.getLogger("catalog_cart")
    project_logger.setLevel(logging.DEBUG)

    if project_logger.handlers:
        return log_file

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(_DETAILED_FORMAT, datefmt=_DATE_FORMAT)
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(_console_level())
    console_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))

    project_logger.addHandler(file_handler)
    project_logger.addHandler(console_handler)

    project_logger.info("Run log opened at %s", log_file)
    return log_file
