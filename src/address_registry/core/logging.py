"""Loguru logging configuration.

Console output is human-readable.  When a ``log_dir`` is provided, every
record also goes to a rotating log file, and import statistics (records
bound with ``import_stats``) are written as JSON lines to a separate file so
long-running imports can be tracked by tooling.
"""

import sys
from pathlib import Path

from loguru import logger

_LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | {name}:{function}:{line} | {message}"

LOG_FILE_NAME = "address-registry.log"
IMPORT_STATS_FILE_NAME = "import-stats.jsonl"


def _has_import_stats(record: dict) -> bool:
    return "import_stats" in record["extra"]


def setup_logging(log_level: str = "INFO", log_dir: str | None = None) -> None:
    """Configure Loguru sinks.

    Args:
        log_level: Minimum log level to emit.
        log_dir: Optional directory for log files.  When set, a rotating
            text log (rotated every 24 hours, retained 7 days) and a JSON
            lines import statistics file are added.
    """
    level = log_level.upper()
    logger.remove()
    logger.add(sys.stderr, level=level, format=_LOG_FORMAT)

    if not log_dir:
        return

    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_path / LOG_FILE_NAME,
        level=level,
        format=_LOG_FORMAT,
        rotation="24h",
        retention="7 days",
    )
    # Statistics are kept regardless of the console level
    logger.add(
        log_path / IMPORT_STATS_FILE_NAME,
        level="INFO",
        serialize=True,
        filter=_has_import_stats,
        rotation="24h",
        retention="7 days",
    )
