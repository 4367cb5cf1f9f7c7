from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Optional

PACKAGE_LOGGER = "dist_verifier"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


class UtcFormatter(logging.Formatter):
    def formatTime(self, record: logging.LogRecord, datefmt: Optional[str] = None) -> str:
        return datetime.fromtimestamp(record.created, timezone.utc).isoformat()


#note: Diagnostics go to stderr only; stdout carries the report.
def configure_logging(verbose: bool = False) -> logging.Logger:
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(UtcFormatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
