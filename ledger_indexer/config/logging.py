"""
Logging configuration.

Configures loguru sinks for the indexer process.
Sets up log rotation and retention policies.
"""

import sys

from loguru import logger

from ledger_indexer.config.constants import LOG_RETENTION, LOG_ROTATION
from ledger_indexer.config.settings import settings


def setup_logging(
    level: str | None = None,
    log_file: str | None = None,
) -> None:
    """
    Configure logger with stderr output and file rotation.

    Args:
        level: Minimum level (default: settings.log_level)
        log_file: File sink path (default: settings.log_file, empty disables)
    """
    level = level or settings.log_level
    log_file = settings.log_file if log_file is None else log_file

    logger.remove()
    logger.add(sys.stderr, level=level)

    if log_file:
        logger.add(
            log_file,
            rotation=LOG_ROTATION,
            retention=LOG_RETENTION,
            level=level,
            encoding="utf-8",
        )

    logger.info("Starting ledger indexer...")
