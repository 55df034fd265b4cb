"""Centralized logging configuration for qperf."""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional


def setup_logging(
    log_dir: Optional[Path] = None,
    verbose: bool = False,
    log_to_file: bool = False,
    log_to_console: bool = True,
) -> logging.Logger:
    """
    Configure the 'qperf' logger for a tabulation run.

    Console output goes to stderr so a report written to stdout stays
    clean. Data-quality warnings are returned to the caller in the
    results, so by default only errors reach the console; with
    verbose=True the per-event scoring trace (DEBUG) is shown as well.
    The log file, when enabled, always records the full DEBUG trace.

    Args:
        log_dir: Directory for log files (default: ./logs)
        verbose: Show the per-event trace on the console
        log_to_file: Also write a timestamped log file
        log_to_console: Whether to log to stderr (default: True)

    Returns:
        Configured logger instance

    Example:
        from qperf.logging_config import setup_logging
        logger = setup_logging(verbose=True)
        logger.debug("Starting tabulation")
    """
    logger = logging.getLogger('qperf')
    logger.setLevel(logging.DEBUG)
    logger.handlers = []

    if log_to_file:
        log_dir = Path(log_dir) if log_dir is not None else Path('logs')
        log_dir.mkdir(parents=True, exist_ok=True)

        log_file = log_dir / f'qperf_{datetime.now().strftime("%Y%m%d_%H%M%S")}.log'
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S',
            )
        )
        logger.addHandler(file_handler)

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.DEBUG if verbose else logging.ERROR)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        logger.addHandler(console_handler)

    return logger
