"""
Unified logging utilities for the constlabel package.

Exports:
    - logger: Global Loguru logger (ready for use/import).
    - setup_console: (Re)configure the stderr sink and enable package logs.
    - setup_logfile: Add file logging with rotation/compression.
    - setup_json_logfile: Add a JSON-format log file for machine parsing.

The package is a library, so its records are disabled on import
(``logger.disable("constlabel")``); applications and the CLI opt in with
``logger.enable("constlabel")`` or one of the setup helpers below.
"""

import os
import sys
from loguru import logger

__all__ = [
    "logger",
    "setup_console",
    "setup_logfile",
    "setup_json_logfile",
]

PACKAGE = "constlabel"

_console_sink_id = None


def setup_console(level: str = "WARNING", colorize: bool = True) -> None:
    """
    Replace the console sink with one at the requested level and enable package logs.

    Args:
        level (str): Logging level (DEBUG, INFO, etc.).
        colorize (bool): Colorize console output.
    """
    global _console_sink_id
    if _console_sink_id is None:
        # Drop loguru's default DEBUG handler once; later calls only swap ours
        logger.remove()
    else:
        logger.remove(_console_sink_id)
    _console_sink_id = logger.add(sys.stderr, level=level.upper(), colorize=colorize)
    logger.enable(PACKAGE)


def setup_logfile(
    log_path: str,
    rotation: str = "10 MB",
    retention: str = "10 days",
    compression: str = "zip",
    level: str = "INFO",
    colorize: bool = False
):
    """
    Add a rotating file handler to the global logger.

    Args:
        log_path (str): Path to the log file.
        rotation (str): Size or time string for log rotation.
        retention (str): How long to keep old logs.
        compression (str): Compression method for rotated logs.
        level (str): Logging level (DEBUG, INFO, etc.).
        colorize (bool): Colorize file output (default: False).
    """
    log_dir = os.path.dirname(log_path)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
    sink_id = logger.add(
        log_path,
        rotation=rotation,
        retention=retention,
        compression=compression,
        level=level.upper(),
        colorize=colorize,
        enqueue=True,  # Safe for multiprocessing
        backtrace=True,
        diagnose=True,
    )
    logger.enable(PACKAGE)
    logger.info(f"Loguru file logging initialized: {log_path}")
    return sink_id


def setup_json_logfile(log_path: str, **kwargs):
    """
    Add a JSON-format log file (for machine parsing).
    Args:
        log_path (str): Path to JSON log file.
        **kwargs: Passed to logger.add().
    """
    sink_id = logger.add(
        log_path,
        serialize=True,
        **kwargs
    )
    logger.enable(PACKAGE)
    logger.info(f"Loguru JSON logging initialized: {log_path}")
    return sink_id

# Example usage in any module:
# from constlabel.core.logging import logger
# logger.debug("Scanning {}", owner)
