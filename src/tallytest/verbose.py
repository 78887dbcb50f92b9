"""Logger configuration for check output."""

from __future__ import annotations

import logging
import sys
from pathlib import Path


def setup_logger(
    debug_file: Path | None = None,
    verbose: bool = False,
    logger_name: str = "tallytest",
) -> logging.Logger:
    """
    Configure and return a logger that receives check outcomes.

    Writes to debug_file when one is given, and to stderr when verbose=True.

    Args:
        debug_file: Path to a log file, appended to. Parent directories are created.
        verbose: If True, also log to stderr.
        logger_name: Name of the logger instance. Each run needs its own name.

    Returns:
        Configured logger instance.

    Raises:
        RuntimeError: if a logger with this name already has handlers attached.
    """
    logger = logging.getLogger(logger_name)

    if logger.handlers:
        raise RuntimeError(
            f"Logger '{logger_name}' already exists with handlers attached; "
            "use a unique logger_name per run"
        )

    logger.disabled = False
    logger.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(levelname)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    if debug_file is not None:
        debug_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(debug_file, mode="a")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if verbose:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(logging.DEBUG)
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)

    return logger
