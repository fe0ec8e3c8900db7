"""Centralized path management for cra.

All cra-related files live under ~/.cra/ (or $CRA_HOME when set):
- ~/.cra/debug/cra.log  - Rotating log of optimizer runs
- ~/.cra/debug-mode     - If present, log at DEBUG level
"""

import logging
import os
from pathlib import Path

_TRUTHY = {"1", "true", "yes", "on"}


def cra_home() -> Path:
    """Return the cra home directory ($CRA_HOME or ~/.cra/)."""
    override = os.environ.get("CRA_HOME")
    d = Path(override) if override else Path.home() / ".cra"
    d.mkdir(parents=True, exist_ok=True)
    return d


def debug_dir() -> Path:
    """Return the debug/logs directory (~/.cra/debug/)."""
    d = cra_home() / "debug"
    d.mkdir(parents=True, exist_ok=True)
    return d


def debug_enabled() -> bool:
    """Check if debug logging is enabled.

    Enabled by a truthy CRA_DEBUG env var, or by a ~/.cra/debug-mode file
    (just needs to exist).
    """
    env = os.environ.get("CRA_DEBUG")
    if env is not None:
        return env.strip().lower() in _TRUTHY
    return (cra_home() / "debug-mode").exists()


def set_debug(enabled: bool = True) -> None:
    """Enable or disable persistent debug mode."""
    flag = cra_home() / "debug-mode"
    if enabled:
        flag.touch()
    elif flag.exists():
        flag.unlink()


def log_file(name: str | None = None) -> Path:
    """Get the path to a log file in the debug directory (default cra.log)."""
    return debug_dir() / (name or "cra.log")


def configure_logger(name: str, log_name: str | None = None, max_bytes: int = 10_000_000) -> logging.Logger:
    """Configure a logger that always writes to file with rotation.

    Args:
        name: Logger name (e.g., "cra.cli")
        log_name: Optional filename override. If None, logs go to
                  ~/.cra/debug/cra.log
        max_bytes: Maximum log file size before rotation (default 10MB)

    Returns:
        Configured logger instance
    """
    from logging.handlers import RotatingFileHandler

    logger = logging.getLogger(name)

    # Avoid adding duplicate handlers
    if logger.handlers:
        return logger

    handler = RotatingFileHandler(
        log_file(log_name),
        maxBytes=max_bytes,
        backupCount=1,
    )
    handler.setFormatter(logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s", datefmt="%H:%M:%S"
    ))
    logger.addHandler(handler)
    logger.propagate = False

    if debug_enabled():
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)

    return logger
