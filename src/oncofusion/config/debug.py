"""Logging for OncoFusion.

Everything logs under the "oncofusion" logger, which writes to stderr so that
`fusion read --format json|tsv` output on stdout stays machine-readable.
The extractor reports each separator candidate at DEBUG; the reader reports
filtered and flipped events at DEBUG.

The level comes from ONCOFUSION_LOG_LEVEL (DEBUG, INFO, WARN, ERROR; default
INFO) or from set_log_level(), which the CLI calls for --log-level.
"""

import logging
import os
import sys

LOG_LEVEL_ENV = "ONCOFUSION_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

_root: logging.Logger | None = None


def _configure_root(level: int) -> logging.Logger:
    root = logging.getLogger("oncofusion")
    root.handlers.clear()
    root.setLevel(level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    ))
    root.addHandler(handler)
    root.propagate = False
    return root


def get_logger(name: str | None = None) -> logging.Logger:
    """Logger under the oncofusion namespace, configuring the root on first use.

    Example:
        logger = get_logger(__name__)
        logger.debug(f"Separator {separator!r} gave {candidate!r}")
    """
    global _root

    if _root is None:
        env_level = os.environ.get(LOG_LEVEL_ENV, "").upper()
        _root = _configure_root(_LEVELS.get(env_level, _LEVELS[DEFAULT_LOG_LEVEL]))

    if name is None or name == "oncofusion":
        return _root
    if not name.startswith("oncofusion."):
        name = f"oncofusion.{name}"
    return logging.getLogger(name)


def set_log_level(level: str) -> None:
    """Set the level of every oncofusion logger.

    Raises:
        ValueError: If the level is not one of DEBUG, INFO, WARN, ERROR
    """
    global _root

    numeric = _LEVELS.get(level.upper())
    if numeric is None:
        raise ValueError(f"Invalid log level: {level}. Must be one of: DEBUG, INFO, WARN, ERROR")

    if _root is None:
        _root = _configure_root(numeric)
    else:
        _root.setLevel(numeric)


def reset_logger() -> None:
    """Drop the configured handler so the next get_logger() starts afresh (tests)."""
    global _root
    if _root is not None:
        _root.handlers.clear()
    _root = None
