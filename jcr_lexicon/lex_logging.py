"""
Logging configuration for jcr-lexicon.

Usage in library modules:
    from jcr_lexicon.lex_logging import get_logger
    logger = get_logger(__name__)

The root logger name is "jcrlex". Nothing is emitted until an application
(the CLI, or a host service) calls configure_logging().
"""

import logging
import sys

_LOGGER_NAME = "jcrlex"


def get_logger(name: str = None) -> logging.Logger:
    """
    Return a child logger under the jcrlex hierarchy.

    Args:
        name: Module __name__, or None for the root jcrlex logger.

    Returns:
        logging.Logger instance
    """
    if name is None or name == _LOGGER_NAME:
        return logging.getLogger(_LOGGER_NAME)
    # "jcr_lexicon.validation.qualified_validators" -> "jcrlex.qualified_validators"
    short = name.rsplit(".", 1)[-1]
    return logging.getLogger(f"{_LOGGER_NAME}.{short}")


def configure_logging(verbose: bool = False, quiet: bool = False, level: str = None) -> None:
    """
    Configure the jcrlex logger hierarchy.

    Levels:
        --verbose / -v  -> DEBUG   (per-segment and per-prefix detail)
        (default)       -> ``level`` if given, else WARNING
        --quiet / -q    -> ERROR

    Args:
        verbose: Enable DEBUG-level output.
        quiet:   Suppress everything below ERROR.
        level:   Level name from settings (e.g. "INFO"), used when neither flag is set.
    """
    if verbose:
        resolved = logging.DEBUG
    elif quiet:
        resolved = logging.ERROR
    elif level:
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            resolved = logging.WARNING
    else:
        resolved = logging.WARNING

    root_logger = logging.getLogger(_LOGGER_NAME)
    root_logger.setLevel(resolved)

    # Avoid duplicate handlers when called multiple times
    if root_logger.handlers:
        for handler in root_logger.handlers:
            handler.setLevel(resolved)
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(resolved)
    handler.setFormatter(_LexFormatter())
    root_logger.addHandler(handler)

    root_logger.propagate = False


class _LexFormatter(logging.Formatter):
    """Level and message only; messages already carry their [TAG]."""

    def format(self, record: logging.LogRecord) -> str:
        return f"{record.levelname:<7} {record.getMessage()}"
