"""Logging configuration for the finder."""

import logging
import sys
from typing import Optional, Tuple

from classfinder.core.config.settings import settings

FALLBACK_LEVEL = logging.WARNING


def resolve_level(name: str) -> Tuple[int, bool]:
    """Map a level name to its number.

    Returns:
        (level, known). Unknown names resolve to WARNING with known=False.
    """
    level = logging.getLevelName(str(name).strip().upper())
    if isinstance(level, int):
        return level, True
    return FALLBACK_LEVEL, False


def setup_logging(level: Optional[str] = None, verbose: bool = False) -> None:
    """Configure process-wide logging.

    Level falls back to settings.LOG_LEVEL; verbose lowers it to INFO at most,
    never raising a more detailed configured level. Output goes to stderr so
    that diagnostics never interleave with match lines on stdout.
    """
    requested = level or settings.LOG_LEVEL
    resolved, known = resolve_level(requested)
    if verbose:
        resolved = min(resolved, logging.INFO)

    logging.basicConfig(
        level=resolved,
        format=settings.LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )

    if not known:
        logging.getLogger(__name__).warning(
            f"Unknown log level '{requested}', using {logging.getLevelName(FALLBACK_LEVEL)}"
        )


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name.

    Args:
        name: Usually __name__ of the calling module.

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)
