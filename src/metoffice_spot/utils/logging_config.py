"""Console logging with colored level tags for the metoffice-spot CLI."""
from __future__ import annotations
import logging
import os
import sys
from typing import Dict, Optional, TextIO


def stream_supports_ansi(stream: Optional[TextIO] = None) -> bool:
    """Decide whether ANSI colors should be written to ``stream``.

    NO_COLOR (https://no-color.org/) always wins over FORCE_COLOR. Without
    either, colors are used only when the stream is a TTY.

    Args:
        stream: Output stream (default: sys.stderr).

    Returns:
        True if ANSI codes should be emitted.
    """
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    stream = sys.stderr if stream is None else stream
    isatty = getattr(stream, "isatty", None)
    if isatty is None or not isatty():
        return False
    if sys.platform == "win32":
        return bool(
            os.environ.get("WT_SESSION")  # Windows Terminal
            or os.environ.get("ANSICON")
            or os.environ.get("ConEmuANSI") == "ON"
            or "TERM" in os.environ  # Git Bash, Cygwin
        )
    return True


class LogColors:
    """ANSI color codes used by :class:`ColoredFormatter`."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DEBUG = '\033[36m'      # Cyan
    INFO = '\033[32m'       # Green
    WARNING = '\033[33m'    # Yellow
    ERROR = '\033[31m'      # Red
    CRITICAL = '\033[35m'   # Magenta
    MODULE = '\033[94m'     # Blue

    LEVELS: Dict[str, str] = {
        'DEBUG': DEBUG,
        'INFO': INFO,
        'WARNING': WARNING,
        'ERROR': ERROR,
        'CRITICAL': CRITICAL,
    }


class ColoredFormatter(logging.Formatter):
    """Render records as ``[LEVEL] logger.name - message``.

    Args:
        use_color: Wrap the level tag and logger name in ANSI codes.
    """

    def __init__(self, use_color: bool = True) -> None:
        super().__init__()
        self.use_color = use_color

    def _paint(self, text: str, *codes: str) -> str:
        if not self.use_color:
            return text
        return f"{''.join(codes)}{text}{LogColors.RESET}"

    def format(self, record: logging.LogRecord) -> str:
        level_color = LogColors.LEVELS.get(record.levelname, LogColors.RESET)
        level_tag = self._paint(f"[{record.levelname}]", level_color, LogColors.BOLD)
        name = self._paint(record.name, LogColors.MODULE)
        formatted = f"{level_tag} {name} - {record.getMessage()}"
        if record.exc_info:
            formatted = f"{formatted}\n{self.formatException(record.exc_info)}"
        return formatted


def configure_logging(level: int = logging.INFO, stream: Optional[TextIO] = None) -> logging.Handler:
    """Install a single colored console handler on the root logger.

    Log output goes to stderr by default so it never mixes with the URLs and
    tables the CLI prints on stdout. Calling this again replaces the handler.

    Args:
        level: Logging level (default: logging.INFO).
        stream: Output stream (default: sys.stderr).

    Returns:
        The installed handler.

    Example:
        >>> from metoffice_spot.utils.logging_config import configure_logging
        >>> configure_logging(logging.DEBUG)
    """
    stream = sys.stderr if stream is None else stream
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(ColoredFormatter(use_color=stream_supports_ansi(stream)))
    root_logger.addHandler(handler)
    return handler


__all__ = ["LogColors", "ColoredFormatter", "configure_logging", "stream_supports_ansi"]
