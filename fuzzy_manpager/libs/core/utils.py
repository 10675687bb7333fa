"""
Core Utilities

Common utility functions used across the Fuzzy Manpager tool.
"""

import logging
import os
import sys
from typing import Mapping, Optional, TextIO

from .constants import Colors, PreviewConstants


def setup_logging(debug: bool = False) -> None:
    """
    Set up logging configuration for the application.
    Separates WARNING/INFO to stdout and ERROR to stderr.

    The tool is interactive, so only warnings and errors are shown unless
    debug logging is requested.

    Args:
        debug: Enable debug logging level
    """
    level = logging.DEBUG if debug else logging.WARNING

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(
        '%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Create stdout handler for INFO, WARNING, DEBUG
    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(level)
    stdout_handler.setFormatter(formatter)
    stdout_handler.addFilter(lambda record: record.levelno < logging.ERROR)

    # Create stderr handler for ERROR and CRITICAL only
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.ERROR)
    stderr_handler.setFormatter(formatter)

    root_logger.addHandler(stdout_handler)
    root_logger.addHandler(stderr_handler)

    if debug:
        logger = logging.getLogger(__name__)
        logger.debug("Debug mode enabled")


def is_output_piped(stream: Optional[TextIO] = None) -> bool:
    """
    Check if output is being piped (not connected to terminal).

    Args:
        stream: Stream to check (defaults to stdout)

    Returns:
        bool: True if output is piped, False if connected to terminal
    """
    stream = stream or sys.stdout
    isatty = getattr(stream, "isatty", None)
    return not (isatty and isatty())


def colors_enabled(stream: Optional[TextIO] = None) -> bool:
    """Colors are used only on a terminal and when NO_COLOR is unset"""
    if os.environ.get("NO_COLOR"):
        return False
    return not is_output_piped(stream)


def colorize(text: str, *styles: Colors, stream: Optional[TextIO] = None) -> str:
    """
    Wrap text in ANSI styles when the target stream supports them.

    Args:
        text: Text to style
        styles: One or more Colors members
        stream: Stream the text is written to (defaults to stdout)

    Returns:
        str: Styled text, or the text unchanged when colors are disabled
    """
    if not styles or not colors_enabled(stream):
        return text
    prefix = "".join(str(style) for style in styles)
    return f"{prefix}{text}{Colors.RESET}"


def format_banner(title: str, width: int = PreviewConstants.BANNER_WIDTH) -> str:
    """
    Build a three-line box with the title centered inside it.

    Args:
        title: Block title (e.g. "MANPAGE")
        width: Inner width of the box

    Returns:
        str: Box-drawing banner without a trailing newline
    """
    inner_width = max(width, len(title) + 2)
    return "\n".join([
        "╔" + "═" * inner_width + "╗",
        "║" + title.center(inner_width) + "║",
        "╚" + "═" * inner_width + "╝",
    ])


def get_preview_width(environ: Optional[Mapping[str, str]] = None,
                      default: int = PreviewConstants.DEFAULT_WIDTH) -> int:
    """
    Read the preview column count supplied by the finder.

    Args:
        environ: Environment mapping (defaults to os.environ)
        default: Width used when the variable is unset or not a positive integer

    Returns:
        int: Column count for manual page reflow
    """
    environ = os.environ if environ is None else environ
    value = environ.get(PreviewConstants.WIDTH_ENV_VAR, "")
    try:
        width = int(value)
    except (TypeError, ValueError):
        return default
    return width if width > 0 else default


def create_user_friendly_error(error_type: str, details: str, suggestions: Optional[list] = None) -> str:
    """
    Create a user-friendly error message with suggestions

    Args:
        error_type: Type of error (e.g., "Error")
        details: Detailed error description
        suggestions: List of suggested solutions

    Returns:
        str: Formatted error message
    """
    message = f"{error_type}: {details}"

    if suggestions:
        for suggestion in suggestions:
            message += f"\n  - {suggestion}"

    return message
