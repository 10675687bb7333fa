"""
Core Libraries

Shared functionality and utilities for the Fuzzy Manpager tool.
"""

from .config import ConfigManager
from .constants import (
    ToolConstants, PreviewConstants, FinderConstants,
    Colors, ErrorMessages, FileConstants
)
from .exceptions import (
    FuzzyManpagerError, ConfigurationError, MissingDependencyError, UsageError,
    UnknownOptionError, CollaboratorError
)
from .protocols import ManualProvider, ExampleProvider, FinderProvider, HelpProvider
from .utils import (
    setup_logging, is_output_piped, colors_enabled, colorize,
    format_banner, get_preview_width, create_user_friendly_error
)

__all__ = [
    # Main classes
    'ConfigManager',
    # Constants
    'ToolConstants',
    'PreviewConstants',
    'FinderConstants',
    'Colors',
    'ErrorMessages',
    'FileConstants',
    # Exceptions
    'FuzzyManpagerError',
    'ConfigurationError',
    'MissingDependencyError',
    'UsageError',
    'UnknownOptionError',
    'CollaboratorError',
    # Protocols
    'ManualProvider',
    'ExampleProvider',
    'FinderProvider',
    'HelpProvider',
    # Utilities
    'setup_logging',
    'is_output_piped',
    'colors_enabled',
    'colorize',
    'format_banner',
    'get_preview_width',
    'create_user_friendly_error'
]
