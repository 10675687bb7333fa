"""
Fuzzy Manpager Library

Interactive manual page browser built on fzf, man, bat and tldr.
"""

__version__ = "1.0.0"

# Core libraries
from .core import (
    ConfigManager,
    FuzzyManpagerError, ConfigurationError, MissingDependencyError, UsageError,
    UnknownOptionError, CollaboratorError,
    ToolConstants, PreviewConstants, FinderConstants, ErrorMessages, FileConstants
)

# Manual page libraries
from .manpage import (
    CapabilityProber, CapabilitySet, DisplayMode, effective_mode,
    ManClient, TldrClient, FinderOptions, FzfClient,
    PreviewPipelineBuilder, PreviewVariant,
    SelectionResolver, DirectTargetResolver, ManualTarget, DisplayOrchestrator
)

# Main application and help
from .help_manager import HelpManager
from .main_app import FuzzyManpager, RunSettings, main

__all__ = [
    # Core
    'ConfigManager',
    'FuzzyManpagerError',
    'ConfigurationError',
    'MissingDependencyError',
    'UsageError',
    'UnknownOptionError',
    'CollaboratorError',
    'ToolConstants',
    'PreviewConstants',
    'FinderConstants',
    'ErrorMessages',
    'FileConstants',
    # Manual pages
    'CapabilityProber',
    'CapabilitySet',
    'DisplayMode',
    'effective_mode',
    'ManClient',
    'TldrClient',
    'FinderOptions',
    'FzfClient',
    'PreviewPipelineBuilder',
    'PreviewVariant',
    'SelectionResolver',
    'DirectTargetResolver',
    'ManualTarget',
    'DisplayOrchestrator',
    # Main
    'HelpManager',
    'FuzzyManpager',
    'RunSettings',
    'main'
]
