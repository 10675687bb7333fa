"""
Fuzzy Manpager

Fuzzy-search the installed manual pages with fzf, preview them with
optional bat highlighting and tldr examples, and open the chosen one.
"""

__version__ = "1.0.0"
__author__ = "fzm contributors"

from .libs import (
    # Core
    ConfigManager, FuzzyManpagerError, ConfigurationError, MissingDependencyError,
    UsageError, UnknownOptionError, CollaboratorError,
    # Manual pages
    CapabilityProber, CapabilitySet, DisplayMode, PreviewPipelineBuilder, PreviewVariant,
    SelectionResolver, DirectTargetResolver, ManualTarget, DisplayOrchestrator,
    # Main
    HelpManager, FuzzyManpager, RunSettings, main
)

__all__ = [
    'ConfigManager',
    'FuzzyManpagerError',
    'ConfigurationError',
    'MissingDependencyError',
    'UsageError',
    'UnknownOptionError',
    'CollaboratorError',
    'CapabilityProber',
    'CapabilitySet',
    'DisplayMode',
    'PreviewPipelineBuilder',
    'PreviewVariant',
    'SelectionResolver',
    'DirectTargetResolver',
    'ManualTarget',
    'DisplayOrchestrator',
    'HelpManager',
    'FuzzyManpager',
    'RunSettings',
    'main'
]
