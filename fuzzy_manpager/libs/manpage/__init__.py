"""
Manual Page Libraries

Capability probing, preview synthesis, selection resolution and final
display for the manual page browser.
"""

from .capabilities import CapabilityProber, CapabilitySet, DisplayMode, effective_mode
from .client import ManClient, TldrClient
from .display import DisplayOrchestrator
from .finder import FinderOptions, FzfClient
from .preview import PreviewPipelineBuilder, PreviewVariant
from .selection import DirectTargetResolver, ManualTarget, SelectionResolver

__all__ = [
    # Capabilities
    'CapabilityProber',
    'CapabilitySet',
    'DisplayMode',
    'effective_mode',
    # Collaborator clients
    'ManClient',
    'TldrClient',
    'FinderOptions',
    'FzfClient',
    # Core logic
    'PreviewPipelineBuilder',
    'PreviewVariant',
    'DirectTargetResolver',
    'ManualTarget',
    'SelectionResolver',
    'DisplayOrchestrator'
]
