"""
Capability Probing

Detects which external collaborators are installed and derives the
effective display mode from them.
"""

import logging
import shutil
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from ..core.constants import ToolConstants
from ..core.exceptions import MissingDependencyError

logger = logging.getLogger(__name__)


class DisplayMode(Enum):
    """Whether tldr examples are shown alongside the manual page"""
    EXAMPLES_ON = "examples-on"
    EXAMPLES_OFF = "examples-off"

    @classmethod
    def from_flag(cls, show_examples: bool) -> "DisplayMode":
        return cls.EXAMPLES_ON if show_examples else cls.EXAMPLES_OFF


@dataclass(frozen=True)
class CapabilitySet:
    """Optional collaborators found on PATH at startup"""
    has_highlighter: bool = False
    has_example_provider: bool = False


def effective_mode(requested: DisplayMode, caps: CapabilitySet) -> DisplayMode:
    """
    Downgrade examples mode when no example provider is installed.

    Applying it to its own result returns the same mode.
    """
    if requested is DisplayMode.EXAMPLES_ON and not caps.has_example_provider:
        return DisplayMode.EXAMPLES_OFF
    return requested


class CapabilityProber:
    """Looks up collaborators on PATH, equivalent to `command -v`"""

    def __init__(self, which: Optional[Callable[[str], Optional[str]]] = None):
        """
        Initialize capability prober

        Args:
            which: PATH lookup function (defaults to shutil.which)
        """
        self._which = which or shutil.which

    def is_available(self, program: str) -> bool:
        """Check whether a program is on PATH"""
        path = self._which(str(program))
        logger.debug(f"Probe {program}: {path or 'not found'}")
        return path is not None

    def probe(self) -> CapabilitySet:
        """
        Probe optional collaborators

        Returns:
            CapabilitySet: Immutable capability flags; never raises
        """
        caps = CapabilitySet(
            has_highlighter=self.is_available(ToolConstants.Binary.HIGHLIGHTER),
            has_example_provider=self.is_available(ToolConstants.Binary.EXAMPLES),
        )
        logger.debug(f"Capabilities: {caps}")
        return caps

    def missing_required(self) -> List[str]:
        """List required collaborators that are not on PATH"""
        return [
            str(program) for program in ToolConstants.Binary.get_required()
            if not self.is_available(program)
        ]

    def require(self) -> None:
        """
        Verify required collaborators are installed

        Raises:
            MissingDependencyError: If fzf or man is missing
        """
        missing = self.missing_required()
        if missing:
            raise MissingDependencyError(missing)
