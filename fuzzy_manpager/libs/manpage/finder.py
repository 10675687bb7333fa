"""
Fuzzy Finder Client

Builds the fzf command line and runs the interactive session.
"""

import logging
import subprocess
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from ..core.constants import FinderConstants, ToolConstants
from ..core.exceptions import CollaboratorError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FinderOptions:
    """fzf settings; key bindings and colors are passed through verbatim"""
    prompt: str = FinderConstants.PROMPT
    pointer: str = FinderConstants.POINTER
    marker: str = FinderConstants.MARKER
    height: str = FinderConstants.HEIGHT
    preview_window: str = FinderConstants.PREVIEW_WINDOW
    colors: List[str] = field(default_factory=list)
    bindings: List[str] = field(default_factory=list)
    extra_options: List[str] = field(default_factory=list)

    @classmethod
    def from_config(cls, section: Optional[Dict[str, Any]]) -> "FinderOptions":
        """
        Create options from the `finder` configuration section

        Args:
            section: Validated section, may be None or empty

        Returns:
            FinderOptions with defaults for missing keys
        """
        section = section or {}
        overrides = {key: value for key, value in section.items()
                     if key in cls.__dataclass_fields__ and value is not None}
        return cls(**overrides)

    def build_args(self, preview_command: str, header: str) -> List[str]:
        """
        Build the full fzf argv

        Args:
            preview_command: Shell command run for the highlighted line
            header: Text shown above the candidate list

        Returns:
            List of command arguments for fzf
        """
        args = [str(ToolConstants.Binary.FINDER)]
        args.extend(FinderConstants.LAYOUT_OPTIONS)
        args.extend([
            f"--height={self.height}",
            f"--prompt={self.prompt}",
            f"--pointer={self.pointer}",
            f"--marker={self.marker}",
            f"--header={header}",
            f"--preview={preview_command}",
            f"--preview-window={self.preview_window}",
        ])
        for binding in [*FinderConstants.KEY_BINDINGS, *self.bindings]:
            args.append(f"--bind={binding}")
        for color in [*FinderConstants.COLORS, *self.colors]:
            args.append(f"--color={color}")
        args.extend([
            f"--preview-label={FinderConstants.PREVIEW_LABEL}",
            f"--preview-label-pos={FinderConstants.PREVIEW_LABEL_POS}",
            f"--scroll-off={FinderConstants.SCROLL_OFF}",
        ])
        # Single selection only; --no-multi stays after any user options
        args.extend(self.extra_options)
        args.extend(FinderConstants.BEHAVIOUR_OPTIONS)
        return args


class FzfClient:
    """Runs fzf over the candidate list"""

    def __init__(self, options: Optional[FinderOptions] = None,
                 runner: Callable[..., subprocess.CompletedProcess] = subprocess.run):
        self.options = options or FinderOptions()
        self._run = runner

    def select(self, candidates: str, preview_command: str, header: str) -> str:
        """
        Run an interactive session

        Args:
            candidates: Newline separated candidate lines fed on stdin
            preview_command: Preview pipeline for the highlighted line
            header: Header text

        Returns:
            str: The chosen line, empty when the user exited without choosing

        Raises:
            CollaboratorError: If fzf cannot be started or reports an error
        """
        cmd = self.options.build_args(preview_command, header)
        logger.debug(f"Starting finder with {len(cmd) - 1} options")

        try:
            result = self._run(
                cmd,
                input=candidates,
                stdout=subprocess.PIPE,
                text=True
            )
        except OSError as e:
            raise CollaboratorError(f"Failed to start fzf: {e}")

        if result.returncode in (FinderConstants.NO_MATCH_EXIT_CODE, FinderConstants.INTERRUPTED_EXIT_CODE):
            logger.debug(f"Finder closed without a selection (status {result.returncode})")
            return ""

        if result.returncode != 0:
            raise CollaboratorError(f"fzf exited with status {result.returncode}")

        lines = (result.stdout or "").splitlines()
        return lines[0] if lines else ""
