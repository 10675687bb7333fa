"""
Manual Page Clients

Handles low-level man and tldr invocations.
"""

import logging
import subprocess
from typing import Callable, List

from ..core.constants import ToolConstants
from ..core.exceptions import CollaboratorError

logger = logging.getLogger(__name__)


class ManClient:
    """Low-level client for the man binary"""

    def __init__(self, runner: Callable[..., subprocess.CompletedProcess] = subprocess.run):
        """
        Initialize man client

        Args:
            runner: Function with the subprocess.run signature
        """
        self._run = runner
        self.binary = str(ToolConstants.Binary.MANUAL)

    def list_index(self) -> str:
        """
        List every installed manual page as `name (section) - description`

        Returns:
            str: Candidate lines, empty when the index is empty

        Raises:
            CollaboratorError: If man cannot be started or times out
        """
        cmd = [self.binary, *ToolConstants.INDEX_ARGS]
        logger.debug(f"Listing manual index: {' '.join(cmd)}")

        try:
            result = self._run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                text=True,
                timeout=ToolConstants.INDEX_TIMEOUT
            )
        except subprocess.TimeoutExpired:
            raise CollaboratorError(f"Manual index listing timed out: {' '.join(cmd)}")
        except OSError as e:
            raise CollaboratorError(f"Failed to list manual index: {e}")

        # man -k exits non-zero when nothing matches; the output is still usable
        if result.returncode != 0:
            logger.debug(f"Manual index exited with status {result.returncode}")
        return result.stdout or ""

    def exists(self, name: str) -> bool:
        """
        Check whether a manual entry exists, equivalent to `man -w`

        Args:
            name: Command name

        Returns:
            bool: True if man can locate a page for the name
        """
        cmd = [self.binary, *ToolConstants.LOCATE_ARGS, name]
        logger.debug(f"Locating manual page: {' '.join(cmd)}")

        try:
            result = self._run(
                cmd,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                timeout=ToolConstants.PROBE_TIMEOUT
            )
        except (subprocess.TimeoutExpired, OSError) as e:
            logger.debug(f"Manual lookup for {name} failed: {e}")
            return False

        return result.returncode == 0

    def render_command(self, name: str, section: str = "") -> List[str]:
        """
        Build the argv that renders a page in the terminal

        Args:
            name: Command name
            section: Manual section, omitted when empty

        Returns:
            List of command arguments for man
        """
        cmd = [self.binary]
        if section:
            cmd.append(section)
        cmd.append(name)
        return cmd


class TldrClient:
    """Low-level client for the tldr example provider"""

    def __init__(self, runner: Callable[..., subprocess.CompletedProcess] = subprocess.run):
        self._run = runner
        self.binary = str(ToolConstants.Binary.EXAMPLES)

    def fetch(self, name: str) -> str:
        """
        Fetch example snippets for a command

        Args:
            name: Command name

        Returns:
            str: Example text, empty when tldr has no page or fails
        """
        cmd = [self.binary, name]
        logger.debug(f"Fetching examples: {' '.join(cmd)}")

        try:
            result = self._run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                text=True,
                timeout=ToolConstants.EXAMPLES_TIMEOUT
            )
        except (subprocess.TimeoutExpired, OSError) as e:
            logger.debug(f"Example lookup for {name} failed: {e}")
            return ""

        if result.returncode != 0:
            return ""
        return (result.stdout or "").strip("\n")
