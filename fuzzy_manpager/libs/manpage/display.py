"""
Final Display

Prints the optional examples block and hands the terminal to man.
"""

import logging
import os
import subprocess
import sys
from typing import Callable, List, Optional, TextIO

from ..core.constants import Colors, ErrorMessages, PreviewConstants
from ..core.protocols import ExampleProvider, ManualProvider
from ..core.utils import colorize, format_banner
from .capabilities import CapabilitySet, DisplayMode
from .selection import ManualTarget

logger = logging.getLogger(__name__)


class DisplayOrchestrator:
    """The only component allowed to replace the running process"""

    def __init__(
        self,
        manual: ManualProvider,
        examples: ExampleProvider,
        stream: Optional[TextIO] = None,
        exec_func: Optional[Callable[[str, List[str]], None]] = None,
        spawn_func: Callable[..., subprocess.CompletedProcess] = subprocess.run,
    ):
        """
        Initialize display orchestrator

        Args:
            manual: Manual provider used to build the renderer command
            examples: Example provider for the TLDR block
            stream: Output stream for the examples block (defaults to stdout)
            exec_func: Process replacement function (defaults to os.execvp on POSIX)
            spawn_func: Foreground child runner used where exec is unavailable
        """
        self.manual = manual
        self.examples = examples
        self.stream = stream
        if exec_func is None and os.name == "posix":
            exec_func = os.execvp
        self._exec = exec_func
        self._spawn = spawn_func

    @property
    def out(self) -> TextIO:
        return self.stream or sys.stdout

    def display(self, target: ManualTarget, mode: DisplayMode, caps: CapabilitySet) -> int:
        """
        Show the target page

        Args:
            target: Page to show
            mode: Effective display mode
            caps: Probed capabilities

        Returns:
            int: Exit status of the renderer (only reached when the process
            was not replaced)
        """
        if mode is DisplayMode.EXAMPLES_ON and caps.has_example_provider:
            self._print_examples(target)

        return self._hand_off(self.manual.render_command(target.name, target.section))

    def _print_banner(self, title: str) -> None:
        print(colorize(format_banner(title), Colors.CYAN, stream=self.out), file=self.out)

    def _print_examples(self, target: ManualTarget) -> None:
        self._print_banner(PreviewConstants.BlockTitle.EXAMPLES)

        examples = self.examples.fetch(target.name)
        if examples:
            print(examples, file=self.out)
        else:
            fallback = str(PreviewConstants.Fallback.NO_EXAMPLES_FOR).format(name=target.name)
            print(colorize(fallback, Colors.DIM, stream=self.out), file=self.out)

        print(file=self.out)
        self._print_banner(PreviewConstants.BlockTitle.MANPAGE)

    def _hand_off(self, cmd: List[str]) -> int:
        """Give the terminal to the renderer and never come back, if possible"""
        logger.debug(f"Handing terminal to renderer: {' '.join(cmd)}")
        self.out.flush()

        try:
            if self._exec is not None:
                self._exec(cmd[0], cmd)
                # Only reached when exec_func does not replace the process
                return 0
            return self._spawn(cmd).returncode
        except OSError as e:
            message = str(ErrorMessages.ManualError.RENDERER_FAILED).format(error=e)
            logger.error(message)
            return 1
