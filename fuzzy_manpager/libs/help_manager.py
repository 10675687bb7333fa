"""
Help Manager

Manages the static help text shipped with the tool.
"""

import sys
from pathlib import Path
from typing import Optional, TextIO

from .core.constants import ErrorMessages, FileConstants


class HelpManager:
    """Manages help text and documentation"""

    def __init__(self, help_dir: Optional[Path] = None, stream: Optional[TextIO] = None):
        self.help_dir = help_dir or Path(__file__).parent.parent / FileConstants.HELP_DIR_NAME
        self.stream = stream

    def get_main_help(self) -> str:
        """Get main help text, or a short notice when the file is missing"""
        help_file = self.help_dir / FileConstants.MAIN_HELP_FILE

        if help_file.exists():
            with open(help_file, 'r', encoding='utf-8') as f:
                return f.read()
        else:
            return f"No help available: {help_file} is missing"

    def get_usage_hint(self) -> str:
        """Get the one-line pointer printed after usage errors"""
        return str(ErrorMessages.UsageError.USAGE_HINT)

    def show_help(self) -> None:
        """Print the main help text"""
        text = self.get_main_help()
        print(text, end="" if text.endswith("\n") else "\n", file=self.stream or sys.stdout)
