"""
Selection Resolution

Turns either a finder result line or a command-line argument into the
manual page that will be displayed.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..core.protocols import ManualProvider

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ManualTarget:
    """The (name, section) pair identifying the page to display"""
    name: str
    section: str = ""

    def __str__(self) -> str:
        return f"{self.name}({self.section})" if self.section else self.name


class SelectionResolver:
    """Parses `name (section) description` lines returned by the finder"""

    @staticmethod
    def parse(line: Optional[str]) -> Optional[ManualTarget]:
        """
        Extract the command name and section from a candidate line

        Args:
            line: Line emitted by the finder, empty when the user cancelled

        Returns:
            ManualTarget, or None when nothing was chosen
        """
        fields = (line or "").split()
        if not fields:
            return None

        name = fields[0]
        section = fields[1].strip("()") if len(fields) > 1 else ""
        return ManualTarget(name=name, section=section)


class DirectTargetResolver:
    """Resolves a command name given on the command line"""

    def __init__(self, manual: ManualProvider):
        self.manual = manual

    def resolve(self, name: str) -> Optional[ManualTarget]:
        """
        Check the manual index for the name

        Args:
            name: Command name supplied as a positional argument

        Returns:
            ManualTarget with an empty section (man picks it), or None when
            the index has no entry for the name
        """
        name = (name or "").strip()
        if not name:
            return None

        if self.manual.exists(name):
            logger.debug(f"Direct target found in manual index: {name}")
            return ManualTarget(name=name)

        logger.debug(f"Direct target not in manual index: {name}")
        return None
