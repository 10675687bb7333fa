"""
Protocols and Interfaces

Defines protocols (interfaces) for dependency injection and type hints.
"""

from typing import Protocol, List


class ManualProvider(Protocol):
    """Protocol for the manual page index, lookup and renderer"""

    def list_index(self) -> str:
        """Return every candidate line of the manual page index"""
        ...

    def exists(self, name: str) -> bool:
        """Check whether a manual entry exists for the name"""
        ...

    def render_command(self, name: str, section: str = "") -> List[str]:
        """Build the argv that renders a page interactively"""
        ...


class ExampleProvider(Protocol):
    """Protocol for quick-reference example providers"""

    def fetch(self, name: str) -> str:
        """Return example text for the name, empty when there is none"""
        ...


class FinderProvider(Protocol):
    """Protocol for the interactive fuzzy finder"""

    def select(self, candidates: str, preview_command: str, header: str) -> str:
        """Run an interactive session and return the chosen line (empty on cancel)"""
        ...


class HelpProvider(Protocol):
    """Protocol for help providers"""

    def show_help(self) -> None:
        """Print the main help text"""
        ...

    def get_usage_hint(self) -> str:
        """Return the one-line hint printed after usage errors"""
        ...
