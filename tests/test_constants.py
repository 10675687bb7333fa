#!/usr/bin/env python3
"""
Shared Test Constants

Common constants and fake collaborators used across all test suites.
"""

from typing import Dict, List, Optional


class CommonTestConstants:
    """Constants shared across all test suites"""

    INDEX_LINES = [
        "curl (1)             - transfer a URL",
        "git (1)              - the stupid content tracker",
        "printf (3)           - formatted output conversion",
        "printf (1)           - format and print data",
    ]
    INDEX_TEXT = "\n".join(INDEX_LINES) + "\n"

    KNOWN_PAGES = {"curl", "git", "printf", "ls"}
    UNKNOWN_PAGE = "zzznotacommand"

    GIT_EXAMPLES = "git\n\n  Distributed version control system.\n\n  - Clone a repository:\n    git clone url"

    ALL_TOOLS = {"fzf", "man", "bat", "tldr"}
    REQUIRED_TOOLS = {"fzf", "man"}


def make_which(available) -> callable:
    """Build a shutil.which replacement that knows only the given programs"""
    available = set(available)

    def which(program: str) -> Optional[str]:
        return f"/usr/bin/{program}" if program in available else None

    return which


class FakeManual:
    """Records man invocations instead of running them"""

    def __init__(self, known=CommonTestConstants.KNOWN_PAGES, index=CommonTestConstants.INDEX_TEXT):
        self.known = set(known)
        self.index = index
        self.exists_calls: List[str] = []
        self.index_calls = 0

    def list_index(self) -> str:
        self.index_calls += 1
        return self.index

    def exists(self, name: str) -> bool:
        self.exists_calls.append(name)
        return name in self.known

    def render_command(self, name: str, section: str = "") -> List[str]:
        return ["man", section, name] if section else ["man", name]


class FakeExamples:
    """Returns canned tldr output"""

    def __init__(self, pages: Optional[Dict[str, str]] = None):
        self.pages = pages or {}
        self.fetch_calls: List[str] = []

    def fetch(self, name: str) -> str:
        self.fetch_calls.append(name)
        return self.pages.get(name, "")


class FakeFinder:
    """Returns a fixed selection and records what it was given"""

    def __init__(self, selection: str = ""):
        self.selection = selection
        self.calls: List[Dict[str, str]] = []

    def select(self, candidates: str, preview_command: str, header: str) -> str:
        self.calls.append({
            "candidates": candidates,
            "preview_command": preview_command,
            "header": header,
        })
        return self.selection


class RecordingExec:
    """Stands in for os.execvp"""

    def __init__(self):
        self.calls: List[List[str]] = []

    def __call__(self, program: str, argv: List[str]) -> None:
        self.calls.append(list(argv))


class CompletedStub:
    """Minimal subprocess.CompletedProcess stand-in"""

    def __init__(self, returncode: int = 0, stdout: str = ""):
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = ""


class RecordingRunner:
    """Stands in for subprocess.run, replaying queued results"""

    def __init__(self, *results):
        self.results = list(results)
        self.calls: List[Dict] = []

    def __call__(self, cmd, **kwargs):
        self.calls.append({"cmd": list(cmd), **kwargs})
        result = self.results.pop(0) if self.results else CompletedStub()
        if isinstance(result, BaseException):
            raise result
        return result
