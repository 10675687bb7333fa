"""
Constants Module

Centralized constants for the Fuzzy Manpager tool to eliminate magic strings
and improve maintainability.
"""

from enum import Enum


class BaseStrEnum(str, Enum):
    """Base enum class that inherits from str"""

    def __str__(self) -> str:
        """Return the enum value as string"""
        return self.value

    def __repr__(self) -> str:
        """Return a detailed representation of the enum"""
        return f"{self.__class__.__name__}.{self.name}"


class ToolConstants:
    """External collaborator programs and their invocation flags"""

    # Timeouts (seconds) for non-interactive collaborator calls
    PROBE_TIMEOUT = 5
    INDEX_TIMEOUT = 60
    EXAMPLES_TIMEOUT = 30

    # Index query that lists every installed manual page
    INDEX_ARGS = ["-k", "."]
    # Existence check that prints the page path without rendering it
    LOCATE_ARGS = ["-w"]

    class Binary(BaseStrEnum):
        """Names of external programs looked up on PATH"""
        FINDER = "fzf"
        MANUAL = "man"
        HIGHLIGHTER = "bat"
        EXAMPLES = "tldr"
        COLUMN_FILTER = "col"

        @classmethod
        def get_required(cls) -> list:
            """Get programs the tool cannot run without"""
            return [cls.FINDER, cls.MANUAL]

    class InstallHint(BaseStrEnum):
        """Where to get each collaborator, keyed like Binary"""
        FINDER = "https://github.com/junegunn/fzf"
        MANUAL = "your distribution's man-db or mandoc package"
        EXAMPLES = "https://github.com/tldr-pages/tldr"
        HIGHLIGHTER = "https://github.com/sharkdp/bat"

        @classmethod
        def for_binary(cls, program: str) -> str:
            """Look up the hint for a program name such as 'fzf'"""
            try:
                return cls[ToolConstants.Binary(program).name].value
            except (KeyError, ValueError):
                return ""


class PreviewConstants:
    """Preview pane and final display constants"""

    DEFAULT_WIDTH = 80
    WIDTH_ENV_VAR = "FZF_PREVIEW_COLUMNS"

    # Positional placeholders fzf substitutes for the highlighted line
    NAME_PLACEHOLDER = "{1}"
    SECTION_PLACEHOLDER = "{2}"

    BANNER_WIDTH = 62

    class BlockTitle(BaseStrEnum):
        """Titles of the boxed blocks shown in previews and on open"""
        EXAMPLES = "TLDR EXAMPLES"
        MANPAGE = "MANPAGE"

    class Fallback(BaseStrEnum):
        """Literal text shown when a collaborator produces nothing"""
        NO_EXAMPLES = "No tldr examples available"
        NO_EXAMPLES_FOR = "No tldr examples available for {name}"
        NO_MANPAGE = "Manpage preview unavailable"
        NO_PREVIEW = "Preview unavailable for command: {name}"

    class Language(BaseStrEnum):
        """Highlighter language hints"""
        EXAMPLES = "md"
        MANPAGE = "man"


class FinderConstants:
    """Default fzf configuration, passed through verbatim"""

    PROMPT = "📖 Search manpages > "
    POINTER = "▶"
    MARKER = "✓"
    HEIGHT = "100%"
    PREVIEW_WINDOW = "right:50%:border-left:hidden:wrap:nohidden"
    PREVIEW_LABEL = "[ Manpage Preview - Ctrl-Space to toggle ]"
    PREVIEW_LABEL_POS = "2"
    SCROLL_OFF = "3"

    # fzf exit codes that mean "nothing chosen"
    NO_MATCH_EXIT_CODE = 1
    INTERRUPTED_EXIT_CODE = 130

    LAYOUT_OPTIONS = [
        "--ansi",
        "--layout=reverse",
        "--border=rounded",
        "--info=inline",
        "--header-lines=0",
    ]

    BEHAVIOUR_OPTIONS = [
        "--no-multi",
        "--cycle",
    ]

    KEY_BINDINGS = [
        "ctrl-space:toggle-preview",
        "ctrl-p:toggle-preview",
        "ctrl-d:preview-down",
        "ctrl-u:preview-up",
        "ctrl-f:preview-page-down",
        "ctrl-b:preview-page-up",
        "alt-up:change-preview-window(65%|80%|35%|50%)",
        "alt-down:change-preview-window(35%|50%|65%|80%)",
        "alt-w:toggle-preview-wrap",
        "ctrl-r:toggle-sort",
        "ctrl-a:select-all",
        "ctrl-e:preview-top",
        "ctrl-n:preview-bottom",
        "shift-up:preview-half-page-up",
        "shift-down:preview-half-page-down",
    ]

    COLORS = [
        "fg:#d0d0d0,bg:#1e1e1e,hl:#5f87af",
        "fg+:#ffffff,bg+:#262626,hl+:#5fd7ff",
        "info:#afaf87,prompt:#d7005f,pointer:#af5fff",
        "marker:#87ff00,spinner:#af5fff,header:#87afaf",
        "border:#585858,preview-bg:#1c1c1c",
    ]

    class Header(BaseStrEnum):
        """Boxed header shown above the candidate list"""
        EXAMPLES = (
            "╔══════════════════════════════════════════════════════════════════════════════╗\n"
            "║  🔍 FZM + TLDR  • Ctrl-Space: preview • Alt-↑/↓: resize • Ctrl-D/U: scroll   ║\n"
            "╚══════════════════════════════════════════════════════════════════════════════╝"
        )
        PLAIN = (
            "╔══════════════════════════════════════════════════════════════════════════════╗\n"
            "║  🔍 FZM - Fuzzy Manpager  • Ctrl-Space: preview • Alt-↑/↓: resize • Ctrl-D/U ║\n"
            "╚══════════════════════════════════════════════════════════════════════════════╝"
        )


class Colors(BaseStrEnum):
    """ANSI escape sequences used for terminal messages"""
    RED = "\033[0;31m"
    GREEN = "\033[0;32m"
    YELLOW = "\033[1;33m"
    CYAN = "\033[0;36m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    RESET = "\033[0m"


class ErrorMessages:
    """Centralized message templates with improved enum-based structure"""

    class DependencyError(BaseStrEnum):
        """Collaborator availability messages"""
        MISSING_REQUIRED = "Missing required dependencies: {missing}"
        INSTALL_WITH = "Install with:"
        EXAMPLES_UNAVAILABLE = "Warning: tldr not found. Install it for examples support."

    class UsageError(BaseStrEnum):
        """Argument parsing messages"""
        UNKNOWN_OPTION = "Unknown option: {option}"
        USAGE_HINT = "Use fzm --help for usage information"

    class ManualError(BaseStrEnum):
        """Manual page lookup messages"""
        TARGET_NOT_FOUND = "Command '{name}' not found. Opening fuzzy search..."
        INDEX_EMPTY = "No manual pages found. Try running mandb (or makewhatis) to build the index."
        OPENING = "Opening manpage for:"
        RENDERER_FAILED = "Failed to start the manual renderer: {error}"

    class ConfigError(BaseStrEnum):
        """Configuration-related error message templates"""
        CONFIG_FILE_NOT_FOUND = "Configuration file not found: {config_path}"
        CONFIG_NOT_A_FILE = "Configuration path is not a file: {config_path}"
        INVALID_YAML = "Invalid YAML in configuration file {config_path}: {error}"
        NOT_A_MAPPING = "Configuration must be a dictionary"


class FileConstants:
    """File and directory related constants"""

    CONFIG_ENV_VAR = "FZM_CONFIG"
    CONFIG_DIR_NAME = "fzm"
    DEFAULT_CONFIG_FILE = "config.yaml"

    HELP_DIR_NAME = "help"
    MAIN_HELP_FILE = "main_help.txt"
