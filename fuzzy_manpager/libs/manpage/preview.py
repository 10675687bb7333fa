"""
Preview Pipeline Builder

Synthesizes the shell command fzf runs for every highlighted candidate.
The command is one of four fixed templates selected by the display mode
and whether a syntax highlighter is installed.
"""

import logging
import shlex
from enum import Enum
from typing import Callable, Dict, List

from ..core.constants import PreviewConstants, ToolConstants
from ..core.utils import format_banner
from .capabilities import CapabilitySet, DisplayMode

logger = logging.getLogger(__name__)


class PreviewVariant(Enum):
    """The closed set of preview templates"""
    EXAMPLES_HIGHLIGHTED = "examples-highlighted"
    EXAMPLES_PLAIN = "examples-plain"
    MANPAGE_HIGHLIGHTED = "manpage-highlighted"
    MANPAGE_PLAIN = "manpage-plain"

    @classmethod
    def select(cls, mode: DisplayMode, has_highlighter: bool) -> "PreviewVariant":
        """Pure function of the display mode and highlighter availability"""
        if mode is DisplayMode.EXAMPLES_ON:
            return cls.EXAMPLES_HIGHLIGHTED if has_highlighter else cls.EXAMPLES_PLAIN
        return cls.MANPAGE_HIGHLIGHTED if has_highlighter else cls.MANPAGE_PLAIN


class PreviewPipelineBuilder:
    """Builds the preview command string handed to fzf"""

    def __init__(self):
        self._builders: Dict[PreviewVariant, Callable[[int], str]] = {
            PreviewVariant.EXAMPLES_HIGHLIGHTED: self._examples_highlighted,
            PreviewVariant.EXAMPLES_PLAIN: self._examples_plain,
            PreviewVariant.MANPAGE_HIGHLIGHTED: self._manpage_highlighted,
            PreviewVariant.MANPAGE_PLAIN: self._manpage_plain,
        }

    def build(self, mode: DisplayMode, caps: CapabilitySet,
              preview_width: int = PreviewConstants.DEFAULT_WIDTH) -> str:
        """
        Build the preview pipeline

        Args:
            mode: Effective display mode (already downgraded if needed)
            caps: Probed capabilities
            preview_width: Reflow width used when fzf does not report one

        Returns:
            str: Shell command referencing only the {1} and {2} placeholders
        """
        variant = PreviewVariant.select(mode, caps.has_highlighter)
        logger.debug(f"Preview variant: {variant.value} (width fallback {preview_width})")
        return self._builders[variant](preview_width)

    # Shared fragments

    def _prelude(self, preview_width: int) -> List[str]:
        """Trim the padded name, strip the section's parentheses, pick a width"""
        return [
            f"cmd=$(printf '%s' {PreviewConstants.NAME_PLACEHOLDER} | sed 's/[[:space:]]*$//');",
            f"sect=$(printf '%s' {PreviewConstants.SECTION_PLACEHOLDER} | tr -d '()');",
            f"width=${{{PreviewConstants.WIDTH_ENV_VAR}:-{int(preview_width)}}};",
        ]

    def _manpage_capture(self) -> str:
        # An empty section drops the argument so man picks the section itself
        return (
            f'man_out=$(MANWIDTH="$width" MANPAGER=cat {ToolConstants.Binary.MANUAL} '
            f'${{sect:+"$sect"}} "$cmd" 2>/dev/null | {ToolConstants.Binary.COLUMN_FILTER} -bx);'
        )

    def _examples_capture(self) -> str:
        return f'ex_out=$({ToolConstants.Binary.EXAMPLES} "$cmd" 2>/dev/null);'

    def _highlight(self, language: str) -> str:
        return (
            f" | {ToolConstants.Binary.HIGHLIGHTER} --style=plain --color=always "
            f"--language={language} --paging=never --wrap=character 2>/dev/null"
        )

    def _emit(self, variable: str, highlight: str = "") -> str:
        return f'printf \'%s\\n\' "${variable}"{highlight};'

    def _echo(self, text: str) -> str:
        return f"printf '%s\\n' {shlex.quote(text)};"

    def _unavailable(self) -> str:
        message = str(PreviewConstants.Fallback.NO_PREVIEW).format(name="$cmd")
        return f'printf \'%s\\n\' "{message}";'

    def _block(self, variable: str, fallback: str, highlight: str) -> List[str]:
        return [
            f'if [ -n "${variable}" ]; then',
            self._emit(variable, highlight),
            "else",
            self._echo(fallback),
            "fi;",
        ]

    # Variants

    def _two_block_pipeline(self, preview_width: int, highlighted: bool) -> str:
        examples_highlight = self._highlight(PreviewConstants.Language.EXAMPLES) if highlighted else ""
        manpage_highlight = self._highlight(PreviewConstants.Language.MANPAGE) if highlighted else ""

        parts = self._prelude(preview_width)
        parts.append(self._examples_capture())
        parts.append(self._manpage_capture())
        parts.append('if [ -n "$ex_out" ] || [ -n "$man_out" ]; then')
        parts.append(self._echo(format_banner(PreviewConstants.BlockTitle.EXAMPLES)))
        parts.extend(self._block("ex_out", PreviewConstants.Fallback.NO_EXAMPLES, examples_highlight))
        parts.append("echo;")
        parts.append(self._echo(format_banner(PreviewConstants.BlockTitle.MANPAGE)))
        parts.extend(self._block("man_out", PreviewConstants.Fallback.NO_MANPAGE, manpage_highlight))
        parts.append("else")
        parts.append(self._unavailable())
        parts.append("fi")
        return " ".join(parts)

    def _single_block_pipeline(self, preview_width: int, highlighted: bool) -> str:
        highlight = self._highlight(PreviewConstants.Language.MANPAGE) if highlighted else ""

        parts = self._prelude(preview_width)
        parts.append(self._manpage_capture())
        parts.append('if [ -n "$man_out" ]; then')
        parts.append(self._emit("man_out", highlight))
        parts.append("else")
        parts.append(self._unavailable())
        parts.append("fi")
        return " ".join(parts)

    def _examples_highlighted(self, preview_width: int) -> str:
        return self._two_block_pipeline(preview_width, highlighted=True)

    def _examples_plain(self, preview_width: int) -> str:
        return self._two_block_pipeline(preview_width, highlighted=False)

    def _manpage_highlighted(self, preview_width: int) -> str:
        return self._single_block_pipeline(preview_width, highlighted=True)

    def _manpage_plain(self, preview_width: int) -> str:
        return self._single_block_pipeline(preview_width, highlighted=False)
