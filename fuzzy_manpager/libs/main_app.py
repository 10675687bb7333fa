"""
Main Application

Orchestrates capability probing, the interactive finder and the final
display of the chosen manual page.
"""

import argparse
import logging
import sys
import time
from dataclasses import dataclass
from typing import Callable, List, Optional, TextIO

# Core libraries
from .core import ConfigManager, setup_logging, colorize, get_preview_width, create_user_friendly_error
from .core.constants import Colors, ErrorMessages, FinderConstants, PreviewConstants, ToolConstants
from .core.exceptions import (
    FuzzyManpagerError, CollaboratorError, ConfigurationError, MissingDependencyError, UsageError,
    UnknownOptionError
)
from .core.protocols import ExampleProvider, FinderProvider, HelpProvider, ManualProvider

# Manual page libraries
from .manpage import (
    CapabilityProber, CapabilitySet, DisplayMode, effective_mode,
    ManClient, TldrClient, FinderOptions, FzfClient,
    PreviewPipelineBuilder, SelectionResolver, DirectTargetResolver, DisplayOrchestrator
)

from .help_manager import HelpManager

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunSettings:
    """Settings resolved once at startup from arguments and configuration"""
    show_examples: bool = False
    preview_width: int = PreviewConstants.DEFAULT_WIDTH
    notice_delay: float = 1
    warning_delay: float = 2


class FuzzyManpager:
    """Main application orchestrator for the Fuzzy Manpager tool"""

    def __init__(
        self,
        settings: Optional[RunSettings] = None,
        prober: Optional[CapabilityProber] = None,
        manual_provider: Optional[ManualProvider] = None,
        example_provider: Optional[ExampleProvider] = None,
        finder_provider: Optional[FinderProvider] = None,
        display: Optional[DisplayOrchestrator] = None,
        sleep: Callable[[float], None] = time.sleep,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None
    ):
        """
        Initialize Fuzzy Manpager with dependency injection

        Args:
            settings: Resolved run settings (defaults to RunSettings())
            prober: Capability prober (defaults to PATH lookups)
            manual_provider: Manual index/renderer (defaults to ManClient)
            example_provider: Example provider (defaults to TldrClient)
            finder_provider: Interactive finder (defaults to FzfClient)
            display: Final display orchestrator
            sleep: Pause used to keep notices readable before the finder opens
            stdout: Stream for informational output
            stderr: Stream for warnings and notices
        """
        self.settings = settings or RunSettings()
        self.prober = prober or CapabilityProber()
        self.manual = manual_provider or ManClient()
        self.examples = example_provider or TldrClient()
        self.finder = finder_provider or FzfClient()
        self.display = display or DisplayOrchestrator(self.manual, self.examples, stream=stdout)
        self.preview_builder = PreviewPipelineBuilder()
        self.direct_resolver = DirectTargetResolver(self.manual)
        self._sleep = sleep
        self._stdout = stdout
        self._stderr = stderr

    @property
    def out(self) -> TextIO:
        return self._stdout or sys.stdout

    @property
    def err(self) -> TextIO:
        return self._stderr or sys.stderr

    def check_dependencies(self) -> CapabilitySet:
        """
        Verify required collaborators and probe optional ones

        Returns:
            CapabilitySet: Immutable for the rest of the run

        Raises:
            MissingDependencyError: If fzf or man is not installed
        """
        self.prober.require()
        return self.prober.probe()

    def resolve_mode(self, caps: CapabilitySet) -> DisplayMode:
        """
        Apply the examples downgrade, warning once when it happens

        Args:
            caps: Probed capabilities

        Returns:
            DisplayMode: Mode used by both the preview and the final display
        """
        requested = DisplayMode.from_flag(self.settings.show_examples)
        mode = effective_mode(requested, caps)

        if mode is not requested:
            warning = str(ErrorMessages.DependencyError.EXAMPLES_UNAVAILABLE)
            print(colorize(warning, Colors.YELLOW, stream=self.err), file=self.err)
            print(colorize(f"  {ToolConstants.InstallHint.EXAMPLES}", Colors.DIM, stream=self.err), file=self.err)
            self._sleep(self.settings.warning_delay)

        return mode

    def open_direct(self, name: str, mode: DisplayMode, caps: CapabilitySet) -> Optional[int]:
        """
        Open a page named on the command line without the finder

        Args:
            name: Command name argument
            mode: Effective display mode
            caps: Probed capabilities

        Returns:
            int exit status when the page was opened, None to fall through
            to interactive search
        """
        target = self.direct_resolver.resolve(name)
        if target is None:
            notice = str(ErrorMessages.ManualError.TARGET_NOT_FOUND).format(name=name)
            print(colorize(notice, Colors.YELLOW, stream=self.err), file=self.err)
            self._sleep(self.settings.notice_delay)
            return None

        return self.display.display(target, mode, caps)

    def browse(self, mode: DisplayMode, caps: CapabilitySet) -> int:
        """
        Run the interactive finder over the full manual index

        Args:
            mode: Effective display mode
            caps: Probed capabilities

        Returns:
            int: Exit status (0 on cancel)
        """
        preview_command = self.preview_builder.build(mode, caps, self.settings.preview_width)
        header = FinderConstants.Header.EXAMPLES if mode is DisplayMode.EXAMPLES_ON else FinderConstants.Header.PLAIN

        try:
            candidates = self.manual.list_index()
        except CollaboratorError as e:
            logger.warning(f"{e}; continuing with an empty candidate list")
            candidates = ""

        if not candidates.strip():
            logger.warning(ErrorMessages.ManualError.INDEX_EMPTY)

        selection = self.finder.select(candidates, preview_command, str(header))
        target = SelectionResolver.parse(selection)
        if target is None:
            logger.debug("No selection made, exiting")
            return 0

        opening = colorize(str(ErrorMessages.ManualError.OPENING), Colors.GREEN, stream=self.out)
        print(f"{opening} {colorize(f'{target.name}({target.section})', Colors.BOLD, stream=self.out)}",
              file=self.out)

        return self.display.display(target, mode, caps)

    def run(self, target_name: Optional[str] = None) -> int:
        """
        Execute one invocation

        Args:
            target_name: Optional command name to open directly

        Returns:
            int: Exit status

        Raises:
            MissingDependencyError: If required collaborators are missing
        """
        caps = self.check_dependencies()
        mode = self.resolve_mode(caps)

        if target_name:
            status = self.open_direct(target_name, mode, caps)
            if status is not None:
                return status

        return self.browse(mode, caps)


# Factory function for easy creation
def create_fuzzy_manpager(settings: Optional[RunSettings] = None,
                          finder_options: Optional[FinderOptions] = None) -> FuzzyManpager:
    """
    Factory function to create FuzzyManpager with default collaborators

    Args:
        settings: Resolved run settings
        finder_options: fzf options from configuration

    Returns:
        FuzzyManpager: Configured instance
    """
    return FuzzyManpager(settings=settings, finder_provider=FzfClient(finder_options))


class FzmArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors as exceptions"""

    def error(self, message: str):
        raise UsageError(message)


def create_argument_parser() -> FzmArgumentParser:
    """Create and configure the argument parser"""
    parser = FzmArgumentParser(
        prog='fzm',
        description='Fuzzy Manpager - browse and open manual pages with fzf',
        add_help=False,  # Disable default help to show main_help.txt
        allow_abbrev=False
    )

    parser.add_argument(
        '-h', '--help',
        action='store_true',
        help='Show help message'
    )
    parser.add_argument(
        '-e', '-eg', '--example', '--examples',
        dest='examples', action='store_true',
        help='Show tldr examples with manpages'
    )
    parser.add_argument('--config', help='Configuration file path')
    parser.add_argument(
        '--generate-config', action='store_true',
        help='Print a configuration template and exit'
    )
    parser.add_argument(
        '--debug', action='store_true', help='Enable debug logging'
    )
    # Non-strict: several names are accepted and the last one wins
    parser.add_argument('command', nargs='*', help='Manual page to open directly')

    return parser


def find_unknown_option(parser: argparse.ArgumentParser, argv: List[str]) -> Optional[str]:
    """
    Find the first dash-prefixed token that is not a registered option

    argparse keeps '-', '--' and negative-number-like tokens such as '-1'
    as positionals; every one of them is rejected here instead.

    Args:
        parser: Parser whose option strings are accepted
        argv: Raw command-line tokens

    Returns:
        The offending token, or None when every flag is known
    """
    expects_value = False
    for token in argv:
        if expects_value:
            expects_value = False
            continue
        if not token.startswith('-'):
            continue

        option = token.split('=', 1)[0] if token.startswith('--') else token
        action = parser._option_string_actions.get(option)
        if action is None:
            return token
        # The value after --config may itself start with '-'
        expects_value = action.nargs != 0 and '=' not in token

    return None


def parse_arguments(parser: argparse.ArgumentParser, argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse the command line

    Raises:
        UnknownOptionError: For any flag the parser does not know
        UsageError: For other malformed input (e.g. --config without a path)
    """
    argv = sys.argv[1:] if argv is None else list(argv)

    unknown = find_unknown_option(parser, argv)
    if unknown is not None:
        raise UnknownOptionError(unknown)

    args, extras = parser.parse_known_intermixed_args(argv)

    for token in extras:
        if token.startswith('-'):
            raise UnknownOptionError(token)

    names = list(args.command) + extras
    args.target = names[-1] if names else None
    return args


def handle_early_exit_flags(args, help_manager: Optional[HelpProvider] = None) -> bool:
    """Handle early-exit flags like --help and --generate-config"""
    if args.help:
        (help_manager or HelpManager()).show_help()
        return True

    if args.generate_config:
        sys.stdout.write(ConfigManager().get_config_template_content())
        return True

    return False


def load_configuration(args) -> ConfigManager:
    """Load the configuration file selected by --config, FZM_CONFIG or the default path"""
    config_manager = ConfigManager()
    config_path = ConfigManager.resolve_config_path(args.config)
    if config_path:
        config_manager.load_config(config_path)
    return config_manager


def build_settings(args, config_manager: ConfigManager) -> RunSettings:
    """Merge command-line flags over configuration values"""
    fallback_width = config_manager.get_value('display.preview_width', PreviewConstants.DEFAULT_WIDTH)
    return RunSettings(
        show_examples=args.examples or config_manager.get_value('display.examples', False),
        preview_width=get_preview_width(default=fallback_width),
        notice_delay=config_manager.get_value('display.notice_delay', RunSettings.notice_delay),
        warning_delay=config_manager.get_value('display.warning_delay', RunSettings.warning_delay),
    )


def report_missing_dependencies(error: MissingDependencyError, stream: Optional[TextIO] = None) -> None:
    """Print the missing collaborators with install guidance"""
    stream = stream or sys.stderr
    details = str(ErrorMessages.DependencyError.MISSING_REQUIRED).format(missing=" ".join(error.missing))
    suggestions = [
        f"{program}: {ToolConstants.InstallHint.for_binary(program)}" for program in error.missing
    ]
    message = create_user_friendly_error("Error", details)
    print(colorize(message, Colors.RED, stream=stream), file=stream)
    print(colorize(str(ErrorMessages.DependencyError.INSTALL_WITH), Colors.YELLOW, stream=stream), file=stream)
    for suggestion in suggestions:
        print(f"  - {suggestion}", file=stream)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point with unified execution flow"""
    help_manager = HelpManager()

    # Step 1: Parse arguments before touching any collaborator
    try:
        args = parse_arguments(create_argument_parser(), argv)
    except UsageError as e:
        print(colorize(str(e), Colors.RED, stream=sys.stderr), file=sys.stderr)
        print(help_manager.get_usage_hint(), file=sys.stderr)
        return 1

    # Step 2: Handle early-exit flags like --help
    if handle_early_exit_flags(args, help_manager):
        return 0

    try:
        # Step 3: Load configuration and set up logging
        config_manager = load_configuration(args)
        setup_logging(args.debug or config_manager.get_value('global.debug', False))

        # Step 4: Build the application from settings
        settings = build_settings(args, config_manager)
        finder_options = FinderOptions.from_config(config_manager.get_section('finder'))
        app = create_fuzzy_manpager(settings, finder_options)

        # Step 5: Run
        return app.run(args.target)

    except MissingDependencyError as e:
        report_missing_dependencies(e)
        return 1
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except FuzzyManpagerError as e:
        logger.error(f"Unexpected error: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        return 0


if __name__ == "__main__":
    sys.exit(main())
