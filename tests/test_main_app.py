"""Tests for the application flow and command-line entry point."""

import io
import subprocess

import pytest

from fuzzy_manpager.libs import main_app
from fuzzy_manpager.libs.core.exceptions import MissingDependencyError, UnknownOptionError, UsageError
from fuzzy_manpager.libs.main_app import FuzzyManpager, RunSettings, create_argument_parser, parse_arguments
from fuzzy_manpager.libs.manpage.capabilities import CapabilityProber, CapabilitySet, DisplayMode
from fuzzy_manpager.libs.manpage.client import ManClient
from fuzzy_manpager.libs.manpage.display import DisplayOrchestrator
from fuzzy_manpager.libs.manpage.preview import PreviewPipelineBuilder

from test_constants import (
    CommonTestConstants, FakeExamples, FakeFinder, FakeManual, RecordingExec, RecordingRunner, make_which
)


class Harness:
    """A FuzzyManpager wired to fakes"""

    def __init__(self, selection="", tools=CommonTestConstants.ALL_TOOLS, manual=None, **settings):
        self.manual = manual or FakeManual()
        self.examples = FakeExamples({"git": CommonTestConstants.GIT_EXAMPLES})
        self.finder = FakeFinder(selection)
        self.exec_func = RecordingExec()
        self.sleeps = []
        self.stdout = io.StringIO()
        self.stderr = io.StringIO()
        display = DisplayOrchestrator(self.manual, self.examples, stream=self.stdout, exec_func=self.exec_func)
        self.app = FuzzyManpager(
            settings=RunSettings(**settings),
            prober=CapabilityProber(which=make_which(tools)),
            manual_provider=self.manual,
            example_provider=self.examples,
            finder_provider=self.finder,
            display=display,
            sleep=self.sleeps.append,
            stdout=self.stdout,
            stderr=self.stderr,
        )


class TestFuzzyManpager:
    """End-to-end flows with injected collaborators."""

    def test_browse_with_examples_uses_highlighted_examples_preview(self):
        harness = Harness(show_examples=True)

        assert harness.app.run() == 0

        expected = PreviewPipelineBuilder().build(DisplayMode.EXAMPLES_ON, CapabilitySet(True, True))
        assert harness.finder.calls[0]["preview_command"] == expected
        assert "FZM + TLDR" in harness.finder.calls[0]["header"]

    def test_browse_without_examples(self):
        harness = Harness()

        harness.app.run()

        expected = PreviewPipelineBuilder().build(DisplayMode.EXAMPLES_OFF, CapabilitySet(True, True))
        assert harness.finder.calls[0]["preview_command"] == expected
        assert "FZM - Fuzzy Manpager" in harness.finder.calls[0]["header"]

    def test_direct_target_skips_finder(self):
        harness = Harness()

        assert harness.app.run("git") == 0

        assert harness.finder.calls == []
        assert harness.manual.index_calls == 0
        assert harness.exec_func.calls == [["man", "git"]]

    def test_direct_target_with_examples(self):
        harness = Harness(show_examples=True)

        harness.app.run("git")

        assert "Clone a repository" in harness.stdout.getvalue()
        assert harness.exec_func.calls == [["man", "git"]]

    def test_unknown_target_falls_through_to_full_index(self):
        harness = Harness(notice_delay=0.25)

        assert harness.app.run(CommonTestConstants.UNKNOWN_PAGE) == 0

        assert "Command 'zzznotacommand' not found. Opening fuzzy search..." in harness.stderr.getvalue()
        assert harness.finder.calls[0]["candidates"] == CommonTestConstants.INDEX_TEXT
        assert harness.sleeps == [0.25]
        assert harness.exec_func.calls == []

    def test_cancel_exits_zero_without_rendering(self):
        harness = Harness(selection="")

        assert harness.app.run() == 0

        assert harness.exec_func.calls == []
        assert harness.stdout.getvalue() == ""

    def test_selection_is_opened(self):
        harness = Harness(selection="curl (1)             - transfer a URL")

        assert harness.app.run() == 0

        assert "Opening manpage for: curl(1)" in harness.stdout.getvalue()
        assert harness.exec_func.calls == [["man", "1", "curl"]]

    def test_examples_downgraded_without_tldr(self):
        harness = Harness(selection="git (1) - tracker", tools={"fzf", "man", "bat"}, show_examples=True)

        harness.app.run()

        assert "Warning: tldr not found" in harness.stderr.getvalue()
        assert harness.sleeps == [2]
        expected = PreviewPipelineBuilder().build(DisplayMode.EXAMPLES_OFF, CapabilitySet(True, False))
        assert harness.finder.calls[0]["preview_command"] == expected
        assert harness.examples.fetch_calls == []
        assert "TLDR EXAMPLES" not in harness.stdout.getvalue()

    def test_index_failure_opens_finder_with_no_candidates(self, caplog):
        manual = ManClient(runner=RecordingRunner(subprocess.TimeoutExpired(cmd=["man", "-k", "."], timeout=60)))
        harness = Harness(manual=manual)

        with caplog.at_level("WARNING"):
            assert harness.app.run() == 0

        assert harness.finder.calls[0]["candidates"] == ""
        assert "Manual index listing timed out" in caplog.text
        assert "mandb" in caplog.text

    def test_missing_required_tools(self):
        harness = Harness(tools={"bat", "tldr"})

        with pytest.raises(MissingDependencyError):
            harness.app.run()

        assert harness.finder.calls == []
        assert harness.manual.exists_calls == []


class TestArgumentParsing:
    """Test the command-line surface."""

    @pytest.mark.parametrize("flag", ["-e", "-eg", "--example", "--examples"])
    def test_examples_flags(self, flag):
        args = parse_arguments(create_argument_parser(), [flag])

        assert args.examples is True
        assert args.target is None

    def test_last_positional_wins(self):
        args = parse_arguments(create_argument_parser(), ["git", "-e", "ls"])

        assert args.target == "ls"
        assert args.examples is True

    @pytest.mark.parametrize("argv", [
        ["--bogus"], ["git", "-x"], ["--exam"], ["-"], ["-1"], ["--", "git"], ["--", "--bogus"], ["-e=1"]
    ])
    def test_unknown_flags(self, argv):
        with pytest.raises(UnknownOptionError):
            parse_arguments(create_argument_parser(), argv)

    def test_unknown_option_is_reported(self):
        with pytest.raises(UnknownOptionError, match="Unknown option: -1") as excinfo:
            parse_arguments(create_argument_parser(), ["git", "-1"])

        assert excinfo.value.option == "-1"

    @pytest.mark.parametrize("argv,config,target", [
        (["--config", "-1", "ls"], "-1", "ls"),
        (["--config=/etc/fzm.yaml", "ls"], "/etc/fzm.yaml", "ls"),
    ])
    def test_config_value_is_not_a_flag(self, argv, config, target):
        args = parse_arguments(create_argument_parser(), argv)

        assert args.config == config
        assert args.target == target

    def test_config_requires_value(self):
        with pytest.raises(UsageError):
            parse_arguments(create_argument_parser(), ["--config"])


class TestMain:
    """Test the entry point."""

    @pytest.fixture(autouse=True)
    def isolated(self, monkeypatch, tmp_path):
        monkeypatch.delenv("FZM_CONFIG", raising=False)
        monkeypatch.delenv("FZF_PREVIEW_COLUMNS", raising=False)
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        monkeypatch.setattr(main_app, "setup_logging", lambda debug=False: None)

    @pytest.fixture
    def captured_app(self, monkeypatch):
        captured = {}

        class StubApp:
            def run(self, target_name=None):
                captured["target"] = target_name
                return 0

        def factory(settings=None, finder_options=None):
            captured["settings"] = settings
            captured["finder_options"] = finder_options
            return StubApp()

        monkeypatch.setattr(main_app, "create_fuzzy_manpager", factory)
        return captured

    @pytest.mark.parametrize("flag", ["--bogus", "-1", "-"])
    def test_unknown_flag_exits_one_without_collaborators(self, flag, monkeypatch, capsys):
        def fail(*args, **kwargs):
            raise AssertionError("collaborator invoked")

        monkeypatch.setattr(main_app, "create_fuzzy_manpager", fail)
        monkeypatch.setattr("shutil.which", fail)

        assert main_app.main([flag]) == 1

        err = capsys.readouterr().err
        assert f"Unknown option: {flag}" in err
        assert "fzm --help" in err

    def test_unknown_flag_wins_over_help(self, capsys, captured_app):
        assert main_app.main(["-h", "--bogus"]) == 1

        captured = capsys.readouterr()
        assert "USAGE:" not in captured.out
        assert "Unknown option: --bogus" in captured.err

    @pytest.mark.parametrize("flag", ["-h", "--help"])
    def test_help(self, flag, capsys, captured_app):
        assert main_app.main([flag]) == 0

        assert "USAGE:" in capsys.readouterr().out
        assert captured_app == {}

    def test_generate_config(self, capsys, captured_app):
        assert main_app.main(["--generate-config"]) == 0

        assert "preview_width: 80" in capsys.readouterr().out

    def test_settings_from_arguments(self, captured_app):
        assert main_app.main(["-e", "git"]) == 0

        assert captured_app["target"] == "git"
        assert captured_app["settings"].show_examples is True
        assert captured_app["settings"].preview_width == 80

    def test_settings_from_config_file(self, tmp_path, captured_app):
        config = tmp_path / "custom.yaml"
        config.write_text(
            "finder:\n  prompt: 'man> '\n"
            "display:\n  examples: true\n  preview_width: 120\n  warning_delay: 0\n"
        )

        assert main_app.main(["--config", str(config)]) == 0

        settings = captured_app["settings"]
        assert settings.show_examples is True
        assert settings.preview_width == 120
        assert settings.warning_delay == 0
        assert captured_app["finder_options"].prompt == "man> "

    def test_preview_columns_environment(self, monkeypatch, captured_app):
        monkeypatch.setenv("FZF_PREVIEW_COLUMNS", "64")

        main_app.main([])

        assert captured_app["settings"].preview_width == 64

    def test_invalid_config_exits_one(self, tmp_path, capsys, captured_app):
        assert main_app.main(["--config", str(tmp_path / "missing.yaml")]) == 1

        assert "Configuration file not found" in capsys.readouterr().err

    def test_missing_dependencies_reported(self, monkeypatch, capsys):
        def factory(settings=None, finder_options=None):
            return FuzzyManpager(settings=settings, prober=CapabilityProber(which=make_which({"bat"})))

        monkeypatch.setattr(main_app, "create_fuzzy_manpager", factory)

        assert main_app.main([]) == 1

        err = capsys.readouterr().err
        assert "Missing required dependencies: fzf man" in err
        assert "https://github.com/junegunn/fzf" in err
