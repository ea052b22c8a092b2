"""
Tests for CLI output and the end-to-end commit flow with faked git and backends.

Shows sample output for each scenario. Run with:
    pytest tests/test_display.py -v
    pytest tests/test_display.py -v -s   # see actual terminal output
"""

import re

import pytest

from aicommit.cli import main as cli_main
from aicommit.cli.terminal import Choice
from aicommit.config import Config
from aicommit.git import GitAdapter, GitError
from aicommit.i18n import Translator
from aicommit.llm import Backend, LLMError, LLMResponse, NoBackendAvailable
from aicommit.llm import MessageGenerator as RealMessageGenerator
from aicommit.output import Colors, Palette

ANSI_RE = re.compile(r'\033\[[0-9;]*m')


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def strip_ansi():
    """Return a function that removes ANSI escape codes."""
    def _strip(text: str) -> str:
        return ANSI_RE.sub('', text)
    return _strip


class FakeAdapter(GitAdapter):
    """GitAdapter without git; configured per test through class attributes."""
    summary = " app.py | 2 +-\n 1 file changed"
    diff = "diff --git a/app.py b/app.py\n+x = 1"
    agent = True
    commit_error = None
    commits = []

    def __init__(self, cwd=None):
        pass

    def get_staged_summary(self):
        return self.summary

    def get_staged_diff(self, max_chars=6000):
        return self.diff[:max_chars]

    def has_local_agent(self, command="claude"):
        return self.agent

    def commit(self, message):
        if self.commit_error:
            raise self.commit_error
        FakeAdapter.commits.append(message)
        return "[main abc1234] " + message


class FakeGenerator:
    """Stands in for MessageGenerator."""
    draft = LLMResponse(content="feat(app): added x", model="fake", backend=Backend.CLI)
    revised = "feat(app): added x variable"
    refine_error = None
    generate_error = None
    seen = {}

    def __init__(self, **kwargs):
        FakeGenerator.seen = kwargs

    def generate(self, changes, language, availability):
        FakeGenerator.seen["changes"] = changes
        FakeGenerator.seen["language"] = language
        if self.generate_error:
            raise self.generate_error
        return self.draft

    def refine(self, original, feedback, language, availability):
        if self.refine_error:
            raise self.refine_error
        return LLMResponse(content=self.revised, backend=Backend.CLI)


@pytest.fixture
def app(monkeypatch):
    """Patch git, backends, config and keyboard; return a runner taking scripted choices."""
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    monkeypatch.delenv("COMMIT_LANG", raising=False)
    monkeypatch.delenv("COMMIT_MODEL", raising=False)
    monkeypatch.delenv("COMMIT_AGENT", raising=False)

    adapter_cls = type("Adapter", (FakeAdapter,), {})
    generator_cls = type("Generator", (FakeGenerator,), {})
    FakeAdapter.commits = []

    monkeypatch.setattr(cli_main, "GitAdapter", adapter_cls)
    monkeypatch.setattr(cli_main, "MessageGenerator", generator_cls)
    monkeypatch.setattr(cli_main, "load_config", lambda: Config())

    def run(choices=(Choice.ACCEPT,), lines=(), argv=()):
        choices = list(choices)
        lines = list(lines)

        def read_choice():
            choice = choices.pop(0)
            if isinstance(choice, BaseException):
                raise choice
            return choice

        def ask_line(prompt):
            line = lines.pop(0)
            if isinstance(line, BaseException):
                raise line
            return line

        monkeypatch.setattr(cli_main, "read_choice", read_choice)
        monkeypatch.setattr(cli_main, "ask_line", ask_line)
        return cli_main.main(list(argv))

    run.adapter = adapter_cls
    run.generator = generator_cls
    return run


# ---------------------------------------------------------------------------
# Palette
# ---------------------------------------------------------------------------

class TestPalette:

    def test_disabled_returns_plain_text(self):
        palette = Palette(enabled=False)
        assert palette.error("boom") == "boom"
        assert palette.commit_type("feat: x") == "feat: x"

    def test_enabled_wraps_with_codes(self):
        palette = Palette(enabled=True)
        assert palette.success("ok") == f"{Colors.GREEN}ok{Colors.RESET}"

    def test_commit_type_colors_prefix_only(self):
        palette = Palette(enabled=True)
        colored = palette.commit_type("fix(api): fixed it")
        assert colored.startswith(Colors.BOLD + Colors.RED + "fix(api):")
        assert colored.endswith(" fixed it")

    def test_unknown_type_untouched(self):
        assert Palette(enabled=True).commit_type("wip: stuff") == "wip: stuff"


# ---------------------------------------------------------------------------
# Candidate display
# ---------------------------------------------------------------------------

class TestPresent:

    def test_shows_message_and_choices(self, capsys, strip_ansi):
        cli_main._present("feat(auth): added OAuth provider", Translator("EN"))
        out = strip_ansi(capsys.readouterr().out)

        assert "Generated commit message:" in out
        assert "feat(auth): added OAuth provider" in out
        assert "Enter/y - yes" in out
        assert "e - edit" in out
        assert "n/Esc - cancel" in out

    def test_ukrainian_labels(self, capsys, strip_ansi):
        cli_main._present("fix: виправлено", Translator("UA"))
        out = strip_ansi(capsys.readouterr().out)
        assert "Підтвердити та виконати commit?" in out

    def test_has_horizontal_rules(self, capsys, strip_ansi):
        cli_main._present("chore: updated dependencies", Translator("EN"))
        lines = [l for l in strip_ansi(capsys.readouterr().out).split("\n") if l.strip()]
        rules = [l for l in lines if set(l.strip()) == {"─"}]
        assert len(rules) == 2


# ---------------------------------------------------------------------------
# End-to-end flow
# ---------------------------------------------------------------------------

class TestCommitFlow:

    def test_accept_commits(self, app, capsys, strip_ansi):
        assert app([Choice.ACCEPT]) == 0
        out = strip_ansi(capsys.readouterr().out)

        assert FakeAdapter.commits == ["feat(app): added x"]
        assert "Commit created successfully!" in out
        assert "Generating commit message via Claude Code CLI..." in out

    def test_cancel_does_not_commit(self, app, capsys, strip_ansi):
        assert app([Choice.REJECT]) == 0
        assert FakeAdapter.commits == []
        assert "Commit cancelled" in strip_ansi(capsys.readouterr().out)

    def test_interrupt_does_not_commit(self, app, capsys, strip_ansi):
        assert app([Choice.INTERRUPT]) == 0
        assert FakeAdapter.commits == []
        assert "Cancelled (Ctrl+C)" in strip_ansi(capsys.readouterr().out)

    def test_edit_then_accept(self, app, capsys, strip_ansi):
        assert app([Choice.EDIT, Choice.ACCEPT], lines=["be specific"]) == 0
        assert FakeAdapter.commits == ["feat(app): added x variable"]
        assert "Editing commit message..." in strip_ansi(capsys.readouterr().out)

    def test_refine_failure_uses_manual_message(self, app):
        app.generator.refine_error = LLMError("agent crashed")
        assert app([Choice.EDIT, Choice.ACCEPT], lines=["be specific", "fix: typed by hand"]) == 0
        assert FakeAdapter.commits == ["fix: typed by hand"]

    def test_no_staged_changes(self, app, capsys):
        app.adapter.summary = None
        assert app() == 1
        assert "No staged changes" in capsys.readouterr().err

    def test_git_status_failure(self, app, capsys):
        def broken(self):
            raise GitError("not a git repository")
        app.adapter.get_staged_summary = broken
        assert app() == 1
        assert "Error reading git status" in capsys.readouterr().err

    def test_commit_failure_exits_1(self, app, capsys):
        app.adapter.commit_error = GitError("hook rejected")
        assert app([Choice.ACCEPT]) == 1
        assert "Error creating commit" in capsys.readouterr().err

    def test_commit_failure_shows_hook_output(self, app, capsys):
        app.adapter.commit_error = GitError(
            "Git command failed: git commit", command="commit -m x", detail="pre-commit: lint failed"
        )
        assert app([Choice.ACCEPT]) == 1
        assert "pre-commit: lint failed" in capsys.readouterr().err

    def test_git_diff_failure(self, app, capsys):
        def broken(self, max_chars=6000):
            raise GitError("bad object", command="diff --cached --unified=1")
        app.adapter.get_staged_diff = broken
        assert app() == 1
        assert "Error reading git diff" in capsys.readouterr().err

    def test_agent_failure_exits_1(self, app, capsys):
        app.generator.generate_error = LLMError("exited with code 1")
        assert app() == 1
        assert "Claude CLI error" in capsys.readouterr().err

    def test_both_backends_failing_reports_api_reason(self, app, capsys, strip_ansi):
        error = LLMError("'claude' exited with code 1")
        error.__cause__ = LLMError("Claude API error: overloaded")
        app.generator.generate_error = error

        assert app() == 1
        captured = capsys.readouterr()
        assert "API unavailable: Claude API error: overloaded" in strip_ansi(captured.out)
        assert "Claude CLI error" in captured.err

    def test_api_reason_is_localized(self, app, capsys, strip_ansi):
        error = NoBackendAvailable("ANTHROPIC_API_KEY not found", key="apiKeyNotFound")
        error.__cause__ = LLMError("ANTHROPIC_API_KEY not found", key="apiKeyNotFound")
        app.generator.generate_error = error

        assert app(argv=["--lang", "ua"]) == 1
        assert "API недоступний: ANTHROPIC_API_KEY не знайдено" in strip_ansi(capsys.readouterr().out)

    def test_fallback_reason_is_localized(self, app, capsys, strip_ansi):
        app.generator.draft = LLMResponse(content="fix: x", backend=Backend.CLI,
                                          fallback_reason="SDK missing", fallback_key="sdkLoadError")
        app([Choice.REJECT], argv=["--lang", "ua"])
        assert "Не вдалося завантажити anthropic SDK" in strip_ansi(capsys.readouterr().out)

    def test_no_backend_prints_setup_help(self, app, monkeypatch, capsys, strip_ansi):
        # Real generator, nothing reachable
        monkeypatch.setattr(cli_main, "MessageGenerator", RealMessageGenerator)
        app.adapter.agent = False
        assert app() == 1
        captured = capsys.readouterr()
        assert "No method available" in captured.err
        assert "ANTHROPIC_API_KEY" in strip_ansi(captured.out)

    def test_language_from_environment(self, app, monkeypatch, capsys):
        monkeypatch.setenv("COMMIT_LANG", "ua")
        assert app([Choice.REJECT], argv=["--lang", "en"]) == 0
        assert app.generator.seen["language"] == "UA"
        assert "Commit скасовано" in capsys.readouterr().out

    def test_language_from_flag(self, app):
        app([Choice.REJECT], argv=["--lang", "UA"])
        assert app.generator.seen["language"] == "UA"

    def test_diff_budget_flag(self, app):
        app([Choice.REJECT], argv=["--max-diff-chars", "10"])
        assert len(app.generator.seen["changes"].diff_text) == 10

    def test_model_and_agent_passed_through(self, app, monkeypatch):
        monkeypatch.setenv("COMMIT_MODEL", "env-model")
        app([Choice.REJECT], argv=["--agent", "my-agent"])
        assert app.generator.seen["model"] == "env-model"
        assert app.generator.seen["agent_command"] == "my-agent"

    def test_fallback_is_reported(self, app, capsys, strip_ansi):
        app.generator.draft = LLMResponse(content="fix: x", backend=Backend.CLI, fallback_reason="overloaded")
        app([Choice.REJECT])
        out = strip_ansi(capsys.readouterr().out)
        assert "API unavailable: overloaded" in out
        assert "Switching to Claude Code CLI..." in out
