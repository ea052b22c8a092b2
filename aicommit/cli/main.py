"""CLI Main Entry Point"""

import os
import sys
from dataclasses import dataclass

from aicommit.config import Config, load_config
from aicommit.git import ChangeSet, GitAdapter, GitError, NoStagedChanges
from aicommit.i18n import Translator, normalize_language, resolve_language
from aicommit.llm import (
    Backend, BackendAvailability, LLMError, LLMResponse, MessageGenerator,
    NoBackendAvailable, select_backend,
)
from aicommit.output import (
    bold, dim, success, info, warning, colorize_commit_type,
    print_debug, print_error, print_info, print_success, print_warning, Spinner,
)
from aicommit.prompts import PromptBuilder

from aicommit.cli.args import parse_args
from aicommit.cli.commands import display_config, run_install_completion
from aicommit.cli.confirm import ConfirmationLoop
from aicommit.cli.terminal import ask_line, read_choice


@dataclass
class Settings:
    """Effective settings after flags, environment and config file are merged."""
    language: str
    model: str | None
    agent_command: str
    max_diff_chars: int
    agent_timeout: int
    verbose: bool = False


def _resolve_settings(args, config: Config) -> Settings:
    """Precedence: language env > flag > config; everything else flag > env > config."""
    if args.lang and normalize_language(args.lang) is None:
        print_warning(f"Unsupported language '{args.lang}', expected en or ua")
    return Settings(
        language=resolve_language(os.environ.get('COMMIT_LANG'), args.lang, config.language),
        model=args.model or os.environ.get('COMMIT_MODEL') or config.model,
        agent_command=args.agent or os.environ.get('COMMIT_AGENT') or config.agent_command,
        max_diff_chars=args.max_diff_chars or config.max_diff_chars,
        agent_timeout=config.agent_timeout,
        verbose=args.verbose,
    )


def _read_changes(adapter: GitAdapter, settings: Settings, t: Translator) -> ChangeSet | None:
    """Read status and diff once. Prints the reason and returns None on failure."""
    try:
        return adapter.get_change_set(settings.max_diff_chars)
    except NoStagedChanges:
        print_error(t('noStagedChanges'))
    except GitError as e:
        print_error(t('gitDiffError') if '--unified' in e.command else t('gitStatusError'))
        if settings.verbose:
            print_debug(str(e))
    return None


def _reason(error: LLMError, t: Translator) -> str:
    return t(error.key) if error.key else str(error)


def _report_response(response: LLMResponse, settings: Settings, t: Translator) -> None:
    if response.fallback_reason:
        reason = t(response.fallback_key) if response.fallback_key else response.fallback_reason
        print_warning(f"{t('apiUnavailable')}: {reason}")
        print_warning(t('switchingToCLI'))
    if settings.verbose:
        print_debug(f"Backend: {response.backend.value} ({response.model})")
        if response.tokens_used:
            print_debug(f"Tokens: {response.tokens_used}")
        if response.degraded:
            print_debug("No conventional-commit line in agent output, using fallback")


def _print_setup_help(t: Translator) -> None:
    print(f"\n{t('chooseOption')}")
    print_info(t('addApiKey'))
    print_info(t('installCLI'))


def _generate(generator: MessageGenerator, adapter: GitAdapter, changes: ChangeSet,
              settings: Settings, t: Translator) -> str | None:
    """Draft the first candidate. Prints the reason and returns None on failure."""
    availability = BackendAvailability.detect(adapter, settings.agent_command)
    backend = select_backend(availability)

    if backend is Backend.API:
        print_info(t('generatingAPI'))
    elif backend is Backend.CLI:
        print_info(t('generatingCLI'))

    if settings.verbose:
        print_debug(f"Diff: {len(changes.diff_text)} chars (limit {settings.max_diff_chars})")

    try:
        with Spinner():
            response = generator.generate(changes, settings.language, availability)
    except NoBackendAvailable as e:
        if e.__cause__ is not None:
            print_warning(f"{t('apiUnavailable')}: {_reason(e, t)}")
        print_error(t('noGenerationMethod'))
        if e.__cause__ is None:
            _print_setup_help(t)
        return None
    except LLMError as e:
        # The agent failed; a cause means it was already the fallback for a failed API call
        if isinstance(e.__cause__, LLMError):
            print_warning(f"{t('apiUnavailable')}: {_reason(e.__cause__, t)}")
        print_error(f"{t('cliError')}: {e}")
        print(dim(t('cliCheckVersion')))
        return None

    _report_response(response, settings, t)
    return response.content


def _present(candidate: str, t: Translator) -> None:
    width = max(len(candidate), 40)
    print(f"\n{bold(success(t('generatedMessage')))}")
    print(dim('─' * width))
    print(bold(colorize_commit_type(candidate)))
    print(dim('─' * width))
    print(f"\n{t('confirmPrompt')}")
    print(success(t('confirmYes')))
    print(info(t('confirmEdit')))
    print(warning(t('confirmNo')))
    sys.stdout.flush()


def _notifier(t: Translator):
    def notify(level: str, key: str, detail: str | None = None) -> None:
        text = f"{t(key)}: {detail}" if detail else t(key)
        if level == 'error':
            print_error(text)
        elif level == 'warning':
            print_warning(text)
        else:
            print_info(text)
    return notify


def _build_loop(generator: MessageGenerator, adapter: GitAdapter,
                settings: Settings, t: Translator) -> ConfirmationLoop:
    def ask_feedback(candidate: str) -> str:
        print(warning(f"\n{t('currentMessage')}: {candidate}"))
        return ask_line(t('editFeedback'))

    def ask_manual() -> str:
        return ask_line(t('newMessage'))

    def refine(candidate: str, feedback: str) -> str:
        # Availability is re-probed on every attempt
        availability = BackendAvailability.detect(adapter, settings.agent_command)
        with Spinner():
            response = generator.refine(candidate, feedback, settings.language, availability)
        _report_response(response, settings, t)
        return response.content

    def commit(message: str) -> None:
        output = adapter.commit(message)
        if output:
            print(dim(output))

    return ConfirmationLoop(
        read_choice=read_choice,
        ask_feedback=ask_feedback,
        ask_manual=ask_manual,
        refine=refine,
        commit=commit,
        present=lambda candidate: _present(candidate, t),
        notify=_notifier(t),
    )


def _commit_flow(settings: Settings, t: Translator) -> int:
    """Main flow: read changes, draft, confirm, commit.

    Returns:
        int: Exit code
    """
    print(bold(t('title')))
    print_info(t('language'))

    adapter = GitAdapter()
    changes = _read_changes(adapter, settings, t)
    if changes is None:
        return 1

    generator = MessageGenerator(
        prompt_builder=PromptBuilder(max_diff_chars=settings.max_diff_chars),
        model=settings.model,
        agent_command=settings.agent_command,
        agent_timeout=settings.agent_timeout,
    )

    candidate = _generate(generator, adapter, changes, settings, t)
    if candidate is None:
        return 1

    loop = _build_loop(generator, adapter, settings, t)
    try:
        outcome = loop.run(candidate)
    except GitError as e:
        print_error(t('commitError'))
        print(dim(e.detail or str(e)), file=sys.stderr)
        return 1

    if outcome.committed:
        print_success(t('commitSuccess'))
    elif outcome.interrupted:
        print_warning(t('cancelledCtrlC'))
    else:
        print_warning(t('commitCancelled'))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    if args.install_completion:
        return run_install_completion()

    config = load_config()
    if args.display_config:
        return display_config(config)

    settings = _resolve_settings(args, config)
    t = Translator(settings.language)

    try:
        return _commit_flow(settings, t)
    except KeyboardInterrupt:
        print()
        print_warning(t('cancelledCtrlC'))
        return 0
    except Exception as e:
        print_error(f"{t('criticalError')}: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
