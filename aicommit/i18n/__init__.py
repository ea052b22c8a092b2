"""Localized user-facing messages (English and Ukrainian)."""

from typing import Optional

SUPPORTED_LANGUAGES = ("EN", "UA")
DEFAULT_LANGUAGE = "EN"

MESSAGES: dict[str, dict[str, str]] = {
    "EN": {
        # Header
        "title": "Git Commit Generator",
        "language": "Language: English",

        # Git
        "noStagedChanges": "No staged changes. Add files first with git add",
        "gitStatusError": "Error reading git status",
        "gitDiffError": "Error reading git diff",
        "commitError": "Error creating commit",

        # Generation
        "generatingCLI": "Generating commit message via Claude Code CLI...",
        "generatingAPI": "Generating commit message via API...",
        "editingMessage": "Editing commit message...",

        # Backend problems
        "apiUnavailable": "API unavailable",
        "switchingToCLI": "Switching to Claude Code CLI...",
        "cliError": "Claude CLI error",
        "cliCheckVersion": "Ensure Claude Code is installed and working: claude --version",
        "noGenerationMethod": "No method available for generating commit message",
        "apiKeyNotFound": "ANTHROPIC_API_KEY not found",
        "sdkLoadError": "Could not load the anthropic SDK. Install: pip install anthropic",

        # Setup instructions
        "chooseOption": "Choose one of the options:",
        "addApiKey": "1. Export ANTHROPIC_API_KEY in your shell",
        "installCLI": "2. Install Claude Code CLI: https://docs.claude.com/claude-code",

        # Confirmation
        "generatedMessage": "Generated commit message:",
        "confirmPrompt": "Confirm and commit?",
        "confirmYes": "  Enter/y - yes",
        "confirmEdit": "  e - edit",
        "confirmNo": "  n/Esc - cancel",

        # Editing
        "currentMessage": "Current message",
        "editFeedback": "What to fix? (Enter - keep as is): ",
        "aiUnavailable": "AI unavailable, enter message manually:",
        "newMessage": "New message: ",
        "editError": "Edit error",

        # Result
        "commitSuccess": "Commit created successfully!",
        "commitCancelled": "Commit cancelled",
        "cancelledCtrlC": "Cancelled (Ctrl+C)",
        "criticalError": "Critical error",
    },

    "UA": {
        # Заголовок
        "title": "Git Commit Generator",
        "language": "Мова: Українська",

        # Git
        "noStagedChanges": "Немає staged changes. Спочатку додайте файли через git add",
        "gitStatusError": "Помилка при читанні git status",
        "gitDiffError": "Помилка при читанні git diff",
        "commitError": "Помилка при створенні commit",

        # Генерація
        "generatingCLI": "Генерую commit message через Claude Code CLI...",
        "generatingAPI": "Генерую commit message через API...",
        "editingMessage": "Редагую commit message...",

        # Проблеми з бекендом
        "apiUnavailable": "API недоступний",
        "switchingToCLI": "Переключаюсь на Claude Code CLI...",
        "cliError": "Помилка Claude CLI",
        "cliCheckVersion": "Переконайтесь, що Claude Code встановлено та працює: claude --version",
        "noGenerationMethod": "Немає доступних методів для генерації commit message",
        "apiKeyNotFound": "ANTHROPIC_API_KEY не знайдено",
        "sdkLoadError": "Не вдалося завантажити anthropic SDK. Встановіть: pip install anthropic",

        # Інструкції налаштування
        "chooseOption": "Оберіть один з варіантів:",
        "addApiKey": "1. Експортуйте ANTHROPIC_API_KEY у вашому shell",
        "installCLI": "2. Встановіть Claude Code CLI: https://docs.claude.com/claude-code",

        # Підтвердження
        "generatedMessage": "Згенерований commit message:",
        "confirmPrompt": "Підтвердити та виконати commit?",
        "confirmYes": "  Enter/y - так",
        "confirmEdit": "  e - редагувати",
        "confirmNo": "  n/Esc - скасувати",

        # Редагування
        "currentMessage": "Поточний message",
        "editFeedback": "Що треба виправити? (Enter - залишити як є): ",
        "aiUnavailable": "AI недоступний, введіть message вручну:",
        "newMessage": "Новий message: ",
        "editError": "Помилка редагування",

        # Результат
        "commitSuccess": "Commit успішно створено!",
        "commitCancelled": "Commit скасовано",
        "cancelledCtrlC": "Скасовано (Ctrl+C)",
        "criticalError": "Критична помилка",
    },
}


def normalize_language(value: Optional[str]) -> Optional[str]:
    """Return 'EN' or 'UA' for a case-insensitive match, else None."""
    if not value:
        return None
    value = value.strip().upper()
    return value if value in SUPPORTED_LANGUAGES else None


def resolve_language(env_value: Optional[str] = None,
                     flag_value: Optional[str] = None,
                     config_value: Optional[str] = None) -> str:
    """Pick the display language.

    Precedence: COMMIT_LANG environment variable > --lang flag > config file > EN.
    Unsupported values at any level are ignored.
    """
    for candidate in (env_value, flag_value, config_value):
        language = normalize_language(candidate)
        if language:
            return language
    return DEFAULT_LANGUAGE


def translate(key: str, language: str = DEFAULT_LANGUAGE) -> str:
    """Look up a message. Unknown keys come back unchanged."""
    table = MESSAGES.get(language, MESSAGES[DEFAULT_LANGUAGE])
    return table.get(key, key)


class Translator:
    """Callable bound to one language: t('commitSuccess')."""

    def __init__(self, language: str = DEFAULT_LANGUAGE):
        self.language = language if language in MESSAGES else DEFAULT_LANGUAGE

    def __call__(self, key: str) -> str:
        return translate(key, self.language)


__all__ = [
    "MESSAGES",
    "SUPPORTED_LANGUAGES",
    "DEFAULT_LANGUAGE",
    "Translator",
    "normalize_language",
    "resolve_language",
    "translate",
]
