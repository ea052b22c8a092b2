"""Prompt Builder - Construct LLM prompts for drafting and revising commit messages."""

from aicommit import COMMIT_TYPE_NAMES, DEFAULT_MAX_DIFF_CHARS
from aicommit.git import ChangeSet

_TYPES = '/'.join(COMMIT_TYPE_NAMES)

_RULES = {
    "EN": f'''STRICT RULES:
- Format: <type>(<scope>): <subject>
- Type: {_TYPES}
- Subject in PAST TENSE (what WAS DONE), max 50 characters, no period
- Use verbs like: added, fixed, updated, removed, refactored
- WRONG: "add feature", "fix bug", "update styles"
- CORRECT: "added feature", "fixed bug", "updated styles"''',
    "UA": f'''СУВОРІ ПРАВИЛА:
- Формат: <type>(<scope>): <subject>
- Type: {_TYPES}
- Subject ТІЛЬКИ у МИНУЛОМУ ЧАСІ (що ЗРОБЛЕНО), макс 50 символів, без крапки
- Використовуй дієслова: додано, виправлено, оновлено, видалено, рефакторено
- НЕПРАВИЛЬНО: "додати функцію", "виправити баг", "оновити стилі"
- ПРАВИЛЬНО: "додано функцію", "виправлено баг", "оновлено стилі"''',
}

_EXAMPLES = {
    "EN": """Examples:
feat(auth): added Google OAuth provider
fix(api): fixed validation error in user endpoint
refactor(store): simplified cart state handling
docs(readme): updated installation instructions""",
    "UA": """Приклади:
feat(auth): додано Google OAuth провайдер
fix(api): виправлено помилку валідації в user endpoint
refactor(store): спрощено управління станом корзини
docs(readme): оновлено інструкції встановлення""",
}

_INTRO = {
    "EN": "Analyze git changes and generate a commit message in conventional commits format.",
    "UA": "Проаналізуй git зміни та згенеруй commit message у форматі conventional commits.",
}

_DIFF_LABEL = {
    "EN": "Diff (first {limit} characters)",
    "UA": "Diff (перші {limit} символів)",
}

_FINAL = {
    "EN": "Return ONLY the commit message (one line), no explanations.",
    "UA": "Поверни ТІЛЬКИ commit message (один рядок), без пояснень.",
}

_REFINE_INSTRUCTION = {
    "EN": "Fix the commit message according to this feedback. Keep conventional commits format.",
    "UA": "Виправ commit message згідно з цим feedback. Збережи формат conventional commits.",
}


def _lang(language: str) -> str:
    return language if language in _INTRO else "EN"


class PromptBuilder:
    """Builds the text sent to either backend. Both backends get identical prompts."""

    def __init__(self, max_diff_chars: int = DEFAULT_MAX_DIFF_CHARS):
        self.max_diff_chars = max_diff_chars

    def build_generation(self, changes: ChangeSet, language: str = "EN") -> str:
        lang = _lang(language)
        sections = [
            _INTRO[lang],
            f"Status:\n{changes.status_text}",
            f"{_DIFF_LABEL[lang].format(limit=self.max_diff_chars)}:\n{changes.diff_text}",
            _RULES[lang],
            _EXAMPLES[lang],
            _FINAL[lang],
        ]
        return "\n\n".join(sections)

    def build_refinement(self, original_message: str, feedback: str, language: str = "EN") -> str:
        lang = _lang(language)
        sections = [
            _REFINE_INSTRUCTION[lang],
            f"Original message: {original_message}",
            f"Feedback: {feedback}",
            "Return ONLY the updated commit message, no explanations.",
        ]
        return "\n\n".join(sections)
