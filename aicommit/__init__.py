"""
aicommit

Draft conventional commit messages from staged git changes with Claude,
then confirm, refine, or cancel before committing.
"""

__version__ = "1.0.0"

# Commit types accepted in a drafted subject line
# Used by: llm/parser.py (shape matching), prompts/builder.py, output (colors)
COMMIT_TYPES = {
    'feat': 'A new feature or capability',
    'fix': 'A bug fix',
    'docs': 'Documentation only changes',
    'style': 'Formatting, whitespace, no code change',
    'refactor': 'Code restructuring without behavior change',
    'test': 'Adding or updating tests',
    'chore': 'Maintenance tasks, dependencies, tooling',
    'perf': 'Performance improvement',
}

COMMIT_TYPE_NAMES = list(COMMIT_TYPES.keys())

# Diff budget sent to the model, in characters
DEFAULT_MAX_DIFF_CHARS = 6000
