"""Prompt Construction Package"""

from aicommit.prompts.builder import PromptBuilder

__all__ = ["PromptBuilder"]
