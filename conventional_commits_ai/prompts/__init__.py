"""Prompt Construction Package"""

from conventional_commits_ai.prompts.builder import PromptBuilder, SYSTEM_PROMPT

__all__ = [
    "PromptBuilder",
    "SYSTEM_PROMPT",
]
