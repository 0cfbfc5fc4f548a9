"""Prompt Construction"""

from aicommit.prompts.builder import PromptBuilder, PROMPT_TEMPLATE

__all__ = ["PromptBuilder", "PROMPT_TEMPLATE"]
