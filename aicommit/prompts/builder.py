"""Prompt Builder - Wrap the staged diff in generation instructions."""

PROMPT_TEMPLATE = """\
As an expert programmer, analyze the following code changes from 'git diff --cached' and generate a concise, conventional commit message. The message should follow the Conventional Commits specification (e.g., 'feat:', 'fix:', 'docs:', 'refactor:').

Do not include any introduction, explanation, or markdown formatting. Only output the raw commit message text.

Here is the diff:
---
"""


class PromptBuilder:
    """Constructs the prompt handed to the generator.

    The diff is appended verbatim; it is never parsed or trimmed.
    """

    def __init__(self, template: str = PROMPT_TEMPLATE):
        self.template = template

    def build(self, diff: str) -> str:
        return f"{self.template}{diff}"
