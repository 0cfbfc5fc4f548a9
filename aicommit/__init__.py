"""
AI Commit

Commit staged git changes with a message written by an external AI CLI.
"""

__version__ = "1.0.0"

# Conventional commit types we know how to highlight in terminal output
COMMIT_TYPE_NAMES = [
    'feat',
    'fix',
    'refactor',
    'chore',
    'docs',
    'test',
    'style',
    'perf',
    'ci',
    'build',
]
