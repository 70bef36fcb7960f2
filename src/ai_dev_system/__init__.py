"""
AI Dev System - shared AI assistant context for your projects.

Copies the curated .ai/ corpus (standards, workflows, agents, skills) into a
project and bridges it to:
- OpenCode (.opencode/)
- Claude Code (.claude/)
- Cursor (.cursor/)
- Generic agents (.agent/)
"""

__version__ = "1.0.0"

# Trigger converter auto-registration on import
from ai_dev_system import converters  # noqa: F401

__all__ = [
    "bridges",
    "cli",
    "converters",
    "copier",
    "core",
    "detector",
    "paths",
    "services",
    "utils",
]
