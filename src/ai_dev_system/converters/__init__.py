"""Tool converters. Importing this package registers every converter."""

from ai_dev_system.converters.opencode import OpenCodeConverter
from ai_dev_system.converters.claude import ClaudeConverter

__all__ = ["OpenCodeConverter", "ClaudeConverter"]
