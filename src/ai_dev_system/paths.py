"""
Locations and fixed tables shared by every command.

The source corpus is the bundled `corpus/` directory unless the
AI_DEV_SOURCE environment variable points elsewhere.
"""

import os
from pathlib import Path
from typing import Dict, List

SOURCE_ENV_VAR = "AI_DEV_SOURCE"

AI_DIR_NAME = ".ai"
MANIFEST_NAME = "ai-dev.yml"

AVAILABLE_STACKS = (
    "react-typescript",
    "php-laravel",
    "node-express",
)

# AI tool -> bridge directory
AI_BRIDGES: Dict[str, str] = {
    "claude": ".claude",
    "cursor": ".cursor",
    "opencode": ".opencode",
    "agent": ".agent",
}

# AI tool -> subfolders created inside its bridge directory
BRIDGE_LAYOUT: Dict[str, List[str]] = {
    "claude": ["commands", "skills", "agents"],
    "cursor": ["rules"],
    "opencode": ["skill", "agent", "command", "plugin"],
    "agent": ["skills", "workflows", "rules"],
}

# Tools that `ai-dev sync` knows how to convert to
SYNC_TOOLS = ("opencode", "claude")


def get_package_root() -> Path:
    """Returns the installed ai_dev_system package directory."""
    return Path(__file__).resolve().parent


def get_source_ai_dir() -> Path:
    """Returns the corpus directory that gets copied into projects.

    Checks in order:
    1. AI_DEV_SOURCE environment variable
    2. Bundled corpus shipped inside the package
    """
    override = os.environ.get(SOURCE_ENV_VAR)
    if override:
        return Path(override).expanduser().resolve()
    return get_package_root() / "corpus"


def get_target_ai_dir(target_dir) -> Path:
    """Returns the .ai directory inside the user's project."""
    return Path(target_dir).resolve() / AI_DIR_NAME


def get_manifest_path(target_dir) -> Path:
    return get_target_ai_dir(target_dir) / MANIFEST_NAME


def resolve_content_dir(project_dir: Path) -> Path:
    """Project .ai/ when the project was initialized, bundled corpus otherwise."""
    project_ai = get_target_ai_dir(project_dir)
    if project_ai.is_dir():
        return project_ai
    return get_source_ai_dir()
