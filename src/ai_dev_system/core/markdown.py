"""
Markdown -> tool format conversion helpers.

Title and description come from the first `# heading` and the first
`> quote` line of a file. Only the first match counts and fenced code blocks
are not special-cased.
"""

import re
from pathlib import Path
from typing import List, Optional

from ..utils import dump_frontmatter, logger, safe_read_text

_RE_TITLE = re.compile(r"^#\s+(.+)$", re.MULTILINE)
_RE_QUOTE = re.compile(r"^>\s*(.+)$", re.MULTILINE)

SKILL_FILE = "SKILL.md"
SKILL_LICENSE = "MIT"
SOURCE_NAME = "ai-dev-system"
AGENT_MODEL = "anthropic/claude-sonnet-4-5"
COMMAND_AGENT = "build"

COMMAND_BODY = """Load and execute the {skill} skill for the current context.

Use the skill tool to load: skill({{ name: "{skill}" }})

Then follow the skill instructions to complete the task.

$ARGUMENTS
"""


def extract_title(content: str) -> Optional[str]:
    match = _RE_TITLE.search(content)
    return match.group(1) if match else None


def extract_description(content: str) -> Optional[str]:
    match = _RE_QUOTE.search(content)
    return match.group(1) if match else None


def render_skill(content: str, skill_name: str, compatibility: str) -> str:
    """Wrap a SKILL.md body in the Agent Skills frontmatter."""
    title = extract_title(content) or skill_name
    description = extract_description(content) or f"{title} skill"

    frontmatter = {
        "name": skill_name,
        "description": description,
        "license": SKILL_LICENSE,
        "compatibility": compatibility,
        "metadata": {
            "source": SOURCE_NAME,
            "title": title,
        },
    }
    return f"{dump_frontmatter(frontmatter)}\n{content}\n"


def render_agent(content: str, agent_name: str) -> str:
    description = extract_title(content) or extract_description(content) or f"{agent_name} agent"
    frontmatter = {
        "description": description,
        "model": AGENT_MODEL,
    }
    return f"{dump_frontmatter(frontmatter)}\n{content}\n"


def render_command(skill_content: str, skill_name: str) -> str:
    description = extract_description(skill_content) or f"Run {skill_name} skill"
    frontmatter = {
        "description": description,
        "agent": COMMAND_AGENT,
    }
    return f"{dump_frontmatter(frontmatter)}\n{COMMAND_BODY.format(skill=skill_name)}"


# =============================================================================
# FILE CONVERSIONS
# =============================================================================


def _read_markdown(path: Path) -> str:
    content = safe_read_text(path)
    if content is None:
        raise OSError(f"cannot read {path.name}")
    return content


def convert_skill(skill_dir: Path, dest_dir: Path, compatibility: str) -> Optional[Path]:
    """
    Convert <skill_dir>/SKILL.md into <dest_dir>/<skill>/SKILL.md.

    Returns None (nothing written) when the skill has no SKILL.md.
    """
    source_file = skill_dir / SKILL_FILE
    if not source_file.is_file():
        logger.debug("Skipping %s: no %s", skill_dir.name, SKILL_FILE)
        return None

    content = _read_markdown(source_file)
    dest_file = dest_dir / skill_dir.name / SKILL_FILE
    dest_file.parent.mkdir(parents=True, exist_ok=True)
    dest_file.write_text(render_skill(content, skill_dir.name, compatibility), encoding="utf-8")
    return dest_file


def convert_agent(agent_file: Path, dest_dir: Path) -> Path:
    """Convert agents/<name>.md into <dest_dir>/<name>.md."""
    content = _read_markdown(agent_file)
    dest_file = dest_dir / agent_file.name
    dest_dir.mkdir(parents=True, exist_ok=True)
    dest_file.write_text(render_agent(content, agent_file.stem), encoding="utf-8")
    return dest_file


def generate_command(skill_dir: Path, dest_dir: Path) -> Optional[Path]:
    """Write a command that invokes the skill; None when it has no SKILL.md."""
    source_file = skill_dir / SKILL_FILE
    if not source_file.is_file():
        return None

    content = _read_markdown(source_file)
    dest_file = dest_dir / f"{skill_dir.name}.md"
    dest_dir.mkdir(parents=True, exist_ok=True)
    dest_file.write_text(render_command(content, skill_dir.name), encoding="utf-8")
    return dest_file


def list_skill_dirs(skills_dir: Path) -> List[Path]:
    if not skills_dir.is_dir():
        return []
    return sorted(item for item in skills_dir.iterdir() if item.is_dir())


def list_agent_files(agents_dir: Path) -> List[Path]:
    if not agents_dir.is_dir():
        return []
    return sorted(item for item in agents_dir.glob("*.md") if item.is_file())
