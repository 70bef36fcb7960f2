"""
Claude Code Converter
Converts the .ai/ corpus to Claude Code format.

Output structure:
- .claude/skills/<skill-name>/SKILL.md (Agent Skills frontmatter)
- .claude/commands/*.md (one slash command per skill)
- CLAUDE.md (project memory, only when missing)
"""

from pathlib import Path
from typing import List

from ..core.converter import BaseConverter, ConversionResult, ConverterFormat, converter_registry
from ..core.markdown import convert_skill, generate_command, list_skill_dirs
from ..utils import Colors, logger, relative_posix

CLAUDE_MD_TEMPLATE = """# {project_name}

## Project Overview

[Brief description of the project]

## Tech Stack

[List the main technologies used]

## Development Commands

```bash
npm install && npm run dev
```

## Context

This project uses ai-dev-system. Load context from:
- `.ai/context/index.md` - Main context index
- `.ai/stacks/` - Tech stack standards

## Skills

Custom skills are available in `.claude/skills/`:
{skills}
"""


def render_claude_md(project_name: str, skill_names: List[str]) -> str:
    skills = "\n".join(f"- {name}" for name in skill_names) if skill_names else "- (none)"
    return CLAUDE_MD_TEMPLATE.format(project_name=project_name, skills=skills)


@converter_registry.register
class ClaudeConverter(BaseConverter):

    @property
    def format_info(self) -> ConverterFormat:
        return ConverterFormat(name="claude", display_name="Claude Code", output_dir=".claude")

    def convert(self, source_root: Path, dest_root: Path, verbose: bool = True) -> ConversionResult:
        result = ConversionResult()
        claude_dir = dest_root / ".claude"
        skill_dirs = list_skill_dirs(source_root / "skills")

        for skill_dir in skill_dirs:
            try:
                written = convert_skill(skill_dir, claude_dir / "skills", compatibility="claude")
            except OSError as e:
                logger.debug("Claude skill %s failed: %s", skill_dir.name, e)
                result.errors.append(f"skill:{skill_dir.name}: {e}")
                continue
            if written:
                result.skills += 1
                result.files.append(relative_posix(written, dest_root))
        if verbose:
            print(f"{Colors.GREEN}✅ Converted {result.skills} skills to .claude/skills/{Colors.ENDC}")

        for skill_dir in skill_dirs:
            try:
                written = generate_command(skill_dir, claude_dir / "commands")
            except OSError as e:
                result.errors.append(f"command:{skill_dir.name}: {e}")
                continue
            if written:
                result.commands += 1
                result.files.append(relative_posix(written, dest_root))
        if verbose:
            print(f"{Colors.GREEN}✅ Generated {result.commands} commands in .claude/commands/{Colors.ENDC}")

        claude_md = dest_root / "CLAUDE.md"
        if claude_md.exists():
            if verbose:
                print(f"{Colors.YELLOW}🔒 Kept existing CLAUDE.md{Colors.ENDC}")
            return result

        try:
            content = render_claude_md(dest_root.resolve().name, [d.name for d in skill_dirs])
            claude_md.write_text(content, encoding="utf-8")
            result.files.append(claude_md.name)
            if verbose:
                print(f"{Colors.GREEN}✅ Generated CLAUDE.md{Colors.ENDC}")
        except OSError as e:
            result.errors.append(f"CLAUDE.md: {e}")

        return result
