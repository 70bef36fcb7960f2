"""
OpenCode Converter
Converts the .ai/ corpus to OpenCode format.

Output structure:
- .opencode/skill/<skill-name>/SKILL.md (skills with Agent Skills frontmatter)
- .opencode/agent/*.md (agents with description/model frontmatter)
- .opencode/command/*.md (one command per skill)
- .opencode/plugin/ai-dev-hooks.ts (plugin template)
- opencode.json (project config, regenerated on every sync)
- AGENTS.md (project context, only when missing)

Reference: https://opencode.ai/docs/config/
           https://opencode.ai/docs/skills/
"""

from pathlib import Path
from typing import Any, Dict

from ..core.converter import BaseConverter, ConversionResult, ConverterFormat, converter_registry
from ..core.markdown import (
    convert_agent,
    convert_skill,
    generate_command,
    list_agent_files,
    list_skill_dirs,
)
from ..utils import Colors, logger, relative_posix, write_json

OPENCODE_CONFIG: Dict[str, Any] = {
    "$schema": "https://opencode.ai/config.json",
    "theme": "opencode",
    "autoupdate": True,
    "share": "manual",
    "instructions": [
        ".ai/context/index.md",
    ],
    "permission": {
        "edit": "allow",
        "write": "allow",
        "bash": "allow",
        "skill": {"*": "allow"},
    },
    "compaction": {
        "auto": True,
        "prune": True,
    },
    "formatter": {
        "prettier": {"disabled": False},
    },
}

PLUGIN_TEMPLATE = """import type { Plugin } from "@opencode-ai/plugin"

/**
 * AI Dev System Plugin
 *
 * Provides hooks for automatic context loading and protection.
 */
export const AiDevPlugin: Plugin = async ({ project, client, $, directory }) => {
  await client.app.log({
    service: "ai-dev-plugin",
    level: "info",
    message: "AI Dev System plugin loaded",
  })

  return {
    "session.created": async () => {
      await client.app.log({
        service: "ai-dev-plugin",
        level: "info",
        message: "Session created - context available at .ai/context/index.md",
      })
    },

    // Block reads of likely secrets
    "tool.execute.before": async (input, output) => {
      const protectedPatterns = [".env", "credentials", "secrets", ".pem", ".key", "password"]

      if (input.tool === "read") {
        const filePath = output.args.filePath?.toLowerCase() || ""
        for (const pattern of protectedPatterns) {
          if (filePath.includes(pattern)) {
            throw new Error(`Protected file access denied: ${pattern}`)
          }
        }
      }
    },

    "session.idle": async () => {
      try {
        await $`osascript -e 'display notification "Task completed!" with title "OpenCode"'`
      } catch {
        // non-macOS
      }
    },

    "file.edited": async ({ path }) => {
      await client.app.log({
        service: "ai-dev-plugin",
        level: "debug",
        message: `File edited: ${path}`,
      })
    },
  }
}
"""

AGENTS_MD_TEMPLATE = """# {project_name}

## Project Overview

[Brief description of the project]

## Tech Stack

[List the main technologies used]

## Development Commands

```bash
# Install dependencies
npm install  # or bun install

# Run development server
npm run dev

# Run tests
npm test

# Build for production
npm run build
```

## Coding Standards

- Follow the standards in `.ai/context/core/standards/`
- Use conventional commits for git messages
- Write tests for new features

## Context Files

This project uses ai-dev-system for AI-assisted development:

- `.ai/context/` - Coding standards and workflows
- `.ai/skills/` - Reusable AI skills
- `.ai/agents/` - Specialized AI agents
- `.ai/stacks/` - Tech stack configurations

Load context with: `@.ai/context/index.md`
"""


@converter_registry.register
class OpenCodeConverter(BaseConverter):

    @property
    def format_info(self) -> ConverterFormat:
        return ConverterFormat(name="opencode", display_name="OpenCode", output_dir=".opencode")

    def convert(self, source_root: Path, dest_root: Path, verbose: bool = True) -> ConversionResult:
        result = ConversionResult()
        opencode_dir = dest_root / ".opencode"

        skills_src = source_root / "skills"
        skills_dest = opencode_dir / "skill"
        agents_dest = opencode_dir / "agent"
        commands_dest = opencode_dir / "command"

        # Skills
        for skill_dir in list_skill_dirs(skills_src):
            try:
                written = convert_skill(skill_dir, skills_dest, compatibility="opencode")
            except OSError as e:
                logger.debug("OpenCode skill %s failed: %s", skill_dir.name, e)
                result.errors.append(f"skill:{skill_dir.name}: {e}")
                continue
            if written:
                result.skills += 1
                result.files.append(relative_posix(written, dest_root))
        if verbose:
            print(f"{Colors.GREEN}✅ Converted {result.skills} skills to .opencode/skill/{Colors.ENDC}")

        # Agents
        for agent_file in list_agent_files(source_root / "agents"):
            try:
                written = convert_agent(agent_file, agents_dest)
            except OSError as e:
                logger.debug("OpenCode agent %s failed: %s", agent_file.name, e)
                result.errors.append(f"agent:{agent_file.name}: {e}")
                continue
            result.agents += 1
            result.files.append(relative_posix(written, dest_root))
        if verbose:
            print(f"{Colors.GREEN}✅ Converted {result.agents} agents to .opencode/agent/{Colors.ENDC}")

        # Commands
        for skill_dir in list_skill_dirs(skills_src):
            try:
                written = generate_command(skill_dir, commands_dest)
            except OSError as e:
                result.errors.append(f"command:{skill_dir.name}: {e}")
                continue
            if written:
                result.commands += 1
                result.files.append(relative_posix(written, dest_root))
        if verbose:
            print(f"{Colors.GREEN}✅ Generated {result.commands} commands in .opencode/command/{Colors.ENDC}")

        self._write_support_files(dest_root, result, verbose)
        return result

    def _write_support_files(self, dest_root: Path, result: ConversionResult, verbose: bool) -> None:
        plugin_file = dest_root / ".opencode" / "plugin" / "ai-dev-hooks.ts"
        config_file = dest_root / "opencode.json"
        agents_md = dest_root / "AGENTS.md"

        try:
            plugin_file.parent.mkdir(parents=True, exist_ok=True)
            plugin_file.write_text(PLUGIN_TEMPLATE, encoding="utf-8")
            result.files.append(relative_posix(plugin_file, dest_root))
            if verbose:
                print(f"{Colors.GREEN}✅ Created plugin template .opencode/plugin/ai-dev-hooks.ts{Colors.ENDC}")
        except OSError as e:
            result.errors.append(f"plugin: {e}")

        try:
            write_json(config_file, OPENCODE_CONFIG)
            result.files.append(config_file.name)
            if verbose:
                print(f"{Colors.GREEN}✅ Generated opencode.json{Colors.ENDC}")
        except OSError as e:
            result.errors.append(f"opencode.json: {e}")

        if agents_md.exists():
            if verbose:
                print(f"{Colors.YELLOW}🔒 Kept existing AGENTS.md{Colors.ENDC}")
            return
        try:
            project_name = dest_root.resolve().name
            agents_md.write_text(AGENTS_MD_TEMPLATE.format(project_name=project_name), encoding="utf-8")
            result.files.append(agents_md.name)
            if verbose:
                print(f"{Colors.GREEN}✅ Generated AGENTS.md{Colors.ENDC}")
        except OSError as e:
            result.errors.append(f"AGENTS.md: {e}")
