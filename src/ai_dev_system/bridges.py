"""
Bridge Generator

Creates the directory skeleton each AI tool expects, with a README that
points the tool back at the shared .ai/ content.
"""

from pathlib import Path
from typing import Iterable, List, Union

from .copier import CopyResult
from .paths import AI_BRIDGES, BRIDGE_LAYOUT
from .utils import logger

BRIDGE_README = """# {tool} bridge

This directory was created by ai-dev-system to expose the shared project
context to {tool}.

The source of truth lives in `.ai/`:

- `.ai/context/index.md` - context loading rules
- `.ai/context/` - coding standards and workflows
- `.ai/skills/` - reusable skills
- `.ai/agents/` - specialized agents
- `.ai/stacks/` - tech stack standards

Run `ai-dev sync {tool}` to regenerate tool-specific files when supported.
"""


def resolve_tools(tools: Union[str, Iterable[str]]) -> List[str]:
    """'all' -> every bridge; otherwise the known ids, in the order given."""
    if tools == "all":
        return list(AI_BRIDGES)
    if isinstance(tools, str):
        tools = [tools]
    return [tool for tool in tools if tool in AI_BRIDGES]


def create_bridges(target_dir: Path, tools: Union[str, Iterable[str]] = "all") -> CopyResult:
    """Create bridge directories for the requested tools."""
    result = CopyResult()
    root = Path(target_dir).resolve()

    for tool in resolve_tools(tools):
        bridge_name = AI_BRIDGES[tool]
        bridge_dir = root / bridge_name
        readme = bridge_dir / "README.md"
        reported = f"{bridge_name}/"

        try:
            for subdir in BRIDGE_LAYOUT[tool]:
                (bridge_dir / subdir).mkdir(parents=True, exist_ok=True)

            if readme.exists():
                result.skipped.append(reported)
                continue

            readme.write_text(BRIDGE_README.format(tool=tool), encoding="utf-8")
            result.copied.append(reported)
        except OSError as e:
            logger.debug("Bridge %s failed: %s", bridge_name, e)
            result.errors.append(f"{reported}: {e}")

    return result
