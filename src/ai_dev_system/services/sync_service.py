"""
Business logic for 'ai-dev sync'.

Runs the registered converter for one tool (or all of them) against the
project's .ai/ directory, falling back to the bundled corpus.
"""

from pathlib import Path
from typing import List, Optional

from ai_dev_system.bridges import create_bridges
from ai_dev_system.core.converter import ConversionResult, converter_registry
from ai_dev_system.paths import SYNC_TOOLS, resolve_content_dir
from ai_dev_system.utils import Colors, logger, print_error


def resolve_sync_targets(tool: str) -> Optional[List[str]]:
    """'all' -> every sync tool; a known tool -> [tool]; otherwise None."""
    tool = tool.lower()
    if tool == "all":
        return list(SYNC_TOOLS)
    if tool in SYNC_TOOLS and converter_registry.get(tool):
        return [tool]
    return None


def sync_tool(tool: str, project_dir: Path, verbose: bool = True) -> ConversionResult:
    converter = converter_registry.get(tool)
    info = converter.format_info
    source_root = resolve_content_dir(project_dir)
    logger.debug("Syncing %s from %s", info.name, source_root)

    if verbose:
        print(f"{Colors.HEADER}🔄 Syncing to {info.display_name} format...{Colors.ENDC}\n")

    bridge_result = create_bridges(project_dir, [info.name])
    result = converter.convert(source_root, project_dir, verbose=verbose)
    result.errors[:0] = bridge_result.errors

    if verbose:
        for error in result.errors:
            print_error(error)
        print(f"\n{Colors.GREEN}🎉 {info.display_name} sync complete!{Colors.ENDC}\n")
    return result


def run_sync(tool: str, target_dir: Path) -> bool:
    project_dir = Path(target_dir).resolve()

    targets = resolve_sync_targets(tool)
    if targets is None:
        print(f"{Colors.RED}❌ Unknown sync target: {tool}{Colors.ENDC}")
        print(f"{Colors.YELLOW}  Available targets: {', '.join(SYNC_TOOLS)}, all{Colors.ENDC}")
        return False

    if not project_dir.is_dir():
        print(f"{Colors.RED}❌ Target directory not found: {project_dir}{Colors.ENDC}")
        return False

    ok = True
    for index, name in enumerate(targets):
        if index:
            print("\n---\n")
        ok = sync_tool(name, project_dir).ok and ok
    return ok
