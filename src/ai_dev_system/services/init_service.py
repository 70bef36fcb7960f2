"""
Business logic for 'ai-dev init'.

Detect or validate the stack, copy the corpus into .ai/, create the AI tool
bridges and record the choices in .ai/ai-dev.yml.
"""

from pathlib import Path
from typing import List, Optional

from ai_dev_system import __version__
from ai_dev_system.bridges import create_bridges
from ai_dev_system.copier import CopyResult, copy_ai_directory
from ai_dev_system.detector import detect_stack, is_valid_stack
from ai_dev_system.paths import AI_BRIDGES, AVAILABLE_STACKS, get_manifest_path, get_source_ai_dir
from ai_dev_system.utils import (
    Colors,
    logger,
    print_error,
    print_info,
    print_skipped,
    print_success,
    write_manifest,
)


def parse_tools(ai: Optional[str]) -> Optional[List[str]]:
    """
    Turn the --ai option into a list of bridge ids.

    None/"all" selects every bridge. Returns None when any name is unknown.
    """
    if not ai or ai.strip().lower() == "all":
        return list(AI_BRIDGES)

    requested = [t.strip().lower() for t in ai.split(",") if t.strip()]
    unknown = [t for t in requested if t not in AI_BRIDGES]
    if unknown or not requested:
        return None
    return list(dict.fromkeys(requested))


def report_copy(result: CopyResult, done: str, partial: str) -> None:
    """Print a CopyResult the same way for the corpus and the bridges."""
    if result.copied:
        print(f"{Colors.GREEN}✅ {done}{Colors.ENDC}")
        for item in result.copied:
            print_success(item)
        if result.skipped:
            print_info(f"{len(result.skipped)} existing item(s) left untouched")
    elif result.skipped:
        print(f"{Colors.YELLOW}⚠️  {partial}{Colors.ENDC}")
        for item in result.skipped:
            print_skipped(item)

    for error in result.errors:
        print_error(error)


def run_init(
    target_dir: Path,
    stack: Optional[str] = None,
    ai: Optional[str] = None,
    force: bool = False,
    bridge: bool = True,
    interactive: bool = False,
) -> bool:
    """Initialize ai-dev-system in target_dir. Returns False on user errors."""
    target = Path(target_dir).resolve()
    source = get_source_ai_dir()

    print(f"{Colors.HEADER}🚀 Initializing ai-dev-system{Colors.ENDC}\n")
    print_info(f"Target: {target}")
    print_info(f"Source: {source}\n")

    if not target.is_dir():
        print(f"{Colors.RED}❌ Target directory not found: {target}{Colors.ENDC}")
        return False

    # Step 1: Detect or validate stack
    if stack:
        if not is_valid_stack(stack):
            print(f"{Colors.RED}❌ Invalid stack: {stack}{Colors.ENDC}")
            print(f"{Colors.YELLOW}  Available stacks: {', '.join(AVAILABLE_STACKS)}{Colors.ENDC}")
            return False
        print(f"{Colors.GREEN}✅ Using specified stack: {Colors.CYAN}{stack}{Colors.ENDC}")
    else:
        detection = detect_stack(target)
        if detection.stack:
            stack = detection.stack
            print(f"{Colors.GREEN}✅ Detected stack: {Colors.CYAN}{stack}{Colors.ENDC} ({detection.confidence} confidence)")
            print_info(f"Reason: {detection.reason}")
        elif interactive:
            from ai_dev_system.prompts import prompt_stack
            stack = prompt_stack()
        if not stack:
            print(f"{Colors.YELLOW}⚠️  Could not detect stack, copying all stacks{Colors.ENDC}")

    # Step 2: Resolve AI tool bridges before touching the disk
    tools: List[str] = []
    if bridge:
        if ai is None and interactive:
            from ai_dev_system.prompts import prompt_tools
            tools = prompt_tools() or []
            if not tools:
                print(f"{Colors.YELLOW}No AI tool selected, skipping bridges.{Colors.ENDC}")
        else:
            parsed = parse_tools(ai)
            if parsed is None:
                print(f"{Colors.RED}❌ Invalid AI tool list: {ai}{Colors.ENDC}")
                print(f"{Colors.YELLOW}  Available tools: {', '.join(AI_BRIDGES)}, all{Colors.ENDC}")
                return False
            tools = parsed

    # Step 3: Copy .ai directory
    print(f"\n{Colors.CYAN}📂 Copying .ai directory...{Colors.ENDC}")
    copy_result = copy_ai_directory(source, target, stack=stack, overwrite=force)
    report_copy(copy_result, "Copied .ai directory", "All items already present, skipped")

    # Step 4: Create AI tool bridges
    if tools:
        print(f"\n{Colors.CYAN}🔗 Creating AI tool bridges...{Colors.ENDC}")
        bridge_result = create_bridges(target, tools)
        report_copy(bridge_result, "Created AI tool bridges", "Bridges already present, skipped")

    manifest = get_manifest_path(target)
    if force or not manifest.exists():
        try:
            write_manifest(manifest, stack, tools, __version__)
        except OSError as e:
            logger.debug("Manifest write failed: %s", e)
            print_error(f"{manifest.name}: {e}")

    # Summary
    print(f"\n{Colors.GREEN}✨ Initialization complete!{Colors.ENDC}\n")
    print_info("Next steps:")
    print_info("  1. Review .ai/context/index.md for context loading rules")
    print_info("  2. Configure your AI tool to use the bridge directory")
    print_info("  3. Run 'ai-dev sync opencode' or 'ai-dev sync claude' for tool-native files")
    if stack:
        print_info(f"  4. Stack-specific standards: .ai/stacks/{stack}/")
    print()
    return True
