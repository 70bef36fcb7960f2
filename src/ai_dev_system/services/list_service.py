"""
Business logic for 'ai-dev list'.
"""

from pathlib import Path
from typing import Optional

from ai_dev_system.copier import list_available_skills
from ai_dev_system.core.converter import converter_registry
from ai_dev_system.paths import AI_BRIDGES, AVAILABLE_STACKS, get_manifest_path, get_source_ai_dir
from ai_dev_system.utils import Colors, load_manifest


def run_list(target_dir: Optional[Path] = None) -> None:
    """Print stacks, bridges, sync formats and skills from the source corpus."""
    source = get_source_ai_dir()

    print(f"{Colors.BLUE}📚 Stacks:{Colors.ENDC}")
    for stack in AVAILABLE_STACKS:
        print(f"  - {Colors.YELLOW}{stack}{Colors.ENDC}")

    print(f"{Colors.BLUE}🔗 AI tool bridges:{Colors.ENDC}")
    for tool, bridge in AI_BRIDGES.items():
        print(f"  - {Colors.YELLOW}{tool}{Colors.ENDC}: {bridge}/")

    print(f"{Colors.BLUE}🔄 Sync formats:{Colors.ENDC}")
    for converter in converter_registry.all():
        info = converter.format_info
        print(f"  - {Colors.YELLOW}{info.name}{Colors.ENDC}: {info.display_name} ({info.output_dir}/)")

    print(f"{Colors.BLUE}🧰 Skills:{Colors.ENDC}")
    available = list_available_skills(source)
    if not available:
        print("  (none)")
    for group, skills in available.items():
        print(f"  {Colors.BOLD}{group}{Colors.ENDC}: {', '.join(skills)}")

    if target_dir is None:
        return

    manifest = load_manifest(get_manifest_path(target_dir))
    if manifest:
        tools = ", ".join(manifest.get("tools") or []) or "(none)"
        print(f"{Colors.BLUE}📍 Project:{Colors.ENDC} stack={manifest.get('stack')} tools={tools}")
