"""
Business logic for 'ai-dev add'.
"""

from pathlib import Path

from ai_dev_system.copier import AddResult, add_skill, add_stack
from ai_dev_system.paths import get_source_ai_dir, get_target_ai_dir
from ai_dev_system.utils import Colors, directory_exists, print_info

ADD_KINDS = ("stack", "skill")


def _print_available(result: AddResult) -> None:
    if result.kind == "stack":
        print_info(f"Available stacks: {', '.join(result.available.get('stacks', []))}")
        return

    print_info("\nAvailable skills:")
    if not result.available:
        print_info("  (none)")
    for group, skills in result.available.items():
        label = "Core skills" if group == "core" else f"{group} skills"
        print_info(f"  {label}:")
        for skill in skills:
            print_info(f"    - {skill}")


def run_add(kind: str, name: str, target_dir: Path) -> bool:
    """Copy one stack or skill into an initialized project."""
    target = Path(target_dir).resolve()
    target_ai_dir = get_target_ai_dir(target)

    print(f"{Colors.HEADER}➕ Adding {kind}: {name}{Colors.ENDC}\n")

    if not directory_exists(target_ai_dir):
        print(f"{Colors.RED}Error: .ai directory not found.{Colors.ENDC}")
        print_info("Run `ai-dev init` first to initialize the project.")
        return False

    if kind not in ADD_KINDS:
        print(f"{Colors.RED}Invalid type: {kind}{Colors.ENDC}")
        print_info(f"Valid types: {', '.join(ADD_KINDS)}")
        return False

    source = get_source_ai_dir()
    try:
        if kind == "stack":
            result = add_stack(source, target_ai_dir, name)
        else:
            result = add_skill(source, target_ai_dir, name)
    except OSError as e:
        print(f"{Colors.RED}❌ Failed to add {kind}{Colors.ENDC}")
        print(f"{Colors.RED}  Error: {e}{Colors.ENDC}")
        return False

    if result.status == "invalid":
        print(f"{Colors.RED}❌ Invalid {kind}: {name}{Colors.ENDC}")
        _print_available(result)
        return False

    if result.status == "not_found":
        print(f"{Colors.RED}❌ {kind.capitalize()} not found: {name}{Colors.ENDC}")
        _print_available(result)
        return False

    location = result.destination.relative_to(target).as_posix()
    if result.status == "exists":
        print(f"{Colors.YELLOW}⚠️  {kind.capitalize()} already exists: {name}{Colors.ENDC}")
        print_info(f"Location: {location}/")
        return True

    print(f"{Colors.GREEN}✅ Added {kind}: {Colors.CYAN}{name}{Colors.ENDC}")
    print_info(f"Location: {location}/")
    print_info("Contents:")
    for item in result.contents:
        print_info(f"  - {item}")
    return True
