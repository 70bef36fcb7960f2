import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

# Configure module logger
logger = logging.getLogger("ai_dev_system")


# ANSI colors
class Colors:
    HEADER = "\033[95m"
    BLUE = "\033[94m"
    CYAN = "\033[96m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    GRAY = "\033[90m"
    BOLD = "\033[1m"
    ENDC = "\033[0m"


def configure_logging(verbose: bool = False) -> None:
    """Route the package logger to stderr; DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# =============================================================================
# CONSOLE OUTPUT
# =============================================================================


def print_success(text: str) -> None:
    print(f"{Colors.GREEN}  ✓ {text}{Colors.ENDC}")


def print_skipped(text: str) -> None:
    print(f"{Colors.YELLOW}  ⊘ {text}{Colors.ENDC}")


def print_error(text: str) -> None:
    print(f"{Colors.RED}  ✗ {text}{Colors.ENDC}")


def print_info(text: str) -> None:
    print(f"{Colors.GRAY}  {text}{Colors.ENDC}")


# =============================================================================
# FILE UTILITIES
# =============================================================================


def directory_exists(path: Path) -> bool:
    try:
        return path.is_dir()
    except OSError:
        return False


def list_subdirs(path: Path) -> List[str]:
    """Sorted names of the immediate subdirectories of path (empty if missing)."""
    if not directory_exists(path):
        return []
    return sorted(item.name for item in path.iterdir() if item.is_dir())


def safe_read_text(path: Path, encoding: str = "utf-8") -> Optional[str]:
    """
    Safely read text file with encoding fallback.
    Returns None if file cannot be read.
    """
    for enc in [encoding, "utf-8-sig", "latin-1"]:
        try:
            return path.read_text(encoding=enc)
        except UnicodeDecodeError:
            continue
        except OSError as e:
            logger.debug("Error reading %s: %s", path, e)
            return None
    logger.debug("Could not decode %s with any known encoding", path)
    return None


def read_json(path: Path) -> Optional[Any]:
    """Parse a JSON file; None when missing, unreadable or malformed."""
    text = safe_read_text(path)
    if text is None:
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        logger.debug("Ignoring malformed JSON in %s: %s", path, e)
        return None


def write_json(path: Path, data: Dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")


def relative_posix(path: Path, root: Path) -> str:
    """Path relative to root with forward slashes, for console reports."""
    return path.relative_to(root).as_posix()


# =============================================================================
# CONTENT UTILITIES
# =============================================================================


def dump_frontmatter(frontmatter: Dict[str, Any]) -> str:
    """Render a frontmatter dict as a `---` delimited YAML block."""
    fm_str = yaml.dump(frontmatter, default_flow_style=False, allow_unicode=True, sort_keys=False)
    return f"---\n{fm_str}---\n"


# =============================================================================
# PROJECT MANIFEST
# =============================================================================


def write_manifest(path: Path, stack: Optional[str], tools: List[str], version: str) -> None:
    """Record how the project was initialized in .ai/ai-dev.yml."""
    data = {
        "stack": stack or "all",
        "tools": list(tools),
        "version": version,
        "created_at": datetime.now(timezone.utc).isoformat(),
    }
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")


def load_manifest(path: Path) -> Optional[Dict[str, Any]]:
    if not path.is_file():
        return None
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        logger.debug("Ignoring unreadable manifest %s: %s", path, e)
        return None
    return data if isinstance(data, dict) else None
