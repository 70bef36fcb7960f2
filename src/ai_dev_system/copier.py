"""
Directory Synchronizer

Copies the source corpus into a project's .ai/ directory without clobbering
files the project already has, and copies single stacks or skills on demand.
"""

import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from .paths import AI_DIR_NAME, AVAILABLE_STACKS
from .utils import directory_exists, list_subdirs, logger, relative_posix


@dataclass
class CopyResult:
    copied: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.errors


@dataclass
class AddResult:
    status: str  # added|exists|invalid|not_found
    kind: str  # stack|skill
    name: str
    destination: Optional[Path] = None
    contents: List[str] = field(default_factory=list)
    available: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status == "added"


def _excluded_by_stack(relative: Path, stack: Optional[str]) -> bool:
    """True for files under stacks/<other>/ when a stack filter is active."""
    parts = relative.parts
    if stack is None or len(parts) < 2 or parts[0] != "stacks":
        return False
    return parts[1] != stack


def copy_ai_directory(
    source_dir: Path,
    target_dir: Path,
    stack: Optional[str] = None,
    overwrite: bool = False,
) -> CopyResult:
    """
    Copy the corpus into <target_dir>/.ai/, file by file.

    Existing files are skipped unless overwrite is set. A failure on one file
    is recorded and the copy carries on with the rest.
    """
    result = CopyResult()
    source_dir = Path(source_dir)
    target_root = Path(target_dir).resolve()
    dest_root = target_root / AI_DIR_NAME

    if not directory_exists(source_dir):
        result.errors.append(f"{source_dir}: source directory not found")
        return result

    for src in sorted(source_dir.rglob("*")):
        if not src.is_file():
            continue

        relative = src.relative_to(source_dir)
        if _excluded_by_stack(relative, stack):
            continue

        dest = dest_root / relative
        reported = relative_posix(dest, target_root)

        if dest.is_dir():
            result.errors.append(f"{reported}: destination is a directory")
            continue

        if dest.exists() and not overwrite:
            result.skipped.append(reported)
            continue

        try:
            dest.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(src, dest)
            result.copied.append(reported)
        except OSError as e:
            logger.debug("Copy failed for %s: %s", src, e)
            result.errors.append(f"{reported}: {e}")

    logger.debug(
        "Copied %d, skipped %d, failed %d into %s",
        len(result.copied), len(result.skipped), len(result.errors), dest_root,
    )
    return result


# =============================================================================
# SINGLE SUBTREE COPIES (ai-dev add)
# =============================================================================


def list_available_skills(source_dir: Path) -> Dict[str, List[str]]:
    """Core skills first, then one entry per stack that ships skills."""
    source_dir = Path(source_dir)
    available: Dict[str, List[str]] = {}

    core = list_subdirs(source_dir / "skills")
    if core:
        available["core"] = core

    for stack in list_subdirs(source_dir / "stacks"):
        stack_skills = list_subdirs(source_dir / "stacks" / stack / "skills")
        if stack_skills:
            available[stack] = stack_skills

    return available


def _copy_subtree(src: Path, dest: Path) -> List[str]:
    dest.parent.mkdir(parents=True, exist_ok=True)
    shutil.copytree(src, dest)
    return sorted(item.name for item in dest.iterdir())


def add_stack(source_dir: Path, target_ai_dir: Path, name: str) -> AddResult:
    """Copy stacks/<name> into the project unless it is already there."""
    if name not in AVAILABLE_STACKS:
        return AddResult("invalid", "stack", name, available={"stacks": list(AVAILABLE_STACKS)})

    src = Path(source_dir) / "stacks" / name
    dest = Path(target_ai_dir) / "stacks" / name

    if not directory_exists(src):
        return AddResult("not_found", "stack", name, available={"stacks": list_subdirs(Path(source_dir) / "stacks")})

    if dest.exists():
        return AddResult("exists", "stack", name, destination=dest)

    contents = _copy_subtree(src, dest)
    logger.debug("Added stack %s to %s", name, dest)
    return AddResult("added", "stack", name, destination=dest, contents=contents)


def _is_plain_name(name: str) -> bool:
    """A single path component: no separators, not . or .."""
    return bool(name) and name not in (".", "..") and "/" not in name and "\\" not in name


def _find_skill_source(source_dir: Path, target_ai_dir: Path, name: str):
    """Locate a skill among core skills, then per-stack skills (sorted stacks)."""
    if not _is_plain_name(name):
        return None, None

    core = source_dir / "skills" / name
    if directory_exists(core):
        return core, target_ai_dir / "skills" / name

    for stack in list_subdirs(source_dir / "stacks"):
        candidate = source_dir / "stacks" / stack / "skills" / name
        if directory_exists(candidate):
            return candidate, target_ai_dir / "stacks" / stack / "skills" / name

    return None, None


def add_skill(source_dir: Path, target_ai_dir: Path, name: str) -> AddResult:
    """Copy one skill folder into the project unless it is already there."""
    source_dir = Path(source_dir)
    target_ai_dir = Path(target_ai_dir)

    src, dest = _find_skill_source(source_dir, target_ai_dir, name)
    if src is None:
        return AddResult("not_found", "skill", name, available=list_available_skills(source_dir))

    if dest.exists():
        return AddResult("exists", "skill", name, destination=dest)

    contents = _copy_subtree(src, dest)
    logger.debug("Added skill %s to %s", name, dest)
    return AddResult("added", "skill", name, destination=dest, contents=contents)
