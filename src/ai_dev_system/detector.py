"""
Stack Detector

Guesses a project's technology stack from its dependency manifests,
falling back to the file extensions found in the project root.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from .paths import AVAILABLE_STACKS
from .utils import logger, read_json


@dataclass(frozen=True)
class DetectionResult:
    stack: Optional[str]
    confidence: str  # high|medium|low
    reason: str


# (manifest, dependency, stack, confidence) in priority order
MANIFEST_RULES = [
    ("composer.json", "laravel/framework", "php-laravel", "high"),
    ("package.json", "react", "react-typescript", "high"),
    ("package.json", "react-dom", "react-typescript", "high"),
    ("package.json", "express", "node-express", "high"),
    ("package.json", "typescript", "react-typescript", "low"),
]

# (extension, stack, confidence, reason)
EXTENSION_RULES = [
    (".tsx", "react-typescript", "medium", "Found .tsx files in project root"),
    (".php", "php-laravel", "low", "Found .php files (assuming Laravel)"),
]

# manifest -> sections that list dependencies
DEPENDENCY_SECTIONS = {
    "composer.json": ("require", "require-dev"),
    "package.json": ("dependencies", "devDependencies"),
}


def _load_dependencies(manifest: Path) -> Dict[str, Any]:
    """Merge the dependency sections of a manifest; {} when absent or malformed."""
    if not manifest.is_file():
        return {}

    data = read_json(manifest)
    if not isinstance(data, dict):
        return {}

    deps: Dict[str, Any] = {}
    for section in DEPENDENCY_SECTIONS[manifest.name]:
        values = data.get(section)
        if isinstance(values, dict):
            deps.update(values)
    return deps


def _describe_match(manifest: str, dependency: str, confidence: str) -> str:
    if confidence == "low" and dependency == "typescript":
        return "Found typescript but no specific framework"
    return f"Found {dependency} in {manifest}"


def detect_stack(project_dir) -> DetectionResult:
    """Detect the technology stack of a project. Never raises."""
    root = Path(project_dir).resolve()

    manifests: Dict[str, Dict[str, Any]] = {}
    for manifest, dependency, stack, confidence in MANIFEST_RULES:
        if manifest not in manifests:
            manifests[manifest] = _load_dependencies(root / manifest)
        if manifests[manifest].get(dependency):
            logger.debug("Stack %s matched %s in %s", stack, dependency, manifest)
            return DetectionResult(stack, confidence, _describe_match(manifest, dependency, confidence))

    try:
        names = [item.name for item in root.iterdir() if item.is_file()]
    except OSError as e:
        logger.debug("Cannot list %s: %s", root, e)
        names = []

    for extension, stack, confidence, reason in EXTENSION_RULES:
        if any(name.endswith(extension) for name in names):
            return DetectionResult(stack, confidence, reason)

    return DetectionResult(None, "low", "Could not detect stack")


def is_valid_stack(stack: str) -> bool:
    """Validate if a stack name is valid."""
    return stack in AVAILABLE_STACKS
