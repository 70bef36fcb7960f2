"""
Converter base class and registry.

Every supported AI tool registers one converter; the CLI dispatches on the
tool name through `converter_registry`.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Type


@dataclass(frozen=True)
class ConverterFormat:
    name: str
    display_name: str
    output_dir: str
    status: str = "stable"


@dataclass
class ConversionResult:
    skills: int = 0
    agents: int = 0
    commands: int = 0
    files: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


class BaseConverter(ABC):
    """Converts a .ai/ content tree into one tool's layout."""

    @property
    @abstractmethod
    def format_info(self) -> ConverterFormat:
        ...

    @abstractmethod
    def convert(self, source_root: Path, dest_root: Path, verbose: bool = True) -> ConversionResult:
        """
        Args:
            source_root: content directory (a project's .ai/ or the corpus)
            dest_root: project root receiving the tool files
            verbose: print progress messages
        """


class ConverterRegistry:
    def __init__(self):
        self._converters: Dict[str, BaseConverter] = {}

    def register(self, converter_cls: Type[BaseConverter]) -> Type[BaseConverter]:
        """Class decorator: instantiate and register under its format name."""
        converter = converter_cls()
        self._converters[converter.format_info.name.lower()] = converter
        return converter_cls

    def get(self, name: str) -> Optional[BaseConverter]:
        return self._converters.get(name.lower())

    def all(self) -> List[BaseConverter]:
        return list(self._converters.values())

    def names(self) -> List[str]:
        return list(self._converters)


converter_registry = ConverterRegistry()
