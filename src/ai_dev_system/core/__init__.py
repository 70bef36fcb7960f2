"""Converter contracts and the markdown helpers shared by every converter."""

from ai_dev_system.core.converter import (
    BaseConverter,
    ConversionResult,
    ConverterFormat,
    converter_registry,
)

__all__ = ["BaseConverter", "ConversionResult", "ConverterFormat", "converter_registry"]
