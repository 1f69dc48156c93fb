"""Conversion pipeline from note exports to Markdown files."""
from .report import ConversionReport
from .simplenote import SimplenoteConverter, load_collection, parse_collection

__all__ = [
    "ConversionReport",
    "SimplenoteConverter",
    "load_collection",
    "parse_collection",
]
