"""Convert note exports into Markdown files with YAML front-matter."""
from .processor import process_simplenote

__version__ = "0.1.0"

__all__ = ["process_simplenote"]
