"""
Configuration management: models, loading, and validation.

Handles:
- ExtractionConfig: input/output files and output options
- Loading from YAML, with command-line overrides

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import load_extraction_config
from infrastructure.config.models import ExtractionConfig

__all__ = [
    "ExtractionConfig",
    "load_extraction_config",
]
