"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains:
- Configuration loading (YAML, command-line overrides)
- Context group XML reading and writing
- Observability (logging)

This is the only layer that performs I/O operations.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.config import ExtractionConfig, load_extraction_config
from infrastructure.io import load_context_groups_file, write_context_groups_file

__all__ = [
    # Configuration
    "ExtractionConfig",
    "load_extraction_config",
    # XML files
    "load_context_groups_file",
    "write_context_groups_file",
]
