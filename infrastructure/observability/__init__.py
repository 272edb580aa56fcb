"""
Observability: structured logging and context management.

Provides:
- Contextual logging with run tag and current source file
- Log rotation and file management
"""

from infrastructure.observability.logging import (
    clear_source_context,
    configure_logging,
    make_run_tag,
    set_log_context,
)

__all__ = [
    "configure_logging",
    "set_log_context",
    "clear_source_context",
    "make_run_tag",
]
