"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain logic and infrastructure,
implementing the load -> close -> select -> write workflow.
"""

from application.extraction import ExtractionSummary, load_registry, log_extraction_summary, run_extraction
from application.selection import parse_wanted_list, read_wanted_file, select_groups

__all__ = [
    # Main workflow
    "run_extraction",
    "load_registry",
    "log_extraction_summary",
    "ExtractionSummary",
    # Selection
    "parse_wanted_list",
    "read_wanted_file",
    "select_groups",
]
