"""End-to-end extraction: load, close, select, write."""

import logging
from pathlib import Path

from pydantic import BaseModel, Field

from application.selection import read_wanted_file, select_groups
from domain.contextgroups import ClosureResolver, ContextGroupRegistry, MissingInclude
from infrastructure.config import ExtractionConfig
from infrastructure.io import load_context_groups_file, write_context_groups_file
from infrastructure.observability import clear_source_context, set_log_context

logger = logging.getLogger(__name__)


class ExtractionSummary(BaseModel):
    """Counts and diagnostics from one extraction run."""

    groups_loaded: int
    groups_closed: int
    groups_written: int
    concepts_written: int
    missing_includes: list[tuple[str, str]] = Field(
        default_factory=list,
        description="(group CID, included CID) pairs whose included CID was never defined.",
    )
    output_file: Path


def load_registry(group_files: list[Path]) -> ContextGroupRegistry:
    """Load every source, in order, into one registry. Must complete before any closure is computed."""
    registry = ContextGroupRegistry()
    for path in group_files:
        set_log_context(source=path)
        try:
            load_context_groups_file(path, registry)
        finally:
            clear_source_context()
    return registry


def run_extraction(cfg: ExtractionConfig) -> ExtractionSummary:
    """
    Run the whole pipeline for one configuration.

    Raises:
        StructuralError: If a source has the wrong root element or the include graph has a cycle
        SelectionError: If strict_selection is set and a wanted CID is undefined
        OSError: If an input cannot be read or the output cannot be written
    """
    registry = load_registry(cfg.group_files)

    resolver = ClosureResolver(registry)
    closed = resolver.close_all()

    wanted = read_wanted_file(cfg.wanted_file)
    selected = select_groups(closed, wanted, strict=cfg.strict_selection)

    write_context_groups_file(
        cfg.output_file,
        selected,
        schema_location=cfg.schema_location,
        sort_concepts=cfg.sort_concepts,
    )

    return ExtractionSummary(
        groups_loaded=len(registry),
        groups_closed=len(closed),
        groups_written=len(selected),
        concepts_written=sum(len(group.concepts) for group in selected),
        missing_includes=[_as_pair(m) for m in resolver.missing_includes],
        output_file=cfg.output_file,
    )


def _as_pair(missing: MissingInclude) -> tuple[str, str]:
    return (missing.group_cid, missing.included_cid)


def log_extraction_summary(summary: ExtractionSummary) -> None:
    """Log a human-readable summary of the run."""
    logger.info(
        "Done: %d groups loaded, %d closed, %d written (%d concepts) -> %s",
        summary.groups_loaded,
        summary.groups_closed,
        summary.groups_written,
        summary.concepts_written,
        summary.output_file,
    )
    if summary.missing_includes:
        logger.warning(
            "%d include(s) referenced undefined CIDs: %s",
            len(summary.missing_includes),
            ", ".join(f"{group}->{included}" for group, included in summary.missing_includes),
        )
