"""
CLI entrypoint for the context group closure extractor.

This script performs the following steps:
- builds the run configuration from positional arguments or a YAML file
- loads the standard and extended context group definitions into one registry
- computes the transitive closure of every group over its includes
- keeps only the groups named in the wanted list
- writes them as a definecontextgroups XML file
- logs a human-readable summary (diagnostics go to stderr)
"""

import argparse
import logging
import xml.etree.ElementTree as ET
from datetime import datetime
from pathlib import Path

from application import log_extraction_summary, run_extraction
from application.constants import RUN_ID_PREFIX, RUN_ID_TIMESTAMP_FORMAT
from domain.contextgroups import ContextGroupError
from infrastructure.config import ExtractionConfig, load_extraction_config
from infrastructure.constants import EXTRACTION_CONFIG_FILE
from infrastructure.observability import configure_logging, make_run_tag, set_log_context

logger = logging.getLogger(__name__)

LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Extract context groups with the transitive closure of their includes",
    )
    p.add_argument("standard", type=Path, nargs="?", help="Standard context group definitions (XML)")
    p.add_argument("extended", type=Path, nargs="?", help="Extended context group definitions (XML)")
    p.add_argument("wanted", type=Path, nargs="?", help="Wanted CIDs, one per line")
    p.add_argument("output", type=Path, nargs="?", help="Output XML file")
    p.add_argument(
        "--extra-groups",
        type=Path,
        action="append",
        default=[],
        help="Additional context group definitions, loaded after the extended file (repeatable)",
    )
    p.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Path to an extraction YAML (e.g. {EXTRACTION_CONFIG_FILE}); positional arguments override it",
    )
    p.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Fail if a wanted CID is not defined in any source.",
    )
    p.add_argument(
        "--no-sort-concepts",
        action="store_false",
        dest="sort_concepts",
        default=None,
        help="Emit concepts in closure order instead of (scheme, value) order.",
    )
    p.add_argument("--schema-location", type=str, default=None, help="xsi:noNamespaceSchemaLocation value")
    p.add_argument(
        "--console-level",
        type=str,
        default="INFO",
        choices=LEVELS,
        help="Console (stderr) log level",
    )
    p.add_argument("--log-file", type=Path, default=None, help="Also log to this file (DEBUG and above)")
    return p


def _build_config(p: argparse.ArgumentParser, args: argparse.Namespace) -> ExtractionConfig:
    group_files = [f for f in (args.standard, args.extended) if f is not None] + list(args.extra_groups)
    overrides = {
        "group_files": group_files or None,
        "wanted_file": args.wanted,
        "output_file": args.output,
        "strict_selection": args.strict,
        "sort_concepts": args.sort_concepts,
        "schema_location": args.schema_location,
        "log_file": args.log_file,
    }

    config_path = args.config
    if config_path is None and args.output is None and EXTRACTION_CONFIG_FILE.exists():
        config_path = EXTRACTION_CONFIG_FILE

    if config_path is not None:
        return load_extraction_config(config_path, **overrides)

    if args.output is None:
        p.error("standard, extended, wanted and output are required unless --config is given")

    return ExtractionConfig(**{k: v for k, v in overrides.items() if v is not None})


def main(argv: list[str] | None = None) -> int:
    p = _build_arg_parser()
    args = p.parse_args(argv)

    configure_logging(console_level=getattr(logging, args.console_level), log_file=args.log_file)

    run_id = f"{RUN_ID_PREFIX}_{datetime.now().strftime(RUN_ID_TIMESTAMP_FORMAT)}"
    set_log_context(run_id_full=run_id)

    try:
        cfg = _build_config(p, args)
        if cfg.log_file is not None and args.log_file is None:
            configure_logging(console_level=getattr(logging, args.console_level), log_file=cfg.log_file)

        logger.info("Starting run: run_id=%s (run_tag=%s)", run_id, make_run_tag(run_id))
        summary = run_extraction(cfg)
    except (ContextGroupError, ET.ParseError, OSError, ValueError) as e:
        logger.error("Extraction failed: %s", e)
        logger.debug("Traceback", exc_info=True)
        return 1

    log_extraction_summary(summary)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
