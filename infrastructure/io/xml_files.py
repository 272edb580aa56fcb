"""Read and write context group XML files."""

import logging
import xml.etree.ElementTree as ET
from collections.abc import Iterable
from pathlib import Path

from domain.contextgroups import (
    ContextGroup,
    ContextGroupRegistry,
    build_context_groups_element,
    parse_context_groups,
)
from domain.contextgroups.constants import DEFAULT_SCHEMA_LOCATION
from infrastructure.io.fs import require_file

logger = logging.getLogger(__name__)

INDENT = "    "


def read_xml_root(path: Path) -> ET.Element:
    """
    Parse an XML file and return its root element.

    Raises:
        FileNotFoundError: If the file does not exist
        xml.etree.ElementTree.ParseError: If the file is not well-formed XML
    """
    require_file(path, "context group file")
    return ET.parse(path).getroot()


def write_xml(path: Path, root: ET.Element) -> Path:
    """Write an element tree as UTF-8 with an XML declaration and 4-space indentation."""
    tree = ET.ElementTree(root)
    ET.indent(tree, space=INDENT)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("wb") as f:
        tree.write(f, encoding="utf-8", xml_declaration=True)
        f.write(b"\n")
    return path


def load_context_groups_file(path: Path, registry: ContextGroupRegistry) -> ContextGroupRegistry:
    """
    Load one definecontextgroups file into registry (same CID overwrites).

    This function handles file I/O, then delegates parsing to the domain layer.
    """
    before = len(registry)
    parse_context_groups(read_xml_root(path), registry)
    logger.info("Loaded %s: registry now holds %d context groups (was %d)", path, len(registry), before)
    return registry


def write_context_groups_file(
    path: Path,
    groups: Iterable[ContextGroup],
    *,
    schema_location: str = DEFAULT_SCHEMA_LOCATION,
    sort_concepts: bool = True,
) -> Path:
    """Serialize closed groups to path."""
    root = build_context_groups_element(groups, schema_location=schema_location, sort_concepts=sort_concepts)
    write_xml(path, root)
    logger.info("Wrote %d context groups to %s", len(root), path)
    return path
