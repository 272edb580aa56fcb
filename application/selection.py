"""Wanted-list parsing and selection of closed context groups."""

import logging
from collections.abc import Iterable
from pathlib import Path

from domain.contextgroups import ContextGroupIdentifier, ContextGroupRegistry, SelectionError
from infrastructure.io import read_utf8_text

logger = logging.getLogger(__name__)


def parse_wanted_list(text: str) -> list[str]:
    """
    Parse a wanted list: one CID per line, blank lines ignored.

    CIDs need not be numeric. Surrounding whitespace is stripped and
    repeated CIDs are kept once, in first-seen order.
    """
    wanted: list[str] = []
    seen: set[str] = set()
    for line in text.splitlines():
        cid = line.strip()
        if not cid or cid in seen:
            continue
        seen.add(cid)
        wanted.append(cid)
    return wanted


def read_wanted_file(path: Path) -> list[str]:
    """Read and parse a UTF-8 wanted-list file."""
    wanted = parse_wanted_list(read_utf8_text(path, "wanted CID list"))
    logger.info("Read %d wanted CIDs from %s", len(wanted), path)
    return wanted


def select_groups(
    closed: ContextGroupRegistry,
    wanted: Iterable[str],
    *,
    strict: bool = False,
) -> ContextGroupRegistry:
    """
    Keep only the closed groups whose CID is in the wanted list.

    Args:
        closed: Registry of closed context groups
        wanted: CIDs to keep (order does not matter)
        strict: If True, a wanted CID with no group raises instead of being skipped

    Returns:
        New registry holding the selected groups

    Raises:
        SelectionError: In strict mode, if any wanted CID is not in the registry
    """
    wanted_set = set(wanted)
    selected = ContextGroupRegistry(group for group in closed if group.cid in wanted_set)

    missing = sorted((cid for cid in wanted_set if cid not in closed), key=lambda c: ContextGroupIdentifier(cid=c))
    if missing:
        if strict:
            raise SelectionError(missing)
        logger.debug("Wanted CIDs with no definition (skipped): %s", ", ".join(missing))

    logger.info("Selected %d of %d closed context groups", len(selected), len(closed))
    return selected
