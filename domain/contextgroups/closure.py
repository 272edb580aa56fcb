"""
Transitive closure of context groups over their include graph.

A group's closure holds its own concepts plus every concept of every group
it includes, to any depth. Closures are memoized on the open group, so each
group is closed at most once per run.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from domain.contextgroups.errors import IncludeCycleError
from domain.contextgroups.groups import ContextGroup, ContextGroupRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MissingInclude:
    """An include edge whose target CID is not in the registry."""

    group_cid: str
    included_cid: str


class ClosureResolver:
    """
    Resolve closures against one fully loaded registry.

    Missing includes are dropped and reported; an include cycle raises
    IncludeCycleError naming the chain.
    """

    def __init__(self, registry: ContextGroupRegistry) -> None:
        self.registry = registry
        self.missing_includes: list[MissingInclude] = []

    def resolve(self, group: ContextGroup) -> ContextGroup:
        """
        Close a group, closing its includes first.

        Walks the include graph with an explicit stack so that include
        chains of any depth resolve without hitting the recursion limit.
        """
        if group.closure is not None:
            return group.closure

        stack: list[tuple[ContextGroup, Iterator[str]]] = [(group, iter(group.included_cids))]
        on_path = {group.cid}
        while stack:
            current, pending = stack[-1]
            for included_cid in pending:
                included = self.registry.get(included_cid)
                if included is None:
                    self._report_missing(current.cid, included_cid)
                    continue
                if included.closure is not None:
                    continue
                if included_cid in on_path:
                    raise IncludeCycleError([g.cid for g, _ in stack] + [included_cid])
                stack.append((included, iter(included.included_cids)))
                on_path.add(included_cid)
                break
            else:
                stack.pop()
                on_path.discard(current.cid)
                self._close(current)

        return group.closure

    def _close(self, group: ContextGroup) -> ContextGroup:
        # every present include is already closed
        closure = group.copy_header()
        for concept in group.coded_concepts():
            closure.add_concept(concept)

        for included_cid in group.included_cids:
            included = self.registry.get(included_cid)
            if included is None:
                continue
            for concept in included.closure.coded_concepts():
                closure.add_concept(concept)

        group.memoize_closure(closure)
        logger.debug("Closed CID %s: %d own, %d total concepts", group.cid, len(group.concepts), len(closure.concepts))
        return closure

    def _report_missing(self, group_cid: str, included_cid: str) -> None:
        missing = MissingInclude(group_cid=group_cid, included_cid=included_cid)
        if missing in self.missing_includes:
            return
        self.missing_includes.append(missing)
        logger.warning("Cannot find CID %s to include in CID %s", included_cid, group_cid)

    def close_all(self) -> ContextGroupRegistry:
        """Return a new registry holding the closure of every group, under the same CIDs."""
        closed = ContextGroupRegistry()
        for group in self.registry:
            closed.add(self.resolve(group))
        logger.info(
            "Closed %d context groups (%d missing includes)",
            len(closed),
            len(self.missing_includes),
        )
        return closed


def resolve_closure(group: ContextGroup, registry: ContextGroupRegistry) -> ContextGroup:
    """One-shot form of ClosureResolver(registry).resolve(group)."""
    return ClosureResolver(registry).resolve(group)


def close_registry(registry: ContextGroupRegistry) -> ContextGroupRegistry:
    """One-shot form of ClosureResolver(registry).close_all()."""
    return ClosureResolver(registry).close_all()
