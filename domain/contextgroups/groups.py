"""Context group records and the registry that keys them by CID."""

import logging
from collections.abc import Iterable, Iterator

from pydantic import BaseModel, Field, PrivateAttr

from domain.contextgroups.concepts import ConceptKey, ContextGroupConcept
from domain.contextgroups.identifiers import ContextGroupIdentifier

logger = logging.getLogger(__name__)


class ContextGroup(BaseModel):
    """
    A context group: descriptive metadata, included CIDs and directly listed concepts.

    Mutated while loading (add_include / add_concept) and once more when its
    closure is memoized; read-only afterwards.
    """

    cid: str = ""
    name: str = ""
    version: str = ""
    uid: str = ""
    keyword: str = ""
    extensible: str = ""
    fhir_keyword: str = ""

    included_cids: list[str] = Field(default_factory=list)  # ordered set
    concepts: dict[ConceptKey, ContextGroupConcept] = Field(default_factory=dict)

    _closure: "ContextGroup | None" = PrivateAttr(default=None)

    @property
    def identifier(self) -> ContextGroupIdentifier:
        return ContextGroupIdentifier(cid=self.cid)

    def add_include(self, cid: str) -> None:
        if cid not in self.included_cids:
            self.included_cids.append(cid)

    def add_concept(self, concept: ContextGroupConcept) -> bool:
        """Add a concept unless one with the same identity is already present. Returns True if added."""
        if concept.identity in self.concepts:
            return False
        self.concepts[concept.identity] = concept
        return True

    def coded_concepts(self) -> list[ContextGroupConcept]:
        return list(self.concepts.values())

    @property
    def closure(self) -> "ContextGroup | None":
        return self._closure

    @property
    def is_closed(self) -> bool:
        return self._closure is not None

    def memoize_closure(self, closure: "ContextGroup") -> None:
        if self._closure is not None:
            raise RuntimeError(f"Closure of CID {self.cid} already computed")
        self._closure = closure

    def copy_header(self) -> "ContextGroup":
        """New group with the same metadata and includes, but no concepts."""
        return ContextGroup(
            cid=self.cid,
            name=self.name,
            version=self.version,
            uid=self.uid,
            keyword=self.keyword,
            extensible=self.extensible,
            fhir_keyword=self.fhir_keyword,
            included_cids=list(self.included_cids),
        )

    def describe(self) -> str:
        """Multi-line dump used in debug logs."""
        header = " ".join(
            [
                f"CID {self.cid}",
                self.name,
                self.version,
                self.uid,
                self.keyword,
                self.extensible,
                self.fhir_keyword,
            ]
        )
        lines = [header]
        lines.extend(f"\tInclude {cid}" for cid in self.included_cids)
        lines.extend(f"\t{concept}" for concept in self.concepts.values())
        return "\n".join(lines)


class ContextGroupRegistry:
    """Context groups keyed by CID; iterates in numeric-aware CID order."""

    def __init__(self, groups: Iterable[ContextGroup] = ()) -> None:
        self._groups: dict[ContextGroupIdentifier, ContextGroup] = {}
        for group in groups:
            self.add(group)

    def add(self, group: ContextGroup) -> None:
        """Insert a group; an existing entry with the same CID is replaced (last loaded wins)."""
        key = group.identifier
        if key in self._groups:
            logger.debug("Replacing definition of CID %s", group.cid)
        self._groups[key] = group

    def get(self, cid: str) -> ContextGroup | None:
        return self._groups.get(ContextGroupIdentifier(cid=cid))

    def __contains__(self, cid: object) -> bool:
        if isinstance(cid, ContextGroupIdentifier):
            return cid in self._groups
        if isinstance(cid, str):
            return ContextGroupIdentifier(cid=cid) in self._groups
        return False

    def __len__(self) -> int:
        return len(self._groups)

    def __iter__(self) -> Iterator[ContextGroup]:
        return iter(self.groups())

    def cids(self) -> list[str]:
        return [key.cid for key in sorted(self._groups)]

    def groups(self) -> list[ContextGroup]:
        return [self._groups[key] for key in sorted(self._groups)]
