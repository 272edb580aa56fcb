"""
Context group management: records, identifier ordering, parsing and closure.

All functions in this module are pure (no file I/O); reading and writing
XML files happens in infrastructure.io.xml_files.
"""

from domain.contextgroups.closure import ClosureResolver, MissingInclude, close_registry, resolve_closure
from domain.contextgroups.concepts import CodedConcept, ContextGroupConcept
from domain.contextgroups.errors import (
    ContextGroupError,
    IncludeCycleError,
    SelectionError,
    StructuralError,
)
from domain.contextgroups.groups import ContextGroup, ContextGroupRegistry
from domain.contextgroups.identifiers import ContextGroupIdentifier, compare_identifiers
from domain.contextgroups.loader import parse_context_groups
from domain.contextgroups.markup import build_context_groups_element

__all__ = [
    # Records
    "CodedConcept",
    "ContextGroupConcept",
    "ContextGroup",
    "ContextGroupIdentifier",
    "ContextGroupRegistry",
    "compare_identifiers",
    # Parsing / building
    "parse_context_groups",
    "build_context_groups_element",
    # Closure
    "ClosureResolver",
    "MissingInclude",
    "resolve_closure",
    "close_registry",
    # Errors
    "ContextGroupError",
    "StructuralError",
    "IncludeCycleError",
    "SelectionError",
]
