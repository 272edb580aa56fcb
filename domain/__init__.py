"""
Domain layer: Business logic with minimal external dependencies.

Contains:
- contextgroups: context group records, numeric-aware CID ordering,
  markup parsing/building and transitive closure
"""

from domain.contextgroups import (
    CodedConcept,
    ContextGroup,
    ContextGroupConcept,
    ContextGroupIdentifier,
    ContextGroupRegistry,
)

__all__ = [
    "CodedConcept",
    "ContextGroupConcept",
    "ContextGroup",
    "ContextGroupIdentifier",
    "ContextGroupRegistry",
]
