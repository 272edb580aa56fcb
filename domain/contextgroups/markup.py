"""Build the definecontextgroups output element from closed context groups."""

from collections.abc import Iterable
from xml.etree.ElementTree import Element, SubElement

from domain.contextgroups.concepts import ContextGroupConcept
from domain.contextgroups.constants import (
    CID_ATTR,
    CM_ATTR,
    CONCEPT_TAG,
    CSD_ATTR,
    CV_ATTR,
    DEFAULT_SCHEMA_LOCATION,
    EXTENSIBLE_ATTR,
    GROUP_TAG,
    NAME_ATTR,
    ROOT_TAG,
    SCHEMA_LOCATION_ATTR,
    VERSION_ATTR,
    XSI_NAMESPACE,
    XSI_NAMESPACE_ATTR,
)
from domain.contextgroups.groups import ContextGroup


def _ordered_concepts(group: ContextGroup, sort_concepts: bool) -> list[ContextGroupConcept]:
    concepts = group.coded_concepts()
    if sort_concepts:
        concepts.sort(key=lambda c: c.identity)
    return concepts


def build_group_element(parent: Element, group: ContextGroup, *, sort_concepts: bool = True) -> Element:
    """
    Append one definecontextgroup element to parent.

    Attribute order is fixed: cid, name, extensible, version. The name
    attribute carries the keyword, not the free-text name.
    """
    element = SubElement(parent, GROUP_TAG)
    element.set(CID_ATTR, group.cid)
    element.set(NAME_ATTR, group.keyword)
    element.set(EXTENSIBLE_ATTR, group.extensible)
    element.set(VERSION_ATTR, group.version)

    for concept in _ordered_concepts(group, sort_concepts):
        code = SubElement(element, CONCEPT_TAG)
        code.set(CSD_ATTR, concept.coding_scheme_designator)
        code.set(CV_ATTR, concept.code_value)
        code.set(CM_ATTR, concept.code_meaning)

    return element


def build_context_groups_element(
    groups: Iterable[ContextGroup],
    *,
    schema_location: str = DEFAULT_SCHEMA_LOCATION,
    sort_concepts: bool = True,
) -> Element:
    """
    Build the output document root for a set of closed groups.

    Groups are emitted in numeric-aware CID order; concepts in (scheme, value)
    order unless sort_concepts is False, in which case closure order is kept.

    Args:
        groups: Closed context groups to emit
        schema_location: Value of xsi:noNamespaceSchemaLocation
        sort_concepts: Sort concepts for reproducible output

    Returns:
        The definecontextgroups root element
    """
    root = Element(ROOT_TAG)
    root.set(XSI_NAMESPACE_ATTR, XSI_NAMESPACE)
    root.set(SCHEMA_LOCATION_ATTR, schema_location)

    for group in sorted(groups, key=lambda g: g.identifier):
        build_group_element(root, group, sort_concepts=sort_concepts)

    return root
