"""Parse context group definitions from an XML element tree."""

import logging
from xml.etree.ElementTree import Element

from domain.contextgroups.concepts import ContextGroupConcept
from domain.contextgroups.constants import (
    CID_ATTR,
    CM_ATTR,
    CONCEPT_TAG,
    CSD_ATTR,
    CV_ATTR,
    EXTENSIBLE_ATTR,
    FHIR_KEYWORD_ATTR,
    GROUP_TAG,
    INCLUDE_TAG,
    KEYWORD_ATTR,
    NAME_ATTR,
    PROPERTY_TYPE_CID_ATTR,
    ROOT_TAG,
    SCT_ATTR,
    UID_ATTR,
    UMLS_CUI_ATTR,
    VERSION_ATTR,
)
from domain.contextgroups.errors import StructuralError
from domain.contextgroups.groups import ContextGroup, ContextGroupRegistry

logger = logging.getLogger(__name__)


def local_name(tag: object) -> str:
    """Tag without its "{namespace}" prefix; "" for comments and processing instructions."""
    if not isinstance(tag, str):
        return ""
    return tag.rpartition("}")[2]


def parse_concept(element: Element) -> ContextGroupConcept:
    """Build a concept from a contextgroupcode element; absent cross references stay None."""
    return ContextGroupConcept(
        coding_scheme_designator=element.get(CSD_ATTR, ""),
        code_value=element.get(CV_ATTR, ""),
        code_meaning=element.get(CM_ATTR, ""),
        sct=element.get(SCT_ATTR),
        umls_cui=element.get(UMLS_CUI_ATTR),
        property_type_cid_for_category=element.get(PROPERTY_TYPE_CID_ATTR),
    )


def parse_group(element: Element) -> ContextGroup:
    """Build a context group from a definecontextgroup element."""
    group = ContextGroup(
        cid=element.get(CID_ATTR, ""),
        name=element.get(NAME_ATTR, ""),
        version=element.get(VERSION_ATTR, ""),
        uid=element.get(UID_ATTR, ""),
        keyword=element.get(KEYWORD_ATTR, ""),
        extensible=element.get(EXTENSIBLE_ATTR, ""),
        fhir_keyword=element.get(FHIR_KEYWORD_ATTR, ""),
    )
    for child in element:
        tag = local_name(child.tag)
        if tag == INCLUDE_TAG:
            group.add_include(child.get(CID_ATTR, ""))
        elif tag == CONCEPT_TAG:
            concept = parse_concept(child)
            if not group.add_concept(concept):
                logger.debug("CID %s lists %s more than once; keeping the first", group.cid, concept)
    return group


def parse_context_groups(root: Element, registry: ContextGroupRegistry | None = None) -> ContextGroupRegistry:
    """
    Parse a definecontextgroups element into a registry.

    This is a pure function - it does NOT perform file I/O.
    Reading files happens in infrastructure.io.xml_files.

    Args:
        root: Root element of a context group definition document
        registry: Registry to add to; a new one is created if omitted

    Returns:
        The registry, with every definecontextgroup added (same CID overwrites)

    Raises:
        StructuralError: If the root element is not definecontextgroups
    """
    if local_name(root.tag) != ROOT_TAG:
        raise StructuralError(f"Expected {ROOT_TAG} element got {root.tag}")

    if registry is None:
        registry = ContextGroupRegistry()

    for element in root:
        if local_name(element.tag) != GROUP_TAG:
            continue
        group = parse_group(element)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Have context group:\n%s", group.describe())
        registry.add(group)

    return registry
