"""Markup vocabulary of context group definition files."""

# Elements
ROOT_TAG = "definecontextgroups"
GROUP_TAG = "definecontextgroup"
INCLUDE_TAG = "include"
CONCEPT_TAG = "contextgroupcode"

# definecontextgroup attributes
CID_ATTR = "cid"
NAME_ATTR = "name"
VERSION_ATTR = "version"
UID_ATTR = "uid"
KEYWORD_ATTR = "keyword"
EXTENSIBLE_ATTR = "extensible"
FHIR_KEYWORD_ATTR = "fhirkeyword"

# contextgroupcode attributes
CSD_ATTR = "csd"
CV_ATTR = "cv"
CM_ATTR = "cm"
SCT_ATTR = "sct"
UMLS_CUI_ATTR = "umlscui"
PROPERTY_TYPE_CID_ATTR = "propertyTypeCIDForCategory"

# Output document attributes
XSI_NAMESPACE_ATTR = "xmlns:xsi"
XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"
SCHEMA_LOCATION_ATTR = "xsi:noNamespaceSchemaLocation"
DEFAULT_SCHEMA_LOCATION = "http://www.pixelmed.com/schemas/contextgroups.xsd"
