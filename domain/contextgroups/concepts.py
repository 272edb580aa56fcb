"""Coded concepts as listed in context groups."""

from pydantic import BaseModel, ConfigDict, Field

ConceptKey = tuple[str, str]


class CodedConcept(BaseModel):
    """
    A (coding scheme designator, code value, code meaning) triple.

    Identity is (scheme, value) only: two concepts with the same scheme and
    value are equal whatever their meaning text says.
    """

    model_config = ConfigDict(frozen=True)

    coding_scheme_designator: str = ""
    code_value: str = ""
    code_meaning: str = Field(default="", description="Descriptive only, not part of identity.")

    @property
    def identity(self) -> ConceptKey:
        return (self.coding_scheme_designator, self.code_value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CodedConcept):
            return NotImplemented
        return self.identity == other.identity

    def __hash__(self) -> int:
        return hash(self.identity)

    def __str__(self) -> str:
        return f'({self.code_value},{self.coding_scheme_designator},"{self.code_meaning}")'


class ContextGroupConcept(CodedConcept):
    """A coded concept inside a context group, with optional cross references."""

    sct: str | None = None  # equivalent SNOMED CT code value
    umls_cui: str | None = None
    property_type_cid_for_category: str | None = None

    # frozen subclasses get a field-based __hash__ unless one is declared here
    def __hash__(self) -> int:
        return hash(self.identity)

    def __str__(self) -> str:
        text = super().__str__()
        if self.sct is not None:
            text += f"\t sct = {self.sct}"
        if self.umls_cui is not None:
            text += f"\t umlscui = {self.umls_cui}"
        return text
