"""Configuration models (Pydantic classes)."""

from pathlib import Path

from pydantic import BaseModel, Field, model_validator

from domain.contextgroups.constants import DEFAULT_SCHEMA_LOCATION


class ExtractionConfig(BaseModel):
    """
    Runtime configuration for one extraction run.
    - Built from command-line arguments or loaded from a YAML file
    - Validated here, consumed by application.extraction
    """

    group_files: list[Path] = Field(
        ...,
        description="Context group definition files, loaded in order. A later file overrides earlier CIDs.",
    )
    wanted_file: Path = Field(..., description="Line-oriented list of CIDs to emit.")
    output_file: Path = Field(..., description="Where to write the closed, filtered context groups.")

    strict_selection: bool = Field(
        default=False,
        description="If true, a wanted CID that was never defined fails the run instead of being skipped.",
    )
    sort_concepts: bool = Field(
        default=True,
        description="If true, emit concepts in (scheme, value) order for reproducible output.",
    )
    schema_location: str = DEFAULT_SCHEMA_LOCATION

    log_file: Path | None = None

    @model_validator(mode="after")
    def _validate(self) -> "ExtractionConfig":
        if not self.group_files:
            raise ValueError("group_files must list at least one context group file")

        self.schema_location = self.schema_location.strip()
        if not self.schema_location:
            raise ValueError("schema_location must not be empty")

        if self.output_file.resolve() in {p.resolve() for p in self.group_files}:
            raise ValueError(f"output_file would overwrite an input file: {self.output_file}")

        return self
