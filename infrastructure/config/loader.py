"""Configuration loading from YAML files."""

from pathlib import Path
from typing import Any

import yaml

from infrastructure.config.models import ExtractionConfig


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def _resolve(base_dir: Path, value: Any) -> Path:
    path = Path(str(value))
    return path if path.is_absolute() else base_dir / path


def load_extraction_config(path: Path, **overrides: Any) -> ExtractionConfig:
    """
    Load an extraction YAML file into an ExtractionConfig.

    Relative paths in the file are resolved against the file's directory.
    Keyword overrides (e.g. from the command line) win over file values when not None.

    Raises:
        FileNotFoundError: If the YAML file does not exist
        ValueError: If the YAML is not a mapping or fails validation
    """
    data = _load_yaml(path)
    base_dir = path.parent

    group_files = data.get("group_files") or []
    if not isinstance(group_files, list):
        raise ValueError(f"group_files must be a list in {path}")

    raw: dict[str, Any] = {"group_files": [_resolve(base_dir, p) for p in group_files]}
    # pydantic coerces quoted "false" / "no" to False
    for key in ("strict_selection", "sort_concepts"):
        if data.get(key) is not None:
            raw[key] = data[key]
    for key in ("wanted_file", "output_file", "log_file"):
        if data.get(key):
            raw[key] = _resolve(base_dir, data[key])
    if data.get("schema_location") is not None:
        raw["schema_location"] = str(data["schema_location"])

    raw.update({k: v for k, v in overrides.items() if v is not None})

    return ExtractionConfig(**raw)
