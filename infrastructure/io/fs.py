"""Input file checks and UTF-8 text reading for extraction inputs."""

from pathlib import Path


def require_file(path: Path, what: str) -> Path:
    """
    Check that an input exists and is a regular file.

    Args:
        path: Input path
        what: Role of the input, used in the error message (e.g. "wanted CID list")

    Returns:
        The same path

    Raises:
        FileNotFoundError: If nothing exists at path
        IsADirectoryError: If path is a directory
    """
    if not path.exists():
        raise FileNotFoundError(f"Cannot read {what}: {path} does not exist")
    if path.is_dir():
        raise IsADirectoryError(f"Cannot read {what}: {path} is a directory")
    return path


def read_utf8_text(path: Path, what: str) -> str:
    """Read an input file as UTF-8 text, unchanged (line splitting is left to the caller)."""
    return require_file(path, what).read_text(encoding="utf-8")
