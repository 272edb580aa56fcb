from pathlib import Path

import pytest

from infrastructure.io.fs import read_utf8_text, require_file


def test_require_file_names_the_input_role(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="Cannot read wanted CID list"):
        require_file(tmp_path / "missing.txt", "wanted CID list")


def test_require_file_rejects_directories(tmp_path: Path) -> None:
    with pytest.raises(IsADirectoryError, match="is a directory"):
        require_file(tmp_path, "context group file")


def test_read_utf8_text_keeps_content_unchanged(tmp_path: Path) -> None:
    path = tmp_path / "wanted.txt"
    path.write_text("\n 100 \nÉ\n", encoding="utf-8")
    assert read_utf8_text(path, "wanted CID list") == "\n 100 \nÉ\n"
