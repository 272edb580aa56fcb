import xml.etree.ElementTree as ET
from pathlib import Path

import pytest

from application import run_extraction
from domain.contextgroups import IncludeCycleError, SelectionError, StructuralError
from infrastructure.config import ExtractionConfig

STANDARD = """<?xml version="1.0" encoding="UTF-8"?>
<definecontextgroups>
    <definecontextgroup cid="1" name="Group One" keyword="GroupOne" extensible="true" version="1">
        <contextgroupcode csd="DCM" cv="A" cm="Concept A"/>
        <contextgroupcode csd="DCM" cv="B" cm="Concept B"/>
    </definecontextgroup>
    <definecontextgroup cid="3" name="Unwanted" keyword="Unwanted">
        <contextgroupcode csd="DCM" cv="Z" cm="Concept Z"/>
    </definecontextgroup>
</definecontextgroups>
"""

EXTENDED = """<?xml version="1.0" encoding="UTF-8"?>
<definecontextgroups>
    <definecontextgroup cid="2" name="Group Two" keyword="GroupTwo" extensible="false" version="2">
        <include cid="1"/>
        <include cid="404"/>
        <contextgroupcode csd="SCT" cv="C" cm="Concept C"/>
    </definecontextgroup>
</definecontextgroups>
"""


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def _config(
    tmp_path: Path,
    standard: str = STANDARD,
    extended: str = EXTENDED,
    wanted: str = "2\n",
    **kw: bool,
) -> ExtractionConfig:
    return ExtractionConfig(
        group_files=[_write(tmp_path / "std.xml", standard), _write(tmp_path / "ext.xml", extended)],
        wanted_file=_write(tmp_path / "wanted.txt", wanted),
        output_file=tmp_path / "out.xml",
        **kw,
    )


def test_round_trip_closes_and_filters(tmp_path: Path) -> None:
    cfg = _config(tmp_path)

    summary = run_extraction(cfg)

    root = ET.parse(cfg.output_file).getroot()
    assert root.tag == "definecontextgroups"
    (group,) = list(root)
    assert group.get("cid") == "2"
    assert group.get("name") == "GroupTwo"
    assert {(c.get("csd"), c.get("cv")) for c in group} == {("DCM", "A"), ("DCM", "B"), ("SCT", "C")}

    assert summary.groups_loaded == 3
    assert summary.groups_closed == 3
    assert summary.groups_written == 1
    assert summary.concepts_written == 3
    assert summary.missing_includes == [("2", "404")]


def test_extended_source_overrides_standard(tmp_path: Path) -> None:
    extended = """<definecontextgroups>
        <definecontextgroup cid="1" keyword="Overridden"><contextgroupcode csd="X" cv="1" cm="x"/></definecontextgroup>
    </definecontextgroups>"""
    cfg = _config(tmp_path, extended=extended, wanted="1\n")

    run_extraction(cfg)

    (group,) = list(ET.parse(cfg.output_file).getroot())
    assert group.get("name") == "Overridden"
    assert [c.get("cv") for c in group] == ["1"]


def test_wanted_but_undefined_is_skipped_unless_strict(tmp_path: Path) -> None:
    summary = run_extraction(_config(tmp_path, wanted="2\n77\n"))
    assert summary.groups_written == 1

    with pytest.raises(SelectionError):
        run_extraction(_config(tmp_path, wanted="2\n77\n", strict_selection=True))


def test_cycle_aborts_run(tmp_path: Path) -> None:
    standard = """<definecontextgroups>
        <definecontextgroup cid="1"><include cid="2"/></definecontextgroup>
        <definecontextgroup cid="2"><include cid="1"/></definecontextgroup>
    </definecontextgroups>"""
    cfg = _config(tmp_path, standard=standard)

    with pytest.raises(IncludeCycleError):
        run_extraction(cfg)
    assert not cfg.output_file.exists()


def test_wrong_root_aborts_run(tmp_path: Path) -> None:
    with pytest.raises(StructuralError):
        run_extraction(_config(tmp_path, extended="<contextgroups/>"))
