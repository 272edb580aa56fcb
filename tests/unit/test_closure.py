import logging

import pytest

from domain.contextgroups import (
    ClosureResolver,
    ContextGroup,
    ContextGroupConcept,
    ContextGroupRegistry,
    IncludeCycleError,
    MissingInclude,
    close_registry,
    resolve_closure,
)


def _concept(cv: str, csd: str = "DCM", cm: str = "") -> ContextGroupConcept:
    return ContextGroupConcept(coding_scheme_designator=csd, code_value=cv, code_meaning=cm or f"Meaning {cv}")


def _group(cid: str, *cvs: str, includes: tuple[str, ...] = ()) -> ContextGroup:
    group = ContextGroup(cid=cid, keyword=f"Group{cid}")
    for cv in cvs:
        group.add_concept(_concept(cv))
    for included in includes:
        group.add_include(included)
    return group


def _values(group: ContextGroup) -> set[str]:
    return {c.code_value for c in group.coded_concepts()}


def test_closure_of_group_without_includes_equals_own_concepts() -> None:
    group = _group("1", "A", "B")
    registry = ContextGroupRegistry([group])

    closure = resolve_closure(group, registry)

    assert closure.coded_concepts() == group.coded_concepts()
    assert closure.cid == "1"
    assert closure.keyword == "Group1"


def test_closure_is_transitive() -> None:
    g1 = _group("1", "A", includes=("2",))
    g2 = _group("2", "B", includes=("3",))
    g3 = _group("3", "C", "D")
    registry = ContextGroupRegistry([g1, g2, g3])

    closure = resolve_closure(g1, registry)

    assert _values(closure) == {"A", "B", "C", "D"}
    assert closure.included_cids == ["2"]
    # open groups are untouched
    assert _values(g1) == {"A"}


def test_closure_is_memoized() -> None:
    g1 = _group("1", "A", includes=("2",))
    g2 = _group("2", "B")
    registry = ContextGroupRegistry([g1, g2])
    resolver = ClosureResolver(registry)

    first = resolver.resolve(g1)
    second = resolver.resolve(g1)

    assert first is second
    assert g1.is_closed
    assert g1.closure is first
    assert len(first.coded_concepts()) == 2
    # memo survives a new resolver, too
    assert ClosureResolver(registry).resolve(g1) is first


def test_own_concept_wins_over_included_duplicate() -> None:
    g1 = ContextGroup(cid="1")
    g1.add_concept(_concept("A", cm="Own meaning"))
    g1.add_include("2")
    g2 = ContextGroup(cid="2")
    g2.add_concept(_concept("A", cm="Included meaning"))
    g2.add_concept(_concept("B"))

    closure = resolve_closure(g1, ContextGroupRegistry([g1, g2]))

    assert [c.code_meaning for c in closure.coded_concepts()] == ["Own meaning", "Meaning B"]


def test_missing_include_is_reported_and_skipped(caplog: pytest.LogCaptureFixture) -> None:
    g1 = _group("1", "A", includes=("404", "2"))
    g2 = _group("2", "B")
    resolver = ClosureResolver(ContextGroupRegistry([g1, g2]))

    with caplog.at_level(logging.WARNING):
        closure = resolver.resolve(g1)

    assert _values(closure) == {"A", "B"}
    assert resolver.missing_includes == [MissingInclude(group_cid="1", included_cid="404")]
    assert "Cannot find CID 404 to include in CID 1" in caplog.text


def test_direct_cycle_raises() -> None:
    g1 = _group("1", "A", includes=("2",))
    g2 = _group("2", "B", includes=("1",))
    registry = ContextGroupRegistry([g1, g2])

    with pytest.raises(IncludeCycleError) as excinfo:
        resolve_closure(g1, registry)

    assert excinfo.value.chain == ["1", "2", "1"]
    assert "1 -> 2 -> 1" in str(excinfo.value)
    assert not g1.is_closed
    assert not g2.is_closed


def test_self_include_raises() -> None:
    g1 = _group("5", "A", includes=("5",))
    with pytest.raises(IncludeCycleError) as excinfo:
        resolve_closure(g1, ContextGroupRegistry([g1]))
    assert excinfo.value.chain == ["5", "5"]


def test_diamond_is_not_a_cycle() -> None:
    top = _group("1", includes=("2", "3"))
    left = _group("2", "L", includes=("4",))
    right = _group("3", "R", includes=("4",))
    bottom = _group("4", "X")
    registry = ContextGroupRegistry([top, left, right, bottom])

    closure = resolve_closure(top, registry)

    assert _values(closure) == {"L", "R", "X"}


def test_close_registry_closes_every_group() -> None:
    registry = ContextGroupRegistry([_group("10", "C", includes=("9",)), _group("9", "B"), _group("2", "A")])

    closed = close_registry(registry)

    assert closed.cids() == ["2", "9", "10"]
    ten = closed.get("10")
    assert ten is not None
    assert _values(ten) == {"B", "C"}
    open_ten = registry.get("10")
    assert open_ten is not None
    assert _values(open_ten) == {"C"}


def test_deep_include_chain_resolves() -> None:
    depth = 5000
    groups = [_group(str(i), f"C{i}", includes=(str(i + 1),)) for i in range(depth)]
    groups.append(_group(str(depth), f"C{depth}"))
    registry = ContextGroupRegistry(groups)

    closure = resolve_closure(groups[0], registry)

    assert len(closure.coded_concepts()) == depth + 1
    assert all(g.is_closed for g in groups)


def test_cycle_below_a_closed_branch_reports_full_chain() -> None:
    top = _group("1", includes=("2", "3"))
    done = _group("2", "A")
    looping = _group("3", "B", includes=("4",))
    back = _group("4", "C", includes=("3",))
    registry = ContextGroupRegistry([top, done, looping, back])

    with pytest.raises(IncludeCycleError) as excinfo:
        resolve_closure(top, registry)

    assert excinfo.value.chain == ["1", "3", "4", "3"]
    assert done.is_closed
    assert not top.is_closed
