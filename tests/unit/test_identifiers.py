from domain.contextgroups.identifiers import ContextGroupIdentifier, compare_identifiers, is_integer_cid


def _cid(s: str) -> ContextGroupIdentifier:
    return ContextGroupIdentifier(cid=s)


def test_numeric_cids_sort_numerically() -> None:
    ordered = sorted([_cid("10"), _cid("2"), _cid("9")])
    assert [str(c) for c in ordered] == ["2", "9", "10"]


def test_mixed_cids_fall_back_to_string_order() -> None:
    assert _cid("10") < _cid("10a")
    assert compare_identifiers("10a", "10") == 1
    assert compare_identifiers("abc", "abd") == -1


def test_equality_uses_string_form_only() -> None:
    assert _cid("10") == _cid("10")
    assert _cid("010") != _cid("10")
    assert compare_identifiers("010", "10") != 0
    assert len({_cid("7"), _cid("7"), _cid("07")}) == 2


def test_signed_integers_are_numeric() -> None:
    assert is_integer_cid("-5")
    assert is_integer_cid("+12")
    assert not is_integer_cid("1_000")
    assert not is_integer_cid(" 12")
    assert not is_integer_cid("")
    assert compare_identifiers("-5", "3") == -1


def test_rich_comparisons() -> None:
    assert _cid("9") <= _cid("9")
    assert _cid("100") > _cid("99")
    assert _cid("100") >= _cid("99")
