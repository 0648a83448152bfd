import pytest

from luhmann.grammar import IdGrammar
from luhmann.ids import LuhmannID, NotALuhmannNoteError, extract_id, extract_id_from_cursor_line


def test_extract_id_from_filename(grammar: IdGrammar) -> None:
    luhmann_id = extract_id("2018-07-09-2115 (1,1,a) Some title.md", grammar)
    assert luhmann_id.segments == ("1", "1", "a")
    assert luhmann_id.raw == "(1,1,a)"
    assert luhmann_id.stem == "(1,1,a"


def test_extract_id_returns_first_match(grammar: IdGrammar) -> None:
    assert extract_id("1 (2,b) see (3)", grammar).segments == ("2", "b")


def test_extract_id_absent(grammar: IdGrammar) -> None:
    assert extract_id("2018-07-09-2115 Some title.md", grammar) is None
    assert extract_id("2018-07-09-2115", grammar) is None
    assert extract_id("4 () nothing", grammar) is None


def test_extract_id_round_trips_through_parse(grammar: IdGrammar) -> None:
    for name in ["1 (1).md", "5 (1,1,a).md", "9 (10,2,zz,3) title.md"]:
        luhmann_id = extract_id(name, grammar)
        assert LuhmannID.parse(luhmann_id.raw, grammar) == luhmann_id


def test_extract_id_only_right_after_primary_id(grammar: IdGrammar) -> None:
    assert extract_id("3 Meeting (draft).md", grammar) is None
    assert extract_id("2 (1,1) Part (2).md", grammar).raw == "(1,1)"
    assert extract_id("see (3)", grammar) is None


def test_depth_parent_and_root(grammar: IdGrammar) -> None:
    luhmann_id = LuhmannID(("1", "1", "a"), grammar)
    assert luhmann_id.depth == 3
    assert not luhmann_id.is_root
    assert luhmann_id.parent == LuhmannID(("1", "1"), grammar)
    assert luhmann_id.parent.parent.parent is None
    assert luhmann_id.root.raw == "(1)"
    assert luhmann_id.root.is_root


def test_zero_segments_rejected(grammar: IdGrammar) -> None:
    with pytest.raises(ValueError):
        LuhmannID((), grammar)


def test_parse_accepts_bare_and_wrapped(grammar: IdGrammar) -> None:
    assert LuhmannID.parse("1,1,a", grammar).raw == "(1,1,a)"
    assert LuhmannID.parse(" (2) ", grammar).segments == ("2",)


def test_parse_completes_missing_postfix(grammar: IdGrammar) -> None:
    assert LuhmannID.parse("(1,2", grammar).raw == "(1,2)"


@pytest.mark.parametrize("text", ["", "1,,2", "1;2", "(1,2))"])
def test_parse_rejects_malformed(grammar: IdGrammar, text: str) -> None:
    with pytest.raises(ValueError):
        LuhmannID.parse(text, grammar)


def test_cursor_line_extraction(grammar: IdGrammar) -> None:
    lines = ["1 (1)", "2 (1,1) with (x) later", "3 (1,2)"]
    assert extract_id_from_cursor_line(lines, 1, grammar).segments == ("1", "1")


def test_cursor_line_empty_is_not_an_error(grammar: IdGrammar) -> None:
    assert extract_id_from_cursor_line(["1 (1)", ""], 1, grammar) is None
    assert extract_id_from_cursor_line(["   "], 0, grammar) is None
    assert extract_id_from_cursor_line([], 0, grammar) is None


def test_cursor_line_without_id_raises(grammar: IdGrammar) -> None:
    with pytest.raises(NotALuhmannNoteError) as exc_info:
        extract_id_from_cursor_line(["7 plain note"], 0, grammar)
    assert exc_info.value.line == "7 plain note"
    assert "Not a Luhmann note" in str(exc_info.value)


def test_cursor_line_with_parenthesized_title_raises(grammar: IdGrammar) -> None:
    with pytest.raises(NotALuhmannNoteError):
        extract_id_from_cursor_line(["3 Meeting (draft)"], 0, grammar)


def test_custom_grammar_extraction() -> None:
    g = IdGrammar(prefix="{", postfix="}", delimiter="/")
    assert extract_id("20200101 {3/b/7} x", g).segments == ("3", "b", "7")
    assert extract_id("20200101 (3,b,7) x", g) is None
