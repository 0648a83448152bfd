from luhmann.grammar import IdGrammar
from luhmann.ids import LuhmannID
from luhmann.sorting import Comparator, compare, sort_files, sort_key


def test_compare_is_string_order_not_numeric(grammar: IdGrammar) -> None:
    ten = LuhmannID(("1", "10"), grammar)
    two = LuhmannID(("1", "2"), grammar)
    assert compare(ten, two) == -1
    assert compare(two, ten) == 1
    assert compare(two, LuhmannID(("1", "2"), grammar)) == 0


def test_parent_sorts_before_children(grammar: IdGrammar) -> None:
    parent = LuhmannID(("1",), grammar)
    child = LuhmannID(("1", "1"), grammar)
    assert compare(parent, child) == -1
    assert compare(None, parent) == -1


def test_sort_files_orders_by_raw_id(grammar: IdGrammar) -> None:
    files = ["4 (2).md", "3 (1,2).md", "9 (1,10).md", "2 (1,1).md", "1 (1).md"]
    assert sort_files(files, grammar) == ["1 (1).md", "2 (1,1).md", "9 (1,10).md", "3 (1,2).md", "4 (2).md"]


def test_files_without_id_sort_first(grammar: IdGrammar) -> None:
    files = ["2 (1,1).md", "7 plain note.md", "1 (1).md"]
    assert sort_files(files, grammar) == ["7 plain note.md", "1 (1).md", "2 (1,1).md"]
    assert sort_key("7 plain note.md", grammar) == ""


def test_sort_is_stable(grammar: IdGrammar) -> None:
    files = ["b (1).md", "z no id.md", "a (1).md", "y no id.md"]
    assert sort_files(files, grammar) == ["z no id.md", "y no id.md", "b (1).md", "a (1).md"]


def test_comparator_strategy(grammar: IdGrammar) -> None:
    comparator = Comparator(grammar)
    files = ["4 (2).md", "1 (1).md"]
    assert comparator.sort(files) == ["1 (1).md", "4 (2).md"]
    assert comparator(files) == comparator.sort(files)
    assert comparator.key("4 (2).md") == "(2)"


def test_sort_key_ignores_directories(grammar: IdGrammar) -> None:
    assert sort_key("(9)/1 (1).md", grammar) == "(1)"
