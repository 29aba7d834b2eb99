from tinycomp.parser import parse
from tinycomp.tokens import Node
from tinycomp.tree import format_preorder, write_preorder

PROG = '"+1 ( #+2 $+2 )'


def _count(node):
    return 1 + sum(_count(child) for child in node.children())


def test_root_line():
    lines = format_preorder(parse(PROG)).splitlines()
    assert lines[0] == " S "


def test_one_line_per_node():
    tree = parse(PROG)
    lines = format_preorder(tree).splitlines()
    assert len(lines) == _count(tree)


def test_children_are_indented_by_depth():
    lines = format_preorder(parse(PROG)).splitlines()
    assert "        t2 +1 " in lines


def test_token_text_follows_label():
    lines = format_preorder(parse(PROG)).splitlines()
    assert any(line.strip() == "t2 +2" for line in lines)
    assert all(line.endswith(" ") for line in lines)


def test_empty_nonterminal_listed_without_text():
    lines = format_preorder(parse("( #+1 $+1 )")).splitlines()
    assert "        empty " in lines


def test_none_root_is_empty():
    assert format_preorder(None) == ""


def test_leaf_without_token():
    assert format_preorder(Node("empty")) == " empty \n"


def test_write_preorder(tmp_path):
    tree = parse(PROG)
    base = tmp_path / "prog"
    path = write_preorder(tree, str(base))
    assert path.name == "prog.preorder"
    assert path.read_text(encoding="utf-8") == format_preorder(tree)