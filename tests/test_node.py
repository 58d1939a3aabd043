import pytest
from structgrep import ASTWalker, FieldIndex, FieldInvariantError, Language, Node, Pos, js, parse


def test_root_text_round_trip():
    source = "\n  foo(1)\n\n// trailing comment\n"
    root = js.parse(source)
    assert root.root().text() == source
    assert root.root().range().start == Pos(0, 0, 0)
    assert root.root().range().end.index == len(source.encode("utf-8"))


def test_round_trip_with_non_ascii_source():
    source = 'const s = "héllo"; foo(1)'
    root = js.parse(source)
    assert root.root().text() == source

    match = root.root().find("foo($A)")
    assert match.text() == "foo(1)"
    assert match.range().start.index == len('const s = "héllo"; '.encode("utf-8"))


def test_default_filename_and_language():
    root = js.parse("a")
    assert root.filename() == "anonymous"
    assert root.language is js
    assert parse("js", "a", "x.js").filename() == "x.js"


def test_parse_errors_are_collected():
    root = js.parse("foo(")
    assert root.errors
    assert root.root().text() == "foo("


def test_error_nodes_are_flagged():
    root = js.parse("let x = ;)").root()
    assert any(node.is_error() for node in root.dfs())
    assert not any(node.is_error() for node in js.parse("let x = 1;").root().dfs())


def test_navigation_between_statements():
    root = js.parse("let a = 1; let b = 2; let c = 3;").root()
    first, second, third = root.children()

    assert second.prev() == first
    assert second.next() == third
    assert first.prev() is None
    assert third.next() is None
    assert [n.text() for n in first.next_all()] == ["let b = 2;", "let c = 3;"]
    assert [n.text() for n in third.prev_all()] == ["let b = 2;", "let a = 1;"]
    assert root.child(5) is None
    assert root.child(-1) is None
    assert root.child(0) == first


def test_parent_and_ancestors_are_root_ward():
    root = js.parse("foo(bar(1))").root()
    number = root.find({"kind": "number"})
    kinds = [n.kind() for n in number.ancestors()]
    assert kinds[0] == "arguments"
    assert kinds[-1] == "program"
    assert number.parent().kind() == "arguments"
    assert root.parent() is None
    assert root.get_root().root() == root


def test_dfs_is_pre_order_and_matches_ids():
    root = js.parse("a + b * c").root()
    nodes = list(root.dfs())
    assert nodes[0] == root
    assert [n.id() for n in nodes] == sorted(n.id() for n in nodes)
    binary = ASTWalker.find_all_by_type(root, "binary_expression")
    assert [n.text() for n in binary] == ["a + b * c", "b * c"]


def test_leaf_and_named_flags():
    root = js.parse("foo(1)").root()
    call = root.find({"kind": "call_expression"})
    assert not call.is_leaf()
    assert call.is_named()
    paren = call.field("arguments").child(0)
    assert paren.kind() == "("
    assert paren.is_leaf()
    assert not paren.is_named()
    identifier = call.field("function")
    assert identifier.is_named_leaf()
    assert not call.is_named_leaf()


def test_field_lookup():
    root = js.parse("const x = 1; let y;").root()
    declarators = ASTWalker.find_all_by_type(root, "variable_declarator")
    assert declarators[0].field("name").text() == "x"
    assert declarators[0].field("value").text() == "1"
    assert declarators[1].field("value") is None
    assert declarators[0].field("name").field_name() == "name"


def test_field_children_for_repeated_fields():
    root = js.parse("let a = 1, b = 2;").root()
    declaration = root.child(0)
    assert declaration.field_children("kind")[0].text() == "let"
    assert declaration.field_children("value") == []


def test_required_field_without_filler_raises():
    strict = Language(
        "javascript-strict",
        js.ts_language,
        FieldIndex.from_table({"variable_declarator": {"value": (True, False, ("expression",))}}),
    )
    declarator = strict.parse("let y;").root().find({"kind": "variable_declarator"})
    with pytest.raises(FieldInvariantError):
        declarator.field("value")


def test_is_kind_understands_supertypes():
    call = js.parse("foo(1)").root().find({"kind": "call_expression"})
    assert call.is_kind("call_expression")
    assert call.is_kind("expression")
    assert not call.is_kind("statement")


def test_node_identity():
    source = "foo(1)"
    first = js.parse(source)
    second = js.parse(source)
    assert first.root().child(0) == first.root().child(0)
    assert hash(first.root().child(0)) == hash(first.root().child(0))
    assert first.root() != second.root()
    assert isinstance(first.root(), Node)


def test_containment_and_inversion():
    root = js.parse("function f() { if (a) { return g(b); } }").root()
    for parent in root.dfs():
        for child in list(parent.dfs())[1:]:
            assert parent.has(js.kind(child.kind()))
            assert child.inside(js.kind(parent.kind()))


def test_dump_lists_fields_and_errors():
    root = js.parse("foo(1)").root()
    text = ASTWalker.dump(root)
    assert "program [0:0 - 0:6]" in text
    assert "function: identifier [0:0 - 0:3]" in text
    assert "'('" in text
    assert "'('" not in ASTWalker.dump(root, show_anonymous=False)


def test_find_parent_of_type():
    root = js.parse("function f() { return 1; }").root()
    number = root.find({"kind": "number"})
    assert ASTWalker.find_parent_of_type(number, "function_declaration").field("name").text() == "f"
    assert ASTWalker.find_parent_of_type(number, "class_declaration") is None
