import pytest
from structgrep import MetaVariable, Pattern, PatternError, c, extract_meta_var, js


def test_extract_meta_var():
    assert extract_meta_var("$A") == MetaVariable("A", multi=False)
    assert extract_meta_var("$$$ARGS") == MetaVariable("ARGS", multi=True)
    assert extract_meta_var("$VAR_1") == MetaVariable("VAR_1", multi=False)
    assert extract_meta_var("$_") == MetaVariable(None, multi=False)
    assert extract_meta_var("$$$") == MetaVariable(None, multi=True)
    assert extract_meta_var("$_IGNORED") == MetaVariable(None, multi=False)
    assert extract_meta_var("$abc") is None
    assert extract_meta_var("abc") is None
    assert extract_meta_var("$") is None


def test_expando_char_for_c():
    assert c.pre_process_pattern("foo($A)") == "foo(µA)"
    assert c.extract_meta_var("µA") == MetaVariable("A", multi=False)
    assert js.pre_process_pattern("foo($A)") == "foo($A)"


def test_pattern_root_is_stripped():
    pattern = Pattern.compile("console.log", js)
    assert pattern.root.kind == "member_expression"
    assert pattern.potential_kinds() == frozenset({"member_expression"})


def test_single_meta_var_pattern():
    pattern = Pattern.compile("$A", js)
    assert pattern.root.meta_var == MetaVariable("A", multi=False)
    assert pattern.potential_kinds() is None
    assert pattern.defined_vars() == {"A"}


def test_placeholders_inside_pattern():
    pattern = js.pattern("foo($A, $$$REST)")
    assert pattern.defined_vars() == {"A", "REST"}
    arguments = pattern.root.children[1]
    assert arguments.field == "arguments"
    assert [child.meta_var for child in arguments.children if child.meta_var] == [
        MetaVariable("A", multi=False),
        MetaVariable("REST", multi=True),
    ]


def test_empty_pattern_is_rejected():
    with pytest.raises(PatternError):
        Pattern.compile("", js)


def test_multiple_top_level_nodes_are_rejected():
    with pytest.raises(PatternError):
        Pattern.compile("a; b;", js)


def test_syntax_error_is_rejected():
    with pytest.raises(PatternError):
        Pattern.compile("foo(", js)


def test_single_and_multi_use_of_one_name_is_rejected():
    with pytest.raises(PatternError):
        Pattern.compile("foo($A, $$$A)", js)


def test_contextual_pattern_selects_kind():
    pattern = Pattern.compile("({ key: $V })", js, selector="pair")
    assert pattern.root.kind == "pair"
    root = js.parse("const o = { key: 1, other: 2 }").root()
    match = root.find(pattern)
    assert match.text() == "key: 1"
    assert match.get_match("V").text() == "1"


def test_contextual_pattern_missing_selector():
    with pytest.raises(PatternError):
        Pattern.compile("({ key: 1 })", js, selector="class_body")


def test_c_contextual_pattern():
    pattern = c.pattern("int f() { return a + b; }", selector="binary_expression")
    root = c.parse("int add(int a, int b) { return a + b; }").root()
    match = root.find(pattern)
    assert match.text() == "a + b"
    assert match.kind() == "binary_expression"


def test_c_pattern_without_trailing_semicolon():
    pattern = c.pattern("foo($A, $B)")
    assert pattern.root.kind == "call_expression"
    root = c.parse("int main() { return foo(1, 2); }").root()
    match = root.find(pattern)
    assert match.text() == "foo(1, 2)"
    assert match.get_match("A").text() == "1"


def test_c_call_with_one_argument_needs_context():
    pattern = c.pattern("int f() { return foo($A); }", selector="call_expression")
    root = c.parse("int main() { return foo(1); }").root()
    assert root.find(pattern).get_match("A").text() == "1"


def test_missing_token_inside_pattern_is_rejected():
    with pytest.raises(PatternError):
        Pattern.compile("foo(1", js)
