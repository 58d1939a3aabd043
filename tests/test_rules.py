import re

import pytest
from structgrep import (
    All,
    Any,
    Follows,
    Has,
    Inside,
    MetaVarEnv,
    NamedRef,
    Not,
    PatternMatch,
    Precedes,
    Regex,
    RuleCompileError,
    RuleRegistry,
    StopBy,
    js,
)


def texts(nodes):
    return [node.text() for node in nodes]


def test_kind_rule():
    root = js.parse("foo(1); bar(2);").root()
    assert texts(root.find_all(js.kind("call_expression"))) == ["foo(1)", "bar(2)"]


def test_unknown_kind_is_rejected():
    with pytest.raises(RuleCompileError):
        js.kind("no_such_kind")


def test_supertype_kind_matches_subtypes():
    rule = js.kind("declaration")
    assert "lexical_declaration" in rule.potential_kinds()
    root = js.parse("let a = 1; foo();").root()
    assert texts(root.find_all(rule)) == ["let a = 1;"]


def test_all_threads_captures():
    rule = All((PatternMatch(js.pattern("$F($A)")), Has(js.pattern("$A"))))
    match = js.parse("foo(1)").root().find(rule)
    assert match.get_match("F").text() == "foo"
    assert match.get_match("A").text() == "1"


def test_all_fails_on_conflicting_captures():
    rule = All((PatternMatch(js.pattern("$A($B)")), PatternMatch(js.pattern("$B($A)"))))
    assert js.parse("foo(bar)").root().find(rule) is None


def test_any_uses_first_successful_rule():
    rule = Any((PatternMatch(js.pattern("foo($A)")), PatternMatch(js.pattern("$F($A)"))))
    root = js.parse("foo(1); bar(2); baz;").root()
    matches = list(root.find_all(rule))
    assert texts(matches) == ["foo(1)", "bar(2)"]
    assert matches[0].get_match("F") is None
    assert matches[1].get_match("F").text() == "bar"


def test_any_potential_kinds_is_union():
    rule = Any((js.kind("call_expression"), js.kind("number")))
    assert rule.potential_kinds() == frozenset({"call_expression", "number"})
    assert Any((js.kind("number"), Regex(re.compile("x")))).potential_kinds() is None


def test_not_rule():
    rule = All((js.kind("call_expression"), Not(js.pattern("foo($$$)"))))
    root = js.parse("foo(1); bar(2); baz(3);").root()
    assert texts(root.find_all(rule)) == ["bar(2)", "baz(3)"]


def test_not_produces_no_bindings():
    node = js.parse("foo(1)").root().find(js.kind("call_expression"))
    env = next(Not(js.pattern("bar($A)")).match_node_with_env(node, MetaVarEnv()))
    assert env.to_text_dict() == {}


def test_regex_rule():
    root = js.parse("testOne(); other(); testTwo();").root()
    rule = All((js.kind("identifier"), Regex(re.compile(r"^test"))))
    assert texts(root.find_all(rule)) == ["testOne", "testTwo"]


def test_inside_walks_all_ancestors_by_default():
    number = js.parse("foo(bar(1))").root().find(js.kind("number"))
    assert number.inside("foo($$$)")
    assert number.inside(js.kind("program"))
    assert not number.inside(js.kind("number"))


def test_inside_with_neighbor_stop_by():
    number = js.parse("foo(bar(1))").root().find(js.kind("number"))
    assert number.matches(Inside(js.kind("arguments"), StopBy.neighbor()))
    assert not number.matches(Inside(js.kind("call_expression"), StopBy.neighbor()))


def test_inside_with_stop_rule_is_inclusive():
    number = js.parse("foo(bar(1))").root().find(js.kind("number"))
    stop_at_bar = StopBy.until(js.pattern("bar($$$)"))
    assert number.matches(Inside(js.pattern("bar($$$)"), stop_at_bar))
    assert not number.matches(Inside(js.pattern("foo($$$)"), stop_at_bar))


def test_inside_with_field():
    call = js.parse("const x = foo(1)").root().find("foo($A)")
    assert call.matches(Inside(js.kind("variable_declarator"), field="value"))
    assert not call.matches(Inside(js.kind("variable_declarator"), field="name"))


def test_has_with_field():
    declarator = js.parse("const x = 1").root().find(js.kind("variable_declarator"))
    assert declarator.matches(Has(js.kind("identifier"), field="name"))
    assert not declarator.matches(Has(js.kind("number"), field="name"))
    assert declarator.matches(Has(js.kind("number")))


def test_has_with_stop_rule_does_not_descend():
    outer = js.parse("a(b(c(1)))").root().find(js.kind("call_expression"))
    stop_at_call = StopBy.until(js.kind("call_expression"))
    assert outer.has(js.kind("number"))
    assert not outer.matches(Has(js.kind("number"), stop_at_call))
    assert outer.matches(Has(js.pattern("b($$$)"), stop_at_call))


def test_has_neighbor_only_checks_children():
    outer = js.parse("a(b(1))").root().find(js.kind("call_expression"))
    assert outer.matches(Has(js.kind("arguments"), StopBy.neighbor()))
    assert not outer.matches(Has(js.kind("number"), StopBy.neighbor()))


def test_precedes_and_follows():
    root = js.parse("let a = 1; let b = 2; foo();").root()
    first, second, last = root.children()
    statement = js.kind("expression_statement")
    assert first.precedes(statement)
    assert not first.follows(statement)
    assert last.follows("let a = 1;")
    assert not first.matches(Precedes(statement, StopBy.neighbor()))
    assert second.matches(Precedes(statement, StopBy.neighbor()))
    assert last.matches(Follows(js.kind("lexical_declaration"), StopBy.neighbor()))


def test_precedes_with_stop_rule():
    root = js.parse("let a = 1; let b = 2; foo();").root()
    first = root.child(0)
    stop_at_b = StopBy.until(js.pattern("let b = 2;"))
    assert not first.matches(Precedes(js.kind("expression_statement"), stop_at_b))


def test_named_ref_uses_registry():
    registry = RuleRegistry()
    registry.register("call", js.kind("call_expression"))
    match = js.parse("x = foo()").root().find(NamedRef("call", registry))
    assert match.text() == "foo()"


def test_registry_detects_cycles():
    registry = RuleRegistry()
    registry.register("a", NamedRef("b", registry), references={"b"})
    registry.register("b", NamedRef("a", registry), references={"a"})
    with pytest.raises(RuleCompileError, match="Cyclic"):
        registry.validate()


def test_registry_detects_undefined_references():
    registry = RuleRegistry()
    registry.register("a", NamedRef("missing", registry), references={"missing"})
    with pytest.raises(RuleCompileError):
        registry.validate()
    with pytest.raises(RuleCompileError):
        RuleRegistry().validate(["nowhere"])
