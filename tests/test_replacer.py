import pytest
from structgrep import (
    EditOverlapError,
    MissingFixError,
    StructGrepError,
    edits_for_matches,
    js,
    plan_replacements,
    replace_meta_var_in_string,
)


def rewrite(source, matcher, template=None):
    root = js.parse(source).root()
    return root.commit_edits(plan_replacements(root, matcher, template))


def test_template_expands_single_captures():
    match = js.parse("console.log(1)").root().find("console.$M($A)")
    assert replace_meta_var_in_string("logger.$M($A)", match.get_env()) == "logger.log(1)"


def test_template_unbound_names_become_empty():
    match = js.parse("foo(1)").root().find("foo($A)")
    assert replace_meta_var_in_string("bar($A$B)", match.get_env()) == "bar(1)"


def test_template_keeps_lowercase_dollar_text():
    match = js.parse("foo(1)").root().find("foo($A)")
    assert replace_meta_var_in_string("$a + $A", match.get_env()) == "$a + 1"


def test_rewrite_all_matches():
    assert rewrite("console.log(1); console.log(2)", "console.log($A)", "logger.info($A)") == (
        "logger.info(1); logger.info(2)"
    )


def test_rewrite_multi_capture_keeps_separators():
    assert rewrite("f(1,  2)", "f($$$ARGS)", "g($$$ARGS)") == "g(1,  2)"


def test_rewrite_skips_nested_matches():
    assert rewrite("foo(foo(1))", "foo($A)", "bar($A)") == "bar(foo(1))"


def test_rewrite_with_rule_fix_and_transform():
    config = {
        "rule": {"pattern": "const $NAME = $V"},
        "transform": {"SNAKE": {"convert": {"source": "$NAME", "toCase": "snakeCase"}}},
        "fix": "const $SNAKE = $V",
    }
    assert rewrite("const maxSize = 10", config) == "const max_size = 10"


def test_rewrite_var_to_let():
    config = {"rule": {"pattern": "var $A = $B"}, "fix": "let $A = $B"}
    assert rewrite("var x = 1\nfoo(x)", config) == "let x = 1\nfoo(x)"


def test_rewrite_without_template_or_fix():
    root = js.parse("foo(1)").root()
    with pytest.raises(MissingFixError):
        plan_replacements(root, "foo($A)")
    assert issubclass(MissingFixError, StructGrepError)


def test_planned_edits_never_overlap():
    root = js.parse("foo(foo(foo(1)))").root()
    edits = plan_replacements(root, "foo($A)", "x")
    assert len(edits) == 1
    assert root.commit_edits(edits) == "x"


def test_manual_nested_edits_are_rejected():
    root = js.parse("foo(foo(1))").root()
    edits = [match.replace("x") for match in root.find_all("foo($A)")]
    with pytest.raises(EditOverlapError):
        root.commit_edits(edits)


def test_edits_for_existing_matches_skip_nested_ones():
    root = js.parse("foo(foo(1)); foo(2)").root()
    matches = list(root.find_all("foo($A)"))
    assert len(matches) == 3
    edits = edits_for_matches(matches, "bar($A)")
    assert len(edits) == 2
    assert root.commit_edits(edits) == "bar(foo(1)); bar(2)"
