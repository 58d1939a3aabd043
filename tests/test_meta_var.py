from structgrep import MetaVarEnv, js


def numbers(source):
    root = js.parse(source).root()
    return [node for node in root.dfs() if node.kind() == "number"]


def test_bind_returns_new_env():
    one, _ = numbers("1 + 2")
    env = MetaVarEnv()
    bound = env.bind("A", one)
    assert bound is not env
    assert "A" not in env
    assert bound.get_match("A") == one


def test_empty_env_is_truthy():
    assert MetaVarEnv()


def test_rebinding_requires_equal_structure():
    one, two, other_one = numbers("1 + 2 + 1")
    env = MetaVarEnv().bind("A", one)
    assert env.bind("A", two) is None
    assert env.bind("A", other_one) is env


def test_single_and_multi_names_do_not_mix():
    one, two = numbers("1 + 2")
    env = MetaVarEnv().bind("A", one)
    assert env.bind_multi("A", [two]) is None
    assert MetaVarEnv().bind_multi("B", [one]).bind("B", one) is None


def test_bind_multi_compares_element_wise():
    one, two, three, four = numbers("[1, 2] + [1, 3]")
    env = MetaVarEnv().bind_multi("ARGS", [one, two])
    assert env.bind_multi("ARGS", [three, four]) is None
    assert env.bind_multi("ARGS", [three]) is None
    assert env.get_multiple_matches("ARGS") == [one, two]
    assert env.get_multiple_matches("MISSING") == []


def test_merge():
    one, two = numbers("1 + 2")
    left = MetaVarEnv().bind("A", one)
    right = MetaVarEnv().bind("B", two).with_transformed("T", "x")
    merged = left.merge(right)
    assert merged.get_match("A") == one
    assert merged.get_match("B") == two
    assert merged.get_transformed("T") == "x"
    assert left.merge(MetaVarEnv().bind("A", two)) is None
    assert merged.merge(MetaVarEnv().with_transformed("T", "y")) is None


def test_lookup_and_text_dict():
    match = js.parse("f(a, b)").root().find("$F($$$ARGS)")
    env = match.get_env()
    assert env.lookup("F").text() == "f"
    assert len(env.lookup("ARGS")) == 3
    assert env.lookup("NOPE") is None
    assert env.get_text("ARGS") == "a, b"
    assert env.to_text_dict() == {"F": "f", "ARGS": ["a", "b"]}
