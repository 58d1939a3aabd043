import pytest
from structgrep import js
from structgrep.transform import split_words


def transformed(source, transform, pattern="foo($A)"):
    config = {"rule": {"pattern": pattern}, "transform": transform}
    return js.parse(source).root().find(config)


@pytest.mark.parametrize(
    "to_case,expected",
    [
        ("lowerCase", "myhttpvalue"),
        ("upperCase", "MYHTTPVALUE"),
        ("capitalize", "MyHTTPValue"),
        ("camelCase", "myHttpValue"),
        ("snakeCase", "my_http_value"),
        ("kebabCase", "my-http-value"),
        ("pascalCase", "MyHttpValue"),
    ],
)
def test_convert(to_case, expected):
    match = transformed("foo(myHTTPValue)", {"OUT": {"convert": {"source": "$A", "toCase": to_case}}})
    assert match.get_transformed("OUT") == expected


def test_convert_with_explicit_separators():
    match = transformed(
        "foo(some_valueName)",
        {"OUT": {"convert": {"source": "$A", "toCase": "kebabCase", "separatedBy": ["underscore"]}}},
    )
    assert match.get_transformed("OUT") == "some-valuename"


def test_substring_uses_character_slicing():
    match = transformed(
        "foo('héllo')",
        {
            "INNER": {"substring": {"source": "$A", "startChar": 1, "endChar": -1}},
            "TAIL": {"substring": {"source": "$A", "startChar": -3}},
        },
    )
    assert match.get_transformed("INNER") == "héllo"
    assert match.get_transformed("TAIL") == "lo'"


def test_replace_is_literal():
    match = transformed(
        "foo(fooBarFoo)",
        {"OUT": {"replace": {"source": "$A", "replace": "Foo$", "by": "$1Baz"}}},
    )
    assert match.get_transformed("OUT") == "fooBar$1Baz"


def test_transforms_chain_in_order():
    match = transformed(
        "foo(my_name)",
        {
            "CAMEL": {"convert": {"source": "$A", "toCase": "camelCase"}},
            "SHORT": {"substring": {"source": "$CAMEL", "endChar": 2}},
        },
    )
    assert match.get_transformed("CAMEL") == "myName"
    assert match.get_transformed("SHORT") == "my"


def test_transform_of_multi_capture_uses_source_slice():
    match = transformed(
        "foo(1,  2)",
        {"ARGS": {"convert": {"source": "$$$A", "toCase": "upperCase"}}},
        pattern="foo($$$A)",
    )
    assert match.get_transformed("ARGS") == "1,  2"


def test_transform_of_unbound_name_is_skipped():
    match = transformed("foo(x)", {"OUT": {"convert": {"source": "$NOPE", "toCase": "upperCase"}}})
    assert match.get_transformed("OUT") is None


def test_split_words():
    assert split_words("fooBar-baz_qux") == ["foo", "Bar", "baz", "qux"]
    assert split_words("HTTPServer") == ["HTTP", "Server"]
    assert split_words("a.b/c d", ["dot"]) == ["a", "b/c d"]
