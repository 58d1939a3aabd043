from structgrep import FieldIndex, c, js
from structgrep.fields import node_types_to_table

NODE_TYPES = [
    {
        "type": "call_expression",
        "named": True,
        "fields": {
            "function": {"multiple": False, "required": True, "types": [{"type": "expression", "named": True}]},
            "arguments": {"multiple": False, "required": True, "types": [{"type": "arguments", "named": True}]},
        },
    },
    {"type": "expression", "named": True, "subtypes": [{"type": "primary_expression", "named": True}]},
    {"type": "primary_expression", "named": True, "subtypes": [{"type": "identifier", "named": True}]},
    {"type": "identifier", "named": True},
]


def test_table_from_node_types():
    node_fields, supertypes = node_types_to_table(NODE_TYPES)
    assert node_fields["call_expression"]["function"] == (True, False, ("expression",))
    assert supertypes["expression"] == ("primary_expression",)
    assert "identifier" not in node_fields


def test_field_descriptor_lookup():
    index = FieldIndex.from_node_types(NODE_TYPES)
    descriptor = index.field_descriptor("call_expression", "function")
    assert descriptor.required
    assert not descriptor.multiple
    assert index.field_descriptor("call_expression", "body") is None
    assert index.field_descriptor("identifier", "name") is None
    assert index.required_fields("call_expression") == ["arguments", "function"]
    assert "call_expression" in index


def test_supertypes_expand_transitively():
    index = FieldIndex.from_node_types(NODE_TYPES)
    assert index.subtypes("expression") == frozenset({"primary_expression", "identifier"})
    descriptor = index.field_descriptor("call_expression", "function")
    assert index.permits(descriptor, "identifier")
    assert not index.permits(descriptor, "arguments")


def test_bundled_tables():
    member = js.field_index.field_descriptor("member_expression", "property")
    assert member.required
    assert "property_identifier" in member.possible_kinds
    assert js.field_index.knows_field("consequence")
    assert not js.field_index.field_descriptor("variable_declarator", "value").required
    assert "call_expression" in js.field_index.subtypes("expression")

    declarator = c.field_index.field_descriptor("declaration", "declarator")
    assert declarator.required and declarator.multiple
    assert "if_statement" in c.field_index.subtypes("statement")


def test_grammar_field_names_are_valid():
    assert js.is_valid_field("arguments")
    assert not js.is_valid_field("no_such_field")
    assert c.is_valid_field("declarator")
