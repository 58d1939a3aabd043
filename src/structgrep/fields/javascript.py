# Generated by scripts/generate_field_index.py from tree-sitter-javascript node-types.json.
# Do not edit by hand.

REQUIRED, OPTIONAL = True, False
SINGLE, MULTIPLE = False, True

NODE_FIELDS = {
    "arrow_function": {
        "body": (REQUIRED, SINGLE, ("expression", "statement_block")),
        "parameter": (OPTIONAL, SINGLE, ("identifier",)),
        "parameters": (OPTIONAL, SINGLE, ("formal_parameters",)),
    },
    "assignment_expression": {
        "left": (REQUIRED, SINGLE, ("array_pattern", "identifier", "member_expression", "object_pattern",
                                    "parenthesized_expression", "subscript_expression", "undefined")),
        "right": (REQUIRED, SINGLE, ("expression",)),
    },
    "assignment_pattern": {
        "left": (REQUIRED, SINGLE, ("pattern",)),
        "right": (REQUIRED, SINGLE, ("expression",)),
    },
    "augmented_assignment_expression": {
        "left": (REQUIRED, SINGLE, ("identifier", "member_expression", "parenthesized_expression",
                                    "subscript_expression")),
        "operator": (REQUIRED, SINGLE, ("%=", "&&=", "&=", "**=", "*=", "+=", "-=", "/=", "<<=", ">>=",
                                        ">>>=", "??=", "^=", "|=", "||=")),
        "right": (REQUIRED, SINGLE, ("expression",)),
    },
    "binary_expression": {
        "left": (REQUIRED, SINGLE, ("expression", "private_property_identifier")),
        "operator": (REQUIRED, SINGLE, ("!=", "!==", "%", "&", "&&", "*", "**", "+", "-", "/", "<", "<<",
                                        "<=", "==", "===", ">", ">=", ">>", ">>>", "??", "^", "in",
                                        "instanceof", "|", "||")),
        "right": (REQUIRED, SINGLE, ("expression",)),
    },
    "break_statement": {
        "label": (OPTIONAL, SINGLE, ("statement_identifier",)),
    },
    "call_expression": {
        "arguments": (REQUIRED, SINGLE, ("arguments", "template_string")),
        "function": (REQUIRED, SINGLE, ("expression", "import")),
        "optional_chain": (OPTIONAL, SINGLE, ("optional_chain",)),
    },
    "catch_clause": {
        "body": (REQUIRED, SINGLE, ("statement_block",)),
        "parameter": (OPTIONAL, SINGLE, ("array_pattern", "identifier", "object_pattern")),
    },
    "class": {
        "body": (REQUIRED, SINGLE, ("class_body",)),
        "decorator": (OPTIONAL, MULTIPLE, ("decorator",)),
        "name": (OPTIONAL, SINGLE, ("identifier",)),
    },
    "class_body": {
        "member": (OPTIONAL, MULTIPLE, ("class_static_block", "field_definition", "method_definition")),
    },
    "class_declaration": {
        "body": (REQUIRED, SINGLE, ("class_body",)),
        "decorator": (OPTIONAL, MULTIPLE, ("decorator",)),
        "name": (REQUIRED, SINGLE, ("identifier",)),
    },
    "continue_statement": {
        "label": (OPTIONAL, SINGLE, ("statement_identifier",)),
    },
    "do_statement": {
        "body": (REQUIRED, SINGLE, ("statement",)),
        "condition": (REQUIRED, SINGLE, ("parenthesized_expression",)),
    },
    "export_specifier": {
        "alias": (OPTIONAL, SINGLE, ("identifier", "string")),
        "name": (REQUIRED, SINGLE, ("identifier", "string")),
    },
    "export_statement": {
        "declaration": (OPTIONAL, SINGLE, ("declaration",)),
        "decorator": (OPTIONAL, MULTIPLE, ("decorator",)),
        "source": (OPTIONAL, SINGLE, ("string",)),
        "value": (OPTIONAL, SINGLE, ("expression",)),
    },
    "field_definition": {
        "decorator": (OPTIONAL, MULTIPLE, ("decorator",)),
        "property": (REQUIRED, SINGLE, ("computed_property_name", "number", "private_property_identifier",
                                        "property_identifier", "string")),
        "value": (OPTIONAL, SINGLE, ("expression",)),
    },
    "finally_clause": {
        "body": (REQUIRED, SINGLE, ("statement_block",)),
    },
    "for_in_statement": {
        "body": (REQUIRED, SINGLE, ("statement",)),
        "kind": (OPTIONAL, SINGLE, ("const", "let", "var")),
        "left": (REQUIRED, SINGLE, ("array_pattern", "identifier", "member_expression", "object_pattern",
                                    "parenthesized_expression", "subscript_expression", "undefined")),
        "operator": (REQUIRED, SINGLE, ("in", "of")),
        "right": (REQUIRED, SINGLE, ("expression", "sequence_expression")),
        "value": (OPTIONAL, SINGLE, ("expression",)),
    },
    "for_statement": {
        "body": (REQUIRED, SINGLE, ("statement",)),
        "condition": (REQUIRED, MULTIPLE, (";", "empty_statement", "expression", "sequence_expression")),
        "increment": (OPTIONAL, SINGLE, ("expression", "sequence_expression")),
        "initializer": (REQUIRED, MULTIPLE, (";", "empty_statement", "expression", "lexical_declaration",
                                             "sequence_expression", "variable_declaration")),
    },
    "function_declaration": {
        "body": (REQUIRED, SINGLE, ("statement_block",)),
        "name": (REQUIRED, SINGLE, ("identifier",)),
        "parameters": (REQUIRED, SINGLE, ("formal_parameters",)),
    },
    "function_expression": {
        "body": (REQUIRED, SINGLE, ("statement_block",)),
        "name": (OPTIONAL, SINGLE, ("identifier",)),
        "parameters": (REQUIRED, SINGLE, ("formal_parameters",)),
    },
    "generator_function": {
        "body": (REQUIRED, SINGLE, ("statement_block",)),
        "name": (OPTIONAL, SINGLE, ("identifier",)),
        "parameters": (REQUIRED, SINGLE, ("formal_parameters",)),
    },
    "generator_function_declaration": {
        "body": (REQUIRED, SINGLE, ("statement_block",)),
        "name": (REQUIRED, SINGLE, ("identifier",)),
        "parameters": (REQUIRED, SINGLE, ("formal_parameters",)),
    },
    "if_statement": {
        "alternative": (OPTIONAL, SINGLE, ("else_clause",)),
        "condition": (REQUIRED, SINGLE, ("parenthesized_expression",)),
        "consequence": (REQUIRED, SINGLE, ("statement",)),
    },
    "import_specifier": {
        "alias": (OPTIONAL, SINGLE, ("identifier",)),
        "name": (REQUIRED, SINGLE, ("identifier", "string")),
    },
    "import_statement": {
        "source": (REQUIRED, SINGLE, ("string",)),
    },
    "jsx_closing_element": {
        "name": (OPTIONAL, SINGLE, ("identifier", "jsx_namespace_name", "member_expression")),
    },
    "jsx_element": {
        "close_tag": (REQUIRED, SINGLE, ("jsx_closing_element",)),
        "open_tag": (REQUIRED, SINGLE, ("jsx_opening_element",)),
    },
    "jsx_opening_element": {
        "attribute": (OPTIONAL, MULTIPLE, ("jsx_attribute", "jsx_expression")),
        "name": (OPTIONAL, SINGLE, ("identifier", "jsx_namespace_name", "member_expression")),
    },
    "jsx_self_closing_element": {
        "attribute": (OPTIONAL, MULTIPLE, ("jsx_attribute", "jsx_expression")),
        "name": (REQUIRED, SINGLE, ("identifier", "jsx_namespace_name", "member_expression")),
    },
    "labeled_statement": {
        "body": (REQUIRED, SINGLE, ("statement",)),
        "label": (REQUIRED, SINGLE, ("statement_identifier",)),
    },
    "lexical_declaration": {
        "kind": (REQUIRED, SINGLE, ("const", "let")),
    },
    "member_expression": {
        "object": (REQUIRED, SINGLE, ("expression", "import", "primary_expression")),
        "optional_chain": (OPTIONAL, SINGLE, ("optional_chain",)),
        "property": (REQUIRED, SINGLE, ("private_property_identifier", "property_identifier")),
    },
    "method_definition": {
        "body": (REQUIRED, SINGLE, ("statement_block",)),
        "decorator": (OPTIONAL, MULTIPLE, ("decorator",)),
        "name": (REQUIRED, SINGLE, ("computed_property_name", "number", "private_property_identifier",
                                    "property_identifier", "string")),
        "parameters": (REQUIRED, SINGLE, ("formal_parameters",)),
    },
    "new_expression": {
        "arguments": (OPTIONAL, SINGLE, ("arguments",)),
        "constructor": (REQUIRED, SINGLE, ("new_expression", "primary_expression")),
    },
    "object_assignment_pattern": {
        "left": (REQUIRED, SINGLE, ("array_pattern", "object_pattern", "shorthand_property_identifier_pattern")),
        "right": (REQUIRED, SINGLE, ("expression",)),
    },
    "pair": {
        "key": (REQUIRED, SINGLE, ("computed_property_name", "number", "private_property_identifier",
                                   "property_identifier", "string")),
        "value": (REQUIRED, SINGLE, ("expression",)),
    },
    "pair_pattern": {
        "key": (REQUIRED, SINGLE, ("computed_property_name", "number", "private_property_identifier",
                                   "property_identifier", "string")),
        "value": (REQUIRED, SINGLE, ("assignment_pattern", "pattern")),
    },
    "regex": {
        "flags": (OPTIONAL, SINGLE, ("regex_flags",)),
        "pattern": (REQUIRED, SINGLE, ("regex_pattern",)),
    },
    "subscript_expression": {
        "index": (REQUIRED, SINGLE, ("expression", "number", "predefined_type", "sequence_expression", "string")),
        "object": (REQUIRED, SINGLE, ("expression", "primary_expression")),
        "optional_chain": (OPTIONAL, SINGLE, ("optional_chain",)),
    },
    "switch_case": {
        "body": (OPTIONAL, MULTIPLE, ("statement",)),
        "value": (REQUIRED, SINGLE, ("expression", "sequence_expression")),
    },
    "switch_default": {
        "body": (OPTIONAL, MULTIPLE, ("statement",)),
    },
    "switch_statement": {
        "body": (REQUIRED, SINGLE, ("switch_body",)),
        "value": (REQUIRED, SINGLE, ("parenthesized_expression",)),
    },
    "ternary_expression": {
        "alternative": (REQUIRED, SINGLE, ("expression",)),
        "condition": (REQUIRED, SINGLE, ("expression",)),
        "consequence": (REQUIRED, SINGLE, ("expression",)),
    },
    "try_statement": {
        "body": (REQUIRED, SINGLE, ("statement_block",)),
        "finalizer": (OPTIONAL, SINGLE, ("finally_clause",)),
        "handler": (OPTIONAL, SINGLE, ("catch_clause",)),
    },
    "unary_expression": {
        "argument": (REQUIRED, SINGLE, ("expression",)),
        "operator": (REQUIRED, SINGLE, ("!", "+", "-", "delete", "typeof", "void", "~")),
    },
    "update_expression": {
        "argument": (REQUIRED, SINGLE, ("expression",)),
        "operator": (REQUIRED, SINGLE, ("++", "--")),
    },
    "variable_declarator": {
        "name": (REQUIRED, SINGLE, ("array_pattern", "identifier", "object_pattern")),
        "value": (OPTIONAL, SINGLE, ("expression",)),
    },
    "while_statement": {
        "body": (REQUIRED, SINGLE, ("statement",)),
        "condition": (REQUIRED, SINGLE, ("parenthesized_expression",)),
    },
    "with_statement": {
        "body": (REQUIRED, SINGLE, ("statement",)),
        "object": (REQUIRED, SINGLE, ("parenthesized_expression",)),
    },
}

SUPERTYPES = {
    "declaration": ("class_declaration", "function_declaration", "generator_function_declaration",
                    "lexical_declaration", "variable_declaration"),
    "expression": ("assignment_expression", "augmented_assignment_expression", "await_expression",
                   "binary_expression", "jsx_element", "jsx_self_closing_element", "new_expression",
                   "primary_expression", "ternary_expression", "unary_expression", "update_expression",
                   "yield_expression"),
    "pattern": ("array_pattern", "identifier", "member_expression", "object_pattern", "rest_pattern",
                "subscript_expression", "undefined"),
    "primary_expression": ("array", "arrow_function", "call_expression", "class", "false", "function_expression",
                           "generator_function", "identifier", "member_expression", "meta_property", "null",
                           "number", "object", "parenthesized_expression", "regex", "string",
                           "subscript_expression", "super", "template_string", "this", "true", "undefined"),
    "statement": ("break_statement", "continue_statement", "debugger_statement", "declaration", "do_statement",
                  "empty_statement", "export_statement", "expression_statement", "for_in_statement",
                  "for_statement", "if_statement", "import_statement", "labeled_statement", "return_statement",
                  "statement_block", "switch_statement", "throw_statement", "try_statement", "while_statement",
                  "with_statement"),
}
