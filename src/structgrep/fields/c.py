# Generated by scripts/generate_field_index.py from tree-sitter-c node-types.json.
# Do not edit by hand.

REQUIRED, OPTIONAL = True, False
SINGLE, MULTIPLE = False, True

NODE_FIELDS = {
    "abstract_array_declarator": {
        "declarator": (OPTIONAL, SINGLE, ("_abstract_declarator",)),
        "size": (OPTIONAL, SINGLE, ("*", "expression")),
    },
    "abstract_function_declarator": {
        "declarator": (OPTIONAL, SINGLE, ("_abstract_declarator",)),
        "parameters": (REQUIRED, SINGLE, ("parameter_list",)),
    },
    "abstract_pointer_declarator": {
        "declarator": (OPTIONAL, SINGLE, ("_abstract_declarator",)),
    },
    "array_declarator": {
        "declarator": (REQUIRED, SINGLE, ("_declarator", "_field_declarator", "_type_declarator")),
        "size": (OPTIONAL, SINGLE, ("*", "expression")),
    },
    "assignment_expression": {
        "left": (REQUIRED, SINGLE, ("call_expression", "field_expression", "identifier", "parenthesized_expression",
                                    "pointer_expression", "subscript_expression")),
        "operator": (REQUIRED, SINGLE, ("%=", "&=", "*=", "+=", "-=", "/=", "<<=", "=", ">>=", "^=", "|=")),
        "right": (REQUIRED, SINGLE, ("expression",)),
    },
    "binary_expression": {
        "left": (REQUIRED, SINGLE, ("expression", "preproc_defined")),
        "operator": (REQUIRED, SINGLE, ("!=", "%", "&", "&&", "*", "+", "-", "/", "<", "<<", "<=", "==", ">", ">=",
                                        ">>", "^", "|", "||")),
        "right": (REQUIRED, SINGLE, ("expression", "preproc_defined")),
    },
    "call_expression": {
        "arguments": (REQUIRED, SINGLE, ("argument_list",)),
        "function": (REQUIRED, SINGLE, ("expression",)),
    },
    "case_statement": {
        "value": (OPTIONAL, SINGLE, ("expression",)),
    },
    "cast_expression": {
        "type": (REQUIRED, SINGLE, ("type_descriptor",)),
        "value": (REQUIRED, SINGLE, ("expression",)),
    },
    "compound_literal_expression": {
        "type": (REQUIRED, SINGLE, ("type_descriptor",)),
        "value": (REQUIRED, SINGLE, ("initializer_list",)),
    },
    "conditional_expression": {
        "alternative": (REQUIRED, SINGLE, ("expression",)),
        "condition": (REQUIRED, SINGLE, ("expression",)),
        "consequence": (OPTIONAL, SINGLE, ("comma_expression", "expression")),
    },
    "declaration": {
        "declarator": (REQUIRED, MULTIPLE, ("_declarator", "init_declarator")),
        "type": (REQUIRED, SINGLE, ("type_specifier",)),
    },
    "do_statement": {
        "body": (REQUIRED, SINGLE, ("statement",)),
        "condition": (REQUIRED, SINGLE, ("parenthesized_expression",)),
    },
    "enum_specifier": {
        "body": (OPTIONAL, SINGLE, ("enumerator_list",)),
        "name": (OPTIONAL, SINGLE, ("type_identifier",)),
        "underlying_type": (OPTIONAL, SINGLE, ("primitive_type",)),
    },
    "enumerator": {
        "name": (REQUIRED, SINGLE, ("identifier",)),
        "value": (OPTIONAL, SINGLE, ("expression",)),
    },
    "field_declaration": {
        "declarator": (OPTIONAL, MULTIPLE, ("_field_declarator",)),
        "type": (REQUIRED, SINGLE, ("type_specifier",)),
    },
    "field_expression": {
        "argument": (REQUIRED, SINGLE, ("expression",)),
        "field": (REQUIRED, SINGLE, ("field_identifier",)),
        "operator": (REQUIRED, SINGLE, ("->", ".")),
    },
    "for_statement": {
        "body": (REQUIRED, SINGLE, ("statement",)),
        "condition": (OPTIONAL, SINGLE, ("comma_expression", "expression")),
        "initializer": (OPTIONAL, SINGLE, ("comma_expression", "declaration", "expression")),
        "update": (OPTIONAL, SINGLE, ("comma_expression", "expression")),
    },
    "function_declarator": {
        "declarator": (REQUIRED, SINGLE, ("_declarator", "_field_declarator", "_type_declarator")),
        "parameters": (REQUIRED, SINGLE, ("parameter_list",)),
    },
    "function_definition": {
        "body": (REQUIRED, SINGLE, ("compound_statement",)),
        "declarator": (REQUIRED, SINGLE, ("_declarator",)),
        "type": (REQUIRED, SINGLE, ("type_specifier",)),
    },
    "goto_statement": {
        "label": (REQUIRED, SINGLE, ("statement_identifier",)),
    },
    "if_statement": {
        "alternative": (OPTIONAL, SINGLE, ("else_clause",)),
        "condition": (REQUIRED, SINGLE, ("parenthesized_expression",)),
        "consequence": (REQUIRED, SINGLE, ("statement",)),
    },
    "init_declarator": {
        "declarator": (REQUIRED, SINGLE, ("_declarator",)),
        "value": (REQUIRED, SINGLE, ("expression", "initializer_list")),
    },
    "labeled_statement": {
        "label": (REQUIRED, SINGLE, ("statement_identifier",)),
    },
    "parameter_declaration": {
        "declarator": (OPTIONAL, SINGLE, ("_abstract_declarator", "_declarator")),
        "type": (REQUIRED, SINGLE, ("type_specifier",)),
    },
    "pointer_declarator": {
        "declarator": (REQUIRED, SINGLE, ("_declarator", "_field_declarator", "_type_declarator")),
    },
    "pointer_expression": {
        "argument": (REQUIRED, SINGLE, ("expression",)),
        "operator": (REQUIRED, SINGLE, ("&", "*")),
    },
    "preproc_def": {
        "name": (REQUIRED, SINGLE, ("identifier",)),
        "value": (OPTIONAL, SINGLE, ("preproc_arg",)),
    },
    "preproc_function_def": {
        "name": (REQUIRED, SINGLE, ("identifier",)),
        "parameters": (REQUIRED, SINGLE, ("preproc_params",)),
        "value": (OPTIONAL, SINGLE, ("preproc_arg",)),
    },
    "preproc_if": {
        "alternative": (OPTIONAL, SINGLE, ("preproc_elif", "preproc_elifdef", "preproc_else")),
        "condition": (REQUIRED, SINGLE, ("binary_expression", "call_expression", "char_literal", "identifier",
                                         "number_literal", "parenthesized_expression", "preproc_defined",
                                         "unary_expression")),
    },
    "preproc_ifdef": {
        "alternative": (OPTIONAL, SINGLE, ("preproc_elif", "preproc_elifdef", "preproc_else")),
        "name": (REQUIRED, SINGLE, ("identifier",)),
    },
    "preproc_include": {
        "path": (REQUIRED, SINGLE, ("call_expression", "identifier", "string_literal", "system_lib_string")),
    },
    "sizeof_expression": {
        "type": (OPTIONAL, SINGLE, ("type_descriptor",)),
        "value": (OPTIONAL, SINGLE, ("expression",)),
    },
    "struct_specifier": {
        "body": (OPTIONAL, SINGLE, ("field_declaration_list",)),
        "name": (OPTIONAL, SINGLE, ("type_identifier",)),
    },
    "subscript_expression": {
        "argument": (REQUIRED, SINGLE, ("expression",)),
        "index": (REQUIRED, SINGLE, ("expression",)),
    },
    "switch_statement": {
        "body": (REQUIRED, SINGLE, ("compound_statement",)),
        "condition": (REQUIRED, SINGLE, ("parenthesized_expression",)),
    },
    "type_definition": {
        "declarator": (REQUIRED, MULTIPLE, ("_type_declarator",)),
        "type": (REQUIRED, SINGLE, ("type_specifier",)),
    },
    "type_descriptor": {
        "declarator": (OPTIONAL, SINGLE, ("_abstract_declarator",)),
        "type": (REQUIRED, SINGLE, ("type_specifier",)),
    },
    "unary_expression": {
        "argument": (REQUIRED, SINGLE, ("expression", "preproc_defined")),
        "operator": (REQUIRED, SINGLE, ("!", "+", "-", "~")),
    },
    "union_specifier": {
        "body": (OPTIONAL, SINGLE, ("field_declaration_list",)),
        "name": (OPTIONAL, SINGLE, ("type_identifier",)),
    },
    "update_expression": {
        "argument": (REQUIRED, SINGLE, ("expression",)),
        "operator": (REQUIRED, SINGLE, ("++", "--")),
    },
    "while_statement": {
        "body": (REQUIRED, SINGLE, ("statement",)),
        "condition": (REQUIRED, SINGLE, ("parenthesized_expression",)),
    },
}

SUPERTYPES = {
    "expression": ("alignof_expression", "assignment_expression", "binary_expression", "call_expression",
                   "cast_expression", "char_literal", "compound_literal_expression", "concatenated_string",
                   "conditional_expression", "false", "field_expression", "generic_expression", "gnu_asm_expression",
                   "identifier", "null", "number_literal", "offsetof_expression", "parenthesized_expression",
                   "pointer_expression", "sizeof_expression", "string_literal", "subscript_expression", "true",
                   "unary_expression", "update_expression"),
    "statement": ("attributed_statement", "break_statement", "case_statement", "compound_statement",
                  "continue_statement", "do_statement", "expression_statement", "for_statement", "goto_statement",
                  "if_statement", "labeled_statement", "return_statement", "seh_leave_statement",
                  "seh_try_statement", "switch_statement", "while_statement"),
    "type_specifier": ("enum_specifier", "macro_type_specifier", "primitive_type", "sized_type_specifier",
                       "struct_specifier", "type_identifier", "union_specifier"),
}
