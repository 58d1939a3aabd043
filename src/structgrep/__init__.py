from .ast_walker import ASTWalker
from .edits import CommitPlan, commit_edits, edits_for_matches, plan_commit, plan_replacements
from .errors import (
    EditOverlapError,
    FieldInvariantError,
    InvalidEditError,
    MissingFixError,
    ParseError,
    PatternError,
    RuleCompileError,
    StructGrepError,
    UnknownLanguageError,
)
from .fields import FieldDescriptor, FieldIndex
from .language import Language, c, get_language, js, language_for_path, register_language
from .matcher import FindAll, find, to_matcher
from .meta_var import MetaVarEnv, MetaVariable, extract_meta_var
from .models import Edit, Pos, Range
from .node import Node, Root
from .pattern import Pattern, PatternNode
from .replacer import replace_meta_var_in_string
from .rule_config import RuleConfig, RuleCore, SerializableRule, compile_rule_config
from .rules import (
    All,
    Any,
    Follows,
    Has,
    Inside,
    Kind,
    NamedRef,
    Not,
    PatternMatch,
    Precedes,
    Regex,
    RuleRegistry,
    StopBy,
)

__version__ = "0.1.0"


def parse(language_name: str, source: str, filename: str = "anonymous") -> Root:
    """Parse ``source`` with the named language"""
    return get_language(language_name).parse(source, filename)


__all__ = [
    "ASTWalker",
    "All",
    "Any",
    "CommitPlan",
    "Edit",
    "EditOverlapError",
    "FieldDescriptor",
    "FieldIndex",
    "FieldInvariantError",
    "FindAll",
    "Follows",
    "Has",
    "Inside",
    "InvalidEditError",
    "Kind",
    "Language",
    "MissingFixError",
    "MetaVarEnv",
    "MetaVariable",
    "NamedRef",
    "Node",
    "Not",
    "ParseError",
    "Pattern",
    "PatternError",
    "PatternMatch",
    "PatternNode",
    "Pos",
    "Precedes",
    "Range",
    "Regex",
    "Root",
    "RuleCompileError",
    "RuleConfig",
    "RuleCore",
    "RuleRegistry",
    "SerializableRule",
    "StopBy",
    "StructGrepError",
    "UnknownLanguageError",
    "c",
    "commit_edits",
    "compile_rule_config",
    "edits_for_matches",
    "extract_meta_var",
    "find",
    "get_language",
    "js",
    "language_for_path",
    "parse",
    "plan_commit",
    "plan_replacements",
    "register_language",
    "replace_meta_var_in_string",
    "to_matcher",
]
