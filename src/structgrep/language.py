"""Grammar registry.

A ``Language`` bundles a tree-sitter grammar with its generated field table
and the lexical settings for meta variables in patterns.
"""

import logging
from pathlib import PurePath
from typing import Dict, Iterable, Mapping, Optional

import tree_sitter_c as tsc
import tree_sitter_javascript as tsjs
from tree_sitter import Language as TSLanguage

from .errors import RuleCompileError, UnknownLanguageError
from .fields import FieldIndex
from .fields import c as c_fields
from .fields import javascript as js_fields
from .meta_var import MetaVariable, extract_meta_var
from .node import ANONYMOUS_FILENAME, Root
from .parser import SourceParser
from .pattern import Pattern
from .rules import Kind

logger = logging.getLogger(__name__)


class Language:
    """A tree-sitter grammar plus everything the matcher needs to know about it"""

    def __init__(
        self,
        name: str,
        ts_language: TSLanguage,
        field_index: FieldIndex,
        extensions: Iterable[str] = (),
        meta_var_char: str = "$",
        expando_char: Optional[str] = None,
    ):
        self.name = name
        self.ts_language = ts_language
        self.field_index = field_index
        self.extensions = tuple(extensions)
        self.meta_var_char = meta_var_char
        # grammars that cannot lex `$` inside identifiers get a substitute char
        self.expando_char = expando_char or meta_var_char
        self._parser = SourceParser(ts_language)

    def parse(self, source: str, filename: str = ANONYMOUS_FILENAME) -> Root:
        result = self._parser.parse(source)
        if result.errors:
            logger.debug("%s: %d parse errors in %s", self.name, len(result.errors), filename)
        return Root(result, self, filename)

    def pattern(self, src: str, selector: Optional[str] = None) -> Pattern:
        return Pattern.compile(src, self, selector=selector)

    def pre_process_pattern(self, src: str) -> str:
        if self.expando_char == self.meta_var_char:
            return src
        return src.replace(self.meta_var_char, self.expando_char)

    def extract_meta_var(self, text: str) -> Optional[MetaVariable]:
        return extract_meta_var(text, self.expando_char)

    def is_valid_kind(self, kind: str) -> bool:
        if kind == "ERROR" or self.field_index.subtypes(kind):
            return True
        return bool(self.ts_language.id_for_node_kind(kind, True) or self.ts_language.id_for_node_kind(kind, False))

    def is_valid_field(self, field_name: str) -> bool:
        return bool(self.ts_language.field_id_for_name(field_name))

    def kind(self, kind: str) -> Kind:
        """A ``Kind`` rule; supertypes such as ``expression`` match all their subtypes"""
        if not self.is_valid_kind(kind):
            raise RuleCompileError(f"Unknown kind '{kind}' for language {self.name}")
        return Kind(kind, self.field_index.subtypes(kind))

    def __repr__(self) -> str:
        return f"Language({self.name!r})"


_LANGUAGES: Dict[str, Language] = {}
_ALIASES: Dict[str, str] = {}


def register_language(language: Language, aliases: Iterable[str] = ()) -> Language:
    _LANGUAGES[language.name] = language
    for alias in (language.name, *aliases):
        _ALIASES[alias.lower()] = language.name
    return language


def get_language(name: str) -> Language:
    try:
        return _LANGUAGES[_ALIASES[name.lower()]]
    except KeyError:
        raise UnknownLanguageError(
            f"Unknown language '{name}'. Available: {', '.join(sorted(_ALIASES))}"
        ) from None


def language_for_path(path, extensions: Optional[Mapping[str, str]] = None) -> Language:
    """Pick a language by file extension, configured mappings first"""
    suffix = PurePath(path).suffix.lower()
    for key, name in (extensions or {}).items():
        if suffix == "." + key.lower().lstrip("."):
            return get_language(name)
    for language in _LANGUAGES.values():
        if suffix in language.extensions:
            return language
    raise UnknownLanguageError(f"No language registered for extension '{suffix}' ({path})")


js = register_language(
    Language(
        "javascript",
        TSLanguage(tsjs.language()),
        FieldIndex.from_table(js_fields.NODE_FIELDS, js_fields.SUPERTYPES),
        extensions=(".js", ".mjs", ".cjs", ".jsx"),
    ),
    aliases=("js", "jsx"),
)

c = register_language(
    Language(
        "c",
        TSLanguage(tsc.language()),
        FieldIndex.from_table(c_fields.NODE_FIELDS, c_fields.SUPERTYPES),
        extensions=(".c", ".h"),
        expando_char="µ",
    ),
)
