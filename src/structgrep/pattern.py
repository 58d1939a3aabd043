"""Compile pattern source into a matchable tree.

A pattern is ordinary source code of the target language in which any node
whose whole text is a meta variable (``$A``, ``$$$ARGS``, ``$_``) becomes a
placeholder. The pattern is parsed with the target grammar, so it must be
syntactically valid on its own, or inside a ``context`` snippet from which a
``selector`` kind is picked.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Optional

from .ast_walker import ASTWalker
from .errors import PatternError
from .match_tree import match_node
from .meta_var import MetaVarEnv, MetaVariable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PatternNode:
    kind: str
    is_named: bool
    text: str
    field: Optional[str]
    children: tuple["PatternNode", ...] = ()
    meta_var: Optional[MetaVariable] = None

    def is_leaf(self) -> bool:
        return not self.children

    def iter_meta_vars(self) -> Iterator[MetaVariable]:
        pending = [self]
        while pending:
            node = pending.pop()
            if node.meta_var is not None:
                yield node.meta_var
            pending.extend(reversed(node.children))


class Pattern:
    """A compiled pattern; usable anywhere a matcher is expected"""

    def __init__(self, root: PatternNode, source: str, language, selector: Optional[str] = None):
        self.root = root
        self.source = source
        self.language = language
        self.selector = selector

    @classmethod
    def compile(cls, src: str, language, selector: Optional[str] = None) -> "Pattern":
        processed = language.pre_process_pattern(src)
        tree = language.parse(processed)
        cls._check_syntax(tree, src, processed, language)

        if selector is not None:
            node = ASTWalker.find_first_by_type(tree.root(), selector)
            if node is None:
                raise PatternError(f"Selector {selector!r} not found in pattern context {src!r}")
        else:
            node = cls._strip_root(tree.root(), src)

        root = cls._convert(node, language, is_root=True)
        cls._check_meta_vars(root, src)
        logger.debug("Compiled pattern %r to root kind %s", src, root.kind)
        return cls(root, src, language, selector)

    @staticmethod
    def _check_syntax(tree, src: str, processed: str, language):
        """Reject parse errors; a `;` missing after the last token is allowed"""
        end = len(processed.rstrip().encode("utf-8"))
        for node in tree.root().dfs():
            if node.is_missing() and node.kind() == ";" and node.range().start.index >= end:
                continue
            if node.is_error() or node.is_missing():
                raise PatternError(f"Pattern {src!r} is not valid {language.name}: {'; '.join(tree.errors)}")

    @staticmethod
    def _children(node) -> list:
        return [child for child in node.children() if not child.is_missing()]

    @classmethod
    def _strip_root(cls, root, src: str):
        children = cls._children(root)
        if not children:
            raise PatternError(f"Pattern {src!r} is empty")
        if len(children) > 1:
            raise PatternError(f"Pattern {src!r} has {len(children)} top-level nodes, expected exactly one")
        node = children[0]
        while len(cls._children(node)) == 1:
            node = cls._children(node)[0]
        return node

    @classmethod
    def _convert(cls, node, language, is_root: bool = False) -> PatternNode:
        text = node.text()
        field = None if is_root else node.field_name()
        meta_var = language.extract_meta_var(text.strip())
        if meta_var is not None:
            return PatternNode(node.kind(), node.is_named(), text, field, meta_var=meta_var)
        children = tuple(cls._convert(child, language) for child in cls._children(node))
        return PatternNode(node.kind(), node.is_named(), text, field, children)

    @staticmethod
    def _check_meta_vars(root: PatternNode, src: str):
        seen: dict[str, bool] = {}
        for meta_var in root.iter_meta_vars():
            if meta_var.name is None:
                continue
            previous = seen.setdefault(meta_var.name, meta_var.multi)
            if previous != meta_var.multi:
                raise PatternError(f"Meta variable {meta_var.name!r} is used both as single and multi in {src!r}")

    def defined_vars(self) -> set[str]:
        return {mv.name for mv in self.root.iter_meta_vars() if mv.name is not None}

    def potential_kinds(self) -> Optional[frozenset[str]]:
        if self.root.meta_var is not None:
            return None
        return frozenset((self.root.kind,))

    def match_node_with_env(self, node, env: MetaVarEnv) -> Iterator[MetaVarEnv]:
        return match_node(self.root, node, env)

    def __repr__(self) -> str:
        return f"Pattern({self.source!r})"
