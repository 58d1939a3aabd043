"""Tree and node handles.

A ``Root`` owns the immutable node arena produced by ``SourceParser``. A
``Node`` is a lightweight handle ``(root, id, env)``: it never copies text,
every attribute is read from the arena on demand.
"""

from bisect import bisect_left
from typing import Iterator, List, Optional

from . import edits, matcher
from .errors import FieldInvariantError
from .meta_var import MetaVarEnv
from .models import Edit, NodeData, Range
from .parser import ParseResult
from .rules import Follows, Has, Inside, Precedes

ANONYMOUS_FILENAME = "anonymous"


class Root:
    """A parsed source file"""

    def __init__(self, result: ParseResult, language, filename: str = ANONYMOUS_FILENAME):
        self._nodes = result.nodes
        self.source = result.source
        self.source_bytes = result.source_bytes
        self.language = language
        self.errors: List[str] = list(result.errors)
        self._filename = filename

    def root(self) -> "Node":
        return Node(self, 0)

    def filename(self) -> str:
        return self._filename

    def node_data(self, node_id: int) -> NodeData:
        return self._nodes[node_id]

    def slice(self, start: int, end: int) -> str:
        return self.source_bytes[start:end].decode("utf-8")

    def __repr__(self) -> str:
        return f"Root({self.language.name}, {self._filename!r}, nodes={len(self._nodes)})"


class Node:
    """Handle to one node of a ``Root``, optionally carrying the captures of a match"""

    __slots__ = ("_root", "_id", "_env")

    def __init__(self, root: Root, node_id: int, env: Optional[MetaVarEnv] = None):
        self._root = root
        self._id = node_id
        self._env = env

    @property
    def _data(self) -> NodeData:
        return self._root.node_data(self._id)

    def _node(self, node_id: int) -> "Node":
        return Node(self._root, node_id)

    # -- attributes -------------------------------------------------------

    def id(self) -> int:
        return self._id

    def kind(self) -> str:
        return self._data.kind

    def is_kind(self, kind: str) -> bool:
        """True for the kind itself and for any grammar subtype of it."""
        own = self._data.kind
        return own == kind or own in self._root.language.field_index.subtypes(kind)

    def is_leaf(self) -> bool:
        return not self._data.children

    def is_named(self) -> bool:
        return self._data.is_named

    def is_named_leaf(self) -> bool:
        return not any(self._root.node_data(child).is_named for child in self._data.children)

    def is_missing(self) -> bool:
        return self._data.is_missing

    def is_error(self) -> bool:
        return self._data.kind == "ERROR"

    def range(self) -> Range:
        data = self._data
        return Range(data.start, data.end)

    def text(self) -> str:
        data = self._data
        return self._root.slice(data.start.index, data.end.index)

    def field_name(self) -> Optional[str]:
        """The field this node fills in its parent, if any"""
        return self._data.field

    def get_root(self) -> Root:
        return self._root

    def language(self):
        return self._root.language

    # -- navigation -------------------------------------------------------

    def parent(self) -> Optional["Node"]:
        parent = self._data.parent
        return None if parent < 0 else self._node(parent)

    def child(self, nth: int) -> Optional["Node"]:
        children = self._data.children
        if 0 <= nth < len(children):
            return self._node(children[nth])
        return None

    def children(self) -> List["Node"]:
        return [self._node(child) for child in self._data.children]

    def ancestors(self) -> List["Node"]:
        result = []
        parent = self._data.parent
        while parent >= 0:
            result.append(self._node(parent))
            parent = self._root.node_data(parent).parent
        return result

    def _siblings(self) -> tuple[tuple[int, ...], int]:
        parent = self._data.parent
        if parent < 0:
            return (self._id,), 0
        siblings = self._root.node_data(parent).children
        # ids are pre-order, so sibling ids are sorted
        return siblings, bisect_left(siblings, self._id)

    def next(self) -> Optional["Node"]:
        siblings, index = self._siblings()
        return self._node(siblings[index + 1]) if index + 1 < len(siblings) else None

    def next_all(self) -> List["Node"]:
        siblings, index = self._siblings()
        return [self._node(sibling) for sibling in siblings[index + 1:]]

    def prev(self) -> Optional["Node"]:
        siblings, index = self._siblings()
        return self._node(siblings[index - 1]) if index > 0 else None

    def prev_all(self) -> List["Node"]:
        """Preceding siblings, nearest first"""
        siblings, index = self._siblings()
        return [self._node(sibling) for sibling in reversed(siblings[:index])]

    def field(self, name: str) -> Optional["Node"]:
        """The child filling field ``name``.

        Returns None for an unfilled optional field. A required field with no
        filler means the tree and the grammar disagree, which raises
        ``FieldInvariantError``.
        """
        tagged = self.field_children(name)
        if tagged:
            return tagged[0]
        descriptor = self._root.language.field_index.field_descriptor(self.kind(), name)
        if descriptor is not None and descriptor.required:
            raise FieldInvariantError(
                f"Required field '{name}' of {self.kind()} at line {self._data.start.line + 1} has no filler"
            )
        return None

    def field_children(self, name: str) -> List["Node"]:
        return [
            self._node(child) for child in self._data.children if self._root.node_data(child).field == name
        ]

    def dfs(self) -> Iterator["Node"]:
        """Pre-order traversal of the subtree, this node first"""
        for node_id in range(self._id, self._data.subtree_end):
            yield self._node(node_id)

    # -- matching ---------------------------------------------------------

    def _evaluate(self, rule) -> bool:
        return next(iter(rule.match_node_with_env(self, MetaVarEnv())), None) is not None

    def matches(self, rule) -> bool:
        return self._evaluate(matcher.to_matcher(rule, self._root.language))

    def inside(self, rule) -> bool:
        return self._evaluate(Inside(matcher.to_matcher(rule, self._root.language)))

    def has(self, rule) -> bool:
        return self._evaluate(Has(matcher.to_matcher(rule, self._root.language)))

    def precedes(self, rule) -> bool:
        return self._evaluate(Precedes(matcher.to_matcher(rule, self._root.language)))

    def follows(self, rule) -> bool:
        return self._evaluate(Follows(matcher.to_matcher(rule, self._root.language)))

    def find(self, rule) -> Optional["Node"]:
        return matcher.find(self, matcher.to_matcher(rule, self._root.language))

    def find_all(self, rule) -> "matcher.FindAll":
        return matcher.FindAll(self, matcher.to_matcher(rule, self._root.language))

    # -- captures ---------------------------------------------------------

    def get_env(self) -> MetaVarEnv:
        return self._env if self._env is not None else MetaVarEnv()

    def with_env(self, env: Optional[MetaVarEnv]) -> "Node":
        return Node(self._root, self._id, env)

    def get_match(self, name: str) -> Optional["Node"]:
        return self.get_env().get_match(name)

    def get_multiple_matches(self, name: str) -> List["Node"]:
        return self.get_env().get_multiple_matches(name)

    def get_transformed(self, name: str) -> Optional[str]:
        return self.get_env().get_transformed(name)

    # -- edits ------------------------------------------------------------

    def replace(self, text: str) -> Edit:
        data = self._data
        return Edit(start_pos=data.start.index, end_pos=data.end.index, inserted_text=text)

    def commit_edits(self, edit_list: List[Edit]) -> str:
        return edits.commit_edits(self, edit_list)

    # -- identity ---------------------------------------------------------

    def __eq__(self, other) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self._root is other._root and self._id == other._id

    def __hash__(self) -> int:
        return hash((id(self._root), self._id))

    def __repr__(self) -> str:
        start, end = self._data.start, self._data.end
        return f"Node({self.kind()} {start.line}:{start.column}-{end.line}:{end.column})"
