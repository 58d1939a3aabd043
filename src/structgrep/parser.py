import logging
from dataclasses import dataclass
from typing import List

from tree_sitter import Parser, Tree

from .errors import ParseError
from .models import NodeData, Pos

logger = logging.getLogger(__name__)


@dataclass
class ParseResult:
    """Result of a tree-sitter parse, flattened into a pre-order node arena"""

    nodes: tuple[NodeData, ...]
    source: str
    source_bytes: bytes
    errors: List[str]


class _Slot:
    """Mutable record used while the arena is being built."""

    __slots__ = ("node", "parent", "field", "children", "subtree_end")

    def __init__(self, node, parent: int, field):
        self.node = node
        self.parent = parent
        self.field = field
        self.children: list[int] = []
        self.subtree_end = 0


def end_position(source_bytes: bytes) -> Pos:
    """Position just past the last byte of the buffer."""
    line = source_bytes.count(b"\n")
    column = len(source_bytes) - (source_bytes.rfind(b"\n") + 1)
    return Pos(line, column, len(source_bytes))


def _pos(point, index: int) -> Pos:
    return Pos(point.row, point.column, index)


class SourceParser:
    """Parses source text with one tree-sitter grammar"""

    def __init__(self, ts_language):
        self.ts_language = ts_language

    def parse(self, source: str) -> ParseResult:
        source_bytes = source.encode("utf-8")
        # Parser objects are stateful, one per parse keeps trees independent
        tree = Parser(self.ts_language).parse(source_bytes)
        if tree is None:
            raise ParseError("tree-sitter returned no tree")
        nodes, errors = self._build_arena(tree, source_bytes)
        return ParseResult(nodes=nodes, source=source, source_bytes=source_bytes, errors=errors)

    def _build_arena(self, tree: Tree, source_bytes: bytes) -> tuple[tuple[NodeData, ...], List[str]]:
        slots: list[_Slot] = []
        errors: List[str] = []
        path: list[int] = []
        cursor = tree.walk()

        while True:
            node = cursor.node
            node_id = len(slots)
            parent = path[-1] if path else -1
            slots.append(_Slot(node, parent, cursor.field_name))
            if parent >= 0:
                slots[parent].children.append(node_id)
            if node.type == "ERROR":
                errors.append(f"Syntax error at line {node.start_point.row + 1}, column {node.start_point.column + 1}")
            elif node.is_missing:
                errors.append(
                    f"Missing '{node.type}' at line {node.start_point.row + 1}, column {node.start_point.column + 1}"
                )

            if cursor.goto_first_child():
                path.append(node_id)
                continue

            slots[node_id].subtree_end = node_id + 1
            while not cursor.goto_next_sibling():
                if not cursor.goto_parent():
                    return self._freeze(slots, source_bytes), errors
                closed = path.pop()
                slots[closed].subtree_end = len(slots)

    @staticmethod
    def _freeze(slots: list[_Slot], source_bytes: bytes) -> tuple[NodeData, ...]:
        nodes = []
        for node_id, slot in enumerate(slots):
            node = slot.node
            if node_id == 0:
                # The root always covers the whole buffer, leading and trailing trivia included
                start, end = Pos(0, 0, 0), end_position(source_bytes)
            else:
                start = _pos(node.start_point, node.start_byte)
                end = _pos(node.end_point, node.end_byte)
            nodes.append(
                NodeData(
                    kind=node.type,
                    is_named=node.is_named,
                    is_missing=node.is_missing,
                    start=start,
                    end=end,
                    parent=slot.parent,
                    children=tuple(slot.children),
                    field=slot.field,
                    subtree_end=slot.subtree_end,
                )
            )
        logger.debug("Built node arena with %d nodes", len(nodes))
        return tuple(nodes)
