from dataclasses import dataclass


@dataclass(frozen=True)
class Pos:
    """A position in the source. All values are zero-based.

    ``column`` and ``index`` count UTF-8 bytes; ``index`` is the absolute
    offset into the source buffer the tree was built from.
    """

    line: int
    column: int
    index: int


@dataclass(frozen=True)
class Range:
    start: Pos
    end: Pos


@dataclass(frozen=True)
class Edit:
    """Replace the bytes ``[start_pos, end_pos)`` of the original source."""

    start_pos: int
    end_pos: int
    inserted_text: str


@dataclass(frozen=True)
class NodeData:
    """One arena slot of a parsed tree.

    ``subtree_end`` is the exclusive id bound of the node's descendants:
    ids are assigned in pre-order, so the subtree is ``range(id, subtree_end)``.
    """

    kind: str
    is_named: bool
    is_missing: bool
    start: Pos
    end: Pos
    parent: int
    children: tuple[int, ...]
    field: str | None
    subtree_end: int
