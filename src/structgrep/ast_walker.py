from typing import Callable, Iterator, List


class ASTWalker:
    """Utilities for traversing and searching a parsed tree"""

    @staticmethod
    def walk(node, callback: Callable[..., None]):
        """Perform a pre-order traversal of the subtree rooted at node"""
        for current in node.dfs():
            callback(current)

    @staticmethod
    def find_parent_of_type(node, type_name: str):
        """Find the nearest ancestor of a specific type"""
        current = node.parent()
        while current is not None:
            if current.kind() == type_name:
                return current
            current = current.parent()
        return None

    @staticmethod
    def find_first_by_type(node, type_name: str):
        """Find the first node of a specific type in pre-order, node included"""
        for current in node.dfs():
            if current.kind() == type_name:
                return current
        return None

    @staticmethod
    def find_all_by_type(node, type_name: str) -> List:
        """Find all nodes of a specific type in the subtree"""
        results = []

        def check(n):
            if n.kind() == type_name:
                results.append(n)

        ASTWalker.walk(node, check)
        return results

    @staticmethod
    def same_structure(a, b) -> bool:
        """Structural equality: same kinds everywhere and the same leaf text.

        Whitespace and the position in the source do not matter, so the two
        nodes may come from different places or even different trees.
        """
        pending = [(a, b)]
        while pending:
            left, right = pending.pop()
            if left.kind() != right.kind():
                return False
            left_children = left.children()
            right_children = right.children()
            if len(left_children) != len(right_children):
                return False
            if not left_children and left.text() != right.text():
                return False
            pending.extend(zip(left_children, right_children))
        return True

    @staticmethod
    def dump_lines(node, show_anonymous: bool = True) -> Iterator[str]:
        """Yield one indented line per node: field, kind, range and error text"""
        base = len(node.ancestors())
        for current in node.dfs():
            if not show_anonymous and not current.is_named():
                continue
            depth = len(current.ancestors()) - base
            start, end = current.range().start, current.range().end
            kind = current.kind() if current.is_named() else repr(current.kind())
            field = current.field_name()
            label = f"{field}: {kind}" if field else kind
            if current.is_missing():
                label = f"MISSING {label}"
            line = f"{'  ' * depth}{label} [{start.line}:{start.column} - {end.line}:{end.column}]"
            if current.kind() == "ERROR":
                line += f" ERROR TEXT: {current.text()!r}"
            yield line

    @staticmethod
    def dump(node, show_anonymous: bool = True) -> str:
        return "\n".join(ASTWalker.dump_lines(node, show_anonymous))
