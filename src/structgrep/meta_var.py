"""Meta variables and the environment that holds their bindings."""

import re
from dataclasses import dataclass
from typing import Optional, Sequence

from .ast_walker import ASTWalker

META_VAR_NAME = re.compile(r"[A-Z0-9_]+")


@dataclass(frozen=True)
class MetaVariable:
    """A placeholder found in pattern text.

    ``name`` is None for non-capturing placeholders (``$_``, ``$$$``,
    ``$_FOO``): they still constrain the shape but bind nothing.
    """

    name: Optional[str]
    multi: bool

    @property
    def capturing(self) -> bool:
        return self.name is not None


def extract_meta_var(text: str, meta_char: str = "$") -> Optional[MetaVariable]:
    """Return the meta variable spelled by ``text``, or None for ordinary text."""
    ellipsis = meta_char * 3
    if text == ellipsis:
        return MetaVariable(None, multi=True)
    if text.startswith(ellipsis):
        name, multi = text[len(ellipsis):], True
    elif text.startswith(meta_char):
        name, multi = text[len(meta_char):], False
    else:
        return None
    if not META_VAR_NAME.fullmatch(name):
        return None
    if name.startswith("_"):
        return MetaVariable(None, multi=multi)
    return MetaVariable(name, multi=multi)


class MetaVarEnv:
    """Immutable capture environment.

    Every binding operation returns a new environment (or None when the new
    binding contradicts an existing one), so one environment can be shared by
    several backtracking branches.
    """

    __slots__ = ("_single", "_multi", "_transformed")

    def __init__(self, single=None, multi=None, transformed=None):
        self._single: dict = dict(single or {})
        self._multi: dict = dict(multi or {})
        self._transformed: dict[str, str] = dict(transformed or {})

    def _copy(self) -> "MetaVarEnv":
        return MetaVarEnv(self._single, self._multi, self._transformed)

    def bind(self, name: str, node) -> Optional["MetaVarEnv"]:
        existing = self._single.get(name)
        if existing is not None:
            return self if ASTWalker.same_structure(existing, node) else None
        if name in self._multi:
            return None
        env = self._copy()
        env._single[name] = node
        return env

    def bind_multi(self, name: str, nodes: Sequence) -> Optional["MetaVarEnv"]:
        nodes = tuple(nodes)
        existing = self._multi.get(name)
        if existing is not None:
            if len(existing) != len(nodes):
                return None
            if all(ASTWalker.same_structure(a, b) for a, b in zip(existing, nodes)):
                return self
            return None
        if name in self._single:
            return None
        env = self._copy()
        env._multi[name] = nodes
        return env

    def with_transformed(self, name: str, text: str) -> "MetaVarEnv":
        env = self._copy()
        env._transformed[name] = text
        return env

    def merge(self, other: "MetaVarEnv") -> Optional["MetaVarEnv"]:
        """Combine two environments; None if they disagree on a shared name."""
        env: Optional[MetaVarEnv] = self
        for name, node in other._single.items():
            env = env.bind(name, node)
            if env is None:
                return None
        for name, nodes in other._multi.items():
            env = env.bind_multi(name, nodes)
            if env is None:
                return None
        for name, text in other._transformed.items():
            current = env._transformed.get(name)
            if current is None:
                env = env.with_transformed(name, text)
            elif current != text:
                return None
        return env

    def lookup(self, name: str):
        """The bound node, the bound run (a tuple) or None."""
        if name in self._single:
            return self._single[name]
        return self._multi.get(name)

    def get_match(self, name: str):
        return self._single.get(name)

    def get_multiple_matches(self, name: str) -> list:
        """Named nodes of a multi capture; separators such as ``,`` are dropped."""
        return [node for node in self._multi.get(name, ()) if node.is_named()]

    def get_transformed(self, name: str) -> Optional[str]:
        return self._transformed.get(name)

    def get_text(self, name: str) -> Optional[str]:
        """Text for ``name``: transformed value, single capture, then multi capture.

        A multi capture yields the source slice from its first to its last
        node, separators included.
        """
        if name in self._transformed:
            return self._transformed[name]
        if name in self._single:
            return self._single[name].text()
        if name in self._multi:
            nodes = self._multi[name]
            if not nodes:
                return ""
            root = nodes[0].get_root()
            return root.slice(nodes[0].range().start.index, nodes[-1].range().end.index)
        return None

    def to_text_dict(self) -> dict:
        """Plain snapshot: names to text (multi captures become lists of texts)."""
        result: dict = {name: node.text() for name, node in self._single.items()}
        for name in self._multi:
            result[name] = [node.text() for node in self.get_multiple_matches(name)]
        result.update(self._transformed)
        return result

    def __contains__(self, name: str) -> bool:
        return name in self._single or name in self._multi or name in self._transformed

    def __eq__(self, other) -> bool:
        if not isinstance(other, MetaVarEnv):
            return NotImplemented
        return (
            self._single == other._single
            and self._multi == other._multi
            and self._transformed == other._transformed
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"MetaVarEnv({self.to_text_dict()!r})"
