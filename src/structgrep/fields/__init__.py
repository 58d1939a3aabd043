"""Static per-grammar field metadata.

Tables are generated from a grammar's ``node-types.json`` (see
``scripts/generate_field_index.py``) and shipped as constant modules, one per
grammar. A table maps ``kind -> field -> (required, multiple, kinds)``.
"""

from dataclasses import dataclass
from typing import Iterable, Mapping


@dataclass(frozen=True)
class FieldDescriptor:
    required: bool
    multiple: bool
    possible_kinds: frozenset[str]


class FieldIndex:
    """Read-only lookup of (node kind, field name) -> FieldDescriptor."""

    def __init__(
        self,
        fields: Mapping[str, Mapping[str, FieldDescriptor]],
        supertypes: Mapping[str, frozenset[str]] | None = None,
    ):
        self._fields = {kind: dict(entries) for kind, entries in fields.items()}
        self._supertypes = dict(supertypes or {})
        self._field_names = frozenset(name for entries in self._fields.values() for name in entries)

    @classmethod
    def from_table(cls, node_fields: Mapping, supertypes: Mapping | None = None) -> "FieldIndex":
        """Build an index from the tuple-based constant tables in this package."""
        fields = {
            kind: {
                name: FieldDescriptor(required=required, multiple=multiple, possible_kinds=frozenset(kinds))
                for name, (required, multiple, kinds) in entries.items()
            }
            for kind, entries in node_fields.items()
        }
        return cls(fields, {name: frozenset(subs) for name, subs in (supertypes or {}).items()})

    @classmethod
    def from_node_types(cls, node_types: Iterable[dict]) -> "FieldIndex":
        """Build an index from the parsed content of a ``node-types.json`` file."""
        return cls.from_table(*node_types_to_table(node_types))

    def field_descriptor(self, kind: str, field_name: str) -> FieldDescriptor | None:
        """Return the descriptor, or None if the field never applies to ``kind``."""
        return self._fields.get(kind, {}).get(field_name)

    def required_fields(self, kind: str) -> list[str]:
        return [name for name, desc in self._fields.get(kind, {}).items() if desc.required]

    def knows_field(self, field_name: str) -> bool:
        return field_name in self._field_names

    def subtypes(self, supertype: str) -> frozenset[str]:
        """Concrete kinds reachable from a supertype, expanded transitively."""
        seen: set[str] = set()
        pending = [supertype]
        while pending:
            name = pending.pop()
            for sub in self._supertypes.get(name, ()):
                if sub not in seen:
                    seen.add(sub)
                    pending.append(sub)
        return frozenset(seen)

    def permits(self, descriptor: FieldDescriptor, kind: str) -> bool:
        """Whether a node of ``kind`` may fill a field with this descriptor."""
        if kind in descriptor.possible_kinds:
            return True
        return any(kind in self.subtypes(name) for name in descriptor.possible_kinds if name in self._supertypes)

    def __contains__(self, kind: str) -> bool:
        return kind in self._fields


def node_types_to_table(node_types: Iterable[dict]) -> tuple[dict, dict]:
    """Convert ``node-types.json`` entries into (node_fields, supertypes) tables."""
    node_fields: dict[str, dict[str, tuple[bool, bool, tuple[str, ...]]]] = {}
    supertypes: dict[str, tuple[str, ...]] = {}
    for entry in node_types:
        kind = entry["type"]
        if "subtypes" in entry:
            supertypes[kind] = tuple(sorted(sub["type"] for sub in entry["subtypes"]))
        fields = entry.get("fields") or {}
        if not fields:
            continue
        node_fields[kind] = {
            name: (
                bool(info.get("required")),
                bool(info.get("multiple")),
                tuple(sorted(t["type"] for t in info.get("types", []))),
            )
            for name, info in sorted(fields.items())
        }
    return node_fields, supertypes
