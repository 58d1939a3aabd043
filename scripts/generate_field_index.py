"""Generate a constant field table module from a grammar's node-types.json.

Usage:
    python scripts/generate_field_index.py path/to/node-types.json javascript > src/structgrep/fields/javascript.py
"""

import json
import sys
from pathlib import Path

from structgrep.fields import node_types_to_table

HEADER = """# Generated by scripts/generate_field_index.py from tree-sitter-{grammar} node-types.json.
# Do not edit by hand.

REQUIRED, OPTIONAL = True, False
SINGLE, MULTIPLE = False, True
"""


def render(node_types: list[dict], grammar: str) -> str:
    node_fields, supertypes = node_types_to_table(node_types)
    lines = [HEADER.format(grammar=grammar), "NODE_FIELDS = {"]
    for kind in sorted(node_fields):
        lines.append(f"    {kind!r}: {{")
        for name, (required, multiple, kinds) in node_fields[kind].items():
            flags = f"{'REQUIRED' if required else 'OPTIONAL'}, {'MULTIPLE' if multiple else 'SINGLE'}"
            lines.append(f"        {name!r}: ({flags}, {kinds!r}),")
        lines.append("    },")
    lines.append("}")
    lines.append("")
    lines.append("SUPERTYPES = {")
    for name in sorted(supertypes):
        lines.append(f"    {name!r}: {supertypes[name]!r},")
    lines.append("}")
    return "\n".join(lines) + "\n"


def main(argv: list[str]) -> int:
    if len(argv) != 3:
        print(__doc__, file=sys.stderr)
        return 2
    node_types = json.loads(Path(argv[1]).read_text(encoding="utf-8"))
    sys.stdout.write(render(node_types, argv[2]))
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
