from pathlib import Path

from structgrep import Node

from .models import MatchReport


def node_to_match_report(
    node: Node,
    file_path: Path,
    replacement: str | None = None,
    rule_id: str | None = None,
    message: str | None = None,
) -> MatchReport:
    """Convert a matched node to an external Pydantic report, positions 1-based"""
    node_range = node.range()
    return MatchReport(
        file_path=str(file_path),
        line_number=node_range.start.line + 1,
        column=node_range.start.column + 1,
        end_line_number=node_range.end.line + 1,
        end_column=node_range.end.column + 1,
        text=node.text(),
        captures=node.get_env().to_text_dict(),
        replacement=replacement,
        rule_id=rule_id,
        message=message,
    )
