"""Planning and committing text edits against a parsed tree."""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from .errors import EditOverlapError, InvalidEditError, MissingFixError
from .matcher import FindAll, MatcherLike, to_matcher
from .models import Edit
from .replacer import replace_meta_var_in_string

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommitPlan:
    """Validated edits for one node, sorted by start offset"""

    start: int
    end: int
    edits: tuple[Edit, ...]


def plan_commit(node, edits: Sequence[Edit]) -> CommitPlan:
    """Sort and validate edits; raises before anything is applied."""
    node_range = node.range()
    start, end = node_range.start.index, node_range.end.index
    source = node.get_root().source_bytes
    # sorted() is stable, edits starting at the same offset keep their order
    ordered = sorted(edits, key=lambda e: e.start_pos)

    for edit in ordered:
        if edit.start_pos > edit.end_pos:
            raise InvalidEditError(f"Edit [{edit.start_pos}, {edit.end_pos}) has its end before its start")
        if edit.start_pos < start or edit.end_pos > end:
            raise InvalidEditError(
                f"Edit [{edit.start_pos}, {edit.end_pos}) lies outside the node range [{start}, {end})"
            )
        for offset in (edit.start_pos, edit.end_pos):
            if offset < len(source) and source[offset] & 0xC0 == 0x80:
                raise InvalidEditError(f"Edit offset {offset} falls inside a multi-byte UTF-8 character")
    for previous, current in zip(ordered, ordered[1:]):
        if previous.end_pos > current.start_pos:
            logger.warning("Rejecting commit: %s overlaps %s", previous, current)
            raise EditOverlapError(previous, current)

    return CommitPlan(start=start, end=end, edits=tuple(ordered))


def commit_edits(node, edits: Sequence[Edit]) -> str:
    """Apply edits to the node's text and return the rewritten text.

    For the root node this is the whole new source. Offsets are absolute
    byte offsets into the original source, as produced by ``Node.replace``.
    """
    plan = plan_commit(node, edits)
    source = node.get_root().source_bytes
    result = bytearray()
    cursor = plan.start
    for edit in plan.edits:
        result += source[cursor:edit.start_pos]
        result += edit.inserted_text.encode("utf-8")
        cursor = edit.end_pos
    result += source[cursor:plan.end]
    return result.decode("utf-8")


def plan_replacements(node, matcher: MatcherLike, template: Optional[str] = None) -> List[Edit]:
    """One edit per match, the template expanded with the match's captures.

    A match inside an already planned match is skipped, so the returned edits
    never overlap. Without ``template`` the matcher's own ``fix`` is used.
    """
    compiled = to_matcher(matcher, node.language())
    fix = template if template is not None else getattr(compiled, "fix", None)
    if fix is None:
        raise MissingFixError("No rewrite template given and the matcher has no fix")
    return edits_for_matches(FindAll(node, compiled), fix)


def edits_for_matches(matches: Iterable, template: str) -> List[Edit]:
    """Expand the template for each match in document order, skipping nested ones."""
    edits: List[Edit] = []
    last_end = -1
    for match in matches:
        match_range = match.range()
        if match_range.start.index < last_end:
            logger.debug("Skipping nested match at byte %d", match_range.start.index)
            continue
        edits.append(match.replace(replace_meta_var_in_string(template, match.get_env())))
        last_end = match_range.end.index
    return edits
