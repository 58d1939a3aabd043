"""Search entry points shared by ``Node.find`` and ``Node.find_all``."""

import logging
from functools import lru_cache
from typing import Iterator, Optional, Union

from .meta_var import MetaVarEnv
from .pattern import Pattern
from .rule_config import RuleConfig, compile_rule_config
from .rules import Matcher

logger = logging.getLogger(__name__)

MatcherLike = Union[str, dict, RuleConfig, Matcher]


@lru_cache(maxsize=256)
def _cached_pattern(src: str, language) -> Pattern:
    return Pattern.compile(src, language)


def to_matcher(matcher: MatcherLike, language) -> Matcher:
    """Accept a pattern string, a rule config (dict or model) or any matcher object"""
    if isinstance(matcher, str):
        return _cached_pattern(matcher, language)
    if isinstance(matcher, RuleConfig):
        return compile_rule_config(matcher, language)
    if isinstance(matcher, dict):
        # a bare rule object is accepted as shorthand for {"rule": ...}
        config = matcher if "rule" in matcher else {"rule": matcher}
        return compile_rule_config(config, language)
    if hasattr(matcher, "match_node_with_env"):
        return matcher
    raise TypeError(f"Cannot use {type(matcher).__name__} as a matcher")


def _potential_kinds(matcher) -> Optional[frozenset[str]]:
    potential_kinds = getattr(matcher, "potential_kinds", None)
    return None if potential_kinds is None else potential_kinds()


def _skip(kinds: Optional[frozenset[str]], node) -> bool:
    return kinds is not None and node.kind() not in kinds


def match_at(matcher: Matcher, node, env: Optional[MetaVarEnv] = None):
    """The node carrying its first match environment, or None"""
    found = next(iter(matcher.match_node_with_env(node, env or MetaVarEnv())), None)
    return None if found is None else node.with_env(found)


def find(node, matcher: Matcher):
    """First match in pre-order over the subtree, the node itself included"""
    kinds = _potential_kinds(matcher)
    for candidate in node.dfs():
        if _skip(kinds, candidate):
            continue
        matched = match_at(matcher, candidate)
        if matched is not None:
            return matched
    return None


class FindAll:
    """Every match in the subtree, lazily and in document order.

    Each ``iter()`` starts a new search, so the result can be walked more
    than once. Start offsets strictly increase: a nested match that starts
    where an already reported match starts is dropped, the outer one wins.
    Nested matches starting later are still reported.
    """

    def __init__(self, node, matcher: Matcher):
        self.node = node
        self.matcher = matcher

    def __iter__(self) -> Iterator:
        return self._search()

    def _search(self) -> Iterator:
        kinds = _potential_kinds(self.matcher)
        last_start = -1
        for candidate in self.node.dfs():
            if _skip(kinds, candidate):
                continue
            start = candidate.range().start.index
            # pre-order never moves the start backwards
            if start == last_start:
                continue
            matched = match_at(self.matcher, candidate)
            if matched is not None:
                last_start = start
                yield matched

    def first(self):
        return next(iter(self), None)
