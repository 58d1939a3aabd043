"""Composable matching rules.

Rules are frozen dataclasses. Evaluation goes through one dispatch table
keyed by the rule type; every evaluator is a generator of environments, the
same protocol patterns use, so patterns, rules and compiled rule configs can
be nested freely.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, Iterator, Optional, Protocol

from .errors import RuleCompileError
from .meta_var import MetaVarEnv

logger = logging.getLogger(__name__)


class Matcher(Protocol):
    def match_node_with_env(self, node, env: MetaVarEnv) -> Iterator[MetaVarEnv]: ...

    def potential_kinds(self) -> Optional[frozenset[str]]: ...


class Rule:
    """Base class of all rule variants"""

    def match_node_with_env(self, node, env: MetaVarEnv) -> Iterator[MetaVarEnv]:
        return _DISPATCH[type(self)](self, node, env)

    def potential_kinds(self) -> Optional[frozenset[str]]:
        return None


@dataclass(frozen=True)
class StopBy:
    """How far a relational rule walks: one step, to the end, or up to a rule"""

    mode: str = "end"
    rule: Optional[Matcher] = None

    NEIGHBOR = "neighbor"
    END = "end"
    RULE = "rule"

    @classmethod
    def neighbor(cls) -> "StopBy":
        return cls(cls.NEIGHBOR)

    @classmethod
    def end(cls) -> "StopBy":
        return cls(cls.END)

    @classmethod
    def until(cls, rule: Matcher) -> "StopBy":
        return cls(cls.RULE, rule)

    def stops_at(self, node, env: MetaVarEnv) -> bool:
        if self.mode != self.RULE:
            return False
        return next(iter(self.rule.match_node_with_env(node, env)), None) is not None


@dataclass(frozen=True)
class Kind(Rule):
    kind: str
    subtypes: frozenset[str] = frozenset()

    def potential_kinds(self) -> Optional[frozenset[str]]:
        return frozenset((self.kind,)) | self.subtypes


@dataclass(frozen=True)
class PatternMatch(Rule):
    pattern: Matcher

    def potential_kinds(self) -> Optional[frozenset[str]]:
        return self.pattern.potential_kinds()


@dataclass(frozen=True)
class Regex(Rule):
    regex: re.Pattern


@dataclass(frozen=True)
class All(Rule):
    rules: tuple

    def potential_kinds(self) -> Optional[frozenset[str]]:
        result = None
        for rule in self.rules:
            kinds = rule.potential_kinds()
            if kinds is not None:
                result = kinds if result is None else result & kinds
        return result


@dataclass(frozen=True)
class Any(Rule):
    rules: tuple

    def potential_kinds(self) -> Optional[frozenset[str]]:
        result: frozenset[str] = frozenset()
        for rule in self.rules:
            kinds = rule.potential_kinds()
            if kinds is None:
                return None
            result |= kinds
        return result


@dataclass(frozen=True)
class Not(Rule):
    rule: Matcher


@dataclass(frozen=True)
class Inside(Rule):
    rule: Matcher
    stop_by: StopBy = field(default_factory=StopBy.end)
    field: Optional[str] = None


@dataclass(frozen=True)
class Has(Rule):
    rule: Matcher
    stop_by: StopBy = field(default_factory=StopBy.end)
    field: Optional[str] = None


@dataclass(frozen=True)
class Precedes(Rule):
    rule: Matcher
    stop_by: StopBy = field(default_factory=StopBy.end)


@dataclass(frozen=True)
class Follows(Rule):
    rule: Matcher
    stop_by: StopBy = field(default_factory=StopBy.end)


@dataclass(frozen=True)
class NamedRef(Rule):
    name: str
    registry: "RuleRegistry" = field(compare=False, repr=False)


class RuleRegistry:
    """Named rules that ``NamedRef`` can point at"""

    def __init__(self):
        self._rules: Dict[str, Matcher] = {}
        self._references: Dict[str, frozenset[str]] = {}

    def register(self, name: str, rule: Matcher, references: Iterable[str] = ()):
        self._rules[name] = rule
        self._references[name] = frozenset(references)

    def get(self, name: str) -> Matcher:
        try:
            return self._rules[name]
        except KeyError:
            raise RuleCompileError(f"Rule '{name}' is not defined") from None

    def validate(self, extra_references: Iterable[str] = ()):
        """Reject references to undefined rules and reference cycles."""
        for name in extra_references:
            if name not in self._rules:
                raise RuleCompileError(f"Rule '{name}' is not defined")
        for name, refs in self._references.items():
            for ref in refs:
                if ref not in self._rules:
                    raise RuleCompileError(f"Rule '{ref}' used by '{name}' is not defined")

        done: set[str] = set()
        for start in self._references:
            if start in done:
                continue
            # iterative DFS keeping the current path for the error message
            path = [start]
            on_path = {start}
            stack = [iter(sorted(self._references[start]))]
            while stack:
                ref = next(stack[-1], None)
                if ref is None:
                    stack.pop()
                    finished = path.pop()
                    on_path.discard(finished)
                    done.add(finished)
                    continue
                if ref in on_path:
                    cycle = path[path.index(ref):] + [ref]
                    raise RuleCompileError(f"Cyclic rule reference: {' -> '.join(cycle)}")
                if ref in done:
                    continue
                path.append(ref)
                on_path.add(ref)
                stack.append(iter(sorted(self._references[ref])))


# -- evaluators -------------------------------------------------------------


def _first(rule: Matcher, node, env: MetaVarEnv) -> Optional[MetaVarEnv]:
    return next(iter(rule.match_node_with_env(node, env)), None)


def _match_kind(rule: Kind, node, env: MetaVarEnv) -> Iterator[MetaVarEnv]:
    if node.kind() == rule.kind or node.kind() in rule.subtypes:
        yield env


def _match_pattern(rule: PatternMatch, node, env: MetaVarEnv) -> Iterator[MetaVarEnv]:
    yield from rule.pattern.match_node_with_env(node, env)


def _match_regex(rule: Regex, node, env: MetaVarEnv) -> Iterator[MetaVarEnv]:
    if rule.regex.search(node.text()):
        yield env


def _match_all(rule: All, node, env: MetaVarEnv) -> Iterator[MetaVarEnv]:
    def thread(index: int, current: MetaVarEnv) -> Iterator[MetaVarEnv]:
        if index == len(rule.rules):
            yield current
            return
        for matched in rule.rules[index].match_node_with_env(node, current):
            yield from thread(index + 1, matched)

    yield from thread(0, env)


def _match_any(rule: Any, node, env: MetaVarEnv) -> Iterator[MetaVarEnv]:
    for sub in rule.rules:
        results = iter(sub.match_node_with_env(node, env))
        first = next(results, None)
        if first is not None:
            yield first
            yield from results
            return


def _match_not(rule: Not, node, env: MetaVarEnv) -> Iterator[MetaVarEnv]:
    if _first(rule.rule, node, env) is None:
        yield env


def _walk(candidates: Iterable, stop_by: StopBy, env: MetaVarEnv) -> Iterator:
    """Apply the stop condition to a root-ward or sibling-wise walk."""
    for candidate in candidates:
        yield candidate
        if stop_by.mode == StopBy.NEIGHBOR or stop_by.stops_at(candidate, env):
            return


def _inside_candidates(node, rule: Inside) -> Iterator:
    previous = node
    for ancestor in node.ancestors():
        if rule.field is None or previous.field_name() == rule.field:
            yield ancestor
        elif rule.stop_by.mode == StopBy.NEIGHBOR:
            return
        previous = ancestor


def _match_inside(rule: Inside, node, env: MetaVarEnv) -> Iterator[MetaVarEnv]:
    for ancestor in _walk(_inside_candidates(node, rule), rule.stop_by, env):
        yield from rule.rule.match_node_with_env(ancestor, env)


def _has_candidates(node, rule: Has, env: MetaVarEnv) -> Iterator:
    roots = node.field_children(rule.field) if rule.field is not None else node.children()
    if rule.stop_by.mode == StopBy.NEIGHBOR:
        yield from roots
        return
    stack = list(reversed(roots))
    while stack:
        current = stack.pop()
        yield current
        if rule.stop_by.stops_at(current, env):
            continue
        stack.extend(reversed(current.children()))


def _match_has(rule: Has, node, env: MetaVarEnv) -> Iterator[MetaVarEnv]:
    for descendant in _has_candidates(node, rule, env):
        yield from rule.rule.match_node_with_env(descendant, env)


def _match_precedes(rule: Precedes, node, env: MetaVarEnv) -> Iterator[MetaVarEnv]:
    for sibling in _walk(node.next_all(), rule.stop_by, env):
        yield from rule.rule.match_node_with_env(sibling, env)


def _match_follows(rule: Follows, node, env: MetaVarEnv) -> Iterator[MetaVarEnv]:
    for sibling in _walk(node.prev_all(), rule.stop_by, env):
        yield from rule.rule.match_node_with_env(sibling, env)


def _match_named_ref(rule: NamedRef, node, env: MetaVarEnv) -> Iterator[MetaVarEnv]:
    yield from rule.registry.get(rule.name).match_node_with_env(node, env)


_DISPATCH: Dict[type, Callable[..., Iterator[MetaVarEnv]]] = {
    Kind: _match_kind,
    PatternMatch: _match_pattern,
    Regex: _match_regex,
    All: _match_all,
    Any: _match_any,
    Not: _match_not,
    Inside: _match_inside,
    Has: _match_has,
    Precedes: _match_precedes,
    Follows: _match_follows,
    NamedRef: _match_named_ref,
}
