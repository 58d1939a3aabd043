"""Backtracking structural matcher.

Every function here is a generator of environments: each yielded env is one
consistent way the pattern can match. Callers that only need a yes/no or
the first match just take ``next(...)``; the rest is never computed.
"""

from typing import Iterator, Sequence

from .meta_var import MetaVarEnv


def match_node(goal, candidate, env: MetaVarEnv) -> Iterator[MetaVarEnv]:
    """Match a pattern node against a tree node."""
    meta_var = goal.meta_var
    if meta_var is not None:
        if meta_var.multi:
            # a multi placeholder standing alone captures just this node
            if meta_var.name is None:
                yield env
                return
            bound = env.bind_multi(meta_var.name, (candidate,))
            if bound is not None:
                yield bound
            return
        yield from _match_single(meta_var, candidate, env)
        return

    if goal.kind != candidate.kind():
        return
    if goal.is_leaf():
        if goal.text == candidate.text():
            yield env
        return
    yield from _match_children(goal.children, 0, candidate.children(), 0, env)


def _match_single(meta_var, candidate, env: MetaVarEnv) -> Iterator[MetaVarEnv]:
    if not candidate.is_named():
        return
    if meta_var.name is None:
        yield env
        return
    bound = env.bind(meta_var.name, candidate)
    if bound is not None:
        yield bound


def _match_children(
    goals: Sequence, gi: int, candidates: Sequence, ci: int, env: MetaVarEnv
) -> Iterator[MetaVarEnv]:
    if gi == len(goals):
        # unmatched trailing tokens such as ';' are tolerated, named nodes are not
        if all(not candidate.is_named() for candidate in candidates[ci:]):
            yield env
        return

    goal = goals[gi]
    if _is_multi(goal):
        yield from _match_multi(goals, gi, candidates, ci, env)
        return

    if ci < len(candidates):
        candidate = candidates[ci]
        if goal.field == candidate.field_name():
            for matched in match_node(goal, candidate, env):
                yield from _match_children(goals, gi + 1, candidates, ci + 1, matched)

    if not goal.is_named:
        # `foo(a, $$$B)` matches `foo(a)`: separators before an empty run are optional
        after = gi
        while after < len(goals) and not goals[after].is_named and goals[after].meta_var is None:
            after += 1
        if after < len(goals) and _is_multi(goals[after]):
            name = goals[after].meta_var.name
            bound = env if name is None else env.bind_multi(name, ())
            if bound is not None:
                yield from _match_children(goals, after + 1, candidates, ci, bound)


def _is_multi(goal) -> bool:
    return goal.meta_var is not None and goal.meta_var.multi


def _match_multi(
    goals: Sequence, gi: int, candidates: Sequence, ci: int, env: MetaVarEnv
) -> Iterator[MetaVarEnv]:
    """Bind the longest run first, then shrink it until the rest matches."""
    meta_var = goals[gi].meta_var
    for size in range(len(candidates) - ci, -1, -1):
        if meta_var.name is None:
            bound = env
        else:
            bound = env.bind_multi(meta_var.name, candidates[ci:ci + size])
            if bound is None:
                continue
        yield from _match_children(goals, gi + 1, candidates, ci + size, bound)

        if size == 0:
            # `foo($$$A, b)` matches `foo(b)`: the separator belongs to the empty run
            after = gi + 1
            while after < len(goals) and not goals[after].is_named:
                after += 1
            if after > gi + 1 and after < len(goals):
                yield from _match_children(goals, after, candidates, ci, bound)
