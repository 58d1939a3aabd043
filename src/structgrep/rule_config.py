"""Declarative rule configuration.

The external shape of a rule is a pydantic model (so it can come from JSON,
TOML or a plain dict); ``compile_rule_config`` turns it into a ``RuleCore``
made of the rule variants in ``rules``. Every structural problem is reported
here as ``RuleCompileError``, before any tree is searched.
"""

import logging
import re
from typing import Dict, Iterator, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .errors import PatternError, RuleCompileError
from .meta_var import MetaVarEnv, extract_meta_var
from .pattern import Pattern
from .rules import (
    All,
    Any,
    Follows,
    Has,
    Inside,
    Matcher,
    NamedRef,
    Not,
    PatternMatch,
    Precedes,
    Regex,
    Rule,
    RuleRegistry,
    StopBy,
)
from .transform import Convert, Replace, Substring, apply_transformations

logger = logging.getLogger(__name__)


class PatternContext(BaseModel):
    """A pattern that only parses inside some surrounding code"""

    model_config = ConfigDict(extra="forbid")

    context: str
    selector: str


class SerializableRule(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    pattern: Optional[Union[str, PatternContext]] = None
    kind: Optional[str] = None
    regex: Optional[str] = None
    inside: Optional["Relation"] = None
    has: Optional["Relation"] = None
    precedes: Optional["Relation"] = None
    follows: Optional["Relation"] = None
    all: Optional[List["SerializableRule"]] = None
    any: Optional[List["SerializableRule"]] = None
    not_: Optional["SerializableRule"] = Field(default=None, alias="not")
    matches: Optional[str] = None


class Relation(SerializableRule):
    stop_by: Union[Literal["neighbor", "end"], SerializableRule] = Field(default="end", alias="stopBy")
    field: Optional[str] = None


SerializableRule.model_rebuild()
Relation.model_rebuild()


class SubstringConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    source: str
    start_char: Optional[int] = Field(default=None, alias="startChar")
    end_char: Optional[int] = Field(default=None, alias="endChar")


class ReplaceConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    source: str
    replace: str
    by: str


CaseName = Literal["lowerCase", "upperCase", "capitalize", "camelCase", "snakeCase", "kebabCase", "pascalCase"]
SeparatorName = Literal["caseChange", "dash", "dot", "slash", "space", "underscore"]


class ConvertConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    source: str
    to_case: CaseName = Field(alias="toCase")
    separated_by: Optional[List[SeparatorName]] = Field(default=None, alias="separatedBy")


class Transformation(BaseModel):
    model_config = ConfigDict(extra="forbid")

    substring: Optional[SubstringConfig] = None
    replace: Optional[ReplaceConfig] = None
    convert: Optional[ConvertConfig] = None

    @model_validator(mode="after")
    def exactly_one_kind(self) -> "Transformation":
        given = [name for name in ("substring", "replace", "convert") if getattr(self, name) is not None]
        if len(given) != 1:
            raise ValueError("a transformation needs exactly one of substring, replace or convert")
        return self


class RuleConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: Optional[str] = None
    language: Optional[str] = None
    message: Optional[str] = None
    rule: SerializableRule
    constraints: Dict[str, SerializableRule] = Field(default_factory=dict)
    utils: Dict[str, SerializableRule] = Field(default_factory=dict)
    transform: Dict[str, Transformation] = Field(default_factory=dict)
    fix: Optional[str] = None


class RuleCore:
    """A compiled rule together with its constraints, transforms and fix"""

    def __init__(
        self,
        rule: Matcher,
        language,
        constraints: Optional[Dict[str, Matcher]] = None,
        transforms: Optional[List[tuple]] = None,
        registry: Optional[RuleRegistry] = None,
        fix: Optional[str] = None,
        rule_id: Optional[str] = None,
        message: Optional[str] = None,
    ):
        self.rule = rule
        self.language = language
        self.constraints = dict(constraints or {})
        self.transforms = list(transforms or [])
        self.registry = registry or RuleRegistry()
        self.fix = fix
        self.id = rule_id
        self.message = message

    def _satisfies_constraints(self, env: MetaVarEnv) -> bool:
        for name, constraint in self.constraints.items():
            node = env.get_match(name)
            if node is None:
                continue
            if next(iter(constraint.match_node_with_env(node, MetaVarEnv())), None) is None:
                return False
        return True

    def match_node_with_env(self, node, env: MetaVarEnv) -> Iterator[MetaVarEnv]:
        for matched in self.rule.match_node_with_env(node, env):
            if not self._satisfies_constraints(matched):
                continue
            yield apply_transformations(self.transforms, matched)

    def potential_kinds(self) -> Optional[frozenset[str]]:
        return self.rule.potential_kinds()

    def __repr__(self) -> str:
        return f"RuleCore(id={self.id!r}, rule={self.rule!r})"


class _RuleCompiler:
    """Turns ``SerializableRule`` trees into rule variants for one language"""

    RELATIONS = (("inside", Inside), ("has", Has), ("precedes", Precedes), ("follows", Follows))

    def __init__(self, language, registry: RuleRegistry):
        self.language = language
        self.registry = registry
        self.references: set[str] = set()

    def compile(self, rule: SerializableRule) -> Rule:
        parts: List[Rule] = []
        if rule.pattern is not None:
            parts.append(PatternMatch(self._pattern(rule.pattern)))
        if rule.kind is not None:
            parts.append(self.language.kind(rule.kind))
        if rule.regex is not None:
            parts.append(Regex(self._regex(rule.regex)))
        for key, relation_type in self.RELATIONS:
            relation = getattr(rule, key)
            if relation is not None:
                parts.append(self._relation(key, relation_type, relation))
        if rule.all is not None:
            parts.append(All(tuple(self.compile(sub) for sub in rule.all)))
        if rule.any is not None:
            parts.append(Any(tuple(self.compile(sub) for sub in rule.any)))
        if rule.not_ is not None:
            parts.append(Not(self.compile(rule.not_)))
        if rule.matches is not None:
            self.references.add(rule.matches)
            parts.append(NamedRef(rule.matches, self.registry))

        if not parts:
            raise RuleCompileError("A rule must contain at least one key")
        return parts[0] if len(parts) == 1 else All(tuple(parts))

    def _pattern(self, pattern: Union[str, PatternContext]) -> Pattern:
        try:
            if isinstance(pattern, PatternContext):
                return Pattern.compile(pattern.context, self.language, selector=pattern.selector)
            return Pattern.compile(pattern, self.language)
        except PatternError as exc:
            raise RuleCompileError(str(exc)) from exc

    @staticmethod
    def _regex(source: str) -> re.Pattern:
        try:
            return re.compile(source)
        except re.error as exc:
            raise RuleCompileError(f"Invalid regex {source!r}: {exc}") from exc

    def _relation(self, key: str, relation_type, relation: Relation) -> Rule:
        target = self.compile(relation)
        if relation.stop_by == "neighbor":
            stop_by = StopBy.neighbor()
        elif relation.stop_by == "end":
            stop_by = StopBy.end()
        else:
            stop_by = StopBy.until(self.compile(relation.stop_by))

        if relation.field is None:
            return relation_type(target, stop_by)
        if relation_type not in (Inside, Has):
            raise RuleCompileError(f"'field' is not supported by '{key}'")
        if not self.language.is_valid_field(relation.field):
            raise RuleCompileError(f"Unknown field '{relation.field}' for language {self.language.name}")
        return relation_type(target, stop_by, relation.field)

    def compile_tracked(self, rule: SerializableRule) -> tuple[Rule, set[str]]:
        """Compile and also return the rule names it references."""
        outer = self.references
        self.references = set()
        try:
            return self.compile(rule), self.references
        finally:
            self.references = outer | self.references


def _compile_transforms(transform: Dict[str, Transformation]) -> List[tuple]:
    compiled = []
    for name, spec in transform.items():
        config = spec.substring or spec.replace or spec.convert
        meta_var = extract_meta_var(config.source)
        if meta_var is None or meta_var.name is None:
            raise RuleCompileError(f"Transform '{name}' source {config.source!r} is not a meta variable")
        if spec.substring is not None:
            compiled.append((name, Substring(config.source, config.start_char, config.end_char)))
        elif spec.replace is not None:
            compiled.append((name, Replace(config.source, _RuleCompiler._regex(config.replace), config.by)))
        else:
            separated_by = tuple(config.separated_by) if config.separated_by else None
            compiled.append((name, Convert(config.source, config.to_case, separated_by)))
    return compiled


def load_rule_config(config: Union[dict, RuleConfig]) -> RuleConfig:
    if isinstance(config, RuleConfig):
        return config
    try:
        return RuleConfig.model_validate(config)
    except ValidationError as exc:
        raise RuleCompileError(f"Invalid rule configuration: {exc}") from exc


def compile_rule_config(config: Union[dict, RuleConfig], language=None) -> RuleCore:
    """Validate and compile a rule configuration into a ``RuleCore``.

    ``language`` defaults to the config's own ``language`` key.
    """
    config = load_rule_config(config)
    if language is None:
        if config.language is None:
            raise RuleCompileError("No language given for the rule configuration")
        from .language import get_language

        language = get_language(config.language)

    registry = RuleRegistry()
    compiler = _RuleCompiler(language, registry)
    for name, util in config.utils.items():
        rule, references = compiler.compile_tracked(util)
        registry.register(name, rule, references)

    rule, references = compiler.compile_tracked(config.rule)
    constraints = {}
    for name, constraint in config.constraints.items():
        constraints[name], constraint_refs = compiler.compile_tracked(constraint)
        references |= constraint_refs
    registry.validate(references)

    core = RuleCore(
        rule,
        language,
        constraints=constraints,
        transforms=_compile_transforms(config.transform),
        registry=registry,
        fix=config.fix,
        rule_id=config.id,
        message=config.message,
    )
    logger.debug("Compiled rule %s for %s", config.id or "<anonymous>", language.name)
    return core
