"""Derived strings computed from captures after a rule matched."""

import re
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from .meta_var import MetaVarEnv, extract_meta_var

SEPARATORS = {
    "dash": "-",
    "dot": ".",
    "slash": "/",
    "space": " ",
    "underscore": "_",
}
CASE_CHANGE = "caseChange"
CASE_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def split_words(text: str, separated_by: Optional[Sequence[str]] = None) -> list[str]:
    """Split on the given separators; all of them (case changes included) by default"""
    separators = list(separated_by) if separated_by else [*SEPARATORS, CASE_CHANGE]
    chars = [SEPARATORS[name] for name in separators if name in SEPARATORS]
    parts = re.split("|".join(re.escape(c) for c in chars), text) if chars else [text]
    words = []
    for part in parts:
        if CASE_CHANGE in separators:
            words.extend(CASE_BOUNDARY.sub(" ", part).split(" "))
        else:
            words.append(part)
    return [word for word in words if word]


def _camel(words: list[str]) -> str:
    if not words:
        return ""
    return words[0].lower() + "".join(word.capitalize() for word in words[1:])


CONVERTERS = {
    "lowerCase": lambda text, seps: text.lower(),
    "upperCase": lambda text, seps: text.upper(),
    "capitalize": lambda text, seps: text[:1].upper() + text[1:],
    "camelCase": lambda text, seps: _camel(split_words(text, seps)),
    "snakeCase": lambda text, seps: "_".join(word.lower() for word in split_words(text, seps)),
    "kebabCase": lambda text, seps: "-".join(word.lower() for word in split_words(text, seps)),
    "pascalCase": lambda text, seps: "".join(word.capitalize() for word in split_words(text, seps)),
}


def source_text(source: str, env: MetaVarEnv) -> Optional[str]:
    """Resolve ``$NAME`` / ``$$$NAME`` against captures and earlier transforms"""
    meta_var = extract_meta_var(source)
    if meta_var is None or meta_var.name is None:
        return None
    return env.get_text(meta_var.name)


@dataclass(frozen=True)
class Substring:
    source: str
    start_char: Optional[int] = None
    end_char: Optional[int] = None

    def compute(self, env: MetaVarEnv) -> Optional[str]:
        text = source_text(self.source, env)
        if text is None:
            return None
        # slicing is per character, negative indexes count from the end
        return text[self.start_char:self.end_char]


@dataclass(frozen=True)
class Replace:
    source: str
    replace: re.Pattern
    by: str

    def compute(self, env: MetaVarEnv) -> Optional[str]:
        text = source_text(self.source, env)
        if text is None:
            return None
        return self.replace.sub(lambda _: self.by, text)


@dataclass(frozen=True)
class Convert:
    source: str
    to_case: str
    separated_by: Optional[tuple[str, ...]] = None

    def compute(self, env: MetaVarEnv) -> Optional[str]:
        text = source_text(self.source, env)
        if text is None:
            return None
        return CONVERTERS[self.to_case](text, self.separated_by)


def apply_transformations(transforms: Iterable[tuple[str, object]], env: MetaVarEnv) -> MetaVarEnv:
    """Evaluate transforms in order; later ones may read earlier results."""
    for name, transform in transforms:
        text = transform.compute(env)
        if text is not None:
            env = env.with_transformed(name, text)
    return env
