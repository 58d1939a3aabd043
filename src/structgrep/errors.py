class StructGrepError(Exception):
    """Base class for all structgrep errors."""


class UnknownLanguageError(StructGrepError):
    """No grammar is registered under the requested name or extension."""


class ParseError(StructGrepError):
    """The parser could not produce a tree for the source."""


class PatternError(StructGrepError):
    """A pattern string could not be compiled into a pattern tree."""


class RuleCompileError(StructGrepError):
    """A rule configuration is malformed, references unknown names or is cyclic."""


class FieldInvariantError(StructGrepError):
    """A field the grammar marks as required has no filler in the tree."""


class InvalidEditError(StructGrepError):
    """An edit has inverted bounds or lies outside the text being rewritten."""


class EditOverlapError(StructGrepError):
    """Two edits of one commit overlap; the commit is rejected as a whole."""

    def __init__(self, first, second):
        self.first = first
        self.second = second
        super().__init__(
            f"Edit [{first.start_pos}, {first.end_pos}) overlaps edit [{second.start_pos}, {second.end_pos})"
        )


class MissingFixError(StructGrepError):
    """A rewrite was requested without a template and the rule has no fix."""
