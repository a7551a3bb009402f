"""
Pattern rules: one deprecation signature each.

A rule pairs a matcher with a severity, a message and a migration hint, and
optionally a rewrite that turns a matched span into its replacement. All
patterns are compiled when the rule is built so a malformed rule fails at
profile construction, never during a scan.
"""

import re
from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple, Union

from .errors import ConfigurationError
from .issue import UNKNOWN_END_OF_LIFE, Category, Severity


@dataclass(frozen=True)
class Literal:
    """Matcher for a plain substring; no regex metacharacters are interpreted."""
    text: str

    def compile(self) -> "re.Pattern[str]":
        if not self.text:
            raise ConfigurationError("Literal matcher must not be empty")
        return re.compile(re.escape(self.text))


@dataclass(frozen=True)
class Pattern:
    """Matcher for a regular expression with its re flags."""
    source: str
    flags: int = 0

    def compile(self) -> "re.Pattern[str]":
        if not self.source:
            raise ConfigurationError("Pattern matcher must not be empty")
        try:
            return re.compile(self.source, self.flags)
        except re.error as e:
            raise ConfigurationError(f"Invalid pattern {self.source!r}: {e}") from e


Matcher = Union[Literal, Pattern]


@dataclass(frozen=True)
class Rewrite:
    """Substring-level rewrite anchored on a rule match.

    `pattern` is matched inside a bounded window around the rule's match:
    `lookbehind` characters before it and `lookahead` characters after it.
    The first pattern match that covers the whole rule match becomes the
    affected span and `template` (re expansion syntax) its replacement.
    """
    pattern: str
    template: str
    lookbehind: int = 0
    lookahead: int = 0
    flags: int = 0
    _compiled: "re.Pattern[str]" = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if self.lookbehind < 0 or self.lookahead < 0:
            raise ConfigurationError("Rewrite lookaround must not be negative")
        try:
            compiled = re.compile(self.pattern, self.flags)
            # sub() parses the template, so bad group references fail here.
            compiled.sub(self.template, "")
        except re.error as e:
            raise ConfigurationError(f"Invalid rewrite {self.pattern!r}: {e}") from e
        object.__setattr__(self, "_compiled", compiled)

    def apply(self, snippet: str) -> str:
        """Rewrite the first occurrence of the pattern in snippet."""
        return self._compiled.sub(self.template, snippet, count=1)

    def resolve(self, text: str, start: int, end: int) -> Optional[Tuple[str, str]]:
        """(affected span, replacement) for the match text[start:end], or None."""
        win_start = max(0, start - self.lookbehind)
        win_end = min(len(text), end + self.lookahead)
        window = text[win_start:win_end]
        for m in self._compiled.finditer(window):
            m_start = win_start + m.start()
            m_end = win_start + m.end()
            if m_start > start:
                break
            if m_end >= end and m_end > m_start:
                return m.group(0), m.expand(self.template)
        return None


@dataclass(frozen=True)
class PatternRule:
    """A single deprecation/breakage signature."""
    id: str
    matcher: Matcher
    severity: Severity
    message: str
    migration_suggestion: str
    rewrite: Optional[Rewrite] = None
    category: Category = Category.DEPRECATION
    end_of_life: str = UNKNOWN_END_OF_LIFE
    documentation_url: Optional[str] = None
    _regex: "re.Pattern[str]" = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not self.id:
            raise ConfigurationError("Rule id must not be empty")
        if not isinstance(self.matcher, (Literal, Pattern)):
            raise ConfigurationError(
                f"Rule {self.id}: matcher must be Literal or Pattern, "
                f"got {type(self.matcher).__name__}"
            )
        if not isinstance(self.severity, Severity):
            raise ConfigurationError(f"Rule {self.id}: severity must be a Severity")
        try:
            regex = self.matcher.compile()
        except ConfigurationError as e:
            raise ConfigurationError(f"Rule {self.id}: {e}") from e
        object.__setattr__(self, "_regex", regex)

    def find(self, text: str) -> Iterator[Tuple[int, int, str]]:
        """Yield (start, end, matched) for every non-overlapping occurrence.

        Each call builds a fresh iterator, so no search state survives
        between scans. Empty matches are ignored.
        """
        for m in self._regex.finditer(text):
            if m.end() > m.start():
                yield m.start(), m.end(), m.group(0)
