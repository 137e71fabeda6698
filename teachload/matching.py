"""
Token-gap matching for names and course labels.

A pattern is built from free text by case-folding it and collapsing every
whitespace run into a gap. A candidate matches when all tokens occur in it,
in order, with anything (including nothing) in between:

    "JUAN DELA CRUZ" matches "Juan Miguel Dela Cruz"
    "JUAN DELA CRUZ" does not match "Dela Cruz Juan"

Tokens are compared as plain substrings, so punctuation in names never has
a special meaning.
"""

from __future__ import annotations

from dataclasses import dataclass


def fold(text: str) -> str:
    """
    Case-fold and collapse whitespace runs to single spaces.
    """
    return " ".join(text.casefold().split())


@dataclass(frozen=True)
class NamePattern:
    tokens: tuple[str, ...]

    @classmethod
    def from_text(cls, text: str) -> "NamePattern":
        return cls(tokens=tuple(fold(text).split()))

    @property
    def is_empty(self) -> bool:
        return not self.tokens

    def matches(self, candidate: str) -> bool:
        # an empty pattern matches nothing, never "everything"
        if self.is_empty:
            return False
        hay = fold(candidate)
        pos = 0
        for token in self.tokens:
            found = hay.find(token, pos)
            if found < 0:
                return False
            pos = found + len(token)
        return True

    def __str__(self) -> str:
        return " … ".join(self.tokens)
