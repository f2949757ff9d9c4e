"""
TitleGuard — Tag Pattern Queries
A tiny match language over tagged tokens, in the spirit of compromise/spaCy
Matcher patterns:

    ^(this|that) is #Adverb* #Adjective
    #Noun (this|that|these|those)
    (for|about|is) (this|that|it)$

Terms are whitespace separated. A term is a literal word, a #Tag, "." for
any token, or a parenthesized alternation of literals and tags. Suffix
quantifiers: "?" (optional), "*" (zero or more), "+" (one or more).
"^" before the first term anchors at the start, "$" after the last term
anchors at the end.

TagQuery.excluding(words) is the ".not()" combinator: excluded words are
removed from a match, and a match left empty does not count.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Sequence

from nlp.tagger import Tag, Token, normalize_word, tag_from_name


class TagQueryError(ValueError):
    """Raised for malformed pattern strings."""


@dataclass(frozen=True)
class Term:
    words: frozenset = frozenset()
    tags: frozenset = frozenset()
    wildcard: bool = False
    min_count: int = 1
    max_count: int | None = 1  # None = unbounded

    def accepts(self, token: Token) -> bool:
        if self.wildcard:
            return True
        return token.normal in self.words or bool(self.tags & token.tags)


@dataclass(frozen=True)
class QueryMatch:
    found: bool
    span: tuple[int, int] | None = None
    tokens: tuple = ()

    def __bool__(self) -> bool:
        return self.found

    @property
    def text(self) -> str:
        return " ".join(t.text for t in self.tokens)


NO_MATCH = QueryMatch(found=False)

_TERM_PATTERN = re.compile(r"^(\([^()]+\)|[^\s()?*+]+)([?*+]?)$")


def _parse_atom(atom: str) -> tuple[set, set, bool]:
    words, tags = set(), set()
    if atom == ".":
        return words, tags, True
    options = atom[1:-1].split("|") if atom.startswith("(") else [atom]
    for option in options:
        option = option.strip()
        if not option:
            raise TagQueryError(f"empty alternative in {atom!r}")
        if option.startswith("#"):
            try:
                tags.add(tag_from_name(option[1:]))
            except KeyError:
                raise TagQueryError(f"unknown tag {option!r}") from None
        else:
            words.add(normalize_word(option))
    return words, tags, False


@lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> tuple[tuple[Term, ...], bool, bool]:
    """Parse a pattern string into (terms, anchored_start, anchored_end)."""
    text = pattern.strip()
    anchored_start = text.startswith("^")
    anchored_end = text.endswith("$")
    text = text.lstrip("^").rstrip("$").strip()
    if not text:
        raise TagQueryError("empty pattern")

    # keep alternation groups together even if they contain spaces
    raw_terms = re.findall(r"\([^()]*\)[?*+]?|[^\s()]+", text)
    terms = []
    for raw in raw_terms:
        m = _TERM_PATTERN.match(raw.replace(" ", ""))
        if not m:
            raise TagQueryError(f"bad term {raw!r} in pattern {pattern!r}")
        atom, quant = m.groups()
        words, tags, wildcard = _parse_atom(atom)
        lo, hi = {"": (1, 1), "?": (0, 1), "*": (0, None), "+": (1, None)}[quant]
        terms.append(Term(frozenset(words), frozenset(tags), wildcard, lo, hi))
    return tuple(terms), anchored_start, anchored_end


def _match_from(terms: Sequence[Term], ti: int, tokens: Sequence[Token], pos: int,
                must_end: bool) -> int | None:
    """Greedy backtracking match; returns the end index or None."""
    if ti == len(terms):
        if must_end and pos != len(tokens):
            return None
        return pos
    term = terms[ti]
    limit = len(tokens) - pos if term.max_count is None else min(term.max_count, len(tokens) - pos)
    count = 0
    while count < limit and term.accepts(tokens[pos + count]):
        count += 1
    while count >= term.min_count:
        end = _match_from(terms, ti + 1, tokens, pos + count, must_end)
        if end is not None:
            return end
        count -= 1
    return None


class TagQuery:
    """A compiled pattern, optionally with an exclusion set."""

    def __init__(self, pattern: str, exclude: Iterable[str] = ()):
        self.pattern = pattern
        self.terms, self.anchored_start, self.anchored_end = compile_pattern(pattern)
        self.exclude = frozenset(normalize_word(w) for w in exclude)

    def excluding(self, words: Iterable[str]) -> "TagQuery":
        return TagQuery(self.pattern, self.exclude | frozenset(words))

    def search(self, tokens: Sequence[Token]) -> QueryMatch:
        starts = [0] if self.anchored_start else range(len(tokens) + 1)
        for start in starts:
            end = _match_from(self.terms, 0, tokens, start, self.anchored_end)
            if end is None or end == start:
                continue
            kept = tuple(t for t in tokens[start:end] if t.normal not in self.exclude)
            if kept:
                return QueryMatch(found=True, span=(start, end), tokens=kept)
        return NO_MATCH

    def matches(self, tokens: Sequence[Token]) -> bool:
        return self.search(tokens).found

    def __repr__(self) -> str:
        suffix = f".not({sorted(self.exclude)})" if self.exclude else ""
        return f"TagQuery({self.pattern!r}){suffix}"


def query(tokens: Sequence[Token], pattern: str, exclude: Iterable[str] = ()) -> QueryMatch:
    """One-shot helper: query(tokens, "#Noun (this|that)")."""
    return TagQuery(pattern, exclude).search(tokens)


def has_tag(tokens: Sequence[Token], tag: Tag, exclude: Iterable[str] = ()) -> bool:
    skip = set(exclude)
    return any(tag in t.tags and t.normal not in skip for t in tokens)
