"""
TitleGuard — Ancillary Title Heuristics
Independent surface checks: vague words, vague openers, teaser punctuation,
shouting, and titles that end by pointing at a hidden object.
"""
from __future__ import annotations

import re
from typing import Sequence

from nlp.deixis import is_expletive, is_presentational, token_text
from nlp.preprocessor import TitlePreprocessor
from nlp.tagger import Token

VAGUE_OPENERS = frozenset({"they", "he", "she", "it", "this", "that", "those", "these"})

_SOMETHING = re.compile(r"something", re.IGNORECASE)
# checked against token text, see deixis.token_text
_OPENER_IDIOMS = re.compile(r"^it(?: ?'s| is| has) (?:been|time)\b|^it has\b")
_TEASER_ENDINGS = ("...", "..", "?")
_CAPS_MIN_LENGTH = 4
_HIDDEN_OBJECT = re.compile(
    r"\b(?:for|about|with|of|on|at|to|from|like|is|was|are|were|be|been)\s+"
    r"(?:this|that|these|those|it|them)\W*$",
    re.IGNORECASE,
)

_pre = TitlePreprocessor()


def has_vague_word(title: str) -> bool:
    return bool(_SOMETHING.search(title))


def vague_opener(tokens: Sequence[Token]) -> str | None:
    """The vague first word ("they", "this", ...), or None when the opener is fine."""
    if not tokens:
        return None
    first = tokens[0].normal.split("'")[0]
    if first not in VAGUE_OPENERS:
        return None
    if _OPENER_IDIOMS.match(token_text(tokens)) or is_expletive(tokens):
        return None
    if first == "this" and is_presentational(tokens):
        return None
    return first


def has_trailing_teaser(title: str) -> bool:
    return title.rstrip().endswith(_TEASER_ENDINGS)


def caps_words(title: str) -> list[str]:
    """Shouted words: four or more letters, all uppercase (any Latin script)."""
    return [
        w for w in _pre.words(title)
        if len(w) >= _CAPS_MIN_LENGTH and w.isalpha() and w.isupper()
    ]


def has_hidden_object(title: str) -> bool:
    return bool(_HIDDEN_OBJECT.search(title))
