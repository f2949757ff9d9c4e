"""
TitleGuard — Deictic Reference Analyzer
Works out how a title uses "this / that / these / those".

Benign roles are checked first, in priority order, and the first one that
applies settles the title:

    connector       "The Car That Changed Everything"   (noun + that)
    adverbial       "I Never Thought It Would Go This Far"
    time            "Best Phones This Year"
    presentational  "This Is Lake Tahoe"

Otherwise the first violation wins:

    undefined noun      "You Need This Trick"
    vague predicate     "This Is Insane"
    standalone          "This Changed Everything" / "...I Did This"
"""
from __future__ import annotations

import re
from enum import Enum
from typing import Sequence

from nlp import lexicon
from nlp.tag_query import TagQuery
from nlp.tagger import Tag, Token

DEICTIC_WORDS = lexicon.DEICTIC_WORDS
_DEICTIC = "(" + "|".join(DEICTIC_WORDS) + ")"

# "This is how / why / what / where / the ..." explainer titles.
# Matched against token text so leading emoji or quotes do not hide it.
EXPLETIVE_PATTERN = re.compile(r"^this is (?:how|why|what|where|the)\b")

_CONNECTOR = TagQuery(f"#Noun {_DEICTIC}")
_TIME_REFERENCE = TagQuery(
    f"{_DEICTIC} (past|coming|last|next|very)? ({'|'.join(sorted(lexicon.TIME_NOUNS))})"
)
_PRESENTATIONAL = TagQuery("^this is #ProperNoun+")
_VAGUE_PREDICATE = TagQuery("^(this|that) is #Adverb* #Adjective")
_STARTS_WITH_OTHER = TagQuery("^(that|these|those)")
_ENDS_WITH_DEICTIC = TagQuery(f"{_DEICTIC} #Adverb? #Adjective?$")


class DeicticRole(str, Enum):
    ABSENT = "absent"
    CONNECTOR = "connector"
    ADVERBIAL = "adverbial"
    TIME_REFERENCE = "time_reference"
    PRESENTATIONAL = "presentational"
    UNDEFINED_NOUN = "undefined_noun"
    VAGUE_PREDICATE = "vague_predicate"
    STANDALONE = "standalone"
    UNCLASSIFIED = "unclassified"


def deictic_positions(tokens: Sequence[Token]) -> list[int]:
    return [i for i, t in enumerate(tokens) if t.normal in DEICTIC_WORDS]


def token_text(tokens: Sequence[Token]) -> str:
    """Lowercased words of the title joined by single spaces, punctuation dropped."""
    return " ".join(t.normal for t in tokens)


def is_expletive(tokens: Sequence[Token]) -> bool:
    return bool(EXPLETIVE_PATTERN.match(token_text(tokens)))


def presentational_name(tokens: Sequence[Token]) -> tuple[Token, ...]:
    """The proper-noun run after a leading "this is", or () if there is none."""
    m = _PRESENTATIONAL.search(tokens)
    if not m:
        return ()
    return m.tokens[2:]


def names_place_or_person(tokens: Sequence[Token]) -> bool:
    return any(t.has(Tag.PLACE) or t.has(Tag.PERSON) for t in presentational_name(tokens))


def is_presentational(tokens: Sequence[Token]) -> bool:
    # a named place/person, or a multi-word name rather than a bare one
    name = presentational_name(tokens)
    return bool(name) and (names_place_or_person(tokens) or len(name) > 1)


def _is_adverbial(tokens: Sequence[Token], positions: list[int]) -> bool:
    for i in positions:
        if i + 1 < len(tokens) and tokens[i + 1].has(Tag.ADJECTIVE):
            # "this far" is an intensifier; "this secret trick" is a noun phrase
            if i + 2 >= len(tokens) or not tokens[i + 2].is_noun:
                return True
    return False


def _points_to_common_noun(tokens: Sequence[Token], positions: list[int]) -> bool:
    for i in positions:
        if i + 1 < len(tokens):
            nxt = tokens[i + 1]
            if nxt.is_noun and not nxt.has(Tag.PROPER_NOUN):
                return True
    return False


def _is_standalone(tokens: Sequence[Token]) -> bool:
    if tokens and tokens[0].normal == "this" and not is_expletive(tokens):
        return True
    return _STARTS_WITH_OTHER.matches(tokens) or _ENDS_WITH_DEICTIC.matches(tokens)


def classify_deixis(tokens: Sequence[Token]) -> DeicticRole:
    """Return the role of the title's pointer words; see module docstring."""
    positions = deictic_positions(tokens)
    if not positions:
        return DeicticRole.ABSENT

    if _CONNECTOR.matches(tokens):
        return DeicticRole.CONNECTOR
    if _is_adverbial(tokens, positions):
        return DeicticRole.ADVERBIAL
    if _TIME_REFERENCE.matches(tokens):
        return DeicticRole.TIME_REFERENCE
    if is_presentational(tokens):
        return DeicticRole.PRESENTATIONAL

    if _points_to_common_noun(tokens, positions):
        return DeicticRole.UNDEFINED_NOUN
    if _VAGUE_PREDICATE.matches(tokens) and not is_expletive(tokens):
        return DeicticRole.VAGUE_PREDICATE
    if _is_standalone(tokens):
        return DeicticRole.STANDALONE
    return DeicticRole.UNCLASSIFIED
