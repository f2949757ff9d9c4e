"""
TitleGuard — Anchor / Subject Validator
A title should be about something concrete: a named thing, a number, a
first-person narrator, or a real common noun. Placeholder nouns and
pronouns do not count.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from nlp import lexicon
from nlp.deixis import deictic_positions
from nlp.tag_query import has_tag
from nlp.tagger import Tag, Token

VAGUE_PLACEHOLDERS = frozenset({
    "something", "everything", "nothing", "it", "this", "that", "these", "those",
    "things", "i", "we", "my", "me", "so", "much",
})


@dataclass(frozen=True)
class AnchorReport:
    concrete_noun: bool
    proper_noun: bool
    value: bool
    first_person: bool
    deictic: bool
    ends_with_deictic_noun: bool

    @property
    def has_anchor(self) -> bool:
        return self.concrete_noun or self.proper_noun or self.value or self.first_person

    @property
    def missing(self) -> bool:
        """True when any of the three no-anchor conditions holds."""
        if not self.has_anchor:
            return True
        if self.ends_with_deictic_noun and not (self.proper_noun or self.value):
            return True
        if self.first_person and self.deictic and not (
            self.concrete_noun or self.proper_noun or self.value
        ):
            return True
        return False


def inspect_anchors(tokens: Sequence[Token]) -> AnchorReport:
    concrete = any(
        t.is_noun and not t.has(Tag.PROPER_NOUN) and t.normal not in VAGUE_PLACEHOLDERS
        for t in tokens
    )
    ends_with_deictic_noun = (
        len(tokens) >= 2
        and tokens[-2].normal in lexicon.DEICTIC_WORDS
        and tokens[-1].is_noun
    )
    return AnchorReport(
        concrete_noun=concrete,
        proper_noun=has_tag(tokens, Tag.PROPER_NOUN),
        value=has_tag(tokens, Tag.VALUE),
        first_person=any(t.normal in lexicon.FIRST_PERSON for t in tokens),
        deictic=bool(deictic_positions(tokens)),
        ends_with_deictic_noun=ends_with_deictic_noun,
    )


def lacks_anchor(tokens: Sequence[Token]) -> bool:
    return inspect_anchors(tokens).missing
