"""
TitleGuard — Lexical Tagger
Splits a title into tokens and tags each one with part-of-speech style
categories. Two backends share one interface:

    SpacyTagger   — spaCy pipeline (en_core_web_sm), loaded lazily (default)
    LexiconTagger — dictionary + suffix + capitalization rules, no model (fallback)

Rule logic only ever sees Token objects, so the backends are interchangeable.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

from nlp import lexicon
from nlp.preprocessor import TitlePreprocessor

logger = logging.getLogger(__name__)


class TaggerUnavailable(RuntimeError):
    """Raised when a tagger backend cannot be loaded or fails while tagging."""


class Tag(str, Enum):
    NOUN = "Noun"
    PROPER_NOUN = "ProperNoun"
    ADJECTIVE = "Adjective"
    ADVERB = "Adverb"
    VALUE = "Value"
    PLACE = "Place"
    PERSON = "Person"
    PRONOUN = "Pronoun"
    # Closed-class helpers so function words and verbs are never read as nouns
    VERB = "Verb"
    DETERMINER = "Determiner"
    PREPOSITION = "Preposition"
    CONJUNCTION = "Conjunction"


_TAG_BY_NAME = {t.value.lower(): t for t in Tag}


def tag_from_name(name: str) -> Tag:
    """Resolve "Noun" / "noun" / "ProperNoun" to a Tag; KeyError if unknown."""
    return _TAG_BY_NAME[name.lower()]


@dataclass(frozen=True)
class Token:
    text: str
    normal: str
    tags: frozenset = field(default_factory=frozenset)

    def has(self, tag: Tag) -> bool:
        return tag in self.tags

    @property
    def is_noun(self) -> bool:
        return Tag.NOUN in self.tags


class Tagger(Protocol):
    name: str

    def tag(self, title: str) -> list[Token]:
        ...


def normalize_word(word: str) -> str:
    return word.lower().replace("’", "'")


# ── Tag bundles ───────────────────────────────────────────────────────────────
_NOUN = frozenset({Tag.NOUN})
_PROPER = frozenset({Tag.PROPER_NOUN, Tag.NOUN})
_PERSON = frozenset({Tag.PERSON, Tag.PROPER_NOUN, Tag.NOUN})
_PLACE = frozenset({Tag.PLACE, Tag.PROPER_NOUN, Tag.NOUN})
_VERB = frozenset({Tag.VERB})
_ADJ = frozenset({Tag.ADJECTIVE})
_ADV = frozenset({Tag.ADVERB})
_VALUE = frozenset({Tag.VALUE})

_NUMERIC = re.compile(r"^\$?\d[\d,.]*(?:k|m|b|%|s|st|nd|rd|th|x|p|fps)?$")

_CLOSED_CLASS = (
    lexicon.PRONOUNS | lexicon.DETERMINERS | lexicon.PREPOSITIONS
    | lexicon.CONJUNCTIONS | lexicon.AUXILIARIES
)


def _is_known(w: str) -> bool:
    if w in _CLOSED_CLASS or w in lexicon.NOUNS or w in lexicon.VERBS:
        return True
    if w in lexicon.ADJECTIVES or w in lexicon.ADVERBS:
        return True
    return any(l in lexicon.NOUNS or l in lexicon.VERBS for l in _verb_lemmas(w))


def _is_title_case(words: list[str]) -> bool:
    """True when most words start with a capital, so capitals say little about names."""
    alpha = [w for w in words if w[:1].isalpha()]
    capitalized = sum(1 for w in alpha if w[:1].isupper())
    return len(alpha) >= 2 and capitalized * 2 > len(alpha)


def _modifies_next(prev: Token | None) -> bool:
    # "This Gadget", "My Garden", "Secret Gadget": the slot holds a common noun
    return prev is not None and (
        prev.has(Tag.DETERMINER) or prev.has(Tag.ADJECTIVE) or prev.normal in lexicon.POSSESSIVES
    )


def _verb_lemmas(word: str) -> list[str]:
    """Candidate base forms for an inflected verb or plural noun."""
    out = []
    if word.endswith("ies") or word.endswith("ied"):
        out.append(word[:-3] + "y")
    if word.endswith("ing") and len(word) > 5:
        stem = word[:-3]
        out += [stem, stem + "e"]
        if len(stem) > 2 and stem[-1] == stem[-2]:
            out.append(stem[:-1])
    if word.endswith("ed") and len(word) > 4:
        stem = word[:-2]
        out += [stem, word[:-1]]
        if len(stem) > 2 and stem[-1] == stem[-2]:
            out.append(stem[:-1])
    if word.endswith("es"):
        out.append(word[:-2])
    if word.endswith("s") and not word.endswith("ss"):
        out.append(word[:-1])
    return out


class LexiconTagger:
    """
    Deterministic rule-based tagger. Resolution order per word:
    numbers → pronouns → determiners → auxiliaries → adverbs → prepositions
    → conjunctions → time nouns → number words → gazetteers → adjective/noun/verb
    dictionaries (with inflection) → capitalization → suffix guesses → Noun.
    """

    name = "lexicon"

    def __init__(self):
        self._pre = TitlePreprocessor()

    def tag(self, title: str) -> list[Token]:
        words = self._pre.words(title)
        title_case = _is_title_case(words)
        tokens: list[Token] = []
        for i, word in enumerate(words):
            prev = tokens[-1] if tokens else None
            nxt = normalize_word(words[i + 1]) if i + 1 < len(words) else None
            tags = self._tag_word(word, i, prev, nxt, title_case)
            tokens.append(Token(text=word, normal=normalize_word(word), tags=tags))
        return tokens

    # ── Per-word resolution ───────────────────────────────────────────────────

    def _tag_word(
        self, word: str, index: int, prev: Token | None, nxt: str | None, title_case: bool = False,
    ) -> frozenset:
        w = normalize_word(word)
        capitalized = word[:1].isupper()
        all_caps = word.isupper() and len(word) > 1

        if _NUMERIC.match(w):
            return _VALUE
        if w in lexicon.PRONOUNS:
            return frozenset({Tag.PRONOUN})
        if w in lexicon.DETERMINERS:
            return frozenset({Tag.DETERMINER})
        if w in lexicon.AUXILIARIES:
            return _VERB
        if w in lexicon.ADVERBS and w not in lexicon.ADJECTIVES:
            return _ADV
        if w in lexicon.PREPOSITIONS:
            return frozenset({Tag.PREPOSITION})
        if w in lexicon.CONJUNCTIONS:
            return frozenset({Tag.CONJUNCTION})
        if w in lexicon.TIME_NOUNS:
            return _NOUN
        if w in lexicon.NUMBER_WORDS:
            return _VALUE

        gazetteer = self._gazetteer(w, capitalized, prev)
        if gazetteer:
            return gazetteer

        known = self._dictionary(w, prev, nxt)
        if known:
            return known

        if all_caps and len(word) <= 5:
            return _PROPER
        if capitalized and index > 0 and not (title_case and _modifies_next(prev)):
            return _PROPER
        if w.endswith("ly") and w not in lexicon.LY_NOT_ADVERB:
            return _ADV
        if w.endswith(lexicon.ADJECTIVE_SUFFIXES):
            return _ADJ
        if (w.endswith("ing") or w.endswith("ed")) and len(w) > 4:
            return _VERB
        return _NOUN

    def _gazetteer(self, w: str, capitalized: bool, prev: Token | None) -> frozenset | None:
        trusted = capitalized or w not in lexicon.NAME_HOMOGRAPHS
        if prev is not None and capitalized and prev.normal in lexicon.HONORIFICS:
            return _PERSON
        if prev is not None and capitalized and prev.has(Tag.PERSON) and not _is_known(w):
            return _PERSON
        if not trusted:
            return None
        if w in lexicon.PERSONS:
            return _PERSON
        if w in lexicon.PLACES:
            return _PLACE
        return None

    def _dictionary(self, w: str, prev: Token | None, nxt: str | None) -> frozenset | None:
        noun_slot = prev is not None and (
            prev.has(Tag.DETERMINER) or prev.has(Tag.ADJECTIVE) or prev.has(Tag.VALUE)
            or prev.is_noun or prev.normal in lexicon.POSSESSIVES
        )
        is_noun = w in lexicon.NOUNS
        is_adj = w in lexicon.ADJECTIVES
        is_verb = w in lexicon.VERBS

        if is_adj and is_noun:
            # "secret trick" vs "this secret"
            modifies = nxt is not None and nxt not in _CLOSED_CLASS and not _NUMERIC.match(nxt)
            return _ADJ if modifies else _NOUN
        if is_adj:
            return _ADJ
        if w in lexicon.ADVERBS:
            return _ADV
        if is_verb and (is_noun or w in lexicon.NOUN_VERBS):
            return _NOUN if noun_slot else _VERB
        if is_noun:
            return _NOUN
        if is_verb:
            return _VERB

        for lemma in _verb_lemmas(w):
            if lemma in lexicon.NOUNS and lemma not in lexicon.VERBS:
                return _NOUN
            if lemma in lexicon.VERBS:
                if lemma in lexicon.NOUN_VERBS and w.endswith("s") and noun_slot:
                    return _NOUN
                return _VERB
        return None


# ── spaCy backend ─────────────────────────────────────────────────────────────
_SPACY_POS = {
    "NOUN": _NOUN,
    "PROPN": _PROPER,
    "ADJ": _ADJ,
    "ADV": _ADV,
    "NUM": _VALUE,
    "PRON": frozenset({Tag.PRONOUN}),
    "DET": frozenset({Tag.DETERMINER}),
    "ADP": frozenset({Tag.PREPOSITION}),
    "CCONJ": frozenset({Tag.CONJUNCTION}),
    "SCONJ": frozenset({Tag.CONJUNCTION}),
    "VERB": _VERB,
    "AUX": _VERB,
}
_SPACY_ENTS = {
    "PERSON": _PERSON,
    "GPE": _PLACE,
    "LOC": _PLACE,
    "FAC": _PLACE,
    "CARDINAL": _VALUE,
    "QUANTITY": _VALUE,
    "MONEY": _VALUE,
    "PERCENT": _VALUE,
    "ORDINAL": _VALUE,
}


class SpacyTagger:
    """
    spaCy-backed tagger. The pipeline is loaded on first use; pass `nlp`
    to reuse an already loaded pipeline (or a stand-in for tests).
    """

    name = "spacy"

    def __init__(self, model: str = "en_core_web_sm", nlp=None):
        self.model = model
        self._nlp = nlp
        self._loaded = nlp is not None

    def _load_model(self):
        if self._loaded:
            return
        self._loaded = True
        try:
            import spacy
            self._nlp = spacy.load(self.model, disable=["parser", "lemmatizer"])
            logger.info("spaCy %s loaded", self.model)
        except Exception as e:
            logger.warning("spaCy not available (%s)", e)
            self._nlp = None

    def tag(self, title: str) -> list[Token]:
        self._load_model()
        if self._nlp is None:
            raise TaggerUnavailable(f"spaCy model '{self.model}' could not be loaded")
        try:
            doc = self._nlp(title)
        except Exception as e:
            raise TaggerUnavailable(f"spaCy tagging failed: {e}") from e

        tokens = []
        for tok in doc:
            # emoji and symbols carry no words, as in TitlePreprocessor.words
            if tok.is_punct or tok.is_space or not any(c.isalnum() for c in tok.text):
                continue
            normal = normalize_word(tok.text)
            tags = _SPACY_POS.get(tok.pos_, frozenset())
            ent_tags = _SPACY_ENTS.get(tok.ent_type_)
            if ent_tags:
                tags = tags - {Tag.VERB, Tag.ADJECTIVE} | ent_tags
            if normal in lexicon.DEICTIC_WORDS:
                tags = frozenset({Tag.DETERMINER})
            tokens.append(Token(text=tok.text, normal=normal, tags=frozenset(tags)))
        return tokens


def build_tagger(backend: str = "spacy", model: str = "en_core_web_sm") -> Tagger:
    """
    Create the configured tagger. spaCy is preferred; when it cannot load
    the LexiconTagger takes over so the classifier keeps working.
    """
    if backend == "spacy":
        tagger = SpacyTagger(model)
        tagger._load_model()
        if tagger._nlp is not None:
            return tagger
        logger.warning("spaCy tagger unavailable — falling back to lexicon tagger")
    elif backend != "lexicon":
        logger.warning("Unknown tagger backend %r — using lexicon tagger", backend)
    return LexiconTagger()
