"""
TitleGuard — Scoring Engine
Runs every title heuristic against one shared token stream and adds up the
points. A title is blocked once its score reaches the configured threshold.

Rule groups are evaluated in a fixed order; within a group only the first
matching leaf counts:

    clickbait → deictic (a|b|c) → anchor → "something" → opener
    → teaser → shouting (multi|single) → hidden object
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import cached_property, lru_cache
from typing import Callable, Iterable, Optional, Sequence

from config import get_settings
from filtering.blocklist import BlockList, extract_video_id
from nlp import ancillary
from nlp.anchor import AnchorReport, inspect_anchors
from nlp.clickbait import has_clickbait_phrase
from nlp.deixis import DeicticRole, classify_deixis
from nlp.preprocessor import TitlePreprocessor, coerce_title
from nlp.tagger import Tagger, TaggerUnavailable, Token, build_tagger

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 10


@dataclass(frozen=True)
class ClassifierConfig:
    threshold: int = DEFAULT_THRESHOLD


@dataclass(frozen=True)
class ScoreResult:
    score: int = 0
    blocked: bool = False
    reasons: tuple[str, ...] = ()
    diagnostic: Optional[str] = None

    @property
    def reason_text(self) -> str:
        return ", ".join(self.reasons)

    def to_dict(self) -> dict:
        return {"score": self.score, "blocked": self.blocked, "reasons": self.reason_text}


class TitleContext:
    """Per-call view of a title; derived facts are computed at most once."""

    def __init__(self, title: str, tokens: Sequence[Token]):
        self.title = title
        self.tokens = tuple(tokens)

    @cached_property
    def deixis(self) -> DeicticRole:
        return classify_deixis(self.tokens)

    @cached_property
    def anchors(self) -> AnchorReport:
        return inspect_anchors(self.tokens)

    @cached_property
    def caps_words(self) -> list[str]:
        return ancillary.caps_words(self.title)

    @cached_property
    def opener(self) -> Optional[str]:
        return ancillary.vague_opener(self.tokens)


@dataclass(frozen=True)
class Rule:
    id: str
    predicate: Callable[[TitleContext], bool]
    delta: int
    reason: str | Callable[[TitleContext], str]

    def describe(self, ctx: TitleContext) -> str:
        return self.reason(ctx) if callable(self.reason) else self.reason


@dataclass(frozen=True)
class RuleGroup:
    """Mutually exclusive rules: the first leaf that matches is the group's result."""
    id: str
    leaves: tuple[Rule, ...] = field(default_factory=tuple)

    @classmethod
    def single(cls, rule: Rule) -> "RuleGroup":
        return cls(rule.id, (rule,))

    def evaluate(self, ctx: TitleContext) -> Optional[Rule]:
        for leaf in self.leaves:
            if leaf.predicate(ctx):
                return leaf
        return None


# ── Rule registry ─────────────────────────────────────────────────────────────
DEFAULT_RULES: tuple[RuleGroup, ...] = (
    RuleGroup.single(Rule(
        "clickbait_phrase", lambda c: has_clickbait_phrase(c.title), 10,
        "Clickbait/dramatic phrase",
    )),
    RuleGroup("deictic", (
        Rule("deictic_undefined_noun", lambda c: c.deixis is DeicticRole.UNDEFINED_NOUN, 10,
             "Deictic pointing to undefined noun"),
        Rule("deictic_vague_predicate", lambda c: c.deixis is DeicticRole.VAGUE_PREDICATE, 10,
             "Vague predicate adjective"),
        Rule("deictic_standalone", lambda c: c.deixis is DeicticRole.STANDALONE, 10,
             "Standalone vague deictic reference"),
    )),
    RuleGroup.single(Rule(
        "missing_anchor", lambda c: c.anchors.missing, 10,
        "No specific subject/anchor detected",
    )),
    RuleGroup.single(Rule(
        "vague_word", lambda c: ancillary.has_vague_word(c.title), 10,
        "Contains vague word 'something'",
    )),
    RuleGroup.single(Rule(
        "vague_opener", lambda c: c.opener is not None, 10,
        lambda c: f"Vague opener '{c.opener}'",
    )),
    RuleGroup.single(Rule(
        "trailing_teaser", lambda c: ancillary.has_trailing_teaser(c.title), 5,
        "Trailing teaser punctuation",
    )),
    RuleGroup("shouting", (
        Rule("caps_multiple", lambda c: len(c.caps_words) >= 2, 10,
             lambda c: f"Multiple ALL CAPS words ({len(c.caps_words)})"),
        Rule("caps_single", lambda c: len(c.caps_words) == 1, 5,
             "Single ALL CAPS word"),
    )),
    RuleGroup.single(Rule(
        "hidden_object", lambda c: ancillary.has_hidden_object(c.title), 10,
        "Hidden object at end of title",
    )),
)


class TitleClassifier:
    """
    Pure title → ScoreResult function object. The tagger and threshold are
    fixed at construction; nothing is mutated per call, so one instance can
    serve any number of concurrent callers.
    """

    def __init__(
        self,
        tagger: Tagger | None = None,
        config: ClassifierConfig | None = None,
        rules: Sequence[RuleGroup] = DEFAULT_RULES,
    ):
        self.tagger = tagger if tagger is not None else build_tagger()
        self.config = config or ClassifierConfig()
        self.rules = tuple(rules)
        self._pre = TitlePreprocessor()

    def classify(self, title) -> ScoreResult:
        title = coerce_title(title)
        if not self._pre.has_latin_words(title):
            return ScoreResult()

        try:
            tokens = self.tagger.tag(title)
        except TaggerUnavailable as exc:
            logger.warning("Tagger unavailable — title not scored: %s", exc)
            return ScoreResult(diagnostic=f"Tagger unavailable: {exc}")
        except Exception as exc:
            logger.warning("Tagger error (%s) — title not scored", exc)
            return ScoreResult(diagnostic=f"Tagger error: {exc}")
        if not tokens:
            return ScoreResult()

        ctx = TitleContext(title, tokens)
        score = 0
        reasons: list[str] = []
        for group in self.rules:
            hit = group.evaluate(ctx)
            if hit is not None:
                score += hit.delta
                reasons.append(hit.describe(ctx))

        blocked = score >= self.config.threshold
        logger.debug("Title scored %d (blocked=%s): %r %s", score, blocked, title, reasons)
        return ScoreResult(score=score, blocked=blocked, reasons=tuple(reasons))

    __call__ = classify


# ── Module-level singleton cache ──────────────────────────────────────────────
# One classifier per process; identical titles recur across many tiles, so
# results are memoized by normalized title text.
_engine_cache: dict = {}


def _get_engine(key: str, factory):
    """Return cached instance, creating via factory() on first call."""
    if key not in _engine_cache:
        _engine_cache[key] = factory()
    return _engine_cache[key]


def _make_classifier() -> TitleClassifier:
    settings = get_settings()
    tagger = build_tagger(settings.tagger_backend, settings.spacy_model)
    logger.info("Title classifier ready | tagger=%s threshold=%d", tagger.name, settings.block_threshold)
    return TitleClassifier(tagger, ClassifierConfig(threshold=settings.block_threshold))


def _make_memo():
    classifier = get_classifier()
    size = get_settings().classify_cache_size
    if size <= 0:
        return classifier.classify
    return lru_cache(maxsize=size)(classifier.classify)


def get_classifier() -> TitleClassifier:
    return _get_engine("classifier", _make_classifier)


def reset_engine() -> None:
    """Drop the cached classifier (settings changed, tests)."""
    _engine_cache.clear()


def classify_title(title) -> ScoreResult:
    """Classify one title with the process-wide classifier."""
    memo = _get_engine("memo", _make_memo)
    return memo(coerce_title(title))


def classify_titles(titles: Iterable) -> list[ScoreResult]:
    """Classify many titles, in order; repeated titles are scored once."""
    return [classify_title(t) for t in titles]


# ── Combined decision (user rules + heuristics) ───────────────────────────────

@dataclass(frozen=True)
class VideoDecision:
    blocked: bool
    source: Optional[str] = None        # "video_id" | "rule" | "heuristic"
    video_id: Optional[str] = None
    matched_rules: tuple[str, ...] = ()
    heuristic: Optional[ScoreResult] = None


def evaluate_video(
    title,
    href: str | None = None,
    blocklist: BlockList | None = None,
    classifier: TitleClassifier | None = None,
    heuristics_enabled: bool | None = None,
) -> VideoDecision:
    """
    Decide whether a recommendation tile should be hidden. Explicit user
    rules win; the heuristic classifier only runs when they do not match.
    """
    title = coerce_title(title)
    video_id = extract_video_id(href) if href else None
    if blocklist is not None:
        decision = blocklist.check(title, video_id)
        if decision.blocked:
            source = "video_id" if decision.matched_video_id else "rule"
            logger.debug("Blocked by %s: %r", source, title)
            return VideoDecision(True, source, video_id, decision.matched_rules)

    if heuristics_enabled is None:
        heuristics_enabled = get_settings().heuristics_enabled
    if not heuristics_enabled:
        return VideoDecision(False, video_id=video_id)

    result = classifier.classify(title) if classifier is not None else classify_title(title)
    return VideoDecision(
        blocked=result.blocked,
        source="heuristic" if result.blocked else None,
        video_id=video_id,
        heuristic=result,
    )
