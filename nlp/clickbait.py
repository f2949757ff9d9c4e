"""
TitleGuard — Clickbait Phrase Rules
Regex library of dramatic / curiosity-gap phrasing seen in video titles.
Any single hit is enough; several synonymous hits still count once.
"""
import re

# ── Pattern library ───────────────────────────────────────────────────────────
_SENSATIONAL = [
    r"\byou won'?t believe\b", r"\bshocking\b", r"\bunbelievable\b",
    r"\bjaw[\s-]?dropping\b", r"\bmind[\s-]?blowing\b", r"\bgone wrong\b",
    r"\bexposed\b", r"\b(?:almost|nearly) (?:killed|died)\b",
]
_MYSTERY = [
    r"\band (?:this|that|then this) happened\b", r"\bwhat happen(?:s|ed) next\b",
    r"\bthe reason why\b", r"\bno one (?:is talking about|knows|expected)\b",
    r"\bnobody (?:is talking about|knows|expected)\b", r"\byou need to (?:see|know)\b",
    r"\bwait (?:for|till|until) (?:it|the end)\b", r"\bthe truth about\b",
]
_AUTHORITY = [
    r"\bsecrets? (?:they|nobody|no one|doctors|banks)\b",
    r"\b(?:doctors|experts|banks|they) (?:hate|don'?t want you to know)\b",
    r"\bthe real reason\b", r"\bone (?:weird|simple|little) trick\b",
]
_HYPERBOLE = [
    r"\binsane\b", r"\bviral\b", r"\bchanged my life\b", r"\bbest (?:ever|of all time)\b",
    r"\bworst (?:ever|of all time)\b", r"\bmust[\s-]?(?:see|watch)\b",
    r"\b(?:rich|millionaire) overnight\b", r"\b(?:make|made) you rich\b",
]
_URGENCY = [
    r"\bbefore it'?s (?:too late|deleted|gone)\b", r"\blimited (?:spots|time|offer)\b",
    r"\b(?:act|watch|buy) (?:now|fast|before)\b", r"\bwin (?:a )?free\b",
    r"\bdon'?t miss\b", r"\bstop doing this\b",
]

CLICKBAIT_PATTERNS = {
    "sensational": _SENSATIONAL,
    "mystery": _MYSTERY,
    "authority": _AUTHORITY,
    "hyperbole": _HYPERBOLE,
    "urgency": _URGENCY,
}

_ALL_PHRASES = [
    (group, re.compile(p, re.IGNORECASE))
    for group, patterns in CLICKBAIT_PATTERNS.items()
    for p in patterns
]


def find_clickbait_phrases(title: str) -> list[tuple[str, str]]:
    """Every (group, matched text) pair, in library order. Used for diagnostics."""
    hits = []
    for group, pattern in _ALL_PHRASES:
        m = pattern.search(title)
        if m:
            hits.append((group, m.group(0)))
    return hits


def has_clickbait_phrase(title: str) -> bool:
    return any(pattern.search(title) for _, pattern in _ALL_PHRASES)
