"""
TitleGuard — Title Preprocessor
Normalizes raw video titles before tagging. Case is preserved on purpose:
the ALL-CAPS and proper-noun heuristics read capitalization from the title.
"""
import logging
import re
import unicodedata

logger = logging.getLogger(__name__)

# ── Patterns ──────────────────────────────────────────────────────────────────
_LATIN = "A-Za-z0-9À-ÖØ-öø-ɏ"
_HTML_TAG_PATTERN = re.compile(r"</?[A-Za-z][^<>]*>")
_WHITESPACE_PATTERN = re.compile(r"\s+")
_WORD_PATTERN = re.compile(rf"[{_LATIN}$][{_LATIN}%]*(?:[.,'][{_LATIN}]+)*")
_LATIN_WORD_PATTERN = re.compile(rf"[{_LATIN}]")

_CHAR_MAP = str.maketrans({
    "‘": "'", "’": "'", "‛": "'", "′": "'",
    "“": '"', "”": '"', "„": '"',
    "–": "-", "—": "-", "−": "-",
})


def coerce_title(value) -> str:
    """
    Turn whatever the caller handed us into a clean title string.
    None and non-string values become "" instead of raising.
    """
    if value is None:
        return ""
    if isinstance(value, (bytes, bytearray)):
        value = bytes(value).decode("utf-8", errors="replace")
    elif not isinstance(value, str):
        logger.debug("Non-string title of type %s normalized to empty", type(value).__name__)
        return ""
    return TitlePreprocessor().clean(value)


class TitlePreprocessor:
    """
    Small cleaning pipeline for video titles.

    Pipeline:
        1. strip_html       — remove stray markup copied from the page
        2. strip_control    — drop control / format characters
        3. nfkc             — fold full-width forms, "…" becomes "..."
        4. ascii_punct      — curly quotes and dashes to ASCII
        5. whitespace       — collapse runs, strip ends
    """

    def clean(self, text: str) -> str:
        text = _HTML_TAG_PATTERN.sub(" ", text)
        text = "".join(
            ch for ch in text
            if ch.isspace() or not unicodedata.category(ch).startswith("C")
        )
        text = unicodedata.normalize("NFKC", text).translate(_CHAR_MAP)
        return _WHITESPACE_PATTERN.sub(" ", text).strip()

    def words(self, text: str) -> list[str]:
        """Latin-script word tokens; inner apostrophes and number punctuation are kept."""
        return _WORD_PATTERN.findall(text)

    def has_latin_words(self, text: str) -> bool:
        return bool(_LATIN_WORD_PATTERN.search(text))
