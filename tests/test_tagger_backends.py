"""
TitleGuard — Tagger Backend Tests
The spaCy backend is exercised with a stand-in pipeline so no model
download is needed.
Run: pytest tests/test_tagger_backends.py -v
"""
import sys
from pathlib import Path
from types import SimpleNamespace

sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest


def _tok(text, pos, ent="", punct=False):
    return SimpleNamespace(text=text, pos_=pos, ent_type_=ent, is_punct=punct, is_space=False)


class FakePipeline:
    """Returns a fixed doc regardless of input."""

    def __init__(self, doc):
        self.doc = doc
        self.calls = []

    def __call__(self, text):
        self.calls.append(text)
        return self.doc


class TestSpacyTagger:
    def test_maps_pos_and_entities(self):
        from nlp.tagger import SpacyTagger, Tag
        doc = [
            _tok("Taylor", "PROPN", "PERSON"),
            _tok("Swift", "PROPN", "PERSON"),
            _tok("Visits", "VERB"),
            _tok("Paris", "PROPN", "GPE"),
            _tok("!", "PUNCT", punct=True),
        ]
        tokens = SpacyTagger(nlp=FakePipeline(doc)).tag("Taylor Swift Visits Paris!")
        assert [t.text for t in tokens] == ["Taylor", "Swift", "Visits", "Paris"]
        assert tokens[0].has(Tag.PERSON) and tokens[0].has(Tag.PROPER_NOUN)
        assert tokens[2].tags == frozenset({Tag.VERB})
        assert tokens[3].has(Tag.PLACE)

    def test_deictic_words_are_determiners(self):
        from nlp.tagger import SpacyTagger, Tag
        doc = [_tok("You", "PRON"), _tok("need", "VERB"), _tok("this", "PRON"), _tok("trick", "NOUN")]
        tokens = SpacyTagger(nlp=FakePipeline(doc)).tag("You need this trick")
        assert tokens[2].tags == frozenset({Tag.DETERMINER})
        assert tokens[3].is_noun

    def test_numbers_are_values(self):
        from nlp.tagger import SpacyTagger, Tag
        doc = [_tok("10", "NUM", "CARDINAL"), _tok("Tips", "NOUN")]
        tokens = SpacyTagger(nlp=FakePipeline(doc)).tag("10 Tips")
        assert tokens[0].has(Tag.VALUE)

    def test_classifier_runs_on_spacy_tokens(self):
        from nlp.tagger import SpacyTagger
        from scoring.engine import TitleClassifier
        doc = [_tok("You", "PRON"), _tok("need", "VERB"), _tok("this", "DET"), _tok("trick", "NOUN")]
        result = TitleClassifier(SpacyTagger(nlp=FakePipeline(doc))).classify("You need this trick")
        assert result.blocked is True
        assert "Deictic pointing to undefined noun" in result.reasons

    def test_missing_model_raises_unavailable(self):
        from nlp.tagger import SpacyTagger, TaggerUnavailable
        tagger = SpacyTagger(model="definitely_not_a_model")
        with pytest.raises(TaggerUnavailable):
            tagger.tag("You need this trick")

    def test_pipeline_error_raises_unavailable(self):
        from nlp.tagger import SpacyTagger, TaggerUnavailable

        def broken(text):
            raise RuntimeError("boom")

        with pytest.raises(TaggerUnavailable, match="boom"):
            SpacyTagger(nlp=broken).tag("anything")

    def test_symbols_are_skipped(self):
        from nlp.tagger import SpacyTagger
        doc = [_tok("🔥", "SYM"), _tok("This", "PRON"), _tok("is", "AUX"), _tok("how", "SCONJ")]
        tokens = SpacyTagger(nlp=FakePipeline(doc)).tag("🔥 This is how")
        assert [t.normal for t in tokens] == ["this", "is", "how"]

    def test_split_contraction_keeps_idiom(self):
        from nlp.ancillary import vague_opener
        from nlp.tagger import SpacyTagger
        doc = [_tok("It", "PRON"), _tok("'s", "AUX"), _tok("time", "NOUN"), _tok("to", "PART"), _tok("cook", "VERB")]
        tokens = SpacyTagger(nlp=FakePipeline(doc)).tag("It's time to cook")
        assert vague_opener(tokens) is None

    def test_classifier_fails_open_on_missing_model(self):
        from nlp.tagger import SpacyTagger
        from scoring.engine import TitleClassifier
        result = TitleClassifier(SpacyTagger(model="definitely_not_a_model")).classify("You need this trick")
        assert result.blocked is False
        assert result.score == 0
        assert result.diagnostic


class TestBuildTagger:
    def test_lexicon_backend(self):
        from nlp.tagger import LexiconTagger, build_tagger
        assert isinstance(build_tagger("lexicon"), LexiconTagger)

    def test_default_prefers_spacy(self, monkeypatch):
        from nlp.tagger import SpacyTagger, build_tagger

        def load_fake(self):
            self._loaded = True
            self._nlp = FakePipeline([])

        monkeypatch.setattr(SpacyTagger, "_load_model", load_fake)
        tagger = build_tagger()
        assert isinstance(tagger, SpacyTagger)
        assert tagger.model == "en_core_web_sm"

    def test_unknown_backend_falls_back(self):
        from nlp.tagger import LexiconTagger, build_tagger
        assert isinstance(build_tagger("bogus"), LexiconTagger)

    def test_spacy_without_model_falls_back(self):
        from nlp.tagger import LexiconTagger, build_tagger
        assert isinstance(build_tagger("spacy", "definitely_not_a_model"), LexiconTagger)


class TestSettings:
    def test_defaults(self, monkeypatch):
        from config import Settings
        monkeypatch.delenv("TAGGER_BACKEND", raising=False)
        s = Settings(_env_file=None)
        assert s.block_threshold == 10
        assert s.tagger_backend == "spacy"
        assert s.heuristics_enabled is True

    def test_env_override(self, monkeypatch):
        from config import Settings
        monkeypatch.setenv("BLOCK_THRESHOLD", "25")
        monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example")
        s = Settings(_env_file=None)
        assert s.block_threshold == 25
        assert s.allowed_origins_list == ["https://a.example", "https://b.example"]
