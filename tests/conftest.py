"""
TitleGuard — shared pytest setup
Tests run against the deterministic lexicon tagger so results do not depend
on which spaCy model happens to be installed.
"""
import os

os.environ.setdefault("TAGGER_BACKEND", "lexicon")
