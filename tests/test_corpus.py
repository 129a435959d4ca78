"""
Tests for Corpus

Document folding, document frequencies and the process pool path.
"""

import logging
import math

import pytest

import Hooks
from Corpus import Corpus, extract
from Wordbag import Wordbag

DOCUMENTS = [
    "the cat sat on the mat",
    "the dog sat",
    "a cat and a dog",
]


class TestCorpus:
    """Tests for Corpus accumulation."""

    def test_extract(self):
        """extract builds a plain term bag for one text."""
        bag = extract("b a b")
        assert isinstance(bag, Wordbag)
        assert bag.get_words() == {"a": 1, "b": 2}

    def test_add_document(self):
        corpus = Corpus()
        corpus.add_document("the cat sat on the mat")
        assert corpus.documents == 1
        assert corpus.terms.word_count("the") == 2
        assert corpus.occurrences.word_count("the") == 1

    def test_add_documents_folds_all(self):
        corpus = Corpus()
        corpus.add_documents(DOCUMENTS)
        assert corpus.documents == 3
        assert corpus.terms.total_count() == 14
        assert corpus.occurrences.get_words()["the"] == 2
        assert corpus.occurrences.get_words()["a"] == 1
        assert corpus.occurrences.get_words()["cat"] == 2

    def test_statistics_delegate(self):
        corpus = Corpus()
        corpus.add_documents(DOCUMENTS)
        assert math.isclose(corpus.tf("the"), 3 / 14)
        total = corpus.occurrences.total_count()
        assert math.isclose(corpus.idf("mat"), math.log10(total / 1))
        assert corpus.idf("unknown") == 0.0

    def test_chi2_against_corpus(self):
        corpus = Corpus()
        corpus.add_documents(DOCUMENTS)
        doc = extract("the cat sat")
        assert corpus.chi2(doc) == doc.chi2(corpus.terms)
        assert corpus.chi2(doc) > 0.0

    def test_hooks_are_applied(self):
        corpus = Corpus(mapper=Hooks.lowercase, discard=Hooks.is_empty)
        corpus.add_documents(["The  CAT", "the cat "])
        assert corpus.terms.get_words() == {"the": 2, "cat": 2}
        assert corpus.occurrences.get_words() == {"the": 2, "cat": 2}

    def test_clear(self):
        corpus = Corpus()
        corpus.add_documents(DOCUMENTS)
        corpus.clear()
        assert corpus.documents == 0
        assert corpus.terms.total_count() == 0
        assert corpus.occurrences.total_words() == 0

    @pytest.mark.parametrize("processes", [1, 2])
    def test_pool_matches_serial(self, processes):
        """The pool gives the same bags as in-process extraction."""
        serial = Corpus(processes=1)
        serial.add_documents(DOCUMENTS)

        pooled = Corpus(mapper=None, discard=Hooks.stopword_filter(["the"]), processes=processes)
        pooled.add_documents(DOCUMENTS)
        serial_filtered = Corpus(discard=Hooks.stopword_filter(["the"]), processes=1)
        serial_filtered.add_documents(DOCUMENTS)

        assert pooled.terms == serial_filtered.terms
        assert pooled.occurrences == serial_filtered.occurrences
        assert pooled.documents == serial.documents == 3
        assert "the" not in pooled.terms

    def test_logs_progress(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="Corpus"):
            Corpus().add_documents(DOCUMENTS)
        assert "3 documents" in caplog.text
