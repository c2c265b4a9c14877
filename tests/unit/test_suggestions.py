"""
Unit tests for typo and grammar review sessions.
"""
from unittest.mock import Mock

import pytest

from sheet_grammar.schemas.typos import TypoSuggestion
from sheet_grammar.services.suggestions import (
    GrammarReview,
    TypoReviewSession,
    merge_replacements,
    similar_words,
)


class TestSimilarWords:
    @pytest.mark.parametrize(
        "word1, word2, expected",
        [
            ("teh", "the", True),
            ("Teh", "tehran", False),
            ("colour", "Color", True),
            ("cat", "dog", False),
            ("a", "abc", True),
            ("a", "abcd", False),
            ("", "", True),
            ("", "a", False),
        ],
    )
    def test_similarity(self, word1, word2, expected):
        assert similar_words(word1, word2) is expected

    @pytest.mark.parametrize(
        "word1, word2",
        [("teh", "the"), ("Kubernetes", "kube"), ("", "x"), ("Ábaco", "ábacos"), ("short", "sh")],
    )
    def test_symmetric(self, word1, word2):
        assert similar_words(word1, word2) == similar_words(word2, word1)


class TestMergeReplacements:
    def test_model_order_first_then_dictionary(self):
        typo = TypoSuggestion(word="kubernets", replacements=["kubernetes"])

        options = merge_replacements(typo, ["Kubernetes", "docker", "kubectl", "k8s"])

        # "kubectl" is only two characters shorter, so the heuristic keeps it
        assert options == ["kubernetes", "Kubernetes", "kubectl"]

    def test_dictionary_duplicates_dropped(self):
        typo = TypoSuggestion(word="teh", replacements=["the", "tea", "the"])

        options = merge_replacements(typo, ["the", "ten"])

        assert options == ["the", "tea", "ten"]

    def test_no_model_replacements(self):
        typo = TypoSuggestion(word="postgress", replacements=[])

        assert merge_replacements(typo, ["Postgres"]) == ["Postgres"]


@pytest.fixture
def apply_text():
    return Mock(return_value=True)


class TestTypoReviewSession:
    def test_global_replace(self, settings_store, apply_text):
        session = TypoReviewSession(
            "I teh went to the the store",
            [TypoSuggestion(word="teh", replacements=["the"])],
            settings_store,
            apply_text,
        )

        session.replace(0, "the")
        session.finalize()

        assert session.corrected_text == "I the went to the the store"
        apply_text.assert_called_once_with("I the went to the the store")

    def test_every_occurrence_replaced(self, settings_store, apply_text):
        session = TypoReviewSession(
            "teh cat and teh dog, tehn",
            [TypoSuggestion(word="teh", replacements=["the"])],
            settings_store,
            apply_text,
        )

        session.replace(0, "the")

        assert session.corrected_text == "the cat and the dog, then"

    def test_replacement_is_literal(self, settings_store, apply_text):
        session = TypoReviewSession(
            "costs 5.0 or 5x0",
            [TypoSuggestion(word="5.0", replacements=["five"])],
            settings_store,
            apply_text,
        )

        session.replace(0, "five")

        assert session.corrected_text == "costs five or 5x0"

    def test_substitutions_accumulate_until_finalize(self, settings_store, apply_text):
        session = TypoReviewSession(
            "teh wrold is big",
            [
                TypoSuggestion(word="teh", replacements=["the"]),
                TypoSuggestion(word="wrold", replacements=["world"]),
            ],
            settings_store,
            apply_text,
        )

        session.replace(0, "the")
        session.replace(1, "world")
        apply_text.assert_not_called()

        assert session.finalize() is True
        apply_text.assert_called_once_with("the world is big")

    def test_keep_original_leaves_text(self, settings_store, apply_text):
        session = TypoReviewSession(
            "teh wrold",
            [
                TypoSuggestion(word="teh", replacements=["the"]),
                TypoSuggestion(word="wrold", replacements=["world"]),
            ],
            settings_store,
            apply_text,
        )

        session.keep_original(0)
        session.replace(1, "world")
        session.finalize()

        apply_text.assert_called_once_with("teh world")
        assert session.open_entries == []

    def test_closed_typo_ignores_further_choices(self, settings_store, apply_text):
        session = TypoReviewSession(
            "teh",
            [TypoSuggestion(word="teh", replacements=["the", "tea"])],
            settings_store,
            apply_text,
        )

        assert session.keep_original(0) is True
        assert session.replace(0, "the") is False
        assert session.corrected_text == "teh"

    def test_unknown_index_raises(self, settings_store, apply_text):
        session = TypoReviewSession(
            "teh", [TypoSuggestion(word="teh", replacements=["the"])], settings_store, apply_text
        )

        with pytest.raises(IndexError):
            session.replace(5, "the")

    def test_finalize_without_changes_writes_nothing(self, settings_store, apply_text):
        session = TypoReviewSession(
            "teh", [TypoSuggestion(word="teh", replacements=["the"])], settings_store, apply_text
        )

        session.keep_original(0)

        assert session.finalize() is False
        apply_text.assert_not_called()

    def test_finalize_only_once(self, settings_store, apply_text):
        session = TypoReviewSession(
            "teh", [TypoSuggestion(word="teh", replacements=["the"])], settings_store, apply_text
        )
        session.replace(0, "the")

        assert session.finalize() is True
        assert session.finalize() is False
        apply_text.assert_called_once()

    def test_add_and_replace_updates_dictionary(self, settings_store, apply_text):
        session = TypoReviewSession(
            "we use kubernets",
            [TypoSuggestion(word="kubernets", replacements=["kubernetes"])],
            settings_store,
            apply_text,
        )

        assert session.add_and_replace(0, "  Kubernetes ") is True

        assert settings_store.get_dictionary() == ["Kubernetes"]
        assert session.corrected_text == "we use Kubernetes"

    def test_add_and_replace_blank_is_noop(self, settings_store, apply_text):
        session = TypoReviewSession(
            "teh", [TypoSuggestion(word="teh", replacements=["the"])], settings_store, apply_text
        )

        assert session.add_and_replace(0, "   ") is False
        assert settings_store.get_dictionary() == []
        assert session.entries[0].closed is False

    def test_dictionary_words_added_to_options(self, settings_store, apply_text):
        settings_store.add_word("Postgres")
        settings_store.add_word("Python")

        session = TypoReviewSession(
            "postgress",
            [TypoSuggestion(word="postgress", replacements=["postgres"])],
            settings_store,
            apply_text,
        )

        assert session.entries[0].options == ["postgres", "Postgres"]

    def test_typos_without_options_are_skipped(self, settings_store, apply_text):
        session = TypoReviewSession(
            "teh xyzzy",
            [
                TypoSuggestion(word="xyzzy", replacements=[]),
                TypoSuggestion(word="teh", replacements=["the"]),
            ],
            settings_store,
            apply_text,
        )

        assert [entry.word for entry in session.entries] == ["teh"]
        assert session.entries[0].index == 0

    def test_view_reflects_state(self, settings_store, apply_text):
        session = TypoReviewSession(
            "teh", [TypoSuggestion(word="teh", replacements=["the"])], settings_store, apply_text
        )

        session.replace(0, "the")
        dialog = session.view()

        assert dialog.title == "Fix Typos"
        assert dialog.entries[0].closed is True
        assert dialog.corrected_text == "the"


class TestGrammarReview:
    def test_accept_writes_improved_text_verbatim(self, apply_text):
        review = GrammarReview("i has a apple", "I have an apple.", apply_text)

        assert review.accept() is True

        apply_text.assert_called_once_with("I have an apple.")

    def test_cancel_writes_nothing(self, apply_text):
        review = GrammarReview("i has a apple", "I have an apple.", apply_text)

        review.cancel()

        assert review.accept() is False
        apply_text.assert_not_called()

    def test_view(self, apply_text):
        dialog = GrammarReview("before", "after", apply_text).view()

        assert dialog.original_text == "before"
        assert dialog.improved_text == "after"
