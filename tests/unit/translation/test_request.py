"""
Tests for argument parsing and request interpretation.

Covers:
- parse_arguments: positional phrases, quoting, the -m flag, defaults
- interpret: validation order, lookback defaults, query priority
"""

import pytest
from pydantic import ValidationError

from synus.translation.errors import InvalidLanguageCode, NoTranslatableTarget
from synus.translation.languages import LANGUAGE_NAMES, LanguageRegistry, get_registry
from synus.translation.models import TranslationArguments, TranslationRequest
from synus.translation.request import interpret, parse_arguments


@pytest.fixture
def registry():
    return LanguageRegistry({"en": "English", "fr": "French", "es": "Spanish", "it": "Italian"})


# ---------------------------------------------------------------------------
# parse_arguments
# ---------------------------------------------------------------------------

class TestParseArguments:
    def test_empty_text_uses_defaults(self):
        args = parse_arguments("")
        assert args == TranslationArguments(source="auto", target="en", query=None, message_index=0)

    def test_source_only(self):
        args = parse_arguments("fr")
        assert args.source == "fr"
        assert args.target == "en"
        assert args.query is None

    def test_source_target_and_query(self):
        args = parse_arguments("fr en Bonjour tout le monde")
        assert (args.source, args.target) == ("fr", "en")
        assert args.query == "Bonjour tout le monde"

    def test_query_keeps_inner_whitespace(self):
        args = parse_arguments("fr en Bonjour\n\ncomment  ça va")
        assert args.query == "Bonjour\n\ncomment  ça va"

    def test_quoted_phrases(self):
        args = parse_arguments('"fr" "en" salut')
        assert (args.source, args.target, args.query) == ("fr", "en", "salut")

    def test_unterminated_quote_is_a_plain_word(self):
        args = parse_arguments('"fr en salut')
        assert args.source == '"fr'

    @pytest.mark.parametrize("flag", ["-m 3", "-m3", "-m=3", "-m = 3"])
    def test_lookback_flag_forms(self, flag):
        args = parse_arguments(f"de it {flag}")
        assert args.message_index == 3
        assert (args.source, args.target) == ("de", "it")
        assert args.query is None

    def test_lookback_flag_first(self):
        args = parse_arguments("-m 2 es en")
        assert args.message_index == 2
        assert (args.source, args.target) == ("es", "en")

    def test_lookback_flag_negative(self):
        assert parse_arguments("-m -1").message_index == -1

    def test_lookback_flag_inside_query_is_removed(self):
        args = parse_arguments("fr en bonjour -m 4 le monde")
        assert args.message_index == 4
        assert args.query == "bonjour   le monde"

    def test_flag_without_number_stays_in_query(self):
        args = parse_arguments("fr en -m beaucoup")
        assert args.message_index == 0
        assert args.query == "-m beaucoup"

    def test_custom_defaults(self):
        args = parse_arguments("", default_source="de", default_target="fr")
        assert (args.source, args.target) == ("de", "fr")

    def test_codes_are_not_normalised_by_parser(self):
        args = parse_arguments("FR EN hi")
        assert (args.source, args.target) == ("FR", "EN")


# ---------------------------------------------------------------------------
# interpret
# ---------------------------------------------------------------------------

class TestInterpretLanguageValidation:
    def test_auto_source_accepted(self, registry):
        request = interpret(TranslationArguments(query="hola"), registry)
        assert request.source_language == "auto"
        assert request.target_language == "en"

    def test_codes_lower_cased(self, registry):
        request = interpret(TranslationArguments(source="FR", target="ES", query="x"), registry)
        assert (request.source_language, request.target_language) == ("fr", "es")

    def test_auto_is_case_insensitive(self, registry):
        request = interpret(TranslationArguments(source="AUTO", query="x"), registry)
        assert request.source_language == "auto"

    def test_invalid_source(self, registry):
        with pytest.raises(InvalidLanguageCode) as exc_info:
            interpret(TranslationArguments(source="Xx", target="en", query="x"), registry)
        assert exc_info.value.role == "source"
        assert exc_info.value.code == "Xx"
        assert exc_info.value.display_code == "XX"
        assert "XX" in str(exc_info.value)

    def test_invalid_target(self, registry):
        with pytest.raises(InvalidLanguageCode) as exc_info:
            interpret(TranslationArguments(source="fr", target="klingon", query="x"), registry)
        assert exc_info.value.role == "target"
        assert exc_info.value.display_code == "KLINGON"

    def test_auto_is_not_a_valid_target(self, registry):
        with pytest.raises(InvalidLanguageCode):
            interpret(TranslationArguments(target="auto", query="x"), registry)

    def test_source_checked_before_target(self, registry):
        with pytest.raises(InvalidLanguageCode) as exc_info:
            interpret(TranslationArguments(source="aa1", target="bb2", query="x"), registry)
        assert exc_info.value.role == "source"

    def test_language_checked_before_lookback(self, registry):
        """An invalid code wins over an invalid lookback index."""
        with pytest.raises(InvalidLanguageCode):
            interpret(TranslationArguments(target="zz", message_index=-3), registry)

    @pytest.mark.parametrize("target", sorted(LANGUAGE_NAMES))
    def test_every_registry_code_is_accepted_as_target(self, target):
        request = interpret(
            TranslationArguments(source="auto", target=target, query="x"), get_registry()
        )
        assert request.target_language == target


class TestInterpretTextSource:
    def test_query_used_verbatim(self, registry):
        request = interpret(TranslationArguments(query="  Bonjour  le monde "), registry)
        assert request.query_text == "  Bonjour  le monde "
        assert not request.uses_lookback

    @pytest.mark.parametrize("index", [-5, 0, 1, 7])
    def test_query_wins_over_lookback(self, registry, index):
        request = interpret(TranslationArguments(query="hola", message_index=index), registry)
        assert request.query_text == "hola"
        assert request.message_lookback == 0

    def test_unset_lookback_defaults_to_previous_message(self, registry):
        request = interpret(TranslationArguments(), registry)
        assert request.query_text is None
        assert request.message_lookback == 1
        assert request.uses_lookback

    def test_explicit_lookback_kept(self, registry):
        request = interpret(TranslationArguments(message_index=4), registry)
        assert request.message_lookback == 4

    @pytest.mark.parametrize("index", [-1, -10])
    def test_negative_lookback_without_query_fails(self, registry, index):
        with pytest.raises(NoTranslatableTarget):
            interpret(TranslationArguments(message_index=index), registry)

    def test_empty_query_counts_as_absent(self, registry):
        request = interpret(TranslationArguments(query=""), registry)
        assert request.message_lookback == 1


class TestTranslationRequestModel:
    def test_request_without_text_source_rejected(self):
        with pytest.raises(ValidationError):
            TranslationRequest(source_language="auto", target_language="en")

    def test_request_is_frozen(self):
        request = TranslationRequest(source_language="auto", target_language="en", query_text="x")
        with pytest.raises(ValidationError):
            request.target_language = "fr"
