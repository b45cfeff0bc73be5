"""
Tests for the Spanish number parser.

Tests:
- Literal numerals
- Number words and compounds
- First-number-wins policy
- Utterances without numbers
"""

import pytest

from ..engine_core.number_parser import (
    NumberParser,
    NUMBER_WORDS,
    parse_number,
    recognition_phrases,
    tokenize,
)


@pytest.fixture
def parser():
    return NumberParser()


class TestTokenize:
    """Tests for utterance tokenization."""

    def test_splits_on_whitespace_and_punctuation(self):
        assert tokenize("hola, mundo. 3:4;5") == ["hola", "mundo", "3", "4", "5"]

    def test_drops_empty_tokens(self):
        assert tokenize("  ,, . ") == []
        assert tokenize("") == []


class TestLiteralNumbers:
    """Tests for digit tokens."""

    def test_every_number_in_default_range(self, parser):
        """Every numeral from 0 to 100 parses to itself."""
        for n in range(0, 101):
            assert parser.parse(str(n)) == n

    def test_negative_literal(self, parser):
        assert parser.parse("-5") == -5

    def test_numeral_inside_sentence(self, parser):
        assert parser.parse("creo que es el 42") == 42

    def test_numeral_with_punctuation(self, parser):
        assert parser.parse("42.") == 42
        assert parser.parse("número:15") == 15

    def test_numeral_wrapped_in_punctuation(self, parser):
        """Digits and words are trimmed the same way."""
        assert parser.parse("¿40?") == 40
        assert parser.parse("¡40!") == 40
        assert parser.parse("(40)") == 40
        assert parser.parse("¿cuarenta?") == 40
        assert parser.parse('"-5"') == -5

    def test_first_literal_wins(self, parser):
        assert parser.parse("el 42 o el 17") == 42


class TestNumberWords:
    """Tests for Spanish number words."""

    @pytest.mark.parametrize("word,value", sorted(NUMBER_WORDS.items()))
    def test_vocabulary(self, parser, word, value):
        """Each vocabulary word parses, in any case."""
        assert parser.parse(word) == value
        assert parser.parse(word.upper()) == value
        assert parser.parse(word.capitalize()) == value

    def test_accented_and_plain_sixteen(self, parser):
        assert parser.parse("dieciséis") == 16
        assert parser.parse("dieciseis") == 16

    def test_veinti_compounds(self, parser):
        assert parser.parse("veintidós") == 22
        assert parser.parse("veintiuno") == 21
        assert parser.parse("Veintitrés") == 23
        assert parser.parse("veintinueve") == 29

    def test_veinti_prefix_resolution(self, parser):
        """Unlisted spellings still resolve through the prefix rule."""
        assert parser.resolve_word("veintiún") == 21
        assert parser.resolve_word("veintiséis") == 26
        assert parser.resolve_word("veinti") is None
        assert parser.resolve_word("veintidiez") is None

    def test_y_compounds(self, parser):
        assert parser.parse("treinta y cinco") == 35
        assert parser.parse("cuarenta y dos") == 42
        assert parser.parse("noventa y nueve") == 99
        assert parser.parse("Treinta Y Cinco") == 35

    def test_y_compound_inside_sentence(self, parser):
        assert parser.parse("pues creo que cincuenta y dos") == 52

    def test_y_compound_phrase_as_single_word(self, parser):
        assert parser.resolve_word("treinta y cinco") == 35
        assert parser.resolve_word("diez y seis") is None
        assert parser.resolve_word("cien y uno") is None

    def test_incomplete_compound_keeps_tens(self, parser):
        assert parser.parse("treinta y") == 30
        assert parser.parse("treinta y nada") == 30
        assert parser.parse("cien y uno") == 100

    def test_words_with_question_marks(self, parser):
        assert parser.parse("¿cincuenta?") == 50

    def test_no_words_above_cien(self, parser):
        assert parser.parse("ciento") is None
        assert parser.parse("doscientos") is None

    def test_first_number_wins(self, parser):
        assert parser.parse("cinco o seis") == 5
        assert parser.parse("tres 40") == 3


class TestNotFound:
    """Utterances without a number."""

    @pytest.mark.parametrize("text", ["", "   ", "xyz", "y", "hola que tal", None])
    def test_not_found(self, parser, text):
        assert parser.parse(text) is None

    def test_convenience_function(self):
        assert parse_number("veinte") == 20
        assert parse_number("nada") is None


class TestRecognitionPhrases:
    """Speech context phrases for recognizers."""

    def test_contains_digits_and_words(self):
        phrases = recognition_phrases()
        for expected in ["0", "10", "50", "100", "cero", "diez", "veinte", "noventa", "cien"]:
            assert expected in phrases

    def test_no_duplicates(self):
        phrases = recognition_phrases()
        assert len(phrases) == len(set(phrases))
