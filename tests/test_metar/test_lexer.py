"""Tests for the METAR lexer."""

import pytest

from metar_taf.metar.lexer import tokenize, TokenStream


class TestTokenize:
    """Test splitting report text into tokens."""

    def test_single_spaces(self):
        assert tokenize("EGLL 021250Z 23009KT") == ["EGLL", "021250Z", "23009KT"]

    def test_whitespace_runs_collapse(self):
        assert tokenize("EGLL   021250Z\t23009KT\n") == ["EGLL", "021250Z", "23009KT"]

    def test_leading_and_trailing_whitespace(self):
        assert tokenize("  EGLL 021250Z  ") == ["EGLL", "021250Z"]

    def test_empty_string(self):
        assert tokenize("") == []

    def test_blank_string(self):
        assert tokenize("   \t ") == []


class TestTokenStream:
    """Test the token cursor used by the parser."""

    def test_peek_does_not_consume(self):
        stream = TokenStream(["A", "B"])
        assert stream.peek() == "A"
        assert stream.peek() == "A"
        assert len(stream) == 2

    def test_pop_in_order(self):
        stream = TokenStream.from_text("A B C")
        assert stream.pop() == "A"
        assert stream.pop() == "B"
        assert stream.remaining() == ["C"]

    def test_exhausted(self):
        stream = TokenStream(["A"])
        stream.pop()
        assert not stream
        assert stream.peek() is None
        assert stream.pop() is None

    def test_push_back(self):
        stream = TokenStream(["A", "B"])
        stream.pop()
        stream.pop()
        stream.push_back()
        assert stream.pop() == "B"

    def test_push_back_at_start_raises(self):
        stream = TokenStream(["A"])
        with pytest.raises(IndexError):
            stream.push_back()

    def test_drain(self):
        stream = TokenStream.from_text("RMK AO2 SLP186")
        stream.pop()
        assert stream.drain() == ["AO2", "SLP186"]
        assert not stream
