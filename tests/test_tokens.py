import io
import logging

import pytest

from myrtle.core import AppConfig
from myrtle.framework.base_interpreter import BaseInterpreter, TokenSource, load_lexer


@pytest.fixture(scope="module")
def lexer():
    return load_lexer(AppConfig.get_grammar_path(AppConfig.GRAMMAR_FILE))


class TestTokenSource:
    def test_splits_on_any_whitespace(self, lexer) -> None:
        src = TokenSource(io.StringIO("pendown  penchar\t*\n\nforward 3\r\n"), lexer)
        assert list(src) == ["pendown", "penchar", "*", "forward", "3"]

    def test_end_of_stream_is_none(self, lexer) -> None:
        src = TokenSource(io.StringIO("left"), lexer)
        assert src.next_token() == "left"
        assert src.next_token() is None
        assert src.next_token() is None

    def test_empty_stream(self, lexer) -> None:
        assert TokenSource(io.StringIO("   \n\n"), lexer).next_token() is None

    def test_tokens_are_plain_strings(self, lexer) -> None:
        token = TokenSource(io.StringIO("hyper"), lexer).next_token()
        assert type(token) is str

    def test_tracks_source_line(self, lexer) -> None:
        src = TokenSource(io.StringIO("left\n\nright\n"), lexer)
        src.next_token()
        assert src.source_line == 1
        src.next_token()
        assert src.source_line == 3

    def test_reads_lazily(self, lexer) -> None:
        stream = io.StringIO("stop\nthis line is not read yet\n")
        src = TokenSource(stream, lexer)
        assert src.next_token() == "stop"
        assert stream.readline() == "this line is not read yet\n"


class TestNumberConversion:
    @pytest.fixture
    def interp(self, lexer) -> BaseInterpreter:
        return BaseInterpreter(TokenSource(io.StringIO(""), lexer))

    @pytest.mark.parametrize("token,expected", [
        ("3", 3),
        ("-4", -4),
        ("+7", 7),
        ("007", 7),
        ("12abc", 12),
        ("abc", 0),
        ("-", 0),
        ("\u0663", 0),
        ("4\u0663", 4),
    ])
    def test_atoi_semantics(self, interp, token: str, expected: int) -> None:
        assert interp.NUMBER(token) == expected

    def test_warns_on_coercion(self, interp, caplog) -> None:
        with caplog.at_level(logging.WARNING):
            assert interp.NUMBER("ten") == 0
        assert "ten" in caplog.text

    def test_char_takes_first_character(self, interp) -> None:
        assert interp.CHAR("#abc") == "#"
