# myrtle/framework/base_interpreter.py
import logging
import re
from typing import IO, Iterator, Optional

from lark import Lark

logger = logging.getLogger(__name__)

# Leading part of a token that a C-style atoi() would still accept.
_ATOI_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")


def load_lexer(grammar_path: str) -> Lark:
    with open(grammar_path, 'r') as f:
        grammar = f.read()
    return Lark(grammar, parser='lalr', lexer='basic')


class TokenSource:
    """
    Lazily splits a text stream into whitespace-delimited tokens.

    The stream is read one line at a time and each line is run through the
    lark lexer, so nothing past the current line is consumed. `next_token()`
    returns None once the stream is exhausted.
    """
    def __init__(self, stream: IO[str], lexer: Lark):
        self.lexer = lexer
        self.source_line = 0
        self._tokens = self._iter_tokens(stream)

    def _iter_tokens(self, stream: IO[str]) -> Iterator[str]:
        for line_no, text in enumerate(stream, start=1):
            self.source_line = line_no
            for token in self.lexer.lex(text):
                yield str(token)

    def __iter__(self):
        return self

    def __next__(self) -> str:
        return next(self._tokens)

    def next_token(self) -> Optional[str]:
        return next(self._tokens, None)


class BaseInterpreter:
    """
    Common plumbing for token-driven interpreters: pulling tokens and
    converting argument tokens to values.
    """
    def __init__(self, tokens: TokenSource):
        self.tokens = tokens

    def next_token(self) -> Optional[str]:
        return self.tokens.next_token()

    def NUMBER(self, token: str) -> int:
        """
        Converts an argument token to an int the way C's atoi() does:
        leading digits are used, anything unparseable becomes 0.
        """
        match = _ATOI_PREFIX.match(token)
        if not match:
            logger.warning("Non-numeric argument %r treated as 0", token)
            return 0
        if match.end() != len(token):
            logger.warning("Argument %r truncated to %s", token, match.group(1))
        return int(match.group(1))

    def CHAR(self, token: str) -> str:
        return token[0]

    def run(self):
        raise NotImplementedError


def execute_dsl(stream: IO[str], grammar_path: str, interpreter_class, **kwargs):
    """
    Executes a command stream with a freshly built interpreter.

    Args:
        stream: Text stream holding the program.
        grammar_path: The file path to the Lark grammar used for tokenizing.
        interpreter_class: Interpreter class, called with the token source
            followed by any extra keyword arguments.
    """
    lexer = load_lexer(grammar_path)
    interpreter = interpreter_class(TokenSource(stream, lexer), **kwargs)
    return interpreter.run()
