"""Turns source text into a stream of tokens."""

from __future__ import annotations

import string
from collections.abc import Iterator

from .tokens import Token, TokenType, lookup_ident

_WHITESPACE = frozenset(" \t\n\r")
_LETTERS = frozenset(string.ascii_letters + "_")
_DIGITS = frozenset(string.digits)

_TWO_CHAR = {
    "==": TokenType.EQ,
    "!=": TokenType.NOT_EQ,
    "**": TokenType.POWER,
    "<=": TokenType.LTE,
    ">=": TokenType.GTE,
}

_ONE_CHAR = {
    "=": TokenType.ASSIGN,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "!": TokenType.BANG,
    "/": TokenType.SLASH,
    "%": TokenType.MOD,
    "*": TokenType.ASTERISK,
    "<": TokenType.LT,
    ">": TokenType.GT,
    ";": TokenType.SEMICOLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ",": TokenType.COMMA,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    ":": TokenType.COLON,
}


class Lexer:
    """Reads tokens one at a time from a source string."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0

    @property
    def _ch(self) -> str:
        return self._source[self._pos] if self._pos < len(self._source) else ""

    @property
    def _peek(self) -> str:
        nxt = self._pos + 1
        return self._source[nxt] if nxt < len(self._source) else ""

    def next_token(self) -> Token:
        """Return the next token; EOF is returned again once input runs out."""
        self._skip_whitespace()
        self._skip_comments()

        ch = self._ch
        if ch == "":
            return Token(TokenType.EOF, "")

        pair = ch + self._peek
        if pair in _TWO_CHAR:
            self._pos += 2
            return Token(_TWO_CHAR[pair], pair)

        if ch in _ONE_CHAR:
            self._pos += 1
            return Token(_ONE_CHAR[ch], ch)

        if ch == '"':
            return Token(TokenType.STRING, self._read_string())

        if ch in _LETTERS:
            word = self._read_while(_LETTERS)
            return Token(lookup_ident(word), word)

        if ch in _DIGITS:
            return Token(TokenType.NUM, self._read_number())

        self._pos += 1
        return Token(TokenType.ILLEGAL, ch)

    def __iter__(self) -> Iterator[Token]:
        """Yield the remaining tokens, ending with the EOF token."""
        while True:
            tok = self.next_token()
            yield tok
            if tok.type is TokenType.EOF:
                return

    def _read_while(self, allowed: frozenset[str]) -> str:
        start = self._pos
        while self._ch and self._ch in allowed:
            self._pos += 1
        return self._source[start:self._pos]

    def _read_string(self) -> str:
        start = self._pos + 1
        end = self._source.find('"', start)
        if end == -1:
            end = len(self._source)
        self._pos = end + 1
        return self._source[start:end]

    def _read_number(self) -> str:
        start = self._pos
        self._read_while(_DIGITS)
        if self._ch == "." and self._peek in _DIGITS and self._peek:
            self._pos += 1
            self._read_while(_DIGITS)
        return self._source[start:self._pos]

    def _skip_whitespace(self) -> None:
        self._read_while(_WHITESPACE)

    def _skip_comments(self) -> None:
        while self._ch == "/" and self._peek == "/":
            newline = self._source.find("\n", self._pos)
            self._pos = len(self._source) if newline == -1 else newline + 1
            self._skip_whitespace()


def tokenize(source: str) -> list[Token]:
    """Return every token of ``source``, the final EOF token included."""
    return list(Lexer(source))