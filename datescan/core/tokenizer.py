from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from . import keywords
from .keywords import KeywordType
from .scanner import Scanner


class TokenKind(Enum):
    NUMBER = "number"
    SYMBOL = "symbol"
    KEYWORD = "keyword"
    WHITESPACE = "whitespace"
    END_OF_INPUT = "end"
    UNKNOWN = "unknown"
    INVALID = "invalid"


@dataclass(frozen=True)
class DateToken:
    kind: TokenKind
    value: int = 0
    length: int = 0  # source characters consumed
    symbol: str = ""
    keyword_type: Optional[KeywordType] = None

    # --- factories ---
    @classmethod
    def number(cls, value: int, length: int) -> "DateToken":
        return cls(TokenKind.NUMBER, value=value, length=length)

    @classmethod
    def of_symbol(cls, symbol: str) -> "DateToken":
        return cls(TokenKind.SYMBOL, value=ord(symbol), length=1, symbol=symbol)

    @classmethod
    def keyword(cls, keyword_type: KeywordType, value: int, length: int) -> "DateToken":
        return cls(TokenKind.KEYWORD, value=value, length=length, keyword_type=keyword_type)

    @classmethod
    def whitespace(cls, length: int) -> "DateToken":
        return cls(TokenKind.WHITESPACE, length=length)

    @classmethod
    def end_of_input(cls) -> "DateToken":
        return cls(TokenKind.END_OF_INPUT)

    @classmethod
    def unknown(cls, length: int = 1) -> "DateToken":
        return cls(TokenKind.UNKNOWN, length=length)

    @classmethod
    def invalid(cls) -> "DateToken":
        return cls(TokenKind.INVALID)

    # --- predicates ---
    def is_number(self) -> bool:
        return self.kind is TokenKind.NUMBER

    def is_fixed_length_number(self, length: int) -> bool:
        return self.kind is TokenKind.NUMBER and self.length == length

    def is_symbol(self, symbol: Optional[str] = None) -> bool:
        if self.kind is not TokenKind.SYMBOL:
            return False
        return symbol is None or self.symbol == symbol

    def is_sign(self) -> bool:
        return self.kind is TokenKind.SYMBOL and self.symbol in ("+", "-")

    @property
    def sign(self) -> int:
        return 1 if self.symbol == "+" else -1

    def is_keyword(self, keyword_type: Optional[KeywordType] = None) -> bool:
        if self.kind is not TokenKind.KEYWORD:
            return False
        return keyword_type is None or self.keyword_type is keyword_type

    def is_keyword_z(self) -> bool:
        return (
            self.is_keyword(KeywordType.TIME_ZONE_NAME)
            and self.length == 1
            and self.value == 0
        )

    def is_whitespace(self) -> bool:
        return self.kind is TokenKind.WHITESPACE

    def is_end_of_input(self) -> bool:
        return self.kind is TokenKind.END_OF_INPUT

    def is_unknown(self) -> bool:
        return self.kind is TokenKind.UNKNOWN

    def is_invalid(self) -> bool:
        return self.kind is TokenKind.INVALID


class DateTokenizer:
    """Turns a Scanner into DateTokens with a single token of lookahead.

    Parenthesized comments are skipped here and never reach the parser.
    """

    def __init__(self, scanner: Scanner):
        self._in = scanner
        self._next = self._scan()

    def next(self) -> DateToken:
        result = self._next
        self._next = self._scan()
        return result

    def peek(self) -> DateToken:
        return self._next

    def skip_symbol(self, symbol: str) -> bool:
        if self._next.is_symbol(symbol):
            self._next = self._scan()
            return True
        return False

    def __iter__(self):
        token = self.next()
        while not token.is_end_of_input():
            yield token
            token = self.next()

    def _scan(self) -> DateToken:
        scanner = self._in
        while True:
            start = scanner.position
            if scanner.is_end():
                return DateToken.end_of_input()
            if scanner.is_digit():
                n = scanner.read_unsigned_numeral()
                return DateToken.number(n, scanner.position - start)
            if scanner.is_alpha_or_above():
                prefix, length = scanner.read_word(keywords.PREFIX_LENGTH)
                index = keywords.lookup(prefix, length)
                if index is None:
                    return DateToken.unknown(length)
                return DateToken.keyword(
                    keywords.get_type(index), keywords.get_value(index), length
                )
            if scanner.skip_whitespace():
                while scanner.skip_whitespace():
                    pass
                return DateToken.whitespace(scanner.position - start)
            if scanner.skip_parentheses():
                continue
            ch = scanner.ch
            scanner.advance()
            return DateToken.of_symbol(ch)
