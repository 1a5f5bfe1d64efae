from __future__ import annotations

from typing import Callable, Optional

# Digits beyond this count are consumed but do not change a numeral's value.
MAX_SIGNIFICANT_DIGITS = 9

WhitespacePredicate = Callable[[str], bool]


def default_is_whitespace(ch: str) -> bool:
    return ch.isspace() or ch == "\ufeff"


def ascii_lower(ch: str) -> str:
    if "A" <= ch <= "Z":
        return chr(ord(ch) + 32)
    return ch


class Scanner:
    """Character cursor over a date string.

    `ch` is the character under the cursor, or "" once the input is exhausted.
    The skip_* helpers return whether they consumed anything and leave the
    cursor untouched when they did not.
    """

    def __init__(self, text: str, is_whitespace: Optional[WhitespacePredicate] = None):
        self._text = text
        self._is_whitespace = is_whitespace or default_is_whitespace
        self._index = 0

    @property
    def position(self) -> int:
        return self._index

    @property
    def ch(self) -> str:
        if self._index < len(self._text):
            return self._text[self._index]
        return ""

    def advance(self) -> None:
        if self._index < len(self._text):
            self._index += 1

    def read_unsigned_numeral(self) -> int:
        n = 0
        count = 0
        while self.is_digit():
            if count < MAX_SIGNIFICANT_DIGITS:
                n = n * 10 + ord(self.ch) - ord("0")
            count += 1
            self.advance()
        return n

    def read_word(self, prefix_size: int) -> tuple[str, int]:
        """Read a word and return (lowercase prefix, full word length)."""
        prefix: list[str] = []
        length = 0
        while self.is_alpha_or_above():
            if length < prefix_size:
                prefix.append(ascii_lower(self.ch))
            length += 1
            self.advance()
        return "".join(prefix), length

    def skip(self, c: str) -> bool:
        if self.ch and self.ch == c:
            self.advance()
            return True
        return False

    def skip_whitespace(self) -> bool:
        if self.ch and self._is_whitespace(self.ch):
            self.advance()
            return True
        return False

    def skip_parentheses(self) -> bool:
        if self.ch != "(":
            return False
        balance = 0
        while True:
            if self.ch == ")":
                balance -= 1
            elif self.ch == "(":
                balance += 1
            self.advance()
            if balance <= 0 or self.is_end():
                break
        return True

    # --- classification (ASCII digits only) ---
    def is_end(self) -> bool:
        return self.ch == ""

    def is_digit(self) -> bool:
        return "0" <= self.ch <= "9"

    def is_alpha_or_above(self) -> bool:
        ch = self.ch
        return ch >= "A" and not self._is_whitespace(ch)

    def is_sign(self) -> bool:
        return self.ch in ("+", "-")

    def sign_value(self) -> int:
        return 1 if self.ch == "+" else -1
