from __future__ import annotations

from collections.abc import Iterable

from word_scan.constants import NEWLINE_CHARS, NULL_CHAR

_KEEP = object()


def _fold(ch: str) -> str:
    """Ordinal case fold for a single character.

    Only one-to-one mappings are applied so folded text keeps the
    original indices ('ß'.upper() is 'SS', so 'ß' folds to itself).
    """
    up = ch.upper()
    return up if len(up) == 1 else ch


class TextCursor:
    """Read-only text buffer with a forward-moving position.

    Positions count code points and always stay within [0, len(text)].
    Reads past the end return NULL_CHAR instead of raising.
    """

    def __init__(self, text: str | None = None):
        self._text = ""
        self._position = 0
        self._folded: str | None = None
        self.reset(text)

    @property
    def text(self) -> str:
        return self._text

    @property
    def position(self) -> int:
        return self._position

    @property
    def remaining(self) -> int:
        return len(self._text) - self._position

    @property
    def is_at_end(self) -> bool:
        return self._position >= len(self._text)

    def reset(self, text=_KEEP):
        """Move back to the start, optionally swapping in a new buffer.

        ``reset()`` keeps the current text; ``reset(None)`` clears it.
        """
        if text is not _KEEP:
            self._text = text if text is not None else ""
            self._folded = None
        self._position = 0

    def peek(self, ahead: int = 0) -> str:
        """Return the character ``ahead`` places past the position, or NULL_CHAR."""
        index = self._position + ahead
        if 0 <= index < len(self._text):
            return self._text[index]
        return NULL_CHAR

    def extract(self, start: int, end: int | None = None) -> str:
        """Return text[start:end]. Out-of-range bounds raise IndexError."""
        length = len(self._text)
        if end is None:
            end = length
        if not 0 <= start <= end <= length:
            raise IndexError(f"extract range [{start}, {end}) outside text of length {length}")
        return self._text[start:end]

    def move_ahead(self, n: int = 1):
        """Advance ``n`` characters, clamped to the end of the text."""
        self._position = max(0, min(self._position + n, len(self._text)))

    def move_to(self, needle: str | Iterable[str], ignore_case: bool = False):
        """Move to the next occurrence of ``needle``, or to the end if there is none.

        A string needle is matched as a substring; any other iterable of
        characters (set, list, tuple) matches any one of them.
        """
        if isinstance(needle, str):
            if ignore_case:
                index = self._folded_text().find(
                    "".join(_fold(c) for c in needle), self._position
                )
            else:
                index = self._text.find(needle, self._position)
        elif isinstance(needle, Iterable):
            index = self._index_of_any(frozenset(needle), ignore_case)
        else:
            raise TypeError(
                f"needle must be a str or an iterable of characters, not {type(needle).__name__}"
            )
        self._position = index if index >= 0 else len(self._text)

    def move_past(self, chars: Iterable[str]):
        """Skip over characters that belong to ``chars``."""
        members = frozenset(chars)
        while not self.is_at_end and self.peek() in members:
            self.move_ahead()

    def move_to_end_of_line(self):
        """Move to the first CR or LF, or the end of the text."""
        ch = self.peek()
        while ch not in NEWLINE_CHARS and not self.is_at_end:
            self.move_ahead()
            ch = self.peek()

    def move_past_whitespace(self):
        while self.peek().isspace():
            self.move_ahead()

    def _index_of_any(self, chars: frozenset[str], ignore_case: bool) -> int:
        if ignore_case:
            text = self._folded_text()
            chars = {_fold(c) for c in chars}
        else:
            text = self._text
        for i in range(self._position, len(text)):
            if text[i] in chars:
                return i
        return -1

    def _folded_text(self) -> str:
        if self._folded is None:
            self._folded = "".join(_fold(c) for c in self._text)
        return self._folded
