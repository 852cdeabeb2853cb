from __future__ import annotations

from typing import TYPE_CHECKING

from word_scan.text_cursor import TextCursor
from word_scan.types import WordSpan

if TYPE_CHECKING:
    from word_scan.debug_log import DebugLogger


def is_word_char(ch: str) -> bool:
    """Letters and decimal digits. Superscripts, fractions and Roman
    numerals are numeric but not decimal, so they separate words."""
    return ch.isalpha() or ch.isdecimal()


class WordScanner:
    """Step-wise scanner over the letter-or-digit runs of a string.

    Call ``advance()`` until it returns False; after each True result
    ``current`` holds the word just found. ``reset()`` restarts on the
    same text.

    With ``keep_trailing_empty`` set, a tail of non-word characters
    produces one final empty word, as the classic enumerator does
    ("abc!!!" -> "abc", ""). By default that tail ends the scan.
    """

    def __init__(
        self,
        text: str | None = None,
        *,
        keep_trailing_empty: bool = False,
        debug_log: DebugLogger | None = None,
    ):
        self._cursor = TextCursor(text)
        self._keep_trailing_empty = keep_trailing_empty
        self._debug_log = debug_log
        self._start = 0
        self._has_current = False

    @property
    def text(self) -> str:
        return self._cursor.text

    @property
    def position(self) -> int:
        return self._cursor.position

    @property
    def keep_trailing_empty(self) -> bool:
        return self._keep_trailing_empty

    def advance(self) -> bool:
        """Move to the next word. Returns False once the text is exhausted."""
        cursor = self._cursor
        if cursor.is_at_end:
            return self._exhausted()

        while not cursor.is_at_end and not is_word_char(cursor.peek()):
            cursor.move_ahead()

        if cursor.is_at_end and not self._keep_trailing_empty:
            return self._exhausted()

        self._start = cursor.position
        while is_word_char(cursor.peek()):
            cursor.move_ahead()

        self._has_current = True
        if self._debug_log is not None and self._debug_log.enabled:
            self._debug_log.log_word(self.span)
        return True

    @property
    def current(self) -> str:
        """The word found by the last successful ``advance()``."""
        self._require_current()
        return self._cursor.extract(self._start, self._cursor.position)

    @property
    def span(self) -> WordSpan:
        self._require_current()
        end = self._cursor.position
        return WordSpan(self._cursor.extract(self._start, end), self._start, end)

    def reset(self):
        self._cursor.reset()
        self._start = 0
        self._has_current = False
        if self._debug_log is not None:
            self._debug_log.log_event("scanner reset")

    def _exhausted(self) -> bool:
        if self._has_current and self._debug_log is not None:
            self._debug_log.log_event(f"exhausted at {self._cursor.position}")
        self._has_current = False
        return False

    def _require_current(self):
        if not self._has_current:
            raise RuntimeError("no current word; advance() has not returned True")
