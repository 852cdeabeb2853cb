from __future__ import annotations

from collections.abc import Iterator

from word_scan.word_scanner import WordScanner
from word_scan.types import WordSpan


class WordSequence:
    """Lazy iterable of the words in a string.

    Only the text is stored. Every iteration builds its own scanner, so
    nested or interleaved loops over one sequence never share a position.
    """

    def __init__(self, text: str | None = None, *, keep_trailing_empty: bool = False):
        self._text = text if text is not None else ""
        self._keep_trailing_empty = keep_trailing_empty

    @property
    def text(self) -> str:
        return self._text

    def scanner(self, debug_log=None) -> WordScanner:
        """Return a fresh scanner positioned at the start of the text."""
        return WordScanner(
            self._text, keep_trailing_empty=self._keep_trailing_empty, debug_log=debug_log
        )

    def __iter__(self) -> Iterator[str]:
        scanner = self.scanner()
        while scanner.advance():
            yield scanner.current

    def spans(self, debug_log=None) -> Iterator[WordSpan]:
        scanner = self.scanner(debug_log)
        while scanner.advance():
            yield scanner.span

    def __repr__(self) -> str:
        return f"WordSequence({self._text!r})"


def tokenize(text: str | None, *, keep_trailing_empty: bool = False) -> list[str]:
    return list(WordSequence(text, keep_trailing_empty=keep_trailing_empty))


def iter_spans(text: str | None, *, keep_trailing_empty: bool = False) -> Iterator[WordSpan]:
    return WordSequence(text, keep_trailing_empty=keep_trailing_empty).spans()


def count_words(text: str | None, *, keep_trailing_empty: bool = False) -> int:
    """Count words without materializing them."""
    scanner = WordScanner(text, keep_trailing_empty=keep_trailing_empty)
    n = 0
    while scanner.advance():
        n += 1
    return n
