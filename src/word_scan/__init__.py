try:
    from importlib.metadata import version

    __version__ = version("word-scan")
except Exception:
    __version__ = "0.0.0.dev"

from word_scan.text_cursor import TextCursor
from word_scan.types import WordSpan
from word_scan.word_scanner import WordScanner
from word_scan.words import WordSequence, count_words, iter_spans, tokenize

__all__ = [
    "TextCursor",
    "WordScanner",
    "WordSequence",
    "WordSpan",
    "count_words",
    "iter_spans",
    "tokenize",
]
