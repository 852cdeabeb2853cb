import time

from word_scan.constants import DEFAULT_LOG_FILE
from word_scan.types import WordSpan, safe_text_preview, ts_str


class DebugLogger:
    """Manages an optional append-only log of scanner activity."""

    def __init__(self, path: str = DEFAULT_LOG_FILE):
        self.path = path
        self.enabled = False
        self._fh = None

    def start(self):
        self._fh = open(self.path, "a", encoding="utf-8")
        self.enabled = True
        sep = f"\n{'='*60}\n  Session started: {time.strftime('%Y-%m-%d %H:%M:%S')}\n{'='*60}\n"
        self._fh.write(sep)
        self._fh.flush()

    def stop(self):
        self.enabled = False
        if self._fh:
            self._fh.close()
        self._fh = None

    def toggle(self) -> bool:
        if self.enabled:
            self.stop()
        else:
            self.start()
        return self.enabled

    def log_event(self, text: str):
        if not self.enabled or not self._fh:
            return
        for line in text.split("\n"):
            self._fh.write(f"{ts_str(time.time())} | {line}\n")
        self._fh.flush()

    def log_word(self, span: WordSpan):
        if not self.enabled or not self._fh:
            return
        self._fh.write(
            f"{ts_str(time.time())} | word [{span.start:>6}, {span.end:>6}) "
            f"{safe_text_preview(span.word)!r}\n"
        )
        self._fh.flush()
