import time
from dataclasses import dataclass


@dataclass(frozen=True)
class WordSpan:
    word: str
    start: int
    end: int  # exclusive

    def __len__(self) -> int:
        return self.end - self.start


def ts_str(t: float) -> str:
    lt = time.localtime(t)
    return time.strftime("%H:%M:%S", lt)


def safe_text_preview(s: str, max_len: int = 60) -> str:
    # Keep log lines on one line
    s = s.replace("\r", "\\r").replace("\n", "\\n").replace("\t", "\\t")
    if len(s) > max_len:
        s = s[:max_len] + "\u2026"
    return s
