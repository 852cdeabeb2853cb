# Returned by TextCursor.peek() past either end of the buffer. The empty
# string never equals a one-character string and is neither alnum nor space.
NULL_CHAR = ""

CR = "\r"
LF = "\n"
NEWLINE_CHARS = frozenset({CR, LF})

DEFAULT_LOG_FILE = "word_scan.log"
USER_DATA_DIR_NAME = ".word-scan"

OUTPUT_FORMATS = ("words", "spans", "count")
