import argparse
import sys

from word_scan import __version__
from word_scan.config import load_config
from word_scan.constants import OUTPUT_FORMATS
from word_scan.debug_log import DebugLogger
from word_scan.words import WordSequence


def _read_inputs(paths, p):
    """Yield (name, text) for each input file, or stdin when none are given."""
    if not paths:
        try:
            text = sys.stdin.read()
        except (OSError, UnicodeDecodeError) as e:
            p.error(f"cannot read stdin: {e}")
        yield "<stdin>", text
        return
    for path in paths:
        try:
            with open(path, encoding="utf-8") as f:
                yield path, f.read()
        except (OSError, UnicodeDecodeError) as e:
            p.error(f"cannot read {path}: {e}")


def main(argv=None):
    p = argparse.ArgumentParser(description="Split text into letter-or-digit words")
    p.add_argument("-v", "--version", action="version",
                   version=f"%(prog)s {__version__}")
    p.add_argument("-c", "--config", default="default",
                   help="Configuration name or path (searches ~/.word-scan/configs/, ./configs/, or use full path)")
    p.add_argument("files", nargs="*", metavar="FILE",
                   help="Input files (UTF-8); reads stdin when omitted")
    p.add_argument("--format", choices=OUTPUT_FORMATS, default=None,
                   help="Output format - overrides config (default: words)")
    p.add_argument("--keep-trailing-empty", action="store_true", default=None,
                   help="Emit an empty word for trailing non-word characters")
    p.add_argument("-d", "--debug", action="store_true", default=False,
                   help="Append scanner activity to the debug log file")
    args = p.parse_args(argv)

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        p.error(str(e))

    # CLI arguments override config values
    if args.format is not None:
        config.output.format = args.format
    if args.keep_trailing_empty is not None:
        config.scanner.keep_trailing_empty = args.keep_trailing_empty

    debug_log = DebugLogger(config.debug.log_file)
    if args.debug:
        debug_log.start()

    out = sys.stdout
    sep = config.output.separator
    total = 0
    try:
        for name, text in _read_inputs(args.files, p):
            debug_log.log_event(f"scanning {name} ({len(text)} chars)")
            words = WordSequence(text, keep_trailing_empty=config.scanner.keep_trailing_empty)
            for span in words.spans(debug_log):
                total += 1
                if config.output.format == "words":
                    out.write(span.word + sep)
                elif config.output.format == "spans":
                    out.write(f"{span.start}\t{span.end}\t{span.word}{sep}")
        if config.output.format == "count":
            out.write(f"{total}\n")
    finally:
        debug_log.log_event(f"done: {total} words")
        debug_log.stop()
    return 0
