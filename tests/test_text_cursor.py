import pytest

from word_scan.constants import NULL_CHAR
from word_scan.text_cursor import TextCursor


class TestInitialState:
    def test_empty_initial_state(self):
        cur = TextCursor()
        assert cur.text == ""
        assert cur.position == 0
        assert cur.is_at_end
        assert cur.remaining == 0

    def test_none_is_empty_text(self):
        cur = TextCursor(None)
        assert cur.text == ""
        assert cur.is_at_end

    def test_text_starts_at_zero(self):
        cur = TextCursor("hello")
        assert cur.position == 0
        assert cur.remaining == 5
        assert not cur.is_at_end


class TestReset:
    def test_reset_keeps_text(self):
        cur = TextCursor("hello")
        cur.move_ahead(3)
        cur.reset()
        assert cur.text == "hello"
        assert cur.position == 0

    def test_reset_with_new_text(self):
        cur = TextCursor("hello")
        cur.move_ahead(3)
        cur.reset("world wide")
        assert cur.text == "world wide"
        assert cur.position == 0

    def test_reset_with_none_clears(self):
        cur = TextCursor("hello")
        cur.reset(None)
        assert cur.text == ""
        assert cur.is_at_end


class TestPeek:
    def test_peek_current(self):
        cur = TextCursor("abc")
        assert cur.peek() == "a"

    def test_peek_ahead(self):
        cur = TextCursor("abc")
        cur.move_ahead()
        assert cur.peek(1) == "c"

    def test_peek_past_end(self):
        cur = TextCursor("abc")
        assert cur.peek(3) == NULL_CHAR
        assert cur.peek(100) == NULL_CHAR

    def test_peek_negative_before_start(self):
        cur = TextCursor("abc")
        assert cur.peek(-1) == NULL_CHAR

    def test_peek_negative_inside_text(self):
        cur = TextCursor("abc")
        cur.move_ahead(2)
        assert cur.peek(-1) == "b"

    def test_peek_does_not_move(self):
        cur = TextCursor("abc")
        cur.peek(2)
        assert cur.position == 0

    def test_null_char_is_not_a_character(self):
        cur = TextCursor("\0")
        assert cur.peek() == "\0"
        assert cur.peek() != NULL_CHAR
        assert not NULL_CHAR.isalnum()
        assert not NULL_CHAR.isspace()


class TestExtract:
    def test_extract_range(self):
        cur = TextCursor("hello world")
        assert cur.extract(6, 11) == "world"

    def test_extract_to_end(self):
        cur = TextCursor("hello world")
        assert cur.extract(6) == "world"

    def test_extract_empty(self):
        cur = TextCursor("hello")
        assert cur.extract(5) == ""
        assert cur.extract(2, 2) == ""

    def test_extract_end_out_of_range(self):
        cur = TextCursor("hello")
        with pytest.raises(IndexError):
            cur.extract(0, 6)

    def test_extract_start_after_end(self):
        cur = TextCursor("hello")
        with pytest.raises(IndexError):
            cur.extract(3, 2)

    def test_extract_negative_start(self):
        cur = TextCursor("hello")
        with pytest.raises(IndexError):
            cur.extract(-1, 2)


class TestMoveAhead:
    def test_move_ahead_one(self):
        cur = TextCursor("abc")
        cur.move_ahead()
        assert cur.position == 1

    def test_move_ahead_n(self):
        cur = TextCursor("abcdef")
        cur.move_ahead(4)
        assert cur.position == 4
        assert cur.remaining == 2

    def test_move_ahead_clamps(self):
        cur = TextCursor("abc")
        cur.move_ahead(10)
        assert cur.position == 3
        assert cur.is_at_end

    def test_move_ahead_at_end_is_noop(self):
        cur = TextCursor("abc")
        cur.move_ahead(3)
        cur.move_ahead()
        assert cur.position == 3


class TestMoveTo:
    def test_move_to_string(self):
        cur = TextCursor("hello world")
        cur.move_to("wor")
        assert cur.position == 6

    def test_move_to_char(self):
        cur = TextCursor("a,b,c")
        cur.move_to(",")
        assert cur.position == 1

    def test_move_to_from_current_position(self):
        cur = TextCursor("a,b,c")
        cur.move_ahead(2)
        cur.move_to(",")
        assert cur.position == 3

    def test_move_to_stays_on_match(self):
        cur = TextCursor("a,b")
        cur.move_to(",")
        cur.move_to(",")
        assert cur.position == 1

    def test_move_to_not_found_goes_to_end(self):
        cur = TextCursor("hello")
        cur.move_to("xyz")
        assert cur.position == 5
        assert cur.is_at_end

    def test_move_to_set(self):
        cur = TextCursor("key=value;next")
        cur.move_to({";", "="})
        assert cur.position == 3

    def test_move_to_frozenset_not_found(self):
        cur = TextCursor("plain")
        cur.move_to(frozenset("!?"))
        assert cur.is_at_end

    def test_move_to_ignore_case(self):
        cur = TextCursor("Hello WORLD")
        cur.move_to("world", ignore_case=True)
        assert cur.position == 6

    def test_move_to_case_sensitive_by_default(self):
        cur = TextCursor("Hello WORLD")
        cur.move_to("world")
        assert cur.is_at_end

    def test_move_to_ignore_case_keeps_indices(self):
        # 'ß' upper-cases to two characters; folding must not shift positions
        cur = TextCursor("straße ABC")
        cur.move_to("abc", ignore_case=True)
        assert cur.position == 7

    def test_move_to_set_ignore_case(self):
        cur = TextCursor("xyzQ")
        cur.move_to({"q"}, ignore_case=True)
        assert cur.position == 3

    def test_move_to_list_of_chars(self):
        cur = TextCursor("key=value;next")
        cur.move_to([";", "="])
        assert cur.position == 3

    def test_move_to_tuple_of_chars_not_found(self):
        cur = TextCursor("plain")
        cur.move_to(("!", "?"))
        assert cur.is_at_end

    def test_move_to_list_ignore_case(self):
        cur = TextCursor("abcD")
        cur.move_to(["d"], ignore_case=True)
        assert cur.position == 3

    def test_move_to_bad_needle(self):
        cur = TextCursor("abc")
        with pytest.raises(TypeError):
            cur.move_to(3)


class TestMovePast:
    def test_move_past_chars(self):
        cur = TextCursor("---abc")
        cur.move_past("-")
        assert cur.position == 3

    def test_move_past_set(self):
        cur = TextCursor(" ,; word")
        cur.move_past({" ", ",", ";"})
        assert cur.peek() == "w"

    def test_move_past_no_match(self):
        cur = TextCursor("abc")
        cur.move_past("-")
        assert cur.position == 0

    def test_move_past_to_end(self):
        cur = TextCursor("....")
        cur.move_past(".")
        assert cur.is_at_end


class TestLineAndWhitespace:
    def test_move_to_end_of_line_lf(self):
        cur = TextCursor("first\nsecond")
        cur.move_to_end_of_line()
        assert cur.position == 5
        assert cur.peek() == "\n"

    def test_move_to_end_of_line_cr(self):
        cur = TextCursor("first\r\nsecond")
        cur.move_to_end_of_line()
        assert cur.peek() == "\r"

    def test_move_to_end_of_line_no_newline(self):
        cur = TextCursor("only line")
        cur.move_to_end_of_line()
        assert cur.is_at_end

    def test_move_to_end_of_line_already_there(self):
        cur = TextCursor("\nabc")
        cur.move_to_end_of_line()
        assert cur.position == 0

    def test_move_past_whitespace(self):
        cur = TextCursor(" \t\n word")
        cur.move_past_whitespace()
        assert cur.peek() == "w"

    def test_move_past_whitespace_unicode(self):
        cur = TextCursor("\u00a0\u2003x")
        cur.move_past_whitespace()
        assert cur.position == 2

    def test_move_past_whitespace_all_space(self):
        cur = TextCursor("   ")
        cur.move_past_whitespace()
        assert cur.is_at_end


class TestParsingWorkflow:
    """Integration-style tests combining cursor moves the way a parser does."""

    def test_key_value_pairs(self):
        cur = TextCursor("name = ada\nlang = python\n")
        pairs = {}
        while not cur.is_at_end:
            cur.move_past_whitespace()
            start = cur.position
            cur.move_to("=")
            key = cur.extract(start, cur.position).strip()
            cur.move_ahead()
            start = cur.position
            cur.move_to_end_of_line()
            pairs[key] = cur.extract(start, cur.position).strip()
            cur.move_past_whitespace()
        assert pairs == {"name": "ada", "lang": "python"}

    def test_reuse_after_end(self):
        cur = TextCursor("abc")
        cur.move_to("zzz")
        assert cur.is_at_end
        assert cur.extract(0) == "abc"
        cur.reset()
        assert cur.peek() == "a"
