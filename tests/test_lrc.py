from netease_lrc.lrc import is_time_tag, merge_translation, parse_lines, time_tag_to_centis
from netease_lrc.models import LyricLine

# ---------------------------------------------------------------------------
# is_time_tag
# ---------------------------------------------------------------------------


def test_time_tag_valid():
    assert is_time_tag("[00:01.00]")
    assert is_time_tag("[12:34:56]")


def test_time_tag_wrong_length():
    assert not is_time_tag("[0:01.00]")
    assert not is_time_tag("[00:01.000]")
    assert not is_time_tag("")


def test_time_tag_bad_characters():
    assert not is_time_tag("[ar:Artis]")
    assert not is_time_tag("[00:01 00]")
    assert not is_time_tag("(00:01.00)")


# ---------------------------------------------------------------------------
# time_tag_to_centis
# ---------------------------------------------------------------------------


def test_time_tag_to_centis():
    assert time_tag_to_centis("[01:02.03]") == 6203
    assert time_tag_to_centis("[00:00.00]") == 0


def test_time_tag_to_centis_orders_tags():
    assert time_tag_to_centis("[00:59.99]") < time_tag_to_centis("[01:00.00]")


def test_time_tag_to_centis_missing_tag_is_zero():
    assert time_tag_to_centis(None) == 0


# ---------------------------------------------------------------------------
# parse_lines
# ---------------------------------------------------------------------------


def test_parse_timed_line():
    assert parse_lines("[00:12.34]Hello") == [LyricLine(time_tag="[00:12.34]", text="Hello")]


def test_parse_metadata_line_is_untimed():
    assert parse_lines("[ar:初音ミク]") == [LyricLine(time_tag=None, text="[ar:初音ミク]")]


def test_parse_tag_only_line():
    assert parse_lines("[00:12.34]") == [LyricLine(time_tag="[00:12.34]", text="")]


def test_parse_preserves_order():
    lines = parse_lines("[by:someone]\n[00:02.00]B\n[00:01.00]A")
    assert [line.text for line in lines] == ["[by:someone]", "B", "A"]


def test_parse_empty_blob_yields_one_empty_line():
    assert parse_lines("") == [LyricLine(time_tag=None, text="")]


def test_parse_trailing_newline_yields_empty_last_line():
    lines = parse_lines("[00:01.00]A\n")
    assert lines[-1] == LyricLine(time_tag=None, text="")


def test_parse_splits_on_newline_only():
    lines = parse_lines("[00:01.00]A\r\n[00:02.00]B")
    assert lines[0].text == "A\r"
    assert len(lines) == 2


def test_parse_round_trip():
    blob = "[00:01.00]Hello\n[00:02.50]World\n[01:10.00]Again"
    assert "\n".join(line.raw for line in parse_lines(blob)) == blob


# ---------------------------------------------------------------------------
# merge_translation
# ---------------------------------------------------------------------------


def test_merge_basic():
    original = "[00:01.00]Hello\n[00:02.00]World\n"
    translated = "[00:01.00]你好\n"
    assert merge_translation(original, translated) == "[00:01.00]Hello 【你好】\n[00:02.00]World\n"


def test_merge_preserves_line_count():
    original = "[ti:Song]\n[00:01.00]A\n[00:02.00]B\n[00:03.00]C\n"
    translated = "[00:02.00]b\n[00:05.00]e\n"
    merged = merge_translation(original, translated)
    assert len(merged.splitlines()) == len(original.splitlines())


def test_merge_adds_terminator_without_trailing_newline():
    assert merge_translation("[00:01.00]A", "[00:01.00]a") == "[00:01.00]A 【a】\n"


def test_merge_metadata_lines_untouched():
    original = "[ar:Artist]\n[00:01.00]A\n"
    translated = "[ar:Artist]\n[00:01.00]a\n"
    assert merge_translation(original, translated) == "[ar:Artist]\n[00:01.00]A 【a】\n"


def test_merge_blank_translation_not_appended():
    assert merge_translation("[00:01.00]A\n", "[00:01.00]   \n") == "[00:01.00]A\n"


def test_merge_requires_exact_tag_string():
    # Same instant, different spelling: not a match
    assert merge_translation("[00:01.00]A\n", "[00:01:00]a\n") == "[00:01.00]A\n"


def test_merge_drops_unmatched_translation_lines():
    original = "[00:01.00]A\n[00:03.00]C\n"
    translated = "[00:02.00]b\n[00:03.00]c\n"
    assert merge_translation(original, translated) == "[00:01.00]A\n[00:03.00]C 【c】\n"


def test_merge_translation_used_once():
    original = "[00:01.00]A\n[00:01.00]A again\n"
    translated = "[00:01.00]a\n"
    assert merge_translation(original, translated) == "[00:01.00]A 【a】\n[00:01.00]A again\n"


def test_merge_cursor_never_rewinds():
    # The early translation comes after a later one; once the cursor has
    # moved past it, it is never revisited.
    original = "[00:01.00]A\n[00:03.00]B\n[00:04.00]C\n"
    translated = "[00:03.00]b\n[00:01.00]a\n[00:04.00]c\n"
    merged = merge_translation(original, translated)
    assert merged == "[00:01.00]A\n[00:03.00]B 【b】\n[00:04.00]C 【c】\n"


def test_merge_cursor_stays_when_scan_runs_out():
    # X finds nothing before the end; Y still scans from the start
    original = "[00:05.00]X\n[00:03.00]Y\n"
    translated = "[00:01.00]a\n[00:03.00]b\n"
    assert merge_translation(original, translated) == "[00:05.00]X\n[00:03.00]Y 【b】\n"


def test_merge_empty_original():
    assert merge_translation("", "[00:01.00]a") == "\n"
