import pytest

from kb_dict.compose.keysyms import DEFAULT_KEYSYMS, merge_keysyms, parse_keysymdef
from kb_dict.compose.parser import (
    ComposeSyntaxError,
    UnknownKeysymError,
    key_for,
    parse_compose,
    parse_line,
    unquote,
)


USER = {"<Multi_key>": "§"}

COMPOSE = """\
# UTF-8 (Unicode) compose sequence
include "%L"

<dead_acute> <a>                 : "á"   aacute # LATIN SMALL LETTER A WITH ACUTE
<Multi_key> <apostrophe> <e>     : "é"   eacute # LATIN SMALL LETTER E WITH ACUTE
<Multi_key> <e> <apostrophe>     : "é"   eacute # LATIN SMALL LETTER E WITH ACUTE
<Multi_key> <U2191> <U2191>      : "⇈"   U21C8 # UPWARDS PAIRED ARROWS
<Multi_key> <quotedbl> <Udiaeresis> : "Ǘ" # LATIN CAPITAL LETTER U WITH DIAERESIS
<Multi_key> <backslash> <o> <slash> : "\\\\o/" # PERSON RAISING BOTH HANDS IN CELEBRATION
"""


def test_key_for_hex_code_point() -> None:
    assert key_for("<U2191>", DEFAULT_KEYSYMS, USER) == "↑"


def test_key_for_u_prefixed_keysym_falls_back_to_table() -> None:
    assert key_for("<Udiaeresis>", DEFAULT_KEYSYMS, USER) == "Ü"
    assert key_for("<U>", DEFAULT_KEYSYMS, USER) == "U"


def test_key_for_keysym_and_user_tables() -> None:
    assert key_for("<apostrophe>", DEFAULT_KEYSYMS, USER) == "'"
    assert key_for("<nobreakspace>", DEFAULT_KEYSYMS, USER) == "\u00a0"
    assert key_for("<Multi_key>", DEFAULT_KEYSYMS, USER) == "§"


def test_key_for_unknown_raises() -> None:
    with pytest.raises(UnknownKeysymError, match="no value for <dead_acute>"):
        _ = key_for("<dead_acute>", DEFAULT_KEYSYMS, USER)


def test_unquote_decodes_escapes() -> None:
    assert unquote(' "a\\"b"  quotedbl') == 'a"b'
    assert unquote('"\\\\"') == "\\"
    assert unquote('"\\101\\x42\\n"') == "AB\n"


def test_unquote_rejects_missing_string() -> None:
    with pytest.raises(ValueError, match="expected a quoted string"):
        _ = unquote(" aacute")


def test_parse_line_resolves_sequence() -> None:
    assert parse_line('<Multi_key> <a> <e> : "æ" ae', DEFAULT_KEYSYMS, USER) == (["§", "a", "e"], "æ")


def test_parse_line_keeps_colon_value() -> None:
    assert parse_line('<Multi_key> <colon> <minus> : ":" colon', DEFAULT_KEYSYMS, USER) == (["§", ":", "-"], ":")


def test_parse_line_skips_non_sequences() -> None:
    assert parse_line("# comment") is None
    assert parse_line('include "%L"') is None
    assert parse_line("") is None


def test_parse_line_discards_unresolved_sequences() -> None:
    assert parse_line('<dead_grave> <a> : "à" agrave', DEFAULT_KEYSYMS, USER) is None
    assert parse_line('<Multi_key> <a> : "x"', DEFAULT_KEYSYMS, {}) is None


def test_parse_line_missing_colon_raises() -> None:
    with pytest.raises(ComposeSyntaxError, match="unexpected number of parts"):
        _ = parse_line("<Multi_key> <a> <e>")


def test_parse_line_bad_value_raises() -> None:
    with pytest.raises(ComposeSyntaxError, match="failed to unquote value"):
        _ = parse_line("<Multi_key> <a> <e> : ae")


def test_parse_compose_yields_resolved_pairs() -> None:
    pairs = list(parse_compose(COMPOSE.splitlines(), DEFAULT_KEYSYMS, USER))
    assert pairs == [
        (["§", "'", "e"], "é"),
        (["§", "e", "'"], "é"),
        (["§", "↑", "↑"], "⇈"),
        (["§", '"', "Ü"], "Ǘ"),
        (["§", "\\", "o", "/"], "\\o/"),
    ]


def test_parse_compose_reports_line_number() -> None:
    lines = ["# header", '<Multi_key> <a> : "x"', "<Multi_key> <b>"]
    with pytest.raises(ComposeSyntaxError, match="line 3: unexpected number of parts") as excinfo:
        _ = list(parse_compose(lines, DEFAULT_KEYSYMS, USER))
    assert excinfo.value.lineno == 3
    assert excinfo.value.line == "<Multi_key> <b>"


def test_default_keysyms_are_read_only() -> None:
    assert DEFAULT_KEYSYMS["space"] == " "
    assert DEFAULT_KEYSYMS["ydiaeresis"] == "ÿ"
    assert DEFAULT_KEYSYMS["KP_7"] == "7"
    with pytest.raises(TypeError):
        DEFAULT_KEYSYMS["space"] = "x"  # type: ignore[index]


def test_parse_keysymdef_reads_annotated_definitions() -> None:
    lines = [
        "#define XK_dead_acute                  0xfe51",
        "#define XK_Greek_alpha                 0x07e1  /* U+03B1 GREEK SMALL LETTER ALPHA */",
        "#define XK_Babovedot                   0x1001e02  /* U+1E02 LATIN CAPITAL LETTER B WITH DOT ABOVE */",
        "#define XK_Greek_IOTAaccentdieresis    0x07a5  /*(U+03AA GREEK CAPITAL LETTER IOTA WITH DIALYTIKA)*/",
        "/* comment */",
    ]
    assert dict(parse_keysymdef(lines)) == {"Greek_alpha": "α", "Babovedot": "Ḃ", "Greek_IOTAaccentdieresis": "Ϊ"}


def test_merge_keysyms_later_tables_win() -> None:
    merged = merge_keysyms(DEFAULT_KEYSYMS, {"Greek_alpha": "α", "space": "_"})
    assert merged["Greek_alpha"] == "α"
    assert merged["space"] == "_"
    assert DEFAULT_KEYSYMS["space"] == " "


def test_default_keysyms_cover_keysymdef() -> None:
    assert DEFAULT_KEYSYMS["Greek_alpha"] == "α"
    assert DEFAULT_KEYSYMS["leftarrow"] == "←"
    assert DEFAULT_KEYSYMS["Cyrillic_zhe"] == "ж"
    assert DEFAULT_KEYSYMS["Eth"] == "Ð"


def test_parse_line_resolves_non_latin1_keysyms_by_default() -> None:
    assert parse_line('<Multi_key> <Greek_alpha> <apostrophe> : "ά"', user=USER) == (["§", "α", "'"], "ά")


def test_unquote_decodes_unicode_escapes() -> None:
    assert unquote('"\\u00e9"') == "é"
    assert unquote('"\\U0001F600"') == "\U0001f600"


@pytest.mark.parametrize("text", ['"\\q"', '"\\x4"', '"\\u00e"', '"\\8"'])
def test_unquote_rejects_invalid_escapes(text: str) -> None:
    with pytest.raises(ValueError, match="invalid escape sequence"):
        _ = unquote(text)


def test_parse_line_invalid_escape_raises() -> None:
    with pytest.raises(ComposeSyntaxError, match="failed to unquote value: invalid escape sequence"):
        _ = parse_line('<Multi_key> <a> <e> : "\\q"', user=USER)
