import io

import pytest

from kb_dict.tree.builder import build_tree
from kb_dict.tree.serializer import dumps, format_tree, quote


class _FailingSink:
    def __init__(self, fail_after: int) -> None:
        self.writes: list[str] = []
        self._fail_after = fail_after

    def write(self, text: str) -> int:
        if len(self.writes) >= self._fail_after:
            msg = "disk full"
            raise OSError(msg)
        self.writes.append(text)
        return len(text)


@pytest.mark.parametrize(
    ("tree", "expected"),
    [
        ({}, "{\n}\n"),
        ({"1": "text"}, '{\n\t"1" = ("insertText:", "text");\n}\n'),
        (
            {"1": {"2": "text"}},
            '{\n\t"1" = {\n\t\t"2" = ("insertText:", "text");\n\t};\n}\n',
        ),
        (
            {"1": "text1", "2": "text2"},
            '{\n\t"1" = ("insertText:", "text1");\n\t"2" = ("insertText:", "text2");\n}\n',
        ),
        (
            {"1": {"2": "text1", "3": "text2"}},
            '{\n\t"1" = {\n\t\t"2" = ("insertText:", "text1");\n\t\t"3" = ("insertText:", "text2");\n\t};\n}\n',
        ),
    ],
    ids=["empty", "one-by-one", "one-by-two", "two-by-one", "two-by-two"],
)
def test_dumps(tree: dict, expected: str) -> None:
    assert dumps(tree) == expected


def test_format_tree_writes_to_sink() -> None:
    sink = io.StringIO()
    format_tree(sink, {"a": {"b": {"c": "x"}}})
    assert sink.getvalue() == (
        "{\n"
        '\t"a" = {\n'
        '\t\t"b" = {\n'
        '\t\t\t"c" = ("insertText:", "x");\n'
        "\t\t};\n"
        "\t};\n"
        "}\n"
    )


def test_format_tree_nonzero_depth_ends_with_semicolon() -> None:
    sink = io.StringIO()
    format_tree(sink, {}, depth=2)
    assert sink.getvalue() == "{\n\t\t};\n"


def test_keys_sorted_regardless_of_insertion_order() -> None:
    forward = build_tree([(["a"], "1"), (["b"], "2"), (["c", "d"], "3"), (["c", "a"], "4")])
    backward = build_tree([(["c", "a"], "4"), (["c", "d"], "3"), (["b"], "2"), (["a"], "1")])
    output = dumps(forward)
    assert output == dumps(backward)
    assert output == dumps(forward)
    assert output.index('"a" = ("insertText:", "1")') < output.index('"b" =') < output.index('"c" =')
    assert output.index('"a" = ("insertText:", "4")') < output.index('"d" =')


def test_keys_sorted_by_code_point() -> None:
    output = dumps({"a": "1", "B": "2", "é": "3", "~": "4"})
    keys = [line.split(" = ")[0].strip() for line in output.splitlines()[1:-1]]
    assert keys == ['"B"', '"a"', '"~"', '"é"']


def test_write_failure_propagates_and_aborts() -> None:
    sink = _FailingSink(fail_after=2)
    with pytest.raises(OSError, match="disk full"):
        format_tree(sink, {"a": "x", "b": "y"})
    assert sink.writes == ["{\n", '\t"a" = ']


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("text", '"text"'),
        ("", '""'),
        ('say "hi"', r'"say \"hi\""'),
        ("back\\slash", r'"back\\slash"'),
        ("tab\there", r'"tab\there"'),
        ("new\nline", r'"new\nline"'),
        ("\x00", r'"\x00"'),
        ("\x7f", r'"\x7f"'),
        ("é", '"é"'),
        ("€", '"€"'),
        ("a\u00a0", r'"a\u00a0"'),
        ("\U000e0001", r'"\U000e0001"'),
    ],
)
def test_quote_escapes(text: str, expected: str) -> None:
    assert quote(text) == expected


def test_quote_uppercases_leading_unicode_escape() -> None:
    assert quote("\u00a0") == r'"\U00A0"'
    assert quote("\u00adx") == r'"\U00ADX"'


def test_quote_keeps_case_without_leading_unicode_escape() -> None:
    assert quote("x\u00ad") == r'"x\u00ad"'
    assert quote("Abc") == '"Abc"'


def test_leaf_values_are_quoted() -> None:
    assert dumps({'"': "\\"}) == '{\n\t"\\"" = ("insertText:", "\\\\");\n}\n'


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("\u00a0ß", r'"\U00A0ß"'),
        ("\u00a0ﬁ", r'"\U00A0ﬁ"'),
        ("\u00a0ŉ", r'"\U00A0ŉ"'),
        ("\u00a0ǆ", r'"\U00A0Ǆ"'),
    ],
)
def test_quote_uppercase_maps_one_character_at_a_time(text: str, expected: str) -> None:
    assert quote(text) == expected
