"""Rendering of binding trees in the DefaultKeyBinding.dict format."""

from __future__ import annotations

import io
import logging
import unicodedata
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from _typeshed import SupportsWrite

    from .builder import Tree


logger = logging.getLogger(__name__)

ACTION = "insertText:"

_SHORT_ESCAPES = {
    "\a": r"\a",
    "\b": r"\b",
    "\f": r"\f",
    "\n": r"\n",
    "\r": r"\r",
    "\t": r"\t",
    "\v": r"\v",
}
_PRINTABLE_CATEGORIES = frozenset("LMNPS")


def _is_print(char: str) -> bool:
    return char == " " or unicodedata.category(char)[0] in _PRINTABLE_CATEGORIES


def _upper(char: str) -> str:
    # Single code point mapping only; multi-character expansions such as
    # "ß" -> "SS" leave the character unchanged.
    upper = char.upper()
    if len(upper) == 1:
        return upper
    title = char.title()
    if len(title) == 1:
        return title
    return char


def _escape(char: str) -> str:
    if char in {'"', "\\"}:
        return "\\" + char
    if _is_print(char):
        return char
    if char in _SHORT_ESCAPES:
        return _SHORT_ESCAPES[char]

    code = ord(char)
    if code < 0x20 or code == 0x7F:
        return f"\\x{code:02x}"
    if 0xD800 <= code <= 0xDFFF:
        code = 0xFFFD
    if code < 0x10000:
        return f"\\u{code:04x}"
    return f"\\U{code:08x}"


def quote(text: str) -> str:
    """Return text as a double-quoted literal with C-style escapes.

    Tokens whose escaped form opens with a ``\\u`` escape are uppercased as a
    whole, matching how the key binding dictionary spells hex escapes.
    """
    quoted = '"' + "".join(_escape(char) for char in text) + '"'
    if quoted.startswith('"\\u'):
        quoted = "".join(map(_upper, quoted))
    return quoted


def format_tree(sink: SupportsWrite[str], tree: Tree, depth: int = 0) -> None:
    """Write tree to sink as a brace-delimited block at the given depth.

    Keys are emitted in code point order. Nested blocks and leaf assignments
    end with a semicolon; the outermost block does not. Exceptions raised by
    ``sink.write`` propagate and abort the rendering.
    """
    if depth == 0:
        logger.debug("Rendering binding tree with %d top-level keys", len(tree))

    _ = sink.write("{\n")
    indent = "\t" * (depth + 1)
    for key in sorted(tree):
        _ = sink.write(f"{indent}{quote(key)} = ")
        node = tree[key]
        if isinstance(node, dict):
            format_tree(sink, node, depth + 1)
        else:
            _ = sink.write(f'("{ACTION}", {quote(node)});\n')

    _ = sink.write("\t" * depth + "}")
    if depth != 0:
        _ = sink.write(";")
    _ = sink.write("\n")


def dumps(tree: Tree) -> str:
    """Render tree to a string."""
    buffer = io.StringIO()
    format_tree(buffer, tree)
    return buffer.getvalue()
