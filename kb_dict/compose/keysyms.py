"""X11 keysym name to character tables."""

from __future__ import annotations

import logging
import re
import string
from types import MappingProxyType
from typing import TYPE_CHECKING

from ._keysymdef import KEYSYMDEF


if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


logger = logging.getLogger(__name__)

_KEYSYMDEF_LINE = re.compile(r"^#define\s+XK_(?P<name>\w+)\s+0x[0-9a-fA-F]+\s*/\*\s*\(?U\+(?P<code>[0-9a-fA-F]{4,6})")

# Keysyms keysymdef.h defines without a U+ annotation (deprecated spellings
# and the keypad) or not at all (newer aliases) that still stand for a character.
_SUPPLEMENT = {
    "Eth": "Ð",
    "Thorn": "Þ",
    "ordmasculine": "º",
    "guillemetleft": "«",
    "guillemetright": "»",
    "KP_Space": " ",
    "KP_Multiply": "*",
    "KP_Add": "+",
    "KP_Separator": ",",
    "KP_Subtract": "-",
    "KP_Decimal": ".",
    "KP_Divide": "/",
    "KP_Equal": "=",
    **{f"KP_{digit}": digit for digit in string.digits},
}


def parse_keysymdef(lines: Iterable[str]) -> Mapping[str, str]:
    """Read keysym definitions from ``keysymdef.h`` style lines.

    Only definitions annotated with a ``U+XXXX`` code point are kept; dead
    keys and function keys have no character and are skipped.
    """
    table: dict[str, str] = {}
    for line in lines:
        match = _KEYSYMDEF_LINE.match(line)
        if match is None:
            continue
        table[match["name"]] = chr(int(match["code"], 16))
    logger.debug("Loaded %d keysym definitions", len(table))
    return MappingProxyType(table)


def merge_keysyms(*tables: Mapping[str, str]) -> Mapping[str, str]:
    """Combine tables into one read-only mapping; later tables take precedence."""
    merged: dict[str, str] = {}
    for table in tables:
        merged.update(table)
    return MappingProxyType(merged)


DEFAULT_KEYSYMS: Mapping[str, str] = merge_keysyms(_SUPPLEMENT, KEYSYMDEF)
