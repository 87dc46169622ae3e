"""Regenerate ``kb_dict/compose/_keysymdef.py`` from an X11 ``keysymdef.h``.

Usage: ``python scripts/generate_keysyms.py [/usr/include/X11/keysymdef.h]``
"""

from __future__ import annotations

import sys
from pathlib import Path

from kb_dict.compose.keysyms import parse_keysymdef


DEFAULT_SOURCE = Path("/usr/include/X11/keysymdef.h")
TARGET = Path(__file__).resolve().parent.parent / "kb_dict" / "compose" / "_keysymdef.py"

HEADER = '''\
# Code generated by scripts/generate_keysyms.py from keysymdef.h. DO NOT EDIT.
"""Keysym name to character table for every keysymdef.h entry with a U+ annotation."""

KEYSYMDEF: dict[str, str] = {
'''


def _literal(char: str) -> str:
    code = ord(char)
    if code < 0x10000:
        return f'"\\u{code:04x}"'
    return f'"\\U{code:08x}"'


def main(args: list[str] | None = None) -> None:
    """Write the generated table module."""
    args = sys.argv[1:] if args is None else args
    source = Path(args[0]) if args else DEFAULT_SOURCE
    with source.open(encoding="utf-8") as definitions:
        table = parse_keysymdef(definitions)

    lines = [HEADER]
    lines.extend(f'    "{name}": {_literal(char)},\n' for name, char in table.items())
    lines.append("}\n")
    _ = TARGET.write_text("".join(lines), encoding="utf-8")


if __name__ == "__main__":
    main()
