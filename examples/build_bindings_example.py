"""Minimal example building and rendering a key binding tree in memory."""

import sys

from kb_dict.compose import DEFAULT_KEYSYMS, parse_compose
from kb_dict.tree import build_tree, format_tree


COMPOSE = """\
<Multi_key> <a> <e>          : "æ"   ae
<Multi_key> <o> <slash>      : "ø"   oslash
<Multi_key> <quotedbl> <u>   : "ü"   udiaeresis
"""


def main() -> None:
    """Parse a small Compose table and print the resulting dictionary."""
    pairs = parse_compose(COMPOSE.splitlines(), DEFAULT_KEYSYMS, {"<Multi_key>": "§"})
    tree = build_tree(pairs)
    print("tree:", tree)
    format_tree(sys.stdout, tree)


if __name__ == "__main__":
    main()
