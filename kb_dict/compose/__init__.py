"""X11 Compose file parsing and keysym resolution."""

from .keysyms import DEFAULT_KEYSYMS, merge_keysyms, parse_keysymdef
from .parser import ComposeSyntaxError, UnknownKeysymError, key_for, parse_compose, parse_line


__all__ = [
    "DEFAULT_KEYSYMS",
    "ComposeSyntaxError",
    "UnknownKeysymError",
    "key_for",
    "merge_keysyms",
    "parse_compose",
    "parse_keysymdef",
    "parse_line",
]
