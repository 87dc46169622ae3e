"""kb-dict - macOS DefaultKeyBinding.dict generator for X11 Compose tables"""

from ._version import version as __version__
from .compose import DEFAULT_KEYSYMS, ComposeSyntaxError, parse_compose
from .config import Settings
from .tree import Tree, build_tree, dumps, format_tree, insert, quote


__all__ = [
    "DEFAULT_KEYSYMS",
    "ComposeSyntaxError",
    "Settings",
    "Tree",
    "__version__",
    "build_tree",
    "dumps",
    "format_tree",
    "insert",
    "parse_compose",
    "quote",
]
