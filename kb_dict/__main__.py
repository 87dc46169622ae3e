"""Interface for ``python -m kb_dict``."""

from __future__ import annotations

import logging
import sys
from argparse import ArgumentParser, RawDescriptionHelpFormatter
from contextlib import nullcontext
from pathlib import Path
from typing import TYPE_CHECKING

from ._version import version
from .compose import DEFAULT_KEYSYMS, ComposeSyntaxError, merge_keysyms, parse_compose, parse_keysymdef
from .config import COMPOSE_ENV_VAR, Settings
from .tree import build_tree, format_tree


if TYPE_CHECKING:
    from collections.abc import Sequence

    from .tree import Tree


__all__ = ["main"]

logger = logging.getLogger(__name__)

_DESCRIPTION = f"""\
Generate a DefaultKeyBinding.dict key binding map from an X11 Compose
definition file. Using the dict file depends on mapping a sensible modifier
key to a character, for example with Karabiner-Elements. By default the AltGr
key is mapped to '§'.

The generated dictionary is then placed in ~/Library/KeyBindings/DefaultKeyBinding.dict.
The Compose file defaults to ${COMPOSE_ENV_VAR} or the system en_US.UTF-8 table.
"""


def build_parser() -> ArgumentParser:
    """Construct the argument parser for the CLI."""
    parser = ArgumentParser(prog="kb-dict", description=_DESCRIPTION, formatter_class=RawDescriptionHelpFormatter)
    _ = parser.add_argument("compose", nargs="?", type=Path, help="X11 Compose definition file.")
    _ = parser.add_argument("-o", "--output", type=Path, help="output destination, stdout if omitted.")
    _ = parser.add_argument("--altgr", default="§", help="character to bind AltGr to (default: %(default)s).")
    _ = parser.add_argument("--dump", action="store_true", help="dump the Compose source to the output first.")
    _ = parser.add_argument("--keysymdef", type=Path, help="keysymdef.h with additional keysym definitions.")
    _ = parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: %(default)s).",
    )
    _ = parser.add_argument("-v", "--version", action="version", version=version)
    return parser


def _settings_from_args(parser: ArgumentParser, args: Sequence[str] | None) -> Settings:
    namespace = parser.parse_args(args)
    try:
        return Settings(
            compose=namespace.compose,
            output=namespace.output,
            altgr=namespace.altgr,
            dump=namespace.dump,
            keysymdef=namespace.keysymdef,
            log_level=namespace.log_level,
        )
    except ValueError as error:
        parser.error(str(error))


def generate(settings: Settings) -> tuple[str, Tree]:
    """Read the configured Compose source and return it with its binding tree."""
    keysyms = DEFAULT_KEYSYMS
    if settings.keysymdef is not None:
        with settings.keysymdef.open(encoding="utf-8") as definitions:
            keysyms = merge_keysyms(DEFAULT_KEYSYMS, parse_keysymdef(definitions))

    source_path = settings.compose_path
    logger.info("Reading compose definitions from %s", source_path)
    source = source_path.read_text(encoding="utf-8")
    tree = build_tree(parse_compose(source.splitlines(), keysyms, settings.user_keysyms()))
    return source, tree


def main(args: Sequence[str] | None = None) -> None:
    """Argument parser for the CLI."""
    parser = build_parser()
    settings = _settings_from_args(parser, args)
    logging.basicConfig(level=settings.log_level, format="%(levelname)s | %(message)s")

    try:
        source, tree = generate(settings)
        sink = settings.output.open("w", encoding="utf-8") if settings.output else nullcontext(sys.stdout)
        with sink as out:
            if settings.dump:
                _ = out.write(source)
            format_tree(out, tree)
    except ComposeSyntaxError as error:
        logger.error("Invalid compose definition: %s", error)
        raise SystemExit(1) from error
    except (OSError, UnicodeDecodeError) as error:
        logger.error("%s", error)
        raise SystemExit(1) from error

    if settings.output:
        logger.info("Key bindings written to %s", settings.output)


if __name__ == "__main__":
    main()
