"""Parsing of X11 Compose definitions into key sequence paths."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from .keysyms import DEFAULT_KEYSYMS


if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping


logger = logging.getLogger(__name__)

_VALUE = re.compile(r'"(?P<body>(?:[^"\\]|\\.)*)"')
_ESCAPE = re.compile(
    r"\\(?:x(?P<hex>[0-9a-fA-F]{2})|(?P<oct>[0-3][0-7]{2})|u(?P<u4>[0-9a-fA-F]{4})|U(?P<u8>[0-9a-fA-F]{8})"
    r"|(?P<char>[abfnrtv\\\"])|(?P<bad>.?))",
    re.DOTALL,
)
_SIMPLE_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "a": "\a", "b": "\b", "f": "\f", "v": "\v"}


class ComposeSyntaxError(ValueError):
    """Raised for a Compose line that cannot be split into sequence and value."""

    def __init__(self, msg: str, line: str, lineno: int | None = None) -> None:
        if lineno is not None:
            msg = f"line {lineno}: {msg}"
        super().__init__(msg)
        self.line = line
        self.lineno = lineno


class UnknownKeysymError(KeyError):
    """Raised when a keysym token has no character in any lookup table."""


def _is_placeholder(token: str) -> bool:
    return token.startswith("<") and token.endswith(">")


def key_for(name: str, keysyms: Mapping[str, str], user: Mapping[str, str]) -> str:
    """Resolve a bracketed keysym token such as ``<eacute>`` to its character.

    ``<UXXXX>`` tokens are read as hex code points. Names that merely start
    with ``U`` (``<Udiaeresis>``) fall through to the keysym table. ``user``
    is consulted last and is keyed by the bracketed token.
    """
    bare = name.removeprefix("<").removesuffix(">")
    if bare.startswith("U"):
        try:
            return chr(int(bare[1:], 16))
        except ValueError:
            pass

    if bare in keysyms:
        return keysyms[bare]
    if name in user:
        return user[name]
    msg = f"no value for {name}"
    raise UnknownKeysymError(msg)


def _decode_escape(match: re.Match[str]) -> str:
    if match["hex"] is not None:
        return chr(int(match["hex"], 16))
    if match["oct"] is not None:
        return chr(int(match["oct"], 8))
    code = match["u4"] or match["u8"]
    if code is not None:
        return chr(int(code, 16))
    char = match["char"]
    if char is None:
        msg = f"invalid escape sequence {match.group()!r}"
        raise ValueError(msg)
    return _SIMPLE_ESCAPES.get(char, char)


def unquote(text: str) -> str:
    """Decode the leading double-quoted string of a Compose result field."""
    match = _VALUE.match(text.lstrip())
    if match is None:
        msg = f"expected a quoted string, got {text.strip()!r}"
        raise ValueError(msg)
    return _ESCAPE.sub(_decode_escape, match["body"])


def parse_line(
    line: str,
    keysyms: Mapping[str, str] = DEFAULT_KEYSYMS,
    user: Mapping[str, str] | None = None,
) -> tuple[list[str], str] | None:
    """Parse one Compose line into a (path, value) pair.

    Returns None for lines that are not sequence definitions and for
    sequences that still contain a keysym with no known character.
    """
    if not line.startswith("<"):
        return None

    sequence, sep, result = line.partition(":")
    if not sep or not result.strip():
        msg = "unexpected number of parts"
        raise ComposeSyntaxError(msg, line)

    try:
        value = unquote(result)
    except ValueError as error:
        msg = f"failed to unquote value: {error}"
        raise ComposeSyntaxError(msg, line) from error

    user = user if user is not None else {}
    path = sequence.split()
    for i, token in enumerate(path):
        try:
            path[i] = key_for(token, keysyms, user)
        except UnknownKeysymError:
            continue

    if any(_is_placeholder(token) for token in path):
        logger.debug("Skipping sequence with unresolved keysyms: %s", sequence.strip())
        return None
    return path, value


def parse_compose(
    lines: Iterable[str],
    keysyms: Mapping[str, str] = DEFAULT_KEYSYMS,
    user: Mapping[str, str] | None = None,
) -> Iterator[tuple[list[str], str]]:
    """Yield (path, value) pairs for every resolvable sequence in lines."""
    parsed = skipped = 0
    for lineno, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        try:
            pair = parse_line(line, keysyms, user)
        except ComposeSyntaxError as error:
            raise ComposeSyntaxError(str(error), error.line, lineno) from error.__cause__
        if pair is None:
            if line.startswith("<"):
                skipped += 1
            continue
        parsed += 1
        yield pair
    logger.info("Parsed %d compose sequences, skipped %d unresolved", parsed, skipped)
