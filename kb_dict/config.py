"""Run settings for the key binding generator."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


COMPOSE_ENV_VAR = "KB_DICT_COMPOSE"
SYSTEM_COMPOSE = Path("/usr/share/X11/locale/en_US.UTF-8/Compose")
MULTI_KEY = "<Multi_key>"


def default_compose_path() -> Path:
    """Return the Compose table used when none is given on the command line."""
    override = os.environ.get(COMPOSE_ENV_VAR)
    if override:
        return Path(override)
    return SYSTEM_COMPOSE


@dataclass(frozen=True)
class Settings:
    """Immutable settings for one generator run.

    Attributes:
        compose: Compose definition file; the default table when None.
        output: Destination file; standard output when None.
        altgr: Character the AltGr (Multi_key) modifier is bound to.
        dump: Copy the Compose source to the output before the dictionary.
        keysymdef: Optional ``keysymdef.h`` extending the built-in keysyms.
        log_level: Root logger level name.
    """

    compose: Path | None = None
    output: Path | None = None
    altgr: str = "§"
    dump: bool = False
    keysymdef: Path | None = None
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if len(self.altgr) != 1:
            msg = f"altgr must be exactly one character, got {self.altgr!r}"
            raise ValueError(msg)

    @property
    def compose_path(self) -> Path:
        return self.compose if self.compose is not None else default_compose_path()

    def user_keysyms(self) -> dict[str, str]:
        """Return the user keysym table binding Multi_key to altgr."""
        return {MULTI_KEY: self.altgr}
