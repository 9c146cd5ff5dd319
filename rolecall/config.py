"""
rolecall.config — YAML Configuration Loader
============================================

Reads ``config.yaml`` for the soft settings of the bot (command prefix,
moderator role, board color).  Secrets such as the bot token come from
``.env`` and are read in :mod:`rolecall.bot.__main__`.

Usage::

    from rolecall.config import load_config

    cfg = load_config()          # reads ./config.yaml by default
    print(cfg.bot_prefix)        # "!"
    print(cfg.moderator_role_name)  # "Wizard"
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

from rolecall.constants import BOARD_COLOR, DEFAULT_MODERATOR_ROLE


# ---------------------------------------------------------------------------
# Typed settings object
# ---------------------------------------------------------------------------
@dataclass(frozen=True, slots=True)
class RolecallConfig:
    """Immutable configuration loaded from ``config.yaml``."""

    # Discord
    bot_prefix: str

    # Command gate
    moderator_role_name: str = DEFAULT_MODERATOR_ROLE
    moderator_role_id: int | None = None  # Takes precedence over the name

    # Presentation
    board_color: int = BOARD_COLOR

    # Optional
    guild_id: int | None = None  # Dev guild, used for logging/scoping only


def _parse_color(value: int | str | None) -> int:
    """Accept ``0x2F4562``-style ints or ``"#2F4562"`` strings."""
    if value is None or value == "":
        return BOARD_COLOR
    if isinstance(value, int):
        return value
    return int(str(value).lstrip("#"), 16)


def _optional_int(value) -> int | None:
    return int(value) if value else None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def load_config(path: str | Path = "config.yaml") -> RolecallConfig:
    """Read *path* and return a :class:`RolecallConfig` instance.

    Parameters
    ----------
    path:
        Filesystem path to the YAML configuration file.
        Defaults to ``config.yaml`` in the current working directory.

    Raises
    ------
    FileNotFoundError
        If the YAML file doesn't exist.
    KeyError
        If a required key is missing from the YAML file.
    ValueError
        If ``board_color`` is not a valid hex color.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(
            f"Configuration file not found: {config_path.resolve()}\n"
            "Hint: copy config.yaml.example → config.yaml and edit it."
        )

    with open(config_path, encoding="utf-8") as fh:
        raw: dict = yaml.safe_load(fh) or {}

    return RolecallConfig(
        bot_prefix=raw["bot_prefix"],
        moderator_role_name=raw.get("moderator_role_name") or DEFAULT_MODERATOR_ROLE,
        moderator_role_id=_optional_int(raw.get("moderator_role_id")),
        board_color=_parse_color(raw.get("board_color")),
        guild_id=_optional_int(raw.get("guild_id")),
    )
