"""
rolecall.engine.definitions — Board Text Parser
================================================

Turns the free text of a board into an ordered list of
:class:`RoleDefinition` values, one per line that carries a role mention
followed (anywhere later on the same line) by an emoji.

The grammar is a single regular expression (:data:`BOARD_PATTERN`) scanned
across the whole text in multi-line mode.  Each match is anchored at a line
start and cannot cross a newline, so a line contributes at most one
definition.  Document order is preserved; the renderer depends on it.

The same parser runs at publish time (on the moderator's text) and on every
reaction event (on the published embed), so the board message is the only
state a board has.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from rolecall.constants import BOARD_PATTERN, CHANNEL_PATTERN

__all__ = [
    "RoleDefinition",
    "parse_definitions",
    "split_channel_reference",
]

_BOARD_RE = re.compile(BOARD_PATTERN, re.MULTILINE)
_CHANNEL_RE = re.compile(CHANNEL_PATTERN)


@dataclass(frozen=True, slots=True)
class RoleDefinition:
    """One (role reference, emoji) pairing parsed from board text.

    Before resolution exactly one of ``role_id`` / ``name`` is set.
    After resolution ``role_id`` is always set; ``name`` is kept so the
    renderer can find the bare-name mention it came from.
    """

    role_id: str
    name: str
    emoji: str

    @property
    def resolved(self) -> bool:
        return bool(self.role_id)

    @property
    def mention(self) -> str:
        """Concrete role mention token, e.g. ``<@&1234>``."""
        return f"<@&{self.role_id}>"


def parse_definitions(text: str) -> list[RoleDefinition] | None:
    """Return every definition in *text*, or ``None`` if there are none.

    When a line holds several role mentions before its emoji, the greedy
    prefix binds the emoji to the last mention that still has an emoji
    after it.
    """
    if not text:
        return None

    definitions = [
        RoleDefinition(
            role_id=match.group(1) or "",
            name=match.group(2) or "",
            emoji=match.group(3) or "",
        )
        for match in _BOARD_RE.finditer(text)
    ]
    return definitions or None


def split_channel_reference(body: str) -> tuple[int | None, str]:
    """Split a leading ``<#id>`` channel mention off a command body.

    Returns ``(channel_id, remaining_text)``.  When *body* does not start
    with a channel mention, ``channel_id`` is ``None`` and the text is
    returned stripped but otherwise untouched.
    """
    body = body.strip()
    match = _CHANNEL_RE.match(body)
    if match is None:
        return None, body
    return int(match.group(1)), body[match.end():].strip()
