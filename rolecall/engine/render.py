"""
rolecall.engine.render — Board Renderer
========================================

Rewrites the moderator's text into the text that gets published: every
bare-name mention (``<@Pingable>``) whose name was resolved becomes a
concrete role mention (``<@&1234>``).  Concrete mentions and names with no
resolved definition are left exactly as written.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field

from rolecall.constants import ROLE_TOKEN_PATTERN
from rolecall.engine.definitions import RoleDefinition

_ROLE_TOKEN_RE = re.compile(ROLE_TOKEN_PATTERN)


@dataclass(frozen=True, slots=True)
class RenderedBoard:
    """Final embed text plus the emoji to attach, in definition order."""

    text: str
    emoji: list[str] = field(default_factory=list)


def render_board(text: str, definitions: Sequence[RoleDefinition]) -> RenderedBoard:
    """Substitute resolved role mentions into *text*.

    Duplicate emoji are kept; adding the same reaction twice is a no-op on
    Discord's side.
    """
    by_name: dict[str, RoleDefinition] = {}
    for definition in definitions:
        if definition.name and definition.resolved:
            by_name.setdefault(definition.name, definition)

    def _substitute(match: re.Match[str]) -> str:
        role_id, name = match.group(1), match.group(2)
        if role_id:
            return match.group(0)
        definition = by_name.get(name)
        return definition.mention if definition else match.group(0)

    return RenderedBoard(
        text=_ROLE_TOKEN_RE.sub(_substitute, text),
        emoji=[d.emoji for d in definitions],
    )
