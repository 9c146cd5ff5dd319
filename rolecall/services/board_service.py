"""
rolecall.services.board_service — Board Publishing
===================================================

Posts a rendered board and seeds it with its reactions.

The published message is the board's only storage: empty content, exactly
one embed, and the rendered text as that embed's description.  The
reconciler recognizes boards by this shape alone.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import discord
from discord.abc import Messageable

from rolecall.constants import BOARD_COLOR
from rolecall.engine.render import RenderedBoard
from rolecall.errors import ReactAttachError
from rolecall.services.embeds import build_board_embed

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PublishResult:
    """The posted board and the emoji that could not be attached."""

    message: discord.Message
    failed_reactions: list[ReactAttachError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed_reactions


async def attach_reactions(message: discord.Message, emoji: list[str]) -> list[ReactAttachError]:
    """Add each emoji to *message* in order, continuing past failures."""
    failures: list[ReactAttachError] = []
    for token in emoji:
        try:
            await message.add_reaction(token)
        except (discord.HTTPException, TypeError) as exc:
            logger.warning(
                "Could not react with %s on board %s: %s",
                token, message.id, exc,
            )
            failures.append(ReactAttachError(token, str(exc)))
    return failures


async def publish_board(
    channel: Messageable,
    board: RenderedBoard,
    color: int = BOARD_COLOR,
) -> PublishResult:
    """Send *board* to *channel* and attach its reactions.

    Raises
    ------
    discord.HTTPException
        If the board message itself cannot be sent.  Reaction failures
        never raise; they are returned in :attr:`PublishResult.failed_reactions`.
    """
    message = await channel.send(embed=build_board_embed(board.text, color))
    logger.info(
        "Published board %s in channel %s with %d reaction(s)",
        message.id, message.channel.id, len(board.emoji),
    )
    failures = await attach_reactions(message, board.emoji)
    return PublishResult(message=message, failed_reactions=failures)
