"""
rolecall.services.embeds — Discord embed builders
==================================================

All embed construction lives here so the cog and the board service only
need to supply data.
"""

from __future__ import annotations

import discord

from rolecall.constants import BOARD_COLOR, USAGE_TEXT


def build_board_embed(text: str, color: int = BOARD_COLOR) -> discord.Embed:
    """Build the single embed that carries a board.

    The description is the whole board; the reconciler re-parses it on every
    reaction, so nothing else may be added to the embed.
    """
    return discord.Embed(description=text, color=discord.Color(color))


def build_usage_embed() -> discord.Embed:
    """Build the usage hint shown for malformed ``reaction-role`` input."""
    return discord.Embed(
        title="\U0001f4dd Reaction Role Boards",
        description=USAGE_TEXT,
        color=discord.Color.orange(),
    )


def build_published_embed(message: discord.Message, count: int) -> discord.Embed:
    """Confirmation shown to the moderator after a board is posted."""
    plural = "role" if count == 1 else "roles"
    return discord.Embed(
        title="✅ Board Published",
        description=f"[Jump to board]({message.jump_url}) · {count} reaction {plural}.",
        color=discord.Color.green(),
    )
