"""
rolecall.bot.cogs.reaction_roles — Reaction Role Boards
========================================================

Command:
- ``reaction-role #channel <text>``: publish the text as a board in
  ``#channel``.  Every line with a role mention and an emoji becomes a
  reaction role; ``<@Name>`` mentions of roles that don't exist yet are
  created.

Listeners:
- ``on_raw_reaction_add`` / ``on_raw_reaction_remove``: toggle the role
  bound to the reacted emoji.  Raw events are used so boards keep working
  after the message falls out of the cache.

The listeners live and die with this Cog: loading the extension subscribes
them and unloading it removes them.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import discord
from discord.abc import Messageable
from discord.ext import commands

from rolecall.constants import COMMAND_NAME
from rolecall.engine.definitions import (
    RoleDefinition,
    parse_definitions,
    split_channel_reference,
)
from rolecall.engine.render import render_board
from rolecall.errors import ParseError, ResolutionError
from rolecall.services.board_service import publish_board
from rolecall.services.embeds import build_published_embed, build_usage_embed
from rolecall.services.reconciliation_service import ReactionReconciler
from rolecall.services.role_resolver import resolve_definitions

if TYPE_CHECKING:
    from rolecall.bot.core import RolecallBot

logger = logging.getLogger(__name__)


def is_moderator():
    """Check that the author holds the configured moderator role.

    ``moderator_role_id`` wins when set; otherwise the role is matched by
    ``moderator_role_name``.
    """
    async def predicate(ctx: commands.Context) -> bool:
        bot: RolecallBot = ctx.bot  # type: ignore[assignment]
        roles = getattr(ctx.author, "roles", [])
        role_id = bot.cfg.moderator_role_id
        if role_id is not None:
            return any(role.id == role_id for role in roles)
        return any(role.name == bot.cfg.moderator_role_name for role in roles)
    return commands.check(predicate)


def parse_command_body(body: str) -> tuple[int, str, list[RoleDefinition]]:
    """Split a command body into ``(channel_id, board_text, definitions)``.

    Raises
    ------
    ParseError
        If the body doesn't start with a channel mention or holds no
        definitions.
    """
    channel_id, text = split_channel_reference(body)
    if channel_id is None:
        raise ParseError("missing channel mention")
    definitions = parse_definitions(text)
    if not definitions:
        raise ParseError("no role/emoji definitions")
    return channel_id, text, definitions


class ReactionRoles(commands.Cog, name="ReactionRoles"):
    """Publishes reaction role boards and keeps member roles in sync."""

    def __init__(self, bot: RolecallBot) -> None:
        self.bot = bot
        self.reconciler = ReactionReconciler(bot)

    async def cog_load(self) -> None:
        logger.info("Reaction role listeners subscribed")

    async def cog_unload(self) -> None:
        logger.info("Reaction role listeners unsubscribed")

    # -------------------------------------------------------------------
    # reaction-role
    # -------------------------------------------------------------------
    @commands.command(
        name=COMMAND_NAME,
        help="Creates a reaction role board in the specified channel.",
    )
    @commands.guild_only()
    @is_moderator()
    async def reaction_role(self, ctx: commands.Context, *, body: str = "") -> None:
        assert ctx.guild is not None  # guaranteed by guild_only

        try:
            channel_id, text, definitions = parse_command_body(body)
        except ParseError as exc:
            logger.debug("reaction-role usage shown to %s: %s", ctx.author.id, exc)
            await ctx.reply(embed=build_usage_embed())
            return

        # Only channels of the invoking guild are valid targets
        try:
            channel = await ctx.guild.fetch_channel(channel_id)
        except (discord.HTTPException, discord.InvalidData):
            channel = None
        if not isinstance(channel, Messageable):
            await ctx.reply("I couldn't find that channel.")
            return

        try:
            resolved = await resolve_definitions(definitions, ctx.guild)
        except ResolutionError as exc:
            logger.warning("Board for guild %s aborted: %s", ctx.guild.id, exc)
            await ctx.reply("I need permission to manage roles in order to create new roles.")
            return

        rendered = render_board(text, resolved)
        try:
            result = await publish_board(channel, rendered, self.bot.cfg.board_color)
        except discord.HTTPException as exc:
            logger.warning(
                "Could not publish board in channel %s: %s", channel_id, exc,
            )
            await ctx.reply("I couldn't post in that channel.")
            return

        if not result.ok:
            logger.warning(
                "Board %s published with %d failed reaction(s)",
                result.message.id, len(result.failed_reactions),
            )
            for failure in result.failed_reactions:
                await ctx.reply(
                    f"Unable to react with: {failure.emoji}, you may have to do this manually."
                )

        await ctx.reply(embed=build_published_embed(result.message, len(resolved)))

    # -------------------------------------------------------------------
    # Reaction listeners
    # -------------------------------------------------------------------
    @commands.Cog.listener()
    async def on_raw_reaction_add(self, payload: discord.RawReactionActionEvent) -> None:
        """Grant the board role bound to the reacted emoji."""
        try:
            await self.reconciler.reconcile(payload, add=True)
        except Exception:
            logger.exception(
                "Error reconciling reaction add on message %s from user %s",
                payload.message_id, payload.user_id,
            )

    @commands.Cog.listener()
    async def on_raw_reaction_remove(self, payload: discord.RawReactionActionEvent) -> None:
        """Revoke the board role bound to the removed emoji."""
        try:
            await self.reconciler.reconcile(payload, add=False)
        except Exception:
            logger.exception(
                "Error reconciling reaction remove on message %s from user %s",
                payload.message_id, payload.user_id,
            )

    # -------------------------------------------------------------------
    # Error handler for failed checks
    # -------------------------------------------------------------------
    async def cog_command_error(
        self, ctx: commands.Context, error: commands.CommandError,
    ) -> None:
        if isinstance(error, commands.NoPrivateMessage):
            await ctx.reply("This command is only available in a guild.")
        elif isinstance(error, commands.CheckFailure):
            cfg = self.bot.cfg
            role = f"<@&{cfg.moderator_role_id}>" if cfg.moderator_role_id else cfg.moderator_role_name
            await ctx.reply(
                f"\U0001f512 You need the {role} role to use this command.",
                allowed_mentions=discord.AllowedMentions.none(),
            )
        else:
            logger.error(
                "Command %s failed", ctx.command, exc_info=error,
            )


async def setup(bot: RolecallBot) -> None:
    await bot.add_cog(ReactionRoles(bot))
