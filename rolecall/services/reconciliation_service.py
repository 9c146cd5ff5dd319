"""
rolecall.services.reconciliation_service — Reaction → Role Reconciliation
==========================================================================

Maps one raw reaction event to at most one role change.

How it works:
    1. Ignore bots and reactions outside a guild.
    2. Fetch the live message; it must be authored by us, have no content
       and exactly one embed.
    3. Re-parse the embed description into definitions.
    4. Find the definition whose emoji equals the reacted emoji.
    5. Fetch the reacting member.
    6. Add (or remove) the role.  Failures are logged and dropped.

Nothing is cached between events.  Editing a board changes the very next
reconciliation, and concurrent events on one board are independent;
Discord treats a repeated add or remove as a no-op.

Any step that does not apply raises :class:`ReconcileSkip`; the public
:meth:`ReactionReconciler.reconcile` turns that into
:attr:`ReconcileOutcome.IGNORED`.  Most reactions in a guild are not on a
board, so skips are logged at DEBUG only.
"""

from __future__ import annotations

import enum
import logging

import discord
from discord.abc import Messageable

from rolecall.engine.definitions import RoleDefinition, parse_definitions
from rolecall.errors import ReconcileSkip

logger = logging.getLogger(__name__)

MEMBERSHIP_REASON = "Rolecall: reaction role board"


class ReconcileOutcome(enum.StrEnum):
    """Terminal states of a single reconciliation."""

    IGNORED = "ignored"
    APPLIED = "applied"


class ReactionReconciler:
    """Stateless reaction handler bound to a connected client."""

    def __init__(self, client: discord.Client) -> None:
        self.client = client

    async def reconcile(
        self, payload: discord.RawReactionActionEvent, *, add: bool,
    ) -> ReconcileOutcome:
        """Apply the role change for *payload*, if it targets a board."""
        try:
            self._check_actor(payload)
            message = await self._fetch_board_message(payload)
            definition = self._match_definition(message, payload)
            member = await self._fetch_member(message, payload)
        except ReconcileSkip as skip:
            logger.debug(
                "Reaction on message %s by user %s ignored: %s",
                payload.message_id, payload.user_id, skip.reason,
            )
            return ReconcileOutcome.IGNORED

        await self._apply(member, definition, add=add)
        return ReconcileOutcome.APPLIED

    # -----------------------------------------------------------------------
    # Steps
    # -----------------------------------------------------------------------
    def _check_actor(self, payload: discord.RawReactionActionEvent) -> None:
        if payload.guild_id is None:
            raise ReconcileSkip("not in a guild")

        # payload.member is only populated for REACTION_ADD
        actor = payload.member or self.client.get_user(payload.user_id)
        if actor is not None and actor.bot:
            raise ReconcileSkip("actor is a bot")

    async def _fetch_board_message(
        self, payload: discord.RawReactionActionEvent,
    ) -> discord.Message:
        channel = self.client.get_channel(payload.channel_id)
        try:
            if channel is None:
                channel = await self.client.fetch_channel(payload.channel_id)
            if not isinstance(channel, Messageable):
                raise ReconcileSkip("channel cannot hold messages")
            message = await channel.fetch_message(payload.message_id)
        except discord.HTTPException as exc:
            raise ReconcileSkip(f"message unavailable ({exc.status})") from exc
        except discord.InvalidData as exc:
            raise ReconcileSkip("channel type not supported") from exc

        me = self.client.user
        if me is None or message.author.id != me.id:
            raise ReconcileSkip("message not authored by this bot")
        if message.content:
            raise ReconcileSkip("message has visible content")
        if len(message.embeds) != 1:
            raise ReconcileSkip(f"message has {len(message.embeds)} embeds")
        return message

    def _match_definition(
        self, message: discord.Message, payload: discord.RawReactionActionEvent,
    ) -> RoleDefinition:
        definitions = parse_definitions(message.embeds[0].description or "")
        if not definitions:
            raise ReconcileSkip("embed is not a board")

        emoji = str(payload.emoji)
        definition = next((d for d in definitions if d.emoji == emoji), None)
        if definition is None:
            raise ReconcileSkip(f"emoji {emoji} is not on this board")
        if not definition.resolved:
            raise ReconcileSkip(f"board line for {emoji} has no role id")
        return definition

    async def _fetch_member(
        self, message: discord.Message, payload: discord.RawReactionActionEvent,
    ) -> discord.Member:
        guild = message.guild or self.client.get_guild(payload.guild_id)
        if guild is None:
            raise ReconcileSkip("guild unavailable")
        try:
            member = await guild.fetch_member(payload.user_id)
        except discord.HTTPException as exc:
            raise ReconcileSkip(f"member unavailable ({exc.status})") from exc
        if member.bot:
            raise ReconcileSkip("actor is a bot")
        return member

    async def _apply(
        self, member: discord.Member, definition: RoleDefinition, *, add: bool,
    ) -> None:
        role = discord.Object(id=int(definition.role_id))
        try:
            if add:
                await member.add_roles(role, reason=MEMBERSHIP_REASON)
            else:
                await member.remove_roles(role, reason=MEMBERSHIP_REASON)
        except discord.HTTPException as exc:
            logger.warning(
                "Could not %s role %s %s member %s: %s",
                "add" if add else "remove", definition.role_id,
                "to" if add else "from", member.id, exc,
            )
            return

        logger.info(
            "%s role %s %s member %s via %s",
            "Added" if add else "Removed", definition.role_id,
            "to" if add else "from", member.id, definition.emoji,
        )
