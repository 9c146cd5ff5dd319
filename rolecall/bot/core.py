"""
rolecall.bot.core — Bot Instance & Cog Loader
==============================================

Defines :class:`RolecallBot`, a ``commands.Bot`` subclass that:

1. Stores the shared config (``bot.cfg``) so every Cog can read it via
   ``self.bot.cfg``.
2. Loads every Cog listed in :data:`EXTENSIONS`.

Gateway listeners belong to Cogs, not to the bot.  Loading an extension
subscribes its listeners and unloading it removes them, so reloading the
reaction-role cog never leaves a stale handler behind.
"""

from __future__ import annotations

import logging

import discord
from discord.ext import commands

from rolecall.config import RolecallConfig

logger = logging.getLogger(__name__)

# Cog modules to load on startup.
EXTENSIONS: list[str] = [
    "rolecall.bot.cogs.reaction_roles",
]


class RolecallBot(commands.Bot):
    """Custom Bot subclass that carries project-wide state.

    Parameters
    ----------
    cfg:
        The parsed :class:`RolecallConfig` from ``config.yaml``.
    """

    def __init__(self, cfg: RolecallConfig) -> None:
        # Default intents include GUILDS and GUILD_MESSAGE_REACTIONS.
        # MESSAGE_CONTENT is privileged but required: the board definition
        # arrives as the body of a prefix command.
        intents = discord.Intents.default()
        intents.message_content = True
        intents.presences = False

        super().__init__(
            command_prefix=cfg.bot_prefix,
            intents=intents,
            description="Reaction role boards",
        )

        self.cfg = cfg

    # -----------------------------------------------------------------------
    # Lifecycle hooks
    # -----------------------------------------------------------------------
    async def setup_hook(self) -> None:
        """Load all Cog extensions before connecting.

        A broken extension is logged and skipped rather than stopping the
        bot.
        """
        for ext in EXTENSIONS:
            try:
                await self.load_extension(ext)
                logger.info("Loaded extension: %s", ext)
            except Exception as exc:
                logger.error("Failed to load extension %s: %s", ext, exc)

    async def on_ready(self) -> None:
        """Fired when the bot has connected and the cache is populated."""
        assert self.user is not None  # guaranteed after on_ready
        logger.info("Logged in as %s (ID: %s)", self.user.name, self.user.id)

        if self.cfg.guild_id is not None and self.get_guild(self.cfg.guild_id) is None:
            logger.warning(
                "Configured guild %d not found; is the bot invited?",
                self.cfg.guild_id,
            )
        logger.info("Serving %d guild(s)", len(self.guilds))

    async def close(self) -> None:
        logger.info("Bot shutting down…")
        await super().close()
