"""
rolecall.bot.__main__ — Entry point for ``python -m rolecall.bot``
==================================================================

Wiring:
1. Load .env (secrets).
2. Load config.yaml (soft settings).
3. Create the RolecallBot and hand it the config.
4. Start the bot (blocking; runs the asyncio event loop).

Run with::

    uv run python -m rolecall.bot
"""

from __future__ import annotations

import logging
import os
import sys

from dotenv import load_dotenv

from rolecall.bot.core import RolecallBot
from rolecall.config import load_config

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s │ %(levelname)-8s │ %(name)s │ %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger("rolecall")


def main() -> None:
    """Bootstrap and run the Rolecall bot."""

    # 1. Environment variables (secrets).
    load_dotenv()

    token = os.getenv("DISCORD_TOKEN")
    if not token or token == "your-discord-bot-token-here":
        logger.critical(
            "DISCORD_TOKEN is not set.  "
            "Copy .env.example → .env and paste your bot token."
        )
        sys.exit(1)

    # 2. Soft configuration.
    cfg = load_config(os.getenv("ROLECALL_CONFIG", "config.yaml"))
    logger.info("Config loaded, prefix: %s", cfg.bot_prefix)

    # 3. Bot.
    bot = RolecallBot(cfg=cfg)

    # 4. Run (blocks until Ctrl+C or SIGTERM).
    logger.info("Starting Rolecall bot…")
    try:
        bot.run(token, log_handler=None)
    except KeyboardInterrupt:
        logger.info("Shutting down gracefully…")


if __name__ == "__main__":
    main()
