"""Register the bot's slash commands with Discord.

Syncs to DISCORD_GUILD_ID when set (visible immediately), otherwise
globally (may take up to an hour to propagate). Pass --global to force a
global sync even when a guild is configured.

Usage:
    uv run python -m scripts.sync_commands [--global]
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import discord
from dotenv import load_dotenv

from portcullis.bot.client import PortcullisBot
from portcullis.core.config import get_settings
from portcullis.shared.telemetry.logging import get_logger, setup_logging

logger = get_logger(__name__)


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DISCORD_* when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


async def main() -> None:
    """Log in, sync the command tree, log out."""
    _load_env()
    get_settings.cache_clear()
    setup_logging()
    settings = get_settings()
    force_global = "--global" in sys.argv[1:]

    bot = PortcullisBot(settings)
    async with bot:
        await bot.login(settings.discord_token.get_secret_value())
        if settings.discord_guild_id and not force_global:
            guild = discord.Object(id=settings.discord_guild_id)
            bot.tree.copy_global_to(guild=guild)
            synced = await bot.tree.sync(guild=guild)
            logger.info("Synced %d commands to guild %s", len(synced), settings.discord_guild_id)
        else:
            synced = await bot.tree.sync()
            logger.info("Synced %d commands globally", len(synced))
    for command in synced:
        print(f"/{command.name}")


if __name__ == "__main__":
    asyncio.run(main())
