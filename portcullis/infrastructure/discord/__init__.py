"""Discord adapters."""

from portcullis.infrastructure.discord.guild_gateway import DiscordGuildGateway

__all__ = ["DiscordGuildGateway"]
