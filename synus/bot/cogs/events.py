"""
GuildEventsCog - client event listeners.

Joining a guild is only recorded in the log.
"""

from __future__ import annotations

import discord
from discord.ext import commands

from synus.config.logging import get_logger

logger = get_logger(__name__)


class GuildEventsCog(commands.Cog):
    """Logs guild membership changes of the bot itself."""

    def __init__(self, bot) -> None:
        self.bot = bot

    @commands.Cog.listener()
    async def on_guild_join(self, guild: discord.Guild) -> None:
        # owner is None when the member cache doesn't hold the owner
        owner = guild.owner or f"user id {guild.owner_id}"
        logger.info(
            f"[GUILD JOIN] {self.bot.user} was added to {guild.name} ({guild.id}). "
            f"Guild owner: {owner}"
        )
