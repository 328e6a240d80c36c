"""
EchoCog - repeats the caller's text back to the channel.
"""

from __future__ import annotations

from discord.ext import commands

from synus.config.logging import get_logger

logger = get_logger(__name__)


class EchoCog(commands.Cog):
    """Provides the echo command."""

    def __init__(self, bot) -> None:
        self.bot = bot

    @commands.command(name="echo", aliases=["e"], help="Repeats your text.", usage="[text]")
    async def echo(self, ctx: commands.Context, *, text: str = "") -> None:
        if not self.bot.is_allowed_channel(ctx.channel.id):
            return

        if not text.strip():
            prefix = self.bot.settings.bot.command_prefix
            await ctx.send(f"Usage: `{prefix}echo [text]`")
            return

        logger.debug(f"Echoing {len(text)} chars for {ctx.author}")
        await ctx.send(text)
