"""
SynusBot - discord.py bot client.

Manages the full bot lifecycle:
- Opens the translation provider client once at startup
- Loads command cogs (TranslateCog, EchoCog) and event listeners (GuildEventsCog)
- Closes all resources on shutdown via AsyncExitStack
"""

from __future__ import annotations

from contextlib import AsyncExitStack

import discord
from discord.ext import commands

from synus.config.logging import get_logger
from synus.config.settings import Settings
from synus.translation import GoogleTranslateGateway, TranslationService, get_registry

logger = get_logger(__name__)


class SynusBot(commands.Bot):
    """
    Prefix-command Discord bot ("synus translate fr en Bonjour").

    Holds shared application state (the translation service) and exposes it
    to cogs. Async resources are managed via AsyncExitStack so they're closed
    when the bot shuts down.

    Args:
        settings: Full application settings (bot token, prefix, translation config)
    """

    def __init__(self, settings: Settings) -> None:
        intents = discord.Intents.default()
        intents.message_content = True  # Prefix commands and lookback need message text
        super().__init__(
            command_prefix=commands.when_mentioned_or(settings.bot.command_prefix),
            intents=intents,
            case_insensitive=True,
            strip_after_prefix=True,
        )
        self.settings = settings
        self.translation: TranslationService | None = None
        self._exit_stack = AsyncExitStack()

    async def setup_hook(self) -> None:
        """
        Called after login, before connecting to the Gateway.

        Opens the translation provider and loads cogs.
        """
        # --- 1. Translation provider (kept open for the bot's lifetime) ---
        logger.info("Initializing translation gateway...")
        gateway = await self._exit_stack.enter_async_context(
            GoogleTranslateGateway(self.settings.translation.service_urls)
        )
        self.translation = TranslationService(
            registry=get_registry(),
            gateway=gateway,
            message_lookup=self.message_from_channel,
            monospace_tag=self.settings.translation.monospace_tag,
        )
        logger.info(f"Translation service ready ({len(get_registry())} languages)")

        # --- 2. Load cogs ---
        from synus.bot.cogs.echo import EchoCog
        from synus.bot.cogs.events import GuildEventsCog
        from synus.bot.cogs.translate import TranslateCog
        await self.add_cog(TranslateCog(self))
        await self.add_cog(EchoCog(self))
        await self.add_cog(GuildEventsCog(self))
        logger.info("Cogs loaded")

    async def on_ready(self) -> None:
        """Called when the bot successfully connects to Discord."""
        logger.info(f"Logged in as {self.user} (id: {self.user.id})")
        logger.info(f"Connected to {len(self.guilds)} guild(s)")

    async def close(self) -> None:
        """Graceful shutdown - clean up all async resources before disconnecting."""
        logger.info(f"Shutting down {self.settings.bot.name}...")
        await self._exit_stack.aclose()
        await super().close()

    def is_allowed_channel(self, channel_id: int) -> bool:
        """
        Return True if the bot should respond in this channel.

        If `allowed_channel_ids` is empty (the default), the bot responds everywhere.
        If it's non-empty, the bot only responds in the listed channel IDs.
        """
        allowed = self.settings.bot.allowed_channel_ids
        return not allowed or channel_id in allowed

    async def message_from_channel(
        self, channel: discord.abc.Messageable, index: int
    ) -> discord.Message | None:
        """
        Return the message ``index`` positions back from the latest one.

        Index 0 is the newest message (normally the command itself), 1 the one
        before it. Returns None when the channel history is shorter than that.
        """
        if index < 0:
            return None
        position = 0
        async for message in channel.history(limit=index + 1):
            if position == index:
                return message
            position += 1
        return None
