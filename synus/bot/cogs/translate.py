"""
TranslateCog - the translate prefix command.

    synus translate [from=auto] [to=en] [query] [-m message=1]

Translates the query when one is given, otherwise the message ``-m`` positions
before the command (the one right above it by default). Aliases: trans, tr, t.

Every pipeline error is caught here, reported to the channel as plain text
and logged. Nothing raised by a translation reaches discord.py's error
handler.
"""

from __future__ import annotations

from discord.ext import commands

from synus.config.logging import get_logger
from synus.translation import (
    InvalidLanguageCode,
    NoTranslatableTarget,
    TranslationFailed,
    parse_arguments,
)

logger = get_logger(__name__)

NO_TARGET_REPLY = "Sorry, I can't translate that message."


class TranslateCog(commands.Cog):
    """Translates text or recent channel messages."""

    def __init__(self, bot) -> None:
        self.bot = bot

    @commands.command(
        name="translate",
        aliases=["trans", "tr", "t"],
        help="Translate a given query or a target message. Queries are prioritized over messages.",
        usage="[from=auto] [to=en] [query] [-m message=1]",
    )
    async def translate(self, ctx: commands.Context, *, arguments: str = "") -> None:
        if not self.bot.is_allowed_channel(ctx.channel.id):
            return

        settings = self.bot.settings.translation
        args = parse_arguments(
            arguments,
            default_source=settings.default_source,
            default_target=settings.default_target,
        )

        try:
            async with ctx.typing():
                response = await self.bot.translation.translate(args, ctx.channel)
        except InvalidLanguageCode as e:
            if e.role == "source":
                await ctx.send(f"{e.display_code} is not a valid language code.")
            else:
                await ctx.send(f"{e.display_code} is not a valid ISO language code.")
            logger.warning(f"Illegal language code ({e.display_code})")
            return
        except NoTranslatableTarget as e:
            await ctx.send(NO_TARGET_REPLY)
            logger.warning(f"Nothing to translate: {e.reason}")
            return
        except TranslationFailed as e:
            await ctx.send(self._failure_reply())
            logger.error(f"Translation failed for {arguments!r}: {e}", exc_info=e.cause)
            return
        except Exception as e:
            await ctx.send(self._failure_reply())
            logger.exception(f"Unexpected error translating {arguments!r}: {e}")
            return

        await ctx.send(response)

    def _failure_reply(self) -> str:
        prefix = self.bot.settings.bot.command_prefix
        return f"Yikes, something went wrong. Try running `{prefix}translate` again."
