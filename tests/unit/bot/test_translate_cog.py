"""
Tests for TranslateCog.

Covers:
- Successful translation reply
- Each pipeline error turned into the right plain-text reply
- Unexpected exceptions caught at the command boundary
- Channel restriction
- Command metadata (name, aliases)
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from synus.bot.cogs.translate import NO_TARGET_REPLY, TranslateCog
from synus.config.settings import BotSettings, TranslationSettings
from synus.translation import (
    InvalidLanguageCode,
    NoTranslatableTarget,
    TranslationArguments,
    TranslationFailed,
)


def _make_ctx(channel_id=100):
    ctx = MagicMock()
    ctx.channel = MagicMock()
    ctx.channel.id = channel_id
    ctx.send = AsyncMock()
    typing_cm = MagicMock()
    typing_cm.__aenter__ = AsyncMock(return_value=None)
    typing_cm.__aexit__ = AsyncMock(return_value=False)
    ctx.typing = MagicMock(return_value=typing_cm)
    return ctx


def _make_bot(reply="[ French >> English ]    Hello", error=None, allowed=True):
    bot = MagicMock()
    bot.is_allowed_channel.return_value = allowed
    bot.settings.bot = BotSettings(command_prefix="synus ")
    bot.settings.translation = TranslationSettings()
    bot.translation = MagicMock()
    if error is not None:
        bot.translation.translate = AsyncMock(side_effect=error)
    else:
        bot.translation.translate = AsyncMock(return_value=reply)
    return bot


async def _invoke(cog, ctx, arguments=""):
    await cog.translate.callback(cog, ctx, arguments=arguments)


class TestTranslateCommand:
    @pytest.mark.asyncio
    async def test_successful_translation_sends_reply(self):
        bot = _make_bot(reply="[ French >> English ]    Hello")
        cog = TranslateCog(bot)
        ctx = _make_ctx()

        await _invoke(cog, ctx, "fr en Bonjour")

        bot.translation.translate.assert_awaited_once_with(
            TranslationArguments(source="fr", target="en", query="Bonjour"), ctx.channel
        )
        ctx.send.assert_awaited_once_with("[ French >> English ]    Hello")

    @pytest.mark.asyncio
    async def test_no_arguments_uses_configured_defaults(self):
        bot = _make_bot()
        bot.settings.translation = TranslationSettings(default_source="auto", default_target="de")
        cog = TranslateCog(bot)
        ctx = _make_ctx()

        await _invoke(cog, ctx)

        args = bot.translation.translate.await_args.args[0]
        assert args == TranslationArguments(source="auto", target="de")

    @pytest.mark.asyncio
    async def test_lookback_flag_parsed(self):
        bot = _make_bot()
        cog = TranslateCog(bot)
        ctx = _make_ctx()

        await _invoke(cog, ctx, "es en -m 3")

        args = bot.translation.translate.await_args.args[0]
        assert args.message_index == 3
        assert args.query is None

    @pytest.mark.asyncio
    async def test_invalid_source_reply(self):
        bot = _make_bot(error=InvalidLanguageCode("xx", "source"))
        cog = TranslateCog(bot)
        ctx = _make_ctx()

        await _invoke(cog, ctx, "xx en hi")

        ctx.send.assert_awaited_once_with("XX is not a valid language code.")

    @pytest.mark.asyncio
    async def test_invalid_target_reply(self):
        bot = _make_bot(error=InvalidLanguageCode("Qq", "target"))
        cog = TranslateCog(bot)
        ctx = _make_ctx()

        await _invoke(cog, ctx, "fr Qq hi")

        ctx.send.assert_awaited_once_with("QQ is not a valid ISO language code.")

    @pytest.mark.asyncio
    async def test_no_target_reply(self):
        bot = _make_bot(error=NoTranslatableTarget("Query is empty"))
        cog = TranslateCog(bot)
        ctx = _make_ctx()

        await _invoke(cog, ctx)

        ctx.send.assert_awaited_once_with(NO_TARGET_REPLY)

    @pytest.mark.asyncio
    async def test_provider_failure_reply(self):
        bot = _make_bot(error=TranslationFailed("down", cause=ConnectionError("x")))
        cog = TranslateCog(bot)
        ctx = _make_ctx()

        await _invoke(cog, ctx, "fr en Bonjour")

        ctx.send.assert_awaited_once_with(
            "Yikes, something went wrong. Try running `synus translate` again."
        )

    @pytest.mark.asyncio
    async def test_unexpected_error_caught(self):
        bot = _make_bot(error=KeyError("boom"))
        cog = TranslateCog(bot)
        ctx = _make_ctx()

        await _invoke(cog, ctx, "fr en Bonjour")

        ctx.send.assert_awaited_once()
        assert "something went wrong" in ctx.send.await_args.args[0]

    @pytest.mark.asyncio
    async def test_blocked_channel_is_ignored(self):
        bot = _make_bot(allowed=False)
        cog = TranslateCog(bot)
        ctx = _make_ctx()

        await _invoke(cog, ctx, "fr en Bonjour")

        bot.translation.translate.assert_not_called()
        ctx.send.assert_not_called()


class TestTranslateCommandMetadata:
    def test_name_and_aliases(self):
        cog = TranslateCog(MagicMock())
        assert cog.translate.name == "translate"
        assert set(cog.translate.aliases) == {"trans", "tr", "t"}

    def test_usage_documents_lookback_flag(self):
        cog = TranslateCog(MagicMock())
        assert "-m" in cog.translate.usage
