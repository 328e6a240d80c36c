"""
TranslationService - one translate invocation end to end.

    TranslationArguments
          ↓ interpret()
    TranslationRequest
          ↓ query text, or the looked-up channel message
    TranslationGateway.translate()
          ↓
    TranslationResult
          ↓ format_response()
    reply text

The service is stateless between calls. Errors (InvalidLanguageCode,
NoTranslatableTarget, TranslationFailed) propagate to the caller, which
decides how to report them.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

from synus.config.logging import get_logger
from synus.translation.errors import NoTranslatableTarget
from synus.translation.formatter import format_response
from synus.translation.gateway import TranslationGateway
from synus.translation.languages import AUTO, LanguageRegistry
from synus.translation.models import TranslationArguments, TranslationRequest
from synus.translation.request import interpret

logger = get_logger(__name__)

# (channel, index_from_latest) -> message with a ``content`` attribute, or None
MessageLookup = Callable[[Any, int], Awaitable[Any]]


class TranslationService:
    """
    Runs the translate pipeline for a single command invocation.

    Args:
        registry: Language registry shared with the interpreter and formatter
        gateway: Initialized translation provider adapter
        message_lookup: Fetches the Nth-from-latest message of a channel
        monospace_tag: Passed through to format_response()
    """

    def __init__(
        self,
        registry: LanguageRegistry,
        gateway: TranslationGateway,
        message_lookup: MessageLookup | None = None,
        monospace_tag: bool = False,
    ) -> None:
        self._registry = registry
        self._gateway = gateway
        self._message_lookup = message_lookup
        self._monospace_tag = monospace_tag

    @property
    def registry(self) -> LanguageRegistry:
        return self._registry

    async def translate(self, arguments: TranslationArguments, channel: Any = None) -> str:
        """
        Interpret, translate and format one request.

        Args:
            arguments: Parsed command arguments
            channel: Invoking channel, used only when the request needs a lookback

        Returns:
            Reply text ready to send

        Raises:
            InvalidLanguageCode: Unknown source or target code
            NoTranslatableTarget: No query and no usable lookback message
            TranslationFailed: Provider call failed
        """
        request = interpret(arguments, self._registry)
        text = request.query_text or await self._resolve_lookback(request, channel)

        result = await self._gateway.translate(
            text, request.source_language, request.target_language
        )
        response = format_response(
            request, result, self._registry, monospace_tag=self._monospace_tag
        )

        requested = request.source_language
        if requested == AUTO:
            requested = result.detected_source_language
        logger.info(
            f"Translated {self._registry.lookup(requested) or requested.upper()} {text!r} "
            f"to {self._registry.lookup(request.target_language)} {result.translated_text!r}"
        )
        return response

    async def translate_text(
        self,
        text: str,
        source: str = AUTO,
        target: str = "en",
    ) -> str:
        """Translate plain text without a channel (no lookback possible)."""
        return await self.translate(TranslationArguments(source=source, target=target, query=text))

    async def _resolve_lookback(self, request: TranslationRequest, channel: Any) -> str:
        """
        Fetch the text of the message ``request.message_lookback`` back.

        Raises NoTranslatableTarget before any provider call when the message
        is missing or has no text.
        """
        if self._message_lookup is None or channel is None:
            raise NoTranslatableTarget("No channel to look back in")

        message = await self._message_lookup(channel, request.message_lookback)
        if message is None:
            raise NoTranslatableTarget(f"No message {request.message_lookback} back in channel")

        content = message.content or ""
        if not content.strip():
            raise NoTranslatableTarget("Query is empty")
        return content
