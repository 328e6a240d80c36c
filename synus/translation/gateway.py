"""
Translation provider adapters.

TranslationGateway is the interface the rest of the bot talks to;
GoogleTranslateGateway implements it on top of googletrans. Provider errors
never escape an adapter: they are re-raised as TranslationFailed with the
original exception attached as ``cause``.

There is no retry and no timeout here. A failed call surfaces immediately and
the user re-runs the command.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from googletrans import Translator

from synus.config.logging import get_logger
from synus.translation.errors import TranslationFailed
from synus.translation.models import TranslationResult

logger = get_logger(__name__)


class TranslationGateway(ABC):
    """
    Abstract base class for translation providers.

    Adapters hold a long-lived client, so they are used as async context
    managers: the bot enters one at startup and exits it on shutdown.
    """

    @abstractmethod
    async def initialize(self) -> None:
        """Open any connections the provider needs."""

    @abstractmethod
    async def shutdown(self) -> None:
        """Release connections. Safe to call when never initialized."""

    @abstractmethod
    async def translate(
        self,
        text: str,
        source_language: str,
        target_language: str,
    ) -> TranslationResult:
        """
        Translate ``text`` with a single provider call.

        Args:
            text: Text to translate
            source_language: Registry code or 'auto'
            target_language: Registry code

        Returns:
            TranslationResult with the translated text and detected source code

        Raises:
            TranslationFailed: On any transport or provider error
        """

    async def __aenter__(self):
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.shutdown()
        return False


class GoogleTranslateGateway(TranslationGateway):
    """
    Google Translate via the googletrans client.

    Args:
        service_urls: Google Translate hosts to rotate through
    """

    def __init__(self, service_urls: list[str] | None = None) -> None:
        self._service_urls = service_urls
        self._translator: Translator | None = None

    async def initialize(self) -> None:
        if self._translator is not None:
            return
        # raise_exception: surface non-200 responses instead of parsing junk
        if self._service_urls:
            self._translator = Translator(service_urls=self._service_urls, raise_exception=True)
        else:
            self._translator = Translator(raise_exception=True)
        await self._translator.__aenter__()
        logger.info("Google Translate client ready")

    async def shutdown(self) -> None:
        if self._translator is None:
            return
        await self._translator.__aexit__(None, None, None)
        self._translator = None
        logger.info("Google Translate client closed")

    async def translate(
        self,
        text: str,
        source_language: str,
        target_language: str,
    ) -> TranslationResult:
        if self._translator is None:
            raise RuntimeError("Translation gateway not initialized")

        try:
            translated = await self._translator.translate(
                text, dest=target_language, src=source_language
            )
        except Exception as e:
            raise TranslationFailed(f"Translation provider call failed: {e}", cause=e) from e

        logger.debug(f"Provider detected {translated.src!r} for {len(text)} chars")
        return TranslationResult(
            translated_text=translated.text,
            detected_source_language=str(translated.src).lower(),
        )
