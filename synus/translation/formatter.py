"""
Reply formatting for the translate command.

Turns a request and the provider's result into the message sent back to the
channel, e.g.::

    [ French >> English ]    Hello

and, when the provider detected a different source language than the one
requested::

    :warning:    [ Spanish >> English ]    Hello

    You might have meant to translate from Italian (IT) instead. Translation may not be accurate.
"""

from __future__ import annotations

from synus.translation.languages import AUTO, LanguageRegistry
from synus.translation.models import TranslationRequest, TranslationResult

WARNING_PREFIX = ":warning:    "
TAG_SEPARATOR = "    "


def monospace(text: str) -> str:
    """Wrap text in Discord inline-code markup."""
    return f"`{text}`"


def _display_name(registry: LanguageRegistry, code: str) -> str:
    # Provider may detect a language the registry does not list
    return registry.lookup(code) or code.upper()


def format_response(
    request: TranslationRequest,
    result: TranslationResult,
    registry: LanguageRegistry,
    *,
    monospace_tag: bool = False,
) -> str:
    """
    Build the user-facing reply for a finished translation.

    The requested source is the explicit ``from`` language, or the detected one
    when the request was 'auto'. A mismatch between requested and detected
    source adds a warning prefix and a trailing hint line.

    Args:
        request: The validated request
        result: Provider output for that request
        registry: Registry used to render language names
        monospace_tag: Render the ``[ from >> to ]`` tag as inline code

    Returns:
        The reply text. Same inputs always give the same output.
    """
    detected_code = result.detected_source_language
    detected_source = _display_name(registry, detected_code)
    if request.source_language == AUTO:
        requested_source = detected_source
    else:
        requested_source = _display_name(registry, request.source_language)
    target = _display_name(registry, request.target_language)

    mismatch = requested_source != detected_source

    tag = f"[ {requested_source} >> {target} ]"
    if monospace_tag:
        tag = monospace(tag)

    response = f"{WARNING_PREFIX if mismatch else ''}{tag}{TAG_SEPARATOR}{result.translated_text}"

    if mismatch:
        response += (
            f"\n\nYou might have meant to translate from {detected_source} "
            f"({detected_code.upper()}) instead. Translation may not be accurate."
        )

    return response
