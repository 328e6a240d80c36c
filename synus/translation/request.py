"""
Request interpretation for the translate command.

Two steps, both pure:

    raw text after the command name
        -> parse_arguments()  -> TranslationArguments   (shape only)
        -> interpret()        -> TranslationRequest     (defaults + validation)

Usage accepted by parse_arguments():

    [from] [to] [query...] [-m <int>]

``from`` and ``to`` are single words or double-quoted phrases. The ``-m`` flag
may appear anywhere in the text (``-m 2``, ``-m2`` and ``-m=2`` are all
accepted) and is removed before the positional arguments are read.
"""

from __future__ import annotations

import re

from synus.translation.errors import InvalidLanguageCode, NoTranslatableTarget
from synus.translation.languages import AUTO, LanguageRegistry
from synus.translation.models import TranslationArguments, TranslationRequest

# "-m 2", "-m2", "-m=2" as a standalone token
_LOOKBACK_FLAG_RE = re.compile(r"(?<!\S)-m\s*=?\s*(?P<index>[+-]?\d+)(?!\S)")


def _take_phrase(text: str) -> tuple[str | None, str]:
    """Split the leading phrase off ``text``; returns (phrase, remainder)."""
    text = text.lstrip()
    if not text:
        return None, ""

    if text[0] == '"':
        end = text.find('"', 1)
        if end != -1:
            return text[1:end], text[end + 1:]

    parts = text.split(maxsplit=1)
    return parts[0], parts[1] if len(parts) > 1 else ""


def parse_arguments(
    raw: str,
    default_source: str = AUTO,
    default_target: str = "en",
) -> TranslationArguments:
    """
    Parse the free-form argument text of a translate command.

    Args:
        raw: Everything after the command name (may be empty)
        default_source: Used when no ``from`` phrase is given
        default_target: Used when no ``to`` phrase is given

    Returns:
        TranslationArguments with defaults filled in; nothing is validated yet

    Example:
        >>> args = parse_arguments("fr en Bonjour tout le monde")
        >>> args.source, args.target, args.query
        ('fr', 'en', 'Bonjour tout le monde')
        >>> parse_arguments("de -m 3").message_index
        3
    """
    message_index = 0
    match = _LOOKBACK_FLAG_RE.search(raw)
    if match:
        message_index = int(match.group("index"))
        raw = f"{raw[:match.start()]} {raw[match.end():]}"

    source, rest = _take_phrase(raw)
    target, rest = _take_phrase(rest)
    query = rest.strip() or None

    return TranslationArguments(
        source=source or default_source,
        target=target or default_target,
        query=query,
        message_index=message_index,
    )


def interpret(arguments: TranslationArguments, registry: LanguageRegistry) -> TranslationRequest:
    """
    Validate parsed arguments and resolve defaults into a TranslationRequest.

    Checks run in a fixed order so the first problem is the one reported:
    source code, target code, then the lookback target.

    Args:
        arguments: Output of parse_arguments()
        registry: Language registry used to validate codes

    Returns:
        Validated TranslationRequest. When a query is present it always wins
        and the lookback is dropped.

    Raises:
        InvalidLanguageCode: ``from`` is not 'auto' and unknown, or ``to`` is unknown
        NoTranslatableTarget: No query and the lookback index is below 1
    """
    source = arguments.source.lower()
    target = arguments.target.lower()

    if source != AUTO and source not in registry:
        raise InvalidLanguageCode(arguments.source, "source")

    if target not in registry:
        raise InvalidLanguageCode(arguments.target, "target")

    query = arguments.query or None
    if query:
        return TranslationRequest(
            source_language=source,
            target_language=target,
            query_text=query,
        )

    # Unset flag means the message right before the command
    index = arguments.message_index or 1
    if index < 1:
        raise NoTranslatableTarget(f"Invalid message target ({index}) and no implicit query")

    return TranslationRequest(
        source_language=source,
        target_language=target,
        message_lookback=index,
    )
