"""
Translation pipeline behind the translate command.

    raw argument text
          ↓ parse_arguments()
    TranslationArguments
          ↓ interpret()            (LanguageRegistry validates codes)
    TranslationRequest
          ↓ TranslationGateway     (googletrans, one call, no retry)
    TranslationResult
          ↓ format_response()
    reply text

TranslationService wires the stages together for one invocation. Nothing
here knows about Discord beyond "a channel we can look messages up in".
"""

from synus.translation.errors import (
    InvalidLanguageCode,
    NoTranslatableTarget,
    TranslationError,
    TranslationFailed,
)
from synus.translation.formatter import format_response
from synus.translation.gateway import GoogleTranslateGateway, TranslationGateway
from synus.translation.languages import LanguageEntry, LanguageRegistry, get_registry
from synus.translation.models import TranslationArguments, TranslationRequest, TranslationResult
from synus.translation.request import interpret, parse_arguments
from synus.translation.service import TranslationService

__all__ = [
    "GoogleTranslateGateway",
    "InvalidLanguageCode",
    "LanguageEntry",
    "LanguageRegistry",
    "NoTranslatableTarget",
    "TranslationArguments",
    "TranslationError",
    "TranslationFailed",
    "TranslationGateway",
    "TranslationRequest",
    "TranslationResult",
    "TranslationService",
    "format_response",
    "get_registry",
    "interpret",
    "parse_arguments",
]
