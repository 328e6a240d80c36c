"""
Language registry: language code -> human-readable display name.

The default table matches the set of codes the googletrans provider accepts,
so anything the registry validates can be handed to the provider unchanged.
The registry is built once and passed by reference to whoever needs it.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field

AUTO = "auto"

LANGUAGE_NAMES: Mapping[str, str] = MappingProxyType({
    "af": "Afrikaans",
    "sq": "Albanian",
    "am": "Amharic",
    "ar": "Arabic",
    "hy": "Armenian",
    "az": "Azerbaijani",
    "eu": "Basque",
    "be": "Belarusian",
    "bn": "Bengali",
    "bs": "Bosnian",
    "bg": "Bulgarian",
    "ca": "Catalan",
    "ceb": "Cebuano",
    "ny": "Chichewa",
    "zh-cn": "Chinese (Simplified)",
    "zh-tw": "Chinese (Traditional)",
    "co": "Corsican",
    "hr": "Croatian",
    "cs": "Czech",
    "da": "Danish",
    "nl": "Dutch",
    "en": "English",
    "eo": "Esperanto",
    "et": "Estonian",
    "tl": "Filipino",
    "fi": "Finnish",
    "fr": "French",
    "fy": "Frisian",
    "gl": "Galician",
    "ka": "Georgian",
    "de": "German",
    "el": "Greek",
    "gu": "Gujarati",
    "ht": "Haitian Creole",
    "ha": "Hausa",
    "haw": "Hawaiian",
    "iw": "Hebrew",
    "hi": "Hindi",
    "hmn": "Hmong",
    "hu": "Hungarian",
    "is": "Icelandic",
    "ig": "Igbo",
    "id": "Indonesian",
    "ga": "Irish",
    "it": "Italian",
    "ja": "Japanese",
    "jw": "Javanese",
    "kn": "Kannada",
    "kk": "Kazakh",
    "km": "Khmer",
    "ko": "Korean",
    "ku": "Kurdish (Kurmanji)",
    "ky": "Kyrgyz",
    "lo": "Lao",
    "la": "Latin",
    "lv": "Latvian",
    "lt": "Lithuanian",
    "lb": "Luxembourgish",
    "mk": "Macedonian",
    "mg": "Malagasy",
    "ms": "Malay",
    "ml": "Malayalam",
    "mt": "Maltese",
    "mi": "Maori",
    "mr": "Marathi",
    "mn": "Mongolian",
    "my": "Myanmar (Burmese)",
    "ne": "Nepali",
    "no": "Norwegian",
    "or": "Odia",
    "ps": "Pashto",
    "fa": "Persian",
    "pl": "Polish",
    "pt": "Portuguese",
    "pa": "Punjabi",
    "ro": "Romanian",
    "ru": "Russian",
    "sm": "Samoan",
    "gd": "Scots Gaelic",
    "sr": "Serbian",
    "st": "Sesotho",
    "sn": "Shona",
    "sd": "Sindhi",
    "si": "Sinhala",
    "sk": "Slovak",
    "sl": "Slovenian",
    "so": "Somali",
    "es": "Spanish",
    "su": "Sundanese",
    "sw": "Swahili",
    "sv": "Swedish",
    "tg": "Tajik",
    "ta": "Tamil",
    "te": "Telugu",
    "th": "Thai",
    "tr": "Turkish",
    "uk": "Ukrainian",
    "ur": "Urdu",
    "ug": "Uyghur",
    "uz": "Uzbek",
    "vi": "Vietnamese",
    "cy": "Welsh",
    "xh": "Xhosa",
    "yi": "Yiddish",
    "yo": "Yoruba",
    "zu": "Zulu",
})


class LanguageEntry(BaseModel):
    """A single registry entry."""

    code: str = Field(min_length=1, description="Lower-case language code, e.g. 'fr'")
    display_name: str = Field(min_length=1, description="Human-readable name, e.g. 'French'")

    model_config = ConfigDict(frozen=True)


class LanguageRegistry:
    """
    Read-only lookup of language codes.

    Lookups are case-insensitive; codes are stored lower-case.

    Example:
        >>> registry = LanguageRegistry({"fr": "French"})
        >>> registry.lookup("FR")
        'French'
        >>> registry.lookup("xx") is None
        True
    """

    def __init__(self, names: Mapping[str, str]) -> None:
        self._entries: Mapping[str, LanguageEntry] = MappingProxyType({
            code.lower(): LanguageEntry(code=code.lower(), display_name=name)
            for code, name in names.items()
        })

    def lookup(self, code: str) -> str | None:
        """Return the display name for ``code``, or None if it is unknown."""
        entry = self._entries.get(code.lower())
        return entry.display_name if entry else None

    def get(self, code: str) -> LanguageEntry | None:
        return self._entries.get(code.lower())

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code.lower() in self._entries

    def __iter__(self) -> Iterator[LanguageEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)


_default_registry: LanguageRegistry | None = None


def get_registry() -> LanguageRegistry:
    """Get or create the process-wide registry built from LANGUAGE_NAMES."""
    global _default_registry
    if _default_registry is None:
        _default_registry = LanguageRegistry(LANGUAGE_NAMES)
    return _default_registry
