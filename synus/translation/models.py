"""
Data structures passed between the stages of the translate pipeline.

- TranslationArguments: raw command arguments as parsed, before validation
- TranslationRequest: validated request produced by the interpreter
- TranslationResult: what the provider returned

None of these outlive a single command invocation.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TranslationArguments(BaseModel):
    """Unvalidated arguments of a translate invocation."""

    source: str = Field(default="auto", description="Source code as typed, or 'auto'")
    target: str = Field(default="en", description="Target code as typed")
    query: str | None = Field(default=None, description="Free text to translate")
    message_index: int = Field(
        default=0,
        description="Lookback distance given with -m; 0 means the flag was not set",
    )


class TranslationRequest(BaseModel):
    """
    A validated translation request.

    ``source_language`` is 'auto' or a registry code, ``target_language`` is
    always a registry code. When ``query_text`` is None the text comes from the
    channel message ``message_lookback`` positions before the latest one.
    """

    source_language: str = Field(description="Lower-case registry code or 'auto'")
    target_language: str = Field(description="Lower-case registry code")
    query_text: str | None = Field(default=None, description="Text to translate verbatim")
    message_lookback: int = Field(default=0, ge=0, description="1-based lookback distance")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_text_source(self) -> "TranslationRequest":
        if not self.query_text and self.message_lookback < 1:
            raise ValueError("either query_text or a message_lookback >= 1 is required")
        return self

    @property
    def uses_lookback(self) -> bool:
        return not self.query_text


class TranslationResult(BaseModel):
    """Provider output for a single translation."""

    translated_text: str = Field(description="Translated text")
    detected_source_language: str = Field(
        description="Lower-case code of the language the provider detected"
    )

    model_config = ConfigDict(frozen=True)
