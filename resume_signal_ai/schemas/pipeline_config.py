"""Validated per-pipeline settings, defaulting to the environment-driven constants."""

from pydantic import BaseModel, ConfigDict, Field

from resume_signal_ai.config import (
    AI_MAX_TOKENS,
    AI_TEMPERATURE,
    AI_TIMEOUT_SECONDS,
    CONTACT_WINDOW_CHARS,
    ENHANCED_EXTRACTION,
    HEADER_MAX_LENGTH,
    MAX_TEXT_CHARS,
    MIN_TEXT_LENGTH,
    MODEL_NAME,
    STAGE_TIMEOUT_SECONDS,
)


class PipelineConfig(BaseModel):
    """Settings snapshot for one ResumePipeline. Invalid values fail at construction."""

    model_config = ConfigDict(frozen=True)

    model_name: str = Field(default=MODEL_NAME, min_length=1, description="Chat model used by the classifier")
    temperature: float = Field(default=AI_TEMPERATURE, ge=0.0, le=1.0, description="Sampling temperature")
    max_tokens: int = Field(default=AI_MAX_TOKENS, ge=100, le=8000, description="Completion token cap")
    ai_timeout_seconds: float = Field(default=AI_TIMEOUT_SECONDS, gt=0, description="Timeout per AI call")
    stage_timeout_seconds: float = Field(default=STAGE_TIMEOUT_SECONDS, gt=0, description="Timeout per stage")
    enhanced: bool = Field(default=ENHANCED_EXTRACTION, description="Run per-section AI extraction")
    min_text_length: int = Field(default=MIN_TEXT_LENGTH, ge=1, description="Shortest text accepted")
    header_max_length: int = Field(default=HEADER_MAX_LENGTH, ge=1, description="Longest line treated as a header")
    contact_window_chars: int = Field(default=CONTACT_WINDOW_CHARS, ge=1, description="Leading chars scanned for contact fields")
    max_text_chars: int = Field(default=MAX_TEXT_CHARS, ge=1, description="Cleaned text is truncated to this length")
