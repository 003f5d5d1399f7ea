"""Configuration loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env: try package dir then project root
_base = Path(__file__).resolve().parent
for _env_path in (_base / ".env", _base.parent / ".env"):
    if load_dotenv(_env_path):
        break
load_dotenv()  # also allow process env


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


# API keys – never hardcode
OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
MODEL_NAME: str = os.getenv("MODEL_NAME", "gpt-4o-mini")

# AI classifier settings
AI_ENABLED: bool = _env_bool("RESUME_AI_ENABLED", True)
ENHANCED_EXTRACTION: bool = _env_bool("RESUME_ENHANCED_EXTRACTION", False)
AI_TIMEOUT_SECONDS: float = float(os.getenv("RESUME_AI_TIMEOUT_SECONDS", "20.0"))
AI_TEMPERATURE: float = float(os.getenv("RESUME_AI_TEMPERATURE", "0.2"))
AI_MAX_TOKENS: int = int(os.getenv("RESUME_AI_MAX_TOKENS", "1000"))
AI_MAX_RETRIES: int = int(os.getenv("RESUME_AI_MAX_RETRIES", "0"))  # retries belong to the client, not the stages

# Pipeline limits
STAGE_TIMEOUT_SECONDS: float = float(os.getenv("RESUME_STAGE_TIMEOUT_SECONDS", "30.0"))
MIN_TEXT_LENGTH: int = 50
HEADER_MAX_LENGTH: int = 50  # longer lines are treated as paragraphs, never headers
CONTACT_WINDOW_CHARS: int = 500
MAX_TEXT_CHARS: int = 50000

# Prompt payload limits per task (characters of resume text sent to the model)
PROMPT_CHAR_LIMITS: dict = {
    "categorize_skills": 2000,
    "extract_personal_info": 500,
    "extract_experience": 2000,
    "extract_education": 1000,
    "extract_projects": 1500,
}

# Logging
LOG_LEVEL: str = os.getenv("RESUME_LOG_LEVEL", "INFO").upper()
