# SPDX-License-Identifier: AGPL-3.0-only

"""
Configuration for the LexLink API.

All settings come from environment variables (or a local .env file) and are
collected into one AppConfig object that the app factory hands to every
collaborator. Nothing reads the environment after start-up.
"""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Providers that need an API key, mapped to the config attribute holding it
CREDENTIAL_FIELDS = {
    "gemini": "gemini_api_key",
    "openai": "openai_api_key",
    "anthropic": "anthropic_api_key",
}


class AppConfig(BaseSettings):
    """Configuration settings for the document analysis service."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", case_sensitive=False)

    # AI service settings
    ai_service: str = Field(default="gemini", description="AI provider (gemini, openai, anthropic, ollama)")
    ai_timeout_seconds: Optional[float] = Field(default=None, description="Upstream timeout; unset means no timeout")
    ai_max_tokens: int = Field(default=4096, description="Max tokens requested from the model")
    ai_temperature: float = Field(default=0.2, description="Sampling temperature")

    # Gemini settings
    gemini_api_key: Optional[str] = Field(default=None, description="Google Generative Language API key")
    gemini_model: str = Field(default="gemini-1.5-flash", description="Gemini model name")
    gemini_base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta",
        description="Gemini REST base URL",
    )

    # OpenAI settings
    openai_api_key: Optional[str] = Field(default=None, description="OpenAI API key")
    openai_model: str = Field(default="gpt-4o-mini", description="OpenAI model name")

    # Anthropic settings
    anthropic_api_key: Optional[str] = Field(default=None, description="Anthropic API key")
    anthropic_model: str = Field(default="claude-3-haiku-20240307", description="Anthropic model name")

    # Ollama settings
    ollama_base_url: str = Field(default="http://localhost:11434", description="Ollama base URL")
    ollama_model: str = Field(default="llama3.1:8b", description="Ollama model name")

    # Text and upload settings
    max_text_length: int = Field(default=30000, description="Characters of document text sent to the model")
    max_upload_bytes: int = Field(default=10 * 1024 * 1024, description="Max upload size in bytes (10MB)")
    ocr_enabled: bool = Field(default=True, description="Run OCR on images and scanned PDFs")
    ocr_language: str = Field(default="eng", description="Tesseract language pack")

    # Language features
    translation_enabled: bool = Field(default=False, description="Translate server-side through the AI service")

    # HTTP settings
    cors_origins: str = Field(default="*", description="Allowed CORS origins, comma separated")
    log_level: str = Field(default="INFO", description="Root log level")

    def credential(self) -> Optional[str]:
        """Return the API key for the selected provider, if it needs one."""
        field_name = CREDENTIAL_FIELDS.get(self.provider)
        if field_name is None:
            return None
        return getattr(self, field_name) or None

    @property
    def provider(self) -> str:
        return (self.ai_service or "").strip().lower()

    @property
    def has_credential(self) -> bool:
        """True when the selected provider can be called at all."""
        if self.provider == "ollama":
            return True
        return bool(self.credential())

    def get_ai_config(self) -> dict:
        """Get AI service configuration without secrets."""
        return {
            "service": self.provider,
            "timeout": self.ai_timeout_seconds,
            "credential_set": bool(self.credential()),
            "gemini": {"model": self.gemini_model, "base_url": self.gemini_base_url},
            "openai": {"model": self.openai_model},
            "anthropic": {"model": self.anthropic_model},
            "ollama": {"model": self.ollama_model, "base_url": self.ollama_base_url},
        }

    def get_upload_config(self) -> dict:
        """Get upload configuration."""
        return {
            "max_upload_bytes": self.max_upload_bytes,
            "max_upload_mb": self.max_upload_bytes // (1024 * 1024),
            "ocr_enabled": self.ocr_enabled,
        }

    def get_cors_origins(self):
        origins = [o.strip() for o in (self.cors_origins or "*").split(",") if o.strip()]
        if not origins or "*" in origins:
            return "*"
        return origins
