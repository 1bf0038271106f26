"""Configuration management for the resource translator."""

import os
from dataclasses import dataclass, field
from typing import List
from dotenv import load_dotenv

load_dotenv()

PROVIDERS = ("deepl", "openai")


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str, default: str = "") -> List[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


@dataclass
class Config:
    """Application configuration."""

    # API Keys
    deepl_api_key: str = field(default_factory=lambda: os.getenv("DEEPL_API_KEY", ""))
    openai_api_key: str = field(default_factory=lambda: os.getenv("OPENAI_API_KEY", ""))

    # Translation settings
    provider: str = field(
        default_factory=lambda: os.getenv("TRANSLATION_PROVIDER", "deepl").lower()
    )
    source_language: str = field(default_factory=lambda: os.getenv("SOURCE_LANGUAGE", "en"))
    target_languages: List[str] = field(default_factory=lambda: _env_list("TARGET_LANGUAGES"))
    resources_path: str = field(default_factory=lambda: os.getenv("RESOURCES_PATH", ""))

    # OpenAI model settings
    openai_model: str = field(default_factory=lambda: os.getenv("OPENAI_MODEL", "gpt-4o-mini"))
    openai_temperature: float = 0.3

    # Failure policies
    keep_partial_on_failure: bool = field(
        default_factory=lambda: _env_flag("RECONCILE_KEEP_PARTIAL", "true")
    )
    skip_quality_errors: bool = field(
        default_factory=lambda: _env_flag("QUALITY_SKIP_ERRORS", "true")
    )

    # Logging
    log_mode: str = field(default_factory=lambda: os.getenv("LOG_MODE", "info").lower())
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", ""))

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []
        if self.provider not in PROVIDERS:
            errors.append(
                f"TRANSLATION_PROVIDER must be one of {', '.join(PROVIDERS)}, got '{self.provider}'"
            )
        elif self.provider == "deepl" and not self.deepl_api_key:
            errors.append("DEEPL_API_KEY is not set")
        elif self.provider == "openai" and not self.openai_api_key:
            errors.append("OPENAI_API_KEY is not set")
        if self.log_mode not in ("debug", "info", "off"):
            errors.append(f"LOG_MODE must be debug, info or off, got '{self.log_mode}'")
        return errors


def load_config() -> Config:
    """Build a configuration from the current environment."""
    return Config()
