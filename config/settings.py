"""Application settings — all configuration loaded from environment variables.

Usage:
    from config.settings import Settings
    settings = Settings()
    settings.validate()   # raises ConfigurationError if ANTHROPIC_API_KEY is missing
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from nutshell.errors import ConfigurationError


@dataclass(frozen=True)
class Settings:
    """Centralised application configuration.

    All values are read from environment variables at instantiation time
    so that tests can override them by patching ``os.environ``.
    """

    # ── API Keys ────────────────────────────────────────────────────────────
    anthropic_api_key: str = field(
        default_factory=lambda: os.environ.get("ANTHROPIC_API_KEY", "")
    )

    # ── Flask ───────────────────────────────────────────────────────────────
    debug: bool = field(
        default_factory=lambda: os.environ.get("FLASK_DEBUG", "0") == "1"
    )
    port: int = field(
        default_factory=lambda: int(os.environ.get("PORT", "5000"))
    )

    # ── Completion ──────────────────────────────────────────────────────────
    model: str = field(
        default_factory=lambda: os.environ.get("NUTSHELL_MODEL", "claude-haiku-4-5")
    )
    #: Sampling temperature for the completion call.
    temperature: float = field(
        default_factory=lambda: float(os.environ.get("NUTSHELL_TEMPERATURE", "0.4"))
    )
    max_output_tokens: int = field(
        default_factory=lambda: int(os.environ.get("NUTSHELL_MAX_TOKENS", "1500"))
    )

    # ── Input / parsing ─────────────────────────────────────────────────────
    max_topic_length: int = 200
    expected_items: int = 10

    @property
    def configured(self) -> bool:
        """True when the completion credential is present."""
        return bool(self.anthropic_api_key)

    def validate(self) -> None:
        """Raise ``ConfigurationError`` if any required setting is missing."""
        if not self.configured:
            raise ConfigurationError(
                "ANTHROPIC_API_KEY environment variable is not set. "
                "Copy .env.example to .env and add your key."
            )
