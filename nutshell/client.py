"""Completion client using the Claude API.

Sends the composed prompt to the configured model and returns the reply
text. The Anthropic client is lazy-initialised so that the class can be
instantiated in tests (or with a missing key) without touching the network.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import anthropic

from nutshell.errors import ConfigurationError, ServiceError
from nutshell.prompts import PROMPT_VERSION, PromptMessages

if TYPE_CHECKING:
    from config.settings import Settings

logger = logging.getLogger(__name__)


class CompletionClient:
    """Thin wrapper around ``anthropic.Anthropic().messages.create``."""

    def __init__(self, settings: Settings) -> None:
        """Initialise the client.

        Args:
            settings: Application configuration (credential, model, limits).
        """
        self.settings = settings
        self._client: anthropic.Anthropic | None = None

    @property
    def client(self) -> anthropic.Anthropic:
        """Lazy-initialise and return the Anthropic SDK client."""
        if self._client is None:
            if not self.settings.configured:
                raise ConfigurationError("ANTHROPIC_API_KEY is not set.")
            # Retrying is left to the user; the SDK must not retry on its own.
            self._client = anthropic.Anthropic(
                api_key=self.settings.anthropic_api_key,
                max_retries=0,
            )
        return self._client

    def complete(self, messages: PromptMessages) -> str:
        """Send *messages* to the model and return the first text reply.

        Args:
            messages: System instruction plus the user's topic.

        Returns:
            The reply text, unmodified.

        Raises:
            ConfigurationError: If no credential is configured. No request is sent.
            ServiceError: On API/network errors or an empty reply.
        """
        client = self.client

        logger.info(
            "Requesting completion model=%s prompt_version=%s topic_chars=%d",
            self.settings.model,
            PROMPT_VERSION,
            len(messages.user),
        )
        try:
            response = client.messages.create(
                model=self.settings.model,
                max_tokens=self.settings.max_output_tokens,
                temperature=self.settings.temperature,
                system=messages.system,
                messages=[{"role": "user", "content": messages.user}],
            )
        except anthropic.APIError as exc:
            raise ServiceError(f"Completion request failed: {exc}") from exc

        text = _first_text(response)
        if not text.strip():
            raise ServiceError("No content returned from the completion service.")

        logger.info("Completion received reply_chars=%d", len(text))
        return text


def _first_text(response: object) -> str:
    """Return the text of the first text block in *response*, or ``""``."""
    for block in getattr(response, "content", None) or []:
        if getattr(block, "type", None) == "text":
            return getattr(block, "text", "") or ""
    return ""
