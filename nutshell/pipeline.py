"""
Topic → reply pipeline for In a Nutshell.

Flow
────
1. validate_topic(topic)       → trimmed topic or TopicValidationError
2. build_messages(topic)       → fixed system prompt + topic
3. client.complete(messages)   → raw reply text (ConfigurationError / ServiceError)
4. parse_reply(raw)            → sections, ranked items, layout warnings
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from nutshell.gate import validate_topic
from nutshell.models import NutshellResult
from nutshell.parser import parse_reply
from nutshell.prompts import build_messages

if TYPE_CHECKING:
    from config.settings import Settings
    from nutshell.client import CompletionClient

logger = logging.getLogger(__name__)


def summarise(topic: object, client: CompletionClient, settings: Settings) -> NutshellResult:
    """Run one topic through the whole pipeline.

    Args:
        topic: The raw topic value from the request.
        client: Completion client bound to *settings*.
        settings: Application configuration.

    Returns:
        The raw reply together with its parsed form.

    Raises:
        TopicValidationError: If the topic is unusable.
        ConfigurationError: If no credential is configured.
        ServiceError: If the completion service fails.
    """
    topic = validate_topic(topic, max_length=settings.max_topic_length)
    raw = client.complete(build_messages(topic))
    parsed = parse_reply(raw, expected_items=settings.expected_items)

    logger.info(
        "Summarised topic=%r items=%d warnings=%d",
        topic,
        len(parsed.items),
        len(parsed.warnings),
    )
    return NutshellResult(topic=topic, result=raw, parsed=parsed)
