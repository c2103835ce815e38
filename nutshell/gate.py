"""Topic validation: the only check applied to user input before the model call."""

from __future__ import annotations

from nutshell.errors import TopicValidationError

MAX_TOPIC_LENGTH = 200


def validate_topic(topic: object, max_length: int = MAX_TOPIC_LENGTH) -> str:
    """Return the trimmed topic, or raise if it is unusable.

    Content is not filtered; only emptiness and length are checked.

    Args:
        topic: The raw value from the request body.
        max_length: Maximum number of characters of the untrimmed value.

    Returns:
        The topic with surrounding whitespace removed.

    Raises:
        TopicValidationError: If the topic is missing, not a string, blank,
            or longer than *max_length*.
    """
    if topic is None:
        raise TopicValidationError("Topic is required.")
    if not isinstance(topic, str):
        raise TopicValidationError("Topic must be a string.")

    if not topic.strip():
        raise TopicValidationError("Topic is required.")
    # Length counts the value as submitted, surrounding whitespace included.
    if len(topic) > max_length:
        raise TopicValidationError(
            f"Topic must be {max_length} characters or less."
        )
    return topic.strip()
