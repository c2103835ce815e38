"""Error kinds raised along the topic → reply pipeline.

The web layer maps each kind to an HTTP status and a client-facing message;
only ``TopicValidationError`` carries text that is safe to show verbatim.
"""

from __future__ import annotations


class NutshellError(Exception):
    """Base class for all In a Nutshell errors."""


class TopicValidationError(NutshellError, ValueError):
    """The user-supplied topic is empty, blank, or too long."""


class ConfigurationError(NutshellError):
    """A required setting (the completion credential) is missing."""


class ServiceError(NutshellError):
    """The completion service failed or returned no usable content."""
