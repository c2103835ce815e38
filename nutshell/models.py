"""
Pydantic models shared across the In a Nutshell core.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, Field, computed_field

# "Title — Creator (Year)": em dash, en dash, or a spaced hyphen
_ORIGIN_SEPARATOR = re.compile(r"\s+[—–-]\s+|\s*[—–]\s*")


class ParsedSections(BaseModel):
    """The three named regions of a reply. Missing headers leave ``""``."""

    nutshell: str = ""
    essentials: str = ""
    context: str = ""

    @property
    def is_empty(self) -> bool:
        return not (self.nutshell or self.essentials or self.context)


class ItemAttribute(BaseModel):
    """A ``Label: value`` line inside a ranked item."""

    label: str
    value: str
    tags: list[str] = Field(default_factory=list)

    @computed_field
    @property
    def is_vibe(self) -> bool:
        return self.label.strip().lower() == "vibe"


class RankedItem(BaseModel):
    """One numbered entry of The Essentials."""

    rank: int
    title: str
    attributes: list[ItemAttribute] = Field(default_factory=list)

    @computed_field
    @property
    def name(self) -> str:
        """The title up to the creator separator, e.g. ``"Bitcoin whitepaper"``."""
        return _ORIGIN_SEPARATOR.split(self.title, maxsplit=1)[0].strip()

    @computed_field
    @property
    def origin(self) -> str:
        """Creator / origin text after the separator, or ``""``."""
        parts = _ORIGIN_SEPARATOR.split(self.title, maxsplit=1)
        return parts[1].strip() if len(parts) > 1 else ""


class ParsedReply(BaseModel):
    """Sections and items recovered from a single reply, plus any warnings."""

    sections: ParsedSections = Field(default_factory=ParsedSections)
    items: list[RankedItem] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    @computed_field
    @property
    def degraded(self) -> bool:
        """True when no section header could be located at all."""
        return self.sections.is_empty


class NutshellResult(BaseModel):
    """Everything returned to the client for one topic."""

    topic: str
    result: str
    parsed: ParsedReply
