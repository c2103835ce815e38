"""Best-effort parsing of a model reply into sections and ranked items.

Header grammar
──────────────
A section header is a single line holding, in order:

  * optional markdown decoration (``#``, ``*``, ``_``, ``>``)
  * an optional ordinal marker (``1.``, ``2.``, ``3.``)
  * the section title, matched case-insensitively
  * optional closing decoration and an optional colon

Text may follow the colon on the header line (it opens the section body)
only when the header carries an ordinal or a ``#`` heading marker.
Headers are searched in order, so a later title never opens an earlier
section. Missing headers leave their section empty; nothing here raises.

Item grammar
────────────
Inside The Essentials every line starting with ``<n>.`` opens an item. The
rest of that line is the title; following ``Label: value`` lines become
attributes. ``Vibe`` values are split on commas/semicolons into tags.
"""

from __future__ import annotations

import logging
import re

from nutshell.models import ItemAttribute, ParsedReply, ParsedSections, RankedItem
from nutshell.prompts import SECTION_TITLES

logger = logging.getLogger(__name__)

#: ParsedSections field for each title in ``SECTION_TITLES``.
_SECTION_FIELDS: tuple[str, str, str] = ("nutshell", "essentials", "context")

ATTRIBUTES_PER_ITEM = 3


def _header_pattern(title: str) -> re.Pattern[str]:
    words = r"[ \t]+".join(re.escape(w) for w in title.split())
    tail = r"[ \t*_]*"
    # Whole line: decoration, ordinal, title, optional colon, nothing else.
    bare = r"[ \t]*[#>*_ \t]*(?:[1-3]\.[ \t]*)?[*_ \t]*" + words + tail + ":?" + tail + "$"
    # Body on the same line only after an ordinal or a "#" heading, so an
    # item line such as "Why it matters: ..." stays inside its section.
    inline = (
        r"[ \t]*(?:#+[ \t]*(?:[1-3]\.[ \t]*)?|[*_]*[1-3]\.[ \t]*)[*_ \t]*"
        + words + tail + ":" + tail
    )
    return re.compile(
        rf"^(?:{bare}|{inline})",
        re.IGNORECASE | re.MULTILINE,
    )


_HEADER_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    _header_pattern(title) for title in SECTION_TITLES
)

_ITEM_START = re.compile(r"^[ \t]*[*_]*(\d+)\.[*_]*[ \t]+(.*)$")
_BULLET = re.compile(r"^[-*•][ \t]+")
_EMPHASIS = re.compile(r"\*\*|__")
_LEADING_CLOSER = re.compile(r"^(?:\*\*|__)[ \t]*")
_WRAPPED = re.compile(r"^\*\*(.+)\*\*$")
_TAG_SPLIT = re.compile(r"[,;]")


# ── Sections ───────────────────────────────────────────────────────────────


def parse_sections(raw: str) -> ParsedSections:
    """Split *raw* into the Nutshell, Essentials and Why-it-Matters bodies.

    Args:
        raw: The complete reply text.

    Returns:
        A ``ParsedSections``; any section whose header is not found is ``""``.
    """
    text = (raw or "").replace("\r\n", "\n")

    found: list[tuple[str, re.Match[str]]] = []
    cursor = 0
    for field_name, pattern in zip(_SECTION_FIELDS, _HEADER_PATTERNS):
        match = pattern.search(text, cursor)
        if match is None:
            continue
        found.append((field_name, match))
        cursor = match.end()

    bodies: dict[str, str] = {}
    for i, (field_name, match) in enumerate(found):
        end = found[i + 1][1].start() if i + 1 < len(found) else len(text)
        bodies[field_name] = text[match.end():end].strip()

    return ParsedSections(**bodies)


# ── Items ──────────────────────────────────────────────────────────────────


def _clean(text: str) -> str:
    """Drop markdown bold markers and stray emphasis at either end."""
    return _EMPHASIS.sub("", text).strip().strip("*_").strip()


def _clean_value(value: str, raw_label: str) -> str:
    """Trim *value*; drop only emphasis left by the label or wrapping it whole."""
    value = value.strip()
    label = raw_label.strip()
    for marker in ("**", "__"):
        # "**Label:** value" leaves the closing marker at the start of the value
        if label.startswith(marker) and not label.endswith(marker):
            value = _LEADING_CLOSER.sub("", value, count=1)
            break
    wrapped = _WRAPPED.match(value)
    return wrapped.group(1).strip() if wrapped else value


def split_tags(value: str) -> list[str]:
    """Split a Vibe value such as ``"bold, raw; defiant."`` into tags."""
    tags = (part.strip().rstrip(".").strip() for part in _TAG_SPLIT.split(value))
    return [tag for tag in tags if tag]


def parse_items(essentials: str) -> list[RankedItem]:
    """Split The Essentials body into ranked items.

    Lines before the first numbered line are ignored. A non-empty line
    without a colon continues the previous attribute (or the title, if no
    attribute has been seen yet).

    Args:
        essentials: The body of The Essentials section.

    Returns:
        Items in the order they appear; no count is enforced.
    """
    items: list[RankedItem] = []
    current: RankedItem | None = None

    for line in (essentials or "").replace("\r\n", "\n").split("\n"):
        start = _ITEM_START.match(line)
        if start:
            current = RankedItem(rank=int(start.group(1)), title=_clean(start.group(2)))
            items.append(current)
            continue

        stripped = _BULLET.sub("", line.strip())
        if current is None or not stripped:
            continue

        raw_label, sep, value = stripped.partition(":")
        label = _clean(raw_label)
        if sep and label:
            current.attributes.append(
                ItemAttribute(label=label, value=_clean_value(value, raw_label))
            )
        elif current.attributes:
            last = current.attributes[-1]
            last.value = f"{last.value} {stripped}".strip()
        else:
            current.title = f"{current.title} {_clean(stripped)}".strip()

    for item in items:
        for attr in item.attributes:
            if attr.is_vibe:
                attr.tags = split_tags(attr.value)

    return items


# ── Whole reply ────────────────────────────────────────────────────────────


def parse_reply(raw: str, expected_items: int = 10) -> ParsedReply:
    """Parse a complete reply and note where it departs from the expected layout.

    Departures are reported as warnings, never raised.

    Args:
        raw: The complete reply text.
        expected_items: How many Essentials items the prompt asks for.

    Returns:
        A ``ParsedReply`` with sections, items and warnings.
    """
    sections = parse_sections(raw)
    items = parse_items(sections.essentials)

    warnings: list[str] = []
    for title, field_name in zip(SECTION_TITLES, _SECTION_FIELDS):
        if not getattr(sections, field_name):
            warnings.append(f"Section '{title}' is missing or empty.")

    if sections.essentials and len(items) != expected_items:
        warnings.append(f"Expected {expected_items} items, found {len(items)}.")

    for item in items:
        if len(item.attributes) != ATTRIBUTES_PER_ITEM:
            warnings.append(
                f"Item {item.rank} has {len(item.attributes)} attributes, "
                f"expected {ATTRIBUTES_PER_ITEM}."
            )

    if warnings:
        logger.warning("Reply deviates from expected layout: %s", "; ".join(warnings))

    return ParsedReply(sections=sections, items=items, warnings=warnings)
