"""Tests for nutshell/models.py"""

from __future__ import annotations

from nutshell.models import ItemAttribute, ParsedReply, ParsedSections, RankedItem


class TestRankedItem:
    def test_name_and_origin_split_on_em_dash(self):
        item = RankedItem(rank=1, title="Breathless — Jean-Luc Godard (1960)")
        assert item.name == "Breathless"
        assert item.origin == "Jean-Luc Godard (1960)"

    def test_spaced_hyphen_also_separates(self):
        item = RankedItem(rank=1, title="Hip-hop - DJ Kool Herc (1973)")
        assert item.name == "Hip-hop"
        assert item.origin == "DJ Kool Herc (1973)"

    def test_title_without_separator(self):
        item = RankedItem(rank=2, title="Sourdough")
        assert item.name == "Sourdough"
        assert item.origin == ""

    def test_dump_includes_derived_fields(self):
        item = RankedItem(
            rank=1,
            title="A — B",
            attributes=[ItemAttribute(label="Vibe", value="x, y", tags=["x", "y"])],
        )
        data = item.model_dump()
        assert data["name"] == "A"
        assert data["origin"] == "B"
        assert data["attributes"][0]["is_vibe"] is True


class TestParsedReply:
    def test_empty_reply_is_degraded(self):
        assert ParsedReply().degraded

    def test_any_section_means_not_degraded(self):
        assert not ParsedReply(sections=ParsedSections(context="Only this.")).degraded
