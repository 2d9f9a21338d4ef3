"""🧪 Tests for link display."""

from rich.console import Console

from datalink.config import get_settings
from datalink.display import format_columns, links_table, show_links
from datalink.link import Link


def _console() -> Console:
    return Console(record=True, width=120, color_system=None)


class TestFormatColumns:
    """Tests for format_columns."""

    def test_single_pair(self, patients_link):
        """Test formatting a single column pair."""
        assert format_columns(patients_link) == "id → patient_id"

    def test_composite_and_alternatives(self):
        """Test composite keys and alternative mappings."""
        link = Link(
            "a",
            "b",
            link_columns=[{"k1": "x", "k2": "y"}, {"code": "c"}],
        )

        assert format_columns(link) == "k1 → x, k2 → y | code → c"

    def test_no_columns(self):
        """Test formatting a link without column mappings."""
        assert format_columns(Link("a", "b")) == "-"

    def test_custom_arrow(self, patients_link):
        """Test formatting with an explicit arrow."""
        assert format_columns(patients_link, arrow="=") == "id = patient_id"

    def test_arrow_from_settings(self, patients_link, monkeypatch):
        """Test that the arrow is read from settings."""
        monkeypatch.setenv("DATALINK_ARROW", "->")
        get_settings.cache_clear()

        assert format_columns(patients_link) == "id -> patient_id"


class TestShowLinks:
    """Tests for console output."""

    def test_links_table(self, patients_link):
        """Test building the links table."""
        tbl = links_table([patients_link, Link("a", "b")])

        assert [c.header for c in tbl.columns] == ["From", "To", "Type", "Columns"]
        assert tbl.row_count == 2

    def test_show_links(self, patients_link):
        """Test printing links."""
        out = _console()
        show_links([patients_link], out=out)

        text = out.export_text()
        assert "patients" in text
        assert "visits" in text
        assert "keyed" in text
        assert "id → patient_id" in text

    def test_show_no_links(self):
        """Test printing an empty list."""
        out = _console()
        show_links([], out=out)

        assert "No links defined" in out.export_text()
