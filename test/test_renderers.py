"""Tests for view mapping and output writers."""

import json
import sys
import tempfile
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from ProgramBrowser.core.models import record_from_values
from ProgramBrowser.core.schema import (
    GEOGRAPHY,
    ORG,
    POP_TARGETED,
    PROGRAM_NAME,
    PROGRAM_TYPE,
    PUBLIC_LINKS,
    TAGS,
)
from ProgramBrowser.renderers import HtmlFileWriter, JsonFileWriter, render_facets, render_json, render_table, render_text
from ProgramBrowser.renderers.base import EMPTY_MESSAGE
from ProgramBrowser.renderers.mapper import display_value, map_explorer_to_view
from ProgramBrowser.services import ProgramExplorer


def _explorer() -> ProgramExplorer:
    return ProgramExplorer(
        records=(
            record_from_values(
                {
                    PROGRAM_NAME: "Bright <Futures>",
                    ORG: "Not Available",
                    PROGRAM_TYPE: ["Mentoring", "Tutoring"],
                    GEOGRAPHY: "Ohio",
                    PUBLIC_LINKS: ["https://example.org/a", "javascript:alert(1)"],
                }
            ),
            record_from_values({PROGRAM_NAME: "Alpha", POP_TARGETED: [], GEOGRAPHY: "Iowa"}),
        )
    )


class TestMapper(unittest.TestCase):
    def test_display_values(self) -> None:
        record = record_from_values({ORG: " not available ", TAGS: [], PROGRAM_TYPE: ["A", "B"], GEOGRAPHY: " Ohio "})
        self.assertEqual(display_value(record, ORG), "Not Available")
        self.assertEqual(display_value(record, TAGS), "Not Available")
        self.assertEqual(display_value(record, PROGRAM_TYPE), "A; B")
        self.assertEqual(display_value(record, GEOGRAPHY), " Ohio ")
        self.assertEqual(display_value(record, "Partners"), "Not Available")

    def test_view_snapshot(self) -> None:
        explorer = _explorer()
        explorer.toggle_multi_filter(PROGRAM_TYPE, "Tutoring")
        result = map_explorer_to_view(explorer)
        self.assertEqual(result.count, 1)
        self.assertEqual(result.total, 2)
        self.assertEqual(result.rows[0].cells[PROGRAM_NAME], "Bright <Futures>")
        self.assertEqual(result.rows[0].links, ("https://example.org/a", "javascript:alert(1)"))
        self.assertEqual([facet.key for facet in result.active_filters], [PROGRAM_TYPE])
        program_types = next(facet for facet in result.facets if facet.key == PROGRAM_TYPE)
        self.assertEqual(tuple(program_types.options), ("Mentoring", "Tutoring"))


class TestTextAndJson(unittest.TestCase):
    def test_render_text_rows_and_sort_marker(self) -> None:
        text = render_text(map_explorer_to_view(_explorer()))
        self.assertIn("Programs: 2 of 2", text)
        self.assertIn("Sort: Program Name ▲", text)
        self.assertLess(text.index("1. Alpha"), text.index("2. Bright <Futures>"))
        self.assertIn("Source 1: https://example.org/a", text)
        self.assertIn(f"   {PUBLIC_LINKS}: Not Available", text)

    def test_render_text_empty_message(self) -> None:
        explorer = _explorer()
        explorer.set_search("nothing matches this")
        self.assertIn(EMPTY_MESSAGE, render_text(map_explorer_to_view(explorer)))

    def test_render_facets_marks_selected(self) -> None:
        explorer = _explorer()
        explorer.set_single_filter(GEOGRAPHY, "Ohio")
        text = render_facets(map_explorer_to_view(explorer))
        self.assertIn("Geography (single, 2 options)", text)
        self.assertIn("  * Ohio", text)
        self.assertIn("    Iowa", text)

    def test_render_json_payload(self) -> None:
        explorer = _explorer()
        explorer.set_sort(PROGRAM_NAME)
        payload = render_json(map_explorer_to_view(explorer))
        self.assertEqual(payload["count"], 2)
        self.assertEqual(payload["query"]["sort"], {"key": PROGRAM_NAME, "direction": "desc"})
        self.assertEqual(payload["programs"][0][PROGRAM_NAME], "Bright <Futures>")
        self.assertEqual(payload["programs"][1][PUBLIC_LINKS], [])
        self.assertEqual(payload["facets"][GEOGRAPHY], ["Iowa", "Ohio"])

    def test_json_writer_writes_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            writer = JsonFileWriter(tmp)
            writer.write_result(map_explorer_to_view(_explorer()))
            writer.finalize("search")
            files = list((Path(tmp) / "json").glob("search_*.json"))
            self.assertEqual(len(files), 1)
            data = json.loads(files[0].read_text(encoding="utf-8"))
        self.assertEqual(data[0]["total"], 2)

    def test_json_writer_skips_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            JsonFileWriter(tmp).finalize("search")
            self.assertFalse((Path(tmp) / "json").exists())


class TestHtml(unittest.TestCase):
    def test_table_escapes_and_filters_links(self) -> None:
        section = render_table(map_explorer_to_view(_explorer()))
        self.assertIn("Bright &lt;Futures&gt;", section)
        self.assertIn('<a href="https://example.org/a" target="_blank" rel="noreferrer">Source 1</a>', section)
        self.assertNotIn("javascript:", section)
        self.assertIn("Program Name ▲", section)

    def test_link_numbers_skip_dropped_links(self) -> None:
        explorer = ProgramExplorer(
            records=(
                record_from_values(
                    {
                        PROGRAM_NAME: "Gamma",
                        PUBLIC_LINKS: ["https://example.org/a", "javascript:alert(1)", "http://example.org/c"],
                    }
                ),
            )
        )
        section = render_table(map_explorer_to_view(explorer))
        self.assertIn('<a href="http://example.org/c" target="_blank" rel="noreferrer">Source 2</a>', section)
        self.assertNotIn("Source 3", section)

    def test_empty_table_message(self) -> None:
        explorer = _explorer()
        explorer.set_search("nothing matches this")
        self.assertIn(EMPTY_MESSAGE, render_table(map_explorer_to_view(explorer)))

    def test_html_writer_writes_document(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            writer = HtmlFileWriter(tmp)
            writer.write_result(map_explorer_to_view(_explorer()))
            writer.finalize("search")
            files = list((Path(tmp) / "html").glob("search_*.html"))
            self.assertEqual(len(files), 1)
            content = files[0].read_text(encoding="utf-8")
        self.assertTrue(content.startswith("<!DOCTYPE html>"))
        self.assertIn("<table>", content)


if __name__ == "__main__":
    unittest.main()
