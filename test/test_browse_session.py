"""Tests for the interactive browse command loop."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from ProgramBrowser.cli.commands import BrowseSession, SearchCommand, parse_assignment
from ProgramBrowser.core.models import SortDirection, record_from_values
from ProgramBrowser.core.schema import GEOGRAPHY, PROGRAM_NAME, PROGRAM_TYPE
from ProgramBrowser.services import ProgramExplorer


def _explorer() -> ProgramExplorer:
    return ProgramExplorer(
        records=(
            record_from_values({PROGRAM_NAME: "A", PROGRAM_TYPE: ["X"], GEOGRAPHY: "Ohio"}),
            record_from_values({PROGRAM_NAME: "B", PROGRAM_TYPE: ["Y", "X"], GEOGRAPHY: "Iowa"}),
            record_from_values({PROGRAM_NAME: "C", PROGRAM_TYPE: []}),
        )
    )


class _CollectingWriter:
    def __init__(self) -> None:
        self.results = []

    def write_result(self, result) -> None:
        self.results.append(result)

    def finalize(self, action: str) -> None:
        del action


class TestParseAssignment(unittest.TestCase):
    def test_label_and_key(self) -> None:
        self.assertEqual(parse_assignment("program type = X"), (PROGRAM_TYPE, "X"))
        self.assertEqual(parse_assignment("Geography=Ohio"), (GEOGRAPHY, "Ohio"))

    def test_errors(self) -> None:
        with self.assertRaisesRegex(ValueError, "FIELD=VALUE"):
            parse_assignment("Geography")
        with self.assertRaisesRegex(ValueError, "Unknown filter field"):
            parse_assignment("Color=blue")


class TestBrowseSession(unittest.TestCase):
    def setUp(self) -> None:
        self.lines: list[str] = []
        self.explorer = _explorer()
        self.session = BrowseSession(explorer=self.explorer, echo=self.lines.append)

    def test_intents_update_explorer_in_order(self) -> None:
        self.session.run(
            [
                "toggle Program Type = X",
                "set Geography = Iowa",
                "sort program name",
                "quit",
                "reset",
            ]
        )
        self.assertEqual(self.explorer.state.selections[PROGRAM_TYPE], ("X",))
        self.assertEqual(self.explorer.state.selections[GEOGRAPHY], "Iowa")
        self.assertIs(self.explorer.state.sort_direction, SortDirection.DESCENDING)
        self.assertEqual(self.explorer.count, 1)
        self.assertIn("Programs: 1 of 3", self.lines[-1])

    def test_search_strips_quotes_and_clear(self) -> None:
        self.session.handle('search "b"')
        self.assertEqual(self.explorer.state.search, "b")
        self.assertEqual(self.explorer.count, 1)
        self.session.handle("search")
        self.assertEqual(self.explorer.count, 3)

    def test_clear_multi_field_removes_all_values(self) -> None:
        self.session.handle("toggle Program Type = X")
        self.session.handle("toggle Program Type = Y")
        self.session.handle("clear Program Type")
        self.assertNotIn(PROGRAM_TYPE, self.explorer.state.selections)

    def test_errors_are_reported_and_loop_continues(self) -> None:
        self.assertTrue(self.session.handle("toggle Geography = Ohio"))
        self.assertTrue(self.lines[-1].startswith("Error:"))
        self.assertTrue(self.session.handle("dance"))
        self.assertIn("Unknown command", self.lines[-1])
        self.assertTrue(self.session.handle("sort Color"))
        self.assertIn("Unknown sort field", self.lines[-1])

    def test_show_writes_to_file_writer(self) -> None:
        writer = _CollectingWriter()
        session = BrowseSession(explorer=self.explorer, output_writer=writer, echo=self.lines.append)
        session.handle("show")
        self.assertEqual(len(writer.results), 1)
        self.assertIn("1. A", self.lines[-1])

    def test_quit_ends_session(self) -> None:
        self.assertFalse(self.session.handle("exit"))


class TestSearchCommand(unittest.TestCase):
    def test_applies_options_and_writes_result(self) -> None:
        writer = _CollectingWriter()
        SearchCommand(
            explorer=_explorer(),
            output_writer=writer,
            search="",
            filters=("Program Type=X",),
            sorts=("Program Name", "Program Name", "Program Name"),
        ).execute()
        result = writer.results[0]
        self.assertEqual(result.count, 2)
        self.assertEqual(result.sort_direction, "desc")
        self.assertEqual([row.cells[PROGRAM_NAME] for row in result.rows], ["B", "A"])


if __name__ == "__main__":
    unittest.main()
