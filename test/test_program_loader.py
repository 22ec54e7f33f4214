"""Tests for loading program records from JSON."""

import json
import sys
import tempfile
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from ProgramBrowser.core.models import Multi, Scalar
from ProgramBrowser.core.schema import FUNDING, GEOGRAPHY, PROGRAM_NAME, PROGRAM_TYPE, START_END
from ProgramBrowser.sources.programs import DataLoadError, load_records, parse_record, parse_records


class TestParseRecords(unittest.TestCase):
    def test_values_are_resolved_once(self) -> None:
        record = parse_record(
            {
                PROGRAM_NAME: "  Spaced Name ",
                PROGRAM_TYPE: ["A", None, 3],
                START_END: 2019,
                FUNDING: None,
                GEOGRAPHY: {"state": "OH"},
                "Active": True,
            }
        )
        self.assertEqual(record.get(PROGRAM_NAME), Scalar("  Spaced Name "))
        self.assertEqual(record.get(PROGRAM_TYPE), Multi(("A", "", "3")))
        self.assertEqual(record.get(START_END), Scalar("2019"))
        self.assertIsNone(record.get(FUNDING))
        self.assertEqual(record.get(GEOGRAPHY), Scalar('{"state": "OH"}'))
        self.assertEqual(record.get("Active"), Scalar("true"))

    def test_whole_floats_drop_the_fraction(self) -> None:
        record = parse_record({START_END: 2019.0, FUNDING: 2.5, PROGRAM_TYPE: [1.0, 0.25]})
        self.assertEqual(record.get(START_END), Scalar("2019"))
        self.assertEqual(record.get(FUNDING), Scalar("2.5"))
        self.assertEqual(record.get(PROGRAM_TYPE), Multi(("1", "0.25")))

    def test_records_are_read_only(self) -> None:
        record = parse_record({PROGRAM_NAME: "A"})
        with self.assertRaises(TypeError):
            record.fields[PROGRAM_NAME] = Scalar("B")  # type: ignore[index]

    def test_none_payload_is_empty(self) -> None:
        self.assertEqual(parse_records(None), ())

    def test_non_array_root_fails(self) -> None:
        with self.assertRaisesRegex(DataLoadError, "array"):
            parse_records({"programs": []})

    def test_non_object_item_reports_index(self) -> None:
        with self.assertRaisesRegex(DataLoadError, r"\[1\]"):
            parse_records([{PROGRAM_NAME: "A"}, "oops"])


class TestLoadRecords(unittest.TestCase):
    def test_load_file_preserves_order(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "programs.json"
            path.write_text(
                json.dumps([{PROGRAM_NAME: "Zeta"}, {PROGRAM_NAME: "Alpha"}]),
                encoding="utf-8",
            )
            records = load_records(path)
        self.assertEqual([r.get(PROGRAM_NAME).text for r in records], ["Zeta", "Alpha"])

    def test_missing_file_fails(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaisesRegex(DataLoadError, "Failed to read"):
                load_records(Path(tmp) / "missing.json")

    def test_invalid_json_fails(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "programs.json"
            path.write_text("[{", encoding="utf-8")
            with self.assertRaisesRegex(DataLoadError, "Invalid JSON"):
                load_records(path)


if __name__ == "__main__":
    unittest.main()
