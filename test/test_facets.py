"""Tests for facet option derivation."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from ProgramBrowser.core.collation import compare_text
from ProgramBrowser.core.facets import build_facet_catalog, options_for
from ProgramBrowser.core.models import record_from_values
from ProgramBrowser.core.schema import FILTER_FIELDS, GEOGRAPHY, PROGRAM_TYPE, TAGS
from ProgramBrowser.services.explorer import ProgramExplorer


def _records():
    return (
        record_from_values({PROGRAM_TYPE: ["Mentoring", " Tutoring "], GEOGRAPHY: "Ohio"}),
        record_from_values({PROGRAM_TYPE: ["tutoring", "Not Available", ""], GEOGRAPHY: " Ohio "}),
        record_from_values({PROGRAM_TYPE: [], GEOGRAPHY: "not available"}),
        record_from_values({PROGRAM_TYPE: ["Éducation"], GEOGRAPHY: "Alaska"}),
    )


class TestFacetOptions(unittest.TestCase):
    def test_multi_options_are_trimmed_deduplicated_and_collated(self) -> None:
        self.assertEqual(
            options_for(_records(), PROGRAM_TYPE),
            ("Éducation", "Mentoring", "tutoring", "Tutoring"),
        )

    def test_scalar_options_exclude_blanks(self) -> None:
        self.assertEqual(options_for(_records(), GEOGRAPHY), ("Alaska", "Ohio"))

    def test_missing_collection_yields_no_options(self) -> None:
        self.assertEqual(options_for(None, GEOGRAPHY), ())
        self.assertEqual(build_facet_catalog(None)[TAGS], ())

    def test_catalog_covers_every_filter_field_in_order(self) -> None:
        catalog = build_facet_catalog(_records())
        self.assertEqual(list(catalog), [descriptor.key for descriptor in FILTER_FIELDS])

    def test_options_do_not_shrink_when_query_narrows(self) -> None:
        explorer = ProgramExplorer(records=_records())
        before = dict(explorer.facets)
        explorer.set_search("alaska")
        explorer.set_single_filter(GEOGRAPHY, "Alaska")
        self.assertEqual(explorer.count, 1)
        self.assertEqual(dict(explorer.facets), before)


class TestCollation(unittest.TestCase):
    def test_case_and_accent_insensitive_primary_order(self) -> None:
        self.assertEqual(compare_text("apple", "Banana"), -1)
        self.assertEqual(compare_text("école", "ecole"), 1)
        self.assertEqual(compare_text("Zebra", "éclair"), 1)

    def test_lowercase_before_uppercase(self) -> None:
        self.assertEqual(compare_text("a", "A"), -1)
        self.assertEqual(compare_text("same", "same"), 0)

    def test_punctuation_before_digits_before_letters(self) -> None:
        values = ["Zion", "(Statewide)", "_Other", "10 counties", "[Region]"]
        records = [record_from_values({GEOGRAPHY: value}) for value in values]
        self.assertEqual(
            options_for(records, GEOGRAPHY),
            ("_Other", "(Statewide)", "[Region]", "10 counties", "Zion"),
        )
        self.assertEqual(compare_text("{braces}", "apple"), -1)
        self.assertEqual(compare_text("A B", "AB"), -1)


if __name__ == "__main__":
    unittest.main()
