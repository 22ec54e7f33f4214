"""Record ordering with blanks kept at the bottom."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Iterable

from ProgramBrowser.core.collation import compare_text
from ProgramBrowser.core.models import Record, SortDirection
from ProgramBrowser.core.normalize import is_blank_or_unavailable, sort_text


def compare_records(a: Record, b: Record, sort_key: str, direction: SortDirection) -> int:
    """Compare two records on one field.

    Blank values sort after non-blank values in both directions; two blanks
    compare equal.

    Args:
        a: Left record.
        b: Right record.
        sort_key: Field key to compare.
        direction: Sort direction.

    Returns:
        -1, 0 or 1.
    """
    left = sort_text(a, sort_key)
    right = sort_text(b, sort_key)

    left_blank = is_blank_or_unavailable(left)
    right_blank = is_blank_or_unavailable(right)
    if left_blank and right_blank:
        return 0
    if left_blank:
        return 1
    if right_blank:
        return -1

    result = compare_text(left, right)
    return result if direction is SortDirection.ASCENDING else -result


def sort_records(records: Iterable[Record], sort_key: str, direction: SortDirection) -> list[Record]:
    """Return records ordered by ``compare_records``.

    ``sorted`` is stable, so records that compare equal keep their input order.
    """
    return sorted(records, key=cmp_to_key(lambda a, b: compare_records(a, b, sort_key, direction)))
