"""Static field configuration for program records.

Field keys match the JSON keys of the program data file exactly.
"""

from __future__ import annotations

from typing import Final

from ProgramBrowser.core.models import FieldDescriptor, FilterKind

PROGRAM_NAME: Final = "Program Name"
ORG: Final = "Organization / Lead Entity"
PROGRAM_TYPE: Final = "Program Type (can be multiple)"
SETTING: Final = "Setting / Sector"
POP_TARGETED: Final = "Population Targeted (can be multiple)"
GEOGRAPHY: Final = "Geography"
FUNDING: Final = "Funding Source"
START_END: Final = "Start Year / End Year"
INTERVENTION: Final = "Intervention Description"
MEASURED_OUTCOMES: Final = "Measured Outcomes"
EVAL_RESULTS_PUB: Final = "Evaluation Results (if published)"
KEY_CONTACTS: Final = "Key Contacts / Website"
PARTNERS: Final = "Partners"
TAGS: Final = "Tags / Keywords"
PUBLIC_LINKS: Final = "Public Links (Sources)"

ALL_FIELDS: Final[tuple[str, ...]] = (
    PROGRAM_NAME,
    ORG,
    PROGRAM_TYPE,
    SETTING,
    POP_TARGETED,
    GEOGRAPHY,
    FUNDING,
    START_END,
    INTERVENTION,
    MEASURED_OUTCOMES,
    EVAL_RESULTS_PUB,
    KEY_CONTACTS,
    PARTNERS,
    TAGS,
    PUBLIC_LINKS,
)

FILTER_FIELDS: Final[tuple[FieldDescriptor, ...]] = (
    FieldDescriptor(PROGRAM_TYPE, "Program Type", FilterKind.MULTI),
    FieldDescriptor(SETTING, "Setting / Sector", FilterKind.SINGLE),
    FieldDescriptor(POP_TARGETED, "Population Targeted", FilterKind.MULTI),
    FieldDescriptor(GEOGRAPHY, "Geography", FilterKind.SINGLE),
    FieldDescriptor(FUNDING, "Funding Source", FilterKind.SINGLE),
    FieldDescriptor(TAGS, "Tags / Keywords", FilterKind.MULTI),
)

SEARCHABLE_KEYS: Final[tuple[str, ...]] = (
    PROGRAM_NAME,
    ORG,
    PROGRAM_TYPE,
    SETTING,
    POP_TARGETED,
    GEOGRAPHY,
    FUNDING,
    TAGS,
    INTERVENTION,
    MEASURED_OUTCOMES,
    EVAL_RESULTS_PUB,
    KEY_CONTACTS,
    PARTNERS,
)

VISIBLE_COLUMNS: Final[tuple[str, ...]] = (
    PROGRAM_NAME,
    ORG,
    PROGRAM_TYPE,
    SETTING,
    POP_TARGETED,
    GEOGRAPHY,
    FUNDING,
    START_END,
    PUBLIC_LINKS,
)

DEFAULT_SORT_KEY: Final = PROGRAM_NAME
NOT_AVAILABLE: Final = "Not Available"
JOIN_SEPARATOR: Final = "; "


def find_filter_field(name: str, fields: tuple[FieldDescriptor, ...] = FILTER_FIELDS) -> FieldDescriptor | None:
    """Look up a filter field by key or label (case-insensitive).

    Args:
        name: Field key or display label.
        fields: Descriptors to search.

    Returns:
        Matching descriptor, or None.
    """
    wanted = name.strip().casefold()
    for descriptor in fields:
        if descriptor.key.casefold() == wanted or descriptor.label.casefold() == wanted:
            return descriptor
    return None


def resolve_field_key(name: str) -> str | None:
    """Resolve a user-provided field name to a schema key.

    Accepts exact keys, case-insensitive keys, and filter labels.
    """
    wanted = name.strip().casefold()
    for key in ALL_FIELDS:
        if key.casefold() == wanted:
            return key
    descriptor = find_filter_field(name)
    return descriptor.key if descriptor else None
