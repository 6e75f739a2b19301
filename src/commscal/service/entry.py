# SPDX-License-Identifier: MIT

from typing import Optional

from commscal.model.entry import Entry
from commscal.query.sort import parse_sort_instruction, sort_items
from commscal.time import parse_local_datetime

# timestamps compare as instants, not as the strings they were written as
DATE_SORT_COLUMNS = ("start_date", "end_date")
SORTABLE_COLUMNS = (
    "id",
    "title",
    "summary",
    "category",
    "schedule_status",
    "lead_organization",
    "significance",
    "related_to",
    "issue",
    "all_day",
    "representatives",
    *DATE_SORT_COLUMNS,
)


def _matches_query(entry: Entry, query: str) -> bool:
    fields = [entry.get("title"), entry.get("summary"), *(entry.get("representatives") or [])]
    return any(field is not None and query in field.lower() for field in fields)


def filter_entries(
    entries: list[Entry],
    categories: Optional[list[str]] = None,
    statuses: Optional[list[str]] = None,
    organizations: Optional[list[str]] = None,
    query: Optional[str] = None,
) -> list[Entry]:
    """
    Filter entries for the entry table.

    Args:
        entries: All entries
        categories: Keep entries tagged with any of these categories
        statuses: Keep entries whose schedule status is one of these
        organizations: Keep entries led by one of these organizations
        query: Case-insensitive text matched against title, summary and representatives

    Returns:
        Matching entries in input order
    """
    filtered = list(entries)
    if categories:
        filtered = [
            entry
            for entry in filtered
            if any(category in categories for category in entry.get("category") or [])
        ]
    if statuses:
        filtered = [entry for entry in filtered if entry.get("schedule_status") in statuses]
    if organizations:
        filtered = [
            entry for entry in filtered if entry.get("lead_organization") in organizations
        ]
    if query is not None and query.strip():
        query_lower = query.strip().lower()
        filtered = [entry for entry in filtered if _matches_query(entry, query_lower)]
    return filtered


def sort_entries(entries: list[Entry], sort_instructions: list[str]) -> list[Entry]:
    """
    Sort entries for the entry table.

    Start and end dates are compared as local datetimes, so entries written
    with different ISO spellings or offsets still sort chronologically.

    Raises:
        ValueError: If an instruction names a column that cannot be sorted on
    """
    for sort_instruction in sort_instructions:
        column, _ = parse_sort_instruction(sort_instruction)
        if column not in SORTABLE_COLUMNS:
            raise ValueError(
                f"cannot sort by '{column}', choose from: {', '.join(SORTABLE_COLUMNS)}"
            )

    return sort_items(
        entries,
        sort_instructions,
        column_keys={column: parse_local_datetime for column in DATE_SORT_COLUMNS},
    )
