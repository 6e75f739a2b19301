# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Callable, Mapping, Optional, TypeVar

T = TypeVar("T", bound=Mapping[str, Any])


def parse_sort_instruction(sort_instruction: str) -> tuple[str, bool]:
    """Split "desc column" / "asc column" / "column" into (column, descending)."""
    parts = sort_instruction.split()
    if len(parts) == 2 and parts[0] in ("asc", "desc"):
        return parts[1], parts[0] == "desc"
    return sort_instruction.strip(), False


def sort_items(
    items: list[T],
    sort_instructions: list[str],
    column_keys: Optional[Mapping[str, Callable[[Any], Any]]] = None,
) -> list[T]:
    """
    Sort items by several columns, the first instruction being the primary key.

    Items missing a column or holding None for it are placed last regardless of
    direction. The input list is left untouched.

    Args:
        items: Rows to sort
        sort_instructions: Column names, optionally prefixed with "asc " or "desc "
        column_keys: Per-column functions turning a non-None value into its sort key
    """
    sorted_items = deepcopy(items)
    keys = column_keys or {}

    for sort_instruction in reversed(sort_instructions):
        column, descending = parse_sort_instruction(sort_instruction)
        key = keys.get(column, _sort_value)
        none_items = [item for item in sorted_items if item.get(column) is None]
        value_items = [item for item in sorted_items if item.get(column) is not None]
        value_items.sort(key=lambda item: key(item[column]), reverse=descending)
        sorted_items = value_items + none_items

    return sorted_items


def _sort_value(value: Any) -> Any:
    # list columns such as category sort by their first element
    if isinstance(value, list):
        return value[0] if value else ""
    return value
