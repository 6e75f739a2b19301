# SPDX-License-Identifier: MIT

from typing import Optional


class EntryValidationError(ValueError):
    """Raised when a source entry is missing a field the calendar cannot do without."""

    def __init__(self, entry_id: Optional[str], field: str, reason: str) -> None:
        self.entry_id = entry_id
        self.field = field
        self.reason = reason
        super().__init__(f"entry {entry_id or '<unknown>'}: {field}: {reason}")
