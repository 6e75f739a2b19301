# SPDX-License-Identifier: MIT

from contextvars import ContextVar
from typing import Optional

from rich import print
from rich.padding import Padding

# --no-header and the show_header config setting both land here
_show_header: ContextVar[bool] = ContextVar("show_header", default=True)


def set_show_header(value: bool) -> None:
    _show_header.set(value)


def header(report_name: str, sub_header: Optional[str] = None) -> None:
    """Print the application header unless headers are switched off.

    Args:
        report_name: The name of the report
        sub_header: Optional second line, e.g. the displayed period
    """
    if not _show_header.get():
        return

    print(Padding("[dark_orange]commscal[/dark_orange]", (1, 0, 0, 1)))
    print(Padding(f"[sandy_brown]{report_name}[/sandy_brown]", (0, 1)))
    if sub_header is not None:
        print(Padding(f"[plum1]{sub_header}[/plum1]", (0, 1)))
