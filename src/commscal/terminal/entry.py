# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from commscal.model.category import CATEGORY_OPTIONS, ORG_OPTIONS, STATUS_OPTIONS
from commscal.service.entry import filter_entries, sort_entries
from commscal.terminal.data import load_entries
from commscal.view.views.entry import entries_view


def _check_options(values: Optional[list[str]], options: tuple[str, ...]) -> None:
    for value in values or []:
        if value not in options:
            raise typer.BadParameter(
                f"'{value}' is not one of: {', '.join(options)}"
            )


def entries(
    categories: Annotated[
        Optional[list[str]],
        typer.Option("--category", "-c", help="filter by category (repeatable)"),
    ] = None,
    statuses: Annotated[
        Optional[list[str]],
        typer.Option("--status", "-s", help="filter by schedule status (repeatable)"),
    ] = None,
    organizations: Annotated[
        Optional[list[str]],
        typer.Option("--org", "-o", help="filter by lead organization (repeatable)"),
    ] = None,
    query: Annotated[
        Optional[str],
        typer.Option("--search", "-q", help="search title, summary and representatives"),
    ] = None,
    sort: Annotated[
        Optional[list[str]],
        typer.Option(
            "--sort",
            help='sort column, prefix with "desc " for descending (repeatable)',
        ),
    ] = None,
    no_wrap: Annotated[bool, typer.Option("--no-wrap", "-nw")] = False,
) -> None:
    """List communication entries as a table."""
    _check_options(categories, CATEGORY_OPTIONS)
    _check_options(statuses, STATUS_OPTIONS)
    _check_options(organizations, ORG_OPTIONS)

    filtered = filter_entries(
        load_entries(),
        categories=categories,
        statuses=statuses,
        organizations=organizations,
        query=query,
    )
    try:
        sorted_entries = sort_entries(filtered, sort or ["start_date"])
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--sort")
    entries_view(sorted_entries, no_wrap=no_wrap)
