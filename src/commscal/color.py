# SPDX-License-Identifier: MIT

from commscal.model.category import Category, ScheduleStatus

ISSUE_COLOR = "bold red"
ALL_DAY_COLOR = "bright_black"
OUTSIDE_MONTH_COLOR = "dim"
TODAY_COLOR = "bold black on bright_cyan"

CATEGORY_COLORS: dict[str, str] = {
    Category.EVENT: "blue",
    Category.NEWS_RELEASE: "green",
    Category.TV: "purple",
    Category.RADIO: "dark_orange",
    Category.SOCIAL_MEDIA: "deep_pink",
    Category.OBSERVANCE: "grey62",
    Category.CONFERENCE: "slate_blue1",
    Category.FYI: "gold1",
    Category.PLACEHOLDER: "light_slate_grey",
    Category.OTHER: "white",
}

STATUS_COLORS: dict[str, str] = {
    ScheduleStatus.UNKNOWN: "grey62",
    ScheduleStatus.TENTATIVE: "yellow",
    ScheduleStatus.CONFIRMED: "green",
}


def category_color(category: str) -> str:
    return CATEGORY_COLORS.get(category, CATEGORY_COLORS[Category.OTHER])


def status_color(status: str) -> str:
    return STATUS_COLORS.get(status, STATUS_COLORS[ScheduleStatus.UNKNOWN])
