# SPDX-License-Identifier: MIT


class Category:
    EVENT = "event"
    NEWS_RELEASE = "news release"
    TV = "tv"
    RADIO = "radio"
    SOCIAL_MEDIA = "social media"
    OBSERVANCE = "observance"
    CONFERENCE = "conference"
    FYI = "fyi"
    PLACEHOLDER = "placeholder"
    OTHER = "other"


CATEGORY_OPTIONS: tuple[str, ...] = (
    Category.EVENT,
    Category.NEWS_RELEASE,
    Category.TV,
    Category.RADIO,
    Category.SOCIAL_MEDIA,
    Category.OBSERVANCE,
    Category.CONFERENCE,
    Category.FYI,
    Category.PLACEHOLDER,
    Category.OTHER,
)


class ScheduleStatus:
    UNKNOWN = "unknown"
    TENTATIVE = "tentative"
    CONFIRMED = "confirmed"


STATUS_OPTIONS: tuple[str, ...] = (
    ScheduleStatus.UNKNOWN,
    ScheduleStatus.TENTATIVE,
    ScheduleStatus.CONFIRMED,
)


class LeadOrganization:
    FEDERAL = "federal"
    PROVINCIAL = "provincial"
    CROWN_CORP = "crown corp"
    OTHER = "other"


ORG_OPTIONS: tuple[str, ...] = (
    LeadOrganization.FEDERAL,
    LeadOrganization.PROVINCIAL,
    LeadOrganization.CROWN_CORP,
    LeadOrganization.OTHER,
)


class RelatedTo:
    PARENT = "parent"
    CHILD = "child"
    RELATED = "related"


class CommsMaterial:
    NEWS_RELEASE = "news release"
    BACKGROUNDER = "backgrounder"
    SPEAKING_NOTES = "speaking notes"
