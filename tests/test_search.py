import pytest

from commscal.service.search import filter_events
from tests.conftest import local


@pytest.fixture
def events(make_event):
    return [
        make_event("a", local(2024, 3, 10, 9), title="Budget Tabling", category="news release"),
        make_event("b", local(2024, 3, 11, 9), title="Radio interview", category="radio"),
        make_event(
            "c",
            local(2024, 3, 12, 9),
            title="Site visit",
            category="event",
            representatives=["Minister of Health"],
        ),
    ]


@pytest.mark.parametrize("query", [None, "", "   "])
def test_blank_query_returns_everything(events, query):
    assert filter_events(events, query) == events


def test_matches_title_case_insensitively(events):
    assert [event["id"] for event in filter_events(events, "budget")] == ["a"]


def test_matches_category(events):
    assert [event["id"] for event in filter_events(events, "RADIO")] == ["b"]


def test_matches_representatives(events):
    assert [event["id"] for event in filter_events(events, "health")] == ["c"]


def test_no_match(events):
    assert filter_events(events, "observance") == []
