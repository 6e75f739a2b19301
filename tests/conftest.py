from typing import Callable, Optional

import pendulum
import pytest

from commscal.model.event import Event


def local(*args: int) -> pendulum.DateTime:
    return pendulum.datetime(*args, tz="local")


@pytest.fixture
def make_event() -> Callable[..., Event]:
    def _make_event(
        id: str,
        start: pendulum.DateTime,
        end: Optional[pendulum.DateTime] = None,
        all_day: bool = False,
        title: Optional[str] = None,
        category: str = "event",
        representatives: Optional[list[str]] = None,
    ) -> Event:
        return Event(
            id=id,
            title=title if title is not None else f"event {id}",
            category=category,
            start_date=start,
            end_date=end if end is not None else start.add(hours=1),
            all_day=all_day,
            issue=False,
            schedule_status="confirmed",
            location=None,
            representatives=representatives or [],
        )

    return _make_event
