from datetime import datetime, timedelta, timezone

import pytest

from session_logger.clock import FILENAME_TIMESTAMP_FORMAT, Timestamp
from session_logger.models import SessionMetadata

LOCAL_TZ = timezone(timedelta(hours=2))
START = datetime(2025, 5, 15, 12, 30, 0, tzinfo=timezone.utc)


class FakeClock:
    """Advances by ``step`` seconds on every ``now()`` call."""

    def __init__(self, start=START, step=1.0, tz=LOCAL_TZ):
        self._current = start
        self._step = timedelta(seconds=step)
        self._tz = tz
        self.calls = 0

    def now(self) -> Timestamp:
        utc = self._current
        self._current += self._step
        self.calls += 1
        return Timestamp(local=utc.astimezone(self._tz), utc=utc)

    def filename_token(self) -> str:
        return self._current.astimezone(self._tz).strftime(FILENAME_TIMESTAMP_FORMAT)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_clock():
    return FakeClock


@pytest.fixture
def metadata():
    return SessionMetadata(
        test_operator="Alice",
        test_name="MyApp",
        software_version="v1.2.3",
        test_objective="Smoke test",
        participating_assets="DeviceA",
    )
