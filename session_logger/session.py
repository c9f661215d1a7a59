"""SessionLog: ordered entry collection with per-tag tallies and an open/closed lifecycle."""

import logging
from collections import Counter

from session_logger.clock import SystemClock, Timestamp
from session_logger.models import (
    TEST_END,
    TEST_START,
    Duration,
    LogEntry,
    SessionMetadata,
)

logger = logging.getLogger(__name__)

LIFECYCLE_TAG = "NOTE"
START_DESCRIPTION = "Test started"
END_DESCRIPTION = "Test session ended."


class SessionStateError(RuntimeError):
    """Raised when an operation is not valid in the session's current state."""


def elapsed(start: Timestamp, end: Timestamp) -> Duration:
    """Whole minutes and remainder seconds between two local instants."""
    total = int((end.local - start.local).total_seconds())
    minutes, seconds = divmod(max(total, 0), 60)
    return Duration(minutes=minutes, seconds=seconds)


class SessionLog:
    """One operator session. Use ``SessionLog.open`` to create it.

    Entries are kept in append order. Lifecycle markers (TEST START / TEST END)
    are stored as entries but never counted in ``tag_counts``.
    """

    def __init__(self, metadata: SessionMetadata, clock=None):
        self._metadata = metadata
        self._clock = clock if clock is not None else SystemClock()
        self._entries: list[LogEntry] = []
        self._tag_counts: Counter = Counter()
        self._start: Timestamp | None = None
        self._end: Timestamp | None = None
        self._duration: Duration | None = None

    @classmethod
    def open(cls, metadata: SessionMetadata, clock=None) -> "SessionLog":
        session = cls(metadata, clock)
        session._start = session._clock.now()
        session._append(session._start, TEST_START, LIFECYCLE_TAG, START_DESCRIPTION)
        logger.info("Session opened: %s", metadata.test_name)
        return session

    @property
    def metadata(self) -> SessionMetadata:
        return self._metadata

    @property
    def entries(self) -> tuple[LogEntry, ...]:
        return tuple(self._entries)

    @property
    def tag_counts(self) -> dict[str, int]:
        """Tag tallies sorted by tag key."""
        return dict(sorted(self._tag_counts.items()))

    @property
    def is_open(self) -> bool:
        return self._start is not None and self._end is None

    @property
    def is_closed(self) -> bool:
        return self._end is not None

    @property
    def start_time(self) -> str:
        return self._start.local_str

    @property
    def end_time(self) -> str:
        if self._end is None:
            raise SessionStateError("session has not been closed")
        return self._end.local_str

    @property
    def duration(self) -> Duration:
        if self._duration is None:
            raise SessionStateError("session has not been closed")
        return self._duration

    def _append(self, ts: Timestamp, entry_kind: str, tag: str, description: str) -> LogEntry:
        entry = LogEntry(
            local_time=ts.local_str,
            utc_time=ts.utc_str,
            entry_kind=entry_kind,
            tag=tag,
            description=description,
        )
        self._entries.append(entry)
        return entry

    def record(self, entry_kind: str, tag: str, description: str) -> LogEntry:
        """Append a classified entry stamped with the current time."""
        if not self.is_open:
            raise SessionStateError("cannot record into a closed session")
        entry = self._append(self._clock.now(), entry_kind, tag, description)
        if not entry.is_lifecycle:
            self._tag_counts[tag] += 1
        logger.debug("Recorded %s/%s: %s", entry_kind, tag, description)
        return entry

    def close(self) -> Duration:
        """Append the TEST END marker and return the session duration. Valid once."""
        if not self.is_open:
            raise SessionStateError("session is already closed")
        end = self._clock.now()
        self._append(end, TEST_END, LIFECYCLE_TAG, END_DESCRIPTION)
        self._end = end
        self._duration = elapsed(self._start, end)
        logger.info("Session closed after %s (%d entries)", self._duration, len(self._entries))
        return self._duration
