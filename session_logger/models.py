"""Session data model: frozen entry and metadata records."""

from dataclasses import dataclass
from typing import NamedTuple

# Entry kinds
OBSERVATION = "OBSERVATION"
RELOAD = "RELOAD"
TEST_CASE = "TEST CASE"
TEST_START = "TEST START"
TEST_END = "TEST END"

ENTRY_KINDS = (OBSERVATION, RELOAD, TEST_CASE, TEST_START, TEST_END)
LIFECYCLE_KINDS = (TEST_START, TEST_END)

# Tags
TAGS = ("BUG", "WARN", "GOOD", "PASS", "FAIL", "NOTE", "VERSION", "NAME")


@dataclass(frozen=True)
class LogEntry:
    local_time: str
    utc_time: str
    entry_kind: str
    tag: str
    description: str

    @property
    def is_lifecycle(self) -> bool:
        return self.entry_kind in LIFECYCLE_KINDS


@dataclass(frozen=True)
class SessionMetadata:
    test_operator: str
    test_name: str
    software_version: str
    test_objective: str
    participating_assets: str


class Duration(NamedTuple):
    minutes: int
    seconds: int

    def __str__(self) -> str:
        return f"{self.minutes} minutes {self.seconds} seconds"
