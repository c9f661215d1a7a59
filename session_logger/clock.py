"""Clock capability: paired local/UTC instants and artifact timestamp tokens."""

from dataclasses import dataclass
from datetime import datetime, timezone

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
FILENAME_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"


@dataclass(frozen=True)
class Timestamp:
    """One sampling of the clock, in the local zone and in UTC."""

    local: datetime
    utc: datetime

    @property
    def local_str(self) -> str:
        return self.local.strftime(TIMESTAMP_FORMAT)

    @property
    def utc_str(self) -> str:
        return self.utc.strftime(TIMESTAMP_FORMAT)


class SystemClock:
    """Reads the wall clock. Swap in another object with the same methods for tests."""

    def now(self) -> Timestamp:
        utc = datetime.now(timezone.utc)
        return Timestamp(local=utc.astimezone(), utc=utc)

    def filename_token(self) -> str:
        return datetime.now().astimezone().strftime(FILENAME_TIMESTAMP_FORMAT)
