"""Artifact paths and report writing."""

import logging
import os
import sys
from dataclasses import dataclass

from session_logger.csv_report import render_csv
from session_logger.session import SessionLog
from session_logger.text_report import render_text

logger = logging.getLogger(__name__)

DEFAULT_LOG_DIRNAME = "logs"


class ReportWriteError(Exception):
    """One or more report artifacts could not be written."""

    def __init__(self, failures: list[tuple[str, Exception]], written: list[str]):
        self.failures = failures
        self.written = written
        paths = ", ".join(path for path, _ in failures)
        super().__init__(f"Failed to write {len(failures)} report(s): {paths}")


@dataclass(frozen=True)
class ReportPaths:
    text: str
    csv: str


def program_log_dir() -> str:
    """Default output directory: ``logs/`` beside the running program."""
    program = os.path.abspath(sys.argv[0]) if sys.argv and sys.argv[0] else os.getcwd()
    base = program if os.path.isdir(program) else os.path.dirname(program)
    return os.path.join(base, DEFAULT_LOG_DIRNAME)


def resolve_log_dir(explicit: str | None, default_provider=program_log_dir) -> str:
    """Return the output directory, creating it if absent."""
    log_dir = explicit if explicit else default_provider()
    os.makedirs(log_dir, exist_ok=True)
    logger.info("Using log directory %s", log_dir)
    return log_dir


def artifact_stem(timestamp_token: str, test_name: str) -> str:
    return f"{timestamp_token}_{test_name.replace(' ', '_')}"


def build_report_paths(log_dir: str, timestamp_token: str, test_name: str) -> ReportPaths:
    stem = artifact_stem(timestamp_token, test_name)
    return ReportPaths(
        text=os.path.join(log_dir, f"{stem}_log.txt"),
        csv=os.path.join(log_dir, f"{stem}_log.csv"),
    )


def write_reports(session: SessionLog, paths: ReportPaths) -> list[str]:
    """Write both artifacts. Every artifact is attempted even if an earlier one fails.

    Returns the written paths; raises ReportWriteError if any write failed.
    """
    written: list[str] = []
    failures: list[tuple[str, Exception]] = []

    targets = (
        (paths.text, render_text, None),
        (paths.csv, render_csv, ""),
    )
    for path, render, newline in targets:
        try:
            # Undecodable operator bytes arrive as lone surrogates; write them back raw.
            with open(path, "w", encoding="utf-8", errors="surrogateescape", newline=newline) as f:
                render(session, f)
        except (OSError, UnicodeError) as exc:
            logger.error("Failed to write %s: %s", path, exc)
            failures.append((path, exc))
            continue
        logger.info("Wrote %s", path)
        written.append(path)

    if failures:
        raise ReportWriteError(failures, written)
    return written
