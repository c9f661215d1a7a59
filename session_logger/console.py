"""Interactive front end: metadata prompts, the entry loop and the console summary."""

import logging
import sys

from session_logger.classifier import classify_line, help_lines, is_end_sentinel
from session_logger.clock import SystemClock
from session_logger.config import Config
from session_logger.models import SessionMetadata
from session_logger.output import (
    build_report_paths,
    program_log_dir,
    resolve_log_dir,
    write_reports,
)
from session_logger.session import SessionLog
from session_logger.text_report import RULE, format_tag_line

logger = logging.getLogger(__name__)

METADATA_PROMPTS = (
    ("test_operator", "Enter the test operator's name: "),
    ("test_name", "Enter the test name: "),
    ("software_version", "Enter the software version being tested: "),
    ("test_objective", "Enter the test objective: "),
    ("participating_assets", "Enter the participating asset(s): "),
)
ENTRY_PROMPT = "> "


def prompt_metadata(read_line) -> SessionMetadata:
    values = {name: read_line(prompt).strip() for name, prompt in METADATA_PROMPTS}
    return SessionMetadata(**values)


def read_entries(session: SessionLog, read_line) -> int:
    """Record lines until the end sentinel. Blank lines are skipped. Returns entries recorded."""
    recorded = 0
    while True:
        line = read_line(ENTRY_PROMPT).strip()
        if not line:
            continue
        if is_end_sentinel(line):
            return recorded
        result = classify_line(line)
        session.record(result.entry_kind, result.tag, result.description)
        recorded += 1


def print_paths(paths, out) -> None:
    print("\n--- Log Files Will Be Saved To ---", file=out)
    print(f"TXT Log Path : {paths.text}", file=out)
    print(f"CSV Log Path : {paths.csv}", file=out)
    print("----------------------------------\n", file=out)


def print_header(session: SessionLog, out, show_banner: bool = True) -> None:
    meta = session.metadata
    print("--- Test Session Started ---", file=out)
    print(f"Test Operator          : {meta.test_operator}", file=out)
    print(f"Test Name              : {meta.test_name}", file=out)
    print(f"Software Version       : {meta.software_version}", file=out)
    print(f"Test Objective         : {meta.test_objective}", file=out)
    print(f"Participating Asset(s) : {meta.participating_assets}", file=out)
    print(f"Start Time             : {session.start_time}", file=out)
    print(RULE, file=out)
    if show_banner:
        print("TAG OPTIONS :", file=out)
        for line in help_lines():
            print(line, file=out)
        print(RULE, file=out)
    print("To END the test, type 'end' and press Enter.", file=out)
    print(RULE + "\n", file=out)


def print_summary(session: SessionLog, out) -> None:
    print("\n--- Test Session Ended ---", file=out)
    print(f"End Time               : {session.end_time}", file=out)
    print(f"Duration               : {session.duration}", file=out)
    print(RULE, file=out)
    print("Summary of Tags:", file=out)
    for tag, count in session.tag_counts.items():
        print(format_tag_line(tag, count), file=out)
    print(RULE + "\n", file=out)


def run_session(
    config: Config,
    read_line=input,
    clock=None,
    out=None,
    default_provider=program_log_dir,
):
    """Drive one session end to end and write both reports.

    EOFError / KeyboardInterrupt from ``read_line`` propagate before any
    report is written. Raises ReportWriteError if an artifact fails.
    """
    clock = clock if clock is not None else SystemClock()
    out = out if out is not None else sys.stdout

    metadata = prompt_metadata(read_line)
    token = clock.filename_token()
    log_dir = resolve_log_dir(config.log_dir, default_provider)
    paths = build_report_paths(log_dir, token, metadata.test_name)
    print_paths(paths, out)

    session = SessionLog.open(metadata, clock)
    print_header(session, out, show_banner=config.show_banner)

    recorded = read_entries(session, read_line)
    session.close()
    logger.info("Recorded %d entries", recorded)
    print_summary(session, out)

    write_reports(session, paths)
    print("Logs successfully saved!", file=out)
    print(f"TXT Log Path : {paths.text}", file=out)
    print(f"CSV Log Path : {paths.csv}", file=out)
    return session, paths
