"""Tabular (CSV) session report.

Entry rows quote every field. Metadata and summary rows use minimal
quoting, so ordinary values are written bare as ``label,value``.
"""

import csv
from typing import TextIO

from session_logger.session import SessionLog, SessionStateError

ENTRY_HEADER = ("Local Time", "UTC Time", "Entry Type", "Tag", "Description")
SUMMARY_HEADER = ("Tag", "Count")


def render_csv(session: SessionLog, sink: TextIO) -> None:
    """Write the CSV report for a closed session to ``sink``.

    Open file sinks with ``newline=""`` so the writer controls line endings.
    """
    if not session.is_closed:
        raise SessionStateError("cannot render an open session")

    plain = csv.writer(sink, lineterminator="\n")
    quoted = csv.writer(sink, quoting=csv.QUOTE_ALL, lineterminator="\n")
    meta = session.metadata

    plain.writerows([
        ("Test Name", meta.test_name),
        ("Software Version", meta.software_version),
        ("Test Objective", meta.test_objective),
        ("Test Operator", meta.test_operator),
        ("Participating Asset(s)", meta.participating_assets),
        ("Start Time", session.start_time),
    ])
    sink.write("\n")

    plain.writerow(ENTRY_HEADER)
    for entry in session.entries:
        quoted.writerow((
            entry.local_time,
            entry.utc_time,
            entry.entry_kind,
            entry.tag,
            entry.description,
        ))
    sink.write("\n")

    sink.write("Summary Information\n")
    plain.writerow(("End Time", session.end_time))
    plain.writerow(("Duration", str(session.duration)))
    sink.write("\n")

    plain.writerow(SUMMARY_HEADER)
    for tag, count in session.tag_counts.items():
        plain.writerow((tag, count))
