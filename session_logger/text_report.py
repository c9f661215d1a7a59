"""Human-readable session report."""

from typing import TextIO

from session_logger.session import SessionLog, SessionStateError

RULE = "---------------------------------------"
TAG_WIDTH = 10

HEADER_LABELS = (
    "Test Name",
    "Software Version and Hash",
    "Test Objective",
    "Test Operator",
    "Participating Asset(s)",
    "Start Time",
)
LABEL_WIDTH = max(len(label) for label in HEADER_LABELS)


def _field(label: str, value) -> str:
    return f"{label:<{LABEL_WIDTH}} : {value}"


def format_entry_line(entry) -> str:
    return (
        f"[Local: {entry.local_time}] [UTC: {entry.utc_time}] "
        f"[{entry.entry_kind}]\t[{entry.tag}]\t{entry.description}"
    )


def format_tag_line(tag: str, count: int) -> str:
    return f"{tag:<{TAG_WIDTH}}: {count}"


def render_text(session: SessionLog, sink: TextIO) -> None:
    """Write the full text report for a closed session to ``sink``."""
    if not session.is_closed:
        raise SessionStateError("cannot render an open session")

    meta = session.metadata
    header_values = (
        meta.test_name,
        meta.software_version,
        meta.test_objective,
        meta.test_operator,
        meta.participating_assets,
        session.start_time,
    )

    lines = ["--- Test Session Started ---"]
    for label, value in zip(HEADER_LABELS, header_values):
        lines.append(_field(label, value))
    lines.append(RULE)
    lines.append("")

    lines.append("--- Log Entries ---")
    for entry in session.entries:
        lines.append(format_entry_line(entry))

    lines.append("")
    lines.append("--- Test Session Ended ---")
    lines.append(_field("End Time", session.end_time))
    lines.append(_field("Duration", session.duration))
    lines.append(RULE)
    lines.append("Summary of Tags:")
    for tag, count in session.tag_counts.items():
        lines.append(format_tag_line(tag, count))
    lines.append(RULE)

    sink.write("\n".join(lines) + "\n")
