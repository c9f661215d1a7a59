"""Entry classifier: maps one operator line to (entry kind, tag, description)."""

from dataclasses import dataclass

from session_logger.models import OBSERVATION, RELOAD, TEST_CASE


@dataclass(frozen=True)
class Classification:
    entry_kind: str
    tag: str
    description: str


@dataclass(frozen=True)
class PrefixRule:
    prefix: str
    entry_kind: str
    tag: str
    usage: str
    help: str


# Checked in order, first match wins.
PREFIX_RULES = (
    PrefixRule("bug:", OBSERVATION, "BUG", "<description>", "Log a BUG (critical issue)"),
    PrefixRule("warn:", OBSERVATION, "WARN", "<description>", "Log a WARN (potential issue)"),
    PrefixRule("good:", OBSERVATION, "GOOD", "<description>", "Log a GOOD (confirmed correct behavior)"),
    PrefixRule("pass:", OBSERVATION, "PASS", "<description>", "Log a PASS (successful test case)"),
    PrefixRule("fail:", OBSERVATION, "FAIL", "<description>", "Log a FAIL (failed test case)"),
    PrefixRule("reload:", RELOAD, "VERSION", "<version>", "Log a RELOAD with new software version"),
    PrefixRule("testcase:", TEST_CASE, "NAME", "<name>", "Start a new TEST CASE"),
)

DEFAULT_TAG = "NOTE"
END_SENTINEL = "end"


def is_end_sentinel(line: str) -> bool:
    """True for the session terminator, ignoring case and surrounding whitespace."""
    return line.strip().lower() == END_SENTINEL


def classify_line(line: str) -> Classification:
    """Classify a raw operator line. Never fails; unknown input becomes a NOTE.

    Only the prefix token is matched case-insensitively, the description
    keeps the operator's original casing.
    """
    trimmed = line.strip()
    for rule in PREFIX_RULES:
        if trimmed[:len(rule.prefix)].lower() == rule.prefix:
            return Classification(
                entry_kind=rule.entry_kind,
                tag=rule.tag,
                description=trimmed[len(rule.prefix):].strip(),
            )
    return Classification(entry_kind=OBSERVATION, tag=DEFAULT_TAG, description=trimmed)


def help_lines() -> list[str]:
    """Operator-facing summary of the recognized prefixes."""
    lines = []
    for rule in PREFIX_RULES:
        lines.append(f"  {rule.prefix:<10} {rule.usage:<16} - {rule.help}")
    lines.append(f"  {'<plain description>':<27} - Log a NOTE (general observation)")
    return lines
