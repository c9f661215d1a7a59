"""test-session-logger: record a manual test session and write text + CSV reports."""

import logging
import sys
from argparse import ArgumentParser

from session_logger.config import LOG_LEVELS, Config, load_config, load_yaml_config
from session_logger.console import run_session
from session_logger.output import ReportWriteError

__version__ = "1.0.0"

logger = logging.getLogger(__name__)


def build_parser() -> ArgumentParser:
    """Build the CLI argument parser."""
    parser = ArgumentParser(
        prog="test-session-logger",
        description="Logs test events with timestamps, entry type, and tags.",
    )
    parser.add_argument(
        "-d", "--log-dir",
        metavar="DIR",
        help="Sets a custom log directory (default: logs/ beside the program)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        help="Diagnostic logging level (default: WARNING)",
    )
    parser.add_argument(
        "--no-banner",
        action="store_true",
        help="Do not print the tag options banner",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def _tolerate_undecodable_input() -> None:
    """Pass bytes that are not valid in the terminal encoding through as surrogates."""
    for stream in (sys.stdin, sys.stdout):
        if hasattr(stream, "reconfigure"):
            stream.reconfigure(errors="surrogateescape")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level or Config.log_level,
        format="%(asctime)s [session-logger] %(levelname)s %(message)s",
        stream=sys.stderr,
    )
    config = load_config(args, load_yaml_config(args.config))
    logging.getLogger().setLevel(config.log_level)
    _tolerate_undecodable_input()
    logger.info("Config: log_dir=%s, log_level=%s, show_banner=%s",
                config.log_dir or "<default>", config.log_level, config.show_banner)

    try:
        run_session(config)
    except (EOFError, KeyboardInterrupt):
        print("\nError: input ended before the session was closed; no reports written.",
              file=sys.stderr)
        return 1
    except ReportWriteError as exc:
        for path, err in exc.failures:
            print(f"Error: could not write {path}: {err}", file=sys.stderr)
        for path in exc.written:
            print(f"Saved: {path}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
