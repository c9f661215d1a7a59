"""Configuration loading from CLI args, env vars, and optional YAML file."""

import logging
import os
from dataclasses import dataclass

import yaml

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("true", "1", "yes")


def _parse_level(value) -> str:
    level = str(value).strip().upper()
    if level not in LOG_LEVELS:
        logger.warning("Invalid log level '%s', falling back to %s", value, Config.log_level)
        return Config.log_level
    return level


@dataclass(frozen=True)
class Config:
    log_dir: str | None = None
    log_level: str = "WARNING"
    show_banner: bool = True


def load_yaml_config(path: str | None) -> dict:
    """Load settings from a YAML file. Returns empty dict if no path or unreadable."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    except yaml.YAMLError:
        logger.warning("Invalid YAML in %s, using defaults", path)
        return {}

    if not isinstance(data, dict):
        logger.warning("Config file %s is not a mapping, using defaults", path)
        return {}
    logger.info("Loaded YAML config from %s", path)
    return data


def load_config(cli_args=None, yaml_data: dict | None = None, environ=None) -> Config:
    """Build Config: defaults < YAML < env vars < CLI flags.

    Only the output directory is read from the environment (SESSION_LOG_DIR).
    """
    yaml_data = yaml_data or {}
    environ = os.environ if environ is None else environ

    log_dir = yaml_data.get("log_dir", Config.log_dir)
    log_level = yaml_data.get("log_level", Config.log_level)
    show_banner = yaml_data.get("show_banner", Config.show_banner)

    log_dir = environ.get("SESSION_LOG_DIR", log_dir)

    if cli_args is not None:
        if getattr(cli_args, "log_dir", None):
            log_dir = cli_args.log_dir
        if getattr(cli_args, "log_level", None):
            log_level = cli_args.log_level
        if getattr(cli_args, "no_banner", False):
            show_banner = False

    return Config(
        log_dir=str(log_dir) if log_dir else None,
        log_level=_parse_level(log_level),
        show_banner=_parse_bool(show_banner),
    )
