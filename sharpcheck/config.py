"""
sharpcheck configuration: discovery, loading and validation of sharpcheck.yaml.

Search order:
- ./sharpcheck.yaml
- ./config/sharpcheck.yaml
- ~/.config/sharpcheck/sharpcheck.yaml
- bundled data/default.yaml
"""

import logging
import shutil
from pathlib import Path

import yaml

from .rules import ALL_RULE_CLASSES, RULES_BY_ID
from .types import RULE_COUNT

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "sharpcheck.yaml"
MAX_CONFIG_SIZE = 1_000_000  # 1MB, YAML bomb protection
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    """Configuration file missing, unreadable, malformed or invalid."""


def get_default_config_path() -> Path:
    """Get path to bundled default.yaml."""
    return Path(__file__).parent / "data" / "default.yaml"


def find_config() -> Path | None:
    """Find sharpcheck.yaml in project or user home."""
    candidates = [
        Path(CONFIG_FILENAME),
        Path("config") / CONFIG_FILENAME,
        Path.home() / ".config" / "sharpcheck" / CONFIG_FILENAME,
    ]
    for path in candidates:
        if path.exists():
            return path
    return None


def validate_config(config: dict) -> list[str]:
    """Validate config structure and return a list of errors (empty when valid)."""
    errors = []

    if "version" not in config:
        errors.append("Missing 'version' field")

    color = config.get("color", True)
    if not isinstance(color, bool):
        errors.append(f"'color' must be true or false, got {color!r}")

    log_level = config.get("log_level", "INFO")
    if not isinstance(log_level, str) or log_level.upper() not in LOG_LEVELS:
        errors.append(f"'log_level' must be one of {', '.join(LOG_LEVELS)}")

    rules = config.get("rules")
    if rules is None:
        return errors
    if not isinstance(rules, dict):
        errors.append("'rules' must be a mapping")
        return errors

    disabled = rules.get("disabled")
    if disabled is None:
        return errors
    if not isinstance(disabled, list):
        errors.append("rules.disabled must be a list of rule numbers")
        return errors
    for i, rule_id in enumerate(disabled):
        # bool is an int subclass
        if isinstance(rule_id, bool) or not isinstance(rule_id, int):
            errors.append(f"rules.disabled[{i}]: {rule_id!r} is not a rule number")
        elif rule_id not in RULES_BY_ID:
            errors.append(f"rules.disabled[{i}]: rule {rule_id} out of range 1..{RULE_COUNT}")

    return errors


def load_config(config_path: Path | str | None = None) -> dict:
    """Load and validate a sharpcheck config.

    Args:
        config_path: Path to config file. If None, searches default locations.

    Raises:
        ConfigError: the file is missing, too large, malformed or invalid.
    """
    if config_path is None:
        config_path = find_config() or get_default_config_path()
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")
    if config_path.stat().st_size > MAX_CONFIG_SIZE:
        raise ConfigError(f"Config file too large (max 1MB): {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"Cannot read {config_path}: {e}") from e
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        if mark:
            raise ConfigError(
                f"{config_path} is malformed (line {mark.line + 1}, column {mark.column + 1})"
            ) from e
        raise ConfigError(f"{config_path} is malformed") from e

    if not isinstance(config, dict):
        raise ConfigError(f"{config_path} must contain a mapping at top level")

    errors = validate_config(config)
    if errors:
        raise ConfigError(f"{config_path} is invalid: " + "; ".join(errors))

    logger.debug("Loaded config from %s", config_path)
    return config


def enabled_rules(config: dict) -> tuple[type, ...]:
    """Return the rule classes to run, in ascending rule order."""
    disabled = set((config.get("rules") or {}).get("disabled") or [])
    return tuple(cls for cls in ALL_RULE_CLASSES if cls.RULE_ID not in disabled)


def init_config(target: Path = Path(CONFIG_FILENAME)) -> bool:
    """Copy the bundled default config into the current project."""
    if target.exists():
        logger.warning("%s already exists", target)
        return False

    shutil.copy(get_default_config_path(), target)
    logger.info("Created %s", target)
    return True
