"""Persistent JSON config and runtime options.

Holds the invariant-validation switch and extra tag -> SGR styles for ANSI
rendering. All access is defensive: malformed or missing config falls back
to defaults.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "codedecor"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
VALIDATE_ENV_VAR = "CODEDECOR_VALIDATE_INVARIANTS"

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class DecoratorOptions:
    """Knobs consumed by ``CodeDecorator``."""

    validate_invariants: bool = False
    ansi_styles: dict[str, str] = field(default_factory=dict)


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON."""
    CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")


def _env_flag(name: str) -> bool | None:
    raw = os.environ.get(name)
    if raw is None:
        return None
    lowered = raw.strip().lower()
    if lowered in _TRUE_STRINGS:
        return True
    if lowered in _FALSE_STRINGS:
        return False
    return None


def load_validate_invariants() -> bool:
    """Environment override first, then the config file; only real booleans count."""
    from_env = _env_flag(VALIDATE_ENV_VAR)
    if from_env is not None:
        return from_env
    value = load_config().get("validate_invariants")
    return value if isinstance(value, bool) else False


def load_ansi_styles() -> dict[str, str]:
    """Load tag -> SGR parameter mappings, dropping malformed entries."""
    value = load_config().get("ansi_styles")
    if not isinstance(value, dict):
        return {}
    styles: dict[str, str] = {}
    for tag, sgr in value.items():
        if not isinstance(tag, str) or not tag.strip():
            continue
        if not isinstance(sgr, str) or not sgr.strip():
            continue
        styles[tag.strip()] = sgr.strip()
    return styles


def save_ansi_styles(styles: dict[str, str]) -> None:
    config = load_config()
    config["ansi_styles"] = {str(tag): str(sgr) for tag, sgr in styles.items()}
    save_config(config)


def load_options() -> DecoratorOptions:
    return DecoratorOptions(
        validate_invariants=load_validate_invariants(),
        ansi_styles=load_ansi_styles(),
    )
