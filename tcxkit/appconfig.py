"""Configuration defaults and helpers.

Configuration is a plain dict. ``load_config()`` starts from
``DEFAULT_CONFIG`` and overlays the top-level keys of a JSON config file when
one is found:

  * an explicit *path* argument, which must exist, or
  * the first existing file among ``_FILE_PATHS``.

Recognised keys:

  ``home_timezone``  IANA name used when rendering activity start times
                     (``None`` means the process's local time zone).
  ``debug``          enable DEBUG logging via ``configure_logging()``.
"""

import copy
import json
import logging
from pathlib import Path
from typing import Any

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

DEFAULT_CONFIG: dict[str, Any] = {
    "home_timezone": None,
    "debug": False,
}

# Candidate JSON config file locations (searched in order)
_FILE_PATHS: list[Path] = [
    Path("tcxkit_config.json"),
    Path("../tcxkit_config.json"),
]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _load_from_file() -> dict[str, Any] | None:
    """Try each candidate path; return parsed JSON or ``None``."""
    for path in _FILE_PATHS:
        if path.exists():
            try:
                with open(path) as f:
                    return json.load(f)
            except (OSError, ValueError) as e:
                log.warning("Ignoring unreadable config file %s: %s", path, e)
    return None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Return the configuration dict, defaults overlaid with the config file."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path is not None:
        with open(path) as f:
            file_cfg = json.load(f)
    else:
        file_cfg = _load_from_file()
    if file_cfg:
        config.update(file_cfg)
    return config


def configure_logging(config: dict[str, Any]) -> None:
    """Turn on DEBUG logging when ``config["debug"]`` is set."""
    if config.get("debug", False):
        logging.basicConfig(level=logging.DEBUG)
