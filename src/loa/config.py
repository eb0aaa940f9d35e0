"""Engine configuration: defaults, optional TOML file, environment overrides.

Lookup order (later wins):

1. :class:`EngineConfig` defaults
2. ``[engine]`` table of the TOML file (``LOA_CONFIG_TOML``, default ``loa.toml``)
3. ``LOA_SEARCH_DEPTH`` / ``LOA_LOG_LEVEL`` environment variables
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from loa.engine.evaluator import DEFAULT_REGION_COUNT_WEIGHT, DEFAULT_REGION_SIZE_WEIGHT
from loa.engine.search import SearchLimits

CONFIG_PATH_ENV = "LOA_CONFIG_TOML"
SEARCH_DEPTH_ENV = "LOA_SEARCH_DEPTH"
LOG_LEVEL_ENV = "LOA_LOG_LEVEL"
DEFAULT_CONFIG_PATH = "loa.toml"

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class EngineConfig:
    """Tunable engine settings."""

    search_depth: int = 3
    region_size_weight: float = DEFAULT_REGION_SIZE_WEIGHT
    region_count_weight: float = DEFAULT_REGION_COUNT_WEIGHT
    log_level: str = "INFO"

    def limits(self) -> SearchLimits:
        return SearchLimits(max_depth=self.search_depth)


def _coerce(name: str, value: Any) -> Any:
    if name == "search_depth":
        return int(value)
    if name in ("region_size_weight", "region_count_weight"):
        return float(value)
    return str(value).upper()


def load_config(
    path: str | Path | None = None,
    environ: dict[str, str] | None = None,
) -> EngineConfig:
    """Build an :class:`EngineConfig`; a missing file means defaults.

    Raises:
        ValueError: A numeric setting is not a number.
    """
    env = os.environ if environ is None else environ
    cfg = EngineConfig()

    toml_path = Path(path if path is not None else env.get(CONFIG_PATH_ENV, DEFAULT_CONFIG_PATH))
    if toml_path.is_file():
        with toml_path.open("rb") as fh:
            raw = tomllib.load(fh)
        known = {f.name for f in fields(EngineConfig)}
        updates = {
            key: _coerce(key, value)
            for key, value in raw.get("engine", {}).items()
            if key in known
        }
        cfg = replace(cfg, **updates)

    depth = env.get(SEARCH_DEPTH_ENV)
    if depth:
        cfg = replace(cfg, search_depth=int(depth))
    level = env.get(LOG_LEVEL_ENV)
    if level:
        cfg = replace(cfg, log_level=level.upper())
    return cfg


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging once."""
    if getattr(setup_logging, "_configured", False):
        return
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=_LOG_FORMAT,
    )
    setup_logging._configured = True  # type: ignore[attr-defined]
    logger.debug("Logging configured at %s", level.upper())
