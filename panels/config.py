# panels/config.py
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

# ---------------------------------------------------------
# APP CONSTANTS
# ---------------------------------------------------------
APP_TITLE = "Emissions Performance Tracker"
APP_ICON = "🌍"
APP_VERSION = "v0.1 (beta)"
UNIT = "Kg/CO2e"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Environment overrides
LOG_LEVEL_VAR = "EMISSIONS_TRACKER_LOG_LEVEL"
DEBUG_VAR = "EMISSIONS_TRACKER_DEBUG"

TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    log_level: int = logging.INFO
    debug: bool = False


def parse_log_level(name: Optional[str]) -> int:
    if not name:
        return logging.INFO
    level = logging.getLevelName(name.strip().upper())
    # getLevelName returns "Level X" for names it doesn't know
    return level if isinstance(level, int) else logging.INFO


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ
    return Settings(
        log_level=parse_log_level(env.get(LOG_LEVEL_VAR)),
        debug=env.get(DEBUG_VAR, "").strip().lower() in TRUTHY,
    )


def configure_logging(settings: Settings) -> None:
    # basicConfig is a no-op after the first call, so reruns don't stack handlers
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
