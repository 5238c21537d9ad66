"""
Logging setup.

Application modules log under the "applicant_tracker" logger tree at
settings.log_level. pymongo's driver logs stay at WARNING unless
settings.debug is on.
"""

import logging

from applicant_tracker.core.config import Settings, get_settings

PACKAGE_LOGGER = "applicant_tracker"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def resolve_log_level(name: str) -> int:
    """Map a level name like "debug" to its logging constant; unknown names give INFO."""
    level = logging.getLevelName(str(name).strip().upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(settings: Settings = None) -> None:
    """Attach a stream handler to the root logger and set package levels. Runs once."""
    global _configured
    if _configured:
        return

    settings = settings or get_settings()
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger(PACKAGE_LOGGER).setLevel(resolve_log_level(settings.log_level))
    logging.getLogger("pymongo").setLevel(logging.DEBUG if settings.debug else logging.WARNING)
    _configured = True
