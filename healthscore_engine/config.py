# config.py
# Engine settings. Read once from the environment; none of them change scores.

import logging
import os

ENGINE_VERSION = "1.0.0"
RULESET_VERSION = "chronos_rules_v1"

LOG_LEVEL = os.getenv("HEALTHSCORE_LOG_LEVEL", "WARNING").strip().upper()

# Log a warning when an input lies outside its declared (advisory) range
WARN_OUT_OF_RANGE = os.getenv("HEALTHSCORE_WARN_OUT_OF_RANGE", "true").strip().lower() in ("1", "true", "yes")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Configure root logging for scripts and the engine logger level."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("healthscore_engine").setLevel(level)
