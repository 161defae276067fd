import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# one logger per module, named after it (logging.getLogger(__name__))
WAVE_LOGGERS = (
    "analysis",
    "bullet_scene",
    "pendulum_object",
    "pendulum_wave",
    "scene",
    "visualization",
)

# third-party loggers that flood the console at DEBUG
QUIET_LOGGERS = ("matplotlib", "PIL")


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """Send the wave modules' log records to stdout and, optionally, a file."""
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    # force=True replaces handlers from an earlier call
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt='%H:%M:%S',
                        handlers=handlers, force=True)

    for name in WAVE_LOGGERS:
        logging.getLogger(name).setLevel(level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.INFO))

    logging.getLogger("pendulum_wave").info(
        "Logging initialized at %s", logging.getLevelName(level)
    )
