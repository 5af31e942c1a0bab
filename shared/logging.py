import logging
import sys
from shared.settings import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

def configure_logging() -> None:
    """Sends every log record to stdout at settings.LOG_LEVEL, replacing earlier handlers."""
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout) # Log to stdout, suitable for containers
        ],
        force=True,
    )

configure_logging()

def get_logger(name: str) -> logging.Logger:
    """Returns a configured logger instance."""
    return logging.getLogger(name)
