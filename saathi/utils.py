import logging
import os
import sys

NOISY_LOGGERS = ("urllib3", "faster_whisper", "comtypes", "watchdog")

def setup_logging(level=None):
    """
    Configure logging for the dashboard, the assistant and the CLI.
    The level defaults to SAATHI_LOG_LEVEL (INFO when unset).
    """
    if level is None:
        level = os.environ.get("SAATHI_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

def get_logger(name: str):
    return logging.getLogger(name)
