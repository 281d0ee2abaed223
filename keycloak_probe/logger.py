import logging
import json
import sys

from . import config


class JsonFormatter(logging.Formatter):
    def format(self, record):
        log_object = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
        }
        # If the message is a dictionary, merge it into the log object
        if isinstance(record.msg, dict):
            log_object.update(record.msg)
        else:
            log_object["message"] = record.getMessage()

        return json.dumps(log_object)


def setup_logger(level: str = config.HEALTHCHECK_LOG_LEVEL):
    """
    Sets up a logger that writes JSON lines to stderr.
    Docker keeps the output of the last healthcheck runs, so nothing goes to disk.
    """
    logger = logging.getLogger("healthcheck")
    logger.setLevel(level)
    logger.propagate = False  # Prevent logs from being duplicated by the root logger

    # Avoid adding handlers multiple times
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(JsonFormatter())
        logger.addHandler(handler)

    return logger

# Initialize and export the logger
probe_logger = setup_logger()
