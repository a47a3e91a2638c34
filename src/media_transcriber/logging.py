import logging
import sys

from pythonjsonlogger import jsonlogger


def setup_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """
    Configures structured JSON logging for the command-line tool.

    Installs a JSON formatter that includes timestamp, level, logger name and
    message on a single stderr stream handler, replacing any handlers already
    attached to the root logger. stdout is left to the console reporter.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    formatter = jsonlogger.JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = []
    root_logger.addHandler(stream_handler)

    # SDK wire logging is noise at INFO.
    for logger_name in ["botocore", "boto3", "urllib3"]:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    return root_logger
