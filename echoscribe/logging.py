import logging
import os
import sys

from pythonjsonlogger import jsonlogger

_SERVICE_NAME = "echoscribe"
_configured = False


def setup_logging():
    """
    Configures structured JSON logging for the service and returns the root logger.

    The first call installs one JSON stream handler (timestamp, level, logger
    name, message, trace_id, span_id and a static ``service`` field) on the
    root logger and on the Uvicorn loggers, so request logs and application
    logs share one format. The level comes from ``LOG_LEVEL`` (default INFO).
    Later calls only return the root logger.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    global _configured

    root_logger = logging.getLogger()
    if _configured:
        return root_logger

    level = os.getenv("LOG_LEVEL", "INFO").upper()
    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s",
        static_fields={"service": _SERVICE_NAME},
    )
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    root_logger.setLevel(level)
    root_logger.handlers = [stream_handler]

    for logger_name in ["uvicorn", "uvicorn.access", "uvicorn.error"]:
        u_logger = logging.getLogger(logger_name)
        u_logger.setLevel(level)
        u_logger.handlers = [stream_handler]
        u_logger.propagate = False

    _configured = True
    return root_logger
