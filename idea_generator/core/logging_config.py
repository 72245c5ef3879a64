import logging
import re
import sys
from pythonjsonlogger import jsonlogger

SERVICE_NAME = "idea-generator"

# Matches the credential part of an Authorization header value.
_BEARER_PATTERN = re.compile(r"(Bearer\s+)[^\s'\"]+")


class BearerTokenFilter(logging.Filter):
    """Masks bearer credentials that end up in a log message, e.g. via a logged request."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        if "Bearer" in message:
            record.msg = _BEARER_PATTERN.sub(r"\1***", message)
            record.args = ()
        return True


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    def add_fields(self, log_record, record, message_dict):
        super(CustomJsonFormatter, self).add_fields(log_record, record, message_dict)
        if not log_record.get('timestamp'):
            log_record['timestamp'] = record.created
        log_record['level'] = (log_record.get('level') or record.levelname).upper()
        log_record['service'] = SERVICE_NAME
        log_record['module'] = record.module
        log_record['lineno'] = record.lineno


def setup_logging(log_level_str: str = "INFO"):
    """
    Sends JSON log lines to stdout with bearer tokens masked.

    Calling it again only changes the level.
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    if any(isinstance(h.formatter, CustomJsonFormatter) for h in root_logger.handlers):
        root_logger.debug(f"JSON logging already configured, level set to {logging.getLevelName(log_level)}")
        return

    log_handler = logging.StreamHandler(sys.stdout)
    log_handler.setFormatter(CustomJsonFormatter('%(timestamp)s %(level)s %(name)s %(message)s'))
    log_handler.addFilter(BearerTokenFilter())
    root_logger.addHandler(log_handler)
    root_logger.info(f"Structured JSON logging configured with level: {logging.getLevelName(log_level)}")
