import logging
import sys

from pythonjsonlogger.json import JsonFormatter

PLAIN_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class CustomJsonFormatter(JsonFormatter):
    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        if not log_record.get('timestamp'):
            log_record['timestamp'] = record.created
        if log_record.get('level'):
            log_record['level'] = log_record['level'].upper()
        else:
            log_record['level'] = record.levelname
        log_record['module'] = record.module
        log_record['lineno'] = record.lineno


def setup_logging(log_level_str: str = "INFO", json_logs: bool = False) -> None:
    """
    Configures logging for the sorter.

    Logs go to stderr so they never interleave with the questionnaire on stdout.
    Calling this again replaces the handler installed by the previous call.
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        if getattr(handler, "_keirsey_handler", False):
            root_logger.removeHandler(handler)

    log_handler = logging.StreamHandler(sys.stderr)
    log_handler._keirsey_handler = True
    if json_logs:
        log_handler.setFormatter(CustomJsonFormatter('%(timestamp)s %(level)s %(name)s %(module)s %(lineno)d %(message)s'))
    else:
        log_handler.setFormatter(logging.Formatter(PLAIN_FORMAT))
    root_logger.addHandler(log_handler)
    root_logger.debug("Logging configured with level: %s", logging.getLevelName(log_level))
