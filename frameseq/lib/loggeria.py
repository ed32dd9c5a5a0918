import logging
import sys

LEVEL_CRITICAL = "CRITICAL"
LEVEL_ERROR = "ERROR"
LEVEL_WARNING = "WARNING"
LEVEL_INFO = "INFO"
LEVEL_DEBUG = "DEBUG"
LEVEL_NOTSET = "NOTSET"

LEVELS = [
    LEVEL_CRITICAL,
    LEVEL_ERROR,
    LEVEL_WARNING,
    LEVEL_INFO,
    LEVEL_DEBUG,
    LEVEL_NOTSET]


LEVEL_MAP = {LEVEL_CRITICAL: logging.CRITICAL,
             LEVEL_ERROR: logging.ERROR,
             LEVEL_WARNING: logging.WARNING,
             LEVEL_INFO: logging.INFO,
             LEVEL_DEBUG: logging.DEBUG,
             LEVEL_NOTSET: logging.NOTSET}


FORMATTER_LIGHT = logging.Formatter(
    '%(asctime)s %(name)s: %(message)s',
    "%Y-%m-%d %H:%M:%S")
FORMATTER_VERBOSE = logging.Formatter(
    '%(asctime)s %(name)s%(levelname)9s:  %(message)s')
DEFAULT_LEVEL_LOGGER = LEVEL_MAP[LEVEL_INFO]

FRAMESEQ_LOGGER_NAME = "frameseq"


class LogLevelFilter(logging.Filter):
    """Only pass records below ERROR.

    Tools that embed frameseq often show anything on stderr as an error,
    so warning, info and debug records go to stdout through this filter,
    and the stderr handler takes error and critical records only.
    """

    def filter(self, record):
        return int(record.levelno < logging.ERROR)


def setup_frameseq_logging(logger_level=DEFAULT_LEVEL_LOGGER, console_formatter=FORMATTER_LIGHT):
    """Set the level of the "frameseq" logger and give it console handlers.

    Handlers are only attached once, so importing or reloading the package
    twice doesn't print every message twice. Returns the logger.
    """
    logger = get_frameseq_logger()

    if logger_level:
        assert logger_level in LEVEL_MAP.values(), "Not a valid log level: %s" % logger_level
        logger.setLevel(logger_level)

    if _has_console_handlers(logger):
        return logger

    # debug, info, warning to STDOUT
    console_handler_out = logging.StreamHandler(sys.stdout)
    console_handler_out.setLevel(logging.DEBUG)
    console_handler_out.addFilter(LogLevelFilter())

    # error and critical to STDERR
    console_handler_err = logging.StreamHandler(sys.stderr)
    console_handler_err.setLevel(logging.ERROR)

    for handler in (console_handler_out, console_handler_err):
        if console_formatter:
            handler.setFormatter(console_formatter)
        logger.addHandler(handler)

    return logger


def _has_console_handlers(logger):
    return any(type(handler) is logging.StreamHandler for handler in logger.handlers)


def set_frameseq_log_level(log_level):
    """Set the "frameseq" package's logger to the given log level name."""
    assert log_level in LEVEL_MAP.keys(), "Invalid log_level: %s" % log_level
    logger = get_frameseq_logger()
    logger.setLevel(log_level)
    logger.debug("Changed log level to %s", log_level)


def get_frameseq_logger():
    """Return the "frameseq" package's logger object."""
    return logging.getLogger(FRAMESEQ_LOGGER_NAME)
