from frameseq.lib import config, loggeria
from frameseq.lib.exceptions import FrameSpecError, InvalidInteger, InvalidStep, InvalidSyntax
from frameseq.lib.sequence import binary_sequence, is_valid, parse, stride_sequence

__version__ = "0.1.0"

# Read the config yaml file upon module import. A bad config must not stop
# the parser from importing, so fall back to the defaults.
config_error = None
try:
    CONFIG = config.Config().config
except ValueError as err:
    config_error = err
    CONFIG = dict(config.Config.default_config)


# Must setup logging before setting the level, otherwise we get an
# annoying complaint about no handlers for logger frameseq.
log_level = loggeria.LEVEL_MAP.get(CONFIG.get("log_level", loggeria.LEVEL_INFO))
loggeria.setup_frameseq_logging(
    logger_level=log_level, console_formatter=loggeria.FORMATTER_VERBOSE
)

if config_error:
    loggeria.get_frameseq_logger().warning("Using default config: %s", config_error)
