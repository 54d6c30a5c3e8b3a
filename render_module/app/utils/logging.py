import logging
import coloredlogs
from logging.handlers import RotatingFileHandler

from ..config.settings import settings

LOGGER_NAME = "website_reel_render_module"
LOG_FILE_NAME = "render_module.log"
NO_REQUEST = "-"

# Records from outside a request carry NO_REQUEST, so the format never misses the field.
LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(request_id)s] [%(filename)s:%(lineno)d] - %(message)s"


class RequestIdFilter(logging.Filter):
    def filter(self, record):
        if not hasattr(record, "request_id"):
            record.request_id = NO_REQUEST
        return True


class RequestLogger(logging.LoggerAdapter):
    """Tags every record with the id of the render request it belongs to."""

    def process(self, msg, kwargs):
        kwargs["extra"] = {**kwargs.get("extra", {}), "request_id": self.extra["request_id"]}
        return msg, kwargs


def setup_logging(log_level=None, log_dir=None):
    """
    Render service logger: colored console plus a rotating file under LOG_DIR.

    The file keeps every level while the console follows LOG_LEVEL. Calling it
    again replaces the handlers instead of stacking them.
    """
    log_level = (log_level or settings.LOG_LEVEL).upper()
    log_dir = log_dir or settings.LOG_DIR

    logger = logging.getLogger(LOGGER_NAME)
    if logger.hasHandlers():
        logger.handlers.clear()
    logger.filters.clear()
    logger.addFilter(RequestIdFilter())
    logger.setLevel(logging.DEBUG)

    coloredlogs.install(
        level=log_level,
        logger=logger,
        fmt=LOG_FORMAT,
        level_styles={
            'debug': {'color': 'green'},
            'info': {'color': 'cyan'},
            'warning': {'color': 'yellow'},
            'error': {'color': 'red', 'bold': True},
            'critical': {'color': 'red', 'bold': True, 'background': 'white'}
        }
    )

    log_dir.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        log_dir / LOG_FILE_NAME,
        maxBytes=settings.LOG_FILE_MAX_BYTES,
        backupCount=settings.LOG_FILE_BACKUPS,
        encoding='utf-8'
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(file_handler)

    return logger


logger = setup_logging()
