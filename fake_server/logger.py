import logging
from logging.config import dictConfig

DEFAULT_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {"default": {"format": "[%(asctime)s %(levelname)s] | %(name)s | %(message)s"}},
    "handlers": {"stdout": {"level": "DEBUG", "class": "logging.StreamHandler", "formatter": "default"}},
    "loggers": {__name__.split(".")[0]: {"handlers": ["stdout"], "level": "INFO"}},
}


def configure(config: dict = DEFAULT_CONFIG):
    dictConfig(config)


def get_logger(name: str = __name__) -> logging.Logger:
    return logging.getLogger(name)
