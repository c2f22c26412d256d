import logging
from logging.config import dictConfig
from pydantic import BaseModel
from typing import Dict

from pharma_research.core.config import settings


class LogConfig(BaseModel):
    """Logging configuration for the API"""
    LOGGER_NAME: str = "pharma_research"
    LOG_FORMAT: str = "%(levelprefix)s %(asctime)s | %(name)s | %(message)s"
    LOG_LEVEL: str = settings.LOG_LEVEL

    version: int = 1
    disable_existing_loggers: bool = False
    formatters: Dict = {
        "default": {
            "()": "uvicorn.logging.DefaultFormatter",
            "fmt": LOG_FORMAT,
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    }
    handlers: Dict = {
        "console": {
            "formatter": "default",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
            "level": LOG_LEVEL,
        },
    }
    loggers: Dict = {
        LOGGER_NAME: {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "sqlalchemy.engine": {"handlers": ["console"], "level": "WARNING", "propagate": False},
    }


def configure_logging():
    """Apply the logging configuration"""
    config = LogConfig()
    dictConfig(config.dict())
    logging.basicConfig(level=config.LOG_LEVEL)
