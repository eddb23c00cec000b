from logging.config import dictConfig


def configure_logging(level: str = "INFO") -> None:
    """Apply a consistent logging configuration for the worker."""

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "standard": {
                    "format": "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
                }
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": "standard",
                }
            },
            "loggers": {
                "": {"handlers": ["default"], "level": level.upper()},
                "httpx": {"handlers": ["default"], "level": "WARNING", "propagate": False},
            },
        }
    )
