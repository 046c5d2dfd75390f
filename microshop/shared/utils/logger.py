"""
Logging utilities for microshop

Provides centralized logging configuration: stdlib logging is configured
through dictConfig and structlog renders structured events on top of it.
"""

import copy
import os
import logging
import logging.config
from typing import Optional, Dict, Any

import structlog
import yaml

# Default logging configuration
DEFAULT_LOGGING_CONFIG = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'plain': {
            'format': '%(message)s'
        }
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'level': 'DEBUG',
            'formatter': 'plain',
            'stream': 'ext://sys.stdout'
        }
    },
    'root': {
        'level': 'INFO',
        'handlers': ['console']
    },
    'loggers': {
        'uvicorn.access': {
            'level': 'WARNING'
        }
    }
}


def load_logging_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load a logging dictConfig

    Args:
        config_path: Path to a YAML logging configuration file

    Returns the default configuration when no usable file is given.
    """
    if config_path and os.path.exists(config_path):
        try:
            with open(config_path, 'r') as f:
                config = yaml.safe_load(f)
            if isinstance(config, dict):
                return config
        except (OSError, yaml.YAMLError) as e:
            logging.getLogger(__name__).warning(
                f"Failed to load logging config from {config_path}: {e}"
            )

    return copy.deepcopy(DEFAULT_LOGGING_CONFIG)


def setup_logging(
    service_name: str,
    log_level: Optional[str] = None,
    log_format: str = "json",
    config_path: Optional[str] = None
) -> None:
    """
    Setup logging configuration

    Args:
        service_name: Bound to every log event as ``service``
        log_level: Override log level
        log_format: 'json' or 'console'
        config_path: Path to logging configuration file
    """
    config = load_logging_config(config_path)

    if log_level:
        config.setdefault('root', {})['level'] = log_level.upper()

    logging.config.dictConfig(config)

    renderer = (
        structlog.dev.ConsoleRenderer()
        if log_format == "console"
        else structlog.processors.JSONRenderer()
    )

    def add_service_name(logger, method_name, event_dict):
        event_dict.setdefault("service", service_name)
        return event_dict

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            add_service_name,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
