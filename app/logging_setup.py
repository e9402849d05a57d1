"""
Logging Configuration
"""

import logging
import logging.config

_LOG_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'


def configure_logging(app):
    """Send application logs to stderr at the configured LOG_LEVEL."""
    level = getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO)
    logging.config.dictConfig({
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'standard': {
                'format': _LOG_FORMAT,
                'datefmt': '%Y-%m-%d %H:%M:%S',
            }
        },
        'handlers': {
            'default': {
                'class': 'logging.StreamHandler',
                'formatter': 'standard',
                'level': level,
            }
        },
        'loggers': {
            'app': {'handlers': ['default'], 'level': level, 'propagate': False},
        },
    })
