import logging
from logging.config import dictConfig

import structlog


def get_logger(name: str):
  """A structlog logger on top of stdlib logging, silent until init_logging is called"""
  return structlog.wrap_logger(logging.getLogger(name))


def debug_enabled(name: str) -> bool:
  """Whether debug events of the named logger get anywhere, checked before building them"""
  return logging.getLogger(name).isEnabledFor(logging.DEBUG)


pre_chain = [
  # Add the log level and producer to the event_dict if the log entry is not from structlog.
  structlog.stdlib.add_log_level,
  structlog.stdlib.add_logger_name,
]

def config_dict(level: str) -> dict:
  return {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
      'pkpad-formatter': {
        '()': structlog.stdlib.ProcessorFormatter,
        'processor': structlog.dev.ConsoleRenderer(colors=False),
        'foreign_pre_chain': pre_chain,
      },
    },
    'handlers': {
      'structlog-console': {
        'level': level,
        'formatter': 'pkpad-formatter',
        'class': 'logging.StreamHandler',
        'stream': 'ext://sys.stderr',
      },
    },
    'loggers': {
      'pkpad': {
        'handlers': ['structlog-console'],
        'level': level,
        'propagate': False,
      },
    },
  }


def init_logging(debug=False):
  """Console logging for the CLI. The library itself never configures logging."""
  dictConfig(config_dict('DEBUG' if debug else 'WARNING'))
  structlog.configure(
    processors=[
      structlog.stdlib.filter_by_level,
      structlog.stdlib.add_log_level,
      structlog.stdlib.add_logger_name,
      structlog.processors.StackInfoRenderer(),  # Include the stack when stack_info=True
      structlog.processors.format_exc_info,  # Include the exception when exc_info=True
      structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
      # this must be the last one
      structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
  )
  structlog.get_logger("pkpad").debug("Initialized logging for pkpad")
