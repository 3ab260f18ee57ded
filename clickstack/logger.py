import logging
from typing import Any

import structlog
from structlog.types import Processor


def setup_logging(json_logs: bool = False, log_level: str = "INFO"):
    """Configure structlog for the clickstack package"""

    # Leave an existing structlog handler on the root logger alone
    root_logger = logging.getLogger()
    for handler in root_logger.handlers:
        if (isinstance(handler, logging.StreamHandler) and
            isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)):
            root_logger.setLevel(log_level.upper())
            return

    timestamper = structlog.processors.TimeStamper(fmt="iso")

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.stdlib.ExtraAdder(),
        timestamper,
        structlog.processors.StackInfoRenderer(),
    ]

    if json_logs:
        # Format the exception only for JSON logs, as we want to pretty-print them when
        # using the ConsoleRenderer
        shared_processors.append(structlog.processors.format_exc_info)

    structlog.configure(
        processors=shared_processors
        + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    log_renderer: structlog.types.Processor
    if json_logs:
        log_renderer = structlog.processors.JSONRenderer()
    else:
        log_renderer = structlog.dev.ConsoleRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        # These run ONLY on `logging` entries that do NOT originate within
        # structlog.
        foreign_pre_chain=shared_processors,
        # These run on ALL entries after the pre_chain is done.
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            log_renderer,
        ],
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level.upper())


class ClickstackStructLogger:
    """
    Structured logger for the clickstack package.

    Wraps a lazy structlog logger; ``bind`` returns a new logger carrying the
    extra key/value pairs so components can each hold their own context.
    The underlying logger is only assembled on first use, so loggers created
    before ``setup_logging`` still pick up its configuration.
    """

    def __init__(self, log_name: str = "clickstack", **context: Any):
        self.log_name = log_name
        self.context = context
        self.logger = structlog.stdlib.get_logger(log_name, **context)

    def bind(self, **new_values: Any) -> "ClickstackStructLogger":
        """Return a logger with ``new_values`` bound to every event."""
        return ClickstackStructLogger(self.log_name, **{**self.context, **new_values})

    def debug(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.debug(event, *args, **kw)

    def info(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.info(event, *args, **kw)

    def warning(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.warning(event, *args, **kw)

    warn = warning

    def error(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.error(event, *args, **kw)

    def exception(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.exception(event, *args, **kw)


def get_clickstack_logger(log_name: str = "clickstack") -> ClickstackStructLogger:
    """Get the package logger without touching the logging configuration."""
    return ClickstackStructLogger(log_name)


def init_logger(config):
    """
    Initialize the structured logger for the clickstack package.

    Args:
        config: GeneratorConfig with ``debug`` and ``json_logs`` settings

    Returns:
        ClickstackStructLogger: Configured structured logger instance
    """
    log_level = "DEBUG" if config.debug else "INFO"

    setup_logging(json_logs=config.json_logs, log_level=log_level)

    return ClickstackStructLogger("clickstack")
