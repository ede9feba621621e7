import logging
from enum import IntEnum
from typing import IO, Optional, Union

import click


class LogLevel(IntEnum):
    ERROR = logging.ERROR
    WARNING = logging.WARNING
    SUCCESS = logging.INFO + 1
    INFO = logging.INFO
    DEBUG = logging.DEBUG


logging.addLevelName(LogLevel.SUCCESS.value, LogLevel.SUCCESS.name)

CLICK_STYLE_KWARGS = {
    LogLevel.ERROR: dict(fg="bright_red"),
    LogLevel.WARNING: dict(fg="bright_red"),
    LogLevel.SUCCESS: dict(fg="bright_green"),
    LogLevel.INFO: dict(fg="blue"),
    LogLevel.DEBUG: dict(fg="blue"),
}
DEFAULT_LOG_LEVEL = LogLevel.INFO.name


class GasReportColorFormatter(logging.Formatter):
    def format(self, record):
        if record.levelno in CLICK_STYLE_KWARGS:
            level = LogLevel(record.levelno)
            prefix = click.style(f"{level.name}: ", **CLICK_STYLE_KWARGS[level])
            return f"{prefix}{record.getMessage()}"

        return super().format(record)


class ClickHandler(logging.Handler):
    def __init__(self, echo_kwargs: dict):
        super().__init__()
        self.echo_kwargs = echo_kwargs

    def emit(self, record):
        try:
            msg = self.format(record)
            click.echo(msg, **self.echo_kwargs)
        except Exception:
            self.handleError(record)


class GasReportLogger:
    """
    Thin wrapper around a :class:`logging.Logger` that adds the
    ``success`` level and accepts level names when configuring.
    """

    def __init__(self, _logger: logging.Logger):
        self._logger = _logger

    @classmethod
    def create(cls, name: str = "gasreport", stream: Optional[IO] = None) -> "GasReportLogger":
        _logger = logging.getLogger(name)
        handler = ClickHandler(echo_kwargs=dict(err=True, file=stream))
        handler.setFormatter(GasReportColorFormatter())
        _logger.addHandler(handler)
        _logger.propagate = False
        instance = cls(_logger)
        instance.set_level(DEFAULT_LOG_LEVEL)
        return instance

    @property
    def level(self) -> int:
        return self._logger.level

    def set_level(self, level: Union[str, int]):
        if isinstance(level, str):
            level = LogLevel[level.upper()].value

        self._logger.setLevel(level)

    def success(self, message: str, *args, **kwargs):
        if self._logger.isEnabledFor(LogLevel.SUCCESS.value):
            self._logger._log(LogLevel.SUCCESS.value, message, args, **kwargs)

    def __getattr__(self, item):
        return getattr(self._logger, item)


logger = GasReportLogger.create()

__all__ = ["DEFAULT_LOG_LEVEL", "logger", "LogLevel"]
