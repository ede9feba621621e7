from pathlib import Path
from typing import Iterable, List, NoReturn, Optional, Sequence, Tuple

import click

from gasreport.config import GasReportConfig, load_config
from gasreport.exceptions import GasReportException
from gasreport.logging import logger
from gasreport.types import CallTraceArena, TraceKind


class Abort(click.ClickException):
    """A CLI error that is reported through the package logger."""

    def show(self, file=None):
        logger.error(self.format_message())


class GasReportCliContext:
    """
    Passed to commands as ``cli_ctx`` by ``@cli_context()``.
    Loads configs and trace files, turning package errors into :class:`Abort`.
    """

    def __init__(self):
        self.logger = logger

    @classmethod
    def echo(cls, *args, **kwargs):
        click.echo(*args, **kwargs)

    @staticmethod
    def abort(msg: str, base_error: Optional[Exception] = None) -> NoReturn:
        raise Abort(msg) from base_error

    def load_config(self, path: Path, report_for: Sequence[str] = ()) -> GasReportConfig:
        """
        Load the config file. Contracts given in ``report_for`` replace
        the configured ones.
        """
        try:
            config = load_config(path)
            if report_for:
                config = GasReportConfig.model_validate(
                    {**config.model_dump(), "report_for": list(report_for)}
                )

        except GasReportException as err:
            self.abort(str(err), base_error=err)

        return config

    def load_traces(
        self, paths: Iterable[Path], kind: TraceKind = TraceKind.EXECUTION
    ) -> List[Tuple[TraceKind, CallTraceArena]]:
        traces = []
        for path in paths:
            try:
                arena = CallTraceArena.parse_file(path)
            except GasReportException as err:
                self.abort(str(err), base_error=err)

            self.logger.debug(f"Loaded trace '{path}' with {len(arena)} node(s).")
            traces.append((kind, arena))

        return traces
