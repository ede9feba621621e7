import click

from gasreport.cli.options import cli_context, verbosity_option
from gasreport.cli.utils import Abort, GasReportCliContext


def get_cli_context() -> GasReportCliContext:
    return click.get_current_context().ensure_object(GasReportCliContext)


__all__ = [
    "Abort",
    "cli_context",
    "GasReportCliContext",
    "get_cli_context",
    "verbosity_option",
]
