from pathlib import Path

import click

from gasreport import GasReport
from gasreport.cli import cli_context
from gasreport.config import CONFIG_FILE_NAME
from gasreport.utils.trace import render_gas_report


@click.command(short_help="Show gas usage per contract and function")
@cli_context()
@click.argument(
    "trace_files",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--report-for",
    "-r",
    multiple=True,
    help="Contract to include in the report. Repeat for more; '*' includes all.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=CONFIG_FILE_NAME,
    show_default=True,
    help="Path to the report config file",
)
@click.option("--json", "as_json", is_flag=True, help="Output the report as JSON")
def cli(cli_ctx, trace_files, report_for, config_path, as_json):
    """
    Build a gas report from recorded call-trace files.
    """
    config = cli_ctx.load_config(config_path, report_for=report_for)
    traces = cli_ctx.load_traces(trace_files)

    report = GasReport(report_for=config.report_for)
    report.analyze(traces)
    report = report.finalize()

    if as_json or config.output == "json":
        cli_ctx.echo(report.model_dump_json(indent=2))
        return

    output = render_gas_report(report, width=config.width)
    if not output:
        cli_ctx.logger.warning("No gas usage data found.")
        return

    cli_ctx.echo(output, nl=False)
