import click

from gasreport.cli.utils import GasReportCliContext
from gasreport.logging import DEFAULT_LOG_LEVEL, LogLevel, logger


def verbosity_option(cli_logger=logger):
    """
    A decorator that adds a ``--verbosity, -v`` option to the decorated
    command and sets the level on the given logger.
    """
    level_names = [lvl.name for lvl in LogLevel]
    names_str = f"{', '.join(level_names[:-1])}, or {level_names[-1]}"

    def set_level(ctx, param, value):
        cli_logger.set_level(value)

    return click.option(
        "--verbosity",
        "-v",
        callback=set_level,
        default=DEFAULT_LOG_LEVEL,
        metavar="LVL",
        expose_value=False,
        type=click.Choice(level_names, case_sensitive=False),
        help=f"One of {names_str}",
        is_eager=True,
    )


def cli_context():
    """
    Adds the ``cli_ctx`` argument and the verbosity option to the decorated command.
    """

    def decorator(f):
        f = verbosity_option()(f)
        f = click.make_pass_decorator(GasReportCliContext, ensure=True)(f)
        return f

    return decorator
