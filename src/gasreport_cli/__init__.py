from gasreport_cli._cli import cli

__all__ = ["cli"]
