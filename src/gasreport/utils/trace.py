from io import StringIO
from typing import TYPE_CHECKING, List

from rich.box import ROUNDED
from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from gasreport.report import GasReport


DEFAULT_TABLE_WIDTH = 120


class GasReportStyles:
    """
    Colors to use when displaying a gas report.
    Each item in the class points to the part of
    the table it colors.
    """

    CONTRACT = "bold green"
    """The contract name in the table title."""

    DEPLOYMENT = "bold cyan"
    """The deployment cost and size labels."""

    FUNCTION = "bold magenta"
    """The function name label."""

    MIN = "green"
    AVG = "yellow"
    MEDIAN = "yellow"
    MAX = "red"


def parse_gas_table(report: "GasReport") -> List[Table]:
    tables: List[Table] = []
    styles = GasReportStyles

    for contract_id, contract in report.sorted_contracts():
        if not contract.functions:
            continue

        table = Table(
            title=escape(f"{contract_id} contract"),
            title_style=styles.CONTRACT,
            box=ROUNDED,
            show_header=False,
            show_lines=True,
        )
        for _ in range(6):
            table.add_column()

        table.add_row(
            f"[{styles.DEPLOYMENT}]Deployment Cost[/]",
            f"[{styles.DEPLOYMENT}]Deployment Size[/]",
        )
        table.add_row(f"{contract.gas}", f"{contract.size}")
        table.add_row(
            f"[{styles.FUNCTION}]Function Name[/]",
            f"[bold {styles.MIN}]min[/]",
            f"[bold {styles.AVG}]avg[/]",
            f"[bold {styles.MEDIAN}]median[/]",
            f"[bold {styles.MAX}]max[/]",
            "[bold]# calls[/]",
        )

        for function_name, signatures in sorted(contract.functions.items()):
            for signature, gas_info in sorted(signatures.items()):
                # Show the signature only when the name is overloaded.
                display_name = (
                    function_name if len(signatures) == 1 else signature.replace(":", "")
                )
                table.add_row(
                    f"[bold]{escape(display_name)}[/]",
                    f"[{styles.MIN}]{gas_info.min}[/]",
                    f"[{styles.AVG}]{gas_info.mean}[/]",
                    f"[{styles.MEDIAN}]{gas_info.median}[/]",
                    f"[{styles.MAX}]{gas_info.max}[/]",
                    f"{len(gas_info.calls)}",
                )

        tables.append(table)

    return tables


def render_gas_report(report: "GasReport", width: int = DEFAULT_TABLE_WIDTH) -> str:
    """
    Render the report's tables as plain text.
    Contracts without any recorded function calls are left out.
    """
    buffer = StringIO()
    console = Console(file=buffer, width=width, color_system=None, force_terminal=False)
    for table in parse_gas_table(report):
        console.print(table)

    return buffer.getvalue()
