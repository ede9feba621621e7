from gasreport.config import GasReportConfig, load_config
from gasreport.report import ContractInfo, GasInfo, GasReport
from gasreport.types import (
    CHEATCODE_ADDRESS,
    HARDHAT_CONSOLE_ADDRESS,
    CallTrace,
    CallTraceArena,
    CallTraceNode,
    DecodedCall,
    RawCall,
    TraceKind,
)
from gasreport.utils.functions import FunctionClassifier
from gasreport.utils.trace import parse_gas_table, render_gas_report

__all__ = [
    "CallTrace",
    "CallTraceArena",
    "CallTraceNode",
    "CHEATCODE_ADDRESS",
    "ContractInfo",
    "DecodedCall",
    "FunctionClassifier",
    "GasInfo",
    "GasReport",
    "GasReportConfig",
    "HARDHAT_CONSOLE_ADDRESS",
    "load_config",
    "parse_gas_table",
    "RawCall",
    "render_gas_report",
    "TraceKind",
]
