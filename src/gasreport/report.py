from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from pydantic import BaseModel, Field

from gasreport.logging import logger
from gasreport.types import (
    CHEATCODE_ADDRESS,
    HARDHAT_CONSOLE_ADDRESS,
    CallTrace,
    CallTraceArena,
    CallTraceNode,
    DecodedCall,
    GasValue,
    RawCall,
    TraceKind,
)
from gasreport.utils.calc import mean, median_sorted
from gasreport.utils.functions import DEFAULT_CLASSIFIER, FunctionClassifier
from gasreport.utils.trace import render_gas_report

REPORT_ALL_TOKEN = "*"
CONTRACT_ID_DELIMITER = ":"
_EXCLUDED_ADDRESSES = (CHEATCODE_ADDRESS, HARDHAT_CONSOLE_ADDRESS)


class GasInfo(BaseModel):
    """
    Gas samples for one function signature and the statistics derived from them.
    The statistics stay ``0`` until the owning report is finalized.
    """

    calls: List[GasValue] = []
    min: GasValue = 0
    mean: GasValue = 0
    median: GasValue = 0
    max: GasValue = 0

    def finalize(self):
        self.calls.sort()
        self.min = self.calls[0] if self.calls else 0
        self.max = self.calls[-1] if self.calls else 0
        self.mean = mean(self.calls)
        self.median = median_sorted(self.calls)


class ContractInfo(BaseModel):
    gas: GasValue = 0
    """Gas used by the last observed deployment."""

    size: GasValue = 0
    """Bytecode size, in bytes, of the last observed deployment."""

    functions: Dict[str, Dict[str, GasInfo]] = {}
    """Gas info keyed by function name, then by call signature."""


class GasReport(BaseModel):
    """
    Collects gas usage per contract and function from call-trace trees.

    Usage example::

        report = GasReport(report_for=["Token"])
        report.analyze([(TraceKind.EXECUTION, arena)])
        print(report.finalize())
    """

    report_for: List[str] = Field(default_factory=list, frozen=True)
    contracts: Dict[str, ContractInfo] = {}

    def __str__(self) -> str:
        return render_gas_report(self)

    @property
    def report_for_all(self) -> bool:
        return not self.report_for or REPORT_ALL_TOKEN in self.report_for

    def should_report(self, contract_id: str) -> bool:
        """
        Check whether a contract is in scope for the report.
        Identifiers like ``src/Token.sol:Token`` are matched by the part
        after the last ``:``.
        """
        return self._should_report(contract_id, self.report_for_all)

    def _should_report(self, contract_id: str, report_for_all: bool) -> bool:
        if report_for_all:
            return True

        name = contract_id.rsplit(CONTRACT_ID_DELIMITER, 1)[-1]
        return name in self.report_for

    def sorted_contracts(self) -> Iterator[Tuple[str, ContractInfo]]:
        yield from sorted(self.contracts.items())

    def analyze(
        self,
        traces: Iterable[Tuple[TraceKind, CallTraceArena]],
        classifier: Optional[FunctionClassifier] = None,
    ):
        """
        Add the gas usage recorded in each call-trace tree to the report.
        Can be called any number of times before :meth:`finalize`.
        """
        classifier = classifier or DEFAULT_CLASSIFIER
        report_for_all = self.report_for_all
        count = 0
        for _, arena in traces:
            for node in _walk(arena):
                trace = node.trace
                if trace.address in _EXCLUDED_ADDRESSES or trace.contract is None:
                    continue

                if self._should_report(trace.contract, report_for_all):
                    self._add_trace(trace.contract, trace, classifier)

            count += 1

        logger.debug(f"Analyzed {count} trace(s), {len(self.contracts)} contract(s) in report.")

    def _add_trace(self, contract_id: str, trace: CallTrace, classifier: FunctionClassifier):
        contract = self.contracts.setdefault(contract_id, ContractInfo())
        data = trace.data

        if isinstance(data, RawCall):
            if data.created:
                contract.gas = trace.gas_cost
                contract.size = len(data.data)

        elif isinstance(data, DecodedCall):
            # NOTE: Only excludes by name; helpers in test contracts are still counted.
            if classifier.is_relevant(data):
                signatures = contract.functions.setdefault(data.function, {})
                signatures.setdefault(data.signature, GasInfo()).calls.append(trace.gas_cost)

    def finalize(self) -> "GasReport":
        """
        Derive the min, mean, median and max of every function's gas samples.

        Returns:
            :class:`~gasreport.report.GasReport`: A finalized copy of this report,
            with contracts, functions and signatures in sorted order.
        """
        report = self.model_copy(deep=True)
        count = 0
        for contract in report.contracts.values():
            for signatures in contract.functions.values():
                for gas_info in signatures.values():
                    gas_info.finalize()
                    count += 1

            contract.functions = {
                name: dict(sorted(signatures.items()))
                for name, signatures in sorted(contract.functions.items())
            }

        report.contracts = dict(report.sorted_contracts())
        logger.debug(f"Finalized gas info for {count} function signature(s).")
        return report


def _walk(arena: CallTraceArena) -> Iterator[CallTraceNode]:
    # Pre-order, children in listed order.
    stack = [0]
    while stack:
        node = arena[stack.pop()]
        yield node
        stack.extend(reversed(node.children))
