from typing import Optional

import pytest

from gasreport import CallTrace, CallTraceArena, CallTraceNode, DecodedCall, RawCall

TEST_ADDRESS = "0x0A78AaAAa2122100000B9046F0A085AB2e111113"
TOKEN_ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"
TRANSFER_SIG = "transfer(address,uint256)"


def _create_trace(
    contract: Optional[str] = "Token",
    gas_cost: int = 0,
    function: Optional[str] = None,
    signature: Optional[str] = None,
    bytecode: bytes = b"",
    created: bool = False,
    address: str = TOKEN_ADDRESS,
) -> CallTrace:
    if function is not None:
        data = DecodedCall(function=function, signature=signature or f"{function}()")
    else:
        data = RawCall(data=bytecode, created=created)

    return CallTrace(address=address, contract=contract, gas_cost=gas_cost, data=data)


@pytest.fixture
def create_trace():
    return _create_trace


@pytest.fixture
def make_arena():
    """
    Build an arena from ``(trace, children)`` pairs, in index order.
    """

    def make(*nodes) -> CallTraceArena:
        return CallTraceArena(
            arena=[
                CallTraceNode(idx=idx, children=list(children), trace=trace)
                for idx, (trace, children) in enumerate(nodes)
            ]
        )

    return make


@pytest.fixture
def token_arena(make_arena):
    """
    A test that deploys ``Token`` and transfers twice:

        0 TokenTest.testTransfer
        ├── 1 Token (create, 500 bytes)
        ├── 2 Token.transfer [21000]
        └── 3 Token.transfer [23000]
    """
    return make_arena(
        (
            _create_trace(
                contract="TokenTest", function="testTransfer", gas_cost=90000, address=TEST_ADDRESS
            ),
            [1, 2, 3],
        ),
        (_create_trace(gas_cost=100000, bytecode=b"\x60" * 500, created=True), []),
        (_create_trace(function="transfer", signature=TRANSFER_SIG, gas_cost=21000), []),
        (_create_trace(function="transfer", signature=TRANSFER_SIG, gas_cost=23000), []),
    )
