from typing import Annotated

from eth_typing import ChecksumAddress
from eth_utils import to_checksum_address
from pydantic import Field

AddressType = ChecksumAddress
"""A checksum-formatted hex address string."""

GasValue = Annotated[int, Field(ge=0, lt=2**256)]
"""An unsigned 256-bit integer, used for gas costs and bytecode sizes."""

CHEATCODE_ADDRESS: AddressType = to_checksum_address("0x7109709ecfa91a80626ff3989d68f67f5b1dd12d")
"""The pseudo-contract that serves cheat codes to tests."""

HARDHAT_CONSOLE_ADDRESS: AddressType = to_checksum_address(
    "0x000000000000000000636f6e736f6c652e6c6f67"
)
"""The pseudo-contract that receives ``console.log`` calls."""

from .trace import (  # noqa: E402
    CallData,
    CallTrace,
    CallTraceArena,
    CallTraceNode,
    DecodedCall,
    RawCall,
    TraceKind,
)

__all__ = [
    "AddressType",
    "CallData",
    "CallTrace",
    "CallTraceArena",
    "CallTraceNode",
    "CHEATCODE_ADDRESS",
    "DecodedCall",
    "GasValue",
    "HARDHAT_CONSOLE_ADDRESS",
    "RawCall",
    "TraceKind",
]
