from enum import Enum
from pathlib import Path
from typing import Annotated, Any, List, Literal, Optional, Union

from eth_utils import is_hex, is_hex_address, to_bytes, to_checksum_address, to_hex
from pydantic import (
    BaseModel,
    Field,
    ValidationError,
    field_serializer,
    field_validator,
    model_validator,
)

from gasreport.exceptions import InvalidChildIndexError, SharedChildNodeError, TraceError
from gasreport.types import AddressType, GasValue


class TraceKind(str, Enum):
    """
    The phase of a test run a call-trace tree was recorded in.
    """

    DEPLOYMENT = "deployment"
    SETUP = "setup"
    EXECUTION = "execution"


class RawCall(BaseModel):
    """
    Call data the engine could not decode, such as contract creation code.
    """

    type: Literal["raw"] = "raw"
    data: bytes = b""
    created: bool = False
    """``True`` when the call created a contract."""

    @field_validator("data", mode="before")
    @classmethod
    def validate_data(cls, value: Any) -> Any:
        if isinstance(value, str):
            if value and not is_hex(value):
                raise ValueError(f"Invalid hex data '{value}'.")

            return to_bytes(hexstr=value) if value else b""

        return value

    @field_serializer("data")
    def serialize_data(self, value: bytes) -> str:
        return to_hex(value)


class DecodedCall(BaseModel):
    """
    A call the engine matched to a function of the callee's ABI.
    """

    type: Literal["decoded"] = "decoded"
    function: str
    signature: str
    arguments: List[str] = []


CallData = Annotated[Union[RawCall, DecodedCall], Field(discriminator="type")]


class CallTrace(BaseModel):
    address: AddressType
    contract: Optional[str] = None
    gas_cost: GasValue = 0
    data: CallData = Field(default_factory=RawCall)

    @field_validator("address", mode="before")
    @classmethod
    def validate_address(cls, value: Any) -> Any:
        if not isinstance(value, str) or not is_hex_address(value):
            raise ValueError(f"Invalid address '{value}'.")

        return to_checksum_address(value)

    def created(self) -> bool:
        return isinstance(self.data, RawCall) and self.data.created


class CallTraceNode(BaseModel):
    idx: int = Field(ge=0)
    children: List[int] = []
    trace: CallTrace


class CallTraceArena(BaseModel):
    """
    A call-trace tree stored as a flat list of nodes.
    Node ``0`` is the root and nodes refer to their children by index.
    """

    arena: List[CallTraceNode]

    @model_validator(mode="after")
    def validate_children(self) -> "CallTraceArena":
        if not self.arena:
            raise ValueError("Call-trace arena must contain a root node.")

        size = len(self.arena)
        # Each node except the root has exactly one parent.
        has_parent = {0}
        for index, node in enumerate(self.arena):
            for child in node.children:
                if child == index or not 0 <= child < size:
                    raise InvalidChildIndexError(index, child)

                elif child in has_parent:
                    raise SharedChildNodeError(child)

                has_parent.add(child)

        return self

    def __len__(self) -> int:
        return len(self.arena)

    def __getitem__(self, index: int) -> CallTraceNode:
        return self.arena[index]

    @property
    def root(self) -> CallTraceNode:
        return self.arena[0]

    @classmethod
    def parse_file(cls, path: Union[Path, str]) -> "CallTraceArena":  # type: ignore[override]
        path = Path(path)
        try:
            return cls.model_validate_json(path.read_text())
        except FileNotFoundError as err:
            raise TraceError(f"Trace file '{path}' not found") from err
        except (ValidationError, TraceError) as err:
            raise TraceError(f"Invalid trace file '{path}': {err}") from err
