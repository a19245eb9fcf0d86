"""
Pydantic Models

Configuration for the demonstration run and the data shapes used to describe
a fluent chain declaratively.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, field_validator, model_validator, ConfigDict
from enum import Enum


class OperationType(str, Enum):
    """Operation type enumeration"""
    MAP = "map"
    REVERSE = "reverse"
    REDUCE = "reduce"
    JOIN = "join"


TERMINAL_OPERATIONS = {OperationType.REDUCE, OperationType.JOIN}


class OperationSpec(BaseModel):
    """One step of a declarative chain"""
    type: OperationType = Field(
        ...,
        description="Operation to apply"
    )
    name: Optional[str] = Field(
        None,
        description="Registered mapper or reducer name (map and reduce only)"
    )
    args: List[Any] = Field(
        default_factory=list,
        description="Positional arguments for the mapper or reducer factory"
    )
    initial: Optional[Any] = Field(
        None,
        description="Seed value for reduce; omitted means the first element seeds"
    )
    separator: str = Field(
        ", ",
        description="Separator placed between elements by join"
    )

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Strip whitespace and reject blank names"""
        if v is None:
            return v
        if not v.strip():
            raise ValueError("Combinator name cannot be empty")
        return v.strip()

    @model_validator(mode='after')
    def check_name_required(self):
        """map and reduce need a combinator name"""
        if self.type in (OperationType.MAP, OperationType.REDUCE) and self.name is None:
            raise ValueError(f"'{self.type.value}' operation requires a combinator name")
        return self

    @property
    def has_initial(self) -> bool:
        return "initial" in self.model_fields_set


class ChainRequest(BaseModel):
    """Items plus the operations to run over them, in order"""
    items: List[Any] = Field(
        default_factory=list,
        description="Elements of the source sequence"
    )
    operations: List[OperationSpec] = Field(
        default_factory=list,
        description="Operations applied from first to last"
    )

    @field_validator('operations')
    @classmethod
    def validate_terminal_last(cls, v):
        """reduce and join end a chain, so nothing may follow them"""
        for index, op in enumerate(v[:-1]):
            if op.type in TERMINAL_OPERATIONS:
                raise ValueError(
                    f"Terminal operation '{op.type.value}' at position {index} must be last"
                )
        return v

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "items": [1, 2, 3, 4, 5],
                "operations": [
                    {"type": "map", "name": "multiply", "args": [2]},
                    {"type": "reverse"},
                    {"type": "join", "separator": ", "}
                ]
            }
        }
    )


class ChainResult(BaseModel):
    """Outcome of running a declarative chain"""
    result: Any = Field(
        None,
        description="Terminal value, or the remaining elements when the chain is not terminated"
    )
    absent: bool = Field(
        False,
        description="True when a seedless reduce had nothing to reduce"
    )
    operations_applied: List[str] = Field(
        default_factory=list,
        description="Operation types in the order they ran"
    )
    performance: Dict[str, Any] = Field(
        default_factory=dict,
        description="Timing and size information"
    )


class DemoConfig(BaseModel):
    """Inputs for the demonstration entry point"""
    numbers: List[int] = Field(
        default_factory=lambda: [1, 2, 3, 4, 5],
        description="Sequence doubled, reversed and joined"
    )
    values: List[int] = Field(
        default_factory=lambda: [1, 3, 67, 300, 3, 4, 67],
        description="Sequence used for the max and sum reductions"
    )
    factor: int = Field(
        2,
        description="Multiplication factor for the mapper"
    )
    separator: str = Field(
        ", ",
        description="Separator used by join"
    )
