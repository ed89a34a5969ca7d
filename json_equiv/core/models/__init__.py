"""Core data models for JSON equivalence results and decoded documents."""

from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Type aliases
JSONValue = Union[None, bool, int, float, str, List["JSONValue"], Dict[str, "JSONValue"]]
Record = Dict[str, JSONValue]
RecordSequence = List[Record]


class Side(str, Enum):
    """Which input of a comparison a value or error belongs to."""
    EXPECTED = "expected"
    ACTUAL = "actual"


class ComparisonResult(BaseModel):
    """Outcome of a logical JSON comparison.

    When the documents differ, ``expected`` and ``actual`` hold the canonical
    renderings of the first diverging object pair. Both are empty when the
    documents are equivalent or when one side could not be decoded.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    expected: str = Field(
        "",
        description="Canonical rendering of the diverging expected object."
    )
    actual: str = Field(
        "",
        description="Canonical rendering of the diverging actual object."
    )
    equal: bool = Field(
        False,
        description="True when both documents are logically equivalent."
    )
    error: Optional[Exception] = Field(
        None,
        description="DecodeError raised while decoding one of the inputs."
    )

    @model_validator(mode="after")
    def check_consistency(self) -> "ComparisonResult":
        if self.equal and (self.expected or self.actual):
            raise ValueError("an equal result cannot carry renderings")
        if self.error is not None:
            if self.equal:
                raise ValueError("an errored result cannot be equal")
            if self.expected or self.actual:
                raise ValueError("an errored result cannot carry renderings")
        return self

    def as_tuple(self) -> Tuple[str, str, bool, Optional[Exception]]:
        """Return ``(expected, actual, equal, error)``."""
        return self.expected, self.actual, self.equal, self.error

    def __bool__(self) -> bool:
        return self.equal


__all__ = [
    "JSONValue",
    "Record",
    "RecordSequence",
    "Side",
    "ComparisonResult",
]
