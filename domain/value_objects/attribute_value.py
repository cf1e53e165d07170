from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class AttributeType(str, Enum):
    """Type descriptors of a change-stream attribute value."""

    STRING = "S"
    NUMBER = "N"
    BINARY = "B"
    BOOLEAN = "BOOL"
    NULL = "NULL"
    STRING_SET = "SS"
    NUMBER_SET = "NS"
    BINARY_SET = "BS"
    LIST = "L"
    MAP = "M"


class AttributeValue(BaseModel):
    """A typed attribute from a key-value change stream image.

    ``value`` holds the canonical payload for ``type``: ``str`` for S,
    ``Decimal`` for N, ``bytes`` for B, ``bool`` for BOOL, ``None`` for
    NULL, tuples for the set types and L, and a ``dict`` for M. Numbers stay
    ``Decimal`` so their textual precision survives a round-trip.
    """

    model_config = ConfigDict(frozen=True)

    type: AttributeType
    value: Any = Field(None, description="Canonical payload matching the type descriptor")

    @classmethod
    def string(cls, value: str) -> "AttributeValue":
        return cls(type=AttributeType.STRING, value=value)

    @classmethod
    def number(cls, value: Decimal | int | str) -> "AttributeValue":
        return cls(type=AttributeType.NUMBER, value=Decimal(value))

    @classmethod
    def binary(cls, value: bytes) -> "AttributeValue":
        return cls(type=AttributeType.BINARY, value=value)

    @classmethod
    def boolean(cls, value: bool) -> "AttributeValue":  # noqa: FBT001
        return cls(type=AttributeType.BOOLEAN, value=value)

    @classmethod
    def null(cls) -> "AttributeValue":
        return cls(type=AttributeType.NULL, value=None)

    def to_python(self) -> Any:  # noqa: ANN401
        """Unwrap into plain Python values (sets become frozensets)."""
        match self.type:
            case AttributeType.STRING_SET | AttributeType.NUMBER_SET | AttributeType.BINARY_SET:
                return frozenset(self.value)
            case AttributeType.LIST:
                return [item.to_python() for item in self.value]
            case AttributeType.MAP:
                return {key: item.to_python() for key, item in self.value.items()}
            case _:
                return self.value
