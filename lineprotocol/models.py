"""Line protocol point model"""
import sys
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from .errors import InvalidMeasurementError, InvalidTimestampError
from .escaping import escape


class FieldKind(Enum):
    """Native field value types"""
    INTEGER = "integer"
    TEXT = "text"
    BOOLEAN = "boolean"
    FLOAT = "float"


@dataclass(frozen=True)
class FieldValue:
    """A field value already formatted for the wire"""
    kind: FieldKind
    text: str

    @classmethod
    def from_native(cls, value: Any) -> "FieldValue":
        """Format a native value once, by type"""
        # Null renders as an empty value
        if value is None:
            return cls(FieldKind.FLOAT, "")
        # bool is a subclass of int, check it first
        if isinstance(value, bool):
            return cls(FieldKind.BOOLEAN, "true" if value else "false")
        if isinstance(value, int):
            return cls(FieldKind.INTEGER, f"{value}i")
        if isinstance(value, str):
            return cls(FieldKind.TEXT, f'"{value}"')
        return cls(FieldKind.FLOAT, str(value))

    def render(self) -> str:
        # Quoted strings are emitted as-is
        if self.kind is FieldKind.TEXT:
            return self.text
        return escape(self.text)


def _parse_timestamp(timestamp: Any) -> Optional[int]:
    """Validate a timestamp and return it as an int, or None when absent"""
    if timestamp is None or timestamp == "":
        return None

    if isinstance(timestamp, bool):
        raise InvalidTimestampError(timestamp)

    if isinstance(timestamp, int):
        value = timestamp
    elif isinstance(timestamp, (float, Decimal, str)):
        try:
            number = Decimal(timestamp.strip() if isinstance(timestamp, str) else timestamp)
        except InvalidOperation:
            raise InvalidTimestampError(timestamp) from None
        if not number.is_finite() or number != number.to_integral_value():
            raise InvalidTimestampError(timestamp)
        value = int(number)
    else:
        raise InvalidTimestampError(timestamp)

    if not -sys.maxsize <= value <= sys.maxsize:
        raise InvalidTimestampError(timestamp)

    return value


@dataclass(frozen=True, init=False)
class Point:
    """A single time-series data point.

    Fields are formatted once at construction and the point cannot be changed
    afterwards. The timestamp is optional; without one the server assigns its
    own ingestion time.

    Renders as, e.g.::

        cpu_load_short,host=server01,region=us-west value=0.64 1434055562000000000
    """
    measurement: str
    tags: Mapping[str, str]
    field_values: Mapping[str, FieldValue]
    timestamp: Optional[int]

    def __init__(self,
                 measurement: str,
                 value: Any = None,
                 tags: Optional[Mapping[str, Any]] = None,
                 fields: Optional[Mapping[str, Any]] = None,
                 timestamp: Any = None):
        if not measurement:
            raise InvalidMeasurementError()

        native_fields: Dict[str, Any] = dict(fields or {})
        if value:
            native_fields["value"] = value

        object.__setattr__(self, "measurement", str(measurement))
        object.__setattr__(self, "tags", MappingProxyType(
            {str(k): "" if v is None else str(v) for k, v in (tags or {}).items()}))
        object.__setattr__(self, "field_values", MappingProxyType(
            {str(k): FieldValue.from_native(v) for k, v in native_fields.items()}))
        object.__setattr__(self, "timestamp", _parse_timestamp(timestamp))

    @property
    def fields(self) -> Mapping[str, str]:
        """Field key to formatted field value"""
        return MappingProxyType({k: v.text for k, v in self.field_values.items()})

    def to_line(self) -> str:
        """Render the point as one line protocol line"""
        line = self.measurement

        if self.tags:
            line += "," + ",".join(
                f"{escape(k)}={escape(v)}" for k, v in self.tags.items())

        line += " " + ",".join(
            f"{escape(k)}={v.render()}" for k, v in self.field_values.items())

        if self.timestamp is not None:
            line += f" {self.timestamp}"

        return line

    def __hash__(self) -> int:
        return hash((
            self.measurement,
            frozenset(self.tags.items()),
            frozenset(self.field_values.items()),
            self.timestamp,
        ))

    def __str__(self) -> str:
        return self.to_line()
