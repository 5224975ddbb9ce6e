"""Line protocol encoding for time-series points"""
from .errors import (
    EmptyFieldSetError,
    InvalidMeasurementError,
    InvalidRecordError,
    InvalidTimestampError,
    ValidationError,
)
from .escaping import escape
from .models import FieldKind, FieldValue, Point

__all__ = [
    "EmptyFieldSetError",
    "FieldKind",
    "FieldValue",
    "InvalidMeasurementError",
    "InvalidRecordError",
    "InvalidTimestampError",
    "Point",
    "ValidationError",
    "escape",
]
