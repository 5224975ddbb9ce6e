"""Errors raised while building line protocol points"""


class ValidationError(ValueError):
    """Base class for point construction failures"""


class InvalidMeasurementError(ValidationError):
    """Measurement name is empty or missing"""

    def __init__(self, message: str = "Invalid measurement name provided"):
        super().__init__(message)


class InvalidTimestampError(ValidationError):
    """Timestamp is not an integer within the platform's signed range"""

    def __init__(self, timestamp):
        self.timestamp = timestamp
        super().__init__(f"{timestamp} is not a valid timestamp")


class EmptyFieldSetError(ValidationError):
    """Point has no fields, which the wire format cannot represent"""

    def __init__(self, measurement: str):
        self.measurement = measurement
        super().__init__(f"Point '{measurement}' has no fields")


class InvalidRecordError(ValidationError):
    """Record, or its tags or fields, is not a mapping"""

    def __init__(self, what: str, value):
        self.value = value
        super().__init__(f"{what} is not a mapping: {value!r}")
