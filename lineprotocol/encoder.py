"""Encoding of records and points into line protocol payloads"""
import time
from typing import Any, Dict, Iterable, List, Mapping, Optional

from logging_config import get_logger, log_encoding_summary
from .errors import EmptyFieldSetError, InvalidRecordError, ValidationError
from .models import Point

logger = get_logger(__name__)


def make_lines(points: Iterable[Point]) -> str:
    """Join rendered points into a newline separated write payload"""
    return "\n".join(point.to_line() for point in points)


class LineProtocolEncoder:
    """Builds points from plain records and encodes them as a payload"""

    def __init__(self, config=None):
        self.config = config
        self.require_fields = config.require_fields if config else False
        self.skip_invalid = config.skip_invalid if config else False
        self.default_tags: Dict[str, str] = dict(config.default_tags) if config else {}

    def build_point(self, record: Mapping[str, Any]) -> Point:
        """Build a point from a record with measurement, value, tags, fields and timestamp keys"""
        if not isinstance(record, Mapping):
            raise InvalidRecordError("Record", record)

        record_tags = record.get("tags") or {}
        record_fields = record.get("fields") or {}
        if not isinstance(record_tags, Mapping):
            raise InvalidRecordError("Tags", record_tags)
        if not isinstance(record_fields, Mapping):
            raise InvalidRecordError("Fields", record_fields)

        tags = dict(self.default_tags)
        tags.update(record_tags)

        point = Point(
            record.get("measurement"),
            record.get("value"),
            tags,
            record_fields,
            record.get("timestamp"),
        )

        if self.require_fields and not point.field_values:
            raise EmptyFieldSetError(point.measurement)

        return point

    def build_points(self, records: Iterable[Mapping[str, Any]]) -> List[Point]:
        """Build points, dropping invalid records when skip_invalid is set"""
        points = []
        for index, record in enumerate(records):
            try:
                points.append(self.build_point(record))
            except ValidationError as e:
                if not self.skip_invalid:
                    raise
                logger.warning("Skipping invalid record",
                               record_index=index,
                               error=str(e),
                               error_type=type(e).__name__)
        return points

    def encode(self, points: Iterable[Point]) -> str:
        """Encode already built points"""
        return make_lines(points)

    def encode_records(self, records: Iterable[Mapping[str, Any]]) -> str:
        """Build and encode records in one go"""
        start_time = time.time()
        records = list(records)
        points = self.build_points(records)
        payload = make_lines(points)

        log_encoding_summary(logger,
                             lines=len(points),
                             skipped=len(records) - len(points),
                             duration=time.time() - start_time)
        return payload
