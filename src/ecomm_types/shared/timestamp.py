"""Timestamp value object: an instant in UTC to nanosecond accuracy.

The instant is held the same way ``google.protobuf.Timestamp`` holds it,
whole seconds since the Unix epoch plus a non-negative nanosecond
remainder, so nothing is lost to the microsecond limit of ``datetime``.
"""

import re
import time
from datetime import UTC, datetime, timedelta, timezone
from typing import Optional

from google.protobuf import timestamp_pb2
from protean.fields import Integer

from ecomm_types.domain import ecomm_types
from ecomm_types.errors import NilInputError, ParseError
from ecomm_types.utils.logging import get_logger

logger = get_logger(__name__)

NANOS_PER_SECOND = 1_000_000_000

# 0001-01-01T00:00:00Z and 9999-12-31T23:59:59Z, the range of the well-known type
MIN_SECONDS = -62_135_596_800
MAX_SECONDS = 253_402_300_799

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_SECOND = timedelta(seconds=1)

_RFC3339_NANO = re.compile(
    r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})"
    r"T(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})"
    r"(?:\.(?P<fraction>[0-9]+))?"
    r"(?P<offset>Z|(?P<sign>[+-])(?P<offset_hour>[0-9]{2}):(?P<offset_minute>[0-9]{2}))"
)


def _split(delta: timedelta) -> tuple[int, int]:
    """Whole seconds and nanosecond remainder of a distance from the epoch."""
    seconds, remainder = divmod(delta, _ONE_SECOND)
    return seconds, remainder.microseconds * 1_000


@ecomm_types.value_object
class Timestamp:
    """An immutable instant, normalized to UTC.

    Build one with ``from_datetime``, ``now``, ``from_rfc3339_nano`` or
    ``from_pb``; read it back with ``get_time``, ``str`` or ``as_pb``.
    """

    seconds: Integer(required=True, min_value=MIN_SECONDS, max_value=MAX_SECONDS)
    nanos: Integer(default=0, min_value=0, max_value=NANOS_PER_SECOND - 1)

    @classmethod
    def from_datetime(cls, value: datetime) -> "Timestamp":
        """Timestamp for a ``datetime`` in any zone. Naive values are taken as UTC.

        Instants outside 0001-01-01 to 9999-12-31 UTC raise protean's
        ``ValidationError``.
        """
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        seconds, nanos = _split(value - _EPOCH)
        return cls(seconds=seconds, nanos=nanos)

    @classmethod
    def now(cls) -> "Timestamp":
        """Timestamp for the current system clock reading."""
        seconds, nanos = divmod(time.time_ns(), NANOS_PER_SECOND)
        return cls(seconds=seconds, nanos=nanos)

    @classmethod
    def from_rfc3339_nano(cls, value: str) -> "Timestamp":
        """Parse an RFC 3339 string with up to nanosecond precision.

        Any zone offset is accepted and the result is normalized to UTC.
        Fractional digits beyond the ninth are truncated. Raises
        ``ParseError`` for anything that does not describe a valid instant,
        leap seconds included.
        """
        match = _RFC3339_NANO.fullmatch(value) if isinstance(value, str) else None
        if match is None:
            logger.debug("Rejected timestamp string", value=value)
            raise ParseError(value)

        if match["offset"] == "Z":
            zone = UTC
        else:
            offset_hour, offset_minute = int(match["offset_hour"]), int(match["offset_minute"])
            if offset_hour > 23 or offset_minute > 59:
                logger.debug("Rejected timestamp offset", value=value)
                raise ParseError(value, "time zone offset out of range")
            offset = timedelta(hours=offset_hour, minutes=offset_minute)
            zone = timezone(-offset if match["sign"] == "-" else offset)

        try:
            local = datetime(
                int(match["year"]),
                int(match["month"]),
                int(match["day"]),
                int(match["hour"]),
                int(match["minute"]),
                int(match["second"]),
                tzinfo=zone,
            )
        except ValueError as exc:
            logger.debug("Rejected timestamp fields", value=value, reason=str(exc))
            raise ParseError(value, str(exc)) from exc

        seconds, _ = _split(local - _EPOCH)
        if not MIN_SECONDS <= seconds <= MAX_SECONDS:
            logger.debug("Rejected timestamp outside supported range", value=value)
            raise ParseError(value, "instant outside 0001-01-01T00:00:00Z to 9999-12-31T23:59:59Z")

        fraction = match["fraction"] or ""
        nanos = int(fraction[:9].ljust(9, "0"))
        return cls(seconds=seconds, nanos=nanos)

    @classmethod
    def from_pb(cls, timepb: Optional[timestamp_pb2.Timestamp]) -> "Timestamp":
        """Timestamp for a ``google.protobuf.Timestamp``.

        Unlike the other value objects a missing wire value is an error: there
        is no meaningful empty instant.

        Seconds outside the supported range, or nanos outside
        0..999,999,999, raise protean's ``ValidationError``; they are not
        normalized.
        """
        if timepb is None:
            logger.debug("Rejected nil protobuf timestamp")
            raise NilInputError()
        return cls(seconds=timepb.seconds, nanos=timepb.nanos)

    def get_time(self) -> datetime:
        """The instant as an aware UTC ``datetime``, truncated to microseconds."""
        return _EPOCH + timedelta(seconds=self.seconds, microseconds=self.nanos // 1_000)

    def as_pb(self) -> timestamp_pb2.Timestamp:
        """The instant as a ``google.protobuf.Timestamp``."""
        return timestamp_pb2.Timestamp(seconds=self.seconds, nanos=self.nanos)

    def unix(self) -> int:
        """Whole seconds since the Unix epoch."""
        return self.seconds

    def to_rfc3339_nano(self) -> str:
        """RFC 3339 UTC rendering with trailing fractional zeroes elided."""
        t = _EPOCH + timedelta(seconds=self.seconds)
        text = f"{t.year:04d}-{t.month:02d}-{t.day:02d}T{t.hour:02d}:{t.minute:02d}:{t.second:02d}"
        if self.nanos:
            text += "." + f"{self.nanos:09d}".rstrip("0")
        return text + "Z"

    def __str__(self) -> str:
        return self.to_rfc3339_nano()

    def _key(self) -> tuple[int, int]:
        return (self.seconds, self.nanos)

    def __lt__(self, other: "Timestamp") -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: "Timestamp") -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: "Timestamp") -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: "Timestamp") -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self._key() >= other._key()
