import re
from dataclasses import dataclass
from typing import ClassVar, Self

from .epoch import (INT64_MAX, INT64_MIN, MILLISECONDS_PER_DAY, MILLISECONDS_PER_HOUR, MILLISECONDS_PER_MINUTE,
                    MILLISECONDS_PER_SECOND, checked_int64)
from .errors import ArithmeticOverflowError, ParseError, ParseErrorKind


@dataclass(frozen=True, order=True)
class Duration:
  """A signed span of milliseconds that fits in a 64-bit integer."""

  duration_ms: int

  def __post_init__(self) -> None:
    if not INT64_MIN <= self.duration_ms <= INT64_MAX:
      raise ArithmeticOverflowError(f'value {self.duration_ms} out of range, '
                                    f'expected to be in range [{INT64_MIN}, {INT64_MAX}]')

  @classmethod
  def from_parts(cls, days: int = 0, hours: int = 0, minutes: int = 0, seconds: int = 0, milliseconds: int = 0) -> Self:
    duration_ms = days * MILLISECONDS_PER_DAY
    duration_ms += hours * MILLISECONDS_PER_HOUR
    duration_ms += minutes * MILLISECONDS_PER_MINUTE
    duration_ms += seconds * MILLISECONDS_PER_SECOND
    duration_ms += milliseconds
    return cls(duration_ms)

  def __str__(self) -> str:
    ms = self.duration_ms
    sign = '-' if ms < 0 else '+'
    ms = abs(ms)

    hours, ms = divmod(ms, MILLISECONDS_PER_HOUR)
    minutes, ms = divmod(ms, MILLISECONDS_PER_MINUTE)
    seconds, ms = divmod(ms, MILLISECONDS_PER_SECOND)

    return f'{sign}{hours:02d}:{minutes:02d}:{seconds:02d}.{ms:03d}'

  def __add__(self, other: object) -> Self:
    if isinstance(other, Duration):
      return self.__class__(checked_int64(self.duration_ms + other.duration_ms, 'duration'))
    return NotImplemented

  def __sub__(self, other: object) -> Self:
    if isinstance(other, Duration):
      return self.__class__(checked_int64(self.duration_ms - other.duration_ms, 'duration'))
    return NotImplemented

  def __neg__(self) -> Self:
    return self.__class__(checked_int64(-self.duration_ms, 'duration'))

  def __abs__(self) -> Self:
    return self.__class__(checked_int64(abs(self.duration_ms), 'duration'))

  def __truediv__(self, other: object) -> float:
    if isinstance(other, Duration):
      return self.duration_ms / other.duration_ms
    return NotImplemented

  def __mul__(self, other: object) -> Self:
    if isinstance(other, int):
      return self.__class__(checked_int64(self.duration_ms * other, 'duration'))
    return NotImplemented

  __rmul__ = __mul__

  def milliseconds(self) -> int:
    return abs(self.duration_ms) % MILLISECONDS_PER_SECOND

  def seconds(self) -> int:
    return abs(self.duration_ms) // MILLISECONDS_PER_SECOND % 60

  def minutes(self) -> int:
    return abs(self.duration_ms) // MILLISECONDS_PER_MINUTE % 60

  def hours(self) -> int:
    return abs(self.duration_ms) // MILLISECONDS_PER_HOUR % 24

  # Totals truncate toward zero so that -d reports the negated totals of d.
  def to_seconds(self) -> int:
    return _truncate(self.duration_ms, MILLISECONDS_PER_SECOND)

  def to_minutes(self) -> int:
    return _truncate(self.duration_ms, MILLISECONDS_PER_MINUTE)

  def to_hours(self) -> int:
    return _truncate(self.duration_ms, MILLISECONDS_PER_HOUR)

  def to_days(self) -> int:
    return _truncate(self.duration_ms, MILLISECONDS_PER_DAY)

  _REGEX: ClassVar[str] = (r'^'
                           r'(?P<sign>[+-])'
                           r'(?P<hours>\d{2,})'
                           r':(?P<minutes>\d{2})'
                           r':(?P<seconds>\d{2})'
                           r'\.(?P<milliseconds>\d{3})'
                           r'$')
  _PATTERN: ClassVar[re.Pattern[str]] = re.compile(_REGEX)

  @classmethod
  def build(cls, s: str) -> Self:
    try:
      duration_ms = int(s)
    except ValueError:
      pass
    else:
      return cls(duration_ms)

    if (match := cls._PATTERN.search(s)) is None:
      raise ParseError(ParseErrorKind.MALFORMED_SYNTAX, s, f'unable to match regex {cls._REGEX}')

    minutes = int(match['minutes'])
    seconds = int(match['seconds'])
    if minutes > 59 or seconds > 59:
      raise ParseError(ParseErrorKind.FIELD_OUT_OF_RANGE, s, 'minutes and seconds must be below 60')

    duration_ms = int(match['hours']) * MILLISECONDS_PER_HOUR
    duration_ms += minutes * MILLISECONDS_PER_MINUTE
    duration_ms += seconds * MILLISECONDS_PER_SECOND
    duration_ms += int(match['milliseconds'])
    duration_ms *= (-1 if match['sign'] == '-' else 1)

    try:
      return cls(duration_ms)
    except ArithmeticOverflowError as e:
      raise ParseError(ParseErrorKind.FIELD_OUT_OF_RANGE, s, str(e)) from e

  MAX: ClassVar[Self]
  MIN: ClassVar[Self]
  ZERO: ClassVar[Self]
  MILLISECOND: ClassVar[Self]
  SECOND: ClassVar[Self]
  MINUTE: ClassVar[Self]
  HOUR: ClassVar[Self]
  DAY: ClassVar[Self]


def _truncate(value: int, unit: int) -> int:
  quotient = abs(value) // unit
  return -quotient if value < 0 else quotient


Duration.MAX = Duration(INT64_MAX)
Duration.MIN = Duration(INT64_MIN)
Duration.ZERO = Duration(0)
Duration.MILLISECOND = Duration(1)
Duration.SECOND = Duration(MILLISECONDS_PER_SECOND)
Duration.MINUTE = Duration(MILLISECONDS_PER_MINUTE)
Duration.HOUR = Duration(MILLISECONDS_PER_HOUR)
Duration.DAY = Duration(MILLISECONDS_PER_DAY)
