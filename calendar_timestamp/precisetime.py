import enum
from dataclasses import dataclass
from typing import ClassVar, Self

from .duration import Duration
from .errors import ArithmeticOverflowError


class DurationKind(enum.StrEnum):
  # Elapsed time, never negative.
  INTERVAL = 'interval'
  # Difference between two instants, either sign.
  DELTA = 'delta'


@dataclass(frozen=True, order=True)
class PreciseDuration:
  nanoseconds: int
  kind: DurationKind = DurationKind.INTERVAL

  _INTERVAL_MAX: ClassVar[int] = 2**128 - 1
  _DELTA_MAX: ClassVar[int] = 2**127 - 1
  _DELTA_MIN: ClassVar[int] = -2**127

  _MICROSECOND_NS: ClassVar[int] = 10**3
  _MILLISECOND_NS: ClassVar[int] = 10**6
  _SECOND_NS: ClassVar[int] = 10**9
  _MINUTE_NS: ClassVar[int] = _SECOND_NS * 60
  _HOUR_NS: ClassVar[int] = _MINUTE_NS * 60
  _DAY_NS: ClassVar[int] = _HOUR_NS * 24

  def __post_init__(self) -> None:
    if self.kind == DurationKind.INTERVAL:
      low, high = 0, self._INTERVAL_MAX
    else:
      low, high = self._DELTA_MIN, self._DELTA_MAX
    if not low <= self.nanoseconds <= high:
      raise ArithmeticOverflowError(f'{self.kind} value {self.nanoseconds} out of range, '
                                    f'expected to be in range [{low}, {high}]')

  @classmethod
  def from_parts(cls,
                 days: int = 0,
                 hours: int = 0,
                 minutes: int = 0,
                 seconds: int = 0,
                 milliseconds: int = 0,
                 microseconds: int = 0,
                 nanoseconds: int = 0) -> Self:
    total = days * cls._DAY_NS
    total += hours * cls._HOUR_NS
    total += minutes * cls._MINUTE_NS
    total += seconds * cls._SECOND_NS
    total += milliseconds * cls._MILLISECOND_NS
    total += microseconds * cls._MICROSECOND_NS
    total += nanoseconds
    return cls(total, DurationKind.INTERVAL if total >= 0 else DurationKind.DELTA)

  @classmethod
  def between(cls, earlier_ns: int, later_ns: int) -> Self:
    """The interval between two monotonic readings, clamped to zero if the clock went backwards."""
    return cls(max(later_ns - earlier_ns, 0))

  def __add__(self, other: object) -> Self:
    if isinstance(other, PreciseDuration):
      kind = DurationKind.INTERVAL if DurationKind.DELTA not in (self.kind, other.kind) else DurationKind.DELTA
      return self.__class__(self.nanoseconds + other.nanoseconds, kind)
    return NotImplemented

  def __sub__(self, other: object) -> Self:
    if isinstance(other, PreciseDuration):
      return self.__class__(self.nanoseconds - other.nanoseconds, DurationKind.DELTA)
    return NotImplemented

  def __neg__(self) -> Self:
    return self.__class__(-self.nanoseconds, DurationKind.DELTA)

  def is_negative(self) -> bool:
    return self.nanoseconds < 0

  def to_nanoseconds(self) -> int:
    return self.nanoseconds

  def to_microseconds(self) -> int:
    return self._truncate(self._MICROSECOND_NS)

  def to_milliseconds(self) -> int:
    return self._truncate(self._MILLISECOND_NS)

  def to_seconds(self) -> int:
    return self._truncate(self._SECOND_NS)

  def to_minutes(self) -> int:
    return self._truncate(self._MINUTE_NS)

  def to_hours(self) -> int:
    return self._truncate(self._HOUR_NS)

  def to_days(self) -> int:
    return self._truncate(self._DAY_NS)

  def to_duration(self) -> Duration:
    return Duration(self.to_milliseconds())

  def _truncate(self, unit_ns: int) -> int:
    quotient = abs(self.nanoseconds) // unit_ns
    return -quotient if self.nanoseconds < 0 else quotient

  def __str__(self) -> str:
    ns = abs(self.nanoseconds)
    sign = '-' if self.nanoseconds < 0 else ''

    days, ns = divmod(ns, self._DAY_NS)
    hours, ns = divmod(ns, self._HOUR_NS)
    minutes, ns = divmod(ns, self._MINUTE_NS)
    seconds, ns = divmod(ns, self._SECOND_NS)

    clock = f'{hours:02d}:{minutes:02d}:{seconds:02d}.{ns:09d}'
    if days > 0:
      return f'{sign}{days} {clock}'
    return f'{sign}{clock}'

  ZERO: ClassVar[Self]


PreciseDuration.ZERO = PreciseDuration(0)
