from dataclasses import dataclass
from typing import ClassVar, Self, overload

from . import epoch
from .clock import SYSTEM_WALL_CLOCK, WallClock
from .duration import Duration
from .epoch import INT64_MAX, INT64_MIN, MILLISECONDS_PER_DAY, checked_int64
from .errors import ArithmeticOverflowError


@dataclass(frozen=True, order=True)
class Timestamp:
  """Milliseconds since 0000-01-01T00:00:00.000Z in the proleptic Gregorian calendar.

  Calendar fields are derived from `millis` on every access, nothing else is stored.
  The epoch itself (millis == 0) is an ordinary instant, not an "unset" marker.
  """

  millis: int

  # 1970-01-01 is day 719528 counted from 0000-01-01.
  UNIX_EPOCH_MS: ClassVar[int] = 719_528 * MILLISECONDS_PER_DAY

  def __post_init__(self) -> None:
    if not INT64_MIN <= self.millis <= INT64_MAX:
      raise ArithmeticOverflowError(f'value {self.millis} out of range, '
                                    f'expected to be in range [{INT64_MIN}, {INT64_MAX}]')

  @classmethod
  def from_fields(cls,
                  year: int,
                  month: int,
                  day: int,
                  hour: int = 0,
                  minute: int = 0,
                  second: int = 0,
                  millisecond: int = 0) -> Self:
    days = epoch.days_from_civil(year, month, day)
    millis_of_day = epoch.millis_of_day(hour, minute, second, millisecond)
    return cls(epoch.combine_millis(days, millis_of_day))

  @classmethod
  def now_utc(cls, clock: WallClock = SYSTEM_WALL_CLOCK) -> Self:
    return cls.from_unix_millis(clock.now_unix_ms())

  @classmethod
  def from_unix_millis(cls, unix_ms: int) -> Self:
    return cls(checked_int64(unix_ms + cls.UNIX_EPOCH_MS, 'millisecond count'))

  def to_unix_millis(self) -> int:
    return checked_int64(self.millis - self.UNIX_EPOCH_MS, 'unix millisecond count')

  def _days(self) -> int:
    return self.millis // MILLISECONDS_PER_DAY

  def _millis_of_day(self) -> int:
    return self.millis % MILLISECONDS_PER_DAY

  def date(self) -> tuple[int, int, int]:
    return epoch.civil_from_days(self._days())

  def time(self) -> tuple[int, int, int, int]:
    return epoch.time_of_day(self._millis_of_day())

  def fields(self) -> tuple[int, int, int, int, int, int, int]:
    return self.date() + self.time()

  def year(self) -> int:
    return self.date()[0]

  def month(self) -> int:
    return self.date()[1]

  def day(self) -> int:
    return self.date()[2]

  def hour(self) -> int:
    return self.time()[0]

  def minute(self) -> int:
    return self.time()[1]

  def second(self) -> int:
    return self.time()[2]

  def millisecond(self) -> int:
    return self.time()[3]

  def day_of_week(self) -> int:
    """0 is Sunday, 6 is Saturday."""
    return epoch.day_of_week(self._days())

  def day_of_year(self) -> int:
    year = self.year()
    return self._days() - epoch.days_from_civil(year, 1, 1) + 1

  def to_seconds(self) -> int:
    return self.millis // epoch.MILLISECONDS_PER_SECOND

  def to_minutes(self) -> int:
    return self.millis // epoch.MILLISECONDS_PER_MINUTE

  def to_hours(self) -> int:
    return self.millis // epoch.MILLISECONDS_PER_HOUR

  def to_days(self) -> int:
    return self._days()

  def add_millis(self, delta: int) -> Self:
    return self.__class__(checked_int64(self.millis + delta, 'millisecond count'))

  def sub_millis(self, delta: int) -> Self:
    return self.__class__(checked_int64(self.millis - delta, 'millisecond count'))

  def __add__(self, other: object) -> Self:
    if isinstance(other, Duration):
      return self.add_millis(other.duration_ms)
    return NotImplemented

  @overload
  def __sub__(self, other: Duration) -> Self:
    ...

  @overload
  def __sub__(self, other: Self) -> Duration:
    ...

  def __sub__(self, other: object) -> Self | Duration:
    if isinstance(other, Duration):
      return self.sub_millis(other.duration_ms)
    if isinstance(other, Timestamp):
      return Duration(checked_int64(self.millis - other.millis, 'duration'))
    return NotImplemented

  def __index__(self) -> int:
    return self.millis

  def __str__(self) -> str:
    from .iso8601 import format_timestamp
    return format_timestamp(self)

  @classmethod
  def build(cls, s: str) -> Self:
    try:
      millis = int(s)
    except ValueError:
      pass
    else:
      return cls(millis)

    from .iso8601 import parse_timestamp
    return cls(parse_timestamp(s).millis)

  MAX: ClassVar[Self]
  MIN: ClassVar[Self]
  ZERO: ClassVar[Self]
  UNIX_EPOCH: ClassVar[Self]


Timestamp.MAX = Timestamp(INT64_MAX)
Timestamp.MIN = Timestamp(INT64_MIN)
Timestamp.ZERO = Timestamp(0)
Timestamp.UNIX_EPOCH = Timestamp(Timestamp.UNIX_EPOCH_MS)
