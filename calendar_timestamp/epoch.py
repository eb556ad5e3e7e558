"""Integer conversions between linear counts and proleptic Gregorian calendar fields.

Day counts are measured from 0000-01-01 (day 0). Year 0 and negative years follow
the same leap year rule as every other year. Python integers never wrap, so every
count that is handed back as a 64-bit quantity goes through `checked_int64`.
"""
from typing import Final

from .errors import ArithmeticOverflowError, InvalidFieldError

INT64_MAX: Final[int] = 2**63 - 1
INT64_MIN: Final[int] = -2**63

MILLISECONDS_PER_SECOND: Final[int] = 1_000
MILLISECONDS_PER_MINUTE: Final[int] = MILLISECONDS_PER_SECOND * 60
MILLISECONDS_PER_HOUR: Final[int] = MILLISECONDS_PER_MINUTE * 60
MILLISECONDS_PER_DAY: Final[int] = MILLISECONDS_PER_HOUR * 24

# 400 Gregorian years repeat exactly.
_DAYS_PER_ERA: Final[int] = 146_097
_YEARS_PER_ERA: Final[int] = 400
# Eras below start on March 1st so that the leap day is the last day of the shifted year.
# 0000-03-01 is day 60 since 0000-01-01 (year 0 is a leap year).
_MARCH_FIRST_OF_YEAR_ZERO: Final[int] = 60

_DAYS_IN_MONTH: Final[tuple[int, ...]] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def checked_int64(value: int, what: str = 'value') -> int:
  if not INT64_MIN <= value <= INT64_MAX:
    raise ArithmeticOverflowError(f'{what} {value} does not fit in a signed 64-bit integer')
  return value


def is_leap_year(year: int) -> bool:
  return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
  if not 1 <= month <= 12:
    raise InvalidFieldError('month', month, 'expected to be in range [1, 12]')
  if month == 2 and is_leap_year(year):
    return 29
  return _DAYS_IN_MONTH[month - 1]


def validate_date(year: int, month: int, day: int) -> None:
  checked_int64(year, 'year')
  last_day = days_in_month(year, month)
  if not 1 <= day <= last_day:
    raise InvalidFieldError('day', day, f'expected to be in range [1, {last_day}] for {year:04d}-{month:02d}')


def days_from_civil(year: int, month: int, day: int) -> int:
  validate_date(year, month, day)

  year -= month <= 2
  era = year // _YEARS_PER_ERA
  year_of_era = year - era * _YEARS_PER_ERA
  shifted_month = (month + 9) % 12
  day_of_year = (153 * shifted_month + 2) // 5 + day - 1
  day_of_era = year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year

  return checked_int64(era * _DAYS_PER_ERA + day_of_era + _MARCH_FIRST_OF_YEAR_ZERO, 'day count')


def civil_from_days(days: int) -> tuple[int, int, int]:
  checked_int64(days, 'day count')

  days -= _MARCH_FIRST_OF_YEAR_ZERO
  era = days // _DAYS_PER_ERA
  day_of_era = days - era * _DAYS_PER_ERA
  year_of_era = (day_of_era - day_of_era // 1460 + day_of_era // 36524 - day_of_era // 146096) // 365
  day_of_year = day_of_era - (365 * year_of_era + year_of_era // 4 - year_of_era // 100)
  shifted_month = (5 * day_of_year + 2) // 153

  day = day_of_year - (153 * shifted_month + 2) // 5 + 1
  month = shifted_month + 3 if shifted_month < 10 else shifted_month - 9
  year = year_of_era + era * _YEARS_PER_ERA + (month <= 2)
  return year, month, day


def millis_of_day(hour: int, minute: int, second: int, millisecond: int) -> int:
  if not 0 <= hour <= 23:
    raise InvalidFieldError('hour', hour, 'expected to be in range [0, 23]')
  if not 0 <= minute <= 59:
    raise InvalidFieldError('minute', minute, 'expected to be in range [0, 59]')
  if not 0 <= second <= 59:
    raise InvalidFieldError('second', second, 'expected to be in range [0, 59]')
  if not 0 <= millisecond <= 999:
    raise InvalidFieldError('millisecond', millisecond, 'expected to be in range [0, 999]')

  return (hour * MILLISECONDS_PER_HOUR + minute * MILLISECONDS_PER_MINUTE + second * MILLISECONDS_PER_SECOND +
          millisecond)


def time_of_day(millis: int) -> tuple[int, int, int, int]:
  if not 0 <= millis < MILLISECONDS_PER_DAY:
    raise InvalidFieldError('millis of day', millis, f'expected to be in range [0, {MILLISECONDS_PER_DAY})')

  hour, millis = divmod(millis, MILLISECONDS_PER_HOUR)
  minute, millis = divmod(millis, MILLISECONDS_PER_MINUTE)
  second, millisecond = divmod(millis, MILLISECONDS_PER_SECOND)
  return hour, minute, second, millisecond


def split_millis(millis: int) -> tuple[int, int]:
  # Floor division keeps the time of day in [0, MILLISECONDS_PER_DAY) before the epoch too.
  return divmod(checked_int64(millis, 'millisecond count'), MILLISECONDS_PER_DAY)


def combine_millis(days: int, millis: int) -> int:
  return checked_int64(days * MILLISECONDS_PER_DAY + millis, 'millisecond count')


def day_of_week(days: int) -> int:
  # 0000-01-01 was a Saturday; 0 is Sunday.
  return (days + 6) % 7
