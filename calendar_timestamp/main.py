from absl import app, flags, logging

from .clock import SYSTEM_WALL_CLOCK, WallClock
from .errors import ArithmeticOverflowError
from .iso8601 import format_timestamp, parse_timestamp
from .timestamp import Timestamp

_MILLIS = flags.DEFINE_integer(
    name='millis',
    default=None,
    help='Milliseconds since 0000-01-01T00:00:00.000Z, the stored form of a timestamp.',
)
_UNIX_MILLIS = flags.DEFINE_integer(
    name='unix_millis',
    default=None,
    help='Milliseconds since the Unix epoch 1970-01-01T00:00:00.000Z.',
)
_ISO = flags.DEFINE_string(
    name='iso',
    default=None,
    help='ISO 8601 text, e.g. 2024-02-29T12:00:00.500Z. Date-only and millisecond-less forms are accepted.',
)
flags.mark_flags_as_mutual_exclusive(['millis', 'unix_millis', 'iso'])

_DAY_NAMES = ('Sunday', 'Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday')


def resolve_timestamp(clock: WallClock = SYSTEM_WALL_CLOCK) -> Timestamp:
  millis = _MILLIS.value if _MILLIS.present else _MILLIS.default
  unix_millis = _UNIX_MILLIS.value if _UNIX_MILLIS.present else _UNIX_MILLIS.default
  iso = _ISO.value if _ISO.present else _ISO.default

  if millis is not None:
    return Timestamp(millis)
  if unix_millis is not None:
    return Timestamp.from_unix_millis(unix_millis)
  if iso is not None:
    return parse_timestamp(iso)

  logging.debug('No input flag given, using the current time.')
  return Timestamp.now_utc(clock)


def describe(ts: Timestamp) -> list[str]:
  try:
    unix_millis = str(ts.to_unix_millis())
  except ArithmeticOverflowError as e:
    logging.debug(f'No Unix time for {ts.millis=}: {e}')
    unix_millis = 'out of range'

  return [
      f'iso8601: {format_timestamp(ts)}',
      f'millis: {ts.millis}',
      f'unix_millis: {unix_millis}',
      f'day_of_week: {_DAY_NAMES[ts.day_of_week()]}',
      f'day_of_year: {ts.day_of_year()}',
  ]


def main(args: list[str]) -> None:
  if len(args) > 1:
    raise app.UsageError(f'unexpected arguments {args[1:]}')

  for line in describe(resolve_timestamp()):
    print(line)


def app_run_main() -> None:
  app.run(main)
