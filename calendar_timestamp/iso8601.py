"""ISO 8601 extended format, UTC only: [-]YYYY-MM-DDTHH:MM:SS.mmmZ."""
import re
from typing import Final

from absl import logging

from .errors import ArithmeticOverflowError, InvalidFieldError, ParseError, ParseErrorKind
from .timestamp import Timestamp

_REGEX: Final[str] = (r'(?P<sign>[+-])?'
                      r'(?P<year>\d{4,19})'
                      r'-(?P<month>\d{2})'
                      r'-(?P<day>\d{2})'
                      r'(?:T(?P<hour>\d{2})'
                      r':(?P<minute>\d{2})'
                      r':(?P<second>\d{2})'
                      r'(?:\.(?P<millisecond>\d{3}))?'
                      r'(?P<utc>Z)?)?')
_PATTERN: Final[re.Pattern[str]] = re.compile(_REGEX, re.ASCII)

_DIGITS: Final[str] = '0123456789'


def format_timestamp(ts: Timestamp) -> str:
  year, month, day, hour, minute, second, millisecond = ts.fields()
  sign = '-' if year < 0 else ''
  return f'{sign}{abs(year):04d}-{month:02d}-{day:02d}T{hour:02d}:{minute:02d}:{second:02d}.{millisecond:03d}Z'


def _continuation_characters(match: re.Match[str]) -> str:
  # Characters that would have continued the group where matching stopped. Seeing one of them means the
  # input is malformed rather than a complete timestamp followed by something else.
  if match['utc'] is not None:
    return ''
  if match['millisecond'] is not None:
    return _DIGITS
  if match['second'] is not None:
    return _DIGITS + '.'
  return _DIGITS + 'T'


def parse_timestamp(text: str) -> Timestamp:
  """Accepts the canonical form and its shorter variants.

  The time of day may be left out entirely, the milliseconds default to 000 and
  the trailing Z is optional. Offsets other than Z are not supported.
  """
  if (match := _PATTERN.match(text)) is None:
    logging.debug(f'Unable to match {text=} with regex {_REGEX}')
    raise ParseError(ParseErrorKind.MALFORMED_SYNTAX, text, 'expected YYYY-MM-DD[THH:MM:SS[.mmm][Z]]')

  if (remainder := text[match.end():]) != '':
    logging.debug(f'Unexpected {remainder=} after {match[0]!r}')
    if remainder[0] in _continuation_characters(match):
      raise ParseError(ParseErrorKind.MALFORMED_SYNTAX, text, f'unexpected {remainder!r}')
    raise ParseError(ParseErrorKind.TRAILING_CHARACTERS, text, f'unexpected {remainder!r}')

  year = int(match['year'])
  if match['sign'] == '-':
    year = -year

  try:
    return Timestamp.from_fields(
        year,
        int(match['month']),
        int(match['day']),
        int(match['hour'] or 0),
        int(match['minute'] or 0),
        int(match['second'] or 0),
        int(match['millisecond'] or 0),
    )
  except (InvalidFieldError, ArithmeticOverflowError) as e:
    logging.debug(f'Field out of range in {text=}: {e}')
    raise ParseError(ParseErrorKind.FIELD_OUT_OF_RANGE, text, str(e)) from e
