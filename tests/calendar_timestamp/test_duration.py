from absl.testing import parameterized

from calendar_timestamp.duration import Duration
from calendar_timestamp.errors import ArithmeticOverflowError, ParseError, ParseErrorKind


class TestDuration(parameterized.TestCase):
  MAX = 9223372036854775807
  MIN = -9223372036854775808

  @parameterized.parameters(
      (MIN - 1, ArithmeticOverflowError),
      (MAX + 1, ArithmeticOverflowError),
  )
  def test_invalidValue(self, duration_ms: int, expected_exception: type[Exception]):
    with self.assertRaises(expected_exception):
      Duration(duration_ms)

  @parameterized.parameters(
      ('+00:00:00.000', Duration.ZERO),
      ('+00:00:00.001', Duration.MILLISECOND),
      ('-00:00:00.001', Duration(-1)),
      ('+00:00:01.000', Duration.SECOND),
      ('-00:00:01.000', -Duration.SECOND),
      ('+00:01:00.000', Duration.MINUTE),
      ('+01:00:00.000', Duration.HOUR),
      ('-01:00:00.000', -Duration.HOUR),
      ('+24:00:00.000', Duration.DAY),
      ('+168:00:00.000', Duration.DAY * 7),
      ('+2562047788015:12:55.807', Duration.MAX),
      ('-2562047788015:12:55.808', Duration.MIN),
  )
  def test_str(self, s: str, duration: Duration):
    self.assertEqual(str(duration), s)

  def test_fromParts(self):
    duration = Duration.from_parts(days=1, hours=2, minutes=3, seconds=4, milliseconds=5)

    self.assertEqual(duration, Duration(93_784_005))
    self.assertEqual(duration.hours(), 2)
    self.assertEqual(duration.minutes(), 3)
    self.assertEqual(duration.seconds(), 4)
    self.assertEqual(duration.milliseconds(), 5)
    self.assertEqual(duration.to_days(), 1)
    self.assertEqual(duration.to_hours(), 26)
    self.assertEqual(duration.to_minutes(), 26 * 60 + 3)
    self.assertEqual(duration.to_seconds(), (26 * 60 + 3) * 60 + 4)

  def test_totals_negative_truncateTowardZero(self):
    duration = Duration(-93_784_005)

    self.assertEqual(duration.to_days(), -1)
    self.assertEqual(duration.to_hours(), -26)
    self.assertEqual(duration.hours(), 2)
    self.assertEqual(duration.milliseconds(), 5)

  @parameterized.parameters(
      (Duration(1), Duration(1), Duration(2)),
      (Duration.MAX, Duration.MIN, Duration(-1)),
      (Duration.ZERO, Duration(-5), Duration(-5)),
  )
  def test_add(self, duration_1: Duration, duration_2: Duration, expected: Duration):
    self.assertEqual(duration_1 + duration_2, expected)
    self.assertEqual(expected - duration_2, duration_1)

  def test_arithmetic_overflow_raises(self):
    with self.assertRaises(ArithmeticOverflowError):
      Duration.MAX + Duration(1)
    with self.assertRaises(ArithmeticOverflowError):
      Duration.MIN - Duration(1)
    with self.assertRaises(ArithmeticOverflowError):
      -Duration.MIN
    with self.assertRaises(ArithmeticOverflowError):
      abs(Duration.MIN)
    with self.assertRaises(ArithmeticOverflowError):
      Duration.MAX * 2

  @parameterized.parameters(
      (Duration(1), Duration(1), 1.0),
      (Duration.HOUR, Duration.MINUTE, 60.0),
      (Duration.ZERO, Duration(1), 0.0),
      (Duration(-3), Duration(2), -1.5),
  )
  def test_trueDivision(self, duration_1: Duration, duration_2: Duration, ratio: float):
    self.assertEqual(duration_1 / duration_2, ratio)

  @parameterized.parameters(
      (Duration.ZERO, 5, Duration.ZERO),
      (Duration(1), 100, Duration(100)),
      (Duration(-1), 100, Duration(-100)),
  )
  def test_multiplication(self, duration: Duration, ratio: int, expected_duration: Duration):
    self.assertEqual(duration * ratio, expected_duration)
    self.assertEqual(ratio * duration, expected_duration)

  def test_ordering(self):
    self.assertLess(Duration.MIN, Duration.ZERO)
    self.assertLess(Duration.ZERO, Duration.MAX)
    self.assertGreater(Duration.HOUR, Duration.MINUTE)

  @parameterized.parameters(
      ('0', Duration.ZERO),
      ('0000', Duration.ZERO),
      ('100', Duration(100)),
      ('-100', Duration(-100)),
      ('9223372036854775807', Duration.MAX),
      ('+00:00:00.000', Duration.ZERO),
      ('-00:00:00.001', Duration(-1)),
      ('+01:02:03.004', Duration.from_parts(hours=1, minutes=2, seconds=3, milliseconds=4)),
      ('+168:00:00.000', Duration.DAY * 7),
      ('-2562047788015:12:55.808', Duration.MIN),
  )
  def test_build(self, s: str, expected_duration: Duration):
    self.assertEqual(Duration.build(s), expected_duration)

  @parameterized.parameters(
      ('aaaaa', ParseErrorKind.MALFORMED_SYNTAX),
      ('00:00:00.000', ParseErrorKind.MALFORMED_SYNTAX),
      ('=00:00:00.000', ParseErrorKind.MALFORMED_SYNTAX),
      ('+0:00:00.000', ParseErrorKind.MALFORMED_SYNTAX),
      ('+00:0:00.000', ParseErrorKind.MALFORMED_SYNTAX),
      ('+00:00:00.0000', ParseErrorKind.MALFORMED_SYNTAX),
      ('+00:60:00.000', ParseErrorKind.FIELD_OUT_OF_RANGE),
      ('+00:00:60.000', ParseErrorKind.FIELD_OUT_OF_RANGE),
      ('+2562047788015:12:55.808', ParseErrorKind.FIELD_OUT_OF_RANGE),
  )
  def test_build_invalidString_raises(self, s: str, expected_kind: ParseErrorKind):
    with self.assertRaises(ParseError) as context:
      Duration.build(s)
    self.assertEqual(context.exception.kind, expected_kind)

  def test_build_integerOutOfRange_raises(self):
    with self.assertRaises(ArithmeticOverflowError):
      Duration.build('9223372036854775808')
