from absl.testing import parameterized

from calendar_timestamp.changestamp import ChangeStamp
from calendar_timestamp.clock import FixedWallClock
from calendar_timestamp.duration import Duration
from calendar_timestamp.timestamp import Timestamp


class TestChangeStamp(parameterized.TestCase):
  UNIX_MS = 1_685_284_606_076

  def setUp(self):
    self.clock = FixedWallClock(self.UNIX_MS)
    return super().setUp()

  def test_now(self):
    stamp = ChangeStamp.now(self.clock)

    self.assertEqual(stamp.created, Timestamp.from_unix_millis(self.UNIX_MS))
    self.assertEqual(stamp.updated, stamp.created)
    self.assertEqual(stamp.created_iso(), '2023-05-28T14:36:46.076Z')

  def test_touch_returnsUpdatedCopy(self):
    stamp = ChangeStamp.now(self.clock)
    self.clock.advance(1_000)

    touched = stamp.touch(self.clock)

    self.assertEqual(touched.created, stamp.created)
    self.assertEqual(touched.updated, stamp.created + Duration.SECOND)
    self.assertEqual(touched.updated_iso(), '2023-05-28T14:36:47.076Z')
    self.assertEqual(stamp.updated, stamp.created)

  def test_touch_clockWentBackwards_keepsUpdated(self):
    stamp = ChangeStamp.now(self.clock)
    self.clock.advance(-1_000)

    self.assertEqual(stamp.touch(self.clock), stamp)

  def test_updatedBeforeCreated_raises(self):
    with self.assertRaises(ValueError):
      ChangeStamp(created=Timestamp(1), updated=Timestamp(0))

  @parameterized.parameters(
      (999, False),
      (1_000, False),
      (1_001, True),
  )
  def test_hasElapsedSinceUpdated(self, advance_ms: int, expected: bool):
    stamp = ChangeStamp.from_timestamp(Timestamp.from_unix_millis(self.UNIX_MS))
    self.clock.advance(advance_ms)

    self.assertEqual(stamp.has_elapsed_since_updated(Duration.SECOND, self.clock), expected)

  def test_hasElapsedSinceCreated_ignoresUpdates(self):
    stamp = ChangeStamp.now(self.clock)
    self.clock.advance(2_000)
    stamp = stamp.touch(self.clock)

    self.assertTrue(stamp.has_elapsed_since_created(Duration.SECOND, self.clock))
    self.assertFalse(stamp.has_elapsed_since_updated(Duration.SECOND, self.clock))
