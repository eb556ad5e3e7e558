import time
from collections.abc import Iterable
from typing import Protocol

from absl import logging

from .errors import ClockUnavailableError


class WallClock(Protocol):

  def now_unix_ms(self) -> int:
    """Milliseconds since 1970-01-01T00:00:00Z, floored."""
    ...


class MonotonicClock(Protocol):

  def now_ns(self) -> int:
    """An opaque, non-decreasing instant in nanoseconds. Only differences are meaningful."""
    ...


class SystemWallClock:

  def now_unix_ms(self) -> int:
    try:
      now_ns = time.time_ns()
    except OSError as e:
      raise ClockUnavailableError(f'unable to read the system wall clock: {e}') from e
    return now_ns // 10**6


class SystemMonotonicClock:

  def now_ns(self) -> int:
    try:
      return time.perf_counter_ns()
    except OSError as e:
      raise ClockUnavailableError(f'unable to read the system monotonic clock: {e}') from e


class FixedWallClock:
  """A wall clock that only moves when told to. Meant for tests and scripted time."""

  def __init__(self, unix_ms: int = 0) -> None:
    self.unix_ms = unix_ms

  def now_unix_ms(self) -> int:
    return self.unix_ms

  def advance(self, ms: int) -> None:
    self.unix_ms += ms


class ScriptedMonotonicClock:
  """A monotonic clock for tests and scripted time.

  Replays the given readings in order, then keeps returning the last one.
  """

  def __init__(self, readings_ns: Iterable[int] = (0,)) -> None:
    self._readings_ns = list(readings_ns)
    if len(self._readings_ns) == 0:
      raise ValueError('expected at least one reading')
    self._i = 0

  def now_ns(self) -> int:
    if self._i == len(self._readings_ns):
      logging.debug(f'Scripted clock exhausted, repeating {self._readings_ns[-1]}')
      return self._readings_ns[-1]

    reading = self._readings_ns[self._i]
    self._i += 1
    return reading

  def append(self, *readings_ns: int) -> None:
    self._readings_ns.extend(readings_ns)


SYSTEM_WALL_CLOCK = SystemWallClock()
SYSTEM_MONOTONIC_CLOCK = SystemMonotonicClock()
