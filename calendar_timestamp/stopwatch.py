import enum
from typing import Self

from absl import logging

from .clock import SYSTEM_MONOTONIC_CLOCK, MonotonicClock
from .errors import InvalidTransitionError
from .precisetime import PreciseDuration


class StopWatchState(enum.StrEnum):
  STOPPED = 'stopped'
  RUNNING = 'running'
  PAUSED = 'paused'


class StopWatch:
  """Measures elapsed time with a monotonic clock.

  Readings from the clock are opaque instants and never turn into calendar time.
  Instances are not thread safe; share one across threads only behind a lock.

  Transitions:
    STOPPED --start--> RUNNING --pause--> PAUSED --resume--> RUNNING
    RUNNING/PAUSED --stop--> STOPPED, any state --reset--> STOPPED (zeroed)
  """

  def __init__(self, clock: MonotonicClock = SYSTEM_MONOTONIC_CLOCK) -> None:
    self._clock = clock
    self._state = StopWatchState.STOPPED
    self._accumulated = PreciseDuration.ZERO
    self._reference_ns: int | None = None
    # Highest reading seen since the reference was taken.
    self._latest_ns: int | None = None
    self._laps: list[PreciseDuration] = []
    self._lapped = PreciseDuration.ZERO

  @classmethod
  def started(cls, clock: MonotonicClock = SYSTEM_MONOTONIC_CLOCK) -> Self:
    stopwatch = cls(clock)
    stopwatch.start()
    return stopwatch

  def state(self) -> StopWatchState:
    return self._state

  def start(self) -> None:
    """Begins a new measurement, discarding the previous one and its laps."""
    self._require(StopWatchState.STOPPED, action='start')
    self._accumulated = PreciseDuration.ZERO
    self._laps.clear()
    self._lapped = PreciseDuration.ZERO
    self._reference_ns = self._latest_ns = self._clock.now_ns()
    self._state = StopWatchState.RUNNING
    logging.debug(f'Stopwatch started at {self._reference_ns}ns.')

  def pause(self) -> None:
    self._require(StopWatchState.RUNNING, action='pause')
    self._accumulated += self._since_reference()
    self._reference_ns = self._latest_ns = None
    self._state = StopWatchState.PAUSED
    logging.debug(f'Stopwatch paused, accumulated {self._accumulated}.')

  def resume(self) -> None:
    self._require(StopWatchState.PAUSED, action='resume')
    self._reference_ns = self._latest_ns = self._clock.now_ns()
    self._state = StopWatchState.RUNNING
    logging.debug(f'Stopwatch resumed at {self._reference_ns}ns.')

  def stop(self) -> None:
    self._require(StopWatchState.RUNNING, StopWatchState.PAUSED, action='stop')
    if self._state == StopWatchState.RUNNING:
      self._accumulated += self._since_reference()
    self._reference_ns = self._latest_ns = None
    self._state = StopWatchState.STOPPED
    logging.debug(f'Stopwatch stopped, accumulated {self._accumulated}.')

  def reset(self) -> None:
    self._state = StopWatchState.STOPPED
    self._accumulated = PreciseDuration.ZERO
    self._reference_ns = self._latest_ns = None
    self._laps.clear()
    self._lapped = PreciseDuration.ZERO
    logging.debug('Stopwatch reset.')

  def elapsed(self) -> PreciseDuration:
    if self._state == StopWatchState.RUNNING:
      return self._accumulated + self._since_reference()
    return self._accumulated

  def lap(self) -> PreciseDuration:
    """Records and returns the time elapsed since the previous lap, or since start for the first one."""
    self._require(StopWatchState.RUNNING, action='lap')
    elapsed = self.elapsed()
    split = PreciseDuration.between(self._lapped.nanoseconds, elapsed.nanoseconds)
    self._laps.append(split)
    self._lapped = elapsed
    return split

  def laps(self) -> tuple[PreciseDuration, ...]:
    return tuple(self._laps)

  def elapsed_nanoseconds(self) -> int:
    return self.elapsed().to_nanoseconds()

  def elapsed_microseconds(self) -> int:
    return self.elapsed().to_microseconds()

  def elapsed_milliseconds(self) -> int:
    return self.elapsed().to_milliseconds()

  def elapsed_seconds(self) -> int:
    return self.elapsed().to_seconds()

  def elapsed_minutes(self) -> int:
    return self.elapsed().to_minutes()

  def elapsed_hours(self) -> int:
    return self.elapsed().to_hours()

  def elapsed_days(self) -> int:
    return self.elapsed().to_days()

  def _since_reference(self) -> PreciseDuration:
    assert self._reference_ns is not None and self._latest_ns is not None, 'expected a reference instant while running'
    now_ns = self._clock.now_ns()
    if now_ns < self._latest_ns:
      logging.warning(f'Monotonic clock went backwards from {self._latest_ns}ns to {now_ns}ns, '
                      'holding elapsed time at the latest reading.')
    else:
      self._latest_ns = now_ns
    return PreciseDuration.between(self._reference_ns, self._latest_ns)

  def _require(self, *states: StopWatchState, action: str) -> None:
    if self._state not in states:
      raise InvalidTransitionError(self._state, action)

  def __repr__(self) -> str:
    return f'{self.__class__.__name__}(state={self._state}, accumulated={self._accumulated})'
