import dataclasses
from dataclasses import dataclass
from typing import Self

from .clock import SYSTEM_WALL_CLOCK, WallClock
from .duration import Duration
from .iso8601 import format_timestamp
from .timestamp import Timestamp


@dataclass(frozen=True, kw_only=True)
class ChangeStamp:
  """When a record was created and when it was last updated."""

  created: Timestamp
  updated: Timestamp

  def __post_init__(self) -> None:
    if self.updated < self.created:
      raise ValueError(f'updated timestamp {self.updated} must not precede created timestamp {self.created}')

  @classmethod
  def now(cls, clock: WallClock = SYSTEM_WALL_CLOCK) -> Self:
    return cls.from_timestamp(Timestamp.now_utc(clock))

  @classmethod
  def from_timestamp(cls, ts: Timestamp) -> Self:
    return cls(created=ts, updated=ts)

  def touch(self, clock: WallClock = SYSTEM_WALL_CLOCK) -> Self:
    return dataclasses.replace(self, updated=max(Timestamp.now_utc(clock), self.updated))

  def has_elapsed_since_updated(self, duration: Duration, clock: WallClock = SYSTEM_WALL_CLOCK) -> bool:
    return self.updated + duration < Timestamp.now_utc(clock)

  def has_elapsed_since_created(self, duration: Duration, clock: WallClock = SYSTEM_WALL_CLOCK) -> bool:
    return self.created + duration < Timestamp.now_utc(clock)

  def created_iso(self) -> str:
    return format_timestamp(self.created)

  def updated_iso(self) -> str:
    return format_timestamp(self.updated)
