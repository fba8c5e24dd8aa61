import dataclasses
import logging
from dataclasses import dataclass
from typing import Any, Mapping

from .clock import clock_to_minutes, parse_clock, window_minutes
from .efficiency import actual_efficiency, vs_target_efficiency
from .rounding import RoundingPolicy, round_pct

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class RawEntry:
    """One night's diary answers, as collected."""

    entry_date: str
    bedtime: str
    wake_time_target: str
    wake_time_actual: str
    nap_minutes: int
    sleep_quality_score: int
    total_sleep_minutes: int
    awake_minutes: int
    sleep_latency_minutes: int
    wake_count: int
    notes: str = ""


@dataclass(frozen=True)
class ComputedMetrics:
    efficiency_actual_pct: float
    efficiency_vs_target_pct: float


@dataclass(frozen=True)
class SleepRecord:
    raw: RawEntry
    metrics: ComputedMetrics
    id: int | None = None

    def with_id(self, record_id: int) -> "SleepRecord":
        return dataclasses.replace(self, id=record_id)

    def as_row(self) -> dict[str, Any]:
        """Flatten to column name -> value (without ``id``)."""
        return {**dataclasses.asdict(self.raw), **dataclasses.asdict(self.metrics)}

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "SleepRecord":
        """Rebuild a stored record; metrics are taken as stored, never recomputed."""
        raw = RawEntry(**{f.name: row[f.name] for f in dataclasses.fields(RawEntry)})
        if raw.notes is None:
            raw = dataclasses.replace(raw, notes="")
        metrics = ComputedMetrics(
            efficiency_actual_pct=float(row["efficiency_actual_pct"]),
            efficiency_vs_target_pct=float(row["efficiency_vs_target_pct"]),
        )
        return cls(raw=raw, metrics=metrics, id=row.get("id"))


class RecordAssembler:
    """Turns a RawEntry into a SleepRecord with rounded efficiency metrics.

    By default an unparseable bedtime or target wake time counts as 00:00 so
    assembly always succeeds; with ``strict=True`` the ClockParseError is
    raised instead.
    """

    def __init__(self, policy: RoundingPolicy = RoundingPolicy.TWO_SIG_FIGS, strict: bool = False):
        self.policy = policy
        self.strict = strict

    def _minutes(self, value: str) -> int:
        if self.strict:
            return parse_clock(value)
        return clock_to_minutes(value)

    def target_window(self, raw: RawEntry) -> int:
        return window_minutes(self._minutes(raw.bedtime), self._minutes(raw.wake_time_target))

    def assemble(self, raw: RawEntry) -> SleepRecord:
        window = self.target_window(raw)
        actual = actual_efficiency(raw.total_sleep_minutes, raw.awake_minutes, raw.sleep_latency_minutes)
        vs_target = vs_target_efficiency(window, raw.total_sleep_minutes)
        metrics = ComputedMetrics(
            efficiency_actual_pct=round_pct(actual, self.policy),
            efficiency_vs_target_pct=round_pct(vs_target, self.policy),
        )
        log.debug(
            "[%s] window=%d min, efficiency=%.2f%%, vs target=%.2f%%",
            raw.entry_date,
            window,
            metrics.efficiency_actual_pct,
            metrics.efficiency_vs_target_pct,
        )
        return SleepRecord(raw=raw, metrics=metrics)


def assemble(raw: RawEntry, policy: RoundingPolicy = RoundingPolicy.TWO_SIG_FIGS) -> SleepRecord:
    return RecordAssembler(policy).assemble(raw)
