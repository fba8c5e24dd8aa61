"""Nightly sleep-diary entries and their efficiency metrics."""

from .clock import ClockParseError, clock_to_minutes, parse_clock, window_minutes
from .efficiency import actual_efficiency, time_in_bed, vs_target_efficiency
from .record import ComputedMetrics, RawEntry, RecordAssembler, SleepRecord, assemble
from .rounding import RoundingPolicy, round_pct

__all__ = [
    "ClockParseError",
    "ComputedMetrics",
    "RawEntry",
    "RecordAssembler",
    "RoundingPolicy",
    "SleepRecord",
    "actual_efficiency",
    "assemble",
    "clock_to_minutes",
    "parse_clock",
    "round_pct",
    "time_in_bed",
    "vs_target_efficiency",
    "window_minutes",
]
