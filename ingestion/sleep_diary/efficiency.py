"""Sleep efficiency ratios, as unrounded percentages.

Neither ratio is clamped: sleeping longer than the planned window gives a
value above 100.
"""


def time_in_bed(total_sleep: int, awake: int, latency: int) -> int:
    return total_sleep + awake + latency


def actual_efficiency(total_sleep: int, awake: int, latency: int) -> float:
    """Time asleep as a share of time in bed (asleep + awake + latency)."""
    in_bed = time_in_bed(total_sleep, awake, latency)
    if in_bed == 0:
        return 0.0
    return 100 * total_sleep / in_bed


def vs_target_efficiency(target_window: int, total_sleep: int) -> float:
    """Time asleep as a share of the planned bed-to-wake window."""
    if target_window == 0:
        return 0.0
    return 100 * total_sleep / target_window
