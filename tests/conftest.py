import pytest
from sleep_diary.db import init_schema, wait_for_db
from sleep_diary.record import RawEntry


class ScriptedInput:
    """InputProvider that replays canned answers."""

    def __init__(self, lines):
        self.lines = list(lines)

    def next_line(self) -> str:
        return self.lines.pop(0)


@pytest.fixture
def scripted():
    return ScriptedInput


@pytest.fixture
def raw_entry():
    return RawEntry(
        entry_date="2025-01-15",
        bedtime="23:00",
        wake_time_target="07:00",
        wake_time_actual="07:10",
        nap_minutes=0,
        sleep_quality_score=4,
        total_sleep_minutes=420,
        awake_minutes=20,
        sleep_latency_minutes=10,
        wake_count=2,
        notes="late coffee",
    )


@pytest.fixture
def engine(tmp_path):
    engine = wait_for_db(f"sqlite:///{tmp_path / 'tracker.sqlite'}", retries=1, delay=0)
    init_schema(engine)
    yield engine
    engine.dispose()
