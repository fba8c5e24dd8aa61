import argparse
import logging
import os
from datetime import date

from .collector import ConsoleInput, Questionnaire, UserExit
from .config import cfg
from .db import init_schema, wait_for_db
from .record import RecordAssembler, SleepRecord
from .rounding import RoundingPolicy
from .store import SleepStore

log = logging.getLogger(__name__)


def _iso_date(value: str) -> str:
    try:
        return date.fromisoformat(value).isoformat()
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a YYYY-MM-DD date: {value!r}") from None


def _positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        n = 0
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {value!r}")
    return n


def print_summary(record: SleepRecord):
    raw, m = record.raw, record.metrics
    print(f"\nEntry saved successfully with ID: {record.id}")
    print(f"Sleep Efficiency: {m.efficiency_actual_pct:.2f}%")
    print(f"Efficiency vs Target: {m.efficiency_vs_target_pct:.2f}%")
    print(f"Total Sleep: {raw.total_sleep_minutes / 60:.1f} hours")


def print_recent(records: list[SleepRecord]):
    if not records:
        print("No entries recorded yet.")
        return
    print("--- Recent Entries ---")
    for i, rec in enumerate(records, 1):
        raw, m = rec.raw, rec.metrics
        print(
            f"{i}. {raw.entry_date} - {raw.total_sleep_minutes / 60:.1f} hrs sleep, "
            f"{m.efficiency_actual_pct:.2f}% efficiency, "
            f"{m.efficiency_vs_target_pct:.2f}% of target, quality {raw.sleep_quality_score}/5"
        )


def main():
    parser = argparse.ArgumentParser(description="Nightly sleep diary")
    parser.add_argument(
        "--recent",
        nargs="?",
        type=_positive_int,
        const=0,
        metavar="N",
        help="Show the N most recent entries (default RECENT_LIMIT) and exit",
    )
    parser.add_argument(
        "--rounding",
        choices=[p.value for p in RoundingPolicy],
        help="Rounding applied to efficiency percentages",
    )
    parser.add_argument("--date", type=_iso_date, help="Entry date (YYYY-MM-DD), defaults to today")
    args = parser.parse_args()

    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    )

    cfg.validate()
    policy = RoundingPolicy.parse(args.rounding) if args.rounding else cfg.rounding_policy

    engine = wait_for_db()
    init_schema(engine)
    store = SleepStore(engine)

    if args.recent is not None:
        # bare --recent gives const=0
        print_recent(store.list_recent(limit=args.recent or cfg.RECENT_LIMIT))
        return

    try:
        raw = Questionnaire(ConsoleInput()).collect(entry_date=args.date)
    except UserExit:
        print("\nGoodbye!")
        return

    record = RecordAssembler(policy).assemble(raw)
    record = record.with_id(store.save(record))
    print_summary(record)


if __name__ == "__main__":
    main()
