"""Interactive collection of a diary entry.

The questionnaire reads answers from an InputProvider, so it can be driven by
a console, a script, or a test without touching stdin.
"""

import logging
import sys
from datetime import date
from typing import Protocol, TextIO

from .record import RawEntry

log = logging.getLogger(__name__)

EXIT_COMMANDS = frozenset({"exit", "quit", "q", "stop"})


class UserExit(Exception):
    """The user asked to stop answering."""


class InputProvider(Protocol):
    def next_line(self) -> str: ...


class ConsoleInput:
    def next_line(self) -> str:
        try:
            return input()
        except EOFError:
            raise UserExit() from None


def is_exit_command(answer: str) -> bool:
    return answer.strip().lower() in EXIT_COMMANDS


class Questionnaire:
    def __init__(self, provider: InputProvider, out: TextIO | None = None):
        self.provider = provider
        self.out = out or sys.stdout

    def prompt(self, message: str) -> str:
        self.out.write(message)
        self.out.flush()
        answer = self.provider.next_line().strip()
        if is_exit_command(answer):
            raise UserExit()
        return answer

    def prompt_int(self, message: str) -> int:
        """Blank answers count as 0; so do non-numeric or negative ones, with a notice."""
        answer = self.prompt(message)
        if not answer:
            return 0
        if not answer.isascii() or not answer.isdigit():
            print("Invalid number format, using 0 as default.", file=self.out)
            log.debug("Non-numeric answer %r replaced by 0", answer)
            return 0
        return int(answer)

    def collect(self, entry_date: str | None = None) -> RawEntry:
        entry_date = entry_date or date.today().isoformat()
        print(f"--- Sleep Diary for {entry_date} ---", file=self.out)
        print("Type 'exit', 'quit' or 'q' at any prompt to stop.", file=self.out)

        bedtime = self.prompt("What time did you go to bed? (HH:MM, e.g. 22:30): ")
        wake_target = self.prompt("What time did you plan to wake up? (HH:MM, e.g. 07:00): ")
        wake_actual = self.prompt("What time did you actually wake up? (HH:MM, e.g. 07:15): ")
        nap = self.prompt_int("How many minutes did you nap yesterday? (0 if none): ")
        quality = self.prompt_int("Rate your sleep quality (1=very poor ... 5=excellent): ")
        total = self.prompt_int("How many minutes did you sleep in total? ")
        awake = self.prompt_int("How many minutes were you awake during the night? ")
        latency = self.prompt_int("How many minutes did it take to fall asleep? ")
        wake_count = self.prompt_int("How many times did you wake up during the night? ")
        notes = self.prompt("Any additional notes? (press Enter to skip): ")

        return RawEntry(
            entry_date=entry_date,
            bedtime=bedtime,
            wake_time_target=wake_target,
            wake_time_actual=wake_actual,
            nap_minutes=nap,
            sleep_quality_score=quality,
            total_sleep_minutes=total,
            awake_minutes=awake,
            sleep_latency_minutes=latency,
            wake_count=wake_count,
            notes=notes,
        )
