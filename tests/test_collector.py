"""Tests for sleep_diary.collector."""

import io
from unittest.mock import patch

import pytest
from sleep_diary.collector import ConsoleInput, Questionnaire, UserExit, is_exit_command

ANSWERS = ["23:00", "07:00", "07:10", "15", "4", "420", "20", "10", "2", "late coffee"]


class TestIsExitCommand:
    @pytest.mark.parametrize("answer", ["exit", "quit", "q", "stop", "EXIT", " Quit "])
    def test_exit_words(self, answer):
        assert is_exit_command(answer)

    @pytest.mark.parametrize("answer", ["", "07:00", "0", "quitting"])
    def test_other_answers(self, answer):
        assert not is_exit_command(answer)


class TestCollect:
    def test_full_entry(self, scripted):
        out = io.StringIO()
        raw = Questionnaire(scripted(ANSWERS), out=out).collect(entry_date="2025-01-15")

        assert raw.entry_date == "2025-01-15"
        assert raw.bedtime == "23:00"
        assert raw.wake_time_target == "07:00"
        assert raw.wake_time_actual == "07:10"
        assert raw.nap_minutes == 15
        assert raw.sleep_quality_score == 4
        assert raw.total_sleep_minutes == 420
        assert raw.awake_minutes == 20
        assert raw.sleep_latency_minutes == 10
        assert raw.wake_count == 2
        assert raw.notes == "late coffee"
        assert "2025-01-15" in out.getvalue()

    def test_defaults_to_today(self, scripted):
        with patch("sleep_diary.collector.date") as mock_date:
            mock_date.today.return_value.isoformat.return_value = "2026-03-01"
            raw = Questionnaire(scripted(ANSWERS), out=io.StringIO()).collect()
        assert raw.entry_date == "2026-03-01"

    def test_time_answers_passed_through_raw(self, scripted):
        answers = ["bad:input", "7", *ANSWERS[2:]]
        raw = Questionnaire(scripted(answers), out=io.StringIO()).collect(entry_date="2025-01-15")
        assert raw.bedtime == "bad:input"
        assert raw.wake_time_target == "7"

    def test_answers_are_trimmed(self, scripted):
        answers = ["  23:00 ", *ANSWERS[1:]]
        raw = Questionnaire(scripted(answers), out=io.StringIO()).collect(entry_date="2025-01-15")
        assert raw.bedtime == "23:00"

    def test_blank_number_is_zero(self, scripted):
        answers = ANSWERS[:3] + [""] + ANSWERS[4:]
        raw = Questionnaire(scripted(answers), out=io.StringIO()).collect(entry_date="2025-01-15")
        assert raw.nap_minutes == 0

    @pytest.mark.parametrize("answer", ["abc", "-5", "4.5", "１２"])
    def test_invalid_number_is_zero(self, scripted, answer):
        out = io.StringIO()
        answers = ANSWERS[:5] + [answer] + ANSWERS[6:]
        raw = Questionnaire(scripted(answers), out=out).collect(entry_date="2025-01-15")
        assert raw.total_sleep_minutes == 0
        assert "using 0 as default" in out.getvalue()

    def test_blank_notes(self, scripted):
        answers = ANSWERS[:-1] + [""]
        raw = Questionnaire(scripted(answers), out=io.StringIO()).collect(entry_date="2025-01-15")
        assert raw.notes == ""

    @pytest.mark.parametrize("position", [0, 4, 9])
    def test_exit_at_any_prompt(self, scripted, position):
        answers = list(ANSWERS)
        answers[position] = "quit"
        with pytest.raises(UserExit):
            Questionnaire(scripted(answers), out=io.StringIO()).collect(entry_date="2025-01-15")


class TestConsoleInput:
    def test_reads_line(self):
        with patch("builtins.input", return_value="22:30"):
            assert ConsoleInput().next_line() == "22:30"

    def test_eof_is_exit(self):
        with patch("builtins.input", side_effect=EOFError), pytest.raises(UserExit):
            ConsoleInput().next_line()
