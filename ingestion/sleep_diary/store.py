import logging

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from .db import answers
from .record import SleepRecord

log = logging.getLogger(__name__)

_COLUMNS = [c.name for c in answers.columns]


def _is_retryable(exc: BaseException) -> bool:
    # SQLite reports a concurrent writer as "database is locked" / "database is busy"
    if isinstance(exc, OperationalError):
        msg = str(exc).lower()
        return "locked" in msg or "busy" in msg
    return False


class SleepStore:
    """Persists assembled SleepRecords; the database assigns their ids."""

    def __init__(self, engine: Engine):
        self.engine = engine

    @retry(
        stop=stop_after_attempt(5),
        wait=wait_exponential(multiplier=0.2, max=2),
        retry=retry_if_exception(_is_retryable),
        before_sleep=before_sleep_log(log, logging.WARNING),
        reraise=True,
    )
    def _insert(self, row: dict) -> int:
        with self.engine.begin() as conn:
            result = conn.execute(answers.insert().values(**row))
            return result.inserted_primary_key[0]

    def save(self, record: SleepRecord) -> int:
        """Insert ``record`` and return its new id."""
        if record.id is not None:
            raise ValueError(f"Record already stored with id {record.id}")
        record_id = self._insert(record.as_row())
        log.info("[%s] Saved entry %d", record.raw.entry_date, record_id)
        return record_id

    def list_recent(self, limit: int | None = None, since: str | None = None) -> list[SleepRecord]:
        """Stored records, newest first. ``since`` keeps entries dated on or after it (YYYY-MM-DD)."""
        if limit is not None and limit < 1:
            raise ValueError(f"limit must be a positive integer, got {limit}")
        sql = f"SELECT {', '.join(_COLUMNS)} FROM answers"
        params: dict = {}
        if since:
            sql += " WHERE entry_date >= :since"
            params["since"] = since
        sql += " ORDER BY id DESC"
        if limit is not None:
            sql += " LIMIT :limit"
            params["limit"] = int(limit)
        with self.engine.connect() as conn:
            rows = conn.execute(text(sql), params).mappings().all()
        return [SleepRecord.from_row(row) for row in rows]
