import logging
import time

from sqlalchemy import Column, Float, Integer, MetaData, Table, Text, create_engine, text
from sqlalchemy.engine import Engine

from .config import cfg

log = logging.getLogger(__name__)

metadata = MetaData()

answers = Table(
    "answers",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("entry_date", Text, nullable=False),
    Column("bedtime", Text, nullable=False),
    Column("wake_time_actual", Text, nullable=False),
    Column("wake_time_target", Text, nullable=False),
    Column("notes", Text),
    Column("nap_minutes", Integer, nullable=False),
    Column("sleep_quality_score", Integer, nullable=False),
    Column("total_sleep_minutes", Integer, nullable=False),
    Column("awake_minutes", Integer, nullable=False),
    Column("sleep_latency_minutes", Integer, nullable=False),
    Column("wake_count", Integer, nullable=False),
    Column("efficiency_actual_pct", Float, nullable=False),
    Column("efficiency_vs_target_pct", Float, nullable=False),
    # ids are never reused after a delete
    sqlite_autoincrement=True,
)


def init_schema(engine: Engine):
    metadata.create_all(engine, checkfirst=True)


def wait_for_db(url: str | None = None, retries: int | None = None, delay: float = 2.0) -> Engine:
    if retries is None:
        retries = cfg.DB_CONNECT_RETRIES
    if retries < 1:
        raise ValueError(f"retries must be at least 1, got {retries}")
    engine = create_engine(url or cfg.database_url, pool_pre_ping=True)
    for attempt in range(1, retries + 1):
        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            log.info("Database ready")
            return engine
        except Exception as e:
            log.warning("Waiting for database... (%d/%d) %s: %s", attempt, retries, type(e).__name__, e)
            time.sleep(delay)
    raise RuntimeError("Database not available after %d retries" % retries)
