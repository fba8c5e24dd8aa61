import os
import sys

from .rounding import RoundingPolicy


class Config:
    def __init__(self):
        self.DATABASE_URL: str = os.environ.get("DATABASE_URL", "sqlite:///tracker.sqlite")
        self.ROUNDING_POLICY: str = os.environ.get("ROUNDING_POLICY", RoundingPolicy.TWO_SIG_FIGS.value)
        self.RECENT_LIMIT: int = int(os.environ.get("RECENT_LIMIT", "5"))
        self.DB_CONNECT_RETRIES: int = int(os.environ.get("DB_CONNECT_RETRIES", "5"))

    def validate(self):
        try:
            RoundingPolicy.parse(self.ROUNDING_POLICY)
        except ValueError as e:
            print(f"ERROR: ROUNDING_POLICY: {e}", file=sys.stderr)
            sys.exit(1)
        if self.RECENT_LIMIT < 1:
            print("ERROR: RECENT_LIMIT must be a positive integer.", file=sys.stderr)
            sys.exit(1)
        if self.DB_CONNECT_RETRIES < 1:
            print("ERROR: DB_CONNECT_RETRIES must be a positive integer.", file=sys.stderr)
            sys.exit(1)

    @property
    def rounding_policy(self) -> RoundingPolicy:
        return RoundingPolicy.parse(self.ROUNDING_POLICY)

    @property
    def database_url(self) -> str:
        return self.DATABASE_URL


cfg = Config()
