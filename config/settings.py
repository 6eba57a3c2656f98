"""Application settings and configuration."""
import os
from pathlib import Path
from dotenv import load_dotenv

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)


def _int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


def _float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


class Settings:
    """
    Riot personal keys are capped at 20 req/s and 100 req/120s. The token
    bucket holds a 20-request burst and refills at 10/s; a refresh pass for a
    handful of accounts (1 league call + 1 id call + up to 10 match calls
    each) stays well inside the 2-minute window.
    """

    RIOT_API_KEY: str = os.getenv('RIOT_API_KEY', '')

    # ── Rate limit (token bucket) ─────────────────────────────────────────
    RATE_LIMIT_CAPACITY:       int   = _int('RATE_LIMIT_CAPACITY', 20)
    RATE_LIMIT_REFILL_PER_SEC: float = _float('RATE_LIMIT_REFILL_PER_SEC', 10.0)
    RATE_LIMIT_POLL_INTERVAL:  float = _float('RATE_LIMIT_POLL_INTERVAL', 0.1)

    # ── HTTP ───────────────────────────────────────────────────────────────
    REQUEST_TIMEOUT: int = _int('REQUEST_TIMEOUT', 30)

    # ── Ingestion ──────────────────────────────────────────────────────────
    MATCHES_PER_REFRESH: int = _int('MATCHES_PER_REFRESH', 10)
    # Stored aggregates do not keep the game duration, so the LP backfill
    # brackets [created_at, created_at + this many minutes].
    BACKFILL_MATCH_MINUTES: int = _int('BACKFILL_MATCH_MINUTES', 30)

    # ── Profile view ───────────────────────────────────────────────────────
    RANK_HISTORY_LIMIT:   int = _int('RANK_HISTORY_LIMIT', 30)
    RECENT_MATCHES_LIMIT: int = _int('RECENT_MATCHES_LIMIT', 10)
    TOP_CHAMPIONS:        int = _int('TOP_CHAMPIONS', 5)

    # ── Static data ────────────────────────────────────────────────────────
    DDRAGON_BASE_URL: str = os.getenv('DDRAGON_BASE_URL', 'https://ddragon.leagueoflegends.com')

    # ── Paths ──────────────────────────────────────────────────────────────
    BASE_DIR: Path = Path(__file__).resolve().parent.parent
    DATA_DIR: Path = Path(os.getenv('DATA_DIR', str(BASE_DIR / 'data')))
    DB_DIR:   Path = DATA_DIR / 'db'
    LOG_DIR:  Path = DATA_DIR / 'logs'
    DB_FILE_NAME: str = os.getenv('DB_FILE_NAME', 'tracker.sqlite')

    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')

    @property
    def db_path(self) -> Path:
        return self.DB_DIR / self.DB_FILE_NAME

    @classmethod
    def validate(cls) -> None:
        if not cls.RIOT_API_KEY:
            raise ValueError("RIOT_API_KEY must be set in config/.env")

    @classmethod
    def create_directories(cls) -> None:
        cls.DB_DIR.mkdir(parents=True, exist_ok=True)
        cls.LOG_DIR.mkdir(parents=True, exist_ok=True)


settings = Settings()
