"""Root conftest — shared test configuration."""

import os

# Tests never touch the on-disk database or seed sample rows
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SEED_SAMPLE_DATA", "false")
os.environ.setdefault("STORE_LATENCY_MS", "0")
os.environ.setdefault("LOG_FORMAT", "text")
