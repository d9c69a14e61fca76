"""Root conftest — shared test configuration."""

import os

# Ensure tests never touch a real database or a deployment's administrator
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ADMINISTRATOR", "admin")
os.environ.setdefault("BASE_URI", "https://x/")
os.environ.setdefault("LOG_FORMAT", "text")
