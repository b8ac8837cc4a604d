"""Global pytest configuration."""

import os

# Set before any imports: tests use SQLite and never reach a mail server
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ["SMTP_HOST"] = ""
