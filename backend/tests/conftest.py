"""Root conftest - shared test configuration."""

import os

# Keep tests away from real databases and operator config files
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("PLATFORM_CONFIG_PATH", "/nonexistent/platform.yml")
