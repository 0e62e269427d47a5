"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/
    │   ├── domain/          # Scoring engine, zones, date ranges, pacing
    │   ├── application/     # Queries and DTOs with mocked sources
    │   ├── infrastructure/  # File adapters against tmp_path
    │   ├── presentation/    # CLI via typer's CliRunner
    │   └── config/          # Settings loading
    └── shared/              # Deterministic test data factories
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from galfin_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load .env.test if present (never the developer's .env)
TEST_ENV_FILE = PROJECT_ROOT / "config" / ".env.test"
if TEST_ENV_FILE.exists():
    load_dotenv(TEST_ENV_FILE)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Every test sees settings built from its own environment."""
    clear_settings_cache()
    yield
    clear_settings_cache()
