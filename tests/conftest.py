"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/                  # Fast, isolated tests
    │   ├── domain/            # Cache keys, relevance, content policy
    │   ├── application/       # Services with in-memory fakes
    │   ├── infrastructure/    # Cache stores, config, HTTP clients
    │   └── mediahub_auth/     # Signatures, cookies, password hashing
    └── integration/           # In-memory SQLite and the FastAPI app
        ├── api/
        └── persistence/
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from mediahub_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load .env.test for tests if present
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.test").exists():
    load_dotenv(CONFIG_DIR / ".env.test")


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Every test starts from freshly loaded settings."""
    clear_settings_cache()
    yield
    clear_settings_cache()
