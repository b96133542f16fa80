"""
Pytest configuration to ensure the src/ directory is on sys.path for imports.
"""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"

if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

API_URL = "https://hasura.example.com/v1/graphql"
ADMIN_SECRET = "super-secret"


@pytest.fixture
def api_url() -> str:
    return API_URL


@pytest.fixture
def admin_secret() -> str:
    return ADMIN_SECRET
