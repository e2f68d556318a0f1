"""
Pytest configuration to ensure paths are set up correctly for tests.

This allows imports like `from handlers import customer_list` to work
when running tests, simulating the Lambda environment where code
is deployed from the src/ directory.
"""

import os
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest


def _ensure_paths_on_sys_path() -> None:
    """Add repository root AND src/ to sys.path if missing.

    The src/ directory is added to simulate Lambda's import behavior,
    where Code.from_asset("src") makes src/ the root of the package.
    """
    repo_root = Path(__file__).resolve().parents[1]
    src_root = repo_root / "src"

    # Add repo root first (for imports like infrastructure.*)
    root_str = str(repo_root)
    if root_str not in sys.path:
        sys.path.insert(0, root_str)

    # Add src/ for Lambda-style imports (from handlers import ...)
    src_str = str(src_root)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)


_ensure_paths_on_sys_path()

# Lambda environment variables used by handlers
os.environ.setdefault("ENVIRONMENT", "dev")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("DEFAULT_PAGE_SIZE", "20")
os.environ.setdefault("MAX_PAGE_SIZE", "100")


@pytest.fixture
def make_customer():
    """Factory for Customer records with sensible defaults."""
    from models.customer import Customer

    def _make(customer_id: str, **overrides) -> Customer:
        values = {
            "id": customer_id,
            "name": f"Customer {customer_id}",
            "domain": f"customer{customer_id}.com",
            "mrr": 1000,
            "last_active": datetime(2026, 1, 1, tzinfo=timezone.utc),
            "health_score": 75,
            "owner": "Sarah Johnson",
        }
        values.update(overrides)
        return Customer(**values)

    return _make


@pytest.fixture
def seed_store():
    from repositories.customer_store import CustomerStore

    return CustomerStore.from_seed()


@pytest.fixture
def customer_service(seed_store):
    from services.customer_service import CustomerService

    return CustomerService(store=seed_store)


@pytest.fixture
def reset_handler_services():
    """Drop lazily-built services so each test starts cold."""
    from handlers import customer_list

    customer_list._customer_service = None
    yield
    customer_list._customer_service = None
