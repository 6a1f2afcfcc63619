from __future__ import annotations

import pytest

from fieldview.configuration import reset_template_configuration
from fieldview.templates import get_template_registry


@pytest.fixture(autouse=True)
def clean_configuration():
    """Every test starts from the default global configuration and an empty registry."""
    reset_template_configuration()
    get_template_registry().clear()
    yield
    reset_template_configuration()
    get_template_registry().clear()


@pytest.fixture
def orders() -> list[dict]:
    return [
        {"id": 1, "status": "Active", "total": 1500000, "currency": "USD", "customer": {"name": "Ada Lovelace"}},
        {"id": 2, "status": "Pending", "total": -42.5, "currency": "EUR", "customer": {"name": "Grace"}},
        {"id": 3, "status": "Unknown", "total": 0, "currency": "", "customer": {"name": ""}},
    ]
