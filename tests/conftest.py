"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pandas as pd
import pytest


@pytest.fixture
def accounts() -> dict[str, str]:
    """Provide an injective mapping of account IDs to account names."""
    return {
        "000011112222": "Company A",
        "333344445555": "Company B",
        "777788889999": "Company C",
    }


@pytest.fixture
def regions() -> dict[str, str]:
    """Provide a mapping where several accounts share a region."""
    return {
        "000011112222": "us-east-1",
        "333344445555": "eu-west-1",
        "777788889999": "us-east-1",
    }


@pytest.fixture
def billing_frame() -> pd.DataFrame:
    """Provide a small billing DataFrame with a missing value."""
    return pd.DataFrame(
        {
            "BillingAccountId": ["000011112222", "000011112222", "555566667777"],
            "BillingAccountName": ["Company A", "Company A", "Company B"],
            "x_CustomTag": ["alpha", pd.NA, "gamma"],
            "BilledCost": [1.5, 0.0, 2.25],
        }
    )
