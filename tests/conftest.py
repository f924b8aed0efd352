import json
from datetime import date
from pathlib import Path

import pytest
from structlog.testing import capture_logs


FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def captured_logs():
    """Capture structlog events so they neither print nor leak between tests."""
    with capture_logs() as logs:
        yield logs


@pytest.fixture
def today():
    """Fixed reference day for selection-period classification."""
    return date(2025, 10, 20)


@pytest.fixture
def billing_config_full_fees():
    """Load a flat-rate config with every fee and tax set."""
    with open(FIXTURES_DIR / "billing" / "config_full_fees.json") as f:
        return json.load(f)


@pytest.fixture
def billing_config_seasonal():
    """Load a flat-rate-per-season config."""
    with open(FIXTURES_DIR / "billing" / "config_seasonal.json") as f:
        return json.load(f)


@pytest.fixture
def stay_summer_week():
    """Load a stay inside the summer season."""
    with open(FIXTURES_DIR / "billing" / "stay_summer_week.json") as f:
        return json.load(f)


@pytest.fixture
def reservation_periods():
    """Load a three-family rotation's reservation period rows."""
    with open(FIXTURES_DIR / "selection" / "reservation_periods.json") as f:
        return json.load(f)
