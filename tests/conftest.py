"""🧪 Pytest configuration and shared fixtures."""

import pytest

from datalink.config import get_settings
from datalink.link import Link


@pytest.fixture
def patients_link():
    """Keyed link from patients to visits."""
    return Link(
        from_dataset="patients",
        to_dataset="visits",
        link_type="keyed",
        link_columns=[{"id": "patient_id"}],
    )


@pytest.fixture
def sample_links_yaml():
    """Sample YAML link definitions."""
    return """
links:
  - from_dataset: patients
    to_dataset: visits
    link_type: keyed
    link_columns:
      - {id: patient_id}

  - from_dataset: stations
    to_dataset: readings
    link_columns:
      - {station: station_id, year: yr}
      - {code: station_code}
"""


# Environment setup for tests
@pytest.fixture(autouse=True)
def setup_test_env(monkeypatch):
    """Reset link settings for every test."""
    monkeypatch.delenv("DATALINK_DEFAULT_LINK_TYPE", raising=False)
    monkeypatch.delenv("DATALINK_ARROW", raising=False)

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
