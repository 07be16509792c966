"""
Shared pytest fixtures for the country lookup tests.
"""
from __future__ import annotations

import os

import pytest

# Must be set before config.settings is first imported
os.environ["RATE_LIMIT_ENABLED"] = "0"

from config import settings  # noqa: E402
from models.country import CountryRecord  # noqa: E402
from services.country_service import CountryTable, load  # noqa: E402


@pytest.fixture(scope="session")
def country_table() -> CountryTable:
    """The bundled dataset, loaded once for the whole run."""
    return load(settings.country_data_path)


@pytest.fixture
def small_table() -> CountryTable:
    jp = CountryRecord(flag="🇯🇵", currency_code="JPY", phone_code="+81")
    kr = CountryRecord(flag="🇰🇷", currency_code="KRW", phone_code="+82")
    us = CountryRecord(flag="🇺🇸", currency_code="USD", phone_code="+1")
    return CountryTable({
        "japan": jp,
        "korea": kr,
        "south korea": kr,
        "usa": us,
        "united states": us,
    })


@pytest.fixture
def write_dataset(tmp_path):
    """Write dataset text to a file and return its path."""
    def _write(text: str, name: str = "countries.csv"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
