"""Tests for date conversion and the settings file."""

from datetime import datetime, timezone
from pathlib import Path

import pytest

from car_rental.config import DEFAULT_LOG_LEVEL
from car_rental.services.errors import InvalidInputError
from car_rental.utils.config_store import (
    StoreSettings,
    load_config_data,
    load_store_settings,
    save_store_settings,
)
from car_rental.utils.dates import to_epoch_seconds


class TestToEpochSeconds:
    """Tests for to_epoch_seconds."""

    def test_digits_pass_through(self):
        assert to_epoch_seconds("1700000000") == 1700000000
        assert to_epoch_seconds(42) == 42

    def test_signed_integers_pass_through(self):
        assert to_epoch_seconds("-5") == -5
        assert to_epoch_seconds("+5") == 5
        assert to_epoch_seconds(" -86400 ") == -86400

    def test_naive_string_is_utc(self):
        assert to_epoch_seconds("1970-01-02") == 86400

    def test_offset_respected(self):
        assert to_epoch_seconds("1970-01-01T01:00:00+01:00") == 0

    def test_aware_datetime(self):
        moment = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)

        assert to_epoch_seconds(moment) == int(moment.timestamp())

    @pytest.mark.parametrize("value", ["not a date", True])
    def test_rejected(self, value):
        with pytest.raises(InvalidInputError):
            to_epoch_seconds(value)


class TestStoreSettings:
    """Tests for the JSON settings file."""

    def test_defaults_when_missing(self, tmp_path):
        settings = load_store_settings(tmp_path / "config.json")

        assert settings == StoreSettings()
        assert settings.log_level == DEFAULT_LOG_LEVEL

    def test_defaults_when_corrupt(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")

        assert load_store_settings(path) == StoreSettings()

    def test_save_keeps_other_keys(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text('{"theme": "dark"}', encoding="utf-8")

        save_store_settings(
            path, StoreSettings(database_path=Path("/data/fleet.db"), log_level="DEBUG")
        )

        assert load_store_settings(path) == StoreSettings(
            database_path=Path("/data/fleet.db"), log_level="DEBUG"
        )
        assert load_config_data(path)["theme"] == "dark"
