"""Tests for the command-line entry point."""

import json

import pytest

from car_rental.app import main
from car_rental.utils.config_store import StoreSettings, load_store_settings


@pytest.fixture
def run(app_home, tmp_path, capsys):
    db_path = tmp_path / "cli.db"

    def _run(*argv):
        code = main(["--db", str(db_path), *argv])
        return code, json.loads(capsys.readouterr().out)

    return _run


class TestCli:
    """Tests for main()."""

    def test_add_and_get_car(self, run):
        code, car = run("add-car", "Toyota", "Corolla", "2020")

        assert code == 0
        assert car == {
            "id": 0,
            "make": "Toyota",
            "model": "Corolla",
            "year": 2020,
            "available": True,
        }
        assert run("get-car", "0") == (0, car)

    def test_not_found_payload(self, run):
        code, payload = run("get-car", "999")

        assert code == 1
        assert payload == {"NotFound": {"msg": "Car with id=999 not found"}}

    def test_invalid_input_payload(self, run):
        code, payload = run("add-car", "", "Corolla", "2020")

        assert code == 1
        assert list(payload) == ["InvalidInput"]

    def test_rental_request_with_date_strings(self, run):
        code, request = run(
            "add-rental-request", "0", "7", "1970-01-02", "172800", "active"
        )

        assert code == 0
        assert request == {
            "id": 0,
            "car_id": 0,
            "customer_id": 7,
            "start_date": 86400,
            "end_date": 172800,
            "status": "Active",
        }
        assert run("list-rental-requests-for-customer", "7") == (0, [request])
        assert run("list-rental-requests-for-car", "1") == (0, [])

    def test_bad_date_is_invalid_input(self, run):
        code, payload = run(
            "add-rental-request", "0", "7", "someday", "172800", "Pending"
        )

        assert code == 1
        assert list(payload) == ["InvalidInput"]

    def test_delete_and_list(self, run):
        run("add-car", "Toyota", "Corolla", "2020")
        run("add-car", "Honda", "Civic", "2019")

        assert run("delete-car", "0") == (0, True)
        code, cars = run("list-cars")
        assert [car["id"] for car in cars] == [1]

    def test_set_availability(self, run):
        run("add-car", "Toyota", "Corolla", "2020")

        code, car = run("set-car-availability", "0", "false")

        assert code == 0
        assert car["available"] is False

    def test_negative_epoch_is_invalid_input(self, run):
        code, payload = run("add-rental-request", "0", "7", "-5", "10", "Pending")

        assert code == 1
        assert list(payload) == ["InvalidInput"]
        assert run("list-rental-requests") == (0, [])

    def test_config_shows_defaults(self, run):
        code, settings = run("config")

        assert code == 0
        assert settings == {"database_path": None, "log_level": "INFO"}

    def test_config_saves_settings(self, run, app_home, tmp_path):
        target = tmp_path / "elsewhere.db"

        code, settings = run(
            "config", "--database-path", str(target), "--log-level", "debug"
        )

        assert code == 0
        assert settings == {"database_path": str(target), "log_level": "DEBUG"}
        assert load_store_settings(app_home / "config.json") == StoreSettings(
            database_path=target, log_level="DEBUG"
        )
        assert run("config") == (0, settings)
