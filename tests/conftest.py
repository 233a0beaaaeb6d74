"""Pytest configuration and shared fixtures."""

import logging
import sys

import pytest

from car_rental.app_services import AppServices, build_services
from car_rental.storage import Storage


@pytest.fixture
def storage():
    """Fresh in-memory storage context."""
    store = Storage.in_memory()
    yield store
    store.close()


@pytest.fixture
def services(storage) -> AppServices:
    return build_services(storage)


@pytest.fixture
def car_service(services):
    return services.car_service


@pytest.fixture
def rental_service(services):
    return services.rental_request_service


@pytest.fixture
def app_home(tmp_path, monkeypatch):
    """Point the per-user data directory at a temporary folder."""
    monkeypatch.setenv("CAR_RENTAL_HOME", str(tmp_path / "home"))
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    root_logger = logging.getLogger()
    monkeypatch.setattr(root_logger, "handlers", list(root_logger.handlers))
    monkeypatch.setattr(root_logger, "level", root_logger.level)
    return tmp_path / "home"
