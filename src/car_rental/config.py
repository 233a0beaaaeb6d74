"""Application configuration."""

from __future__ import annotations

from dataclasses import dataclass

from car_rental.version import __app_name__, __version__

APP_NAME = __app_name__
APP_DATA_DIRNAME = "CarRental"
APP_HOME_ENV = "CAR_RENTAL_HOME"
DB_FILENAME = "car_rental.db"
LOGS_DIRNAME = "logs"
LOG_FILENAME = "app.log"
LOG_MAX_BYTES = 1_000_000
LOG_BACKUP_COUNT = 3
DEFAULT_LOG_LEVEL = "INFO"
CONFIG_FILENAME = "config.json"

# First identifier handed out by a fresh sequence.
FIRST_ID = 0

CAR_SEQUENCE = "cars"
RENTAL_REQUEST_SEQUENCE = "rental_requests"


@dataclass(frozen=True)
class AppConfig:
    """Static configuration values for CarRental."""

    app_name: str = APP_NAME
    version: str = __version__
