"""Seed demo cars and rental requests into the CarRental database."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from dateutil.relativedelta import relativedelta

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = REPO_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from car_rental.app_services import build_services  # noqa: E402
from car_rental.domain.models import RentalStatus  # noqa: E402
from car_rental.logging_config import configure_logging, get_logger  # noqa: E402
from car_rental.paths import get_db_path  # noqa: E402
from car_rental.storage import Storage  # noqa: E402
from car_rental.utils.dates import to_epoch_seconds  # noqa: E402

DEFAULT_SEED = 42
DEFAULT_CUSTOMERS = 8
DEFAULT_REQUESTS = 20


@dataclass(frozen=True)
class CarSeed:
    make: str
    model: str
    year: int


CAR_SEEDS = [
    CarSeed("Toyota", "Corolla", 2020),
    CarSeed("Honda", "Civic", 2019),
    CarSeed("Volkswagen", "Golf", 2021),
    CarSeed("Ford", "Focus", 2018),
    CarSeed("Renault", "Clio", 2022),
    CarSeed("Hyundai", "i30", 2023),
]


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed demo data for CarRental")
    parser.add_argument(
        "--db",
        type=Path,
        default=None,
        help="Database file to seed (defaults to the configured path).",
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Remove the current database before seeding.",
    )
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED)
    parser.add_argument("--customers", type=int, default=DEFAULT_CUSTOMERS)
    parser.add_argument("--requests", type=int, default=DEFAULT_REQUESTS)
    return parser.parse_args()


def main() -> None:
    args = _parse_args()
    configure_logging()
    logger = get_logger("seed_demo_data")
    db_path = args.db or get_db_path()
    if args.reset and db_path.exists():
        db_path.unlink()
        logger.info("Removed %s", db_path)

    rng = random.Random(args.seed)
    today = datetime.now(timezone.utc).replace(hour=9, minute=0, second=0, microsecond=0)
    with Storage.open(db_path) as storage:
        services = build_services(storage)
        cars = [
            services.car_service.add_car(seed.make, seed.model, seed.year)
            for seed in CAR_SEEDS
        ]
        statuses = list(RentalStatus)
        for _ in range(args.requests):
            car = rng.choice(cars)
            start = today + relativedelta(days=rng.randint(-30, 30))
            end = start + relativedelta(days=rng.randint(1, 14))
            services.rental_request_service.add_rental_request(
                car_id=car.id,
                customer_id=rng.randint(1, args.customers),
                start_date=to_epoch_seconds(start),
                end_date=to_epoch_seconds(end),
                status=rng.choice(statuses),
            )
        logger.info(
            "Seeded %s cars and %s rental requests into %s",
            len(cars),
            args.requests,
            db_path,
        )


if __name__ == "__main__":
    main()
