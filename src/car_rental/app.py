"""Command-line entry point."""

from __future__ import annotations

import argparse
import dataclasses
import json
from pathlib import Path
from typing import Any, Callable, Optional, Sequence

from car_rental.app_services import AppServices, build_services
from car_rental.config import AppConfig
from car_rental.logging_config import configure_logging, get_logger
from car_rental.paths import get_config_path
from car_rental.services.errors import ServiceError
from car_rental.storage import Storage
from car_rental.utils.config_store import (
    StoreSettings,
    load_store_settings,
    save_store_settings,
)
from car_rental.utils.dates import to_epoch_seconds


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ("true", "yes", "1"):
        return True
    if lowered in ("false", "no", "0"):
        return False
    raise argparse.ArgumentTypeError(f"expected true or false, got {value!r}")


def _add_rental_fields(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("car_id", type=int)
    parser.add_argument("customer_id", type=int)
    parser.add_argument("start_date", help="Epoch seconds or a date string.")
    parser.add_argument("end_date", help="Epoch seconds or a date string.")
    parser.add_argument("status", help="Pending, Active, Completed or Canceled.")


def build_parser() -> argparse.ArgumentParser:
    config = AppConfig()
    parser = argparse.ArgumentParser(
        prog="car-rental",
        description=f"{config.app_name} {config.version} record store",
    )
    parser.add_argument(
        "--db",
        type=Path,
        default=None,
        help="SQLite database file (defaults to the configured path).",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    add_car = commands.add_parser("add-car", help="Register a car.")
    add_car.add_argument("make")
    add_car.add_argument("model")
    add_car.add_argument("year", type=int)

    update_car = commands.add_parser("update-car", help="Replace a car's details.")
    update_car.add_argument("id", type=int)
    update_car.add_argument("make")
    update_car.add_argument("model")
    update_car.add_argument("year", type=int)

    availability = commands.add_parser(
        "set-car-availability", help="Mark a car available or not."
    )
    availability.add_argument("id", type=int)
    availability.add_argument("available", type=_parse_bool)

    for name, help_text in (
        ("delete-car", "Remove a car."),
        ("get-car", "Show one car."),
        ("delete-rental-request", "Remove a rental request."),
        ("get-rental-request", "Show one rental request."),
    ):
        command = commands.add_parser(name, help=help_text)
        command.add_argument("id", type=int)

    commands.add_parser("list-cars", help="List all cars.")
    commands.add_parser("list-rental-requests", help="List all rental requests.")

    add_rental = commands.add_parser(
        "add-rental-request", help="Register a rental request."
    )
    _add_rental_fields(add_rental)

    update_rental = commands.add_parser(
        "update-rental-request", help="Replace a rental request's details."
    )
    update_rental.add_argument("id", type=int)
    _add_rental_fields(update_rental)

    for_car = commands.add_parser(
        "list-rental-requests-for-car", help="List rental requests for a car."
    )
    for_car.add_argument("car_id", type=int)

    for_customer = commands.add_parser(
        "list-rental-requests-for-customer",
        help="List rental requests for a customer.",
    )
    for_customer.add_argument("customer_id", type=int)

    settings = commands.add_parser(
        "config", help="Show or change the stored settings."
    )
    settings.add_argument("--database-path", type=Path, default=None)
    settings.add_argument("--log-level", default=None)
    return parser


def _rental_args(args: argparse.Namespace) -> tuple[Any, ...]:
    return (
        args.car_id,
        args.customer_id,
        to_epoch_seconds(args.start_date),
        to_epoch_seconds(args.end_date),
        args.status,
    )


def _dispatch(services: AppServices, args: argparse.Namespace) -> Any:
    cars = services.car_service
    rentals = services.rental_request_service
    handlers: dict[str, Callable[[], Any]] = {
        "add-car": lambda: cars.add_car(args.make, args.model, args.year),
        "update-car": lambda: cars.update_car(
            args.id, args.make, args.model, args.year
        ),
        "set-car-availability": lambda: cars.set_car_availability(
            args.id, args.available
        ),
        "delete-car": lambda: cars.delete_car(args.id),
        "get-car": lambda: cars.get_car(args.id),
        "list-cars": cars.list_cars,
        "add-rental-request": lambda: rentals.add_rental_request(
            *_rental_args(args)
        ),
        "update-rental-request": lambda: rentals.update_rental_request(
            args.id, *_rental_args(args)
        ),
        "delete-rental-request": lambda: rentals.delete_rental_request(args.id),
        "get-rental-request": lambda: rentals.get_rental_request(args.id),
        "list-rental-requests": rentals.list_rental_requests,
        "list-rental-requests-for-car": lambda: rentals.list_rental_requests_for_car(
            args.car_id
        ),
        "list-rental-requests-for-customer": (
            lambda: rentals.list_rental_requests_for_customer(args.customer_id)
        ),
    }
    return handlers[args.command]()


def _update_settings(
    current: StoreSettings, args: argparse.Namespace
) -> StoreSettings:
    if args.database_path is None and args.log_level is None:
        return current
    updated = StoreSettings(
        database_path=args.database_path or current.database_path,
        log_level=(args.log_level or current.log_level).upper(),
    )
    save_store_settings(get_config_path(), updated)
    return updated


def _to_jsonable(result: Any) -> Any:
    if isinstance(result, list):
        return [_to_jsonable(item) for item in result]
    if dataclasses.is_dataclass(result):
        return dataclasses.asdict(result)
    return result


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one record store operation and print its result as JSON."""
    args = build_parser().parse_args(argv)
    settings = load_store_settings(get_config_path())
    configure_logging(settings.log_level)
    logger = get_logger(__name__)

    if args.command == "config":
        settings = _update_settings(settings, args)
        logger.info("Settings in %s", get_config_path())
        print(json.dumps(_to_jsonable(settings), default=str, indent=2))
        return 0

    database_path = args.db or settings.database_path
    with Storage.open(database_path) as storage:
        services = build_services(storage)
        try:
            result = _dispatch(services, args)
        except ServiceError as exc:
            logger.info("%s failed: %s", args.command, exc.msg)
            print(json.dumps(exc.to_dict()))
            return 1
    print(json.dumps(_to_jsonable(result), indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
