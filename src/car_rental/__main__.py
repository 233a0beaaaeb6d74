"""Module entry point for python -m car_rental."""

from __future__ import annotations

from car_rental.app import main


if __name__ == "__main__":
    raise SystemExit(main())
