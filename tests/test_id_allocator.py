"""Tests for identifier sequences."""

import pytest

from car_rental.db.connection import get_connection
from car_rental.db.schema import init_db
from car_rental.repositories import IdAllocator


@pytest.fixture
def connection():
    conn = get_connection(":memory:")
    init_db(conn)
    yield conn
    conn.close()


class TestIdAllocator:
    """Tests for IdAllocator."""

    def test_first_id_is_zero(self, connection):
        allocator = IdAllocator(connection, "cars")

        assert allocator.next() == 0

    def test_ids_strictly_increase(self, connection):
        allocator = IdAllocator(connection, "cars")

        ids = [allocator.next() for _ in range(5)]

        assert ids == [0, 1, 2, 3, 4]

    def test_sequences_are_independent(self, connection):
        cars = IdAllocator(connection, "cars")
        rentals = IdAllocator(connection, "rental_requests")

        assert cars.next() == 0
        assert cars.next() == 1
        assert rentals.next() == 0

    def test_peek_does_not_advance(self, connection):
        allocator = IdAllocator(connection, "cars")
        allocator.next()

        assert allocator.peek() == 1
        assert allocator.peek() == 1
        assert allocator.next() == 1

    def test_custom_first_id(self, connection):
        allocator = IdAllocator(connection, "cars", first_id=1)

        assert allocator.next() == 1

    def test_reinitializing_keeps_existing_counter(self, connection):
        IdAllocator(connection, "cars").next()

        again = IdAllocator(connection, "cars")

        assert again.next() == 1

    def test_advance_is_committed(self, connection):
        allocator = IdAllocator(connection, "cars")
        allocator.next()
        connection.rollback()

        assert allocator.peek() == 1
