"""
Tests for home address storage against a temporary sqlite database.
"""
from __future__ import annotations

import sqlite3

import pytest

from home_address.data import address_repo
from home_address.data.db import get_connection


class TestStreetLines:
    @pytest.mark.parametrize(
        "street,expected",
        [
            ("1 Main St\nApt 4", ("1 Main St", "Apt 4")),
            ("1 Main St", ("1 Main St", "")),
            ("", ("", "")),
            (None, ("", "")),
            ("a\nb\nc", ("a", "b")),
        ],
    )
    def test_split(self, street, expected):
        assert address_repo.split_street(street) == expected

    def test_join_drops_empty_second_line(self):
        assert address_repo.join_street(" 1 Main St ", "  ") == "1 Main St"
        assert address_repo.join_street("1 Main St", None) == "1 Main St"

    def test_join_two_lines(self):
        assert address_repo.join_street("1 Main St", " Apt 4 ") == "1 Main St\nApt 4"


class TestSaveAndLoad:
    def test_schema_is_created(self, temp_db):
        with get_connection() as conn:
            cols = {row[1] for row in conn.execute("PRAGMA table_info(home_address)").fetchall()}
        assert temp_db.exists()
        assert {"user_id", "street", "city", "state", "zip", "country", "updated_at"} <= cols

    def test_missing_user_returns_none(self, temp_db):
        assert address_repo.get_address("nobody") is None
        assert address_repo.get_address("  ") is None

    def test_insert_then_read(self, temp_db):
        address_repo.save_address(
            "u1",
            {
                "address_line1": " 1 Main St ",
                "address_line2": "Apt 4",
                "city": " Springfield ",
                "state": "CA ",
                "postal_code": " 94107",
                "country": "US",
            },
        )

        stored = address_repo.get_address("u1")
        assert stored is not None
        assert stored["street"] == "1 Main St\nApt 4"
        assert stored["city"] == "Springfield"
        assert stored["state"] == "CA"
        assert stored["zip"] == "94107"
        assert stored["country"] == "US"
        assert stored["updated_at"]

    def test_second_save_updates_same_row(self, temp_db):
        address_repo.save_address("u1", {"address_line1": "1 Main St", "city": "A", "country": "US"})
        address_repo.save_address("u1", {"address_line1": "2 Rue", "city": "Paris", "country": "FR"})

        with get_connection() as conn:
            count = conn.execute("SELECT COUNT(*) FROM home_address").fetchone()[0]
        assert count == 1

        stored = address_repo.get_address("u1")
        assert stored["street"] == "2 Rue"
        assert stored["city"] == "Paris"
        assert stored["country"] == "FR"
        assert stored["state"] == ""

    def test_users_are_separate(self, temp_db):
        address_repo.save_address("u1", {"city": "A"})
        address_repo.save_address("u2", {"city": "B"})
        assert address_repo.get_address("u1")["city"] == "A"
        assert address_repo.get_address("u2")["city"] == "B"

    def test_user_id_required(self, temp_db):
        with pytest.raises(ValueError):
            address_repo.save_address("  ", {"city": "A"})


def test_old_database_gets_country_column(temp_db):
    temp_db.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(temp_db)
    conn.execute(
        "CREATE TABLE home_address (user_id TEXT PRIMARY KEY, street TEXT NOT NULL DEFAULT '', "
        "city TEXT NOT NULL DEFAULT '', state TEXT NOT NULL DEFAULT '', zip TEXT NOT NULL DEFAULT '', "
        "updated_at TEXT NOT NULL)"
    )
    conn.commit()
    conn.close()

    address_repo.save_address("u1", {"city": "A", "country": "DE"})
    assert address_repo.get_address("u1")["country"] == "DE"
